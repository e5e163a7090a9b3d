"""Game environment for Word Scramble."""

from .models import (
    Message,
    Role,
    OracleConfig,
    GameConfig,
    TurnResult,
    GameResult,
)
from .scoring import score, WORD_BONUS
from .game import Game, WordListError, load_start_words, DEFAULT_ROOT_WORD
from .llm_oracle import LLMOracle
from .wordscramble import WordScramble, build_oracle

__all__ = [
    "Message",
    "Role",
    "OracleConfig",
    "GameConfig",
    "TurnResult",
    "GameResult",
    "score",
    "WORD_BONUS",
    "Game",
    "WordListError",
    "load_start_words",
    "DEFAULT_ROOT_WORD",
    "LLMOracle",
    "WordScramble",
    "build_oracle",
]
