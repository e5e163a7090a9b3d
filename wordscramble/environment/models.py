"""
Pydantic models for the environment layer.

This module contains the data models (configurations, turn records, results)
used throughout the environment layer. The main logic classes (Game,
WordScramble, LLMOracle) remain in their respective files.
"""

from typing import List, Dict, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from ..verifiers.models import Decision


# Type aliases
Role = Literal["system", "user", "assistant"]
OracleType = Literal["wordfreq", "wordlist", "llm"]


class Message(BaseModel):
    """Represents a single message in the conversation."""
    role: Role
    content: str


class OracleConfig(BaseModel):
    """Configuration for the dictionary oracle."""
    model_config = ConfigDict(extra='allow')

    type: OracleType = "wordfreq"
    min_zipf: float = 1.5  # Frequency threshold for the wordfreq oracle
    path: Optional[str] = None  # Lexicon file, required for the wordlist oracle
    model: str = "gpt-4o-mini"
    temperature: float = 0.0
    max_tokens: Optional[int] = None
    # Additional kwargs are allowed and passed to LiteLLM


class GameConfig(BaseModel):
    """Configuration for a Word Scramble session."""
    seed: Optional[int] = None
    start_words: Optional[str] = None  # Defaults to the bundled start.txt
    oracle: OracleConfig = Field(default_factory=OracleConfig)


class TurnResult(BaseModel):
    """Result of a single submission."""
    turn_number: int
    root_word: str
    raw_input: str
    decision: Decision
    score_after: int = 0

    @property
    def accepted(self) -> bool:
        return self.decision.is_accepted


class GameResult(BaseModel):
    """Snapshot of a session, suitable for saving as JSON."""
    config: GameConfig
    root_word: str = ""
    used_words: List[str] = Field(default_factory=list)
    score: int = 0
    games_played: int = 0
    total_turns: int = 0
    accepted_count: int = 0
    rejection_counts: Dict[str, int] = Field(default_factory=dict)
    turn_history: List[TurnResult] = Field(default_factory=list)
    started_at: str = ""
    ended_at: str = ""
    duration_seconds: float = 0.0
