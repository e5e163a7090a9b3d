import json
import random
import threading
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Optional, Any
from pydantic import BaseModel, Field, ConfigDict, PrivateAttr

from .game import Game, WordListError, load_start_words
from .llm_oracle import LLMOracle
from .models import GameConfig, OracleConfig, TurnResult, GameResult
from ..verifiers.verify import validate
from ..verifiers.models import Decision
from ..verifiers.data import DictionaryOracle, WordListOracle, WordfreqOracle


def build_oracle(config: OracleConfig) -> DictionaryOracle:
    """
    Create the dictionary oracle described by an OracleConfig.

    Raises:
        WordListError: If the wordlist oracle has no readable lexicon path
    """
    if config.type == "wordfreq":
        return WordfreqOracle(min_zipf=config.min_zipf)

    if config.type == "llm":
        llm_kwargs = {
            "temperature": config.temperature,
            "max_tokens": config.max_tokens,
        }
        # Extra config keys go straight to LiteLLM
        if hasattr(config, '__pydantic_extra__') and config.__pydantic_extra__:
            llm_kwargs.update(config.__pydantic_extra__)
        return LLMOracle(model=config.model, **llm_kwargs)

    if not config.path:
        raise WordListError("The wordlist oracle needs oracle.path to point at a lexicon file")
    try:
        return WordListOracle.from_file(config.path)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not load dictionary {config.path}: {e}") from e


class WordScramble(BaseModel):
    """
    Top-level orchestrator for a Word Scramble session.

    Owns the game state, the dictionary oracle and the root-word pool, and
    exposes the calls a front end needs: on_submit, on_new_game and the
    current_* accessors.

    Attributes:
        game: The Game instance holding root word and used words
        oracle: Dictionary oracle used for the real-word check
        pool: Candidate root words
        config: Session configuration
        turn_history: Every non-empty submission, oldest first
        games_played: Number of games started so far
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    game: Game = Field(default_factory=Game)
    oracle: DictionaryOracle = Field(default_factory=WordfreqOracle)
    pool: List[str] = Field(default_factory=list)
    config: GameConfig = Field(default_factory=GameConfig)
    turn_history: List[TurnResult] = Field(default_factory=list)
    games_played: int = 0
    started_at: Optional[datetime] = None
    _rng: random.Random = PrivateAttr(default=None)
    _lock: threading.Lock = PrivateAttr(default_factory=threading.Lock)

    def model_post_init(self, __context) -> None:
        """Initialize the random generator after model creation."""
        self._rng = random.Random(self.config.seed)

    @classmethod
    def create(
        cls,
        config: Optional[GameConfig] = None,
        oracle: Optional[DictionaryOracle] = None,
        pool: Optional[List[str]] = None,
        **config_kwargs: Any
    ) -> "WordScramble":
        """
        Factory method to create a session and start its first game.

        Args:
            config: Optional GameConfig instance
            oracle: Oracle to use instead of the one described by config
            pool: Root words to use instead of loading config.start_words
            **config_kwargs: Config parameters, only when config is not given

        Returns:
            WordScramble instance with a game in progress

        Raises:
            ValueError: If both config and config_kwargs are given
            WordListError: If a word-list asset can't be loaded
        """
        if config is not None and config_kwargs:
            raise ValueError(
                "Pass either a GameConfig or config parameters, not both "
                f"(got {', '.join(sorted(config_kwargs))})"
            )
        if config is None:
            config = GameConfig(**config_kwargs)

        if pool is None:
            pool = load_start_words(config.start_words)
        if oracle is None:
            oracle = build_oracle(config.oracle)

        session = cls(oracle=oracle, pool=list(pool), config=config)
        session.started_at = datetime.now()
        session.on_new_game()
        return session

    def on_new_game(self) -> None:
        """Pick a new root word and clear the accepted words."""
        with self._lock:
            self.game.start_new_game(self.pool, rng=self._rng)
            self.games_played += 1

    def on_submit(self, raw_input: str) -> Decision:
        """
        Validate a submission and record it if accepted.

        Validation and recording happen under one lock so two submissions
        can't both pass the already-used check for the same word.

        Returns:
            The Decision; empty input yields an empty decision and leaves
            no trace in turn history
        """
        with self._lock:
            decision = validate(
                raw_input,
                self.game.root_word,
                self.game.used_words,
                self.oracle,
            )

            if decision.is_empty:
                return decision

            if decision.is_accepted:
                self.game.record_accepted_word(decision.word)

            self.turn_history.append(TurnResult(
                turn_number=len(self.turn_history) + 1,
                root_word=self.game.root_word,
                raw_input=raw_input,
                decision=decision,
                score_after=self.game.score,
            ))
            return decision

    def current_score(self) -> int:
        return self.game.score

    def current_root_word(self) -> str:
        return self.game.root_word

    def current_used_words(self) -> List[str]:
        return list(self.game.used_words)

    def get_state(self) -> Dict:
        """
        Get the current session state.

        Returns:
            Dictionary containing session state
        """
        return {
            "games_played": self.games_played,
            "num_turns_recorded": len(self.turn_history),
            "game_state": self.game.get_state(),
        }

    def get_result(self) -> GameResult:
        """
        Get a result snapshot of the session.

        Returns:
            GameResult containing the current game and full turn history
        """
        ended_at = datetime.now()
        duration = (ended_at - self.started_at).total_seconds() if self.started_at else 0.0

        rejection_counts = Counter(
            turn.decision.code for turn in self.turn_history if turn.decision.is_rejected
        )

        return GameResult(
            config=self.config,
            root_word=self.game.root_word,
            used_words=self.current_used_words(),
            score=self.current_score(),
            games_played=self.games_played,
            total_turns=len(self.turn_history),
            accepted_count=sum(1 for turn in self.turn_history if turn.accepted),
            rejection_counts=dict(rejection_counts),
            turn_history=self.turn_history,
            started_at=self.started_at.isoformat() if self.started_at else "",
            ended_at=ended_at.isoformat(),
            duration_seconds=duration,
        )

    def save_result(self, path: str | Path) -> None:
        """
        Save the session result to a JSON file.

        Args:
            path: Path to save the result file
        """
        result = self.get_result()
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
