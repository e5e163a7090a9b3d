import random
from pathlib import Path
from typing import List, Dict, Optional, Sequence, Union
from pydantic import BaseModel, Field

from .scoring import score
from ..verifiers.data import read_word_list, START_WORDS_FILE


# Used when the root-word pool turns out to be empty
DEFAULT_ROOT_WORD = "silkworm"


class WordListError(RuntimeError):
    """A word-list asset is missing or unreadable. Not recoverable."""


def load_start_words(path: Optional[Union[str, Path]] = None) -> List[str]:
    """
    Load the pool of root words (one lowercase word per line).

    Args:
        path: Word list to read; defaults to the bundled start.txt

    Returns:
        List of words with blank lines removed

    Raises:
        WordListError: If the file can't be found or read
    """
    path = Path(path) if path else START_WORDS_FILE
    try:
        return read_word_list(path)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListError(f"Could not load word list {path}: {e}") from e


class Game(BaseModel):
    """
    Holds the state of one Word Scramble game.

    The only ways to change it are start_new_game() and
    record_accepted_word(); validation happens elsewhere.

    Attributes:
        root_word: The word whose letters answers must come from
        used_words: Accepted words, most recent first
    """

    root_word: str = DEFAULT_ROOT_WORD
    used_words: List[str] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        candidate_pool: Sequence[str],
        rng: Optional[random.Random] = None
    ) -> "Game":
        """
        Factory method to create a game with a freshly picked root word.

        Args:
            candidate_pool: Words to pick the root word from
            rng: Optional random source, for reproducible picks

        Returns:
            A new Game instance
        """
        game = cls()
        game.start_new_game(candidate_pool, rng=rng)
        return game

    def start_new_game(
        self,
        candidate_pool: Sequence[str],
        rng: Optional[random.Random] = None
    ) -> str:
        """
        Pick a new root word uniformly at random and clear used words.

        Falls back to DEFAULT_ROOT_WORD when the pool has no usable entries.

        Returns:
            The new root word
        """
        pool = [w.strip().lower() for w in candidate_pool if w and w.strip()]
        if pool:
            self.root_word = (rng or random).choice(pool)
        else:
            self.root_word = DEFAULT_ROOT_WORD

        self.used_words = []
        return self.root_word

    def record_accepted_word(self, word: str) -> None:
        """Put an already accepted word at the front of used_words."""
        self.used_words.insert(0, word)

    @property
    def score(self) -> int:
        """Current score, recomputed from used_words."""
        return score(self.used_words)

    def get_state(self) -> Dict:
        """
        Get the current game state as a dictionary.

        Returns:
            Dictionary containing game state
        """
        return {
            "root_word": self.root_word,
            "used_words": list(self.used_words),
            "word_count": len(self.used_words),
            "score": self.score,
        }
