"""Dictionary oracle interface."""

from typing import Protocol, runtime_checkable


DEFAULT_LANGUAGE = "en"


@runtime_checkable
class DictionaryOracle(Protocol):
    """
    Anything that can tell whether a word is real in a given language.

    Implementations receive an already-normalized (lowercase, trimmed) word
    and a language tag such as "en". They must not mutate game state.
    """

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        ...
