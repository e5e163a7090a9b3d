"""
Word verification module for validating Word Scramble submissions.

Validates, in order, stopping at the first failure:
1. Length (empty input is a no-op, 1-2 letters are too short)
2. Not the root word itself
3. Not already used this game
4. Letters drawn from the root word (each root letter usable once)
5. Real word according to the dictionary oracle
"""

from typing import List, Sequence

from .models import Decision
from .data import DictionaryOracle, DEFAULT_LANGUAGE


MIN_WORD_LENGTH = 3


def normalize(candidate: str) -> str:
    """Lowercase and trim surrounding whitespace."""
    return candidate.strip().lower()


def is_original(word: str, used_words: Sequence[str]) -> bool:
    """True if `word` hasn't been accepted yet this game."""
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    Check that every letter of `word` can be taken from `root_word`.

    Each occurrence in the root can be consumed once, so "bob" fits in
    "bobcat" but not in "ebony". Comparison is case-insensitive.
    """
    remaining: List[str] = list(root_word.lower())

    for letter in word.lower():
        try:
            remaining.remove(letter)  # first occurrence only
        except ValueError:
            return False

    return True


def is_real(word: str, oracle: DictionaryOracle, language: str = DEFAULT_LANGUAGE) -> bool:
    """Ask the oracle whether `word` is a real word in `language`."""
    return bool(oracle.is_real_word(word, language))


def validate(
    candidate: str,
    root_word: str,
    used_words: Sequence[str],
    oracle: DictionaryOracle,
    language: str = DEFAULT_LANGUAGE,
) -> Decision:
    """
    Main validation function: decides whether a candidate may be accepted.

    The checks run in a fixed order and the first failure wins, so the
    reason reported to the player is stable. The oracle is only consulted
    once every cheaper check has passed.

    Returns a Decision that is:
    - empty: nothing left after normalization (not an error)
    - rejected: with a Rejection carrying code, title and message
    - accepted: the normalized word may be recorded
    """
    word = normalize(candidate)
    root = normalize(root_word)

    if not word:
        return Decision.empty()

    if len(word) < MIN_WORD_LENGTH:
        return Decision.rejected("TOO_SHORT", word)

    if word == root:
        return Decision.rejected("SAME_AS_ROOT", word)

    if not is_original(word, used_words):
        return Decision.rejected("ALREADY_USED", word)

    if not is_possible(word, root):
        return Decision.rejected("IMPOSSIBLE_LETTERS", word)

    if not is_real(word, oracle, language):
        return Decision.rejected("NOT_A_WORD", word)

    return Decision.accepted(word)
