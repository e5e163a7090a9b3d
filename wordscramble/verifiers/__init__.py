"""Word verification for Word Scramble."""

from .verify import validate, normalize, is_original, is_possible, is_real, MIN_WORD_LENGTH
from .models import Decision, Rejection, REJECTION_MESSAGES
from .data import DictionaryOracle, WordListOracle, WordfreqOracle, DEFAULT_LANGUAGE, check_word

__all__ = [
    # Main verification
    "validate",
    "normalize",
    "is_original",
    "is_possible",
    "is_real",
    "MIN_WORD_LENGTH",
    # Models
    "Decision",
    "Rejection",
    "REJECTION_MESSAGES",
    # Dictionary
    "DictionaryOracle",
    "WordListOracle",
    "WordfreqOracle",
    "DEFAULT_LANGUAGE",
    "check_word",
]
