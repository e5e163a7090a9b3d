"""Dictionary data and oracles."""

from .base import DictionaryOracle, DEFAULT_LANGUAGE
from .wordlist import WordListOracle, read_word_list, START_WORDS_FILE
from .frequency import WordfreqOracle, DEFAULT_MIN_ZIPF, check as check_word

__all__ = [
    "DictionaryOracle",
    "DEFAULT_LANGUAGE",
    "WordListOracle",
    "WordfreqOracle",
    "DEFAULT_MIN_ZIPF",
    "read_word_list",
    "check_word",
    "START_WORDS_FILE",
]
