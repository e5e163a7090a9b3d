# This util contains the default dictionary oracle, backed by wordfreq.
# A word is real when wordfreq has seen it often enough in running text.

from wordfreq import zipf_frequency

from .base import DEFAULT_LANGUAGE


# Zipf scale: 1.0 is about once per 100 million words, 3.0 once per million.
# Low enough to keep rare dictionary words such as "ebon" or "kiln".
DEFAULT_MIN_ZIPF = 1.5


class WordfreqOracle(object):
    '''
    Answers "is this a real word" from wordfreq's word frequencies.

    Works like a spell-checker: anything common in real text passes, so
    frequent proper nouns ("paris") and loan words are accepted, while
    very rare or archaic words below the threshold are rejected.
    '''
    def __init__(self, language: str = DEFAULT_LANGUAGE, min_zipf: float = DEFAULT_MIN_ZIPF):
        self.language = language
        self.min_zipf = min_zipf

    def frequency(self, word: str) -> float:
        return zipf_frequency(word, self.language)

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        word = word.strip().lower()
        # wordfreq tokenizes its input; only single alphabetic tokens count
        if not word.isalpha():
            return False
        return self.frequency(word) >= self.min_zipf


_DEFAULT = WordfreqOracle()


def check(word):
    '''
    Returns True if `word` is a real English word according to wordfreq.
    Returns False otherwise.
    '''
    return _DEFAULT.is_real_word(word)
