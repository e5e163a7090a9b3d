# This util contains a word-list backed dictionary oracle.
# Lists are plain newline-separated files of lowercase words.

from pathlib import Path
from typing import Iterable, Set, Union

from .base import DEFAULT_LANGUAGE


START_WORDS_FILE = Path(__file__).parent / "start.txt"


def read_word_list(path: Union[str, Path]) -> list:
    '''
    Read a newline-separated word list, lowercased, skipping blank lines.
    Raises OSError (FileNotFoundError included) if the file can't be read.
    '''
    text = Path(path).read_text(encoding="utf-8")
    return [line.strip().lower() for line in text.splitlines() if line.strip()]


class WordListOracle(object):
    '''
    Answers "is this a real word" by membership in a lexicon.

    A word counts as real when the lexicon knows it. Proper nouns or loan
    words in the list are accepted, and correctly spelled words missing
    from it are rejected.
    '''
    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  language: str = DEFAULT_LANGUAGE) -> "WordListOracle":
        return cls(read_word_list(path), language=language)

    def __len__(self):
        return len(self._words)

    def __contains__(self, word):
        return word in self._words

    def is_real_word(self, word: str, language: str = DEFAULT_LANGUAGE) -> bool:
        if language != self.language:
            return False
        return word.strip().lower() in self._words
