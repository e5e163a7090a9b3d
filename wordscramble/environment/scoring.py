from typing import Sequence


WORD_BONUS = 5  # Points per accepted word, on top of one point per letter


def score(used_words: Sequence[str]) -> int:
    """
    Score a list of accepted words: 5 points per word plus 1 per letter.

    Always computed from scratch; nothing is cached between calls.

    Examples:
        score([]) -> 0
        score(["cat", "dog"]) -> 16
    """
    return WORD_BONUS * len(used_words) + sum(len(word) for word in used_words)
