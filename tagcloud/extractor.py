from __future__ import annotations

from collections import Counter
from typing import Callable, Iterable


def count_words(tokens: Iterable[str], is_taggable: Callable[[str], bool]) -> Counter[str]:
    """Count every token that passes ``is_taggable``.

    Returns a fresh table on each call; nothing is shared between calls.
    """
    counts: Counter[str] = Counter()
    for tok in tokens:
        if is_taggable(tok):
            counts[tok] += 1
    return counts


class FrequencyCounter:
    def __init__(self, is_taggable: Callable[[str], bool]):
        self.is_taggable = is_taggable

    def count(self, tokens: Iterable[str]) -> Counter[str]:
        return count_words(tokens, self.is_taggable)


__all__ = ["count_words", "FrequencyCounter"]
