from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class TaggedWord:
    word: str
    size_group: int


def _check_int(name: str, value: int, minimum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{name} must be an integer, got {type(value).__name__}")
    if value < minimum:
        raise InvalidArgumentError(f"{name} must be >= {minimum}, got {value}")


def check_cloud_args(num_words_to_keep: int, group_size: int) -> None:
    _check_int("num_words_to_keep", num_words_to_keep, 0)
    _check_int("group_size", group_size, 1)


def rank_words(table: Mapping[str, int]) -> list[tuple[str, int]]:
    """Order ``(word, count)`` pairs by count descending, then word ascending."""
    return sorted(table.items(), key=lambda item: (-item[1], item[0]))


def top_words(table: Mapping[str, int], num_words_to_keep: int, group_size: int) -> list[TaggedWord]:
    """Keep the ``num_words_to_keep`` most frequent words and quantize their counts.

    Each retained count becomes ``count // group_size``. The result is sorted
    alphabetically for display. ``num_words_to_keep == 0`` yields an empty
    cloud; a negative value or a ``group_size`` below 1 raises
    :class:`InvalidArgumentError` before any work is done.
    """
    check_cloud_args(num_words_to_keep, group_size)

    kept = rank_words(table)[:num_words_to_keep]
    tagged = [TaggedWord(word=word, size_group=count // group_size) for word, count in kept]
    tagged.sort(key=lambda t: t.word)
    return tagged


__all__ = ["TaggedWord", "check_cloud_args", "rank_words", "top_words"]
