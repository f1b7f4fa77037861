from __future__ import annotations

from typing import Iterable, Protocol

from .errors import InvalidArgumentError
from .extractor import count_words
from .preprocess import tokenize
from .ranking import rank_words
from .sources import TextSource, default_ignore_path, read_path, read_source


class TaggablePredicate(Protocol):
    def __call__(self, token: str) -> bool:
        ...


def build_stopwords(source: TextSource | Iterable[str]) -> frozenset[str]:
    """Build a stop-word set from an ignore-list source.

    ``source`` is either text (a string or a readable stream) that is
    tokenized like any document, or an iterable of entries, each of which is
    tokenized the same way. Entries are not filtered through the set
    itself; only the empty token is dropped.
    """
    if isinstance(source, str) or hasattr(source, "read"):
        tokens = tokenize(read_source(source))  # type: ignore[arg-type]
    else:
        tokens = [tok for entry in source for tok in tokenize(entry)]
    return frozenset(tok for tok in tokens if tok)


def load_default_stopwords() -> frozenset[str]:
    """Load the bundled English ignore list from ``resources/common.txt``."""
    return build_stopwords(read_path(default_ignore_path()))


def derive_stopwords(text: TextSource, top_n: int) -> frozenset[str]:
    """Use the ``top_n`` most frequent words of ``text`` as stop words.

    Ranking follows the cloud's own order: count descending, then word
    ascending, so the result is deterministic.
    """
    if isinstance(top_n, bool) or not isinstance(top_n, int) or top_n < 0:
        raise InvalidArgumentError(f"top_n must be a non-negative integer, got {top_n!r}")
    table = count_words(tokenize(read_source(text)), bool)
    return frozenset(word for word, _ in rank_words(table)[:top_n])


class StopWordFilter:
    """Taggability predicate backed by an immutable stop-word set."""

    def __init__(self, stopwords: Iterable[str] = ()):
        self.stopwords = frozenset(stopwords)

    def __call__(self, token: str) -> bool:
        return len(token) > 0 and token not in self.stopwords

    def is_taggable(self, token: str) -> bool:
        return self(token)

    def __len__(self) -> int:
        return len(self.stopwords)

    def __repr__(self) -> str:
        return f"StopWordFilter({len(self.stopwords)} words)"


__all__ = [
    "TaggablePredicate",
    "StopWordFilter",
    "build_stopwords",
    "load_default_stopwords",
    "derive_stopwords",
]
