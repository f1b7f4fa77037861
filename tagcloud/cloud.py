from __future__ import annotations

from collections import Counter
from typing import Iterable

from .errors import InvalidArgumentError
from .extractor import FrequencyCounter
from .preprocess import TextPreprocessor
from .ranking import TaggedWord, check_cloud_args, top_words
from .render import DEFAULT_STYLE, CloudRenderer, HtmlPageRenderer, RenderStyle
from .sources import TextSource, read_source
from .stopwords import StopWordFilter, TaggablePredicate, build_stopwords


class WordCloud:
    """A visual summary of how often words occur in a document.

    Common words (``the``, ``a``, ``of``...) say nothing about the topic, so
    they are excluded through a stop-word list given at construction time,
    or through any ``is_taggable`` predicate when a different selection
    policy is wanted.

    Each :meth:`make_cloud` call replaces the stored cloud; nothing
    accumulates between calls.
    """

    def __init__(
        self,
        ignore_words: TextSource | Iterable[str] | None = None,
        *,
        is_taggable: TaggablePredicate | None = None,
        preprocessor: TextPreprocessor | None = None,
    ):
        if ignore_words is not None and is_taggable is not None:
            raise InvalidArgumentError("pass either ignore_words or is_taggable, not both")
        if is_taggable is None:
            stopwords = build_stopwords(ignore_words) if ignore_words is not None else frozenset()
            is_taggable = StopWordFilter(stopwords)
        self.is_taggable = is_taggable
        self.preprocessor = preprocessor or TextPreprocessor()
        self.counter = FrequencyCounter(is_taggable)
        self._cloud: list[TaggedWord] = []
        self._counts: Counter[str] = Counter()

    @property
    def cloud(self) -> list[TaggedWord]:
        return list(self._cloud)

    @property
    def counts(self) -> Counter[str]:
        """Taggable word counts behind the current cloud."""
        return Counter(self._counts)

    def make_cloud(self, text: TextSource, num_words_to_keep: int, group_size: int) -> list[TaggedWord]:
        """Build a cloud of the ``num_words_to_keep`` most frequent taggable words.

        Counts are bucketed into size groups by integer division by
        ``group_size``. On error the previously stored cloud is left as it was.
        """
        check_cloud_args(num_words_to_keep, group_size)
        tokens = self.preprocessor.process(read_source(text))
        counts = self.counter.count(tokens)
        self._cloud = top_words(counts, num_words_to_keep, group_size)
        self._counts = counts
        return self.cloud

    def render(self, renderer: CloudRenderer | None = None, style: RenderStyle | None = None) -> str:
        """Hand the current cloud to a render adapter (an HTML page by default)."""
        renderer = renderer or HtmlPageRenderer()
        return renderer.render(self._cloud, style or DEFAULT_STYLE)

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._cloud)


__all__ = ["WordCloud"]
