from __future__ import annotations

import string

# ASCII digits and ASCII punctuation, treated as one class at both ends of a word
STRIP_CHARS = string.digits + string.punctuation


def normalize(word: str) -> str:
    """Strip leading and trailing punctuation/digit runs and lowercase the rest.

    A word made only of punctuation and digits normalizes to ``""``.
    """
    return word.strip(STRIP_CHARS).lower()


def tokenize(text: str) -> list[str]:
    """Split ``text`` on runs of whitespace and normalize every word.

    Empty tokens are kept; deciding what is taggable happens downstream.
    """
    return [normalize(word) for word in text.split()]


class TextPreprocessor:
    """Whitespace tokenizer with punctuation stripping and lowercasing.

    Stateless; one instance can be shared by any number of clouds.
    """

    def process(self, text: str) -> list[str]:
        """Process raw text and return its normalized tokens."""
        return tokenize(text)


__all__ = ["normalize", "tokenize", "TextPreprocessor"]
