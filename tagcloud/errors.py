from __future__ import annotations


class TagCloudError(Exception):
    """Base class for all tag cloud failures."""


class InvalidArgumentError(TagCloudError, ValueError):
    """Raised for out-of-range or conflicting caller arguments."""


class ResourceUnavailableError(TagCloudError, OSError):
    """Raised when a text or stop-word source cannot be read to completion."""


__all__ = ["TagCloudError", "InvalidArgumentError", "ResourceUnavailableError"]
