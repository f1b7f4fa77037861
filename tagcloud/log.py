"""Logging setup for the tagcloud command line."""

from __future__ import annotations

import logging
import os

from .errors import InvalidArgumentError

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def resolve_level(value: str | int | None) -> int:
    """Turn a level name (``"debug"``) or number into a logging level.

    ``None`` means :data:`logging.WARNING`.
    """
    if value is None:
        return logging.WARNING
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidArgumentError(f"log level must be a name or a number, got {value!r}")
    if isinstance(value, int):
        return value

    candidate = value.strip().upper()
    if candidate.isdigit():
        return int(candidate)
    level = logging.getLevelName(candidate)
    if not isinstance(level, int):
        raise InvalidArgumentError(f"unknown log level: {value!r}")
    return level


def configure_logging(level: str | int | None = None) -> int:
    """Send log records to stderr and return the effective level.

    ``level`` wins over the ``LOG_LEVEL`` environment variable.
    """
    effective_level = resolve_level(level if level is not None else os.environ.get("LOG_LEVEL") or None)
    logging.basicConfig(level=effective_level, format=LOG_FORMAT, force=True)
    return effective_level


__all__ = ["resolve_level", "configure_logging"]
