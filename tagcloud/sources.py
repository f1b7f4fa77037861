from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from .errors import ResourceUnavailableError

logger = logging.getLogger(__name__)

TextSource = Union[str, IO[str]]

RESOURCES_DIR = Path(__file__).resolve().parent / "resources"
DEFAULT_IGNORE_FILE = "common.txt"


def read_source(source: TextSource) -> str:
    """Return the full contents of ``source``.

    A ``str`` is taken as the text itself; anything with a ``read`` method is
    read to completion. Read failures surface as :class:`ResourceUnavailableError`.
    """
    if isinstance(source, str):
        return source
    try:
        data = source.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailableError(f"could not read input stream: {exc}") from exc
    if not isinstance(data, str):
        raise ResourceUnavailableError(
            f"input stream returned {type(data).__name__}, expected text; open it in text mode"
        )
    return data


def read_path(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a whole text file, mapping I/O and decoding errors."""
    path = Path(path)
    logger.debug("reading %s (encoding=%s)", path, encoding)
    try:
        return path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ResourceUnavailableError(f"could not read {path}: {exc}") from exc


def default_ignore_path() -> Path:
    return RESOURCES_DIR / DEFAULT_IGNORE_FILE


__all__ = [
    "TextSource",
    "DEFAULT_IGNORE_FILE",
    "read_source",
    "read_path",
    "default_ignore_path",
]
