from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence

from ..errors import InvalidArgumentError
from ..ranking import TaggedWord


@dataclass(frozen=True)
class RenderStyle:
    """Numeric parameters an adapter needs to turn size groups into font sizes."""

    num_groups: int
    min_font: int
    increment: int

    def __post_init__(self) -> None:
        for name in ("num_groups", "min_font", "increment"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise InvalidArgumentError(f"{name} must be a non-negative integer, got {value!r}")

    def font_size(self, size_group: int) -> int:
        return self.min_font + self.increment * size_group


class CloudRenderer(ABC):
    name: str

    @abstractmethod
    def render(self, cloud: Sequence[TaggedWord], style: RenderStyle) -> str:
        ...


__all__ = ["RenderStyle", "CloudRenderer"]
