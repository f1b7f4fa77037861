from __future__ import annotations

import html
from typing import Sequence

from ..ranking import TaggedWord
from .base import CloudRenderer, RenderStyle


def start_page(style: RenderStyle) -> str:
    """Tags for the top of the page, with one CSS rule per size class."""
    rules = "".join(
        f"  .size-{k} {{ font-size: {style.font_size(k)}px; }}" for k in range(style.num_groups)
    )
    return f"<html><head><style>{rules}</style></head><body><p>\n"


def end_page() -> str:
    return "</p></body></html>"


def format_word(word: str, size_group: int) -> str:
    return f'  <span class="size-{size_group}">{html.escape(word)}</span>\n'


class HtmlPageRenderer(CloudRenderer):
    """Standalone HTML page; CSS classes ``size-<group>`` carry the font size.

    Size groups past ``num_groups - 1`` are written as-is and get no rule.
    """

    name = "html"

    def render(self, cloud: Sequence[TaggedWord], style: RenderStyle) -> str:
        body = " ".join(format_word(t.word, t.size_group) for t in cloud)
        return "\n".join([start_page(style), body, end_page()])


__all__ = ["HtmlPageRenderer", "start_page", "end_page", "format_word"]
