from __future__ import annotations

import json
from typing import Sequence

from ..ranking import TaggedWord
from .base import CloudRenderer, RenderStyle


class JsonRenderer(CloudRenderer):
    name = "json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def render(self, cloud: Sequence[TaggedWord], style: RenderStyle) -> str:
        payload = {
            "num_groups": style.num_groups,
            "min_font": style.min_font,
            "increment": style.increment,
            "words": [
                {
                    "word": t.word,
                    "size_group": t.size_group,
                    "font_size": style.font_size(t.size_group),
                }
                for t in cloud
            ],
        }
        return json.dumps(payload, indent=self.indent)


__all__ = ["JsonRenderer"]
