from ..errors import InvalidArgumentError
from .base import CloudRenderer, RenderStyle
from .html_page import HtmlPageRenderer
from .json_report import JsonRenderer

RENDERER_REGISTRY = {
    HtmlPageRenderer.name: HtmlPageRenderer,
    JsonRenderer.name: JsonRenderer,
}

DEFAULT_STYLE = RenderStyle(num_groups=20, min_font=6, increment=4)


def get_renderer(name: str) -> CloudRenderer:
    renderer_cls = RENDERER_REGISTRY.get(name)
    if renderer_cls is None:
        known = ", ".join(sorted(RENDERER_REGISTRY))
        raise InvalidArgumentError(f"Unknown render format: {name!r} (expected one of {known})")
    return renderer_cls()


__all__ = [
    "CloudRenderer",
    "RenderStyle",
    "HtmlPageRenderer",
    "JsonRenderer",
    "RENDERER_REGISTRY",
    "DEFAULT_STYLE",
    "get_renderer",
]
