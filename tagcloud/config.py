from __future__ import annotations

from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any
import json

import yaml

from .errors import InvalidArgumentError
from .render import DEFAULT_STYLE, RenderStyle
from .sources import read_path


def _reject_unknown(data: dict[Any, Any], known: set[str], where: str) -> None:
    unknown = sorted(map(str, set(data) - known))
    if unknown:
        raise InvalidArgumentError(f"unknown key(s) in {where}: {', '.join(unknown)}")


def _section(cls, data: dict[str, Any] | None, name: str):
    if data is None:
        return cls()
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"config section {name!r} must be a mapping, got {type(data).__name__}")
    _reject_unknown(data, {f.name for f in fields(cls)}, f"config section {name!r}")
    return cls(**data)


@dataclass
class CloudConfig:
    num_words_to_keep: int = 30
    # defaults to the number of size groups
    group_size: int = DEFAULT_STYLE.num_groups


@dataclass
class RenderConfig:
    format: str = "html"  # "html" | "json"
    num_groups: int = DEFAULT_STYLE.num_groups
    min_font: int = DEFAULT_STYLE.min_font
    increment: int = DEFAULT_STYLE.increment

    def style(self) -> RenderStyle:
        return RenderStyle(num_groups=self.num_groups, min_font=self.min_font, increment=self.increment)


@dataclass
class StopWordConfig:
    ignore_file: str = ""  # empty: bundled resources/common.txt
    encoding: str = "utf-8"
    derive_top_n: int = 0


@dataclass
class AppConfig:
    cloud: CloudConfig = field(default_factory=CloudConfig)
    render: RenderConfig = field(default_factory=RenderConfig)
    stopwords: StopWordConfig = field(default_factory=StopWordConfig)
    log_level: str | None = None  # None: LOG_LEVEL env var, then WARNING

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "AppConfig":
        _reject_unknown(data, {f.name for f in fields(cls)}, "config")
        return cls(
            cloud=_section(CloudConfig, data.get("cloud"), "cloud"),
            render=_section(RenderConfig, data.get("render"), "render"),
            stopwords=_section(StopWordConfig, data.get("stopwords"), "stopwords"),
            log_level=data.get("log_level"),
        )

    @classmethod
    def load(cls, path: str | Path) -> "AppConfig":
        path = Path(path)
        text = read_path(path)
        try:
            if path.suffix.lower() in {".yaml", ".yml"}:
                data = yaml.safe_load(text)
            else:
                data = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise InvalidArgumentError(f"could not parse config {path}: {exc}") from exc
        if data is not None and not isinstance(data, dict):
            raise InvalidArgumentError(f"config {path} must contain a mapping at the top level")
        return cls.from_mapping(data or {})

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "CloudConfig",
    "RenderConfig",
    "StopWordConfig",
    "AppConfig",
]
