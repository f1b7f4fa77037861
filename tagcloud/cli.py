from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .cloud import WordCloud
from .config import AppConfig
from .errors import InvalidArgumentError, ResourceUnavailableError, TagCloudError
from .log import configure_logging
from .render import get_renderer
from .sources import read_path, read_source
from .stopwords import build_stopwords, derive_stopwords, load_default_stopwords

logger = logging.getLogger(__name__)


def _read_input_text(text_arg: str, *, from_stdin: bool = False, encoding: str = "utf-8") -> str:
    """Resolve input text.

    Priority:
      1) --stdin: read full stdin
      2) If text_arg is a path to an existing file: read file
      3) Otherwise: treat text_arg as raw text
    """
    if from_stdin:
        return read_source(sys.stdin)

    p = Path(text_arg)
    if p.exists() and p.is_file():
        return read_path(p, encoding=encoding)

    logger.debug("%r is not a file, using it as the text itself", text_arg[:40])
    return text_arg


def _apply_overrides(cfg: AppConfig, args: argparse.Namespace) -> AppConfig:
    overrides = [
        (cfg.cloud, "num_words_to_keep", args.num_words),
        (cfg.cloud, "group_size", args.group_size),
        (cfg.render, "format", args.format),
        (cfg.render, "num_groups", args.num_groups),
        (cfg.render, "min_font", args.min_font),
        (cfg.render, "increment", args.increment),
        (cfg.stopwords, "ignore_file", args.ignore_file),
        (cfg.stopwords, "derive_top_n", args.derive_stopwords),
    ]
    for section, name, value in overrides:
        if value is not None:
            setattr(section, name, value)
    if args.log_level is not None:
        cfg.log_level = args.log_level
    return cfg


def _stopwords_for(cfg: AppConfig, text: str) -> frozenset[str]:
    if cfg.stopwords.ignore_file:
        stopwords = build_stopwords(read_path(cfg.stopwords.ignore_file, encoding=cfg.stopwords.encoding))
    else:
        stopwords = load_default_stopwords()
    logger.info("loaded %d stop words", len(stopwords))
    if cfg.stopwords.derive_top_n:
        derived = derive_stopwords(text, cfg.stopwords.derive_top_n)
        logger.info("derived %d extra stop words from the input", len(derived))
        stopwords |= derived
    return stopwords


def _write_output(output: str, path: str | None) -> None:
    if path is None:
        print(output)
        return
    try:
        Path(path).write_text(output + "\n", encoding="utf-8")
    except OSError as exc:
        raise ResourceUnavailableError(f"could not write {path}: {exc}") from exc
    logger.info("wrote %s", path)


def run(cfg: AppConfig, text: str, output_path: str | None = None) -> str:
    cloud = WordCloud(_stopwords_for(cfg, text))
    words = cloud.make_cloud(text, cfg.cloud.num_words_to_keep, cfg.cloud.group_size)
    logger.info(
        "kept %d of %d distinct words (group size %d)",
        len(words),
        len(cloud.counts),
        cfg.cloud.group_size,
    )
    output = cloud.render(get_renderer(cfg.render.format), cfg.render.style())
    _write_output(output, output_path)
    return output


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Word frequency tag cloud generator")

    parser.add_argument("num_words", type=int, nargs="?", default=None, help="Number of words to keep")
    parser.add_argument("text", nargs="?", default=None, help="Input text OR a path to a text file")

    parser.add_argument("--config", "-c", help="Path to YAML/JSON config", default=None)
    parser.add_argument("--ignore-file", default=None, help="Stop-word list (default: bundled common.txt)")
    parser.add_argument(
        "--derive-stopwords", type=int, default=None, metavar="N",
        help="Also ignore the N most frequent words of the input",
    )
    parser.add_argument("--group-size", type=int, default=None, help="Occurrences per size group")
    parser.add_argument("--num-groups", type=int, default=None, help="Number of CSS size classes")
    parser.add_argument("--min-font", type=int, default=None, help="Font size of group 0, in px")
    parser.add_argument("--increment", type=int, default=None, help="Font size step between groups, in px")
    parser.add_argument("--format", choices=["html", "json"], default=None, help="Output format")
    parser.add_argument("--output", "-o", default=None, help="Write output to this file instead of stdout")
    parser.add_argument("--log-level", default=None, help="Logging level (default: LOG_LEVEL or WARNING)")

    parser.add_argument("--stdin", action="store_true", help="Read input text from stdin instead of argument")
    parser.add_argument("--encoding", default="utf-8", help="File encoding when text is a path (default: utf-8)")

    args = parser.parse_args(argv)
    if args.text is None and not args.stdin:
        parser.error("a text argument or --stdin is required")

    try:
        cfg = AppConfig.load(args.config) if args.config else AppConfig()
        cfg = _apply_overrides(cfg, args)
        configure_logging(level=cfg.log_level)
        text = _read_input_text(args.text or "", from_stdin=args.stdin, encoding=args.encoding)
        run(cfg, text, args.output)
    except InvalidArgumentError as exc:
        logger.debug("invalid argument", exc_info=True)
        print(f"tagcloud: error: {exc}", file=sys.stderr)
        return 2
    except TagCloudError as exc:
        logger.debug("tag cloud failed", exc_info=True)
        print(f"tagcloud: error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
