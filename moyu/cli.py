"""Command-line front door for moyu.

Parses the content and optional feed paths plus a few overrides for the
persisted settings, configures logging, and hands off to the reader runtime.
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from pathlib import Path

from .config import load_settings
from .logs import configure_logging
from .runtime import run_reader
from .ui_theme import available_theme_names, resolve_theme


def _probability(value: str) -> float:
    """argparse type for a probability in ``[0, 1]``."""
    try:
        parsed = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from exc
    if not 0.0 <= parsed <= 1.0:
        raise argparse.ArgumentTypeError("value must be between 0 and 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="moyu",
        description="Read a text file a few lines at a time beneath a decoy log feed.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Text file to read.")
    parser.add_argument(
        "feed",
        nargs="?",
        default=None,
        help="Optional file whose non-empty lines replace the built-in decoy feed.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument(
        "--feed-chance",
        type=_probability,
        default=None,
        help="Probability that the decoy feed scrolls when you move (0-1).",
    )
    parser.add_argument("--log-level", default=None, help="Log level for the diagnostic log file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and launch the reader.

    Without a content path, usage is printed and ``0`` returned.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.path is None:
        parser.print_usage(sys.stdout)
        return 0

    settings = load_settings()
    if args.feed_chance is not None:
        settings = dataclasses.replace(settings, feed_advance_chance=args.feed_chance)
    if args.log_level:
        settings = dataclasses.replace(settings, log_level=args.log_level.strip().upper())

    try:
        configure_logging(settings.log_level)
    except ValueError:
        parser.error(f"unknown log level: {args.log_level}")

    theme = resolve_theme(args.theme or settings.theme, no_color=args.no_color)
    feed_path = Path(args.feed) if args.feed else None
    return run_reader(Path(args.path), feed_path, settings, theme)


if __name__ == "__main__":
    sys.exit(main())
