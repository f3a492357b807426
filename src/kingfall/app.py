"""Application entry point.

Usage:
    kingfall [--unicode] [--no-shade] [--log-level LEVEL]

Reads moves such as ``e2 e4`` from stdin, one per line.
"""

from __future__ import annotations

import argparse
import logging
import sys

from kingfall import __version__
from kingfall.render import RenderOptions
from kingfall.session import GameSession

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kingfall",
        description="Two-player console board game, played until a king is captured.",
    )
    parser.add_argument(
        "--unicode",
        action="store_true",
        help="Draw pieces as chess glyphs instead of letters",
    )
    parser.add_argument(
        "--no-shade",
        dest="shade",
        action="store_false",
        help="Leave every empty square blank",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=_LOG_LEVELS,
        help="Logging verbosity written to stderr (default: WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch a console game on stdin/stdout."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = RenderOptions(unicode=args.unicode, shade=args.shade)
    session = GameSession(out=sys.stdout, options=options)
    try:
        return session.run(sys.stdin)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
        return 130


if __name__ == "__main__":
    sys.exit(main())
