from __future__ import annotations

import argparse
import logging

from .config import LOG_LEVEL
from .site import ConversionError, convert_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="md2toc",
        description="Convert a Markdown file to HTML with a table of contents",
    )
    parser.add_argument("-m", "--markdown", required=True, metavar="FILE", help="Input Markdown file")
    parser.add_argument(
        "-o",
        "--output",
        required=True,
        metavar="FILE",
        help="Output HTML file (styles.css and script.js are written next to it)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(levelname)s: %(message)s",
    )

    try:
        generated = convert_file(args.markdown, args.output)
    except ConversionError as exc:
        logger.error("%s", exc)
        return 1

    print("✅ Generated:")
    print(f"  HTML: {generated.html}")
    print(f"  CSS: {generated.css}")
    print(f"  JS: {generated.js}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
