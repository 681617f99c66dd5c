"""Command-line entry point.

Prints an HTML file with its stylesheets, scripts and optionally fonts inlined.

Usage:
    python main.py [--embed-font] [--keep-new-lines] page.html > bundled.html
"""

import argparse
import sys
from typing import List, Optional

from inline_assets import InlineConfig, InlineError, __version__, inline_file
from inline_assets.config import get_cli_defaults, get_log_level
from inline_assets.logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="inline-assets",
        description="Inline the local CSS, JavaScript and fonts of an HTML file.",
    )
    parser.add_argument("html", help="HTML file path")
    parser.add_argument(
        "-f", "--embed-font", action="store_true", help="Embeds fonts as base64 in css"
    )
    parser.add_argument(
        "--keep-new-lines",
        action="store_true",
        help="Keep newlines instead of collapsing them into spaces",
    )
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Inline the given HTML file and print the result to stdout."""
    args = build_parser().parse_args(argv)
    logger = setup_logging(args.log_level or get_log_level())

    try:
        defaults = get_cli_defaults()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    config = InlineConfig(
        inline_fonts=args.embed_font or defaults.inline_fonts,
        remove_new_lines=defaults.remove_new_lines and not args.keep_new_lines,
    )

    try:
        output = inline_file(args.html, config)
    except InlineError as e:
        logger.debug("Inlining failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
