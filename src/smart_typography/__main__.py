"""Standalone entry point: python -m smart_typography"""
import argparse
import logging
import sys

from smart_typography._engine import format_text
from smart_typography.locales import available_locales

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m smart_typography",
        description="Replace typewriter punctuation with typographic quotes, dashes and symbols",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Text file to format (default: read stdin)",
    )
    parser.add_argument(
        "--lang",
        default="en",
        help="Language code selecting the quote style (default: en)",
    )
    parser.add_argument(
        "--dash",
        default="em",
        choices=["em", "en", "none"],
        help="Dash used for a spaced hyphen between words (default: em)",
    )
    parser.add_argument(
        "--keep-trailing-spaces",
        action="store_true",
        help="Do not strip spaces and tabs at the end of lines",
    )
    parser.add_argument(
        "--list-locales",
        action="store_true",
        help="List the built-in quote styles and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.list_locales:
        for profile in available_locales():
            quotes = f"{profile.primary[0]}…{profile.primary[1]} {profile.secondary[0]}…{profile.secondary[1]}"
            print(f"{profile.code:6} {profile.label:24} {quotes}")
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.error(f"Cannot read {args.file}: {e}")
            return 1
    else:
        text = sys.stdin.read()

    sys.stdout.write(
        format_text(
            text,
            lang=args.lang,
            sentence_break_dash=args.dash,
            trim_trailing_spaces=not args.keep_trailing_spaces,
        )
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
