"""
Command-line interface for greek-betacode.

Usage:
    betacode "mh=nin a)/eide qea\\"
    betacode --file iliad.beta --output iliad.txt
    betacode --revert "μῆνιν ἄειδε"

Non-ASCII input and characters outside the Betacode alphabet are fatal.
Out-of-order diacritics and mixed case notation are warnings unless
--strict is given.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from greek_betacode import __version__, revert, transliterate
from greek_betacode._errors import InvalidChars, NotASCII, ValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="betacode",
        description="Convert ASCII Betacode to polytonic Greek Unicode",
    )
    parser.add_argument("text", nargs="?", help="Betacode text, or a path with --file")
    parser.add_argument(
        "-f", "--file", action="store_true", help="Read the input from the file named by TEXT"
    )
    parser.add_argument(
        "-s",
        "--strict",
        action="store_true",
        help="Reject out-of-order diacritics and mixed case notation",
    )
    parser.add_argument(
        "-r", "--revert", action="store_true", help="Convert Greek Unicode back to Betacode"
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="Write the result to this file instead of stdout"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(args: argparse.Namespace) -> Optional[str]:
    if args.text is None:
        logger.error("Empty string")
        return None
    if not args.file:
        return args.text
    try:
        return Path(args.text).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("%s", exc)
        return None


def _convert(text: str, strict: bool) -> Optional[str]:
    try:
        return transliterate(text, strict=strict).converted
    except NotASCII as exc:
        logger.error("Text passed is not in ASCII.\n%s", exc)
    except InvalidChars as exc:
        logger.error("Text passed violates ASCII Betacode standards as applied here.\n%s", exc)
    except ValidationError as exc:
        logger.error("Rejected in strict mode.\n%s", exc)
    return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    text = _read_input(args)
    if text is None:
        return 1

    output = revert(text) if args.revert else _convert(text, args.strict)
    if output is None:
        return 1

    if not output.endswith("\n"):
        output += "\n"

    if args.output is None:
        sys.stdout.write(output)
        return 0

    try:
        args.output.write_text(output, encoding="utf-8")
    except OSError as exc:
        logger.error("%s", exc)
        return 1
    logger.info("Wrote %d chars to %s", len(output), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
