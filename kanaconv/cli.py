"""
Command-line interface for kanaconv.

Usage:
    kanaconv -c h2z -a ABC          # => ＡＢＣ
    kanaconv -c z2h -d １２３       # => 123
    kanaconv -c h2z -k ｱｲｳ          # => アイウ
    echo ひらがな | kanaconv -c h2k  # => ヒラガナ

Conversion patterns:
    h2z     half-width to full-width
    z2h     full-width to half-width
    h2k     hiragana to full-width katakana
    h2hk    hiragana to half-width katakana
    k2h     katakana to hiragana
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .convert import get_converter
from .options import ConversionOptions

logger = logging.getLogger(__name__)

PATTERNS = ["h2z", "z2h", "h2k", "h2hk", "k2h"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kanaconv",
        description="A conversion tool for Japanese character widths and kana.",
    )
    parser.add_argument(
        "-c", "--conv", required=True, choices=PATTERNS,
        help="conversion pattern",
    )
    parser.add_argument(
        "-a", "--ascii", action="store_true",
        help="convert ascii characters",
    )
    parser.add_argument(
        "-d", "--digit", action="store_true",
        help="convert digits",
    )
    parser.add_argument(
        "-k", "--kana", action="store_true",
        help="convert katakana width",
    )
    parser.add_argument(
        "-i", "--ignore", default="",
        help="characters to leave unconverted, e.g. -i A1ｱ",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "text", nargs="?",
        help="text to convert; read from standard input when omitted",
    )
    return parser


def options_from_args(args: argparse.Namespace) -> ConversionOptions:
    return (
        ConversionOptions.build()
        .ascii(args.ascii)
        .digit(args.digit)
        .kana(args.kana)
        .ignore(args.ignore)
        .finalize()
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    options = options_from_args(args)
    logger.debug("Options: %s", options)
    convert = get_converter(args.conv)

    if args.text is not None:
        print(convert(args.text, options))
    else:
        for line in sys.stdin:
            sys.stdout.write(convert(line, options))
    return 0
