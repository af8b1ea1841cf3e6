#!/usr/bin/env python3
"""Convert text between encodings from the command line.

Usage:
    pivotcodec "Hello"                       # UTF-8 -> Base64
    pivotcodec -f Hex -t UTF-8 48656c6c6f
    echo SGVsbG8= | pivotcodec -f Base64 -t Rot13
    pivotcodec --list
"""
import argparse
import logging
import sys
from typing import List, Optional

from .dispatcher import Dispatcher
from .errors import UnsupportedFormat
from .formats import DEFAULT_INPUT_FORMAT, DEFAULT_OUTPUT_FORMAT, FormatId, FormatRegistry


def format_listing(registry: FormatRegistry) -> str:
    """Render the input and output formats grouped by category."""
    lines = []
    for title, formats in (("Input formats", registry.input_formats()),
                           ("Output formats", registry.output_formats())):
        lines.append(f"{title}:")
        for category, members in registry.grouped(formats):
            labels = ", ".join(fid.value for fid in members)
            lines.append(f"  {category.value}: {labels}")
    return "\n".join(lines)


def read_stdin(input_format: str) -> str:
    """Read text from stdin, dropping the newline a shell appends.

    The trailing line break is kept for UTF-8 input, where it is part of the
    text, and removed for every other format, where it is never a valid symbol.
    """
    text = sys.stdin.read()
    try:
        is_text = FormatId.parse(input_format) is FormatId.UTF8
    except UnsupportedFormat:
        is_text = False
    if not is_text:
        if text.endswith("\r\n"):
            text = text[:-2]
        elif text.endswith("\n"):
            text = text[:-1]
    return text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pivotcodec",
        description="Convert text between binary, octal, decimal, hex, Base32, "
                    "Base64, UTF-8 and rotation ciphers.",
    )
    parser.add_argument("text", nargs="?",
                        help="Text to convert (read from stdin when omitted)")
    parser.add_argument("-f", "--from", dest="input_format",
                        default=DEFAULT_INPUT_FORMAT.value,
                        help=f"Input format (default: {DEFAULT_INPUT_FORMAT.value})")
    parser.add_argument("-t", "--to", dest="output_format",
                        default=DEFAULT_OUTPUT_FORMAT.value,
                        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT.value})")
    parser.add_argument("--list", action="store_true",
                        help="List the available formats and exit")
    parser.add_argument("--strict", action="store_true",
                        help="Report conversion errors and exit with status 1")
    parser.add_argument("--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    dispatcher = Dispatcher()
    if args.list:
        print(format_listing(dispatcher.registry))
        return 0

    text = args.text if args.text is not None else read_stdin(args.input_format)

    if args.strict:
        result = dispatcher.try_convert(text, args.input_format, args.output_format)
        if not result.ok:
            print(f"Error: {result.error}", file=sys.stderr)
            return 1
        print(result.text)
        return 0

    print(dispatcher.convert(text, args.input_format, args.output_format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
