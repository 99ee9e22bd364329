"""
Command line entry point for inspecting files through the editing core.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .core.buffer import Buffer
from .core.line import Line
from .core.syntax import tokenize
from .utils.search import find_all

LOG_LEVEL_ENV = 'EDITCORE_LOG_LEVEL'
LINE_NUMBER_WIDTH = 6


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog='editcore',
        description="EditCore - inspect files through the editor's buffer and highlighter"
    )
    parser.add_argument(
        "files",
        nargs="+",
        type=str,
        help="Files to open"
    )
    parser.add_argument(
        "--kinds",
        action="store_true",
        help="Print the highlight kind of every token instead of plain lines"
    )
    parser.add_argument(
        "--find",
        metavar="QUERY",
        help="Print the position of every match of QUERY"
    )
    parser.add_argument(
        "--backward",
        action="store_true",
        help="With --find, list the matches from the end of the file"
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, 'WARNING'),
        type=str.upper,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)"
    )
    return parser.parse_args(argv)


def format_line(row: int, line: Line) -> str:
    return f"{row + 1:>{LINE_NUMBER_WIDTH}}  {line.render()}"


def format_kinds(row: int, line: Line, buffer: Buffer) -> str:
    tokens = tokenize(buffer.options, line.text)
    described = ' '.join(f"{token.kind.value}:{token.text!r}" for token in tokens)
    return f"{row + 1:>{LINE_NUMBER_WIDTH}}  {described}"


def print_matches(filename: str, buffer: Buffer, query: str, backward: bool) -> None:
    results = find_all(buffer, query)
    if backward:
        results.reverse()

    for result in results:
        row, column = result.position.row, result.position.column
        print(f"{filename}:{row + 1}:{column + 1}: {buffer.lines[row].text}")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the application."""

    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format='%(levelname)s %(name)s: %(message)s')

    status = 0
    for filename in args.files:
        try:
            buffer = Buffer.open(filename)
        except OSError as e:
            print(f"Error loading {filename}: {e}", file=sys.stderr)
            status = 1
            continue

        if len(args.files) > 1:
            print(f"==> {filename} ({buffer.file_type}) <==")

        if args.find:
            print_matches(filename, buffer, args.find, args.backward)
            continue

        for row, line in enumerate(buffer):
            print(format_kinds(row, line, buffer) if args.kinds else format_line(row, line))

    return status


if __name__ == "__main__":
    sys.exit(main())
