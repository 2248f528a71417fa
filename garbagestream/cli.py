"""Command-line entrypoint: print the score and garbage length of a stream file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from garbagestream.parser import parse_result

DEFAULT_INPUT = Path("data/input-9.txt")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="garbagestream",
        description="Score the groups and count the garbage of a character stream",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=str(DEFAULT_INPUT),
        help=f"Path to the stream file, or '-' for stdin (default: {DEFAULT_INPUT})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the input file (default: utf-8)",
    )
    return parser


def _read_source(arg_parser: argparse.ArgumentParser, input_arg: str, encoding: str) -> str:
    if input_arg == "-":
        return sys.stdin.read()
    try:
        return Path(input_arg).read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        arg_parser.error(f"can't read {input_arg}: {exc}")


def main(argv: list[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    source = _read_source(arg_parser, args.input, args.encoding)

    result = parse_result(source)
    if result.has_errors:
        print(f"syntax error: {result.diagnostics[0].message}")
        return 1

    print(f"Part 1: {result.score()}")
    print(f"Part 2: {result.garbage_length()}")
    return 0
