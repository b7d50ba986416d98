"""Command-line entry point: read a puzzle grid and print the answers."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .grid import MalformedGridError, parse_grid
from .io_utils import EXAMPLE_GRID, load_puzzle_text
from .solver import WordSearchSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid_puzzles",
        description="Count words and word crosses in a character grid.",
    )
    parser.add_argument("path", nargs="?", default="-", help="puzzle file, '-' for stdin (default)")
    parser.add_argument("--example", action="store_true", help="solve the built-in example grid")
    parser.add_argument("--part", choices=["1", "2", "all"], default="all")
    parser.add_argument("--word", help="word to search for (part 1)")
    parser.add_argument("--cross-word", help="odd-length word forming the crosses (part 2)")
    parser.add_argument("--verbose", action="store_true")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config({
            "WORD": args.word,
            "CROSS_WORD": args.cross_word,
            "LOG_LEVEL": "DEBUG" if args.verbose else None,
        })
    except ValueError as exc:
        parser.error(str(exc))

    logging.basicConfig(level=config.level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')
    solver = WordSearchSolver(config)

    try:
        text = EXAMPLE_GRID if args.example else load_puzzle_text(args.path)
        grid = parse_grid(text)
    except (OSError, UnicodeDecodeError, MalformedGridError) as exc:
        print(f"grid_puzzles: {exc}", file=sys.stderr)
        return 2

    if args.part in ("1", "all"):
        print(solver.count_words(grid))
    if args.part in ("2", "all"):
        print(solver.count_crosses(grid))
    return 0


if __name__ == "__main__":
    sys.exit(main())
