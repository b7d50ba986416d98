"""
Input helpers for the word-search solver.

Puzzles are plain text, one grid row per line. This module reads them from a
file or standard input and ships the 10x10 example grid used in the puzzle
statement.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO, Union


EXAMPLE_GRID = """\
MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""
"""Example puzzle: 18 ``XMAS`` words and 9 ``MAS`` crosses."""


def load_puzzle_text(path: Union[str, Path, None] = None, stdin: Optional[TextIO] = None) -> str:
    """Read puzzle text from ``path``, or from standard input when ``path`` is ``None`` or ``"-"``.

    Raises ``OSError`` (e.g. ``FileNotFoundError``) if the file cannot be read.
    """
    if path is None or str(path) == "-":
        return (stdin or sys.stdin).read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


__all__ = ["EXAMPLE_GRID", "load_puzzle_text"]
