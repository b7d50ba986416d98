"""
Grid utilities for the word-search solvers.

This module defines the character grid used throughout the package: a 2D
numpy array of single characters. It converts puzzle text or nested
sequences into that representation, rejecting ragged or empty input, and
provides the small set of views (transpose, mirroring, cropping) the line
extractor and window matcher are built on.
"""

from __future__ import annotations

import numpy as np
from typing import Any, List, Sequence, Tuple, Union


# Type alias for clarity. Puzzle grids are small 2D arrays of single characters.
Array = np.ndarray

CELL_DTYPE = np.dtype("<U1")

__all__ = [
    "Array",
    "CELL_DTYPE",
    "MalformedGridError",
    "parse_grid",
    "to_array",
    "to_rows",
    "ensure_grid",
    "shape",
    "transpose",
    "flip",
    "crop",
]


class MalformedGridError(ValueError):
    """Raised when puzzle input is not a non-empty rectangle of single characters."""


def parse_grid(text: str) -> Array:
    """Parse multi-line puzzle text into a grid.

    Blank lines before and after the grid are ignored, as is trailing
    whitespace (including ``\\r``) at the end of each row.
    """
    if not isinstance(text, str):
        raise TypeError("puzzle text must be a string")
    rows = [line.rstrip() for line in text.strip("\r\n").splitlines()]
    return to_array(rows)


def to_array(grid: Union[str, Sequence[Any], Array]) -> Array:
    """Convert text, a list of row strings, or nested lists into a read-only grid."""
    if isinstance(grid, str):
        return parse_grid(grid)
    if isinstance(grid, np.ndarray):
        rows: List[Any] = grid.tolist() if grid.ndim == 2 else [grid.tolist()]
    else:
        rows = list(grid)

    if not rows:
        raise MalformedGridError("grid is empty")

    cells: List[List[str]] = []
    for i, row in enumerate(rows):
        row_cells = list(row)
        for cell in row_cells:
            if not isinstance(cell, str) or len(cell) != 1:
                raise MalformedGridError(f"row {i} contains a non-character cell: {cell!r}")
        cells.append(row_cells)

    width = len(cells[0])
    if width == 0:
        raise MalformedGridError("row 0 is empty")
    for i, row_cells in enumerate(cells):
        if len(row_cells) != width:
            raise MalformedGridError(
                f"row {i} has length {len(row_cells)}, expected {width}"
            )

    a = np.array(cells, dtype=CELL_DTYPE)
    a.setflags(write=False)
    return a


def to_rows(arr: Array) -> List[str]:
    """Convert a grid back into a list of row strings."""
    return ["".join(row) for row in arr.tolist()]


def ensure_grid(grid: Any) -> Array:
    """Return ``grid`` unchanged if it is already a character grid, else parse it."""
    if isinstance(grid, np.ndarray):
        if grid.ndim != 2 or grid.dtype.kind != "U":
            raise TypeError("grid must be a 2-D numpy array of characters")
        if grid.size == 0:
            raise MalformedGridError("grid is empty")
        bad = np.argwhere(np.char.str_len(grid) != 1)
        if bad.size:
            r, c = (int(v) for v in bad[0])
            raise MalformedGridError(f"row {r} contains a non-character cell: {grid[r, c]!r}")
        return grid
    if isinstance(grid, (str, list, tuple)):
        return to_array(grid)
    raise TypeError(f"cannot build a grid from {type(grid).__name__}")


def shape(a: Array) -> Tuple[int, int]:
    """Return ``(rows, cols)`` as plain ints."""
    h, w = a.shape
    return int(h), int(w)


def transpose(a: Array) -> Array:
    """Return the transpose of the grid, copying to ensure contiguous memory."""
    return a.T.copy()


def flip(a: Array, axis: int) -> Array:
    """Mirror a grid along the given axis (0 for vertical, 1 for horizontal)."""
    return np.flip(a, axis=axis)


def crop(a: Array, top: int, left: int, height: int, width: int) -> Array:
    """Return the ``height x width`` window whose top-left corner is ``(top, left)``."""
    return a[top : top + height, left : left + width]
