"""
Line extraction for word-search grids.

Every straight line through a grid is read out as a string: the rows, the
columns, the diagonals running top-left to bottom-right and the
anti-diagonals running bottom-left to top-right. A grid with ``R`` rows and
``C`` columns yields ``R`` rows, ``C`` columns and ``R + C - 1`` lines in each
diagonal direction; the corner diagonals are single characters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .grid import Array, ensure_grid, flip, shape, transpose

logger = logging.getLogger(__name__)

__all__ = [
    "LineSet",
    "rows",
    "columns",
    "diagonals",
    "anti_diagonals",
    "extract_lines",
]


def _join(cells: Array) -> str:
    return "".join(cells.tolist())


def rows(grid: Array) -> List[str]:
    """Return each row read left to right."""
    grid = ensure_grid(grid)
    return [_join(row) for row in grid]


def columns(grid: Array) -> List[str]:
    """Return each column read top to bottom."""
    grid = ensure_grid(grid)
    return [_join(col) for col in transpose(grid)]


def diagonals(grid: Array) -> List[str]:
    """Return the top-left to bottom-right diagonals.

    Diagonals are ordered by offset ``col - row`` from ``-(R - 1)`` (the
    bottom-left corner) to ``C - 1`` (the top-right corner).
    """
    grid = ensure_grid(grid)
    h, w = shape(grid)
    return [_join(np.diagonal(grid, offset=k)) for k in range(-(h - 1), w)]


def anti_diagonals(grid: Array) -> List[str]:
    """Return the bottom-left to top-right diagonals.

    These are the diagonals of the vertically mirrored grid, so each line
    starts at its lowest cell.
    """
    grid = ensure_grid(grid)
    return diagonals(flip(grid, axis=0))


@dataclass(frozen=True)
class LineSet:
    """The four groups of lines extracted from one grid."""

    rows: Tuple[str, ...]
    columns: Tuple[str, ...]
    diagonals: Tuple[str, ...]
    anti_diagonals: Tuple[str, ...]

    def groups(self) -> Tuple[Tuple[str, ...], ...]:
        return (self.rows, self.columns, self.diagonals, self.anti_diagonals)

    def __iter__(self) -> Iterator[str]:
        for group in self.groups():
            yield from group

    def __len__(self) -> int:
        return sum(len(group) for group in self.groups())


def extract_lines(grid: Array) -> LineSet:
    """Extract rows, columns and both diagonal directions from ``grid``."""
    grid = ensure_grid(grid)
    lines = LineSet(
        rows=tuple(rows(grid)),
        columns=tuple(columns(grid)),
        diagonals=tuple(diagonals(grid)),
        anti_diagonals=tuple(anti_diagonals(grid)),
    )
    logger.debug("extracted %d lines from %dx%d grid", len(lines), *shape(grid))
    return lines
