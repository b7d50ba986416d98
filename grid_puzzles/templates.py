"""
Local-window template matching.

A :class:`Template` is a small table from relative ``(row, col)`` offsets to
the character expected there; offsets missing from the table are wildcards.
:func:`count_window_matches` slides a template-sized window over a grid and
counts the positions where the window agrees with at least one template.

The cross puzzle uses :data:`X_MAS_TEMPLATES`, the four 3x3 windows whose
diagonals both spell ``MAS`` forwards or backwards::

    M.S    M.M    S.M    S.S
    .A.    .A.    .A.    .A.
    M.S    S.S    S.M    M.M
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np

from .grid import Array, crop, ensure_grid, shape

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]

__all__ = [
    "Template",
    "cross_templates",
    "X_MAS_TEMPLATES",
    "window_match_positions",
    "count_window_matches",
    "window_at",
]


@dataclass(frozen=True)
class Template:
    """Partial assignment of characters over a fixed-size window."""

    cells: Tuple[Tuple[Offset, str], ...]
    shape: Tuple[int, int]

    @classmethod
    def from_cells(cls, cells: Mapping[Offset, str], shape: Optional[Tuple[int, int]] = None) -> "Template":
        """Build a template from an offset -> character mapping.

        ``shape`` defaults to the smallest window covering every offset.
        """
        if shape is None:
            if not cells:
                raise ValueError("shape is required for a template without cells")
            shape = (max(r for r, _ in cells) + 1, max(c for _, c in cells) + 1)
        h, w = shape
        for (r, c), ch in cells.items():
            if not (0 <= r < h and 0 <= c < w):
                raise ValueError(f"offset {(r, c)} lies outside a {h}x{w} window")
            if not isinstance(ch, str) or len(ch) != 1:
                raise ValueError(f"expected a single character at {(r, c)}, got {ch!r}")
        return cls(cells=tuple(sorted(cells.items())), shape=(int(h), int(w)))

    @classmethod
    def from_rows(cls, rows: Sequence[str], wildcard: str = ".") -> "Template":
        """Build a template from a picture such as ``["M.S", ".A.", "M.S"]``."""
        if not rows or len({len(row) for row in rows}) != 1:
            raise ValueError("template rows must be non-empty and of equal length")
        cells = {
            (r, c): ch
            for r, row in enumerate(rows)
            for c, ch in enumerate(row)
            if ch != wildcard
        }
        return cls.from_cells(cells, shape=(len(rows), len(rows[0])))

    def matches(self, window: Array) -> bool:
        """Return True if ``window`` (of this template's shape) agrees on every fixed cell."""
        if tuple(window.shape) != self.shape:
            return False
        return all(window[r, c] == ch for (r, c), ch in self.cells)

    def match_mask(self, grid: Array) -> Array:
        """Boolean array marking every top-left corner where the template matches."""
        h, w = shape(grid)
        th, tw = self.shape
        out_h, out_w = h - th + 1, w - tw + 1
        if out_h <= 0 or out_w <= 0:
            return np.zeros((max(out_h, 0), max(out_w, 0)), dtype=bool)
        mask = np.ones((out_h, out_w), dtype=bool)
        for (r, c), ch in self.cells:
            mask &= grid[r : r + out_h, c : c + out_w] == ch
        return mask


def cross_templates(word: str) -> Tuple[Template, ...]:
    """Templates for ``word`` written along both diagonals of a square window.

    Each diagonal may read forwards or backwards, giving four templates (fewer
    when ``word`` is a palindrome). The word must have odd length so that the
    diagonals share their middle cell.
    """
    if not isinstance(word, str):
        raise TypeError("word must be a string")
    n = len(word)
    if n == 0 or n % 2 == 0:
        raise ValueError(f"cross word must have odd length, got {word!r}")

    seen = []
    for main in (word, word[::-1]):
        for anti in (word, word[::-1]):
            cells: Dict[Offset, str] = {}
            for i in range(n):
                cells[(i, i)] = main[i]
                cells[(i, n - 1 - i)] = anti[i]
            template = Template.from_cells(cells, shape=(n, n))
            if template not in seen:
                seen.append(template)
    return tuple(seen)


X_MAS_TEMPLATES: Tuple[Template, ...] = cross_templates("MAS")


def _common_shape(templates: Sequence[Template]) -> Tuple[int, int]:
    shapes = {t.shape for t in templates}
    if len(shapes) != 1:
        raise ValueError(f"templates must share one window shape, got {sorted(shapes)}")
    return shapes.pop()


def window_match_positions(grid: Array, templates: Iterable[Template]) -> List[Offset]:
    """Top-left corners of every window that matches at least one template."""
    grid = ensure_grid(grid)
    templates = list(templates)
    if not templates:
        return []
    th, tw = _common_shape(templates)
    h, w = shape(grid)
    if h < th or w < tw:
        return []
    hits = np.zeros((h - th + 1, w - tw + 1), dtype=bool)
    for template in templates:
        hits |= template.match_mask(grid)
    return [(int(r), int(c)) for r, c in np.argwhere(hits)]


def count_window_matches(grid: Array, templates: Iterable[Template] = X_MAS_TEMPLATES) -> int:
    """Count windows of ``grid`` matching any of ``templates``; each window counts once."""
    positions = window_match_positions(grid, templates)
    logger.debug("%d windows matched", len(positions))
    return len(positions)


def window_at(grid: Array, template: Template, top: int, left: int) -> Array:
    """Return the window of ``grid`` a template would be compared against at ``(top, left)``."""
    th, tw = template.shape
    return crop(ensure_grid(grid), top, left, th, tw)
