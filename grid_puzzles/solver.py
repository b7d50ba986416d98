"""Top-level solver interface for grid word-search puzzles.

:class:`WordSearchSolver` ties the pieces together: it parses the grid, counts
the configured word along every line (part 1) and counts the cross-shaped
windows built from the configured cross word (part 2).
"""

from __future__ import annotations

from typing import Dict, Optional, Union
import logging

from .config import SolverConfig, load_config
from .grid import Array, ensure_grid, shape, to_rows
from .lines import extract_lines
from .patterns import count_pattern
from .templates import cross_templates, window_at, window_match_positions


class WordSearchSolver:
    """Counts words and word crosses in character grids."""

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or load_config()
        self.templates = cross_templates(self.config.cross_word)
        self.stats = {
            'grids_solved': 0,
            'lines_scanned': 0,
            'windows_scanned': 0,
        }

        self.logger = logging.getLogger(self.__class__.__name__)
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter('%(asctime)s %(name)s %(levelname)s: %(message)s')
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.propagate = False
        self.logger.setLevel(self.config.level)

    def count_words(self, grid: Union[str, Array]) -> int:
        """Count the configured word in every row, column and diagonal, both ways."""
        grid = ensure_grid(grid)
        lines = extract_lines(grid)
        self.stats['lines_scanned'] += len(lines)
        return count_pattern(lines, self.config.word)

    def count_crosses(self, grid: Union[str, Array]) -> int:
        """Count windows where the cross word runs along both diagonals."""
        grid = ensure_grid(grid)
        h, w = shape(grid)
        th, tw = self.templates[0].shape
        self.stats['windows_scanned'] += max(h - th + 1, 0) * max(w - tw + 1, 0)
        positions = window_match_positions(grid, self.templates)
        if self.logger.isEnabledFor(logging.DEBUG):
            for top, left in positions:
                window = window_at(grid, self.templates[0], top, left)
                self.logger.debug("Cross at (%d, %d): %s", top, left, "/".join(to_rows(window)))
        return len(positions)

    def solve(self, source: Union[str, Array]) -> Dict[str, int]:
        """Solve both puzzles for ``source`` (puzzle text or a parsed grid)."""
        grid = ensure_grid(source)
        self.logger.debug("Solving %dx%d grid", *shape(grid))
        result = {
            'words': self.count_words(grid),
            'crosses': self.count_crosses(grid),
        }
        self.stats['grids_solved'] += 1
        self.logger.info(
            f"{self.config.word!r}: {result['words']}, {self.config.cross_word!r} crosses: {result['crosses']}"
        )
        return result


def solve(source: Union[str, Array], config: Optional[SolverConfig] = None) -> Dict[str, int]:
    """Convenience wrapper around :meth:`WordSearchSolver.solve`."""
    return WordSearchSolver(config).solve(source)
