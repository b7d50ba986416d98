"""Grid puzzle solvers.

This package counts words written along the rows, columns and diagonals of
a character grid, and counts small cross-shaped patterns with a table-driven
window matcher. :class:`WordSearchSolver` runs both over one grid.
"""

from .grid import MalformedGridError, parse_grid, to_array, Array
from .lines import LineSet, extract_lines
from .patterns import count_occurrences, count_pattern, count_word
from .templates import Template, X_MAS_TEMPLATES, count_window_matches, cross_templates
from .solver import WordSearchSolver, solve

__all__ = [
    "Array",
    "MalformedGridError",
    "parse_grid",
    "to_array",
    "LineSet",
    "extract_lines",
    "count_occurrences",
    "count_pattern",
    "count_word",
    "Template",
    "X_MAS_TEMPLATES",
    "cross_templates",
    "count_window_matches",
    "WordSearchSolver",
    "solve",
]
