"""
Tests for table-driven window matching.

The cross puzzle accepts a 3x3 window when both diagonals spell MAS in
either direction.
"""

import pytest
import numpy as np

import sys
from pathlib import Path
sys.path.append(str(Path(__file__).parent.parent))

from hypothesis import given, strategies as st
import hypothesis.extra.numpy as hnp

from grid_puzzles.grid import parse_grid
from grid_puzzles.io_utils import EXAMPLE_GRID
from grid_puzzles.templates import (
    Template,
    X_MAS_TEMPLATES,
    count_window_matches,
    cross_templates,
    window_at,
    window_match_positions,
)


class TestTemplates:
    """Test suite for templates and window matching."""

    def test_x_mas_templates_match_pictures(self):
        pictures = [
            ["M.S", ".A.", "M.S"],
            ["M.M", ".A.", "S.S"],
            ["S.M", ".A.", "S.M"],
            ["S.S", ".A.", "M.M"],
        ]
        expected = {Template.from_rows(p) for p in pictures}
        assert set(X_MAS_TEMPLATES) == expected
        assert len(X_MAS_TEMPLATES) == 4

    def test_template_table(self):
        template = Template.from_rows(["M.S", ".A.", "M.S"])
        assert template.shape == (3, 3)
        assert dict(template.cells) == {(0, 0): "M", (0, 2): "S", (1, 1): "A", (2, 0): "M", (2, 2): "S"}

    def test_wildcards_ignored(self):
        template = Template.from_rows(["M.S", ".A.", "M.S"])
        assert template.matches(parse_grid("MXS\nQAZ\nMMS"))
        assert not template.matches(parse_grid("SXM\nQAZ\nSMM"))
        assert not template.matches(parse_grid("MS\nAA"))

    def test_from_cells_validation(self):
        with pytest.raises(ValueError):
            Template.from_cells({(3, 0): "A"}, shape=(3, 3))
        with pytest.raises(ValueError):
            Template.from_cells({(0, 0): "AB"})
        with pytest.raises(ValueError):
            Template.from_cells({})
        assert Template.from_cells({(1, 2): "A"}).shape == (2, 3)

    def test_cross_templates_validation(self):
        with pytest.raises(ValueError):
            cross_templates("XMAS")
        with pytest.raises(ValueError):
            cross_templates("")
        with pytest.raises(TypeError):
            cross_templates(None)

    def test_palindromic_cross_word_deduplicated(self):
        assert len(cross_templates("ABA")) == 1
        assert len(cross_templates("A")) == 1

    def test_example_grid_crosses(self):
        assert count_window_matches(parse_grid(EXAMPLE_GRID)) == 9

    def test_single_window(self):
        grid = parse_grid("M.S\n.A.\nM.S")
        assert window_match_positions(grid, X_MAS_TEMPLATES) == [(0, 0)]

    def test_window_counted_once(self):
        # Matches both templates, still one window.
        templates = [Template.from_rows(["A.", ".."]), Template.from_rows(["..", ".B"])]
        assert count_window_matches(parse_grid("AX\nXB"), templates) == 1

    def test_grid_smaller_than_window(self):
        assert count_window_matches(parse_grid("M")) == 0
        assert count_window_matches(parse_grid("MAS\nMAS")) == 0

    def test_mismatched_shapes_rejected(self):
        templates = [Template.from_rows(["A"]), Template.from_rows(["AB"])]
        with pytest.raises(ValueError):
            count_window_matches(parse_grid("AB"), templates)

    def test_no_templates(self):
        assert count_window_matches(parse_grid("AB"), []) == 0

    def test_window_at(self):
        grid = parse_grid(EXAMPLE_GRID)
        template = X_MAS_TEMPLATES[0]
        for top, left in window_match_positions(grid, X_MAS_TEMPLATES):
            window = window_at(grid, template, top, left)
            assert any(t.matches(window) for t in X_MAS_TEMPLATES)


grids = hnp.arrays(
    np.dtype("<U1"),
    hnp.array_shapes(min_dims=2, max_dims=2, min_side=1, max_side=6),
    elements=st.sampled_from("MAS"),
)


@given(grids)
def test_vectorised_matches_window_loop(grid):
    """Mask-based matching agrees with checking every window individually."""
    h, w = grid.shape
    expected = 0
    for top in range(h - 2):
        for left in range(w - 2):
            window = grid[top:top + 3, left:left + 3]
            if any(t.matches(window) for t in X_MAS_TEMPLATES):
                expected += 1
    assert count_window_matches(grid) == expected
