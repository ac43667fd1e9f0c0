"""
Unit tests for bounds analysis.
"""

import pytest

from panesnap import Extent, InvalidInput, Leaf, Orientation, Split, compute_bounds, layout_extent


@pytest.mark.unit
class TestComputeBounds:
    """Test enclosing box and separator sets."""

    def test_empty_set_is_rejected(self):
        with pytest.raises(InvalidInput):
            compute_bounds([])

    def test_single_rect(self, make_rect):
        bounds = compute_bounds([make_rect(1, 80, 1, 24)])

        assert (bounds.left, bounds.right, bounds.top, bounds.bottom) == (1, 80, 1, 24)
        assert bounds.xs == [0, 81]
        assert bounds.ys == [0, 25]

    def test_separators_are_sorted_and_unique(self, top_and_split_bottom):
        bounds = compute_bounds(top_and_split_bottom)

        assert bounds.xs == [0, 41, 81]
        assert bounds.ys == [0, 11, 25]

    def test_separators_include_outer_boundary(self, grid):
        bounds = compute_bounds(grid)

        assert bounds.xs[0] == bounds.left - 1
        assert bounds.xs[-1] == bounds.right + 1
        assert bounds.ys[0] == bounds.top - 1
        assert bounds.ys[-1] == bounds.bottom + 1

    def test_accepts_any_iterable(self, side_by_side):
        bounds = compute_bounds(r for r in side_by_side)

        assert bounds.right == 80

    def test_cuts_and_span_follow_axis(self, top_and_split_bottom):
        bounds = compute_bounds(top_and_split_bottom)

        assert bounds.cuts(Orientation.HORIZONTAL) == bounds.ys
        assert bounds.cuts(Orientation.VERTICAL) == bounds.xs
        # Horizontal cuts run across the columns
        assert bounds.span(Orientation.HORIZONTAL) == 80
        assert bounds.span(Orientation.VERTICAL) == 24


@pytest.mark.unit
def test_layout_extent(side_by_side):
    tree = Split(Orientation.VERTICAL, [Leaf(r) for r in side_by_side])

    assert layout_extent(tree) == Extent(rows=24, cols=80)
