"""
Unit tests for the in-memory surface.
"""

import pytest

from panesnap import Direction, Extent, Orientation, PaneError, infer_layout
from panesnap.providers import MemorySurface


def bounds_of(surface):
    return [(r.left, r.right, r.top, r.bottom) for r in surface.window_rects()]


@pytest.mark.unit
class TestSplitting:
    """Test pane creation and sizing."""

    def test_starts_with_one_full_pane(self):
        surface = MemorySurface(rows=24, cols=80)

        assert surface.pane_ids() == ["%1"]
        assert surface.pane_count() == 1
        assert bounds_of(surface) == [(1, 80, 1, 24)]
        assert surface.workspace_extent() == Extent(rows=24, cols=80)

    def test_horizontal_split_puts_new_pane_above(self):
        surface = MemorySurface(rows=24, cols=80)

        surface.open_split(Orientation.HORIZONTAL)

        assert surface.current_pane_id() == "%2"
        assert surface.previous_pane_id() == "%1"
        assert surface.pane_ids() == ["%2", "%1"]
        assert bounds_of(surface) == [(1, 80, 1, 11), (1, 80, 13, 24)]

    def test_vertical_split_puts_new_pane_left(self):
        surface = MemorySurface(rows=24, cols=80)

        surface.open_split(Orientation.VERTICAL)

        assert bounds_of(surface) == [(1, 39, 1, 24), (41, 80, 1, 24)]

    def test_split_copies_view(self):
        surface = MemorySurface()
        surface.set_content("README.md")

        surface.open_split(Orientation.VERTICAL)

        assert surface.pane_content("%2") == "README.md"

    def test_too_small_to_split(self):
        surface = MemorySurface(rows=2, cols=80)

        with pytest.raises(PaneError):
            surface.open_split(Orientation.HORIZONTAL)

    def test_resize_moves_divider(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.HORIZONTAL)

        surface.resize_current(height=5)

        assert bounds_of(surface) == [(1, 80, 1, 5), (1, 80, 7, 24)]

    def test_resize_last_pane_takes_from_previous(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.VERTICAL)
        surface.focus_pane("%1")

        surface.resize_current(width=60)

        assert bounds_of(surface) == [(1, 19, 1, 24), (21, 80, 1, 24)]

    def test_resize_is_clamped(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.HORIZONTAL)

        surface.resize_current(height=100)

        assert bounds_of(surface) == [(1, 80, 1, 22), (1, 80, 24, 24)]

    def test_resize_full_span_is_noop(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.VERTICAL)

        surface.resize_current(height=10)

        assert bounds_of(surface) == [(1, 39, 1, 24), (41, 80, 1, 24)]

    def test_only_keeps_focused_pane(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.VERTICAL)
        surface.open_split(Orientation.HORIZONTAL)

        surface.only()

        assert surface.pane_ids() == ["%3"]
        assert bounds_of(surface) == [(1, 80, 1, 24)]
        assert surface.previous_pane_id() is None


@pytest.mark.unit
class TestFocus:
    """Test focus movement."""

    def test_move_between_neighbours(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.VERTICAL)

        assert surface.move_focus(Direction.RIGHT)
        assert surface.current_pane_id() == "%1"
        assert surface.previous_pane_id() == "%2"

    def test_move_at_edge_fails(self):
        surface = MemorySurface(rows=24, cols=80)
        surface.open_split(Orientation.VERTICAL)

        assert not surface.move_focus(Direction.LEFT)
        assert not surface.move_focus(Direction.UP)
        assert surface.current_pane_id() == "%2"

    def test_move_up_from_nested_pane(self, build_surface, top_and_split_bottom):
        surface = build_surface(infer_layout(top_and_split_bottom))
        rects = {(r.left, r.top): r.pane_id for r in surface.window_rects()}
        surface.focus_pane(rects[(42, 12)])

        surface.move_focus(Direction.UP)

        assert surface.current_pane_id() == rects[(1, 1)]

    def test_focus_unknown_pane(self):
        surface = MemorySurface()

        with pytest.raises(PaneError):
            surface.focus_pane("%99")


@pytest.mark.unit
class TestView:
    """Test content, cursor and scroll state."""

    def test_restricted_contents(self):
        surface = MemorySurface(contents=["a.txt"])
        surface.set_content("a.txt")

        with pytest.raises(PaneError):
            surface.set_content("b.txt")
        assert surface.pane_content("%1") == "a.txt"

    def test_center_viewport(self):
        surface = MemorySurface(rows=21, cols=80)
        surface.set_cursor_line(100)

        surface.center_viewport()

        assert surface.pane_cursor_line("%1") == 100
        assert surface.pane_center_line("%1") == 100

    def test_cursor_scrolls_into_view(self):
        surface = MemorySurface(rows=10, cols=80)

        surface.set_cursor_line(50)

        # Cursor lands on the last visible row
        assert surface.pane_center_line("%1") == 41 + 4

    def test_geometry_can_be_hidden(self):
        surface = MemorySurface(report_geometry=False)

        with pytest.raises(NotImplementedError):
            surface.pane_geometry("%1")
        assert surface.pane_size("%1") == (24, 80)
