"""
Shared pytest fixtures for panesnap tests.
"""

import pytest

from panesnap import Leaf, Materializer, Orientation, Rect, Split
from panesnap.providers import MemorySurface


@pytest.fixture
def make_rect():
    """Factory fixture for pane rectangles given as (left, right, top, bottom)."""

    def _make(left, right, top, bottom, pane_id="", **kwargs):
        return Rect(left=left, right=right, top=top, bottom=bottom, pane_id=pane_id, **kwargs)

    return _make


@pytest.fixture
def side_by_side(make_rect):
    """Two full-height panes on an 80x24 workspace."""
    return [
        make_rect(1, 40, 1, 24, pane_id="left"),
        make_rect(42, 80, 1, 24, pane_id="right"),
    ]


@pytest.fixture
def top_and_split_bottom(make_rect):
    """Full-width top pane above two side-by-side panes."""
    return [
        make_rect(1, 80, 1, 10, pane_id="top"),
        make_rect(1, 40, 12, 24, pane_id="bottom-left"),
        make_rect(42, 80, 12, 24, pane_id="bottom-right"),
    ]


@pytest.fixture
def grid(make_rect):
    """Aligned 2x2 grid on an 80x24 workspace."""
    return [
        make_rect(1, 40, 1, 12, pane_id="a"),
        make_rect(42, 80, 1, 12, pane_id="b"),
        make_rect(1, 40, 14, 24, pane_id="c"),
        make_rect(42, 80, 14, 24, pane_id="d"),
    ]


@pytest.fixture
def shape():
    """Reduce a tree to orientations and leaf bounds, ignoring pane ids."""

    def _shape(tree):
        if isinstance(tree, Leaf):
            r = tree.rect
            return (r.left, r.right, r.top, r.bottom)
        return (tree.orientation, tuple(_shape(child) for child in tree.children))

    return _shape


@pytest.fixture
def build_surface():
    """Factory fixture: a MemorySurface with ``tree`` materialized on it."""

    def _build(tree, rows=24, cols=80, **kwargs):
        surface = MemorySurface(rows=rows, cols=cols, **kwargs)
        Materializer(surface).materialize(tree)
        return surface

    return _build


@pytest.fixture
def nested_tree(make_rect):
    """Three-level layout on an 80x24 workspace.

    Left column split into an editor and a terminal, right column split into
    three rows with the middle row split again side by side.
    """
    return Split(Orientation.VERTICAL, [
        Split(Orientation.HORIZONTAL, [
            Leaf(make_rect(1, 50, 1, 16)),
            Leaf(make_rect(1, 50, 18, 24)),
        ]),
        Split(Orientation.HORIZONTAL, [
            Leaf(make_rect(52, 80, 1, 6)),
            Split(Orientation.VERTICAL, [
                Leaf(make_rect(52, 64, 8, 15)),
                Leaf(make_rect(66, 80, 8, 15)),
            ]),
            Leaf(make_rect(52, 80, 17, 24)),
        ]),
    ])
