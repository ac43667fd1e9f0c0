"""
Panesnap layout restore.

Replays a split tree against a surface and puts each pane's view state and
the focus back the way they were captured.
"""

import logging
from typing import Callable

from .bounds import layout_bounds, layout_extent
from .providers.base import Surface
from .scaling import scale_layout
from .types import (
    Direction, LayoutTree, Leaf, Orientation, PaneError, Placement, Rect, Split,
    iter_leaves,
)

logger = logging.getLogger(__name__)


class Materializer:
    """Creates and sizes panes to match a split tree."""

    def __init__(self, surface: Surface):
        self.surface = surface

    def materialize(self, tree: LayoutTree) -> list[Placement]:
        """
        Build ``tree`` inside the focused pane.

        Returns:
            One placement per leaf, in traversal order.
        """
        placements: list[Placement] = []
        self._descend(tree, placements)
        logger.debug(f"materialized {len(placements)} panes")
        return placements

    def _descend(self, node: LayoutTree, placements: list[Placement]) -> None:
        if isinstance(node, Leaf):
            placements.append(Placement(leaf=node, pane_id=self.surface.current_pane_id()))
        else:
            self._split(node, placements)

    def _split(self, node: Split, placements: list[Placement]) -> None:
        """
        Open and size one pane per leading child, then fill the remainder.

        A child that cannot be created is logged and skipped; its siblings
        are still built.
        """
        axis = node.orientation
        step = Direction.DOWN if axis is Orientation.HORIZONTAL else Direction.RIGHT
        *leading, last = node.children

        for index, child in enumerate(leading):
            later = node.children[index + 1:]
            try:
                available = self._current_length(axis)
                self.surface.open_split(axis)
            except PaneError as e:
                logger.warning(f"skipping {_leaf_count(child)} panes of a {axis.value} split: {e}")
                continue

            self._resize(axis, _planned_length(child, axis, available, later))
            self._descend(child, placements)
            if not self.surface.move_focus(step):
                skipped = sum(_leaf_count(sibling) for sibling in later)
                logger.warning(f"could not move focus {step.value}; skipping {skipped} panes")
                return

        # The last child keeps whatever space is left
        self._descend(last, placements)

    def _current_length(self, axis: Orientation) -> int:
        height, width = self.surface.pane_size(self.surface.current_pane_id())
        return height if axis is Orientation.HORIZONTAL else width

    def _resize(self, axis: Orientation, length: int) -> None:
        # The cross-axis size is inherited from the parent, already sized
        try:
            if axis is Orientation.HORIZONTAL:
                self.surface.resize_current(height=length)
            else:
                self.surface.resize_current(width=length)
        except PaneError as e:
            logger.warning(f"could not resize {self.surface.current_pane_id()}: {e}")


def _leaf_count(node: LayoutTree) -> int:
    return sum(1 for _ in iter_leaves(node))


def _min_length(node: LayoutTree, axis: Orientation) -> int:
    """Fewest cells along ``axis`` that can still hold every pane of ``node``."""
    if isinstance(node, Leaf):
        return 1
    lengths = [_min_length(child, axis) for child in node.children]
    if node.orientation is axis:
        return sum(lengths) + len(lengths) - 1
    return max(lengths)


def _planned_length(child: LayoutTree, axis: Orientation, available: int, later: list[LayoutTree]) -> int:
    """
    Length to give ``child`` out of ``available`` cells.

    Floor scaling can leave too little room behind a child; each later
    sibling keeps its minimum length plus one divider.
    """
    wanted = layout_bounds(child).span(axis.opposite)
    reserved = sum(_min_length(sibling, axis) + 1 for sibling in later)
    return max(_min_length(child, axis), min(wanted, available - reserved))


class ViewRestorer:
    """Restores content, cursor and focus of materialized panes."""

    def __init__(self, surface: Surface):
        self.surface = surface

    def restore(self, placements: list[Placement]) -> None:
        """
        Restore every pane's view, then focus.

        A pane that fails is logged and skipped; the rest still restore.
        """
        for placement in placements:
            try:
                self._restore_view(placement)
            except PaneError as e:
                logger.warning(f"skipping pane {placement.pane_id}: {e}")
        self.restore_focus(placements)

    def _restore_view(self, placement: Placement) -> None:
        rect = placement.leaf.rect
        self.surface.focus_pane(placement.pane_id)
        if rect.content_id:
            self.surface.set_content(rect.content_id)
        # Center on the captured middle line first, then place the cursor
        self.surface.set_cursor_line(rect.center_line)
        self.surface.center_viewport()
        self.surface.set_cursor_line(rect.cursor_line)

    def restore_focus(self, placements: list[Placement]) -> None:
        """Focus the previous pane, then the current one, when each is unique."""
        self._focus_marked(placements, lambda rect: rect.is_previous)
        self._focus_marked(placements, lambda rect: rect.is_current)

    def _focus_marked(self, placements: list[Placement], marked: Callable[[Rect], bool]) -> None:
        matches = [p for p in placements if marked(p.leaf.rect)]
        if len(matches) != 1:
            return
        try:
            self.surface.focus_pane(matches[0].pane_id)
        except PaneError as e:
            logger.warning(f"could not focus {matches[0].pane_id}: {e}")


def restore_layout(
    surface: Surface,
    tree: LayoutTree,
    close_others: bool = True,
    restore_views: bool = True
) -> list[Placement]:
    """
    Rebuild a captured layout on a surface.

    Args:
        surface: Target surface.
        tree: Captured layout.
        close_others: Collapse the workspace to the focused pane first.
        restore_views: Restore content and cursor state, not only focus.

    Returns:
        Placement of every leaf.
    """
    target = surface.workspace_extent()
    scaled = scale_layout(tree, layout_extent(tree), target)

    if close_others:
        surface.only()

    placements = Materializer(surface).materialize(scaled)

    restorer = ViewRestorer(surface)
    if restore_views:
        restorer.restore(placements)
    else:
        restorer.restore_focus(placements)
    return placements
