"""
Panesnap layout capture.

Collects one rectangle per pane from a live surface and infers the split
tree from them. Focus may move while panes are located; it is always put
back before capture returns.
"""

import logging
from dataclasses import replace
from typing import Optional

from .inference import infer_layout
from .providers.base import Surface
from .types import Direction, InvalidInput, LayoutTree, Orientation, PaneError, Rect

logger = logging.getLogger(__name__)


class FocusGuard:
    """
    Reentrant save/restore of a surface's current and previous pane.

    Only the outermost ``with`` block saves focus on entry and restores it on
    exit; nested blocks see the outer block's saved state.
    """

    def __init__(self, surface: Surface):
        self._surface = surface
        self._depth = 0
        self.current: Optional[str] = None
        self.previous: Optional[str] = None

    @property
    def depth(self) -> int:
        return self._depth

    def __enter__(self) -> "FocusGuard":
        if self._depth == 0:
            self.current = self._surface.current_pane_id()
            self.previous = self._surface.previous_pane_id()
        self._depth += 1
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self._depth -= 1
        if self._depth == 0:
            self._restore()
        return False

    def _restore(self) -> None:
        # Previous first so the host's previous-pane bookkeeping survives.
        # With no saved previous pane, the host keeps whichever pane was
        # focused last before ``current``; Surface cannot clear it.
        for pane_id in (self.previous, self.current):
            if pane_id is None:
                continue
            try:
                self._surface.focus_pane(pane_id)
            except PaneError as e:
                logger.warning(f"could not restore focus to {pane_id}: {e}")


class LayoutCapturer:
    """Captures the pane arrangement of a surface."""

    def __init__(self, surface: Surface, axis: Orientation = Orientation.HORIZONTAL):
        """
        Initialize capturer.

        Args:
            surface: Surface to capture.
            axis: Orientation tried first at the root of the tree.
        """
        self.surface = surface
        self.axis = axis
        self._guard = FocusGuard(surface)

    def begin_capture(self) -> FocusGuard:
        """Get the focus guard to hold while panes are being queried."""
        return self._guard

    def capture(self) -> LayoutTree:
        """
        Capture the current layout.

        Raises:
            InvalidInput: If the workspace has no panes.
        """
        rects = self.collect()
        tree = infer_layout(rects, self.axis)
        logger.debug(f"captured {len(rects)} panes from {self.surface.name}")
        return tree

    def collect(self) -> list[Rect]:
        """Build one rect per pane, with view state and focus flags."""
        with self.begin_capture() as guard:
            pane_ids = self.surface.pane_ids()
            if not pane_ids:
                raise InvalidInput("workspace has no panes")

            located: dict[str, Rect] = {}
            rects = []
            for pane_id in pane_ids:
                rect = self.locate(pane_id, located)
                rects.append(replace(
                    rect,
                    pane_id=pane_id,
                    content_id=self.surface.pane_content(pane_id),
                    cursor_line=self.surface.pane_cursor_line(pane_id),
                    center_line=self.surface.pane_center_line(pane_id),
                    is_current=pane_id == guard.current,
                    is_previous=pane_id == guard.previous,
                ))
            return rects

    def locate(self, pane_id: str, located: dict[str, Rect]) -> Rect:
        """
        Resolve absolute bounds of a pane.

        Args:
            pane_id: Pane to locate.
            located: Bounds already resolved during this capture.
        """
        if pane_id in located:
            return located[pane_id]
        try:
            rect = self.surface.pane_geometry(pane_id)
        except NotImplementedError:
            rect = self._navigate(pane_id, located)
        located[pane_id] = rect
        return rect

    def _navigate(self, pane_id: str, located: dict[str, Rect]) -> Rect:
        with self.begin_capture():
            height, width = self.surface.pane_size(pane_id)
            left = self._leading_edge(pane_id, Direction.LEFT, located)
            top = self._leading_edge(pane_id, Direction.UP, located)
        return Rect(
            left=left,
            right=left + width - 1,
            top=top,
            bottom=top + height - 1,
            pane_id=pane_id,
        )

    def _leading_edge(self, pane_id: str, direction: Direction, located: dict[str, Rect]) -> int:
        """One divider past the neighbour's trailing edge, or 1 at the border."""
        self.surface.focus_pane(pane_id)
        if not self.surface.move_focus(direction):
            return 1
        neighbour = self.surface.current_pane_id()
        if neighbour == pane_id:
            return 1
        rect = self.locate(neighbour, located)
        if direction is Direction.LEFT:
            return rect.right + 2
        return rect.bottom + 2


def capture_layout(surface: Surface, axis: Orientation = Orientation.HORIZONTAL) -> LayoutTree:
    """Capture the layout of a surface as a split tree."""
    return LayoutCapturer(surface, axis).capture()
