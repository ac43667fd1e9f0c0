"""
In-memory surface for Panesnap.

Simulates a split-window workspace without any terminal: panes live in a
tree of frames with alternating orientation, adjacent panes are separated by
one divider cell, and focus moves between edge-adjacent panes. Useful for
library usage, previews and tests.
"""

import itertools
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from .base import Surface
from ..types import Direction, Extent, Orientation, PaneError, Rect


@dataclass(eq=False)
class _Window:
    pane_id: str
    content_id: str = ""
    cursor_line: int = 1
    top_line: int = 1
    size: int = 0  # length along the parent frame's axis; the last child takes the rest
    parent: Optional["_Frame"] = field(default=None, repr=False)


@dataclass(eq=False)
class _Frame:
    orientation: Orientation
    children: list[Union["_Frame", _Window]] = field(default_factory=list)
    size: int = 0
    parent: Optional["_Frame"] = field(default=None, repr=False)


_Node = Union[_Frame, _Window]


def _length(rect: Rect, orientation: Orientation) -> int:
    return rect.height if orientation is Orientation.HORIZONTAL else rect.width


def _adjacent(here: Rect, other: Rect, direction: Direction) -> bool:
    if direction in (Direction.LEFT, Direction.RIGHT):
        overlaps = other.top <= here.bottom and other.bottom >= here.top
        if direction is Direction.LEFT:
            return overlaps and other.right == here.left - 2
        return overlaps and other.left == here.right + 2
    overlaps = other.left <= here.right and other.right >= here.left
    if direction is Direction.UP:
        return overlaps and other.bottom == here.top - 2
    return overlaps and other.top == here.bottom + 2


class MemorySurface(Surface):
    """
    Simulated workspace surface.

    Starts with one pane filling ``rows`` x ``cols``. New panes get ids
    ``%1``, ``%2``, ... in creation order.
    """

    @property
    def name(self) -> str:
        return "memory"

    def __init__(
        self,
        rows: int = 24,
        cols: int = 80,
        report_geometry: bool = True,
        contents: Optional[Iterable[str]] = None
    ):
        """
        Initialize memory surface.

        Args:
            rows: Workspace height.
            cols: Workspace width.
            report_geometry: Answer ``pane_geometry`` directly. When False,
                callers must locate panes by moving focus.
            contents: Content ids that can be loaded. None accepts any.
        """
        self._extent = Extent(rows=rows, cols=cols)
        self._ids = itertools.count(1)
        self._windows: dict[str, _Window] = {}
        self._root: _Node = self._new_window()
        self._current: _Window = self._root
        self._previous: Optional[_Window] = None
        self.report_geometry = report_geometry
        self.contents = set(contents) if contents is not None else None

    def is_available(self) -> bool:
        """Always available."""
        return True

    def _new_window(self) -> _Window:
        window = _Window(pane_id=f"%{next(self._ids)}")
        self._windows[window.pane_id] = window
        return window

    def _window(self, pane_id: str) -> _Window:
        window = self._windows.get(pane_id)
        if window is None:
            raise PaneError(f"no such pane: {pane_id}")
        return window

    def _focus(self, window: _Window) -> None:
        if window is not self._current:
            self._previous = self._current
            self._current = window

    # ========== Geometry ==========

    def _boxes(self) -> dict[int, Rect]:
        """Bounds of every node, keyed by node identity."""
        boxes: dict[int, Rect] = {}
        self._place(self._root, 1, self._extent.cols, 1, self._extent.rows, boxes)
        return boxes

    def _place(self, node: _Node, left: int, right: int, top: int, bottom: int, boxes: dict) -> None:
        pane_id = node.pane_id if isinstance(node, _Window) else ""
        boxes[id(node)] = Rect(left=left, right=right, top=top, bottom=bottom, pane_id=pane_id)
        if isinstance(node, _Window):
            return

        horizontal = node.orientation is Orientation.HORIZONTAL
        start = top if horizontal else left
        end = bottom if horizontal else right
        last = len(node.children) - 1
        for i, child in enumerate(node.children):
            stop = end if i == last else start + child.size - 1
            if horizontal:
                self._place(child, left, right, start, stop, boxes)
            else:
                self._place(child, start, stop, top, bottom, boxes)
            start = stop + 2

    def _min_length(self, node: _Node, orientation: Orientation) -> int:
        if isinstance(node, _Window):
            return 1
        if node.orientation is orientation:
            fixed = sum(child.size for child in node.children[:-1])
            return fixed + len(node.children) - 1 + self._min_length(node.children[-1], orientation)
        return max(self._min_length(child, orientation) for child in node.children)

    def window_rects(self) -> list[Rect]:
        """Bounds of every pane, in layout order."""
        boxes = self._boxes()
        return [boxes[id(w)] for w in self._iter_windows(self._root)]

    def _iter_windows(self, node: _Node):
        if isinstance(node, _Window):
            yield node
            return
        for child in node.children:
            yield from self._iter_windows(child)

    # ========== Queries ==========

    def pane_ids(self) -> list[str]:
        return [w.pane_id for w in self._iter_windows(self._root)]

    def current_pane_id(self) -> str:
        return self._current.pane_id

    def previous_pane_id(self) -> Optional[str]:
        if self._previous is None or self._previous.pane_id not in self._windows:
            return None
        return self._previous.pane_id

    def pane_size(self, pane_id: str) -> tuple[int, int]:
        rect = self._boxes()[id(self._window(pane_id))]
        return rect.height, rect.width

    def pane_geometry(self, pane_id: str) -> Rect:
        if not self.report_geometry:
            return super().pane_geometry(pane_id)
        return self._boxes()[id(self._window(pane_id))]

    def pane_content(self, pane_id: str) -> str:
        return self._window(pane_id).content_id

    def pane_cursor_line(self, pane_id: str) -> int:
        return self._window(pane_id).cursor_line

    def pane_center_line(self, pane_id: str) -> int:
        height, _ = self.pane_size(pane_id)
        return self._window(pane_id).top_line + (height - 1) // 2

    def workspace_extent(self) -> Extent:
        return Extent(rows=self._extent.rows, cols=self._extent.cols)

    # ========== Commands ==========

    def focus_pane(self, pane_id: str) -> None:
        self._focus(self._window(pane_id))

    def move_focus(self, direction: Direction) -> bool:
        boxes = self._boxes()
        here = boxes[id(self._current)]
        neighbours = [
            (boxes[id(w)], w) for w in self._iter_windows(self._root)
            if _adjacent(here, boxes[id(w)], direction)
        ]
        if not neighbours:
            return False

        # Prefer the neighbour level with our own top/left edge
        if direction in (Direction.LEFT, Direction.RIGHT):
            aligned = [w for r, w in neighbours if r.top <= here.top <= r.bottom]
        else:
            aligned = [w for r, w in neighbours if r.left <= here.left <= r.right]
        self._focus(aligned[0] if aligned else neighbours[0][1])
        return True

    def open_split(self, orientation: Orientation) -> None:
        current = self._current
        total = _length(self._boxes()[id(current)], orientation)
        if total < 3:
            raise PaneError(f"not enough room to split {current.pane_id}")

        parent = current.parent
        if parent is None or parent.orientation is not orientation:
            frame = _Frame(orientation, children=[current], size=current.size, parent=parent)
            if parent is None:
                self._root = frame
            else:
                parent.children[parent.children.index(current)] = frame
            current.parent = frame
            parent = frame

        window = self._new_window()
        window.content_id = current.content_id
        window.cursor_line = current.cursor_line
        window.top_line = current.top_line
        window.parent = parent
        window.size = (total - 1) // 2
        current.size = total - 1 - window.size
        parent.children.insert(parent.children.index(current), window)
        self._focus(window)

    def resize_current(
        self,
        height: Optional[int] = None,
        width: Optional[int] = None
    ) -> None:
        if height is not None:
            self._resize(Orientation.HORIZONTAL, height)
        if width is not None:
            self._resize(Orientation.VERTICAL, width)

    def _resize(self, orientation: Orientation, length: int) -> None:
        node: _Node = self._current
        while node.parent is not None and node.parent.orientation is not orientation:
            node = node.parent
        frame = node.parent
        if frame is None:
            return  # already spans the whole workspace on this axis

        boxes = self._boxes()
        last = len(frame.children) - 1
        index = frame.children.index(node)
        donor_index = index - 1 if index == last else index + 1
        donor = frame.children[donor_index]

        current = _length(boxes[id(node)], orientation)
        donor_length = _length(boxes[id(donor)], orientation)
        ceiling = current + donor_length - self._min_length(donor, orientation)
        length = max(self._min_length(node, orientation), min(length, ceiling))
        if index != last:
            node.size = length
        if donor_index != last:
            donor.size = donor_length - (length - current)

    def only(self) -> None:
        current = self._current
        current.parent = None
        current.size = 0
        self._root = current
        self._windows = {current.pane_id: current}
        self._previous = None

    def set_content(self, content_id: str) -> None:
        if self.contents is not None and content_id not in self.contents:
            raise PaneError(f"content not available: {content_id}")
        self._current.content_id = content_id
        self._current.cursor_line = 1
        self._current.top_line = 1

    def set_cursor_line(self, line: int) -> None:
        window = self._current
        height, _ = self.pane_size(window.pane_id)
        window.cursor_line = max(1, line)
        # Keep the cursor inside the viewport
        if window.cursor_line < window.top_line:
            window.top_line = window.cursor_line
        elif window.cursor_line > window.top_line + height - 1:
            window.top_line = window.cursor_line - height + 1

    def center_viewport(self) -> None:
        window = self._current
        height, _ = self.pane_size(window.pane_id)
        window.top_line = max(1, window.cursor_line - (height - 1) // 2)
