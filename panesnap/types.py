"""
Panesnap type definitions.

Core data structures used throughout the library: pane rectangles, the
split tree built from them, and the errors raised along the pipeline.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Iterator, Union


class LayoutError(Exception):
    """Base class for all panesnap errors."""


class InvalidInput(LayoutError, ValueError):
    """Rectangle set or serialized layout cannot be turned into a tree."""


class PaneError(LayoutError):
    """Host surface could not resolve a pane or its content."""


class SnapshotNotFound(LayoutError, KeyError):
    """No stored snapshot under the requested name."""


class Orientation(Enum):
    """Split orientation, named after the divider it draws."""

    HORIZONTAL = "horizontal"  # children stacked top to bottom
    VERTICAL = "vertical"      # children side by side

    @property
    def opposite(self) -> "Orientation":
        if self is Orientation.HORIZONTAL:
            return Orientation.VERTICAL
        return Orientation.HORIZONTAL


class Direction(Enum):
    """Focus movement directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Extent:
    """Usable workspace size."""

    rows: int
    cols: int


@dataclass
class Rect:
    """Geometry and view state of a single pane (1-based, inclusive)."""

    left: int
    right: int
    top: int
    bottom: int
    pane_id: str = ""
    content_id: str = ""
    cursor_line: int = 1
    center_line: int = 1
    is_current: bool = False
    is_previous: bool = False

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.bottom - self.top + 1

    def leading(self, axis: Orientation) -> int:
        """Leading coordinate along the major axis of ``axis``."""
        return self.top if axis is Orientation.HORIZONTAL else self.left

    def trailing(self, axis: Orientation) -> int:
        """Trailing coordinate along the major axis of ``axis``."""
        return self.bottom if axis is Orientation.HORIZONTAL else self.right

    def span(self, axis: Orientation) -> int:
        """Length across the major axis of ``axis`` (the minor extent)."""
        return self.width if axis is Orientation.HORIZONTAL else self.height


@dataclass
class Bounds:
    """Enclosing box of a rect set plus outward separator coordinates."""

    left: int
    right: int
    top: int
    bottom: int
    xs: list[int] = field(default_factory=list)
    ys: list[int] = field(default_factory=list)

    def cuts(self, axis: Orientation) -> list[int]:
        return self.ys if axis is Orientation.HORIZONTAL else self.xs

    def leading(self, axis: Orientation) -> int:
        return self.top if axis is Orientation.HORIZONTAL else self.left

    def span(self, axis: Orientation) -> int:
        """Minor-axis length of the region for cuts along ``axis``."""
        if axis is Orientation.HORIZONTAL:
            return self.right - self.left + 1
        return self.bottom - self.top + 1


@dataclass
class Leaf:
    """A single pane."""

    rect: Rect

    def to_dict(self) -> dict:
        return {"type": "leaf", "rect": asdict(self.rect)}


@dataclass
class Split:
    """A full-span cut of its bounding box into ordered children."""

    orientation: Orientation
    children: list["LayoutTree"] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "type": "split",
            "orientation": self.orientation.value,
            "children": [child.to_dict() for child in self.children],
        }


LayoutTree = Union[Leaf, Split]


@dataclass
class Placement:
    """A leaf and the pane it was materialized into."""

    leaf: Leaf
    pane_id: str


def iter_leaves(tree: LayoutTree) -> Iterator[Leaf]:
    """Yield leaves in traversal (top-left to bottom-right) order."""
    if isinstance(tree, Leaf):
        yield tree
        return
    for child in tree.children:
        yield from iter_leaves(child)


def layout_from_dict(data: dict) -> LayoutTree:
    """
    Rebuild a layout tree from its ``to_dict`` form.

    Raises:
        InvalidInput: If the data is not a well-formed tree.
    """
    if not isinstance(data, dict):
        raise InvalidInput(f"expected a mapping, got {type(data).__name__}")

    kind = data.get("type")
    if kind == "leaf":
        try:
            return Leaf(Rect(**data["rect"]))
        except (KeyError, TypeError) as e:
            raise InvalidInput(f"malformed leaf: {e}") from e

    if kind == "split":
        try:
            orientation = Orientation(data["orientation"])
            children = [layout_from_dict(child) for child in data["children"]]
        except (KeyError, TypeError, ValueError) as e:
            if isinstance(e, InvalidInput):
                raise
            raise InvalidInput(f"malformed split: {e}") from e
        if len(children) < 2:
            raise InvalidInput("split needs at least two children")
        return Split(orientation, children)

    raise InvalidInput(f"unknown node type: {kind!r}")
