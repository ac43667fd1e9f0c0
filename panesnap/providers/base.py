"""
Base surface interface for Panesnap.

Defines the window-surface primitives the capture and restore pipeline
drives. Concrete surfaces wrap a terminal multiplexer or editor.
"""

from abc import ABC, abstractmethod
from typing import Optional

from ..types import Direction, Extent, Orientation, Rect


class Surface(ABC):
    """Abstract base class for host window surfaces.

    Pane lookups raise ``PaneError`` when the pane or content no longer
    exists.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Surface name."""
        pass

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this surface is usable in the current environment."""
        pass

    # ========== Queries ==========

    @abstractmethod
    def pane_ids(self) -> list[str]:
        """Get the ids of all panes in the workspace."""
        pass

    def pane_count(self) -> int:
        """Number of panes in the workspace."""
        return len(self.pane_ids())

    @abstractmethod
    def current_pane_id(self) -> str:
        """Get the focused pane."""
        pass

    @abstractmethod
    def previous_pane_id(self) -> Optional[str]:
        """Get the previously focused pane, if the host tracks one."""
        pass

    @abstractmethod
    def pane_size(self, pane_id: str) -> tuple[int, int]:
        """
        Get pane dimensions.

        Args:
            pane_id: Pane to query.

        Returns:
            Tuple of (height, width).
        """
        pass

    def pane_geometry(self, pane_id: str) -> Rect:
        """
        Get absolute pane bounds.

        Surfaces that cannot report positions leave this unimplemented;
        capture then resolves positions by moving focus between neighbours.

        Args:
            pane_id: Pane to query.

        Returns:
            Rect carrying only bounds and ``pane_id``.
        """
        raise NotImplementedError("Absolute geometry not supported by this surface")

    @abstractmethod
    def pane_content(self, pane_id: str) -> str:
        """Get the content id displayed in a pane."""
        pass

    @abstractmethod
    def pane_cursor_line(self, pane_id: str) -> int:
        """Get the cursor line of a pane."""
        pass

    @abstractmethod
    def pane_center_line(self, pane_id: str) -> int:
        """Get the content line shown in the middle of a pane."""
        pass

    @abstractmethod
    def workspace_extent(self) -> Extent:
        """Usable workspace size, excluding reserved status rows."""
        pass

    # ========== Commands ==========

    @abstractmethod
    def focus_pane(self, pane_id: str) -> None:
        """Focus a pane."""
        pass

    @abstractmethod
    def move_focus(self, direction: Direction) -> bool:
        """
        Move focus to the neighbouring pane.

        Returns:
            True if focus moved.
        """
        pass

    @abstractmethod
    def open_split(self, orientation: Orientation) -> None:
        """
        Split the focused pane.

        The new pane is placed above (horizontal) or left of (vertical) the
        focused pane and receives focus.
        """
        pass

    @abstractmethod
    def resize_current(
        self,
        height: Optional[int] = None,
        width: Optional[int] = None
    ) -> None:
        """
        Resize the focused pane.

        Args:
            height: New height (None to keep current).
            width: New width (None to keep current).
        """
        pass

    @abstractmethod
    def only(self) -> None:
        """Close every pane except the focused one."""
        pass

    @abstractmethod
    def set_content(self, content_id: str) -> None:
        """Display content in the focused pane."""
        pass

    @abstractmethod
    def set_cursor_line(self, line: int) -> None:
        """Move the cursor of the focused pane."""
        pass

    @abstractmethod
    def center_viewport(self) -> None:
        """Scroll the focused pane so the cursor line sits in the middle."""
        pass
