"""
tmux surface for Panesnap.

Implements the window-surface primitives for the tmux terminal multiplexer.
A pane's content id is its current working directory; tmux owns terminal
scrollback, so cursor and viewport commands are accepted but have no effect.
"""

import logging
import shlex
import subprocess
from typing import Optional

from .base import Surface
from ..types import Direction, Extent, Orientation, PaneError, Rect

logger = logging.getLogger(__name__)

_SELECT_FLAGS = {
    Direction.UP: "-U",
    Direction.DOWN: "-D",
    Direction.LEFT: "-L",
    Direction.RIGHT: "-R",
}

_PANE_FORMAT = "|".join([
    "#{pane_id}", "#{pane_left}", "#{pane_top}", "#{pane_width}",
    "#{pane_height}", "#{pane_active}", "#{pane_last}", "#{cursor_y}",
    "#{pane_current_path}",
])


class TmuxSurface(Surface):
    """Surface for the tmux terminal multiplexer."""

    @property
    def name(self) -> str:
        return "tmux"

    def __init__(self, window_id: Optional[str] = None):
        """
        Initialize tmux surface.

        Args:
            window_id: Window to operate on. Uses the current window if None.
        """
        self.window_id = window_id

    def _run_tmux(self, *args: str, check: bool = False) -> str:
        """Run tmux command and return output."""
        result = subprocess.run(
            ["tmux", *args],
            capture_output=True,
            text=True
        )
        if check and result.returncode != 0:
            raise PaneError(f"tmux {args[0]} failed: {result.stderr.strip()}")
        return result.stdout.strip()

    def _target(self) -> list[str]:
        return ["-t", self.window_id] if self.window_id else []

    def is_available(self) -> bool:
        """Check if tmux is available and we're in a session."""
        try:
            result = subprocess.run(
                ["tmux", "display-message", "-p", "#{session_name}"],
                capture_output=True,
                timeout=5
            )
            return result.returncode == 0 and bool(result.stdout.strip())
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return False

    def _list_panes(self) -> list[dict]:
        output = self._run_tmux("list-panes", *self._target(), "-F", _PANE_FORMAT)
        panes = []
        for line in output.split("\n"):
            if not line:
                continue
            parts = line.split("|", 8)
            if len(parts) < 9:
                continue
            panes.append({
                "pane_id": parts[0],
                "left": int(parts[1]),
                "top": int(parts[2]),
                "width": int(parts[3]),
                "height": int(parts[4]),
                "active": parts[5] == "1",
                "last": parts[6] == "1",
                "cursor_y": int(parts[7]),
                "path": parts[8],
            })
        return panes

    def _pane(self, pane_id: str) -> dict:
        for pane in self._list_panes():
            if pane["pane_id"] == pane_id:
                return pane
        raise PaneError(f"no such pane: {pane_id}")

    # ========== Queries ==========

    def pane_ids(self) -> list[str]:
        return [pane["pane_id"] for pane in self._list_panes()]

    def current_pane_id(self) -> str:
        return self._run_tmux("display-message", *self._target(), "-p", "#{pane_id}")

    def previous_pane_id(self) -> Optional[str]:
        for pane in self._list_panes():
            if pane["last"]:
                return pane["pane_id"]
        return None

    def pane_size(self, pane_id: str) -> tuple[int, int]:
        pane = self._pane(pane_id)
        return pane["height"], pane["width"]

    def pane_geometry(self, pane_id: str) -> Rect:
        # tmux positions are 0-based; dividers sit between panes as in panesnap
        pane = self._pane(pane_id)
        return Rect(
            left=pane["left"] + 1,
            right=pane["left"] + pane["width"],
            top=pane["top"] + 1,
            bottom=pane["top"] + pane["height"],
            pane_id=pane_id,
        )

    def pane_content(self, pane_id: str) -> str:
        return self._pane(pane_id)["path"]

    def pane_cursor_line(self, pane_id: str) -> int:
        return self._pane(pane_id)["cursor_y"] + 1

    def pane_center_line(self, pane_id: str) -> int:
        height, _ = self.pane_size(pane_id)
        return (height + 1) // 2

    def workspace_extent(self) -> Extent:
        """Window size; the status line is outside the window in tmux."""
        output = self._run_tmux("display-message", *self._target(), "-p", "#{window_width}|#{window_height}")
        width, height = output.split("|")
        return Extent(rows=int(height), cols=int(width))

    # ========== Commands ==========

    def focus_pane(self, pane_id: str) -> None:
        self._run_tmux("select-pane", "-t", pane_id, check=True)

    def move_focus(self, direction: Direction) -> bool:
        before = self.current_pane_id()
        self._run_tmux("select-pane", *self._target(), _SELECT_FLAGS[direction])
        return self.current_pane_id() != before

    def open_split(self, orientation: Orientation) -> None:
        flag = "-v" if orientation is Orientation.HORIZONTAL else "-h"
        self._run_tmux("split-window", "-b", flag, *self._target(), check=True)

    def resize_current(
        self,
        height: Optional[int] = None,
        width: Optional[int] = None
    ) -> None:
        pane_id = self.current_pane_id()
        if width is not None:
            self._run_tmux("resize-pane", "-t", pane_id, "-x", str(width))
        if height is not None:
            self._run_tmux("resize-pane", "-t", pane_id, "-y", str(height))

    def only(self) -> None:
        self._run_tmux("kill-pane", "-a", "-t", self.current_pane_id(), check=True)

    def set_content(self, content_id: str) -> None:
        pane_id = self.current_pane_id()
        if self._pane(pane_id)["path"] == content_id:
            return
        self._run_tmux("send-keys", "-t", pane_id, f"cd -- {shlex.quote(content_id)}", "Enter", check=True)

    def set_cursor_line(self, line: int) -> None:
        logger.debug(f"tmux cannot move the cursor to line {line}; ignored")

    def center_viewport(self) -> None:
        logger.debug("tmux cannot recenter a pane; ignored")
