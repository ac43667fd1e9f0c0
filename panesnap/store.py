"""
Panesnap snapshot store.

Keeps captured layouts as named JSON files so they can be restored later.
"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

import platformdirs

from .bounds import layout_extent
from .types import InvalidInput, LayoutTree, SnapshotNotFound, layout_from_dict

logger = logging.getLogger(__name__)

SNAPSHOT_VERSION = 1

_NAME_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def get_data_dir() -> Path:
    """Get platform-specific snapshot directory."""
    return Path(platformdirs.user_data_dir("panesnap", appauthor=False))


class SnapshotStore:
    """Named layout snapshots on disk."""

    SUFFIX = ".json"

    def __init__(self, directory: Optional[Path] = None):
        """
        Initialize store.

        Args:
            directory: Snapshot directory. Uses the platform data dir if None.
        """
        self.directory = Path(directory) if directory else get_data_dir()

    def path_for(self, name: str) -> Path:
        """
        Get the file path of a snapshot.

        Raises:
            InvalidInput: If the name could escape the store directory.
        """
        if not _NAME_RE.match(name):
            raise InvalidInput(f"invalid snapshot name: {name!r}")
        return self.directory / f"{name}{self.SUFFIX}"

    def save(self, name: str, tree: LayoutTree) -> Path:
        """Store a layout under ``name``, replacing any previous one."""
        path = self.path_for(name)
        extent = layout_extent(tree)
        data = {
            "version": SNAPSHOT_VERSION,
            "extent": {"rows": extent.rows, "cols": extent.cols},
            "layout": tree.to_dict(),
        }
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as f:
            json.dump(data, f, indent=2)
        logger.debug(f"saved snapshot {name} to {path}")
        return path

    def load(self, name: str) -> LayoutTree:
        """
        Load the layout stored under ``name``.

        Raises:
            SnapshotNotFound: If no such snapshot exists.
            InvalidInput: If the file is not a valid snapshot.
        """
        path = self.path_for(name)
        if not path.exists():
            raise SnapshotNotFound(name)

        try:
            with open(path) as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidInput(f"snapshot {name} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or data.get("version") != SNAPSHOT_VERSION:
            raise InvalidInput(f"snapshot {name} has an unsupported format")
        return layout_from_dict(data.get("layout"))

    def names(self) -> list[str]:
        """Names of all stored snapshots, sorted."""
        if not self.directory.exists():
            return []
        return sorted(p.stem for p in self.directory.glob(f"*{self.SUFFIX}"))

    def delete(self, name: str) -> bool:
        """
        Delete a snapshot.

        Returns:
            True if a snapshot was removed.
        """
        path = self.path_for(name)
        if not path.exists():
            return False
        path.unlink()
        return True
