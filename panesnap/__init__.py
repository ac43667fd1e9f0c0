"""
Panesnap - Capture and restore split-pane layouts.

Infers a size-independent split tree from the geometry of the panes tiling
a workspace, and rebuilds it later, scaled to the current workspace size,
with each pane's content, cursor and the focus put back.

Basic Usage:
    from panesnap import capture_layout, restore_layout
    from panesnap.providers import TmuxSurface

    surface = TmuxSurface()
    tree = capture_layout(surface)

    # ... later, possibly after the terminal was resized
    restore_layout(surface, tree)

Working with rectangles directly:
    from panesnap import Rect, infer_layout

    tree = infer_layout([
        Rect(left=1, right=40, top=1, bottom=24),
        Rect(left=42, right=80, top=1, bottom=24),
    ])
    # Split(orientation=Orientation.VERTICAL, children=[Leaf(...), Leaf(...)])
"""

__version__ = "0.1.0"
__author__ = "Panesnap Contributors"

# Core types
from .types import (
    Rect,
    Bounds,
    Extent,
    Leaf,
    Split,
    LayoutTree,
    Placement,
    Orientation,
    Direction,
    LayoutError,
    InvalidInput,
    PaneError,
    SnapshotNotFound,
    iter_leaves,
    layout_from_dict,
)

# Pipeline
from .bounds import compute_bounds, layout_bounds, layout_extent
from .inference import infer_layout
from .scaling import scale_layout
from .capture import FocusGuard, LayoutCapturer, capture_layout
from .restore import Materializer, ViewRestorer, restore_layout
from .store import SnapshotStore

# Configuration
from .config import (
    PanesnapConfig,
    CaptureConfig,
    RestoreConfig,
    StoreConfig,
    load_config,
    save_config,
    get_config_path,
)

from . import providers

__all__ = [
    # Version
    "__version__",

    # Types
    "Rect",
    "Bounds",
    "Extent",
    "Leaf",
    "Split",
    "LayoutTree",
    "Placement",
    "Orientation",
    "Direction",
    "LayoutError",
    "InvalidInput",
    "PaneError",
    "SnapshotNotFound",
    "iter_leaves",
    "layout_from_dict",

    # Pipeline
    "compute_bounds",
    "layout_bounds",
    "layout_extent",
    "infer_layout",
    "scale_layout",
    "FocusGuard",
    "LayoutCapturer",
    "capture_layout",
    "Materializer",
    "ViewRestorer",
    "restore_layout",
    "SnapshotStore",

    # Configuration
    "PanesnapConfig",
    "CaptureConfig",
    "RestoreConfig",
    "StoreConfig",
    "load_config",
    "save_config",
    "get_config_path",

    # Submodules
    "providers",
]
