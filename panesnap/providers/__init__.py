"""
Panesnap surfaces.

Surfaces abstract the window primitives of different terminal multiplexers
and editors.
"""

from .base import Surface
from .tmux import TmuxSurface
from .memory import MemorySurface

__all__ = ["Surface", "TmuxSurface", "MemorySurface"]
