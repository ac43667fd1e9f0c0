"""
Panesnap configuration management.

Configuration priority (highest to lowest):
1. CLI arguments (--keep-panes, etc.)
2. Environment variables (PANESNAP_*)
3. Config file (~/.config/panesnap/config.json or platform-specific)
4. Default values (zero-config)

Handles loading, saving, and defaults for CLI settings.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional

import platformdirs

from .types import Orientation

logger = logging.getLogger(__name__)


@dataclass
class CaptureConfig:
    """Capture settings."""

    first_axis: str = "horizontal"  # horizontal, vertical

    @property
    def orientation(self) -> Orientation:
        return Orientation(self.first_axis)


@dataclass
class RestoreConfig:
    """Restore settings."""

    close_others: bool = True
    restore_views: bool = True


@dataclass
class StoreConfig:
    """Snapshot storage settings."""

    directory: str = ""  # empty: platform data dir
    default_name: str = "default"


@dataclass
class PanesnapConfig:
    """Main configuration container."""

    capture: CaptureConfig = field(default_factory=CaptureConfig)
    restore: RestoreConfig = field(default_factory=RestoreConfig)
    store: StoreConfig = field(default_factory=StoreConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "capture": asdict(self.capture),
            "restore": asdict(self.restore),
            "store": asdict(self.store),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "PanesnapConfig":
        """Create from dictionary."""
        return cls(
            capture=CaptureConfig(**data.get("capture", {})),
            restore=RestoreConfig(**data.get("restore", {})),
            store=StoreConfig(**data.get("store", {})),
        )

    def apply_env_overrides(self) -> "PanesnapConfig":
        """
        Apply environment variable overrides.

        Environment variables (set by tmux plugin or shell):
            PANESNAP_FIRST_AXIS - horizontal/vertical
            PANESNAP_CLOSE_OTHERS - true/false
            PANESNAP_RESTORE_VIEWS - true/false
            PANESNAP_STORE_DIR - snapshot directory
        """
        if os.environ.get("PANESNAP_FIRST_AXIS"):
            self.capture.first_axis = os.environ["PANESNAP_FIRST_AXIS"].lower()

        if os.environ.get("PANESNAP_CLOSE_OTHERS"):
            self.restore.close_others = os.environ["PANESNAP_CLOSE_OTHERS"].lower() == "true"
        if os.environ.get("PANESNAP_RESTORE_VIEWS"):
            self.restore.restore_views = os.environ["PANESNAP_RESTORE_VIEWS"].lower() == "true"

        if os.environ.get("PANESNAP_STORE_DIR"):
            self.store.directory = os.environ["PANESNAP_STORE_DIR"]

        return self


def get_config_dir() -> Path:
    """
    Get platform-specific user config directory.

    Returns:
        - Linux: ~/.config/panesnap (or $XDG_CONFIG_HOME/panesnap)
        - macOS: ~/Library/Application Support/panesnap
        - Windows: C:\\Users\\<user>\\AppData\\Roaming\\panesnap
    """
    return Path(platformdirs.user_config_dir("panesnap", appauthor=False))


def get_config_path() -> Path:
    """Get configuration file path."""
    return get_config_dir() / "config.json"


def load_config(path: Optional[Path] = None, apply_env: bool = True) -> PanesnapConfig:
    """
    Load configuration from file.

    Args:
        path: Config file path. Uses default if None.
        apply_env: Apply environment variable overrides.

    Returns:
        PanesnapConfig with loaded or default values.
    """
    config_path = path or get_config_path()
    config = PanesnapConfig()

    if config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
            config = PanesnapConfig.from_dict(data)
        except (json.JSONDecodeError, TypeError, KeyError) as e:
            logger.warning(f"ignoring invalid config {config_path}: {e}")

    if apply_env:
        config.apply_env_overrides()

    return config


def save_config(config: PanesnapConfig, path: Optional[Path] = None) -> bool:
    """
    Save configuration to file.

    Args:
        config: Configuration to save.
        path: Config file path. Uses default if None.

    Returns:
        True if successful.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w") as f:
            json.dump(config.to_dict(), f, indent=2)
        return True
    except OSError as e:
        logger.error(f"could not write config {config_path}: {e}")
        return False


def init_config(path: Optional[Path] = None) -> Path:
    """
    Initialize configuration file with defaults.

    Args:
        path: Config file path. Uses default if None.

    Returns:
        Path to created config file.
    """
    config_path = path or get_config_path()
    save_config(PanesnapConfig(), config_path)
    return config_path
