"""XDG-compliant paths for CLI data."""

import os
from pathlib import Path

APP_NAME = "aws-ctx"
WORKSPACE_DIR = ".aws-ctx"


def config_dir() -> Path:
    """~/.config/aws-ctx/"""
    base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    return base / APP_NAME


def data_dir() -> Path:
    """~/.local/share/aws-ctx/"""
    base = Path(os.environ.get("XDG_DATA_HOME", Path.home() / ".local" / "share"))
    return base / APP_NAME


def settings_path() -> Path:
    """Global settings file."""
    return config_dir() / "settings.json"


def workspace_settings_path(root: Path) -> Path:
    """Workspace settings file under a project directory."""
    return root / WORKSPACE_DIR / "settings.json"


def state_path() -> Path:
    """Installation-scoped state (account id)."""
    return data_dir() / "state.json"
