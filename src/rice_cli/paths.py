"""Centralized file names for the files rice-cli writes.

Both files live in the project root (the directory the wizard runs in):

    <project>/
    ├── rice.config.js  # Which services are enabled (read by the SDK)
    └── .env            # Connection parameters and tokens
"""

from __future__ import annotations

from pathlib import Path

# Module-style settings document consumed by the SDK
SETTINGS_FILE = "rice.config.js"

# Flat KEY=value file holding connection parameters
ENV_FILE = ".env"


def get_settings_path(root: Path | str = ".", name: str = SETTINGS_FILE) -> Path:
    """Get the settings document path for a project root.

    Args:
        root: Project root directory (default: current directory)
        name: File name override (default: rice.config.js)

    Returns:
        Path to the settings document
    """
    return Path(root).resolve() / name


def get_env_path(root: Path | str = ".", name: str = ENV_FILE) -> Path:
    """Get the environment file path for a project root.

    Args:
        root: Project root directory (default: current directory)
        name: File name override (default: .env)

    Returns:
        Path to the environment file
    """
    return Path(root).resolve() / name


__all__ = [
    "SETTINGS_FILE",
    "ENV_FILE",
    "get_settings_path",
    "get_env_path",
]
