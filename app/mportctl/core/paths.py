"""XDG-compliant path management for mportctl.

XDG defaults:
- Config: ~/.config/mportctl/
- State: ~/.local/state/mportctl/
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "mportctl"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/mportctl/ (or XDG_CONFIG_HOME/mportctl/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Get the state directory path.

    The local package database snapshot lives here by default.

    Returns:
        Path to ~/.local/state/mportctl/ (or XDG_STATE_HOME/mportctl/).
    """
    return _get_xdg_dir("XDG_STATE_HOME", ".local/state")


def get_config_path() -> Path:
    """Get the default configuration file path.

    Returns:
        Path to ~/.config/mportctl/config.toml.
    """
    return get_config_dir() / "config.toml"


def get_database_path() -> Path:
    """Get the default package database path.

    Returns:
        Path to ~/.local/state/mportctl/packages.toml.
    """
    return get_state_dir() / "packages.toml"

