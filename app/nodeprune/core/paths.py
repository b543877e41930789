"""Location of the user configuration file (XDG base directories)."""

import os
from pathlib import Path

APP_NAME = "nodeprune"

CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Directory holding the nodeprune configuration.

    ``$XDG_CONFIG_HOME/nodeprune`` when the variable is set and non-empty,
    otherwise ``~/.config/nodeprune``.
    """
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_config_path() -> Path:
    """Default configuration file path."""
    return get_config_dir() / CONFIG_FILENAME
