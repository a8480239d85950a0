"""Config file location for dircount.

The config lives in the XDG config home: ``$XDG_CONFIG_HOME/dircount/``,
falling back to ``~/.config/dircount/`` when the variable is unset or
empty. dircount keeps no state or cache files.
"""

import os
from pathlib import Path

APP_NAME = "dircount"
CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the dircount configuration directory.

    Returns:
        XDG_CONFIG_HOME/dircount/, or ~/.config/dircount/ by default.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Get the default config file path used when --config is not given."""
    return get_config_dir() / CONFIG_FILENAME
