"""Location of the prunemod user configuration.

The config file lives at ``$XDG_CONFIG_HOME/prunemod/config.toml``, or
under ``~/.config`` when the variable is unset or empty.
"""

import os
from pathlib import Path

APP_NAME = "prunemod"

CONFIG_FILENAME = "config.toml"


def get_config_dir() -> Path:
    """Get the prunemod directory below the XDG config home."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(config_home) if config_home else Path.home() / ".config"
    return base / APP_NAME


def get_config_path() -> Path:
    """Get the config file read when no ``--config`` is given."""
    return get_config_dir() / CONFIG_FILENAME


def ensure_config_dir() -> Path:
    """Create the prunemod config directory.

    Returns:
        The config directory, which exists afterwards.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    config_dir = get_config_dir()
    try:
        config_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {config_dir}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {config_dir}: {e}"
        raise RuntimeError(msg) from e
    return config_dir
