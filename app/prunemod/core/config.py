"""User configuration for prunemod.

This module provides the configuration model and I/O functions for the
defaults applied to every ``prunemod prune`` run. Command line options
always take precedence over values from the configuration file.

Configuration is stored in ~/.config/prunemod/config.toml
"""

import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from prunemod.core.paths import get_config_path


class PruneConfig(BaseModel):
    """Defaults for prune runs.

    Attributes:
        exclude: Glob patterns of paths that are never removed.
        include: Glob patterns of additional paths to remove.
        extensions: Replacement for the default extension list.
        directories: Replacement for the default directory list.
        files: Replacement for the default file list.
        workspace: Prune every package of a detected workspace.
        include_root: Also prune the workspace root's dependencies.
        experimental_default_files: Add the experimental file list.
        directory_concurrency: Directories listed in parallel.
        removal_concurrency: Removals executed in parallel.
    """

    model_config = ConfigDict(extra="forbid")

    exclude: Annotated[
        list[str],
        Field(description="Glob patterns never removed"),
    ] = Field(default_factory=list)
    include: Annotated[
        list[str],
        Field(description="Glob patterns always removed"),
    ] = Field(default_factory=list)
    extensions: Annotated[
        list[str] | None,
        Field(description="Extension list (None = built-in defaults)"),
    ] = None
    directories: Annotated[
        list[str] | None,
        Field(description="Directory list (None = built-in defaults)"),
    ] = None
    files: Annotated[
        list[str] | None,
        Field(description="File list (None = built-in defaults)"),
    ] = None
    workspace: bool = False
    include_root: bool = True
    experimental_default_files: bool = False
    directory_concurrency: Annotated[
        int,
        Field(ge=1, le=64, description="Parallel directory listings (1-64)"),
    ] = 5
    removal_concurrency: Annotated[
        int,
        Field(ge=1, le=64, description="Parallel removals (1-64)"),
    ] = 10


class PruneConfigError(Exception):
    """Base exception for configuration errors."""


class PruneConfigNotFoundError(PruneConfigError):
    """Raised when the config file is not found."""


class PruneConfigParseError(PruneConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> PruneConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated PruneConfig object.

    Raises:
        PruneConfigNotFoundError: If the config file doesn't exist.
        PruneConfigParseError: If the TOML syntax is invalid.
        PruneConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise PruneConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise PruneConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise PruneConfigError(f"Failed to read config: {e}") from e

    try:
        return PruneConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise PruneConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> PruneConfig:
    """Load configuration, falling back to defaults if the file is missing.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Loaded PruneConfig, or the default config when no file exists.

    Raises:
        PruneConfigParseError: If the TOML syntax is invalid.
        PruneConfigError: If the content doesn't match the schema.
    """
    try:
        return load_config(path)
    except PruneConfigNotFoundError:
        return get_default_config()


def save_config(config: PruneConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written to a temporary file in the target directory and
    moved into place with os.replace().

    Args:
        config: The PruneConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        PruneConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise PruneConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: PruneConfig) -> dict[str, object]:
    """Convert PruneConfig to a dictionary for TOML serialization.

    TOML has no null value, so unset override lists are left out.

    Args:
        config: The PruneConfig to convert.

    Returns:
        Dictionary ready for TOML serialization.
    """
    return config.model_dump(exclude_none=True)


def get_default_config() -> PruneConfig:
    """Create a default PruneConfig.

    Returns:
        PruneConfig with default settings.
    """
    return PruneConfig()
