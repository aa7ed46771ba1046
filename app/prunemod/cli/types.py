"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum
from pathlib import Path

import typer

from prunemod.core.config import (
    PruneConfig,
    PruneConfigError,
    load_config,
    load_config_or_default,
)
from prunemod.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for CLI commands."""

    TABLE = "table"
    JSON = "json"


def get_config_path_option(ctx: typer.Context) -> Path | None:
    """Get the ``--config`` path given to the main command, if any."""
    if isinstance(ctx.obj, dict):
        path = ctx.obj.get("config_path")
        if isinstance(path, Path):
            return path
    return None


def is_verbose(ctx: typer.Context) -> bool:
    """Check if the main command was invoked with ``--verbose``."""
    return isinstance(ctx.obj, dict) and bool(ctx.obj.get("verbose", False))


def require_config(ctx: typer.Context) -> PruneConfig:
    """Load the effective configuration or exit with an error.

    An explicitly given ``--config`` file must exist. Without one, a
    missing default config file yields the built-in defaults.

    Args:
        ctx: Typer context of the running command.

    Returns:
        Loaded PruneConfig.

    Raises:
        typer.Exit: If the config file is missing or invalid.
    """
    path = get_config_path_option(ctx)
    try:
        if path is not None:
            return load_config(path)
        return load_config_or_default()
    except PruneConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e
