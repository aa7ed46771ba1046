"""Prune command implementation.

Removes superfluous files from a node_modules tree, or from every
dependency tree of a monorepo workspace, and prints run statistics.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from prunemod.cli.types import OutputFormat, is_verbose, require_config
from prunemod.core.config import PruneConfig
from prunemod.filesystem.defaults import DEPENDENCY_DIRECTORY
from prunemod.filesystem.models import Stats
from prunemod.filesystem.options import PrunerOptions
from prunemod.filesystem.pruner import Pruner
from prunemod.utils.formatting import (
    console,
    create_stats_table,
    format_bytes,
    print_error,
    print_info,
    print_success,
    print_warning,
)


def build_options(
    config: PruneConfig,
    directory: Path,
    *,
    verbose: bool = False,
    dry_run: bool = False,
    exclude: list[str] | None = None,
    include: list[str] | None = None,
    workspace: bool | None = None,
    workspace_root: Path | None = None,
    include_root: bool | None = None,
    experimental_files: bool | None = None,
) -> PrunerOptions:
    """Merge command line values over the configuration file.

    A value given on the command line replaces the configured one. Flags
    left as None and empty glob lists fall back to the configuration.

    Args:
        config: Loaded configuration.
        directory: Directory to prune.
        verbose: Log every pruned entry.
        dry_run: Do not remove anything.
        exclude: Globs never removed.
        include: Globs always removed.
        workspace: Enable workspace mode.
        workspace_root: Directory to start workspace detection from.
        include_root: Prune the workspace root's dependencies.
        experimental_files: Add the experimental file list.

    Returns:
        Options for the Pruner.

    Raises:
        ValidationError: If the merged values are invalid.
    """
    return PrunerOptions(
        directory=directory,
        verbose=verbose,
        dry_run=dry_run,
        exceptions=tuple(exclude or config.exclude),
        globs=tuple(include or config.include),
        extensions=_as_tuple(config.extensions),
        directories=_as_tuple(config.directories),
        files=_as_tuple(config.files),
        workspace=workspace if workspace is not None else config.workspace,
        workspace_root=workspace_root,
        include_root=include_root if include_root is not None else config.include_root,
        experimental_default_files=(
            experimental_files
            if experimental_files is not None
            else config.experimental_default_files
        ),
        directory_concurrency=config.directory_concurrency,
        removal_concurrency=config.removal_concurrency,
    )


def _as_tuple(values: list[str] | None) -> tuple[str, ...] | None:
    return tuple(values) if values is not None else None


def prune_command(
    ctx: typer.Context,
    directory: Annotated[
        Path,
        typer.Argument(help="Dependency tree to prune, or a directory inside a workspace."),
    ] = Path(DEPENDENCY_DIRECTORY),
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            help="Glob of files never removed (repeatable).",
        ),
    ] = None,
    include: Annotated[
        list[str] | None,
        typer.Option(
            "--include",
            "-i",
            help="Glob of files always removed (repeatable).",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-d",
            help="Show what would be removed without removing it.",
        ),
    ] = False,
    workspace: Annotated[
        bool | None,
        typer.Option(
            "--workspace/--no-workspace",
            "-w",
            help="Prune every package of the detected workspace.",
        ),
    ] = None,
    workspace_root: Annotated[
        Path | None,
        typer.Option(
            "--workspace-root",
            help="Start workspace detection from this directory.",
        ),
    ] = None,
    include_root: Annotated[
        bool | None,
        typer.Option(
            "--root/--no-root",
            help="Also prune the workspace root's node_modules.",
        ),
    ] = None,
    experimental_files: Annotated[
        bool | None,
        typer.Option(
            "--experimental-files/--no-experimental-files",
            help="Also remove build and tooling configuration files.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Remove tests, docs and tooling files from node_modules.

    Examples:
        prunemod prune                          # Prune ./node_modules
        prunemod prune --dry-run                # Only report what would go
        prunemod prune -e "*.d.ts" -e "LICENSE" # Keep matching files
        prunemod prune --workspace              # Prune every workspace package
        prunemod prune --format json            # Statistics as JSON
    """
    config = require_config(ctx)

    try:
        options = build_options(
            config,
            directory,
            verbose=is_verbose(ctx),
            dry_run=dry_run,
            exclude=exclude,
            include=include,
            workspace=workspace,
            workspace_root=workspace_root,
            include_root=include_root,
            experimental_files=experimental_files,
        )
    except ValidationError as e:
        print_error(f"Invalid options: {e}")
        raise typer.Exit(code=1) from e

    if not options.workspace and not directory.is_dir() and output_format == OutputFormat.TABLE:
        print_warning(f"Directory not found: {directory}")

    start = time.perf_counter()
    try:
        stats = Pruner(options).prune()
    except (OSError, RuntimeError) as e:
        print_error(f"Prune failed: {e}")
        raise typer.Exit(code=1) from e
    duration = time.perf_counter() - start

    if output_format == OutputFormat.JSON:
        _print_json(stats, duration, dry_run=options.dry_run)
        return

    console.print(create_stats_table(stats, duration, dry_run=options.dry_run))
    _print_summary(stats, dry_run=options.dry_run)


def _print_json(stats: Stats, duration: float, *, dry_run: bool) -> None:
    """Display run statistics as JSON."""
    data: dict[str, object] = {
        **stats.to_dict(),
        "duration_seconds": round(duration, 3),
        "dry_run": dry_run,
    }
    console.print_json(json.dumps(data))


def _print_summary(stats: Stats, *, dry_run: bool) -> None:
    """Display a one-line summary below the statistics table."""
    if stats.files_removed == 0:
        print_info("Nothing to prune.")
        return

    freed = format_bytes(stats.size_removed)
    if dry_run:
        print_info(f"Dry-run: {stats.files_removed} entries ({freed}) would be removed.")
    else:
        print_success(f"Removed {stats.files_removed} entries, freed {freed}.")
