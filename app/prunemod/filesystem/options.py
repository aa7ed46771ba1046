"""Pydantic model for the configuration of a pruning run."""

from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from prunemod.filesystem.defaults import DEPENDENCY_DIRECTORY


class PrunerOptions(BaseModel):
    """Immutable configuration of one pruning run.

    The ``extensions``, ``directories`` and ``files`` lists replace the
    corresponding default table when given, even when empty. Leave them
    as None to use the defaults.

    Attributes:
        directory: Dependency tree to prune (or workspace start directory).
        verbose: Log every pruned entry and every swallowed error.
        dry_run: Classify and count, but never touch the filesystem.
        exceptions: Basename globs that are never removed.
        globs: Basename globs that are always removed.
        extensions: Replacement for the default extension table.
        directories: Replacement for the default directory table.
        files: Replacement for the default file table.
        workspace: Prune every package of a detected workspace.
        workspace_root: Directory to start workspace detection from.
        include_root: Also prune the workspace's hoisted dependency tree.
        experimental_default_files: Extend the default file table.
        directory_concurrency: Directories listed concurrently.
        stat_concurrency: File stat calls issued concurrently.
        removal_concurrency: Removals issued concurrently.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: Annotated[Path, Field(description="Directory to prune")] = Path(
        DEPENDENCY_DIRECTORY
    )
    verbose: bool = False
    dry_run: bool = False
    exceptions: Annotated[
        tuple[str, ...],
        Field(description="Globs that are never pruned"),
    ] = ()
    globs: Annotated[
        tuple[str, ...],
        Field(description="Globs that are always pruned"),
    ] = ()
    extensions: Annotated[
        tuple[str, ...] | None,
        Field(description="Extension table override"),
    ] = None
    directories: Annotated[
        tuple[str, ...] | None,
        Field(description="Directory table override"),
    ] = None
    files: Annotated[
        tuple[str, ...] | None,
        Field(description="File table override"),
    ] = None
    workspace: bool = False
    workspace_root: Path | None = None
    include_root: bool = True
    experimental_default_files: bool = False
    directory_concurrency: Annotated[int, Field(ge=1, le=64)] = 5
    stat_concurrency: Annotated[int, Field(ge=1, le=64)] = 10
    removal_concurrency: Annotated[int, Field(ge=1, le=64)] = 10
