"""Filesystem domain models for a pruning run.

This module defines the data structures shared by the walker and the
removal executor: the aggregate statistics of a run, the candidates
queued for removal, and the per-candidate removal outcome.
"""

from dataclasses import dataclass


@dataclass(slots=True)
class Stats:
    """Aggregate counters for one pruning run.

    Instances are mutated while the tree is walked. Concurrent walkers
    must serialize updates themselves (``Pruner`` holds a lock for this).

    Attributes:
        files_total: Entries visited, including entries nested under
            removed directories.
        files_removed: Entries removed (or that would be removed in dry-run).
        size_removed: Bytes removed.
        size_before: Bytes in all considered trees before pruning.
        size_after: ``size_before - size_removed``, computed at the end.
    """

    files_total: int = 0
    files_removed: int = 0
    size_removed: int = 0
    size_before: int = 0
    size_after: int = 0

    def to_dict(self) -> dict[str, int]:
        """Return the counters as a plain dictionary."""
        return {
            "files_total": self.files_total,
            "files_removed": self.files_removed,
            "size_removed": self.size_removed,
            "size_before": self.size_before,
            "size_after": self.size_after,
        }


@dataclass(frozen=True, slots=True)
class RemovalCandidate:
    """A path queued for removal after classification.

    Attributes:
        path: Absolute or root-relative path of the entry.
        is_directory: True if the entry is removed recursively.
        size: Bytes accounted for the entry (whole subtree for directories).
    """

    path: str
    is_directory: bool
    size: int = 0

    def __post_init__(self) -> None:
        """Validate candidate data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size cannot be negative, got {self.size}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class RemovalResult:
    """Result of removing a single candidate.

    Attributes:
        path: Path that was operated on.
        success: Whether the removal completed successfully.
        error: Error message if the removal failed, None otherwise.
        dry_run: Whether this was a dry-run (nothing was removed).
    """

    path: str
    success: bool
    error: str | None = None
    dry_run: bool = False
