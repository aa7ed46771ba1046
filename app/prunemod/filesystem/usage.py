"""Disk usage helpers for dependency trees.

Uses ``os.scandir`` and never follows symbolic links. Unreadable
directories and entries that vanish mid-scan are skipped.
"""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class SubtreeStats:
    """Entry count and size of a directory subtree.

    Attributes:
        entries: Number of entries (files and directories) below the root.
        size: Total size in bytes of the non-directory entries.
    """

    entries: int
    size: int


def subtree_stats(path: Path | str) -> SubtreeStats:
    """Count every entry below a directory and sum the file sizes.

    The directory itself is not counted.

    Args:
        path: Directory to measure.

    Returns:
        SubtreeStats for the subtree, zero if the directory is unreadable.
    """
    entries = 0
    size = 0
    pending = [os.fspath(path)]

    while pending:
        current = pending.pop()
        try:
            with os.scandir(current) as it:
                for entry in it:
                    entries += 1
                    try:
                        if entry.is_dir(follow_symlinks=False):
                            pending.append(entry.path)
                        else:
                            size += entry.stat(follow_symlinks=False).st_size
                    except OSError:
                        continue
        except OSError:
            continue

    return SubtreeStats(entries=entries, size=size)


def directory_size(path: Path | str) -> int:
    """Get the total size in bytes of the files below a directory.

    Args:
        path: Directory to measure.

    Returns:
        Size in bytes, 0 if the directory does not exist or is unreadable.
    """
    return subtree_stats(path).size
