"""Removal rules and entry classification.

A ``RuleSet`` is built once per ``Pruner`` from its options and decides,
per directory entry, whether the entry should be removed. The decision
is a pure function of the entry name and path; protection of a
package's declared main file is layered on top through an injected
lookup so that it only runs for files that would otherwise be removed.
"""

import fnmatch
import os
from collections.abc import Callable
from dataclasses import dataclass

from prunemod.filesystem.defaults import (
    DEFAULT_DIRECTORIES,
    DEFAULT_EXTENSIONS,
    DEFAULT_FILES,
    EXPERIMENTAL_DEFAULT_FILES,
    PACKAGE_MANIFEST,
)
from prunemod.filesystem.options import PrunerOptions

# Answers "is this file its package's declared main entry".
MainEntryLookup = Callable[[str], bool]


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Membership tables and globs used to classify entries.

    Attributes:
        directories: Directory basenames to remove.
        files: File basenames (or exact paths) to remove.
        extensions: File extensions to remove, including the leading dot.
        exceptions: Basename globs that are never removed.
        globs: Basename globs that are always removed.
    """

    directories: frozenset[str]
    files: frozenset[str]
    extensions: frozenset[str]
    exceptions: tuple[str, ...] = ()
    globs: tuple[str, ...] = ()

    @classmethod
    def from_options(cls, options: PrunerOptions) -> "RuleSet":
        """Build the rule set for a run.

        Each of ``directories``, ``files`` and ``extensions`` is taken
        verbatim from the options when given (even if empty) and from the
        default table otherwise. Experimental default files only extend
        the default file table, never a caller-supplied one.

        Args:
            options: Run configuration.

        Returns:
            RuleSet for the run.
        """
        if options.files is not None:
            files = frozenset(options.files)
        elif options.experimental_default_files:
            files = frozenset(DEFAULT_FILES) | frozenset(EXPERIMENTAL_DEFAULT_FILES)
        else:
            files = frozenset(DEFAULT_FILES)

        directories = (
            options.directories if options.directories is not None else DEFAULT_DIRECTORIES
        )
        extensions = options.extensions if options.extensions is not None else DEFAULT_EXTENSIONS

        return cls(
            directories=frozenset(directories),
            files=files,
            extensions=frozenset(extensions),
            exceptions=tuple(options.exceptions),
            globs=tuple(options.globs),
        )

    def matches(self, path: str, name: str, *, is_dir: bool) -> bool:
        """Classify an entry without any filesystem access.

        Checks in order (first match wins):
        1. The package manifest itself is never removed.
        2. Exception globs keep the entry.
        3. Inclusion globs remove the entry.
        4. Directories are removed if their name is in the directory table.
        5. Files are removed by name, by exact path, or by extension.

        Args:
            path: Full path of the entry.
            name: Basename of the entry.
            is_dir: True if the entry is a directory.

        Returns:
            True if the entry should be removed.
        """
        if name == PACKAGE_MANIFEST:
            return False

        if any(fnmatch.fnmatchcase(name, glob) for glob in self.exceptions):
            return False

        if any(fnmatch.fnmatchcase(name, glob) for glob in self.globs):
            return True

        if is_dir:
            return name in self.directories

        if name in self.files or path in self.files:
            return True

        return os.path.splitext(name)[1] in self.extensions

    def should_prune(
        self,
        path: str,
        name: str,
        *,
        is_dir: bool,
        is_main_entry: MainEntryLookup | None = None,
    ) -> bool:
        """Classify an entry, protecting declared package main files.

        The lookup is only consulted for files that ``matches`` would
        remove, so entries that are kept anyway never trigger a manifest
        read. Main-file protection wins over every removal rule, including
        inclusion globs.

        Args:
            path: Full path of the entry.
            name: Basename of the entry.
            is_dir: True if the entry is a directory.
            is_main_entry: Lookup for the package main file, or None to
                skip main-file protection.

        Returns:
            True if the entry should be removed.
        """
        if not self.matches(path, name, is_dir=is_dir):
            return False
        if is_dir or is_main_entry is None:
            return True
        return not is_main_entry(path)
