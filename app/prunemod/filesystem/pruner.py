"""Pruning of installed dependency trees.

Walks one dependency tree, or the dependency tree of every package of a
detected workspace, classifies each entry against the run's ``RuleSet``
and queues matching entries for removal. Nothing is removed while
walking: the queue is drained by a ``RemovalExecutor`` once every tree
has been walked.
"""

import logging
import os
import threading
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from prunemod.core.manifest import ManifestCache
from prunemod.filesystem.models import RemovalCandidate, Stats
from prunemod.filesystem.operator import RemovalExecutor
from prunemod.filesystem.options import PrunerOptions
from prunemod.filesystem.rules import RuleSet
from prunemod.filesystem.usage import directory_size, subtree_stats
from prunemod.workspace.detector import WorkspaceDetector

logger = logging.getLogger(__name__)


class Pruner:
    """Removes superfluous files from installed package trees.

    One instance owns the removal queue and the manifest cache of a run;
    both are cleared at the start and end of every ``prune`` call.

    Args:
        options: Run configuration. Defaults to pruning ``node_modules``
            in the current directory with the default rules.
        detector: Workspace detector used in workspace mode.
        executor: Removal executor draining the queue.
    """

    def __init__(
        self,
        options: PrunerOptions | None = None,
        *,
        detector: WorkspaceDetector | None = None,
        executor: RemovalExecutor | None = None,
    ) -> None:
        self._options = options if options is not None else PrunerOptions()
        self._rules = RuleSet.from_options(self._options)
        self._detector = detector if detector is not None else WorkspaceDetector()
        self._executor = (
            executor
            if executor is not None
            else RemovalExecutor(
                dry_run=self._options.dry_run,
                verbose=self._options.verbose,
                concurrency=self._options.removal_concurrency,
            )
        )

        self._manifests = ManifestCache()
        self._queue: list[RemovalCandidate] = []
        self._lock = threading.Lock()

    @property
    def options(self) -> PrunerOptions:
        """Get the run configuration."""
        return self._options

    @property
    def rules(self) -> RuleSet:
        """Get the rule set built from the options."""
        return self._rules

    @property
    def queue(self) -> tuple[RemovalCandidate, ...]:
        """Get a snapshot of the removal queue."""
        with self._lock:
            return tuple(self._queue)

    def prune(self) -> Stats:
        """Run a complete prune: resolve targets, walk, then remove.

        The size before pruning is measured over exactly the directories
        that are walked, before anything is touched.

        Returns:
            Statistics of the run.
        """
        self._manifests.clear()
        self._queue.clear()

        try:
            targets = self.resolve_targets()
            stats = Stats(size_before=sum(directory_size(target) for target in targets))

            for target in targets:
                self.walk(target, stats)

            self._executor.execute(self.queue)
            stats.size_after = stats.size_before - stats.size_removed
            return stats
        finally:
            self._manifests.clear()
            self._queue.clear()

    def resolve_targets(self) -> list[Path]:
        """Determine the dependency trees to walk.

        Outside workspace mode this is the configured directory. In
        workspace mode it is the hoisted dependency tree (when
        ``include_root`` is set) followed by every package's own tree;
        missing trees are skipped. If no workspace is detected, the
        configured directory is used.

        Returns:
            Directories to walk, each listed once.
        """
        directory = self._options.directory
        if not self._options.workspace:
            return [directory]

        start = self._options.workspace_root or directory
        info = self._detector.detect(start)

        if not info.detected:
            logger.info("No workspace configuration detected, falling back to standard pruning")
            return [directory]

        logger.info("Detected %s workspace at %s", info.type.value, info.root)
        if self._options.verbose:
            logger.info("Found %d workspace packages", len(info.packages))

        targets: list[Path] = []
        hoisted = info.hoisted_dependencies
        if self._options.include_root and hoisted is not None:
            if hoisted.is_dir():
                if self._options.verbose:
                    logger.info("Pruning root dependencies at %s", hoisted)
                targets.append(hoisted)
            elif self._options.verbose:
                logger.info("Root dependencies not found at %s", hoisted)

        for package, dependencies in zip(info.packages, info.package_dependencies, strict=True):
            if not dependencies.is_dir():
                if self._options.verbose:
                    logger.info("No dependencies found in package at %s", package)
                continue
            if dependencies in targets:
                continue
            if self._options.verbose:
                logger.info("Pruning package dependencies at %s", dependencies)
            targets.append(dependencies)

        return targets

    def walk(self, directory: Path | str, stats: Stats) -> None:
        """Walk one tree, counting entries and queueing removals.

        Directories are listed level by level in batches of
        ``directory_concurrency``; file sizes are read through a separate
        pool of ``stat_concurrency`` workers.

        Args:
            directory: Root of the tree to walk.
            stats: Statistics updated in place.
        """
        options = self._options
        frontier: deque[str] = deque([os.fspath(directory)])

        with (
            ThreadPoolExecutor(max_workers=options.directory_concurrency) as dir_pool,
            ThreadPoolExecutor(max_workers=options.stat_concurrency) as stat_pool,
        ):
            while frontier:
                size = min(options.directory_concurrency, len(frontier))
                batch = [frontier.popleft() for _ in range(size)]
                futures = [
                    dir_pool.submit(self._scan_directory, path, stats, stat_pool) for path in batch
                ]
                for future in futures:
                    frontier.extend(future.result())

    def _scan_directory(
        self,
        directory: str,
        stats: Stats,
        stat_pool: ThreadPoolExecutor,
    ) -> list[str]:
        """Classify the entries of one directory.

        Args:
            directory: Directory to list.
            stats: Statistics updated in place.
            stat_pool: Pool used for file stat calls.

        Returns:
            Subdirectories that were kept and must be walked next.
        """
        try:
            with os.scandir(directory) as it:
                entries = list(it)
        except OSError as e:
            if self._options.verbose:
                logger.error("Error walking directory %s: %s", directory, e)
            return []

        subdirectories: list[str] = []
        files: list[os.DirEntry[str]] = []

        for entry in entries:
            self._record(stats, total=1)

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False

            if is_dir:
                if self._rules.should_prune(entry.path, entry.name, is_dir=True):
                    self._queue_directory(entry.path, stats)
                else:
                    subdirectories.append(entry.path)
            elif self._rules.should_prune(
                entry.path,
                entry.name,
                is_dir=False,
                is_main_entry=self._manifests.is_main_entry,
            ):
                files.append(entry)

        for entry, size in zip(files, stat_pool.map(_entry_size, files), strict=True):
            if size is None:
                continue
            self._log_prune("file", entry.path)
            self._record(stats, removed=1, size=size)
            self._enqueue(RemovalCandidate(path=entry.path, is_directory=False, size=size))

        return subdirectories

    def _queue_directory(self, path: str, stats: Stats) -> None:
        self._log_prune("directory", path)
        subtree = subtree_stats(path)
        self._record(stats, total=subtree.entries, removed=subtree.entries, size=subtree.size)
        self._enqueue(RemovalCandidate(path=path, is_directory=True, size=subtree.size))

    def _record(self, stats: Stats, *, total: int = 0, removed: int = 0, size: int = 0) -> None:
        with self._lock:
            stats.files_total += total
            stats.files_removed += removed
            stats.size_removed += size

    def _enqueue(self, candidate: RemovalCandidate) -> None:
        with self._lock:
            self._queue.append(candidate)

    def _log_prune(self, kind: str, path: str) -> None:
        if self._options.verbose:
            prefix = "[DRY RUN] " if self._options.dry_run else ""
            logger.info("%sPrune %s: %s", prefix, kind, path)


def _entry_size(entry: os.DirEntry[str]) -> int | None:
    """Get the size of a directory entry, None if it vanished."""
    try:
        return entry.stat(follow_symlinks=False).st_size
    except OSError:
        return None
