"""Removal of queued prune candidates.

Drains the removal queue built by the walker. Directories are removed
before any file, in bounded concurrent batches, and per-path failures
are reported as results instead of aborting the run.
"""

import logging
import os
import shutil
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from prunemod.filesystem.models import RemovalCandidate, RemovalResult

logger = logging.getLogger(__name__)

DEFAULT_REMOVAL_CONCURRENCY = 10


class RemovalExecutor:
    """Removes prune candidates from the filesystem.

    Supports dry-run mode, in which nothing is touched and every
    candidate is reported as a dry-run result.

    Attributes:
        _dry_run: If True, report removals without performing them.
        _verbose: If True, log failures and the dry-run summary.
        _concurrency: Number of removals issued per batch.
    """

    def __init__(
        self,
        *,
        dry_run: bool = False,
        verbose: bool = False,
        concurrency: int = DEFAULT_REMOVAL_CONCURRENCY,
    ) -> None:
        """Initialize the RemovalExecutor.

        Args:
            dry_run: If True, report what would be removed without removing.
            verbose: If True, log removal failures.
            concurrency: Maximum number of concurrent removals.
        """
        if concurrency < 1:
            msg = f"Concurrency must be at least 1, got {concurrency}"
            raise ValueError(msg)
        self._dry_run = dry_run
        self._verbose = verbose
        self._concurrency = concurrency

    def execute(self, candidates: Iterable[RemovalCandidate]) -> list[RemovalResult]:
        """Remove all candidates, directories first.

        The queue is stable-sorted so that every directory is removed
        before any file. Directory removals complete before the first file
        removal starts.

        Args:
            candidates: Candidates queued by the walker.

        Returns:
            List of RemovalResult, one per candidate, in processing order.
        """
        queue = sorted(candidates, key=lambda c: not c.is_directory)

        if self._dry_run:
            if self._verbose:
                logger.info("[DRY RUN] Would remove %d items", len(queue))
            return [RemovalResult(path=c.path, success=True, dry_run=True) for c in queue]

        if not queue:
            return []

        directories = [c for c in queue if c.is_directory]
        files = [c for c in queue if not c.is_directory]

        results: list[RemovalResult] = []
        with ThreadPoolExecutor(max_workers=self._concurrency) as pool:
            for phase in (directories, files):
                for start in range(0, len(phase), self._concurrency):
                    batch = phase[start : start + self._concurrency]
                    results.extend(pool.map(self._remove_single, batch))
        return results

    def _remove_single(self, candidate: RemovalCandidate) -> RemovalResult:
        """Remove a single candidate.

        Directories are removed recursively and a directory that is
        already gone counts as removed. Files are unlinked.

        Args:
            candidate: Candidate to remove.

        Returns:
            RemovalResult indicating success or failure.
        """
        try:
            if candidate.is_directory:
                try:
                    shutil.rmtree(candidate.path)
                except FileNotFoundError:
                    pass
            else:
                os.unlink(candidate.path)
        except OSError as e:
            if self._verbose:
                logger.error("Error removing %s: %s", candidate.path, e)
            return RemovalResult(path=candidate.path, success=False, error=str(e))

        return RemovalResult(path=candidate.path, success=True)
