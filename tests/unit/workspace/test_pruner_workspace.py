"""Unit tests for workspace-aware pruning.

Tests target resolution in workspace mode, the include-root switch,
the fallback to standard pruning and the verbose workspace messages.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from prunemod.filesystem.options import PrunerOptions
from prunemod.filesystem.pruner import Pruner
from prunemod.workspace.detector import WorkspaceDetector
from prunemod.workspace.models import WorkspaceInfo, WorkspaceType

PackageFactory = Callable[..., Path]


class TestResolveTargets:
    """Tests for Pruner.resolve_targets."""

    def test_standard_mode(self, tmp_path: Path) -> None:
        """Outside workspace mode the configured directory is the only target."""
        pruner = Pruner(PrunerOptions(directory=tmp_path / "node_modules"))

        assert pruner.resolve_targets() == [tmp_path / "node_modules"]

    def test_workspace_targets(self, npm_workspace: Path) -> None:
        """The hoisted tree comes first, then packages with dependencies."""
        pruner = Pruner(PrunerOptions(directory=npm_workspace, workspace=True))

        assert pruner.resolve_targets() == [
            npm_workspace / "node_modules",
            npm_workspace / "packages" / "a" / "node_modules",
        ]

    def test_without_root(self, npm_workspace: Path) -> None:
        """include_root=False skips the hoisted tree."""
        options = PrunerOptions(directory=npm_workspace, workspace=True, include_root=False)

        assert Pruner(options).resolve_targets() == [
            npm_workspace / "packages" / "a" / "node_modules",
        ]

    def test_workspace_root_option(self, npm_workspace: Path, tmp_path: Path) -> None:
        """workspace_root overrides the directory used for detection."""
        options = PrunerOptions(
            directory=tmp_path / "elsewhere",
            workspace=True,
            workspace_root=npm_workspace / "packages" / "b",
        )

        assert Pruner(options).resolve_targets()[0] == npm_workspace / "node_modules"

    def test_fallback_without_workspace(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Without a detected workspace the configured directory is pruned."""
        caplog.set_level(logging.INFO, logger="prunemod")
        directory = tmp_path.resolve() / "node_modules"
        directory.mkdir()

        targets = Pruner(PrunerOptions(directory=directory, workspace=True)).resolve_targets()

        assert targets == [directory]
        assert "No workspace configuration detected, falling back to standard pruning" in (
            caplog.text
        )

    def test_duplicate_targets_walked_once(self, tmp_path: Path) -> None:
        """A package whose tree equals the hoisted tree is listed once."""
        root = tmp_path.resolve()
        (root / "node_modules").mkdir()
        detector = MagicMock(spec=WorkspaceDetector)
        detector.detect.return_value = WorkspaceInfo(
            type=WorkspaceType.NPM,
            root=root,
            packages=(root,),
            hoisted_dependencies=root / "node_modules",
        )

        options = PrunerOptions(directory=root, workspace=True)
        targets = Pruner(options, detector=detector).resolve_targets()

        assert targets == [root / "node_modules"]

    def test_detected_workspace_logged(
        self, npm_workspace: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The detected tool and root are logged."""
        caplog.set_level(logging.INFO, logger="prunemod")

        Pruner(PrunerOptions(directory=npm_workspace, workspace=True)).resolve_targets()

        assert f"Detected npm workspace at {npm_workspace}" in caplog.text

    def test_verbose_messages(self, npm_workspace: Path, caplog: pytest.LogCaptureFixture) -> None:
        """Verbose mode reports package counts and skipped packages."""
        caplog.set_level(logging.INFO, logger="prunemod")
        options = PrunerOptions(directory=npm_workspace, workspace=True, verbose=True)

        Pruner(options).resolve_targets()

        assert "Found 2 workspace packages" in caplog.text
        assert f"Pruning root dependencies at {npm_workspace / 'node_modules'}" in caplog.text
        assert f"No dependencies found in package at {npm_workspace / 'packages' / 'b'}" in (
            caplog.text
        )

    def test_missing_root_dependencies(
        self, tmp_path: Path, make_package: PackageFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A workspace without hoisted dependencies is reported in verbose mode."""
        caplog.set_level(logging.INFO, logger="prunemod")
        root = tmp_path.resolve() / "repo"
        make_package(root, workspaces=["packages/*"])
        make_package(root / "packages" / "a")

        options = PrunerOptions(directory=root, workspace=True, verbose=True)
        targets = Pruner(options).resolve_targets()

        assert targets == []
        assert "Root dependencies not found at" in caplog.text


class TestWorkspacePrune:
    """Tests for complete pruning runs in workspace mode."""

    def test_prunes_root_and_packages(self, npm_workspace: Path) -> None:
        """Both the hoisted tree and package trees are pruned."""
        stats = Pruner(PrunerOptions(directory=npm_workspace, workspace=True)).prune()

        assert not (npm_workspace / "node_modules" / "shared" / "README.md").exists()
        dep = npm_workspace / "packages" / "a" / "node_modules" / "dep"
        assert not (dep / "README.md").exists()
        assert (dep / "index.js").exists()
        assert stats.files_removed == 2

    def test_workspace_sources_untouched(self, npm_workspace: Path) -> None:
        """Files outside the dependency trees are never touched."""
        readme = npm_workspace / "packages" / "a" / "README.md"
        readme.write_text("# a\n")

        Pruner(PrunerOptions(directory=npm_workspace, workspace=True)).prune()

        assert readme.exists()

    def test_without_root(self, npm_workspace: Path) -> None:
        """include_root=False leaves the hoisted tree alone."""
        options = PrunerOptions(directory=npm_workspace, workspace=True, include_root=False)

        Pruner(options).prune()

        assert (npm_workspace / "node_modules" / "shared" / "README.md").exists()
        assert not (
            npm_workspace / "packages" / "a" / "node_modules" / "dep" / "README.md"
        ).exists()

    def test_size_before_covers_all_targets(self, npm_workspace: Path) -> None:
        """size_before sums every pruned tree."""
        stats = Pruner(
            PrunerOptions(directory=npm_workspace, workspace=True, dry_run=True)
        ).prune()

        expected = sum(
            p.stat().st_size
            for tree in (
                npm_workspace / "node_modules",
                npm_workspace / "packages" / "a" / "node_modules",
            )
            for p in tree.rglob("*")
            if p.is_file()
        )
        assert stats.size_before == expected
