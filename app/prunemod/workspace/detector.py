"""Workspace detection for multi-package repositories.

Walks upward from a directory to the nearest workspace root, classifies
the tool managing it (npm, Yarn, pnpm, Lerna, Nx, Rush, Bun, Turborepo)
and expands its package patterns into package directories. Detection is
best-effort: unreadable or malformed configuration yields no packages
from that source instead of an error.
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ValidationError

from prunemod.core.manifest import (
    DEPENDENCY_DIRECTORY,
    PACKAGE_MANIFEST,
    PackageManifest,
    read_manifest,
)
from prunemod.workspace.models import (
    LernaConfig,
    NxProject,
    NxWorkspaceConfig,
    RushConfig,
    WorkspaceInfo,
    WorkspaceType,
)
from prunemod.workspace.patterns import parse_pnpm_packages, resolve_patterns

logger = logging.getLogger(__name__)

_PNPM_WORKSPACE_FILES: tuple[str, ...] = ("pnpm-workspace.yaml", "pnpm-workspace.yml")

# Marker files in type-classification priority order.
_MARKERS: tuple[tuple[str, WorkspaceType], ...] = (
    ("turbo.json", WorkspaceType.TURBO),
    ("lerna.json", WorkspaceType.LERNA),
    ("nx.json", WorkspaceType.NX),
    ("rush.json", WorkspaceType.RUSH),
    ("pnpm-workspace.yaml", WorkspaceType.PNPM),
    ("pnpm-workspace.yml", WorkspaceType.PNPM),
)

_BUN_LOCKFILES: tuple[str, ...] = ("bun.lockb", "bun.lock")

_LERNA_DEFAULT_PATTERNS: list[str] = ["packages/*"]
_NX_DEFAULT_PATTERNS: list[str] = ["apps/*", "libs/*", "packages/*"]
_TURBO_DEFAULT_PATTERNS: list[str] = ["apps/*", "packages/*"]


class WorkspaceDetector:
    """Detects workspace roots and their packages.

    Results are memoized per queried directory for the lifetime of the
    instance. Use one detector per run, or call ``clear_cache`` when
    the filesystem may have changed.
    """

    def __init__(self) -> None:
        self._cache: dict[str, WorkspaceInfo] = {}

    def detect(self, directory: Path | str) -> WorkspaceInfo:
        """Detect the workspace containing a directory.

        Args:
            directory: Directory to start the upward search from.

        Returns:
            WorkspaceInfo for the nearest workspace root, or a NONE result
            rooted at ``directory`` when no workspace was found.
        """
        key = str(directory)
        cached = self._cache.get(key)
        if cached is not None:
            return cached

        info = self._detect_workspace(Path(directory))
        self._cache[key] = info
        return info

    def clear_cache(self) -> None:
        """Forget all memoized detection results."""
        self._cache.clear()

    def _detect_workspace(self, directory: Path) -> WorkspaceInfo:
        root = self.find_workspace_root(directory)
        if root is None:
            return WorkspaceInfo(type=WorkspaceType.NONE, root=directory)

        workspace_type = self.detect_workspace_type(root)
        packages = self.get_workspace_packages(root, workspace_type)

        return WorkspaceInfo(
            type=workspace_type,
            root=root,
            packages=tuple(packages),
            hoisted_dependencies=root / DEPENDENCY_DIRECTORY,
        )

    def find_workspace_root(self, directory: Path) -> Path | None:
        """Find the nearest ancestor holding workspace configuration.

        Args:
            directory: Directory to start from (inclusive).

        Returns:
            Absolute path of the workspace root, or None if no ancestor up
            to the filesystem root holds a workspace marker.
        """
        current = directory.resolve()
        for candidate in (current, *current.parents):
            if self._has_workspace_configuration(candidate):
                return candidate
        return None

    def detect_workspace_type(self, root: Path) -> WorkspaceType:
        """Classify the tool managing a workspace root.

        Marker files win over ``package.json`` workspaces, in the order
        Turbo, Lerna, Nx, Rush, pnpm. A manifest declaring workspaces is
        Bun with a Bun lockfile, Yarn with ``yarn.lock`` and npm otherwise.

        Args:
            root: Workspace root directory.

        Returns:
            WorkspaceType of the root.
        """
        for marker, workspace_type in _MARKERS:
            if (root / marker).exists():
                return workspace_type

        manifest = read_manifest(root / PACKAGE_MANIFEST)
        if manifest is not None and manifest.declares_workspaces:
            if any((root / lockfile).exists() for lockfile in _BUN_LOCKFILES):
                return WorkspaceType.BUN
            if (root / "yarn.lock").exists():
                return WorkspaceType.YARN
            return WorkspaceType.NPM

        return WorkspaceType.NONE

    def get_workspace_packages(self, root: Path, workspace_type: WorkspaceType) -> list[Path]:
        """Enumerate the package directories of a workspace.

        Args:
            root: Workspace root directory.
            workspace_type: Tool managing the workspace.

        Returns:
            Package directories, empty if none could be resolved.
        """
        if workspace_type in (WorkspaceType.NPM, WorkspaceType.YARN, WorkspaceType.BUN):
            return self._get_manifest_workspaces(root)
        if workspace_type == WorkspaceType.PNPM:
            return self._get_pnpm_workspaces(root)
        if workspace_type == WorkspaceType.LERNA:
            return self._get_lerna_workspaces(root)
        if workspace_type == WorkspaceType.NX:
            return self._get_nx_workspaces(root)
        if workspace_type == WorkspaceType.RUSH:
            return self._get_rush_workspaces(root)
        if workspace_type == WorkspaceType.TURBO:
            return self._get_turbo_workspaces(root)
        return []

    def _has_workspace_configuration(self, directory: Path) -> bool:
        if any((directory / marker).exists() for marker, _ in _MARKERS):
            return True
        manifest = read_manifest(directory / PACKAGE_MANIFEST)
        return manifest is not None and manifest.declares_workspaces

    def _get_manifest_workspaces(self, root: Path) -> list[Path]:
        manifest = read_manifest(root / PACKAGE_MANIFEST)
        if manifest is None:
            logger.warning("Cannot read workspaces from %s", root / PACKAGE_MANIFEST)
            return []
        return resolve_patterns(root, manifest.workspace_patterns)

    def _get_pnpm_workspaces(self, root: Path) -> list[Path]:
        for filename in _PNPM_WORKSPACE_FILES:
            path = root / filename
            try:
                content = path.read_text(encoding="utf-8")
            except FileNotFoundError:
                continue
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Failed to read %s: %s", path, e)
                continue

            patterns = parse_pnpm_packages(content)
            if patterns is not None:
                return resolve_patterns(root, patterns)
        return []

    def _get_lerna_workspaces(self, root: Path) -> list[Path]:
        config = _load_json_model(root / "lerna.json", LernaConfig)
        if not isinstance(config, LernaConfig):
            return []
        patterns = config.packages if config.packages is not None else _LERNA_DEFAULT_PATTERNS
        return resolve_patterns(root, patterns)

    def _get_nx_workspaces(self, root: Path) -> list[Path]:
        workspace_json = root / "workspace.json"
        if workspace_json.exists():
            config = _load_json_model(workspace_json, NxWorkspaceConfig)
            if isinstance(config, NxWorkspaceConfig) and config.projects is not None:
                return [
                    root / (project.root if isinstance(project, NxProject) else project)
                    for project in config.projects.values()
                ]

        if (root / "nx.json").exists():
            return resolve_patterns(root, _NX_DEFAULT_PATTERNS)
        return []

    def _get_rush_workspaces(self, root: Path) -> list[Path]:
        config = _load_json_model(root / "rush.json", RushConfig)
        if not isinstance(config, RushConfig):
            return []
        return [root / project.project_folder for project in config.projects]

    def _get_turbo_workspaces(self, root: Path) -> list[Path]:
        manifest: PackageManifest | None = read_manifest(root / PACKAGE_MANIFEST)
        if manifest is not None and manifest.declares_workspaces:
            return resolve_patterns(root, manifest.workspace_patterns)

        pnpm_packages = self._get_pnpm_workspaces(root)
        if pnpm_packages:
            return pnpm_packages

        return resolve_patterns(root, _TURBO_DEFAULT_PATTERNS)


def _load_json_model(path: Path, model: type[BaseModel]) -> BaseModel | None:
    """Load a JSON file into a Pydantic model.

    Args:
        path: JSON file to read.
        model: Model class to validate against.

    Returns:
        Validated model, or None if the file is missing or invalid.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return model.model_validate(data)
    except (OSError, ValueError, ValidationError) as e:
        logger.warning("Failed to load %s: %s", path, e)
        return None
