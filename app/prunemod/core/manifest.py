"""Package manifest (``package.json``) model and lookup cache.

The walker only needs a few fields of a package manifest: the declared
``main`` entry (to protect it from removal) and the workspace patterns
(for workspace detection). Unknown keys are ignored and any read or
parse failure is reported as an absent manifest.
"""

import json
import logging
import os
import threading
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

# Per-package metadata file. Never removed, regardless of any rule.
PACKAGE_MANIFEST: str = "package.json"

# Name of the installed dependency tree inside a project or package.
DEPENDENCY_DIRECTORY: str = "node_modules"


class WorkspacesConfig(BaseModel):
    """Object form of the ``workspaces`` field (``{"packages": [...]}``)."""

    model_config = ConfigDict(extra="ignore")

    packages: list[str] = Field(default_factory=list)


class BoltConfig(BaseModel):
    """The ``bolt`` section of a manifest."""

    model_config = ConfigDict(extra="ignore")

    workspaces: list[str] | None = None


class PackageManifest(BaseModel):
    """The subset of ``package.json`` used for pruning and detection.

    Attributes:
        name: Package name, if declared.
        main: Declared main entry, relative to the package directory.
        workspaces: Workspace patterns in array or object form.
        bolt: Bolt configuration, which may declare workspaces.
    """

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    main: Annotated[str | None, Field(description="Main entry file")] = None
    workspaces: list[str] | WorkspacesConfig | None = None
    bolt: BoltConfig | None = None

    @field_validator("name", "main", mode="before")
    @classmethod
    def ignore_non_string(cls, v: object) -> object:
        """Treat non-string values as undeclared."""
        return v if isinstance(v, str) else None

    @field_validator("workspaces", mode="before")
    @classmethod
    def ignore_invalid_workspaces(cls, v: object) -> object:
        """Keep string patterns only; other shapes count as undeclared."""
        if isinstance(v, list):
            return [item for item in v if isinstance(item, str)]
        if isinstance(v, dict):
            packages = v.get("packages")
            if not isinstance(packages, list):
                return {"packages": []}
            return {"packages": [item for item in packages if isinstance(item, str)]}
        return None

    @field_validator("bolt", mode="before")
    @classmethod
    def ignore_invalid_bolt(cls, v: object) -> object:
        """Treat a non-object bolt section as absent."""
        if not isinstance(v, dict):
            return None
        workspaces = v.get("workspaces")
        if not isinstance(workspaces, list):
            return {}
        return {"workspaces": [item for item in workspaces if isinstance(item, str)]}

    @property
    def declares_workspaces(self) -> bool:
        """Check if the manifest marks a workspace root."""
        return self.workspaces is not None or (
            self.bolt is not None and self.bolt.workspaces is not None
        )

    @property
    def workspace_patterns(self) -> list[str]:
        """Get the declared workspace package patterns.

        Returns:
            Patterns from ``workspaces`` (array or object form), falling
            back to ``bolt.workspaces``. Empty if none are declared.
        """
        if isinstance(self.workspaces, list):
            return list(self.workspaces)
        if isinstance(self.workspaces, WorkspacesConfig):
            return list(self.workspaces.packages)
        if self.bolt is not None and self.bolt.workspaces is not None:
            return list(self.bolt.workspaces)
        return []


def read_manifest(path: Path | str) -> PackageManifest | None:
    """Read and validate a package manifest.

    Args:
        path: Path to a ``package.json`` file.

    Returns:
        Parsed manifest, or None if the file is missing, unreadable,
        not valid JSON, or not a JSON object.
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        return PackageManifest.model_validate(data)
    except FileNotFoundError:
        return None
    except (OSError, ValueError, ValidationError) as e:
        logger.debug("Cannot read package manifest %s: %s", path, e)
        return None


class ManifestCache:
    """Thread-safe cache of parsed manifests keyed by manifest path.

    Failed reads are cached as None so that packages with a missing or
    malformed manifest are only read once per run.
    """

    def __init__(self) -> None:
        self._entries: dict[str, PackageManifest | None] = {}
        self._lock = threading.Lock()

    def get(self, manifest_path: str) -> PackageManifest | None:
        """Get a manifest, reading and caching it on first access.

        Args:
            manifest_path: Path to a ``package.json`` file.

        Returns:
            Cached manifest, or None if it could not be read.
        """
        with self._lock:
            if manifest_path in self._entries:
                return self._entries[manifest_path]

        manifest = read_manifest(manifest_path)

        with self._lock:
            return self._entries.setdefault(manifest_path, manifest)

    def is_main_entry(self, file_path: str) -> bool:
        """Check if a file is the main entry of the package containing it.

        The manifest is looked up in the file's own directory.

        Args:
            file_path: Path of the candidate file.

        Returns:
            True if the manifest's ``main`` resolves to ``file_path``.
        """
        package_dir = os.path.dirname(file_path)
        manifest = self.get(os.path.join(package_dir, PACKAGE_MANIFEST))
        if manifest is None or not manifest.main:
            return False
        main_path = os.path.abspath(os.path.join(package_dir, manifest.main))
        return main_path == os.path.abspath(file_path)

    def clear(self) -> None:
        """Drop all cached manifests."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, manifest_path: object) -> bool:
        with self._lock:
            return manifest_path in self._entries
