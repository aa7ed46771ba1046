"""Workspace domain models.

This module defines the workspace tool classification, the result of
workspace detection, and Pydantic models for the configuration files of
the monorepo tools whose package lists are read directly.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from prunemod.core.manifest import DEPENDENCY_DIRECTORY


class WorkspaceType(str, Enum):
    """Tool managing a workspace.

    Attributes:
        NONE: No workspace configuration was found.
        NPM: npm workspaces (``workspaces`` in package.json).
        YARN: Yarn workspaces (``workspaces`` plus ``yarn.lock``).
        PNPM: pnpm (``pnpm-workspace.yaml``).
        LERNA: Lerna (``lerna.json``).
        NX: Nx (``nx.json`` / ``workspace.json``).
        RUSH: Rush (``rush.json``).
        BUN: Bun workspaces (``workspaces`` plus ``bun.lockb``).
        TURBO: Turborepo (``turbo.json``).
    """

    NONE = "none"
    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    LERNA = "lerna"
    NX = "nx"
    RUSH = "rush"
    BUN = "bun"
    TURBO = "turbo"


@dataclass(frozen=True, slots=True)
class WorkspaceInfo:
    """Result of workspace detection.

    Attributes:
        type: Tool managing the workspace.
        root: Workspace root, or the queried directory if none was found.
        packages: Package directories of the workspace.
        hoisted_dependencies: The root's shared dependency directory,
            None when no workspace was found.
    """

    type: WorkspaceType
    root: Path
    packages: tuple[Path, ...] = field(default_factory=tuple)
    hoisted_dependencies: Path | None = None

    @property
    def package_dependencies(self) -> tuple[Path, ...]:
        """Get the dependency directory of every package."""
        return tuple(pkg / DEPENDENCY_DIRECTORY for pkg in self.packages)

    @property
    def detected(self) -> bool:
        """Check if a workspace was found."""
        return self.type != WorkspaceType.NONE

    def to_dict(self) -> dict[str, object]:
        """Return the detection result as JSON-compatible data."""
        return {
            "type": self.type.value,
            "root": str(self.root),
            "hoisted_dependencies": (
                str(self.hoisted_dependencies) if self.hoisted_dependencies is not None else None
            ),
            "packages": [str(pkg) for pkg in self.packages],
        }


class LernaConfig(BaseModel):
    """The subset of ``lerna.json`` used for package discovery."""

    model_config = ConfigDict(extra="ignore")

    packages: list[str] | None = None


class RushProject(BaseModel):
    """A project entry of ``rush.json``."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    project_folder: str = Field(alias="projectFolder")


class RushConfig(BaseModel):
    """The subset of ``rush.json`` used for package discovery."""

    model_config = ConfigDict(extra="ignore")

    projects: list[RushProject] = Field(default_factory=list)


class NxProject(BaseModel):
    """Object form of a project entry in ``workspace.json``."""

    model_config = ConfigDict(extra="ignore")

    root: str


class NxWorkspaceConfig(BaseModel):
    """The subset of ``workspace.json`` used for package discovery."""

    model_config = ConfigDict(extra="ignore")

    projects: dict[str, str | NxProject] | None = None
