"""Workspace detection module.

This module locates monorepo workspace roots, classifies the tool that
manages them and resolves their package directories.
"""

from prunemod.workspace.detector import WorkspaceDetector
from prunemod.workspace.models import WorkspaceInfo, WorkspaceType

__all__ = [
    "WorkspaceDetector",
    "WorkspaceInfo",
    "WorkspaceType",
]
