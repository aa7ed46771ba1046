"""Dependency tree pruning module.

This module provides the default removal rules, rule-based entry
classification, package manifest lookup, the tree walker and the
removal executor for the filesystem domain.
"""

from prunemod.core.manifest import ManifestCache, PackageManifest, read_manifest
from prunemod.filesystem.defaults import (
    DEFAULT_DIRECTORIES,
    DEFAULT_EXTENSIONS,
    DEFAULT_FILES,
    DEPENDENCY_DIRECTORY,
    EXPERIMENTAL_DEFAULT_FILES,
    PACKAGE_MANIFEST,
)
from prunemod.filesystem.models import RemovalCandidate, RemovalResult, Stats
from prunemod.filesystem.operator import RemovalExecutor
from prunemod.filesystem.options import PrunerOptions
from prunemod.filesystem.pruner import Pruner
from prunemod.filesystem.rules import RuleSet

__all__ = [
    "DEFAULT_DIRECTORIES",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_FILES",
    "DEPENDENCY_DIRECTORY",
    "EXPERIMENTAL_DEFAULT_FILES",
    "PACKAGE_MANIFEST",
    "ManifestCache",
    "PackageManifest",
    "Pruner",
    "PrunerOptions",
    "RemovalCandidate",
    "RemovalExecutor",
    "RemovalResult",
    "RuleSet",
    "Stats",
    "read_manifest",
]
