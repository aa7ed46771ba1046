"""Workspace package pattern helpers.

Patterns are resolved without deep globbing: everything before the
first ``*`` names a directory whose direct subdirectories are packages
if they hold their own manifest. A pattern without ``*`` names a single
package directory.
"""

import re
from pathlib import Path

from prunemod.core.manifest import PACKAGE_MANIFEST

# A "packages:" key followed by one or more "- item" lines.
_PNPM_PACKAGES_RE = re.compile(r"^packages:[ \t]*\n((?:[ \t]*-[ \t]*.+(?:\n|$))+)", re.MULTILINE)
_PNPM_ITEM_RE = re.compile(r"""^-\s*['"]?(.+?)['"]?$""")


def parse_pnpm_packages(content: str) -> list[str] | None:
    """Extract the ``packages:`` list of a pnpm workspace file.

    Only a plain block list of quoted or bare strings is understood.
    Negated patterns (``!pattern``) are dropped.

    Args:
        content: Text of ``pnpm-workspace.yaml``.

    Returns:
        List of patterns, or None if no ``packages:`` list was found.
    """
    match = _PNPM_PACKAGES_RE.search(content)
    if match is None:
        return None

    patterns: list[str] = []
    for line in match.group(1).splitlines():
        item = _PNPM_ITEM_RE.match(line.strip())
        if item is None:
            continue
        pattern = item.group(1).strip()
        if pattern and not pattern.startswith("!"):
            patterns.append(pattern)
    return patterns


def _is_package(path: Path) -> bool:
    return (path / PACKAGE_MANIFEST).is_file()


def resolve_patterns(root: Path, patterns: list[str]) -> list[Path]:
    """Resolve workspace patterns into package directories.

    Missing base directories and patterns that match nothing contribute
    no packages.

    Args:
        root: Workspace root the patterns are relative to.
        patterns: Workspace package patterns.

    Returns:
        Package directories in pattern order, each listed once.
    """
    packages: list[Path] = []

    for pattern in patterns:
        if "*" in pattern:
            base = root / pattern[: pattern.index("*")]
            try:
                children = sorted(base.iterdir())
            except OSError:
                continue
            for child in children:
                if child.is_dir() and _is_package(child) and child not in packages:
                    packages.append(child)
        else:
            candidate = root / pattern
            if _is_package(candidate) and candidate not in packages:
                packages.append(candidate)

    return packages
