"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

PackageFactory = Callable[..., Path]


def write_files(root: Path, files: dict[str, str]) -> None:
    """Create files below a directory, creating parents as needed."""
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)


@pytest.fixture
def node_modules(tmp_path: Path) -> Path:
    """A small installed dependency tree.

    Layout::

        node_modules/
            test-package/      main: index.js
                package.json index.js README.md LICENSE .eslintrc .prettierrc
                docs/guide.md  test/test.spec.js  lib/util.js
            other-package/     main: main.ts
                package.json main.ts helper.ts
    """
    root = tmp_path.resolve() / "node_modules"
    write_files(
        root / "test-package",
        {
            "package.json": json.dumps({"name": "test-package", "main": "index.js"}),
            "index.js": "module.exports = require('./lib/util');\n",
            "README.md": "# test-package\n\nDocumentation.\n",
            "LICENSE": "MIT License\n",
            ".eslintrc": '{"extends": "standard"}\n',
            ".prettierrc": '{"semi": false}\n',
            "docs/guide.md": "# Guide\n",
            "test/test.spec.js": "it('works', () => {});\n",
            "lib/util.js": "module.exports = {};\n",
        },
    )
    write_files(
        root / "other-package",
        {
            "package.json": json.dumps({"name": "other-package", "main": "main.ts"}),
            "main.ts": "export const main = 1;\n",
            "helper.ts": "export const helper = 2;\n",
        },
    )
    return root


@pytest.fixture
def make_package() -> PackageFactory:
    """Factory creating a package directory with a package.json.

    Call as ``make_package(path, name=..., **manifest_fields)``; extra
    files are given through ``files={relative: content}``.
    """

    def _make(
        path: Path,
        name: str | None = None,
        files: dict[str, str] | None = None,
        **manifest: object,
    ) -> Path:
        path.mkdir(parents=True, exist_ok=True)
        data: dict[str, object] = {"name": name or path.name, **manifest}
        (path / "package.json").write_text(json.dumps(data))
        if files:
            write_files(path, files)
        return path

    return _make


@pytest.fixture
def npm_workspace(tmp_path: Path, make_package: PackageFactory) -> Path:
    """An npm workspace with two packages and hoisted dependencies.

    ``packages/a`` has its own node_modules, ``packages/b`` has none.
    """
    root = tmp_path.resolve() / "monorepo"
    make_package(root, name="monorepo", workspaces=["packages/*"])
    make_package(
        root / "node_modules" / "shared",
        files={"README.md": "# shared\n", "index.js": "module.exports = 1;\n"},
        main="index.js",
    )
    make_package(root / "packages" / "a")
    make_package(
        root / "packages" / "a" / "node_modules" / "dep",
        files={"README.md": "# dep\n", "index.js": "module.exports = 2;\n"},
        main="index.js",
    )
    make_package(root / "packages" / "b")
    return root
