"""Unit tests for the default rule tables."""

from prunemod.filesystem.defaults import (
    DEFAULT_DIRECTORIES,
    DEFAULT_EXTENSIONS,
    DEFAULT_FILES,
    DEPENDENCY_DIRECTORY,
    EXPERIMENTAL_DEFAULT_FILES,
    PACKAGE_MANIFEST,
)


class TestDefaultTables:
    """Tests for the contents of the default tables."""

    def test_required_files(self) -> None:
        """Common documentation and linter files are listed."""
        for name in ("LICENSE", "README", ".eslintrc", ".prettierrc"):
            assert name in DEFAULT_FILES

    def test_required_directories(self) -> None:
        """Test, docs and CI directories are listed."""
        for name in ("test", "docs", ".github"):
            assert name in DEFAULT_DIRECTORIES

    def test_required_extensions(self) -> None:
        """Markdown, TypeScript and CoffeeScript sources are listed."""
        for ext in (".md", ".ts", ".coffee"):
            assert ext in DEFAULT_EXTENSIONS

    def test_extensions_have_leading_dot(self) -> None:
        """Every extension starts with a dot."""
        assert all(ext.startswith(".") for ext in DEFAULT_EXTENSIONS)

    def test_manifest_never_listed(self) -> None:
        """The package manifest is in no removal table."""
        assert PACKAGE_MANIFEST not in DEFAULT_FILES
        assert PACKAGE_MANIFEST not in EXPERIMENTAL_DEFAULT_FILES

    def test_no_duplicates(self) -> None:
        """Tables list each entry once."""
        for table in (DEFAULT_DIRECTORIES, DEFAULT_FILES, DEFAULT_EXTENSIONS):
            assert len(table) == len(set(table))

    def test_experimental_disjoint_from_defaults(self) -> None:
        """Experimental files are not already default files."""
        assert not set(EXPERIMENTAL_DEFAULT_FILES) & set(DEFAULT_FILES)

    def test_constants(self) -> None:
        """Manifest and dependency directory names."""
        assert PACKAGE_MANIFEST == "package.json"
        assert DEPENDENCY_DIRECTORY == "node_modules"
