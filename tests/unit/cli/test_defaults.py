"""Unit tests for the defaults CLI command."""

import json

from prunemod.cli.commands.defaults import get_default_tables
from prunemod.cli.main import app
from prunemod.filesystem.defaults import DEFAULT_FILES, EXPERIMENTAL_DEFAULT_FILES
from typer.testing import CliRunner

runner = CliRunner()


class TestDefaultsCommand:
    """Tests for prunemod defaults."""

    def test_table_output(self) -> None:
        """Every default table is printed."""
        result = runner.invoke(app, ["defaults"])

        assert result.exit_code == 0
        assert "Default directories" in result.stdout
        assert "Default files" in result.stdout
        assert "Default extensions" in result.stdout
        assert "LICENSE" in result.stdout

    def test_headings_on_one_line(self) -> None:
        """Each heading carries its entry count on the same line."""
        result = runner.invoke(app, ["defaults"])
        tables = get_default_tables()

        assert result.exit_code == 0
        lines = [line.strip() for line in result.stdout.splitlines()]
        for name, entries in tables.items():
            assert f"Default {name} ({len(entries)})" in lines

    def test_json_output(self) -> None:
        """JSON output contains the three tables."""
        result = runner.invoke(app, ["defaults", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert set(data) == {"directories", "files", "extensions"}
        assert "webpack.config.js" not in data["files"]

    def test_experimental(self) -> None:
        """--experimental adds the experimental files."""
        result = runner.invoke(app, ["defaults", "--experimental", "--format", "json"])

        assert result.exit_code == 0
        assert "webpack.config.js" in json.loads(result.stdout)["files"]


class TestGetDefaultTables:
    """Tests for get_default_tables."""

    def test_default_files(self) -> None:
        """Without experimental files the file table equals the default."""
        assert get_default_tables()["files"] == DEFAULT_FILES

    def test_experimental_files_appended(self) -> None:
        """Experimental files follow the default files."""
        files = get_default_tables(experimental=True)["files"]

        assert files == DEFAULT_FILES + EXPERIMENTAL_DEFAULT_FILES
