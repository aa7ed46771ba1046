"""Unit tests for config CLI commands.

Tests for the prunemod config show, init and path commands.
"""

import tomllib
from pathlib import Path

from prunemod.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


def _env(tmp_path: Path) -> dict[str, str]:
    return {"XDG_CONFIG_HOME": str(tmp_path)}


class TestConfigPath:
    """Tests for prunemod config path."""

    def test_default_path(self, tmp_path: Path) -> None:
        """The XDG config path is printed."""
        result = runner.invoke(app, ["config", "path"], env=_env(tmp_path))

        assert result.exit_code == 0
        assert result.stdout.strip() == str(tmp_path / "prunemod" / "config.toml")

    def test_explicit_path(self, tmp_path: Path) -> None:
        """--config changes the printed path."""
        custom = tmp_path / "custom.toml"

        result = runner.invoke(app, ["--config", str(custom), "config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(custom)


class TestConfigInit:
    """Tests for prunemod config init."""

    def test_creates_config(self, tmp_path: Path) -> None:
        """init writes the default config."""
        result = runner.invoke(app, ["config", "init"], env=_env(tmp_path))

        config_path = tmp_path / "prunemod" / "config.toml"
        assert result.exit_code == 0
        assert config_path.exists()
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["include_root"] is True
        assert data["directory_concurrency"] == 5

    def test_refuses_overwrite(self, tmp_path: Path) -> None:
        """init does not overwrite an existing config."""
        config_path = tmp_path / "prunemod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("workspace = true\n")

        result = runner.invoke(app, ["config", "init"], env=_env(tmp_path))

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_path.read_text() == "workspace = true\n"

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """init --force replaces an existing config."""
        config_path = tmp_path / "prunemod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("workspace = true\n")

        result = runner.invoke(app, ["config", "init", "--force"], env=_env(tmp_path))

        assert result.exit_code == 0
        with open(config_path, "rb") as f:
            assert tomllib.load(f)["workspace"] is False

    def test_explicit_path(self, tmp_path: Path) -> None:
        """init writes to the --config path."""
        custom = tmp_path / "nested" / "custom.toml"

        result = runner.invoke(app, ["--config", str(custom), "config", "init"])

        assert result.exit_code == 0
        assert custom.exists()


class TestConfigShow:
    """Tests for prunemod config show."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        """show prints the defaults when no config file exists."""
        result = runner.invoke(app, ["config", "show"], env=_env(tmp_path))

        assert result.exit_code == 0
        assert "include_root = true" in result.stdout
        assert "workspace = false" in result.stdout

    def test_shows_file_values(self, tmp_path: Path) -> None:
        """show reflects the config file."""
        config_path = tmp_path / "prunemod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text('exclude = ["*.d.ts"]\nworkspace = true\n')

        result = runner.invoke(app, ["config", "show"], env=_env(tmp_path))

        assert result.exit_code == 0
        assert "workspace = true" in result.stdout
        assert "*.d.ts" in result.stdout

    def test_invalid_file(self, tmp_path: Path) -> None:
        """show fails on an invalid config file."""
        config_path = tmp_path / "prunemod" / "config.toml"
        config_path.parent.mkdir(parents=True)
        config_path.write_text("unknown_key = 1\n")

        result = runner.invoke(app, ["config", "show"], env=_env(tmp_path))

        assert result.exit_code == 1
        assert "Invalid config content" in result.output
