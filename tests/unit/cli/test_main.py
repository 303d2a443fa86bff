"""Unit tests for the main CLI application.

Tests for global options and opening the package database.
"""

from pathlib import Path

import pytest
import tomli_w
from mportctl import __version__
from mportctl.cli.main import app
from mportctl.models.snapshot import PackageSnapshot
from typer.testing import CliRunner

runner = CliRunner()


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Config file path that does not exist, so defaults apply."""
    return tmp_path / "config.toml"


class TestGlobalOptions:
    """Tests for options on the root command."""

    def test_version(self) -> None:
        """--version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"mportctl version {__version__}" in result.output

    def test_help(self) -> None:
        """--help lists the commands."""
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("install", "deleteall", "list", "search", "version"):
            assert command in result.output


class TestOpenDatabase:
    """Tests for loading the database from the global options."""

    def test_database_option(
        self, tmp_path: Path, config_path: Path, sample_snapshot: PackageSnapshot
    ) -> None:
        """--database selects the snapshot file."""
        db = tmp_path / "packages.toml"
        with open(db, "wb") as f:
            tomli_w.dump(sample_snapshot.model_dump(mode="json"), f)

        result = runner.invoke(
            app, ["--config", str(config_path), "--database", str(db), "list", "-q"]
        )

        assert result.exit_code == 0
        assert result.output == "curl\nlibnghttp2\nvim\noldpkg\n"

    def test_database_from_config(
        self, tmp_path: Path, config_path: Path, sample_snapshot: PackageSnapshot
    ) -> None:
        """The config file names the snapshot file."""
        db = tmp_path / "db.toml"
        with open(db, "wb") as f:
            tomli_w.dump(sample_snapshot.model_dump(mode="json"), f)
        config_path.write_text(f'database = "{db}"\n')

        result = runner.invoke(app, ["--config", str(config_path), "stats"])

        assert result.exit_code == 0
        assert "Installed packages: 4" in result.output

    def test_missing_database(self, tmp_path: Path, config_path: Path) -> None:
        """A missing database exits with the store error code."""
        result = runner.invoke(
            app,
            ["--config", str(config_path), "--database", str(tmp_path / "none.toml"), "stats"],
        )

        assert result.exit_code == 8
        assert "Package database not found" in result.output

    def test_invalid_config(self, config_path: Path) -> None:
        """A broken config file exits as invalid input."""
        config_path.write_text("delete_timeout = 0\n")

        result = runner.invoke(app, ["--config", str(config_path), "stats"])

        assert result.exit_code == 2
        assert "Invalid config content" in result.output
