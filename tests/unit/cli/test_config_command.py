"""Unit tests for the config CLI commands."""

from collections.abc import Callable
from pathlib import Path

from assettree import __version__
from assettree.cli.main import app
from assettree.core.config import AssetTreeConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigShow:
    """Tests for assettree config show."""

    def test_defaults_without_file(self) -> None:
        """Without a config file the defaults are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "No config file at" in result.stdout
        assert 'on_error = "raise"' in result.stdout
        assert "resource base:" in result.stdout

    def test_shows_file_values(self, config_writer: Callable[[str], Path]) -> None:
        """Values from the config file are shown."""
        config_writer('on_error = "skip"\n')

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Config file:" in result.stdout
        assert 'on_error = "skip"' in result.stdout

    def test_explicit_path(self, tmp_path: Path) -> None:
        """--path reads another config file and skips the base listing."""
        path = tmp_path / "other.toml"
        path.write_text('ignored_filenames = ["Icon"]\n')

        result = runner.invoke(app, ["config", "show", "--path", str(path)])

        assert result.exit_code == 0
        assert '"Icon"' in result.stdout
        assert "resource base:" not in result.stdout

    def test_invalid_file(self, config_writer: Callable[[str], Path]) -> None:
        """An invalid config file exits with an error."""
        config_writer("on_error = ")

        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 1
        assert "Invalid TOML" in (result.stdout + (result.stderr or ""))


class TestConfigInit:
    """Tests for assettree config init."""

    def test_writes_defaults(self, isolated_dirs: Path) -> None:
        """init writes a default config to the XDG path."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "Config written to" in result.stdout
        config_path = isolated_dirs / "config" / "assettree" / "config.toml"
        assert load_config(config_path) == AssetTreeConfig()

    def test_refuses_overwrite(self, config_writer: Callable[[str], Path]) -> None:
        """An existing file is kept without --force."""
        path = config_writer('on_error = "skip"\n')

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert "Config already exists" in (result.stdout + (result.stderr or ""))
        assert 'on_error = "skip"' in path.read_text()

    def test_force_overwrites(self, config_writer: Callable[[str], Path]) -> None:
        """--force replaces an existing file."""
        path = config_writer('on_error = "skip"\n')

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(path) == AssetTreeConfig()


class TestMainApp:
    """Tests for global options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert f"assettree version {__version__}" in result.stdout

    def test_no_args_shows_help(self) -> None:
        """Running without a command shows help."""
        result = runner.invoke(app, [])

        output = result.stdout + (result.stderr or "")
        assert "tree" in output
        assert "names" in output
