"""Unit tests for init command."""

import tomllib
from pathlib import Path

from rmprogress.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestInitCommand:
    """Tests for rmprogress init command."""

    def test_init_help(self) -> None:
        """Init command shows help."""
        result = runner.invoke(app, ["init", "--help"])
        assert result.exit_code == 0
        assert "default configuration" in result.stdout

    def test_writes_default_config(self, isolated_config_home: Path) -> None:
        """Init writes the defaults to the XDG config path."""
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        path = isolated_config_home / "rmprogress" / "config.toml"
        with open(path, "rb") as f:
            data = tomllib.load(f)
        assert data["process_match"] == "/usr/bin/rm"
        assert data["keep_going"] is False

    def test_refuses_to_overwrite(self, tmp_path: Path) -> None:
        """An existing config is kept without --force."""
        path = tmp_path / "config.toml"
        path.write_text('process_match = "mine"\n')

        result = runner.invoke(app, ["init", "--output", str(path)])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert path.read_text() == 'process_match = "mine"\n'

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing config."""
        path = tmp_path / "config.toml"
        path.write_text('process_match = "mine"\n')

        result = runner.invoke(app, ["init", "--output", str(path), "--force"])

        assert result.exit_code == 0
        assert '"/usr/bin/rm"' in path.read_text()

    def test_bracketed_output_path_printed_literally(self, tmp_path: Path) -> None:
        """Output paths containing brackets are echoed as written."""
        with runner.isolated_filesystem(temp_dir=tmp_path):
            result = runner.invoke(app, ["init", "--output", "[x].toml"])

            assert result.exit_code == 0
            assert Path("[x].toml").is_file()
        assert "Config written to [x].toml" in result.stdout
