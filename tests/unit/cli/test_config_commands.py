"""Unit tests for config CLI commands.

Tests for dircount config path, show, init and presets.
"""

import json
from pathlib import Path

from dircount.cli.main import app
from dircount.core.config import load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigPath:
    """Tests for dircount config path."""

    def test_default_path(self, isolated_config: Path) -> None:
        """Without --config the XDG location is printed."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(isolated_config)

    def test_override_path(self, tmp_path: Path) -> None:
        """--config replaces the default location."""
        config_file = tmp_path / "custom.toml"

        result = runner.invoke(app, ["--config", str(config_file), "config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(config_file)

    def test_path_with_markup_characters(self, tmp_path: Path) -> None:
        """Brackets in the path are printed literally."""
        config_file = tmp_path / "[bold]cfg" / "config.toml"

        result = runner.invoke(app, ["--config", str(config_file), "config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(config_file)


class TestConfigShow:
    """Tests for dircount config show."""

    def test_show_defaults(self) -> None:
        """Missing config shows the defaults."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"log_level": "WARNING", "presets": {}}

    def test_show_loaded_config(self, tmp_path: Path) -> None:
        """Presets from the file are shown without empty descriptions."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            'log_level = "INFO"\n\n[presets.logs]\nparams = ["/var/log", "", "", "file"]\n'
        )

        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["log_level"] == "INFO"
        assert data["presets"] == {"logs": {"params": ["/var/log", "", "", "file"]}}

    def test_show_invalid_config(self, tmp_path: Path) -> None:
        """Schema errors exit with code 1."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("unknown = 1\n")

        result = runner.invoke(app, ["--config", str(config_file), "config", "show"])

        assert result.exit_code == 1
        assert "Invalid config content" in result.output


class TestConfigInit:
    """Tests for dircount config init."""

    def test_init_creates_file(self, isolated_config: Path) -> None:
        """Init writes a loadable default config."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert isolated_config.exists()
        assert load_config(isolated_config).log_level == "WARNING"

    def test_init_refuses_overwrite(self, isolated_config: Path) -> None:
        """Existing files are kept unless --force is given."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('log_level = "DEBUG"\n')

        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 1
        assert "Config already exists" in result.output
        assert load_config(isolated_config).log_level == "DEBUG"

    def test_init_force(self, isolated_config: Path) -> None:
        """--force overwrites the existing file."""
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text('log_level = "DEBUG"\n')

        result = runner.invoke(app, ["config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(isolated_config).log_level == "WARNING"

    def test_init_reports_path_with_markup_characters(self, tmp_path: Path) -> None:
        """The written path is shown literally in the success message."""
        config_file = tmp_path / "[x]" / "config.toml"

        result = runner.invoke(app, ["--config", str(config_file), "config", "init"])

        assert result.exit_code == 0
        assert config_file.exists()
        assert "[x]" in result.stdout.replace("\n", "")


class TestConfigPresets:
    """Tests for dircount config presets."""

    def test_no_presets(self) -> None:
        """An empty config reports that nothing is configured."""
        result = runner.invoke(app, ["config", "presets"])

        assert result.exit_code == 0
        assert "No presets configured." in result.stdout

    def test_lists_presets(self, tmp_path: Path) -> None:
        """Configured presets are listed in a table."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            "[presets.logs]\n"
            'description = "Log files"\n'
            'params = ["/var/log"]\n'
            "\n"
            "[presets.tmp]\n"
            'params = ["/tmp"]\n'
        )

        result = runner.invoke(app, ["--config", str(config_file), "config", "presets"])

        assert result.exit_code == 0
        assert "Presets" in result.stdout
        assert "logs" in result.stdout
        assert "Log files" in result.stdout
        assert "tmp" in result.stdout
