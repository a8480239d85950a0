"""Unit tests for config file location."""

from pathlib import Path
from unittest.mock import patch

import pytest
from dircount.core.paths import APP_NAME, CONFIG_FILENAME, get_config_dir, get_config_path


class TestGetConfigDir:
    """Tests for get_config_dir."""

    def test_respects_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """XDG_CONFIG_HOME overrides the default location."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_dir() == tmp_path / APP_NAME

    def test_default_under_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without XDG_CONFIG_HOME the directory is ~/.config/dircount."""
        monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
        with patch("dircount.core.paths.Path.home", return_value=tmp_path):
            assert get_config_dir() == tmp_path / ".config" / "dircount"

    def test_empty_xdg_config_home(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """An empty XDG_CONFIG_HOME is treated as unset."""
        monkeypatch.setenv("XDG_CONFIG_HOME", "")
        with patch("dircount.core.paths.Path.home", return_value=tmp_path):
            assert get_config_dir() == tmp_path / ".config" / "dircount"


class TestGetConfigPath:
    """Tests for get_config_path."""

    def test_config_path(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config file is config.toml inside the config directory."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert get_config_path() == tmp_path / "dircount" / CONFIG_FILENAME
