"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Small directory tree: x/{f1.txt, f2.log, sub/{f3.txt}}."""
    root = tmp_path / "x"
    root.mkdir()
    (root / "f1.txt").write_text("one")
    (root / "f2.log").write_text("two")
    sub = root / "sub"
    sub.mkdir()
    (sub / "f3.txt").write_text("three")
    return root


@pytest.fixture
def deep_tree(tmp_path: Path) -> Path:
    """Linear directory chain: root/a/b/c."""
    root = tmp_path / "root"
    (root / "a" / "b" / "c").mkdir(parents=True)
    return root


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory.

    Returns:
        Path where dircount expects its config file.
    """
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home / "dircount" / "config.toml"
