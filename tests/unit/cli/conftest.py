"""Fixtures shared by CLI tests."""

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _no_user_config(isolated_config: Path) -> Path:
    """Keep CLI tests away from the real user config file."""
    return isolated_config
