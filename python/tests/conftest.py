"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from soundex import config


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload configuration for every test."""
    config.reset()
    yield
    config.reset()


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    """Point the config loader at a temporary config.json."""
    path = tmp_path / "config.json"
    monkeypatch.setattr(config, "_find_config", lambda: path)
    return path


@pytest.fixture
def american_names():
    """Well-known names with their American Soundex codes."""
    return {
        "Robert": "R163",
        "Rupert": "R163",
        "Rubin": "R150",
        "Ashcraft": "A261",
        "Ashcroft": "A261",
        "Tymczak": "T522",
        "Pfister": "P236",
        "Honeyman": "H555",
    }
