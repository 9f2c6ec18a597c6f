"""Shared pytest fixtures for xlinks tests."""

import sys
from pathlib import Path

import pytest

# Add the package to the path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Point config lookups at a per-test file so user config never leaks in."""
    path = tmp_path / "xlinks-config" / "config.json"
    monkeypatch.setenv("XLINKS_CONFIG", str(path))
    return path


@pytest.fixture
def sample_text():
    return (
        "check https://twitter.com/alice and https://x.com/alice/status/42!\n"
        "lists: (x.com/bob/lists/tech), also www.twitter.com/bob/likes.\n"
        "dup https://x.com/alice again"
    )
