# tests/conftest.py
"""Pytest configuration with shared fixtures for the matchclip tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from matchclip.core.Truncator import Truncator


@pytest.fixture
def truncator() -> Truncator:
    """A Truncator using the default ``…`` ellipsis."""
    return Truncator()


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Points HOME at a temporary directory and runs the test inside it.

    Keeps the real ``~/.config/matchclip/config.toml`` out of the tests and
    makes log files land in the temporary directory.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return home
