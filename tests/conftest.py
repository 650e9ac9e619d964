"""Shared test fixtures for osview tests."""

import curses
import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp()
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def config_dir(temp_dir, monkeypatch):
    """Point the osview config directory at a temp dir."""
    path = temp_dir / "osview"
    monkeypatch.setenv("OSVIEW_CONFIG_DIR", str(path))
    yield path


@pytest.fixture
def patched_curses(monkeypatch):
    """Make curses drawing calls usable without a real terminal."""
    # ACS_* only exist after initscr()
    for name in ("ACS_HLINE", "ACS_VLINE", "ACS_ULCORNER", "ACS_URCORNER",
                 "ACS_LLCORNER", "ACS_LRCORNER"):
        monkeypatch.setattr(curses, name, ord("+"), raising=False)
    with patch.object(curses, "color_pair", side_effect=lambda n: n << 8), \
            patch.object(curses, "curs_set"):
        yield
