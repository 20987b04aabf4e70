"""Shared test fixtures for the bookmarker test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from bookmarker.persistence import BookmarkStore
from bookmarker.preferences import Preferences


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    """Path of a bookmark file that does not exist yet."""
    return tmp_path / "bookmarks.json"


@pytest.fixture
def store(data_file: Path) -> BookmarkStore:
    """An empty, loaded store writing to ``data_file``."""
    s = BookmarkStore(data_file)
    s.load()
    return s


@pytest.fixture
def sample_rows() -> list[dict]:
    """Stored bookmark rows in the on-disk shape, oldest first."""
    return [
        {
            "id": 1714566600000,
            "name": "Python",
            "url": "https://www.python.org",
            "date": "2024-05-01T12:30:00.000Z",
        },
        {
            "id": 1717245000000,
            "name": "Textual",
            "url": "https://textual.textualize.io/guide/",
            "date": "2024-06-01T12:30:00.000Z",
        },
    ]


@pytest.fixture
def seeded_file(data_file: Path, sample_rows: list[dict]) -> Path:
    """``data_file`` pre-populated with ``sample_rows``."""
    data_file.write_text(json.dumps(sample_rows), encoding="utf-8")
    return data_file


@pytest.fixture
def prefs() -> Preferences:
    """Default preferences with banners disabled so they don't pile up."""
    p = Preferences()
    p.notifications.enabled = False
    return p
