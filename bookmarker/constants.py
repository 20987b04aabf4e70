"""Module-level constants for Bookmarker."""

from __future__ import annotations

import os
from pathlib import Path


def bookmarker_home() -> Path:
    """Return the data directory (``$BOOKMARKER_HOME`` or ``~/.bookmarker``)."""
    override = os.environ.get("BOOKMARKER_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".bookmarker"


DATA_PATH = bookmarker_home() / "bookmarks.json"
PREFS_PATH = bookmarker_home() / "preferences.yaml"
LOG_PATH = bookmarker_home() / "bookmarker.log"

# Favicon lookup service used by the list view and ``--list --json``
FAVICON_SERVICE = "https://www.google.com/s2/favicons?domain={domain}"
FAVICON_FALLBACK_DOMAIN = "default"

APP_TITLE = "Bookmarker"
APP_SUBTITLE = "Easily save and organize your favorite websites"
EMPTY_LIST_TEXT = "No bookmarks yet. Add your first bookmark!"
