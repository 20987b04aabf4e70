"""User preferences for Bookmarker.

Loads settings from ~/.bookmarker/preferences.yaml.
Falls back to sensible defaults if the file doesn't exist or is invalid.
Creates a default file on first run so users can discover and edit it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from .constants import PREFS_PATH
from .log import logger

_DEFAULT_YAML = """\
# Bookmarker Preferences
# Delete this file to reset to defaults.

theme: dark                      # dark, light, nord, gruvbox

notifications:
  enabled: true                  # show a banner after add/edit/delete
  timeout: 3.0                   # seconds before a banner disappears

display:
  newest_first: true             # most recently saved bookmark on top
  date_format: "%Y-%m-%d"        # strftime format for "Added on"
"""


@dataclass
class NotificationPreferences:
    """Settings for the transient success/error banners."""

    enabled: bool = True
    timeout: float = 3.0


@dataclass
class DisplayPreferences:
    """Settings for the bookmark list."""

    newest_first: bool = True
    date_format: str = "%Y-%m-%d"


@dataclass
class Preferences:
    """Top-level Bookmarker preferences."""

    theme_name: str = "dark"
    notifications: NotificationPreferences = field(
        default_factory=NotificationPreferences
    )
    display: DisplayPreferences = field(default_factory=DisplayPreferences)


def load_preferences(path: Path | None = None) -> Preferences:
    """Load preferences from YAML file.

    Falls back to sensible defaults if the file doesn't exist or is invalid.
    Creates a default preferences file on first run.
    """
    path = path or PREFS_PATH
    prefs = Preferences()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
            if not isinstance(data, dict):
                raise ValueError("preferences file is not a mapping")
            if data.get("theme"):
                prefs.theme_name = str(data["theme"])
            if isinstance(data.get("notifications"), dict):
                ndata = data["notifications"]
                if "enabled" in ndata:
                    prefs.notifications.enabled = bool(ndata["enabled"])
                if "timeout" in ndata:
                    prefs.notifications.timeout = max(0.0, float(ndata["timeout"]))
            if isinstance(data.get("display"), dict):
                ddata = data["display"]
                if "newest_first" in ddata:
                    prefs.display.newest_first = bool(ddata["newest_first"])
                if ddata.get("date_format"):
                    prefs.display.date_format = str(ddata["date_format"])
        except (OSError, yaml.YAMLError, TypeError, ValueError):
            logger.debug("invalid preferences file %s, using defaults", path, exc_info=True)
            prefs = Preferences()
    else:
        # Create default file for user to customize
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_YAML, encoding="utf-8")
        except OSError:
            logger.debug("could not write default preferences to %s", path, exc_info=True)

    return prefs


def save_theme_name(name: str, path: Path | None = None) -> None:
    """Persist the theme name to the preferences file.

    Surgically updates only the ``theme:`` line, preserving the rest of the
    file (including user comments) as-is.
    """
    path = path or PREFS_PATH
    try:
        if path.exists():
            text = path.read_text(encoding="utf-8")
        else:
            path.parent.mkdir(parents=True, exist_ok=True)
            text = _DEFAULT_YAML

        if re.search(r"^theme:", text, re.MULTILINE):
            text = re.sub(
                r"^theme:[ \t]*(?:\"[^\"]*\"|[^\s#]*)",
                f"theme: {name}",
                text,
                count=1,
                flags=re.MULTILINE,
            )
        else:
            text = f"theme: {name}\n" + text

        path.write_text(text, encoding="utf-8")
    except OSError:
        logger.debug("could not save theme to %s", path, exc_info=True)
