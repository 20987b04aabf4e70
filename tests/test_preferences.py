"""Tests for bookmarker.preferences.

All file I/O uses tmp_path so nothing touches the real user config.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from bookmarker.preferences import Preferences, load_preferences, save_theme_name


class TestLoadPreferencesDefaults:
    """When no file exists, load_preferences returns sensible defaults."""

    def test_defaults_when_no_file(self, tmp_path: Path):
        prefs = load_preferences(tmp_path / "nonexistent.yaml")
        assert prefs.theme_name == "dark"
        assert prefs.notifications.enabled is True
        assert prefs.notifications.timeout == 3.0
        assert prefs.display.newest_first is True
        assert prefs.display.date_format == "%Y-%m-%d"

    def test_creates_default_file(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        assert path.exists()
        data = yaml.safe_load(path.read_text())
        assert data["theme"] == "dark"
        assert data["notifications"]["timeout"] == 3.0


class TestLoadPreferencesFromFile:
    def test_reads_values(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text(
            "theme: nord\n"
            "notifications:\n  enabled: false\n  timeout: 7\n"
            "display:\n  newest_first: false\n  date_format: '%d/%m/%Y'\n"
        )
        prefs = load_preferences(path)
        assert prefs.theme_name == "nord"
        assert prefs.notifications.enabled is False
        assert prefs.notifications.timeout == 7.0
        assert prefs.display.newest_first is False
        assert prefs.display.date_format == "%d/%m/%Y"

    def test_partial_file_keeps_other_defaults(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  newest_first: false\n")
        prefs = load_preferences(path)
        assert prefs.display.newest_first is False
        assert prefs.theme_name == "dark"

    def test_invalid_yaml_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("theme: [unclosed\n")
        assert load_preferences(path) == Preferences()

    def test_non_mapping_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("- just\n- a list\n")
        assert load_preferences(path) == Preferences()

    def test_bad_timeout_falls_back(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("notifications:\n  timeout: soon\n")
        assert load_preferences(path).notifications.timeout == 3.0


class TestSaveThemeName:
    def test_round_trip(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_theme_name("gruvbox", path)
        assert load_preferences(path).theme_name == "gruvbox"

    def test_preserves_comments(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        load_preferences(path)
        save_theme_name("light", path)
        text = path.read_text()
        assert "# Bookmarker Preferences" in text
        assert "theme: light" in text
        assert "# dark, light, nord, gruvbox" in text

    def test_creates_file_when_missing(self, tmp_path: Path):
        path = tmp_path / "sub" / "prefs.yaml"
        save_theme_name("nord", path)
        assert load_preferences(path).theme_name == "nord"

    def test_adds_theme_line_when_absent(self, tmp_path: Path):
        path = tmp_path / "prefs.yaml"
        path.write_text("display:\n  newest_first: true\n")
        save_theme_name("light", path)
        prefs = load_preferences(path)
        assert prefs.theme_name == "light"
        assert prefs.display.newest_first is True
