"""Theme definitions for Bookmarker.

Each preference theme name maps to a Textual Theme that controls the base UI
colors ($background, $surface, $panel, $primary, etc.) used by styles.tcss.
"""

from textual.theme import Theme

# Keys are the names accepted in preferences.yaml (``theme:``).
TEXTUAL_THEMES: dict[str, Theme] = {
    "dark": Theme(
        name="bookmarker-dark",
        primary="#5599dd",
        secondary="#44aa66",
        accent="#445566",
        background="#111111",
        surface="#1b1b1b",
        panel="#333333",
        success="#44aa66",
        warning="#aaaa00",
        error="#cc3333",
        dark=True,
    ),
    "light": Theme(
        name="bookmarker-light",
        primary="#1f2937",
        secondary="#2563eb",
        accent="#667788",
        background="#ffffff",
        surface="#f3f4f6",
        panel="#d1d5db",
        success="#16a34a",
        warning="#aa8800",
        error="#dc2626",
        dark=False,
    ),
    "nord": Theme(
        name="bookmarker-nord",
        primary="#88c0d0",
        secondary="#a3be8c",
        accent="#b48ead",
        background="#2e3440",
        surface="#3b4252",
        panel="#4c566a",
        success="#a3be8c",
        warning="#ebcb8b",
        error="#bf616a",
        dark=True,
    ),
    "gruvbox": Theme(
        name="bookmarker-gruvbox",
        primary="#d65d0e",
        secondary="#689d6a",
        accent="#b16286",
        background="#282828",
        surface="#3c3836",
        panel="#504945",
        success="#98971a",
        warning="#d79921",
        error="#cc241d",
        dark=True,
    ),
}

DEFAULT_THEME_NAME = "dark"


def next_theme_name(current: str) -> str:
    """Return the theme after *current* in :data:`TEXTUAL_THEMES` order."""
    names = list(TEXTUAL_THEMES)
    if current not in names:
        return names[0]
    return names[(names.index(current) + 1) % len(names)]
