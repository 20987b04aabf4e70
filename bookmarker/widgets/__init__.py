"""Widget classes for the Bookmarker app."""

from .items import BookmarkItem, StatCard, StatsBar
from .screens import BookmarkFormScreen

__all__ = [
    "BookmarkFormScreen",
    "BookmarkItem",
    "StatCard",
    "StatsBar",
]
