"""Persistence layer – each store owns its file path, data format, and I/O."""

from .bookmarks import BookmarkStore

__all__ = [
    "BookmarkStore",
]
