"""Exception types raised by the bookmark core."""

from __future__ import annotations


class BookmarkerError(Exception):
    """Base class for all Bookmarker errors."""


class ParseError(BookmarkerError):
    """Persisted data could not be turned into bookmark records."""


class NotFound(BookmarkerError):
    """No bookmark with the requested id exists."""

    def __init__(self, bookmark_id: int | str) -> None:
        super().__init__(f"no bookmark with id {bookmark_id!r}")
        self.bookmark_id = bookmark_id


class PersistenceError(BookmarkerError):
    """Writing the bookmark file failed.

    The in-memory change that triggered the write has already been applied.
    """
