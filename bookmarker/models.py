"""Bookmark record model."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date, datetime, tzinfo
from typing import Any, Iterable

from ._utils import format_timestamp, parse_timestamp
from .errors import ParseError

BookmarkId = int | str


@dataclass(frozen=True)
class BookmarkRecord:
    """One saved URL.

    ``date`` is the time of the last create or update, always timezone-aware.
    """

    id: BookmarkId
    name: str
    url: str
    date: datetime

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the ``{id, name, url, date}`` shape stored on disk."""
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "date": format_timestamp(self.date),
        }

    @classmethod
    def from_dict(cls, data: Any) -> BookmarkRecord:
        """Build a record from its stored form.

        Raises :class:`ParseError` when *data* is not a usable record.
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected an object, got {type(data).__name__}")
        bookmark_id = data.get("id")
        # bool is an int subclass but never a meaningful id
        if isinstance(bookmark_id, bool) or not isinstance(bookmark_id, (int, str)):
            raise ParseError(f"invalid id: {bookmark_id!r}")
        name = data.get("name")
        url = data.get("url")
        if not isinstance(name, str) or not isinstance(url, str):
            raise ParseError(f"record {bookmark_id!r} is missing name or url")
        try:
            stamp = parse_timestamp(data.get("date"))  # type: ignore[arg-type]
        except (ValueError, OverflowError) as exc:
            raise ParseError(f"record {bookmark_id!r} has a bad date") from exc
        return cls(id=bookmark_id, name=name, url=url, date=stamp)

    def local_day(self, tz: tzinfo | None = None) -> Date:
        """Calendar day of ``date`` in *tz* (process local time by default)."""
        return self.date.astimezone(tz).date()


def newest_first(records: Iterable[BookmarkRecord]) -> list[BookmarkRecord]:
    """Display projection: most recently created/updated first."""
    return sorted(records, key=lambda record: record.date, reverse=True)
