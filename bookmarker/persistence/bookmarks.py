"""Bookmark persistence store."""

from __future__ import annotations

import dataclasses
import time
from datetime import date as Date, datetime, tzinfo
from pathlib import Path

from .._utils import utc_now
from ..errors import NotFound, ParseError
from ..log import logger
from ..models import BookmarkId, BookmarkRecord
from ._base import JsonStore


class BookmarkStore(JsonStore):
    """The bookmark collection (``[{id, name, url, date}, ...]``).

    Owns the in-memory list.  Every mutation writes the whole list back to
    ``path`` before returning the new snapshot; a failed write raises
    :class:`~bookmarker.errors.PersistenceError` but the in-memory change
    stays applied.  The first call to any operation loads the file if
    :meth:`load` has not been called yet.
    """

    def __init__(self, path: Path) -> None:
        super().__init__(path)
        self._records: list[BookmarkRecord] | None = None

    def _default(self) -> list:
        return []

    @property
    def loaded(self) -> bool:
        return self._records is not None

    # -- reading --------------------------------------------------------------

    def load(self) -> list[BookmarkRecord]:
        """(Re)load the collection from disk.

        Unreadable or malformed files load as an empty collection; invalid
        entries inside an otherwise good file are skipped.
        """
        try:
            raw = self.read_raw()
            if not isinstance(raw, list):
                raise ParseError(f"{self.path} does not hold a JSON array")
        except ParseError as exc:
            logger.warning("ignoring unreadable bookmark file: %s", exc)
            raw = []

        records: list[BookmarkRecord] = []
        seen: set[BookmarkId] = set()
        for entry in raw:
            try:
                record = BookmarkRecord.from_dict(entry)
            except ParseError as exc:
                logger.warning("skipping invalid bookmark in %s: %s", self.path, exc)
                continue
            if record.id in seen:
                logger.warning("skipping duplicate bookmark id %r in %s", record.id, self.path)
                continue
            seen.add(record.id)
            records.append(record)

        self._records = records
        logger.debug("loaded %d bookmark(s) from %s", len(records), self.path)
        return self.list()

    def list(self) -> list[BookmarkRecord]:
        """Return a snapshot of the collection without touching the file."""
        return list(self._ensure_loaded())

    def get(self, bookmark_id: BookmarkId) -> BookmarkRecord | None:
        """Return the record with *bookmark_id*, or ``None``."""
        index = self._index_of(bookmark_id)
        if index is None:
            return None
        return self._ensure_loaded()[index]

    def require(self, bookmark_id: BookmarkId) -> BookmarkRecord:
        """Like :meth:`get` but raises :class:`NotFound` for unknown ids."""
        record = self.get(bookmark_id)
        if record is None:
            raise NotFound(bookmark_id)
        return record

    def count_added_on(self, day: Date | None = None, tz: tzinfo | None = None) -> int:
        """Count records whose ``date`` falls on calendar *day* in *tz*.

        *tz* defaults to the process's local timezone and *day* to today
        there.
        """
        if day is None:
            day = datetime.now(tz).date() if tz is not None else Date.today()
        return sum(1 for record in self._ensure_loaded() if record.local_day(tz) == day)

    # -- mutations ------------------------------------------------------------

    def create(self, name: str, url: str) -> list[BookmarkRecord]:
        """Append a new bookmark and persist."""
        records = self._ensure_loaded()
        record = BookmarkRecord(id=self._next_id(), name=name, url=url, date=utc_now())
        records.append(record)
        logger.debug("created bookmark %r (%s)", record.id, url)
        return self._commit()

    def update(self, bookmark_id: BookmarkId, name: str, url: str) -> list[BookmarkRecord]:
        """Replace name and url of *bookmark_id* and refresh its date.

        Unknown ids are a no-op: nothing is written.
        """
        records = self._ensure_loaded()
        index = self._index_of(bookmark_id)
        if index is None:
            logger.debug("update of unknown bookmark %r ignored", bookmark_id)
            return self.list()
        records[index] = dataclasses.replace(records[index], name=name, url=url, date=utc_now())
        return self._commit()

    def delete(self, bookmark_id: BookmarkId) -> list[BookmarkRecord]:
        """Remove *bookmark_id* if present and persist.  Idempotent."""
        records = self._ensure_loaded()
        index = self._index_of(bookmark_id)
        if index is None:
            logger.debug("delete of unknown bookmark %r", bookmark_id)
        else:
            del records[index]
        return self._commit()

    def clear(self) -> list[BookmarkRecord]:
        """Remove every bookmark and persist."""
        self._ensure_loaded().clear()
        return self._commit()

    # -- internals ------------------------------------------------------------

    def _ensure_loaded(self) -> list[BookmarkRecord]:
        if self._records is None:
            self.load()
        assert self._records is not None
        return self._records

    def _index_of(self, bookmark_id: BookmarkId) -> int | None:
        for index, record in enumerate(self._ensure_loaded()):
            if record.id == bookmark_id and type(record.id) is type(bookmark_id):
                return index
        return None

    def _next_id(self) -> int:
        """Millisecond timestamp, bumped past every existing integer id."""
        candidate = time.time_ns() // 1_000_000
        int_ids = [
            r.id for r in self._ensure_loaded()
            if isinstance(r.id, int) and not isinstance(r.id, bool)
        ]
        if int_ids:
            candidate = max(candidate, max(int_ids) + 1)
        return candidate

    def _commit(self) -> list[BookmarkRecord]:
        snapshot = self.list()
        self.save_raw([record.to_dict() for record in snapshot])
        return snapshot
