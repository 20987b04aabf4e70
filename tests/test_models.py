"""Tests for bookmarker.models."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from bookmarker.errors import ParseError
from bookmarker.models import BookmarkRecord, newest_first


def _record(bookmark_id, day: int) -> BookmarkRecord:
    return BookmarkRecord(
        id=bookmark_id,
        name=f"site {bookmark_id}",
        url=f"https://{bookmark_id}.example",
        date=datetime(2024, 5, day, 8, 0, tzinfo=timezone.utc),
    )


class TestToDict:
    def test_shape(self):
        record = BookmarkRecord(
            id=1,
            name="Example",
            url="https://example.com",
            date=datetime(2024, 5, 1, 12, 30, 0, 123000, tzinfo=timezone.utc),
        )
        assert record.to_dict() == {
            "id": 1,
            "name": "Example",
            "url": "https://example.com",
            "date": "2024-05-01T12:30:00.123Z",
        }

    def test_non_utc_date_is_normalised(self):
        record = BookmarkRecord(
            id=1,
            name="x",
            url="https://x.org",
            date=datetime(2024, 5, 1, 14, 0, tzinfo=timezone(timedelta(hours=2))),
        )
        assert record.to_dict()["date"] == "2024-05-01T12:00:00.000Z"


class TestFromDict:
    def test_parses_stored_row(self):
        record = BookmarkRecord.from_dict(
            {"id": "a1", "name": "A", "url": "https://a.com", "date": "2024-05-01T12:30:00Z"}
        )
        assert record.id == "a1"
        assert record.date == datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "row",
        [
            None,
            ["id", "name"],
            {"name": "A", "url": "https://a.com", "date": "2024-05-01T12:30:00Z"},
            {"id": True, "name": "A", "url": "https://a.com", "date": "2024-05-01T12:30:00Z"},
            {"id": 1, "url": "https://a.com", "date": "2024-05-01T12:30:00Z"},
            {"id": 1, "name": "A", "url": "https://a.com"},
            {"id": 1, "name": "A", "url": "https://a.com", "date": "last tuesday"},
            {"id": 1, "name": "A", "url": "https://a.com", "date": "0001-01-01T00:00:00.000+01:00"},
        ],
    )
    def test_rejects_bad_rows(self, row):
        with pytest.raises(ParseError):
            BookmarkRecord.from_dict(row)

    def test_round_trip(self):
        record = _record(3, 2)
        assert BookmarkRecord.from_dict(record.to_dict()) == record


class TestNewestFirst:
    def test_orders_by_date_descending(self):
        records = [_record(1, 1), _record(2, 3), _record(3, 2)]
        assert [r.id for r in newest_first(records)] == [2, 3, 1]

    def test_does_not_mutate_input(self):
        records = [_record(1, 1), _record(2, 3)]
        newest_first(records)
        assert [r.id for r in records] == [1, 2]


class TestLocalDay:
    def test_day_in_timezone(self):
        record = BookmarkRecord(
            id=1,
            name="x",
            url="https://x.org",
            date=datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc),
        )
        assert record.local_day(timezone.utc).day == 1
        assert record.local_day(timezone(timedelta(hours=1))).day == 2
