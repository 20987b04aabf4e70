"""List and statistics widgets for Bookmarker."""

from __future__ import annotations

from rich.markup import escape
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Label, ListItem, Static

from .._utils import hostname
from ..models import BookmarkRecord


class BookmarkItem(ListItem):
    """One bookmark in the list: name, url, host and save date."""

    def __init__(self, record: BookmarkRecord, date_format: str = "%Y-%m-%d") -> None:
        super().__init__(classes="bookmark-item")
        self.record = record
        self._date_format = date_format

    @property
    def bookmark_id(self):
        return self.record.id

    def compose(self) -> ComposeResult:
        record = self.record
        host = hostname(record.url) or "?"
        added = record.date.astimezone().strftime(self._date_format)
        yield Label(f"[b]{escape(record.name)}[/b]  [dim]{escape(host)}[/dim]", classes="bookmark-name")
        yield Label(escape(record.url), classes="bookmark-url")
        yield Label(f"[dim]Added on {escape(added)}[/dim]", classes="bookmark-date")


class StatCard(Static):
    """A labelled counter."""

    def __init__(self, label: str, *, id: str) -> None:  # noqa: A002
        super().__init__(self._render_text(label, 0), id=id, classes="stat-card")
        self._label = label
        self.value = 0

    @staticmethod
    def _render_text(label: str, value: int) -> str:
        return f"[dim]{label}[/dim]\n[b]{value}[/b]"

    def set_value(self, value: int) -> None:
        self.value = value
        self.update(self._render_text(self._label, value))


class StatsBar(Horizontal):
    """Total and added-today counters shown above the list."""

    def __init__(self) -> None:
        super().__init__(id="stats-bar")

    def compose(self) -> ComposeResult:
        yield StatCard("Total Bookmarks", id="stat-total")
        yield StatCard("Added Today", id="stat-today")

    def set_counts(self, total: int, today: int) -> None:
        self.query_one("#stat-total", StatCard).set_value(total)
        self.query_one("#stat-today", StatCard).set_value(today)
