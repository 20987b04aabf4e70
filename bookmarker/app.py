"""Main Bookmarker TUI application."""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, ListView, Static

from .constants import APP_SUBTITLE, APP_TITLE, EMPTY_LIST_TEXT
from .errors import PersistenceError
from .log import logger
from .models import BookmarkRecord, newest_first
from .persistence import BookmarkStore
from .preferences import Preferences, load_preferences, save_theme_name
from .theme import DEFAULT_THEME_NAME, TEXTUAL_THEMES, next_theme_name
from .widgets import BookmarkFormScreen, BookmarkItem, StatsBar
from .widgets.screens import FormResult


class BookmarkerApp(App):
    """Bookmarker - save and organize your favorite websites."""

    CSS_PATH = "styles.tcss"
    TITLE = APP_TITLE
    SUB_TITLE = APP_SUBTITLE

    BINDINGS = [
        Binding("a", "add_bookmark", "Add", show=True),
        Binding("e", "edit_bookmark", "Edit", show=True),
        Binding("d", "delete_bookmark", "Delete", show=True),
        Binding("ctrl+t", "cycle_theme", "Theme", show=True),
        Binding("q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        store: BookmarkStore,
        prefs: Preferences | None = None,
        *,
        save_prefs: bool = True,
    ) -> None:
        super().__init__()
        self.store = store
        self._prefs = prefs or load_preferences()
        self._save_prefs = save_prefs
        self._theme_name = DEFAULT_THEME_NAME

    # ── Layout ──────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main-area"):
            yield StatsBar()
            yield Static("Your Bookmarks", id="list-title")
            yield Static(EMPTY_LIST_TEXT, id="empty-state")
            yield ListView(id="bookmark-list")
        yield Footer()

    async def on_mount(self) -> None:
        for theme in TEXTUAL_THEMES.values():
            self.register_theme(theme)
        self._apply_theme(self._prefs.theme_name)
        if not self.store.loaded:
            self.store.load()
        await self.refresh_bookmarks(self.store.list())
        self.query_one("#bookmark-list", ListView).focus()

    # ── Rendering ───────────────────────────────────────────────

    async def refresh_bookmarks(
        self, records: list[BookmarkRecord], select_id=None
    ) -> None:
        """Re-render the list and counters from a store snapshot."""
        ordered = newest_first(records) if self._prefs.display.newest_first else list(records)
        list_view = self.query_one("#bookmark-list", ListView)
        await list_view.clear()
        items = [BookmarkItem(r, self._prefs.display.date_format) for r in ordered]
        if items:
            await list_view.extend(items)
            index = 0
            if select_id is not None:
                for i, item in enumerate(items):
                    if item.bookmark_id == select_id:
                        index = i
                        break
            list_view.index = index

        self.query_one("#empty-state", Static).display = not items
        list_view.display = bool(items)
        self.query_one(StatsBar).set_counts(
            total=len(records), today=self.store.count_added_on()
        )

    def _selected_record(self) -> BookmarkRecord | None:
        child = self.query_one("#bookmark-list", ListView).highlighted_child
        if isinstance(child, BookmarkItem):
            return child.record
        return None

    def _notify_success(self, message: str) -> None:
        if self._prefs.notifications.enabled:
            self.notify(message, timeout=self._prefs.notifications.timeout)

    def _notify_error(self, message: str) -> None:
        self.notify(
            message,
            title="Error",
            severity="error",
            timeout=max(self._prefs.notifications.timeout, 5.0),
        )

    # ── Actions ─────────────────────────────────────────────────

    def action_add_bookmark(self) -> None:
        self.push_screen(BookmarkFormScreen(), self._on_add_submitted)

    def action_edit_bookmark(self) -> None:
        record = self._selected_record()
        if record is None:
            return
        screen = BookmarkFormScreen(record.name, record.url, editing=True)

        async def on_submit(result: FormResult | None) -> None:
            await self._on_edit_submitted(record.id, result)

        self.push_screen(screen, on_submit)

    async def action_delete_bookmark(self) -> None:
        record = self._selected_record()
        if record is None:
            return
        try:
            snapshot = self.store.delete(record.id)
        except PersistenceError as exc:
            logger.error("delete of %r not saved: %s", record.id, exc)
            self._notify_error(f"Bookmark removed but could not be saved: {exc}")
            snapshot = self.store.list()
        else:
            self._notify_success(f"Deleted {record.name}")
        await self.refresh_bookmarks(snapshot)

    def action_cycle_theme(self) -> None:
        name = next_theme_name(self._theme_name)
        self._apply_theme(name)
        if self._save_prefs:
            save_theme_name(name)

    def _apply_theme(self, name: str) -> None:
        theme = TEXTUAL_THEMES.get(name)
        if theme is None:
            logger.debug("unknown theme %r, using %s", name, DEFAULT_THEME_NAME)
            name = DEFAULT_THEME_NAME
            theme = TEXTUAL_THEMES[name]
        self.theme = theme.name
        self._theme_name = name
        self._prefs.theme_name = name

    # ── Form callbacks ──────────────────────────────────────────

    async def _on_add_submitted(self, result: FormResult | None) -> None:
        if result is None:
            return
        name, url = result
        try:
            snapshot = self.store.create(name, url)
        except PersistenceError as exc:
            logger.error("new bookmark not saved: %s", exc)
            self._notify_error(f"Bookmark added but could not be saved: {exc}")
            snapshot = self.store.list()
        else:
            self._notify_success(f"Added {name}")
        newest = max(snapshot, key=lambda r: r.date, default=None)
        await self.refresh_bookmarks(
            snapshot, select_id=newest.id if newest is not None else None
        )

    async def _on_edit_submitted(self, bookmark_id, result: FormResult | None) -> None:
        if result is None:
            return
        name, url = result
        try:
            snapshot = self.store.update(bookmark_id, name, url)
        except PersistenceError as exc:
            logger.error("edit of %r not saved: %s", bookmark_id, exc)
            self._notify_error(f"Bookmark updated but could not be saved: {exc}")
            snapshot = self.store.list()
        else:
            if self.store.get(bookmark_id) is None:
                self._notify_error("That bookmark no longer exists.")
            else:
                self._notify_success(f"Updated {name}")
        await self.refresh_bookmarks(snapshot, select_id=bookmark_id)


# ── Entry Point ─────────────────────────────────────────────────────


def run_app(store: BookmarkStore, prefs: Preferences | None = None) -> None:
    """Run the Bookmarker TUI application."""
    app = BookmarkerApp(store, prefs)
    app.run()
