"""Modal screen widgets for Bookmarker."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from .._utils import is_valid_url

FormResult = tuple[str, str]


class BookmarkFormScreen(ModalScreen[FormResult | None]):
    """Add/Edit form.  Dismisses with ``(name, url)`` or ``None`` on cancel."""

    BINDINGS = [
        Binding("escape", "cancel", show=False),
    ]

    def __init__(
        self, bookmark_name: str = "", url: str = "", *, editing: bool = False
    ) -> None:
        super().__init__()
        self._initial_name = bookmark_name
        self._initial_url = url
        self.editing = editing

    def compose(self) -> ComposeResult:
        title = "Edit Bookmark" if self.editing else "Add New Bookmark"
        with Vertical(id="form-modal"):
            yield Static(title, id="form-title")
            yield Label("Website Name", classes="form-label")
            yield Input(
                value=self._initial_name,
                placeholder="e.g., Google",
                id="name-input",
            )
            yield Label("Website URL", classes="form-label")
            yield Input(
                value=self._initial_url,
                placeholder="https://google.com",
                id="url-input",
            )
            yield Static("", id="form-error")
            with Horizontal(id="form-buttons"):
                yield Button("Cancel", id="cancel-button")
                yield Button("Save", variant="primary", id="save-button")

    def on_mount(self) -> None:
        self.query_one("#name-input", Input).focus()

    def read_form(self) -> FormResult | str:
        """Return ``(name, url)`` or an error message for the form."""
        name = self.query_one("#name-input", Input).value.strip()
        url = self.query_one("#url-input", Input).value.strip()
        if not name:
            return "Website Name is required."
        if not url:
            return "Website URL is required."
        if not is_valid_url(url):
            return "Enter a full URL, e.g. https://example.com"
        return name, url

    def action_submit(self) -> None:
        result = self.read_form()
        if isinstance(result, str):
            error = self.query_one("#form-error", Static)
            error.update(f"[b]{result}[/b]")
            error.display = True
            return
        self.dismiss(result)

    def action_cancel(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "save-button":
            self.action_submit()
        else:
            self.action_cancel()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_submit()
