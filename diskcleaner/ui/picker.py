from __future__ import annotations

from collections.abc import Sequence
from typing import override

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, SelectionList, Static

from diskcleaner.models.entry import Entry
from diskcleaner.ui.views import entry_label

PROMPT = "Select items to delete (SPACE to select, ENTER to confirm, ESC to cancel)"


class SelectEntriesApp(App[list[Entry]]):
    """Multi-select over analysis entries.  Returns the chosen entries in list order."""

    CSS = """
    #prompt {
        color: #f0c674;
        padding: 0 1;
    }
    SelectionList {
        height: 1fr;
        border: solid #81a2be;
    }
    """

    BINDINGS = [
        Binding("enter", "confirm", "Confirm", priority=True),
        Binding("escape", "cancel", "Cancel", priority=True),
        Binding("a", "toggle_all", "Toggle all"),
    ]

    def __init__(self, entries: Sequence[Entry]) -> None:
        super().__init__()
        self.entries = list(entries)

    @override
    def compose(self) -> ComposeResult:
        yield Static(PROMPT, id="prompt")
        yield SelectionList[int](
            *((entry_label(entry), index, False) for index, entry in enumerate(self.entries)),
            id="entries",
        )
        yield Footer()

    def on_mount(self) -> None:
        selection = self.query_one("#entries", SelectionList)
        selection.focus()
        if self.entries:
            selection.highlighted = 0

    @property
    def chosen(self) -> list[Entry]:
        selection: SelectionList[int] = self.query_one("#entries", SelectionList)
        return [self.entries[index] for index in sorted(selection.selected)]

    def action_confirm(self) -> None:
        self.exit(self.chosen)

    def action_cancel(self) -> None:
        self.exit([])

    def action_toggle_all(self) -> None:
        self.query_one("#entries", SelectionList).toggle_all()


def select_entries(entries: Sequence[Entry]) -> list[Entry]:
    """Run the selection app; an empty list means nothing chosen or cancelled."""
    if not entries:
        return []
    return SelectEntriesApp(entries).run() or []
