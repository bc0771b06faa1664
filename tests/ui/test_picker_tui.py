from __future__ import annotations

import pytest
from textual.widgets import SelectionList

from diskcleaner.models.entry import Entry
from diskcleaner.ui.picker import SelectEntriesApp, select_entries

ENTRIES = [
    Entry("/r/big", 3000, True),
    Entry("/r/mid.bin", 2000, False),
    Entry("/r/small.bin", 10, False),
]


@pytest.mark.asyncio
async def test_app_mounts_with_all_entries() -> None:
    app = SelectEntriesApp(ENTRIES)
    async with app.run_test(size=(100, 30)):
        selection = app.query_one("#entries", SelectionList)
        assert selection.option_count == 3
        assert app.chosen == []


@pytest.mark.asyncio
async def test_space_selects_and_enter_confirms() -> None:
    app = SelectEntriesApp(ENTRIES)
    async with app.run_test(size=(100, 30)) as pilot:
        await pilot.press("down", "down", "space")
        await pilot.press("up", "up", "space")
        await pilot.press("enter")
    assert app.return_value == [ENTRIES[0], ENTRIES[2]]


@pytest.mark.asyncio
async def test_escape_cancels() -> None:
    app = SelectEntriesApp(ENTRIES)
    async with app.run_test(size=(100, 30)) as pilot:
        app.query_one("#entries", SelectionList).select(1)
        await pilot.press("escape")
    assert app.return_value == []


@pytest.mark.asyncio
async def test_toggle_all() -> None:
    app = SelectEntriesApp(ENTRIES)
    async with app.run_test(size=(100, 30)) as pilot:
        await pilot.press("a")
        assert app.chosen == ENTRIES


def test_select_entries_empty_skips_app() -> None:
    assert select_entries([]) == []
