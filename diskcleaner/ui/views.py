from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from diskcleaner.models.deletion import DeletionOutcome, SelectionCheck
from diskcleaner.models.entry import Entry
from diskcleaner.scan.analyzer import total_size
from diskcleaner.services.formatting import format_bytes

SIZE_COLUMN_WIDTH = 8
TYPE_COLUMN_WIDTH = 4


def entry_label(entry: Entry) -> str:
    """One-line ``SIZE TYPE NAME`` label, columns right-aligned."""
    return f"{entry.size_human:>{SIZE_COLUMN_WIDTH}} {entry.type_label:>{TYPE_COLUMN_WIDTH}} {entry.name}"


def summary_table(entries: Sequence[Entry]) -> Table:
    table = Table(title="Directory Contents (sorted by size)", show_footer=True, title_justify="left")
    table.add_column("SIZE", justify="right", footer=format_bytes(total_size(entries)), style="#de935f")
    table.add_column("TYPE", justify="right", footer="", style="#81a2be")
    table.add_column("NAME", footer="TOTAL")
    for entry in entries:
        table.add_row(entry.size_human, entry.type_label, entry.name)
    return table


def show_summary(console: Console, entries: Sequence[Entry]) -> None:
    if not entries:
        console.print("No files or directories found.")
        return
    console.print(summary_table(entries))


def show_selection_warnings(console: Console, check: SelectionCheck) -> None:
    if check.unwritable:
        console.print("\n[bold yellow]Warning:[/] the following items cannot be deleted (permission denied):")
        for entry in check.unwritable:
            console.print(f"  {entry.type_label:>{TYPE_COLUMN_WIDTH}} {entry.path}", markup=False)
        console.print("  You may need administrator/root privileges to delete these items.")
    if check.missing:
        console.print(f"[yellow]{len(check.missing)} selected items no longer exist.[/]")
    if check.unwritable or check.missing:
        console.print(f"Proceeding with {len(check.deletable)} valid items.")


def show_deletion_plan(console: Console, entries: Sequence[Entry]) -> None:
    console.print("\n[bold red]WARNING:[/] The following items will be permanently deleted:")
    for entry in entries:
        console.print(
            f"  {entry.size_human:>{SIZE_COLUMN_WIDTH}} {entry.type_label:>{TYPE_COLUMN_WIDTH}} {entry.path}",
            markup=False,
        )
    console.print(f"\nTotal size to be freed: [bold]{format_bytes(total_size(entries))}[/]")


def show_outcome(console: Console, outcome: DeletionOutcome, freed: int) -> None:
    if outcome.succeeded:
        console.print(f"\n[green]Successfully deleted {len(outcome.succeeded)} items:[/]")
        for path in outcome.succeeded:
            console.print(Text(f"  {path}"))
    if outcome.failed:
        console.print(f"\n[red]Failed to delete {len(outcome.failed)} items:[/]")
        for failure in outcome.failed:
            console.print(Text(f"  {failure}"))
    if freed > 0:
        console.print(f"\nTotal space freed: [bold]{format_bytes(freed)}[/]")
