"""Command-line interface for diskcleaner."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from result import Err
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.prompt import Confirm

from diskcleaner import __version__
from diskcleaner.config.defaults import default_config
from diskcleaner.config.loader import load_config
from diskcleaner.config.schema import AppConfig, clamp_field
from diskcleaner.models.deletion import DeleteError
from diskcleaner.models.entry import Entry
from diskcleaner.models.enums import EntryFilter
from diskcleaner.scan import analyze, filter_by_kind, filter_entries
from diskcleaner.services.deleter import delete_entries, freed_bytes, partition_selection
from diskcleaner.ui.picker import select_entries
from diskcleaner.ui.views import show_deletion_plan, show_outcome, show_selection_warnings, show_summary

console = Console()

app = typer.Typer(
    name="diskcleaner",
    help="Interactive directory size analyzer and cleanup tool.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"diskcleaner version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_config(config_path: Path | None) -> AppConfig:
    loaded = load_config(config_path)
    if isinstance(loaded, Err):
        console.print(f"[yellow]Warning:[/] {escape(loaded.unwrap_err())} Using defaults.")
        return default_config()
    return loaded.unwrap()


def _report_progress(index: int, total: int, entry: Entry, error: DeleteError | None) -> None:
    status = "[green]✅[/]" if error is None else f"[red]❌ ({escape(error.message)})[/]"
    console.print(f"Deleting {index}/{total}: {escape(entry.path)}... {status}", highlight=False)


@app.command()
def main(
    path: Path = typer.Argument(Path("."), help="Directory to analyze."),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1, help="Maximum depth for size calculation."),
    min_size: Optional[int] = typer.Option(None, "--min-size", "-m", min=0, help="Only show entries of at least this many bytes."),
    dirs_only: bool = typer.Option(False, "--dirs-only", help="Show only directories."),
    files_only: bool = typer.Option(False, "--files-only", help="Show only files."),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Number of sizing threads."),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to a JSON config file."),
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt."),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr."),
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Analyze directory sizes and interactively delete selected entries."""
    if dirs_only and files_only:
        raise typer.BadParameter("--dirs-only and --files-only cannot be used together.")

    _configure_logging(verbose)
    config = _resolve_config(config_path)
    max_depth = clamp_field(depth, "max_depth") if depth is not None else config.max_depth
    scan_workers = clamp_field(workers, "scan_workers") if workers is not None else config.scan_workers
    threshold = min_size if min_size is not None else config.min_size
    entry_filter = EntryFilter.from_flags(dirs_only, files_only) if dirs_only or files_only else config.entry_filter
    assume_yes = yes or config.assume_yes

    console.print("[bold blue]Disk Cleaner - Interactive Directory Analysis[/]")
    console.print(f"Analyzing: {escape(str(path))}", highlight=False)
    if max_depth > 1:
        console.print(f"Max depth: {max_depth}")

    with console.status("Calculating sizes..."):
        result = analyze(path, max_depth=max_depth, workers=scan_workers)
    if isinstance(result, Err):
        console.print(f"[red]Error:[/] {escape(str(result.unwrap_err()))}", highlight=False)
        raise typer.Exit(code=1)

    entries = filter_by_kind(filter_entries(result.unwrap(), threshold), entry_filter)
    if not entries:
        console.print("No entries found matching the criteria.")
        return

    show_summary(console, entries)

    selected = select_entries(entries)
    if not selected:
        console.print("No items selected. Exiting.")
        return

    check = partition_selection(selected)
    show_selection_warnings(console, check)
    if not check.deletable:
        console.print("[red]No valid items to delete.[/]")
        return

    show_deletion_plan(console, check.deletable)
    if not assume_yes and not Confirm.ask(
        "Are you absolutely sure you want to delete these items?", default=False, console=console
    ):
        console.print("Deletion cancelled by user.")
        return

    console.print("\nProceeding with deletion...")
    outcome = delete_entries(check.deletable, progress_callback=_report_progress)
    show_outcome(console, outcome, freed_bytes(check.deletable, outcome))
    console.print("\nOperation completed!")
