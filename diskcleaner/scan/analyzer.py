from __future__ import annotations

import logging
import os
import queue
import stat as statmod
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass

from result import Err, Ok

from diskcleaner.models.entry import (
    AnalysisError,
    AnalysisResult,
    CancelCheck,
    Entry,
    ProgressCallback,
)
from diskcleaner.models.enums import EntryFilter, ErrorCode
from diskcleaner.scan.probe import compute_size
from diskcleaner.services.formatting import saturating_add

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class _Task:
    """One top-level child to size, and the result slot it fills."""

    index: int
    path: str
    is_directory: bool
    depth: int


def resolve_root(path: str | os.PathLike[str]) -> str | AnalysisError:
    """Validate an analysis root.

    Returns the ``~``-expanded path, or an ``AnalysisError`` on failure.
    """
    expanded = os.path.expanduser(os.fspath(path))
    if not os.path.lexists(expanded):
        return AnalysisError(
            code=ErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )
    try:
        root_stat = os.stat(expanded)
    except FileNotFoundError:
        # Dangling symlink.
        return AnalysisError(
            code=ErrorCode.NOT_FOUND,
            path=expanded,
            message="Path does not exist",
        )
    except OSError as exc:
        return AnalysisError(
            code=ErrorCode.IO_FAILURE,
            path=expanded,
            message=f"Cannot stat root: {exc}",
        )
    if not statmod.S_ISDIR(root_stat.st_mode):
        return AnalysisError(
            code=ErrorCode.NOT_A_DIRECTORY,
            path=expanded,
            message="Path is not a directory",
        )
    return expanded


def _list_children(root: str, max_depth: int) -> list[_Task]:
    tasks: list[_Task] = []
    child_depth = max(max_depth - 1, 0)
    with os.scandir(root) as entries:
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                is_dir = False
            tasks.append(
                _Task(
                    index=len(tasks),
                    path=os.path.join(root, entry.name),
                    is_directory=is_dir,
                    depth=child_depth if is_dir else 0,
                )
            )
    return tasks


def analyze(
    root: str | os.PathLike[str],
    max_depth: int = 1,
    workers: int = 8,
    progress_callback: ProgressCallback | None = None,
    cancel_check: CancelCheck | None = None,
) -> AnalysisResult:
    """Size every immediate child of *root* and return them largest first.

    Directory children are sized to ``max_depth - 1`` further levels; file
    children report their own length. Sizing runs on a pool of *workers*
    threads. Only problems with *root* itself fail the call.
    """
    if max_depth < 1:
        msg = f"max_depth must be at least 1, got {max_depth}."
        raise ValueError(msg)

    resolved = resolve_root(root)
    if isinstance(resolved, AnalysisError):
        return Err(resolved)
    root_path = resolved

    started = time.perf_counter()
    try:
        tasks = _list_children(root_path, max_depth)
    except OSError as exc:
        return Err(
            AnalysisError(
                code=ErrorCode.IO_FAILURE,
                path=root_path,
                message=f"Cannot list directory: {exc}",
            )
        )

    # Each slot is written by exactly one worker; a slot left None is omitted.
    slots: list[Entry | None] = [None] * len(tasks)
    total = len(tasks)
    completed = 0
    completed_lock = threading.Lock()
    cancelled = threading.Event()

    q: queue.Queue[_Task | None] = queue.Queue()
    for task in tasks:
        q.put(task)

    def _is_cancelled() -> bool:
        if cancelled.is_set():
            return True
        if cancel_check is not None and cancel_check():
            cancelled.set()
            return True
        return False

    def _report(path: str) -> None:
        nonlocal completed
        if progress_callback is None:
            return
        with completed_lock:
            completed += 1
            done = completed
        try:
            progress_callback(path, done, total)
        except Exception:  # noqa: BLE001
            logger.exception("Progress callback failed for %s", path)

    def run_worker() -> None:
        while True:
            task = q.get()
            if task is None:
                q.task_done()
                break

            try:
                if _is_cancelled():
                    continue
                try:
                    size = compute_size(task.path, task.depth)
                except OSError as exc:
                    logger.warning("Cannot read size of %s: %s", task.path, exc)
                    size = 0
                slots[task.index] = Entry(task.path, size, task.is_directory)
            except Exception:  # noqa: BLE001
                logger.exception("Failed to process entry %s", task.path)
            finally:
                if not cancelled.is_set():
                    _report(task.path)
                q.task_done()

    num_workers = max(1, min(workers, total)) if total else 0
    threads = [threading.Thread(target=run_worker, daemon=True) for _ in range(num_workers)]
    for thread in threads:
        thread.start()
    q.join()
    for _ in threads:
        q.put(None)
    q.join()
    for thread in threads:
        thread.join(timeout=0.3)

    if cancelled.is_set():
        return Err(
            AnalysisError(
                code=ErrorCode.CANCELLED,
                path=root_path,
                message="Analysis cancelled",
            )
        )

    entries = [entry for entry in slots if entry is not None]
    # list.sort is stable: equal sizes keep discovery order.
    entries.sort(key=lambda e: e.size_bytes, reverse=True)
    logger.debug(
        "Analyzed %d entries under %s in %.3fs",
        len(entries),
        root_path,
        time.perf_counter() - started,
    )
    return Ok(entries)


def filter_entries(entries: Iterable[Entry], min_size: int | None = None) -> list[Entry]:
    """Keep entries of at least *min_size* bytes, preserving order."""
    if min_size is None:
        return list(entries)
    return [entry for entry in entries if entry.size_bytes >= min_size]


def filter_by_kind(entries: Iterable[Entry], entry_filter: EntryFilter) -> list[Entry]:
    if entry_filter is EntryFilter.DIRECTORIES:
        return [entry for entry in entries if entry.is_directory]
    if entry_filter is EntryFilter.FILES:
        return [entry for entry in entries if not entry.is_directory]
    return list(entries)


def total_size(entries: Iterable[Entry]) -> int:
    total = 0
    for entry in entries:
        total = saturating_add(total, entry.size_bytes)
    return total
