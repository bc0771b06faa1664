from __future__ import annotations

from diskcleaner.scan.analyzer import (
    analyze,
    filter_by_kind,
    filter_entries,
    resolve_root,
    total_size,
)
from diskcleaner.scan.probe import compute_size

__all__ = [
    "analyze",
    "compute_size",
    "filter_by_kind",
    "filter_entries",
    "resolve_root",
    "total_size",
]
