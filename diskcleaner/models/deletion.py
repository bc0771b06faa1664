from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from result import Result

from diskcleaner.models.entry import Entry
from diskcleaner.models.enums import ErrorCode


@dataclass(slots=True, frozen=True)
class DeleteError:
    code: ErrorCode
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


DeleteResult = Result[None, DeleteError]

# (index, total, entry, error); error is None when the entry was removed.
DeleteProgressCallback = Callable[[int, int, Entry, DeleteError | None], None]


@dataclass(slots=True, frozen=True)
class FailedDeletion:
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.path} ({self.reason})"


@dataclass(slots=True)
class DeletionOutcome:
    succeeded: list[str] = field(default_factory=list)
    failed: list[FailedDeletion] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return not self.failed


@dataclass(slots=True)
class SelectionCheck:
    """A user selection split by what can still be deleted."""

    deletable: list[Entry] = field(default_factory=list)
    unwritable: list[Entry] = field(default_factory=list)
    missing: list[Entry] = field(default_factory=list)
