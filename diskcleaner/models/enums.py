from __future__ import annotations

from enum import Enum
from typing import Any


class NodeKind(str, Enum):
    FILE = "file"
    DIRECTORY = "directory"


class ErrorCode(str, Enum):
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    PERMISSION_DENIED = "permission_denied"
    IO_FAILURE = "io_failure"
    CANCELLED = "cancelled"


class EntryFilter(str, Enum):
    ALL = "all"
    DIRECTORIES = "dirs"
    FILES = "files"

    @classmethod
    def from_str(cls, value: Any) -> EntryFilter:
        try:
            return cls(str(value))
        except ValueError:
            return cls.ALL

    @classmethod
    def from_flags(cls, dirs_only: bool, files_only: bool) -> EntryFilter:
        if dirs_only:
            return cls.DIRECTORIES
        if files_only:
            return cls.FILES
        return cls.ALL
