from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Callable

from result import Result

from diskcleaner.models.enums import ErrorCode, NodeKind
from diskcleaner.services.formatting import format_bytes


ProgressCallback = Callable[[str, int, int], None]
CancelCheck = Callable[[], bool]


@dataclass(slots=True, frozen=True)
class Entry:
    """A path annotated with its computed size and type.

    ``size_human`` is derived from ``size_bytes`` once, at construction, and is
    left out of equality since it carries no information of its own.
    """

    path: str
    size_bytes: int
    is_directory: bool
    size_human: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "size_human", format_bytes(self.size_bytes))

    @property
    def name(self) -> str:
        return os.path.basename(os.path.normpath(self.path)) or self.path

    @property
    def kind(self) -> NodeKind:
        return NodeKind.DIRECTORY if self.is_directory else NodeKind.FILE

    @property
    def type_label(self) -> str:
        return "DIR" if self.is_directory else "FILE"


@dataclass(slots=True, frozen=True)
class AnalysisError:
    code: ErrorCode
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.message}: {self.path}"


AnalysisResult = Result[list[Entry], AnalysisError]
