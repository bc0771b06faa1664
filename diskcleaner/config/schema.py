from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from diskcleaner.models.enums import EntryFilter

# Lower bounds shared by config values and CLI overrides.
_MINIMUMS: dict[str, int] = {
    "max_depth": 1,
    "scan_workers": 1,
    "min_size": 0,
}


def clamp_field(value: int, field_name: str) -> int:
    """Raise *value* to the lower bound of *field_name*, if it has one."""
    minimum = _MINIMUMS.get(field_name)
    return value if minimum is None else max(minimum, value)


def _read_int(data: dict[str, Any], key: str, field_name: str, default: int) -> int:
    return clamp_field(int(data.get(key, default)), field_name)


def _read_optional_int(data: dict[str, Any], key: str, field_name: str, default: int | None) -> int | None:
    raw = data.get(key, default)
    return None if raw is None else clamp_field(int(raw), field_name)


@dataclass(slots=True)
class AppConfig:
    max_depth: int = 1
    scan_workers: int = 8
    min_size: int | None = None
    entry_filter: EntryFilter = EntryFilter.ALL
    assume_yes: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "maxDepth": self.max_depth,
            "scanWorkers": self.scan_workers,
            "minSize": self.min_size,
            "entryFilter": self.entry_filter.value,
            "assumeYes": self.assume_yes,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], defaults: AppConfig) -> AppConfig:
        return cls(
            max_depth=_read_int(data, "maxDepth", "max_depth", defaults.max_depth),
            scan_workers=_read_int(data, "scanWorkers", "scan_workers", defaults.scan_workers),
            min_size=_read_optional_int(data, "minSize", "min_size", defaults.min_size),
            entry_filter=EntryFilter.from_str(data.get("entryFilter", defaults.entry_filter.value)),
            assume_yes=bool(data.get("assumeYes", defaults.assume_yes)),
        )
