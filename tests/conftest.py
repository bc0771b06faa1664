from __future__ import annotations

from pathlib import Path

import pytest


def _write_file(path: Path, size: int) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """1000, 100 and 500 (nested) byte files plus an empty directory."""
    _write_file(tmp_path / "large_file.txt", 1000)
    _write_file(tmp_path / "small_file.txt", 100)
    _write_file(tmp_path / "subdir" / "nested_file.txt", 500)
    (tmp_path / "empty_dir").mkdir()
    return tmp_path
