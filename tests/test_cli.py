from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from diskcleaner.cli import app
from diskcleaner.models.entry import Entry

runner = CliRunner()


def _pick(*names: str):  # type: ignore[no-untyped-def]
    def select(entries: list[Entry]) -> list[Entry]:
        return [entry for entry in entries if entry.name in names]

    return select


class TestVersionAndHelp:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "diskcleaner version" in result.stdout

    def test_help_flag(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--depth" in result.stdout
        assert "--min-size" in result.stdout
        assert "--dirs-only" in result.stdout


class TestArgumentErrors:
    def test_conflicting_kind_flags(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--dirs-only", "--files-only"])
        assert result.exit_code == 2

    def test_depth_below_one_rejected(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--depth", "0"])
        assert result.exit_code == 2

    def test_missing_directory(self, tmp_path: Path) -> None:
        result = runner.invoke(app, [str(tmp_path / "nonexistent")])
        assert result.exit_code == 1
        assert "does not exist" in result.stdout

    def test_file_instead_of_directory(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree / "large_file.txt")])
        assert result.exit_code == 1
        assert "not a directory" in result.stdout


class TestFlow:
    def test_no_entries_after_filter(self, sample_tree: Path) -> None:
        result = runner.invoke(app, [str(sample_tree), "--min-size", "100000"])
        assert result.exit_code == 0
        assert "No entries found matching the criteria." in result.stdout

    def test_nothing_selected(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("diskcleaner.cli.select_entries", _pick())
        result = runner.invoke(app, [str(sample_tree)])
        assert result.exit_code == 0
        assert "large_file.txt" in result.stdout
        assert "No items selected. Exiting." in result.stdout

    def test_dirs_only_hides_files(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        offered: list[str] = []

        def select(entries: list[Entry]) -> list[Entry]:
            offered.extend(entry.name for entry in entries)
            return []

        monkeypatch.setattr("diskcleaner.cli.select_entries", select)
        runner.invoke(app, [str(sample_tree), "--dirs-only"])
        assert offered == ["subdir", "empty_dir"]

    def test_delete_with_yes(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("diskcleaner.cli.select_entries", _pick("large_file.txt", "subdir"))
        result = runner.invoke(app, [str(sample_tree), "--yes"])

        assert result.exit_code == 0
        assert "Successfully deleted 2 items:" in result.stdout
        assert "Total space freed: 1.5 kB" in result.stdout
        assert not (sample_tree / "large_file.txt").exists()
        assert not (sample_tree / "subdir").exists()
        assert (sample_tree / "small_file.txt").exists()

    def test_confirmation_declined(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("diskcleaner.cli.select_entries", _pick("large_file.txt"))
        result = runner.invoke(app, [str(sample_tree)], input="n\n")

        assert result.exit_code == 0
        assert "Deletion cancelled by user." in result.stdout
        assert (sample_tree / "large_file.txt").exists()

    def test_confirmation_accepted(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("diskcleaner.cli.select_entries", _pick("small_file.txt"))
        result = runner.invoke(app, [str(sample_tree)], input="y\n")

        assert result.exit_code == 0
        assert "Operation completed!" in result.stdout
        assert not (sample_tree / "small_file.txt").exists()

    def test_selected_entry_vanished_before_delete(self, sample_tree: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        def select(entries: list[Entry]) -> list[Entry]:
            (sample_tree / "small_file.txt").unlink()
            return [entry for entry in entries if entry.name == "small_file.txt"]

        monkeypatch.setattr("diskcleaner.cli.select_entries", select)
        result = runner.invoke(app, [str(sample_tree), "--yes"])

        assert result.exit_code == 0
        assert "1 selected items no longer exist." in result.stdout
        assert "No valid items to delete." in result.stdout

    def test_bad_config_falls_back_to_defaults(self, sample_tree: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "bad.json"
        config.write_text("{", encoding="utf-8")
        monkeypatch.setattr("diskcleaner.cli.select_entries", _pick())

        result = runner.invoke(app, [str(sample_tree), "--config", str(config)])
        assert result.exit_code == 0
        assert "Failed reading config" in result.stdout

    def test_config_supplies_min_size(self, sample_tree: Path, tmp_path: Path) -> None:
        config = tmp_path / "cfg.json"
        config.write_text(json.dumps({"minSize": 100000}), encoding="utf-8")

        result = runner.invoke(app, [str(sample_tree), "--config", str(config)])
        assert "No entries found matching the criteria." in result.stdout
