# -*- coding: utf-8 -*-
"""Tests for the save file CLI."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from telepict.cli.tpi_cli import app
from telepict.core.persistence import save_game


runner = CliRunner()


def test_inspect_lists_entries(tmp_path: Path, sample_entries: list) -> None:
    game = save_game(sample_entries, tmp_path / "game")
    result = runner.invoke(app, ["inspect", str(game)])
    assert result.exit_code == 0
    assert "3 entries" in result.output
    assert "[0] phrase  'a cat / on a mat'" in result.output
    assert "[1] drawing png" in result.output


def test_inspect_rejects_corrupt_file(tmp_path: Path) -> None:
    broken = tmp_path / "broken.tpi"
    broken.write_text("not json", encoding="utf-8")
    result = runner.invoke(app, ["inspect", str(broken)])
    assert result.exit_code == 1


def test_extract_writes_one_file_per_entry(tmp_path: Path, sample_entries: list, png_bytes: bytes) -> None:
    game = save_game(sample_entries, tmp_path / "game")
    out_dir = tmp_path / "out"
    result = runner.invoke(app, ["extract", str(game), str(out_dir)])
    assert result.exit_code == 0
    assert (out_dir / "entry_0.txt").read_text(encoding="utf-8") == "a cat\non a mat"
    assert (out_dir / "entry_1.png").read_bytes() == png_bytes
    assert (out_dir / "entry_2.txt").exists()


def test_extract_into_a_file_path_fails_cleanly(tmp_path: Path, sample_entries: list) -> None:
    game = save_game(sample_entries, tmp_path / "game")
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    result = runner.invoke(app, ["extract", str(game), str(blocker)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, OSError)
