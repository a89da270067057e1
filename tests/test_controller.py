# -*- coding: utf-8 -*-
"""Tests for the game controller."""

from __future__ import annotations

from pathlib import Path

import pytest

pytest.importorskip("PyQt6")

from telepict.core.persistence import encode_entries, load_game
from telepict.core.state import InputKind
from telepict.gui.controller import GameController
from telepict.models.entry import Drawing, Phrase


@pytest.fixture
def controller(qt_app) -> GameController:
    return GameController(settings={}, run_in_background=False)


def _collect(signal) -> list:
    received: list = []
    signal.connect(received.append)
    return received


def test_submit_phrase_then_drawing_alternates(controller: GameController, png_bytes: bytes) -> None:
    assert controller.next_input_kind() is InputKind.INITIAL_PHRASE
    controller.submit_phrase("cat")
    assert controller.next_input_kind() is InputKind.DRAWING
    controller.submit_drawing_bytes(png_bytes)
    assert controller.next_input_kind() is InputKind.PHRASE
    assert controller.entries() == [Phrase("cat"), Drawing(png_bytes)]


def test_state_changed_emitted_with_snapshot(controller: GameController) -> None:
    received = _collect(controller.state_changed)
    controller.submit_phrase("cat")
    assert received == [[Phrase("cat")]]


def test_submit_drawing_file_reads_bytes(controller: GameController, sample_png: Path, png_bytes: bytes) -> None:
    controller.submit_phrase("cat")
    controller.submit_drawing_file(str(sample_png))
    assert controller.entries()[-1] == Drawing(png_bytes)
    assert controller.is_busy() is False


def test_dismissed_image_dialog_is_a_no_op(controller: GameController) -> None:
    received = _collect(controller.state_changed)
    controller.submit_drawing_file("")
    controller.submit_drawing_file(None)
    assert received == []


def test_missing_image_reports_error(controller: GameController, tmp_path: Path) -> None:
    errors = _collect(controller.error_occurred)
    controller.submit_phrase("cat")
    controller.submit_drawing_file(str(tmp_path / "missing.png"))
    assert len(errors) == 1
    assert controller.entries() == [Phrase("cat")]
    assert controller.is_busy() is False


def test_file_operation_while_busy_is_reported(controller: GameController, sample_png: Path, tmp_path: Path) -> None:
    errors = _collect(controller.error_occurred)
    controller.submit_phrase("cat")
    controller._set_busy(True)
    controller.submit_drawing_file(str(sample_png))
    controller.save_game(str(tmp_path / "game"))
    assert len(errors) == 2
    assert "still running" in errors[0]
    assert controller.entries() == [Phrase("cat")]
    assert not (tmp_path / "game.tpi").exists()


def test_new_game_clears(controller: GameController) -> None:
    controller.submit_phrase("cat")
    controller.new_game()
    assert controller.has_entries() is False


def test_toggle_review_keeps_state(controller: GameController) -> None:
    changes = _collect(controller.review_mode_changed)
    controller.submit_phrase("cat")
    controller.toggle_review()
    controller.toggle_review()
    assert changes == [True, False]
    assert controller.entries() == [Phrase("cat")]


def test_save_then_load_round_trip(controller: GameController, tmp_path: Path, sample_entries: list) -> None:
    saved = _collect(controller.game_saved)
    controller.apply_loaded(sample_entries)
    controller.save_game(str(tmp_path / "game"))
    assert saved == [str(tmp_path / "game.tpi")]

    controller.new_game()
    controller.load_game(str(tmp_path / "game.tpi"))
    assert controller.entries() == sample_entries


def test_save_uses_configured_directory(qt_app, tmp_path: Path) -> None:
    controller = GameController(settings={"files": {"save_dir": str(tmp_path)}}, run_in_background=False)
    controller.submit_phrase("cat")
    controller.save_game("game")
    assert load_game(tmp_path / "game.tpi") == [Phrase("cat")]


def test_save_without_filename_is_ignored(controller: GameController, tmp_path: Path) -> None:
    saved = _collect(controller.game_saved)
    controller.submit_phrase("cat")
    controller.save_game("   ")
    assert saved == []


def test_save_failure_reports_error(controller: GameController, tmp_path: Path) -> None:
    errors = _collect(controller.error_occurred)
    controller.submit_phrase("cat")
    controller.save_game(str(tmp_path / "missing" / "game"))
    assert len(errors) == 1
    assert "missing" in errors[0]
    assert controller.entries() == [Phrase("cat")]


def test_corrupt_load_keeps_state(controller: GameController, tmp_path: Path, sample_entries: list) -> None:
    errors = _collect(controller.error_occurred)
    corrupt = tmp_path / "broken.tpi"
    corrupt.write_bytes(encode_entries(sample_entries)[:10])
    controller.submit_phrase("keep me")
    controller.load_game(str(corrupt))
    assert controller.entries() == [Phrase("keep me")]
    assert len(errors) == 1
    assert controller.is_busy() is False


def test_dismissed_load_dialog_is_a_no_op(controller: GameController) -> None:
    controller.submit_phrase("cat")
    controller.load_game("")
    assert controller.entries() == [Phrase("cat")]


def test_background_load_applies_on_gui_thread(qt_app, tmp_path: Path, sample_entries: list) -> None:
    from PyQt6.QtCore import QCoreApplication, QEventLoop, QTimer

    controller = GameController(settings={}, run_in_background=True)
    target = tmp_path / "game.tpi"
    target.write_bytes(encode_entries(sample_entries))

    loop = QEventLoop()
    controller.busy_changed.connect(lambda busy: loop.quit() if not busy else None)
    QTimer.singleShot(5000, loop.quit)
    controller.load_game(str(target))
    loop.exec()
    controller.wait_for_workers()
    QCoreApplication.processEvents()

    assert controller.entries() == sample_entries
    assert controller.is_busy() is False
