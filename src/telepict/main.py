# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from telepict.config import ConfigError, get_default_config, load_config, log_level
from telepict.constants import APP_NAME, APP_SLUG
from telepict.gui.main_window import MainWindow
from telepict.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy in logs/LAST_CRASH.log."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError as e:
        logging.getLogger().error("Could not write crash report: %s", e)

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    sys.excepthook = global_exception_handler
    try:
        settings = load_config()
        config_error: str | None = None
    except (ConfigError, ValueError) as e:
        settings = get_default_config()
        config_error = str(e)

    log_dir = settings.get("logging", {}).get("log_dir") or Path.cwd()
    session_log_path = setup_session_logging(log_dir, APP_SLUG, level=log_level(settings))
    logger = logging.getLogger(__name__)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(sys.argv)
    app.setApplicationName(APP_NAME)
    if config_error is not None:
        logger.warning("Invalid settings, using defaults: %s", config_error)
        QMessageBox.warning(None, APP_NAME, f"Invalid settings, using defaults:\n{config_error}")

    window = MainWindow(settings=settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
