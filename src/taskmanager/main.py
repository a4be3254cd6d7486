# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication, QMessageBox

from taskmanager.config import get_default_config, load_config, resolve_data_file
from taskmanager.constants import APP_NAME, DEFAULT_SETTINGS_FILE
from taskmanager.core.persistence import FileBackend
from taskmanager.gui.controller import AppController
from taskmanager.gui.main_window import MainWindow
from taskmanager.utils.logger import setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log fatal errors and keep a copy of the last crash next to the session logs."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("FATAL CRASH:\n%s", error_msg)

    crash_path = Path.cwd() / "logs" / "LAST_CRASH.log"
    try:
        crash_path.parent.mkdir(parents=True, exist_ok=True)
        crash_path.write_text(error_msg, encoding="utf-8")
    except OSError:
        logging.getLogger().exception("Could not write crash report")

    if QApplication.instance():
        QMessageBox.critical(None, "Application Crash", f"A fatal error occurred.\nDetails saved to: {crash_path}")

    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME)
    logger = logging.getLogger(__name__)
    sys.excepthook = global_exception_handler
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(sys.argv)
    settings_path: Path | None = Path.cwd() / DEFAULT_SETTINGS_FILE
    try:
        settings = load_config(settings_path)
    except (ValueError, OSError) as exc:
        logger.error("Invalid settings, falling back to defaults: %s", exc)
        settings = get_default_config()
        # Leave a broken settings file alone for the user to fix.
        settings_path = None

    # Optional first argument points at an alternative data file.
    if len(sys.argv) > 1:
        data_file = Path(sys.argv[1])
    else:
        data_file = resolve_data_file(settings, Path.cwd())
    logger.info("Project data file: %s", data_file)

    autosave = settings.get("autosave", {})
    controller = AppController(
        FileBackend(data_file),
        autosave_interval=int(autosave.get("interval_seconds", 15)),
        autosave_enabled=bool(autosave.get("enabled", True)),
    )
    window = MainWindow(controller, settings=settings, settings_path=settings_path)
    window.show()
    controller.start()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
