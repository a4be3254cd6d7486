# -*- coding: utf-8 -*-
"""Periodic sync trigger."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

from taskmanager.constants import AUTOSAVE_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class AutosaveScheduler(QObject):
    """Emit ``sync_requested`` every interval while active.

    The scheduler does not know whether a previous sync is still running.
    """

    sync_requested = pyqtSignal()

    def __init__(
        self,
        interval_seconds: int = AUTOSAVE_INTERVAL_SECONDS,
        enabled: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.interval_seconds = max(1, int(interval_seconds))
        self.enabled = bool(enabled)
        self._timer = QTimer(self)
        self._timer.setInterval(self.interval_seconds * 1000)
        self._timer.timeout.connect(self._on_timeout)

    def set_active(self, active: bool) -> None:
        if active and self.enabled:
            if not self._timer.isActive():
                logger.info("Autosave every %ds", self.interval_seconds)
                self._timer.start()
        elif self._timer.isActive():
            self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()

    def stop(self) -> None:
        self._timer.stop()

    def _on_timeout(self) -> None:
        logger.debug("Autosave tick")
        self.sync_requested.emit()
