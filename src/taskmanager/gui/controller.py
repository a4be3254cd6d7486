# -*- coding: utf-8 -*-
"""Bridge between the state machine, background persistence and the widgets."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from taskmanager.constants import AUTOSAVE_INTERVAL_SECONDS
from taskmanager.core.messages import (
    AppLoaded,
    Command,
    FocusInput,
    LoadStore,
    Message,
    PersistStore,
    Sync,
    SyncCompleted,
)
from taskmanager.core.persistence import PersistenceBackend
from taskmanager.core.project_store import load_store, save_projects
from taskmanager.core.state_machine import ApplicationStateMachine
from taskmanager.core.task_runner import TaskRunner
from taskmanager.core.view_model import ViewModel, build_view_model
from taskmanager.gui.autosave import AutosaveScheduler

logger = logging.getLogger(__name__)


class AppController(QObject):
    """
    Owns the state machine and runs the commands it returns.
    All messages are dispatched on the GUI thread, one at a time; results of
    background work come back through queued signals.
    """

    view_changed = pyqtSignal(object)  # ViewModel
    focus_requested = pyqtSignal()
    status_message = pyqtSignal(str)
    _background_message = pyqtSignal(object)  # Message

    def __init__(
        self,
        backend: PersistenceBackend,
        runner: TaskRunner | None = None,
        autosave_interval: int = AUTOSAVE_INTERVAL_SECONDS,
        autosave_enabled: bool = True,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.backend = backend
        # One worker keeps writes in submission order, so the exit flush lands last.
        self.runner = runner or TaskRunner(max_workers=1)
        self.machine = ApplicationStateMachine()
        self.autosave = AutosaveScheduler(autosave_interval, enabled=autosave_enabled, parent=self)
        self.autosave.sync_requested.connect(self.request_sync)
        self._background_message.connect(self.dispatch)
        self._closed = False

    def start(self) -> None:
        logger.info("Starting, data backend: %r", self.backend)
        self._execute(self.machine.start())
        self.view_changed.emit(self.view_model())

    def view_model(self) -> ViewModel:
        return build_view_model(self.machine.app)

    def request_sync(self) -> None:
        self.dispatch(Sync())

    def dispatch(self, message: Message) -> None:
        commands = self.machine.dispatch(message)
        self.autosave.set_active(self.machine.is_ready and not self._closed)
        if isinstance(message, SyncCompleted):
            self._report_sync(message)
        # Render first so FocusInput lands on a visible form.
        self.view_changed.emit(self.view_model())
        self._execute(commands)

    def shutdown(self, final_sync: bool = True) -> None:
        """Stop autosave, optionally write one last time, and wait for pending writes."""
        if self._closed:
            return
        self.autosave.stop()
        if final_sync and self.machine.is_ready:
            self._execute(self.machine.dispatch(Sync()))
        self._closed = True
        self.runner.shutdown(wait_for_tasks=True)

    def _execute(self, commands: list[Command]) -> None:
        for command in commands:
            if self._closed and not isinstance(command, FocusInput):
                logger.debug("Dropping %r after shutdown", command)
                continue
            if isinstance(command, LoadStore):
                self._load()
            elif isinstance(command, PersistStore):
                self._persist(command)
            elif isinstance(command, FocusInput):
                self.focus_requested.emit()
            else:
                logger.warning("Unknown command %r", command)

    def _load(self) -> None:
        self.runner.submit(
            "load",
            lambda: load_store(self.backend),
            on_success=lambda store: self._background_message.emit(AppLoaded(store=store)),
            on_error=lambda exc: self._background_message.emit(AppLoaded(error=str(exc))),
        )

    def _persist(self, command: PersistStore) -> None:
        projects = command.projects
        self.runner.submit(
            "save",
            lambda: save_projects(projects, self.backend),
            on_success=lambda count: self._background_message.emit(SyncCompleted(saved=count)),
            on_error=lambda exc: self._background_message.emit(SyncCompleted(error=str(exc))),
        )

    def _report_sync(self, message: SyncCompleted) -> None:
        if message.error:
            self.status_message.emit(f"Save failed: {message.error}")
        else:
            self.status_message.emit(f"Saved {message.saved} projects")
