# -*- coding: utf-8 -*-
"""Main window: renders view models and forwards widget events as messages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QStackedWidget, QWidget

from taskmanager.config import save_window_size
from taskmanager.constants import APP_TITLE, APP_VERSION
from taskmanager.core.messages import (
    CancelEdit,
    DescriptionChanged,
    EditProject,
    NameChanged,
    NewProject,
    SaveEdit,
    Sync,
    ToggleProjectSelected,
    ToggleSelectAll,
)
from taskmanager.core.view_model import LoadingView, ProjectFormView, ProjectListView, ViewModel
from taskmanager.gui.controller import AppController
from taskmanager.gui.project_form_widget import ProjectFormWidget
from taskmanager.gui.project_list_widget import ProjectListWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single window switching between loading, list and form pages."""

    def __init__(
        self,
        controller: AppController,
        settings: dict[str, Any] | None = None,
        settings_path: Path | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.controller = controller
        self.settings = settings or {}
        self.settings_path = settings_path

        self.setWindowTitle(f"{APP_TITLE} v{APP_VERSION}")
        window = self.settings.get("window", {})
        self.resize(int(window.get("width", 900)), int(window.get("height", 600)))

        self._build_actions()
        self._build_ui()
        self._apply_styles()
        self._connect_controller()

    def _build_actions(self) -> None:
        self.save_action = QAction("Save Now", self)
        self.save_action.setShortcut(QKeySequence.StandardKey.Save)
        self.save_action.triggered.connect(lambda: self.controller.dispatch(Sync()))
        self.new_action = QAction("New Project", self)
        self.new_action.setShortcut(QKeySequence.StandardKey.New)
        self.new_action.triggered.connect(lambda: self.controller.dispatch(NewProject()))

    def _build_ui(self) -> None:
        toolbar = self.addToolBar("Main")
        toolbar.setMovable(False)
        toolbar.addAction(self.new_action)
        toolbar.addAction(self.save_action)

        self.loading_label = QLabel("Loading...")
        self.loading_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.loading_label.setObjectName("mutedText")
        self.list_widget = ProjectListWidget()
        self.form_widget = ProjectFormWidget()

        self.pages = QStackedWidget()
        self.pages.addWidget(self.loading_label)
        self.pages.addWidget(self.list_widget)
        self.pages.addWidget(self.form_widget)
        self.setCentralWidget(self.pages)
        self.statusBar().showMessage("Loading projects...")

        dispatch = self.controller.dispatch
        self.list_widget.new_project_requested.connect(lambda: dispatch(NewProject()))
        self.list_widget.edit_requested.connect(lambda pid: dispatch(EditProject(pid)))
        self.list_widget.project_toggled.connect(
            lambda pid, selected: dispatch(ToggleProjectSelected(project_id=pid, selected=selected))
        )
        self.list_widget.select_all_toggled.connect(lambda selected: dispatch(ToggleSelectAll(selected)))
        self.form_widget.name_changed.connect(lambda text: dispatch(NameChanged(text)))
        self.form_widget.description_changed.connect(lambda text: dispatch(DescriptionChanged(text)))
        self.form_widget.save_requested.connect(lambda: dispatch(SaveEdit()))
        self.form_widget.cancel_requested.connect(lambda: dispatch(CancelEdit()))

    def _connect_controller(self) -> None:
        self.controller.view_changed.connect(self.render)
        self.controller.focus_requested.connect(self.form_widget.focus_first_input)
        self.controller.status_message.connect(lambda text: self.statusBar().showMessage(text, 5000))

    def render(self, view: ViewModel) -> None:
        ready = not isinstance(view, LoadingView)
        self.save_action.setEnabled(ready)
        self.new_action.setEnabled(ready)
        if isinstance(view, ProjectListView):
            self.list_widget.render(view)
            self.pages.setCurrentWidget(self.list_widget)
        elif isinstance(view, ProjectFormView):
            self.form_widget.render(view)
            self.pages.setCurrentWidget(self.form_widget)
        else:
            self.loading_label.setText(view.message)
            self.pages.setCurrentWidget(self.loading_label)

    def closeEvent(self, event: QCloseEvent) -> None:  # noqa: N802
        logger.info("Main window closing, flushing projects")
        self.controller.shutdown(final_sync=True)
        self._save_window_size()
        super().closeEvent(event)

    def _save_window_size(self) -> None:
        if self.settings_path is None:
            return
        try:
            save_window_size(self.width(), self.height(), self.settings_path)
        except (ValueError, OSError) as exc:
            logger.error("Could not save settings to %s: %s", self.settings_path, exc)

    def _apply_styles(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow, QWidget {
                background: #f3f5f8;
                color: #1f2937;
                font-family: "Segoe UI", "Noto Sans", sans-serif;
                font-size: 12px;
            }
            QLabel#sectionTitle {
                font-size: 22px;
                font-weight: 700;
                color: #111827;
            }
            QLabel#projectName {
                font-weight: 600;
            }
            QLabel#mutedText {
                color: #6b7280;
            }
            QLabel#errorText {
                color: #dc2626;
            }
            QPushButton#primaryButton {
                background: #0f766e;
                color: white;
                border: 1px solid #115e59;
                border-radius: 10px;
                padding: 8px 14px;
                font-weight: 700;
            }
            QPushButton#primaryButton:hover {
                background: #0d9488;
            }
            QPushButton#secondaryButton {
                background: white;
                border: 1px solid #d0d7e2;
                border-radius: 10px;
                padding: 8px 12px;
            }
            QPushButton#secondaryButton:hover {
                border-color: #93c5fd;
                background: #f8fbff;
            }
            QLineEdit {
                background: white;
                border: 1px solid #d0d7e2;
                border-radius: 6px;
                padding: 6px;
            }
            """
        )
