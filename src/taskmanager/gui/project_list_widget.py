# -*- coding: utf-8 -*-
"""Project list with per-row and select-all checkboxes."""

from __future__ import annotations

import uuid

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from taskmanager.core.view_model import ProjectListView, ProjectRow


class ProjectRowWidget(QWidget):
    """One project: checkbox, name, description and an edit button."""

    def __init__(self, row: ProjectRow, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.project_id = row.project_id
        self.checkbox = QCheckBox()
        self.name_label = QLabel()
        self.name_label.setObjectName("projectName")
        self.description_label = QLabel()
        self.description_label.setObjectName("mutedText")
        self.edit_button = QPushButton("Edit")
        self.edit_button.setObjectName("secondaryButton")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(15)
        layout.addWidget(self.checkbox)
        layout.addWidget(self.name_label)
        layout.addWidget(self.description_label, 1)
        layout.addWidget(self.edit_button)
        self.set_row(row)

    def set_row(self, row: ProjectRow) -> None:
        self.checkbox.blockSignals(True)
        self.checkbox.setChecked(row.selected)
        self.checkbox.blockSignals(False)
        self.name_label.setText(row.name)
        self.description_label.setText(row.description)


class ProjectListWidget(QWidget):
    """Render a ``ProjectListView`` and forward user gestures as signals."""

    new_project_requested = pyqtSignal()
    edit_requested = pyqtSignal(object)  # uuid.UUID
    project_toggled = pyqtSignal(object, bool)  # uuid.UUID, selected
    select_all_toggled = pyqtSignal(bool)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.title_label = QLabel("Projects")
        self.title_label.setObjectName("sectionTitle")
        self.new_button = QPushButton("New Project")
        self.new_button.setObjectName("primaryButton")
        self.new_button.clicked.connect(self.new_project_requested.emit)

        self.empty_label = QLabel("You have no projects")
        self.empty_label.setObjectName("mutedText")
        self.select_all_checkbox = QCheckBox("Select All")
        self.select_all_checkbox.clicked.connect(self.select_all_toggled.emit)

        self._rows: dict[uuid.UUID, ProjectRowWidget] = {}
        self._rows_container = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_container)
        self._rows_layout.setContentsMargins(0, 0, 0, 0)
        self._rows_layout.setSpacing(10)
        self._rows_layout.addStretch(1)
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._rows_container)

        header = QHBoxLayout()
        header.addWidget(self.title_label)
        header.addStretch(1)
        header.addWidget(self.new_button, 0, Qt.AlignmentFlag.AlignRight)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)
        layout.addLayout(header)
        layout.addWidget(self.empty_label)
        layout.addWidget(self.select_all_checkbox)
        layout.addWidget(scroll, 1)

    def render(self, view: ProjectListView) -> None:
        self.empty_label.setVisible(view.is_empty)
        self.select_all_checkbox.setVisible(not view.is_empty)
        self.select_all_checkbox.setChecked(view.all_selected)

        if [row.project_id for row in view.rows] != list(self._rows):
            self._rebuild(view.rows)
        else:
            for row in view.rows:
                self._rows[row.project_id].set_row(row)

    def row_widget(self, project_id: uuid.UUID) -> ProjectRowWidget | None:
        return self._rows.get(project_id)

    def _rebuild(self, rows: tuple[ProjectRow, ...]) -> None:
        for widget in self._rows.values():
            self._rows_layout.removeWidget(widget)
            widget.deleteLater()
        self._rows = {}
        for index, row in enumerate(rows):
            widget = ProjectRowWidget(row, self._rows_container)
            project_id = row.project_id
            widget.checkbox.clicked.connect(
                lambda checked, pid=project_id: self.project_toggled.emit(pid, checked)
            )
            widget.edit_button.clicked.connect(lambda _=False, pid=project_id: self.edit_requested.emit(pid))
            self._rows_layout.insertWidget(index, widget)
            self._rows[project_id] = widget
