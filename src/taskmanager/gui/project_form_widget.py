# -*- coding: utf-8 -*-
"""Create/edit form for a single project."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taskmanager.core.validation import FieldValidation
from taskmanager.core.view_model import ProjectFormView


class FormField(QWidget):
    """Label, line edit and validation message stacked vertically."""

    def __init__(self, label: str, placeholder: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.label = QLabel(label)
        self.input = QLineEdit()
        self.input.setPlaceholderText(placeholder)
        self.error_label = QLabel("")
        self.error_label.setObjectName("errorText")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(10)
        layout.addWidget(self.label)
        layout.addWidget(self.input)
        layout.addWidget(self.error_label)

    def set_value(self, text: str, validation: FieldValidation) -> None:
        # Only touch the text when it differs, otherwise the cursor jumps.
        if self.input.text() != text:
            self.input.setText(text)
        self.error_label.setText("" if validation.is_valid else validation.message)


class ProjectFormWidget(QWidget):
    """Render a ``ProjectFormView`` and forward edits as signals."""

    name_changed = pyqtSignal(str)
    description_changed = pyqtSignal(str)
    save_requested = pyqtSignal()
    cancel_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.title_label = QLabel("New Project")
        self.title_label.setObjectName("sectionTitle")
        self.name_field = FormField("Name", "Project Name")
        self.description_field = FormField("Description", "Project Description")
        self.name_field.input.textEdited.connect(self.name_changed.emit)
        self.description_field.input.textEdited.connect(self.description_changed.emit)
        self.name_field.input.returnPressed.connect(self.save_requested.emit)

        self.save_button = QPushButton("Save")
        self.save_button.setObjectName("primaryButton")
        self.save_button.clicked.connect(self.save_requested.emit)
        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.setObjectName("secondaryButton")
        self.cancel_button.clicked.connect(self.cancel_requested.emit)

        buttons = QHBoxLayout()
        buttons.setSpacing(5)
        buttons.addStretch(1)
        buttons.addWidget(self.save_button)
        buttons.addWidget(self.cancel_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(20)
        layout.addWidget(self.title_label)
        layout.addWidget(self.name_field)
        layout.addWidget(self.description_field)
        layout.addLayout(buttons)
        layout.addStretch(1)

    def render(self, view: ProjectFormView) -> None:
        self.title_label.setText(view.title)
        self.name_field.set_value(view.name, view.name_field)
        self.description_field.set_value(view.description, view.description_field)

    def focus_first_input(self) -> None:
        self.name_field.input.setFocus()
