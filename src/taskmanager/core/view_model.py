# -*- coding: utf-8 -*-
"""Read-only view models derived from the application state."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Union

from taskmanager.core.state_machine import Application, Context, Ready
from taskmanager.core.validation import FieldValidation


@dataclass(frozen=True)
class LoadingView:
    message: str = "Loading..."


@dataclass(frozen=True)
class ProjectRow:
    project_id: uuid.UUID
    name: str
    description: str
    selected: bool


@dataclass(frozen=True)
class ProjectListView:
    rows: tuple[ProjectRow, ...]
    all_selected: bool

    @property
    def is_empty(self) -> bool:
        return not self.rows


@dataclass(frozen=True)
class ProjectFormView:
    title: str
    name: str
    description: str
    name_field: FieldValidation
    description_field: FieldValidation
    is_new: bool


ViewModel = Union[LoadingView, ProjectListView, ProjectFormView]


def build_view_model(app: Application) -> ViewModel:
    """Project the current application variant into what the view renders."""
    if not isinstance(app, Ready):
        return LoadingView()

    state = app.state
    if state.context.is_form and state.edit_buffer is not None:
        is_new = state.context is Context.NEW_PROJECT
        return ProjectFormView(
            title="New Project" if is_new else "Edit Project",
            name=state.edit_buffer.name,
            description=state.edit_buffer.description,
            name_field=state.validation.name,
            description_field=state.validation.description,
            is_new=is_new,
        )

    rows = tuple(
        ProjectRow(
            project_id=project.id,
            name=project.name,
            description=project.description,
            selected=project.id in state.selection,
        )
        for project in state.store.list()
    )
    return ProjectListView(rows=rows, all_selected=state.all_selected())
