# -*- coding: utf-8 -*-
"""Application state machine.

The application is either ``NotReady`` (store still loading) or
``Ready(ApplicationState)``. Each variant has an ``update`` that consumes one
message and returns the next variant plus the commands the host must run.
Nothing here performs I/O; loading, saving and focus changes are requested
through commands.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from taskmanager.core.messages import (
    AppLoaded,
    CancelEdit,
    Command,
    DescriptionChanged,
    EditProject,
    FocusInput,
    LoadStore,
    Message,
    NameChanged,
    NewProject,
    PersistStore,
    SaveEdit,
    Sync,
    SyncCompleted,
    ToggleProjectSelected,
    ToggleSelectAll,
)
from taskmanager.core.project_store import ProjectStore
from taskmanager.core.selection import SelectionSet
from taskmanager.core.validation import FormValidation, validate_description, validate_name
from taskmanager.models.project import Project

logger = logging.getLogger(__name__)


class Context(Enum):
    PROJECT_LIST = "project_list"
    NEW_PROJECT = "new_project"
    EDIT_PROJECT = "edit_project"

    @property
    def is_form(self) -> bool:
        return self is not Context.PROJECT_LIST


@dataclass
class ApplicationState:
    """Everything that exists once the store has loaded."""

    store: ProjectStore
    context: Context = Context.PROJECT_LIST
    edit_buffer: Project | None = None
    selection: SelectionSet = field(default_factory=SelectionSet)
    validation: FormValidation = field(default_factory=FormValidation)

    def all_selected(self) -> bool:
        return self.selection.all_selected(len(self.store))


class NotReady:
    """Initial variant. Only ``AppLoaded`` moves it forward."""

    def update(self, message: Message) -> tuple[Application, list[Command]]:
        if not isinstance(message, AppLoaded):
            logger.debug("Ignoring %s while loading", type(message).__name__)
            return self, []
        if message.store is None:
            logger.warning("Startup load failed, continuing with an empty store: %s", message.error)
            store = ProjectStore()
        else:
            store = message.store
        logger.info("Application ready with %d projects", len(store))
        return Ready(ApplicationState(store=store)), []

    def __repr__(self) -> str:
        return "NotReady()"


class Ready:
    """Loaded variant wrapping the live ``ApplicationState``."""

    def __init__(self, state: ApplicationState) -> None:
        self.state = state
        self._handlers: dict[type, Callable[..., list[Command]]] = {
            Sync: self._on_sync,
            SyncCompleted: self._on_sync_completed,
            NewProject: self._on_new_project,
            EditProject: self._on_edit_project,
            CancelEdit: self._on_cancel_edit,
            NameChanged: self._on_name_changed,
            DescriptionChanged: self._on_description_changed,
            SaveEdit: self._on_save_edit,
            ToggleProjectSelected: self._on_toggle_project_selected,
            ToggleSelectAll: self._on_toggle_select_all,
        }

    def update(self, message: Message) -> tuple[Application, list[Command]]:
        handler = self._handlers.get(type(message))
        if handler is None:
            logger.debug("Ignoring %s while ready", type(message).__name__)
            return self, []
        return self, handler(message)

    def _on_sync(self, message: Sync) -> list[Command]:
        return [PersistStore(projects=tuple(self.state.store.list()))]

    def _on_sync_completed(self, message: SyncCompleted) -> list[Command]:
        if message.error:
            logger.error("Saving projects failed: %s", message.error)
        else:
            logger.debug("Sync finished, %d projects written", message.saved)
        return []

    def _open_form(self, context: Context, project: Project) -> None:
        state = self.state
        state.edit_buffer = project
        state.validation.reset()
        state.selection.clear()
        state.context = context

    def _on_new_project(self, message: NewProject) -> list[Command]:
        self._open_form(Context.NEW_PROJECT, Project())
        return [FocusInput()]

    def _on_edit_project(self, message: EditProject) -> list[Command]:
        project = self.state.store.get(message.project_id)
        if project is None:
            logger.debug("Cannot edit project %s: not found", message.project_id)
            return []
        self._open_form(Context.EDIT_PROJECT, project)
        return []

    def _close_form(self) -> None:
        self.state.edit_buffer = None
        self.state.context = Context.PROJECT_LIST

    def _on_cancel_edit(self, message: CancelEdit) -> list[Command]:
        if self.state.context.is_form:
            self._close_form()
        return []

    def _on_name_changed(self, message: NameChanged) -> list[Command]:
        buffer = self.state.edit_buffer
        if buffer is not None:
            buffer.name = message.text
            self.state.validation.name = validate_name(message.text)
        return []

    def _on_description_changed(self, message: DescriptionChanged) -> list[Command]:
        buffer = self.state.edit_buffer
        if buffer is not None:
            buffer.description = message.text
            self.state.validation.description = validate_description(message.text)
        return []

    def _on_save_edit(self, message: SaveEdit) -> list[Command]:
        state = self.state
        buffer = state.edit_buffer
        if buffer is None:
            return []
        if not state.validation.is_valid():
            logger.info("Saving project with invalid fields: %s", state.validation)
        if state.context is Context.NEW_PROJECT:
            state.store.create(buffer.name, buffer.description)
        elif state.context is Context.EDIT_PROJECT:
            if not state.store.update(buffer.id, buffer.name, buffer.description):
                logger.warning("Project %s vanished before it could be saved", buffer.id)
        self._close_form()
        return []

    def _on_toggle_project_selected(self, message: ToggleProjectSelected) -> list[Command]:
        selection = self.state.selection
        if not message.selected:
            selection.discard(message.project_id)
        elif message.project_id in self.state.store:
            selection.add(message.project_id)
        else:
            logger.debug("Ignoring selection of unknown project %s", message.project_id)
        return []

    def _on_toggle_select_all(self, message: ToggleSelectAll) -> list[Command]:
        if message.selected:
            self.state.selection.replace(self.state.store.ids())
        else:
            self.state.selection.clear()
        return []

    def __repr__(self) -> str:
        return f"Ready(context={self.state.context.name}, store={self.state.store!r})"


Application = Union[NotReady, Ready]


class ApplicationStateMachine:
    """Serial message processor over the ``Application`` union."""

    def __init__(self) -> None:
        self.app: Application = NotReady()

    def start(self) -> list[Command]:
        return [LoadStore()]

    def dispatch(self, message: Message) -> list[Command]:
        """Process one message to completion and return the resulting commands."""
        self.app, commands = self.app.update(message)
        return commands

    @property
    def is_ready(self) -> bool:
        return isinstance(self.app, Ready)

    @property
    def state(self) -> ApplicationState | None:
        return self.app.state if isinstance(self.app, Ready) else None
