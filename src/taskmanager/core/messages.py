# -*- coding: utf-8 -*-
"""Messages consumed by the state machine and commands it hands back."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Union

from taskmanager.core.project_store import ProjectStore
from taskmanager.models.project import Project


@dataclass(frozen=True)
class AppLoaded:
    """Result of the startup load: a store, or the error that prevented one."""

    store: ProjectStore | None = None
    error: str | None = None


@dataclass(frozen=True)
class Sync:
    pass


@dataclass(frozen=True)
class SyncCompleted:
    saved: int = 0
    error: str | None = None


@dataclass(frozen=True)
class NewProject:
    pass


@dataclass(frozen=True)
class EditProject:
    project_id: uuid.UUID


@dataclass(frozen=True)
class CancelEdit:
    pass


@dataclass(frozen=True)
class NameChanged:
    text: str


@dataclass(frozen=True)
class DescriptionChanged:
    text: str


@dataclass(frozen=True)
class SaveEdit:
    pass


@dataclass(frozen=True)
class ToggleProjectSelected:
    project_id: uuid.UUID
    selected: bool


@dataclass(frozen=True)
class ToggleSelectAll:
    selected: bool


Message = Union[
    AppLoaded,
    Sync,
    SyncCompleted,
    NewProject,
    EditProject,
    CancelEdit,
    NameChanged,
    DescriptionChanged,
    SaveEdit,
    ToggleProjectSelected,
    ToggleSelectAll,
]


@dataclass(frozen=True)
class LoadStore:
    """Read the persisted store in the background, then deliver ``AppLoaded``."""


@dataclass(frozen=True)
class PersistStore:
    """Write this snapshot in the background, then deliver ``SyncCompleted``."""

    projects: tuple[Project, ...]


@dataclass(frozen=True)
class FocusInput:
    """Move keyboard focus to the first form input."""


Command = Union[LoadStore, PersistStore, FocusInput]
