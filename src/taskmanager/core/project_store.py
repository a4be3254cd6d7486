# -*- coding: utf-8 -*-
"""Ordered, id-indexed project collection and its load/save contract."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Iterator

from taskmanager.core.persistence import (
    CodecError,
    PersistenceBackend,
    PersistenceError,
    decode_projects,
    encode_projects,
)
from taskmanager.models.project import Project

logger = logging.getLogger(__name__)


class ProjectStore:
    """Canonical ordered collection of projects.

    Projects are kept in insertion order and indexed by id. Callers never get
    a reference to a stored project: lookups and listings return copies, and
    changes go through ``create`` and ``update``.
    """

    def __init__(self, projects: Iterable[Project] = ()) -> None:
        self._projects: dict[uuid.UUID, Project] = {}
        for project in projects:
            if project.id in self._projects:
                raise ValueError(f"Duplicate project id {project.id}")
            self._projects[project.id] = project.copy()

    def create(self, name: str, description: str) -> Project:
        """Append a new project with a fresh id and return a copy of it."""
        project_id = uuid.uuid4()
        while project_id in self._projects:
            project_id = uuid.uuid4()
        project = Project(name=name, description=description, id=project_id)
        self._projects[project_id] = project
        logger.debug("Created project %s (%r)", project_id, name)
        return project.copy()

    def get(self, project_id: uuid.UUID) -> Project | None:
        project = self._projects.get(project_id)
        return project.copy() if project is not None else None

    def update(self, project_id: uuid.UUID, name: str, description: str) -> bool:
        """Overwrite name and description in place. Returns False if the id is unknown."""
        project = self._projects.get(project_id)
        if project is None:
            logger.debug("Update skipped, project %s not found", project_id)
            return False
        project.name = name
        project.description = description
        logger.debug("Updated project %s (%r)", project_id, name)
        return True

    def list(self) -> list[Project]:
        return [project.copy() for project in self._projects.values()]

    def ids(self) -> list[uuid.UUID]:
        return list(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def __contains__(self, project_id: object) -> bool:
        return project_id in self._projects

    def __iter__(self) -> Iterator[Project]:
        return iter(self.list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProjectStore):
            return NotImplemented
        return self.list() == other.list()

    def __repr__(self) -> str:
        return f"ProjectStore({len(self)} projects)"


def load_store(backend: PersistenceBackend) -> ProjectStore:
    """Read the persisted project list.

    Missing or unreadable data yields an empty store; the failure is logged
    and never propagated.
    """
    try:
        data = backend.read()
    except PersistenceError as exc:
        logger.warning("Could not read project data, starting empty: %s", exc)
        return ProjectStore()
    if data is None:
        logger.info("No project data found at %r, starting empty", backend)
        return ProjectStore()
    try:
        projects = decode_projects(data)
    except CodecError as exc:
        logger.warning("Project data is malformed, starting empty: %s", exc)
        return ProjectStore()
    logger.info("Loaded %d projects", len(projects))
    return ProjectStore(projects)


def save_projects(projects: Iterable[Project], backend: PersistenceBackend) -> int:
    """Encode ``projects`` and overwrite the persisted copy. Returns the count written."""
    snapshot = list(projects)
    backend.write(encode_projects(snapshot))
    logger.info("Saved %d projects", len(snapshot))
    return len(snapshot)


def save_store(store: ProjectStore, backend: PersistenceBackend) -> int:
    """Persist the whole store. Raises ``PersistenceError`` on failure."""
    return save_projects(store.list(), backend)
