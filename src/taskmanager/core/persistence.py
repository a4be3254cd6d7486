# -*- coding: utf-8 -*-
"""Persistence backends and the project list codec."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from taskmanager.constants import DATA_FORMAT_VERSION
from taskmanager.models.project import Project
from taskmanager.utils.file_utils import write_bytes_atomic

logger = logging.getLogger(__name__)


class TaskManagerError(Exception):
    """Base error for task manager failures."""


class PersistenceError(TaskManagerError):
    """Raised when the persistence medium cannot be read or written."""


class CodecError(TaskManagerError):
    """Raised when persisted bytes do not describe a valid project list."""


class PersistenceBackend(Protocol):
    """Byte-level storage for the project list.

    ``read`` returns ``None`` when nothing has been persisted yet. ``write``
    replaces the previous content in full and raises ``PersistenceError`` on
    failure.
    """

    def read(self) -> bytes | None: ...

    def write(self, data: bytes) -> None: ...


class FileBackend:
    """Store the encoded project list in a single file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def read(self) -> bytes | None:
        try:
            return self.path.read_bytes()
        except FileNotFoundError:
            return None
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc

    def write(self, data: bytes) -> None:
        try:
            write_bytes_atomic(self.path, data)
        except OSError as exc:
            raise PersistenceError(f"Cannot write {self.path}: {exc}") from exc

    def __repr__(self) -> str:
        return f"FileBackend({str(self.path)!r})"


def encode_projects(projects: Iterable[Project]) -> bytes:
    """Encode projects as UTF-8 JSON, preserving order."""
    payload = {
        "version": DATA_FORMAT_VERSION,
        "projects": [project.to_dict() for project in projects],
    }
    return (json.dumps(payload, indent=2, ensure_ascii=True) + "\n").encode("utf-8")


def decode_projects(data: bytes) -> list[Project]:
    """Decode bytes produced by ``encode_projects``.

    Raises ``CodecError`` for anything that is not a well-formed project list,
    including duplicated ids.
    """
    try:
        payload = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError) as exc:
        raise CodecError(f"Invalid project data: {exc}") from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("projects"), list):
        raise CodecError("Expected an object with a 'projects' list")
    version = payload.get("version", DATA_FORMAT_VERSION)
    if version != DATA_FORMAT_VERSION:
        raise CodecError(f"Unsupported data version: {version!r}")

    projects: list[Project] = []
    seen = set()
    for index, raw in enumerate(payload["projects"]):
        if not isinstance(raw, dict):
            raise CodecError(f"Project #{index} is not an object")
        try:
            project = Project.from_dict(raw)
        except (KeyError, TypeError, ValueError) as exc:
            raise CodecError(f"Project #{index} is malformed: {exc}") from exc
        if project.id in seen:
            raise CodecError(f"Duplicate project id {project.id}")
        seen.add(project.id)
        projects.append(project)
    return projects
