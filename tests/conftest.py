# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
import time
import uuid
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture
def sample_projects():
    from taskmanager.models.project import Project

    return [
        Project(name="Website", description="Rebuild", id=uuid.UUID("00000000-0000-4000-8000-000000000001")),
        Project(name="Garden", description="", id=uuid.UUID("00000000-0000-4000-8000-000000000002")),
        Project(name="Taxes", description="File 2025 return", id=uuid.UUID("00000000-0000-4000-8000-000000000003")),
    ]


@pytest.fixture
def sample_store(sample_projects):
    from taskmanager.core.project_store import ProjectStore

    return ProjectStore(sample_projects)


class MemoryBackend:
    """In-memory stand-in for the data file, with optional failures and slow writes."""

    def __init__(
        self,
        data: bytes | None = None,
        read_error: Exception | None = None,
        write_error: Exception | None = None,
        write_delays: list[float] | None = None,
    ) -> None:
        self.data = data
        self.writes = 0
        self.read_error = read_error
        self.write_error = write_error
        self.write_delays = list(write_delays or [])

    def read(self) -> bytes | None:
        if self.read_error is not None:
            raise self.read_error
        return self.data

    def write(self, data: bytes) -> None:
        if self.write_delays:
            time.sleep(self.write_delays.pop(0))
        if self.write_error is not None:
            raise self.write_error
        self.data = data
        self.writes += 1


@pytest.fixture
def memory_backend():
    return MemoryBackend


@pytest.fixture
def data_file(tmp_path: Path) -> Path:
    return tmp_path / "data" / "projects.json"


@pytest.fixture
def default_config() -> dict:
    from taskmanager.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
