# -*- coding: utf-8 -*-
"""Tests for session logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskmanager.utils.logger import setup_session_logging


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    for attr in ("_taskmanager_logging_configured", "_taskmanager_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    for attr in ("_taskmanager_logging_configured", "_taskmanager_session_log"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_session_log_created_under_logs_dir(tmp_path: Path, clean_root_logger) -> None:
    path = setup_session_logging(tmp_path, "Task Manager")
    assert path is not None
    assert path.parent == tmp_path / "logs"
    assert path.name.startswith("task-manager-")
    logging.getLogger("taskmanager.test").info("hello from test")
    assert "hello from test" in path.read_text(encoding="utf-8")


def test_second_setup_returns_first_path(tmp_path: Path, clean_root_logger) -> None:
    first = setup_session_logging(tmp_path, "taskmanager")
    second = setup_session_logging(tmp_path / "other", "taskmanager")
    assert first == second
    assert not (tmp_path / "other").exists()


def test_log_level_from_environment(tmp_path: Path, clean_root_logger, monkeypatch) -> None:
    monkeypatch.setenv("TASKMANAGER_LOG_LEVEL", "debug")
    setup_session_logging(tmp_path, "taskmanager")
    assert clean_root_logger.level == logging.DEBUG
