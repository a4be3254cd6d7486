# -*- coding: utf-8 -*-
"""Tests for the project codec and persistence backends."""

from __future__ import annotations

import json
import uuid
from pathlib import Path

import pytest

from taskmanager.core.persistence import (
    CodecError,
    FileBackend,
    PersistenceError,
    decode_projects,
    encode_projects,
)
from taskmanager.models.project import Project


def test_decode_reproduces_encoded_projects(sample_projects: list[Project]) -> None:
    assert decode_projects(encode_projects(sample_projects)) == sample_projects


def test_round_trip_keeps_unicode_and_empty_fields() -> None:
    projects = [Project(name="Über ✓", description=""), Project(name="", description="line\nbreak")]
    assert decode_projects(encode_projects(projects)) == projects


def test_encoded_payload_is_versioned_json(sample_projects: list[Project]) -> None:
    payload = json.loads(encode_projects(sample_projects).decode("utf-8"))
    assert payload["version"] == 1
    assert [item["name"] for item in payload["projects"]] == ["Website", "Garden", "Taxes"]
    assert payload["projects"][0]["id"] == "00000000-0000-4000-8000-000000000001"


def test_decode_empty_list() -> None:
    assert decode_projects(b'{"version": 1, "projects": []}') == []


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b"\xff\xfe",
        b"[]",
        b'{"projects": {}}',
        b'{"version": 99, "projects": []}',
        b'{"projects": [1]}',
        b'{"projects": [{"name": "x", "description": ""}]}',
        b'{"projects": [{"id": "nope", "name": "x", "description": ""}]}',
        b'{"projects": [{"id": "00000000-0000-4000-8000-000000000001", "name": 3, "description": ""}]}',
        b'{"version": 1, "projects": [], "n": ' + b"9" * 5000 + b"}",
        b'{"version": 1, "projects": ' + b"[" * 200000 + b"]" * 200000 + b"}",
    ],
)
def test_decode_rejects_malformed_payload(payload: bytes) -> None:
    with pytest.raises(CodecError):
        decode_projects(payload)


def test_decode_rejects_duplicate_ids() -> None:
    project_id = uuid.uuid4()
    data = encode_projects([Project("a", "", project_id), Project("b", "", project_id)])
    with pytest.raises(CodecError, match="Duplicate"):
        decode_projects(data)


def test_file_backend_read_missing_returns_none(data_file: Path) -> None:
    assert FileBackend(data_file).read() is None


def test_file_backend_write_creates_parent_and_overwrites(data_file: Path) -> None:
    backend = FileBackend(data_file)
    backend.write(b"first payload")
    backend.write(b"second")
    assert data_file.read_bytes() == b"second"
    assert backend.read() == b"second"
    assert [p.name for p in data_file.parent.iterdir()] == ["projects.json"]


def test_file_backend_write_failure_raises_persistence_error(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    with pytest.raises(PersistenceError):
        FileBackend(blocker / "projects.json").write(b"{}")


def test_file_backend_read_directory_raises_persistence_error(tmp_path: Path) -> None:
    with pytest.raises(PersistenceError):
        FileBackend(tmp_path).read()
