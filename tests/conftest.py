"""Shared test fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.features.tasks.repository import JsonTaskRepository
from app.main import create_app


def task_payload(**overrides) -> dict:
    payload = {
        "title": "A",
        "employee": "Bob",
        "startDate": "2024-01-01",
        "endDate": "2024-01-05",
        "description": "x",
    }
    payload.update(overrides)
    return payload


def read_tasks_file(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture()
def tasks_file(tmp_path: Path) -> Path:
    """Empty collection, the state a fresh deployment starts from."""
    path = tmp_path / "tasks.json"
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture()
def repository(tasks_file: Path) -> JsonTaskRepository:
    return JsonTaskRepository(tasks_file)


@pytest.fixture()
def settings(tmp_path: Path, tasks_file: Path) -> Settings:
    static_dir = tmp_path / "public"
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<h1>Task Board</h1>", encoding="utf-8")
    return Settings(tasks_file=tasks_file, static_dir=static_dir)


@pytest.fixture()
def client(settings: Settings):
    with TestClient(create_app(settings)) as test_client:
        yield test_client
