# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from orion_tasks.core.state import AppState
from orion_tasks.tasks.task_manager import TaskManager
from orion_tasks.tasks.task_store import JsonTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="Orion",
        log_level="WARNING",
        log_dir=data_dir,
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.json",
        separator_width=10,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> JsonTaskStore:
    return JsonTaskStore(settings.tasks_path)


@pytest.fixture()
def state(settings: SimpleNamespace, store: JsonTaskStore) -> AppState:
    """AppState wired with a real JSON store on tmp_path."""
    return AppState(settings=settings, manager=TaskManager(), store=store)
