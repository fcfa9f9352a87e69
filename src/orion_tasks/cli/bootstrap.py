# src/orion_tasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the data directory exists (startup fails loudly if it cannot),
- wires the JSON task store and the loaded TaskManager into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.errors import PersistenceError, StartupError
from ..core.state import AppState
from ..tasks.task_manager import TaskManager
from ..tasks.task_store import JsonTaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    for path in (settings.data_dir, settings.tasks_path.parent):
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StartupError(f"Cannot create data directory {path}: {e}") from e


def load_tasks(store: JsonTaskStore) -> TaskManager:
    """
    Load the saved list, or start empty.

    An unreadable file is moved aside first, so the first save of this session
    does not overwrite it.
    """
    try:
        return store.load()
    except PersistenceError:
        logger.exception("Failed to load tasks from %s, starting with an empty list.", store.path)

    try:
        store.quarantine()
    except PersistenceError:
        logger.exception("Failed to move unreadable task file aside.")
    return TaskManager()


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    Raises StartupError when the data directory cannot be created.
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    store = JsonTaskStore(settings.tasks_path)
    return AppState(settings=settings, manager=load_tasks(store), store=store)
