# src/orion_tasks/core/state.py

from __future__ import annotations

from dataclasses import dataclass

from ..tasks.task_manager import TaskManager
from .ports import TaskPersistence


@dataclass
class AppState:
    # Settings object (config.Settings or a test double with the same attributes).
    settings: object

    manager: TaskManager
    store: TaskPersistence
