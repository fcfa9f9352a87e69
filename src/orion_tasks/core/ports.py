# src/orion_tasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The dispatcher only needs something that can save and load a TaskManager;
tests plug in-memory fakes here.
"""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..tasks.task_manager import TaskManager


class TaskPersistence(Protocol):
    """Whole-state persistence of the task list. Failures raise PersistenceError."""

    def save(self, manager: TaskManager) -> None: ...

    def load(self) -> TaskManager: ...
