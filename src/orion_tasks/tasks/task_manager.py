# src/orion_tasks/tasks/task_manager.py

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..core.errors import TaskIndexError
from .task_models import AnyTask

logger = logging.getLogger(__name__)


class TaskManager:
    """
    Ordered task collection.

    Insertion order is display order and persisted order.
    Storage is 0-based; every public method takes and shows 1-based indices.
    """

    def __init__(self, tasks: Iterable[AnyTask] | None = None) -> None:
        self._tasks: list[AnyTask] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    @property
    def tasks(self) -> tuple[AnyTask, ...]:
        return tuple(self._tasks)

    # ---- index helpers ----

    def _to_offset(self, index: int) -> int:
        size = len(self._tasks)
        if size == 0:
            raise TaskIndexError(f"Oops!!! There is no task {index}, your list is empty")
        if not 1 <= index <= size:
            raise TaskIndexError(
                f"Oops!!! There is no task {index}, please pick a number from 1 to {size}"
            )
        return index - 1

    def _count_line(self) -> str:
        n = len(self._tasks)
        noun = "task" if n == 1 else "tasks"
        return f"Now you have {n} {noun} in the list."

    # ---- public API ----

    def get(self, index: int) -> AnyTask:
        return self._tasks[self._to_offset(index)]

    def add(self, task: AnyTask) -> str:
        self._tasks.append(task)
        logger.debug("Task added kind=%s size=%d", task.kind, len(self._tasks))
        return f"Got it. I've added this task:\n  {task.render()}\n{self._count_line()}"

    def mark_task(self, index: int, done: bool) -> str:
        task = self._tasks[self._to_offset(index)]
        task.mark(done)
        logger.debug("Task %d marked done=%s", index, done)
        if done:
            return f"Nice! I've marked this task as done:\n  {task.render()}"
        return f"OK, I've marked this task as not done yet:\n  {task.render()}"

    def delete(self, index: int) -> str:
        task = self._tasks.pop(self._to_offset(index))
        logger.debug("Task %d deleted size=%d", index, len(self._tasks))
        return f"Noted. I've removed this task:\n  {task.render()}\n{self._count_line()}"

    def list_tasks(self) -> list[str]:
        return [f"{i}.{task.render()}" for i, task in enumerate(self._tasks, start=1)]

    def find(self, keyword: str) -> list[str]:
        """Case-sensitive substring scan over descriptions; numbers match list_tasks()."""
        return [
            f"{i}.{task.render()}"
            for i, task in enumerate(self._tasks, start=1)
            if keyword in task.description
        ]
