# src/orion_tasks/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum
from typing import ClassVar

DONE_MARK = "✗"
DATE_FORMAT = "%Y-%m-%d"


class TaskKind(StrEnum):
    """Persisted discriminator of the task variants."""

    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


@dataclass(slots=True)
class Task:
    """
    Shared state of every task variant.

    The description is validated by whoever builds the task (parser / store);
    the model itself only keeps it.
    """

    kind: ClassVar[TaskKind]

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def mark(self, done: bool) -> None:
        self.is_done = done

    def render(self) -> str:
        status = DONE_MARK if self.is_done else " "
        return f"[{status}] {self.description}{self._suffix()}"

    def _suffix(self) -> str:
        return ""

    def __str__(self) -> str:
        return self.render()


@dataclass(slots=True)
class Todo(Task):
    kind: ClassVar[TaskKind] = TaskKind.TODO


@dataclass(slots=True)
class Deadline(Task):
    kind: ClassVar[TaskKind] = TaskKind.DEADLINE

    by: date

    def _suffix(self) -> str:
        return f" (by: {format_date(self.by)})"


@dataclass(slots=True)
class Event(Task):
    kind: ClassVar[TaskKind] = TaskKind.EVENT

    start: date
    end: date

    def __post_init__(self) -> None:
        if self.end < self.start:
            raise ValueError(f"event ends ({self.end}) before it starts ({self.start})")

    def _suffix(self) -> str:
        return f" (from: {format_date(self.start)} to: {format_date(self.end)})"


AnyTask = Todo | Deadline | Event
