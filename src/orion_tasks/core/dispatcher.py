# src/orion_tasks/core/dispatcher.py

from __future__ import annotations

import logging

from ..tasks.task_manager import TaskManager
from ..tasks.task_models import Deadline, Event, Todo
from .commands import (
    Command,
    CommandResult,
    DeadlineCommand,
    DeleteCommand,
    EmptyCommand,
    EventCommand,
    ExitCommand,
    FindCommand,
    ListCommand,
    MarkCommand,
    TodoCommand,
    UnmarkCommand,
)
from .errors import PersistenceError
from .ports import TaskPersistence

logger = logging.getLogger(__name__)

FAREWELL = "Bye. Hope to see you again soon!"


def _persist(manager: TaskManager, store: TaskPersistence) -> None:
    """
    Save after a successful mutation.

    A failed save is logged, not raised: the in-memory list stays authoritative
    for the session and disk may be behind until the next successful save.
    """
    try:
        store.save(manager)
    except PersistenceError:
        logger.exception("Failed to save %d tasks; keeping in-memory state.", len(manager))


def _listing(header: str, lines: list[str]) -> str:
    return "\n".join([header, *lines])


def execute(command: Command, manager: TaskManager, store: TaskPersistence) -> CommandResult:
    """
    Run one parsed command.

    Raises TaskIndexError for out-of-range indices (state untouched).
    """
    if isinstance(command, ExitCommand):
        return CommandResult(FAREWELL, is_exit=True)

    if isinstance(command, EmptyCommand):
        return CommandResult("")

    if isinstance(command, ListCommand):
        lines = manager.list_tasks()
        if not lines:
            return CommandResult("Your task list is empty.")
        return CommandResult(_listing("Here are the tasks in your list:", lines))

    if isinstance(command, FindCommand):
        lines = manager.find(command.keyword)
        if not lines:
            return CommandResult(f"No tasks in your list match '{command.keyword}'.")
        return CommandResult(_listing("Here are the matching tasks in your list:", lines))

    if isinstance(command, (MarkCommand, UnmarkCommand)):
        message = manager.mark_task(command.index, isinstance(command, MarkCommand))
    elif isinstance(command, DeleteCommand):
        message = manager.delete(command.index)
    elif isinstance(command, TodoCommand):
        message = manager.add(Todo(command.description))
    elif isinstance(command, DeadlineCommand):
        message = manager.add(Deadline(command.description, command.by))
    elif isinstance(command, EventCommand):
        message = manager.add(Event(command.description, command.start, command.end))
    else:
        raise TypeError(f"Unsupported command: {command!r}")

    _persist(manager, store)
    return CommandResult(message)
