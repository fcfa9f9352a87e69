# src/orion_tasks/core/commands.py

"""
Parsed commands.

Each variant carries only the fields its keyword needs. Instances are frozen
and consumed once by core.dispatcher.execute().
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ExitCommand:
    pass


@dataclass(frozen=True, slots=True)
class EmptyCommand:
    pass


@dataclass(frozen=True, slots=True)
class ListCommand:
    pass


@dataclass(frozen=True, slots=True)
class MarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class UnmarkCommand:
    index: int


@dataclass(frozen=True, slots=True)
class DeleteCommand:
    index: int


@dataclass(frozen=True, slots=True)
class TodoCommand:
    description: str


@dataclass(frozen=True, slots=True)
class DeadlineCommand:
    description: str
    by: date


@dataclass(frozen=True, slots=True)
class EventCommand:
    description: str
    start: date
    end: date


@dataclass(frozen=True, slots=True)
class FindCommand:
    keyword: str


Command = (
    ExitCommand
    | EmptyCommand
    | ListCommand
    | MarkCommand
    | UnmarkCommand
    | DeleteCommand
    | TodoCommand
    | DeadlineCommand
    | EventCommand
    | FindCommand
)


@dataclass(frozen=True, slots=True)
class CommandResult:
    message: str
    is_exit: bool = False
