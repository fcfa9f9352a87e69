# src/orion_tasks/core/parser.py

"""
Line -> Command parser.

parse_command() is total: it returns a Command or raises ParseError with a
message meant for the user. Keywords are matched exactly (case-sensitive).
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import date, datetime

from ..tasks.task_models import DATE_FORMAT
from .commands import (
    Command,
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
from .errors import ParseError

WHITESPACE_RE = re.compile(r"\s+")
INT_TOKEN_RE = re.compile(r"[+-]?[0-9]+")
ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
DEADLINE_DELIM = "/by"
EVENT_DELIM_RE = re.compile(r"/from|/to")

UNKNOWN_COMMAND = "Oops!!! I'm sorry, but I don't know what that means :-("

Parser = Callable[[str], Command]


def _parse_date(raw: str, what: str) -> date:
    if ISO_DATE_RE.fullmatch(raw):
        try:
            return datetime.strptime(raw, DATE_FORMAT).date()
        except ValueError:
            pass
    raise ParseError(f"Oops!! the date format of {what} is incorrect, please use the format yyyy-mm-dd")


def _parse_index(value: str, article: str) -> int:
    # exactly one integer token, nothing after it
    tokens = value.split()
    if len(tokens) != 1 or not INT_TOKEN_RE.fullmatch(tokens[0]):
        raise ParseError(f"Oops!!! Invalid argument of {article} command")
    return int(tokens[0])


def _no_arguments(keyword: str, command: Command) -> Parser:
    def parse(value: str) -> Command:
        if value:
            raise ParseError(f"Oops!!! The {keyword} command should not be followed by any description")
        return command

    return parse


def _parse_mark(value: str) -> Command:
    return MarkCommand(_parse_index(value, "a mark"))


def _parse_unmark(value: str) -> Command:
    return UnmarkCommand(_parse_index(value, "an unmark"))


def _parse_delete(value: str) -> Command:
    return DeleteCommand(_parse_index(value, "a delete"))


def _parse_todo(value: str) -> Command:
    if not value:
        raise ParseError("Oops!!! The description of a todo task cannot be empty")
    return TodoCommand(value)


def _parse_deadline(value: str) -> Command:
    parts = value.split(DEADLINE_DELIM, 1)
    if len(parts) < 2:
        raise ParseError("Oops!!! You forgot to provide a deadline for the deadline task")

    description = parts[0].strip()
    by = parts[1].strip()
    if not description:
        raise ParseError("Oops!!! The description of a deadline task cannot be empty")
    if not by:
        raise ParseError("Oops!!! You forgot to provide a deadline for the deadline task")

    return DeadlineCommand(description, _parse_date(by, "deadline"))


def _parse_event(value: str) -> Command:
    # Delimiter order is not checked: the text after the first delimiter is the start.
    parts = EVENT_DELIM_RE.split(value, maxsplit=2)
    if len(parts) < 3:
        raise ParseError("Oops!!! Please provide a proper period for the event task")

    description, start_raw, end_raw = (p.strip() for p in parts)
    if not description:
        raise ParseError("Oops!!! The description of an event task cannot be empty")
    if not start_raw or not end_raw:
        raise ParseError("Oops!!! Please provide a proper period for the event task")

    start = _parse_date(start_raw, "event")
    end = _parse_date(end_raw, "event")
    if end < start:
        raise ParseError("Oops!!! End date of an event should not be earlier than the start date.")

    return EventCommand(description, start, end)


def _parse_find(value: str) -> Command:
    if not value:
        raise ParseError("Oops!!! Please provide an input to find")
    return FindCommand(value)


_PARSERS: dict[str, Parser] = {
    "bye": _no_arguments("bye", ExitCommand()),
    "list": _no_arguments("list", ListCommand()),
    "mark": _parse_mark,
    "unmark": _parse_unmark,
    "todo": _parse_todo,
    "deadline": _parse_deadline,
    "event": _parse_event,
    "delete": _parse_delete,
    "find": _parse_find,
}

KEYWORDS: tuple[str, ...] = tuple(_PARSERS)


def parse_command(line: str) -> Command:
    line = line.strip()
    if not line:
        return EmptyCommand()

    parts = WHITESPACE_RE.split(line, maxsplit=1)
    keyword = parts[0]
    value = parts[1].strip() if len(parts) > 1 else ""

    parser = _PARSERS.get(keyword)
    if parser is None:
        raise ParseError(UNKNOWN_COMMAND)
    return parser(value)
