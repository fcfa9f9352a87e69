# tests/test_parser.py

from __future__ import annotations

from datetime import date

import pytest

from orion_tasks.core.commands import (
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
from orion_tasks.core.errors import ParseError
from orion_tasks.core.parser import parse_command


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("", EmptyCommand()),
        ("   \t ", EmptyCommand()),
        ("bye", ExitCommand()),
        ("  list  ", ListCommand()),
        ("mark 1", MarkCommand(1)),
        ("unmark   2 ", UnmarkCommand(2)),
        ("delete 3", DeleteCommand(3)),
        ("delete -1", DeleteCommand(-1)),
        ("todo read book", TodoCommand("read book")),
        ("todo\tread   book", TodoCommand("read   book")),
        ("find book", FindCommand("book")),
        (
            "deadline submit report /by 2024-05-01",
            DeadlineCommand("submit report", date(2024, 5, 1)),
        ),
        (
            "event trip /from 2024-05-05 /to 2024-05-10",
            EventCommand("trip", date(2024, 5, 5), date(2024, 5, 10)),
        ),
        (
            "event standup /from 2024-05-05 /to 2024-05-05",
            EventCommand("standup", date(2024, 5, 5), date(2024, 5, 5)),
        ),
    ],
)
def test_valid_commands(line: str, expected) -> None:
    assert parse_command(line) == expected


@pytest.mark.parametrize(
    "line",
    [
        "bye now",
        "list all",
        "mark",
        "mark one",
        "mark 1 2",
        "mark 1.5",
        "unmark",
        "delete x",
        "todo",
        "find",
        "find   ",
        "deadline",
        "deadline submit report",
        "deadline /by 2024-05-01",
        "deadline submit report /by",
        "deadline submit report /by   ",
        "event",
        "event trip /from 2024-05-05",
        "event /from 2024-05-05 /to 2024-05-10",
        "event trip /from /to 2024-05-10",
        "event trip /from 2024-05-05 /to",
    ],
)
def test_malformed_commands_raise_parse_error(line: str) -> None:
    with pytest.raises(ParseError):
        parse_command(line)


@pytest.mark.parametrize("line", ["hello", "Todo read", "LIST", "/help", "todos x"])
def test_unknown_keyword(line: str) -> None:
    with pytest.raises(ParseError, match="don't know what that means"):
        parse_command(line)


@pytest.mark.parametrize(
    "line",
    [
        "deadline submit report /by 2024-13-01",
        "deadline submit report /by 2024-02-30",
        "deadline submit report /by 2024-5-1",
        "deadline submit report /by tomorrow",
        "deadline submit report /by 2024-05-01 /by 2024-06-01",
        "event trip /from 2024-05-05 /to next week",
    ],
)
def test_bad_dates_mention_format(line: str) -> None:
    with pytest.raises(ParseError, match="yyyy-mm-dd"):
        parse_command(line)


def test_event_end_before_start() -> None:
    with pytest.raises(ParseError, match="earlier than the start date"):
        parse_command("event trip /from 2024-05-10 /to 2024-05-05")


def test_delimiters_inside_free_text_are_still_split() -> None:
    # literal substring split: "/to" in the description is taken as a delimiter
    with pytest.raises(ParseError):
        parse_command("event go /to school /from 2024-05-05 /to 2024-05-06")
    with pytest.raises(ParseError):
        parse_command("event go/tomorrow /from 2024-05-05 /to 2024-05-06")


def test_event_delimiter_order_is_not_checked() -> None:
    cmd = parse_command("event trip /to 2024-05-05 /from 2024-05-06")
    assert cmd == EventCommand("trip", date(2024, 5, 5), date(2024, 5, 6))


def test_todo_description_may_contain_delimiters() -> None:
    assert parse_command("todo read /by the river") == TodoCommand("read /by the river")


@pytest.mark.parametrize(
    "line",
    ["\x00", "mark ١", "deadline /by", "event /from /to", "   find  ", "mark 99999999999999999999"],
)
def test_parsing_is_total(line: str) -> None:
    try:
        parse_command(line)
    except ParseError as e:
        assert e.message
