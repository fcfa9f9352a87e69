# tests/test_task_models.py

from __future__ import annotations

from datetime import date

import pytest

from orion_tasks.tasks.task_models import Deadline, Event, TaskKind, Todo


def test_todo_renders_status_box() -> None:
    task = Todo("read book")
    assert task.is_done is False
    assert task.render() == "[ ] read book"

    task.mark(True)
    assert task.render() == "[✗] read book"
    assert str(task) == "[✗] read book"


def test_mark_is_idempotent() -> None:
    task = Todo("read book")
    task.mark(True)
    task.mark(True)
    assert task.is_done is True
    task.mark(False)
    task.mark(False)
    assert task.is_done is False


def test_deadline_and_event_suffixes() -> None:
    d = Deadline("submit report", date(2024, 5, 1))
    e = Event("trip", date(2024, 5, 5), date(2024, 5, 10), is_done=True)

    assert d.render() == "[ ] submit report (by: 2024-05-01)"
    assert e.render() == "[✗] trip (from: 2024-05-05 to: 2024-05-10)"
    assert (Todo.kind, Deadline.kind, Event.kind) == (
        TaskKind.TODO,
        TaskKind.DEADLINE,
        TaskKind.EVENT,
    )


def test_event_allows_single_day_but_not_reversed_range() -> None:
    Event("conference", date(2024, 5, 5), date(2024, 5, 5))
    with pytest.raises(ValueError):
        Event("trip", date(2024, 5, 10), date(2024, 5, 5))


def test_description_is_mutable() -> None:
    task = Todo("read book")
    task.description = "read two books"
    assert task.render() == "[ ] read two books"
