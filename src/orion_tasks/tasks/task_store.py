# src/orion_tasks/tasks/task_store.py

from __future__ import annotations

import contextlib
import itertools
import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any

from ..core.errors import PersistenceError
from .task_manager import TaskManager
from .task_models import AnyTask, Deadline, Event, TaskKind, Todo, format_date

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# "@type" / "isDone" / [y, m, d] dates come from files written by the
# original Java build; they are read but never written.
_LEGACY_KINDS = {"Todo": TaskKind.TODO, "Deadline": TaskKind.DEADLINE, "Event": TaskKind.EVENT}


class JsonTaskStore:
    """
    JSON file task store.

    The whole list is written on every save:
    - serialize to a temporary sibling file
    - close it
    - os.replace() it over the target

    A missing or blank file loads as an empty list.
    """

    def __init__(self, path: str | Path = "data/tasks.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- encoding ----

    @staticmethod
    def _task_to_dict(task: AnyTask) -> dict[str, Any]:
        out: dict[str, Any] = {
            "type": task.kind.value,
            "description": task.description,
            "is_done": task.is_done,
        }
        if isinstance(task, Deadline):
            out["by"] = format_date(task.by)
        elif isinstance(task, Event):
            out["from"] = format_date(task.start)
            out["to"] = format_date(task.end)
        return out

    @staticmethod
    def _to_date(raw: Any, field_name: str) -> date:
        if isinstance(raw, str):
            return date.fromisoformat(raw)
        if isinstance(raw, list) and len(raw) == 3 and all(isinstance(p, int) for p in raw):
            return date(*raw)
        raise ValueError(f"invalid {field_name!r} date: {raw!r}")

    @classmethod
    def _dict_to_task(cls, raw: Any) -> AnyTask:
        if not isinstance(raw, dict):
            raise ValueError(f"task entry is not an object: {raw!r}")

        raw_kind = raw.get("type", raw.get("@type"))
        kind = _LEGACY_KINDS[raw_kind] if raw_kind in _LEGACY_KINDS else TaskKind(raw_kind)

        description = raw.get("description")
        if not isinstance(description, str) or not description.strip():
            raise ValueError("task description is missing")

        is_done = raw.get("is_done", raw.get("isDone", False))
        if not isinstance(is_done, bool):
            raise ValueError(f"invalid done flag: {is_done!r}")

        if kind is TaskKind.TODO:
            return Todo(description, is_done=is_done)
        if kind is TaskKind.DEADLINE:
            return Deadline(description, cls._to_date(raw.get("by"), "by"), is_done=is_done)
        start = raw.get("from", raw.get("start"))
        end = raw.get("to", raw.get("end"))
        return Event(
            description,
            cls._to_date(start, "from"),
            cls._to_date(end, "to"),
            is_done=is_done,
        )

    # ---- public API ----

    def save(self, manager: TaskManager) -> None:
        doc = {
            "version": SCHEMA_VERSION,
            "tasks": [self._task_to_dict(t) for t in manager.tasks],
        }
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with tmp.open("w", encoding="utf-8") as fh:
                json.dump(doc, fh, ensure_ascii=False, indent=2)
            os.replace(tmp, self._path)
        except (OSError, TypeError, ValueError) as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise PersistenceError(f"Error when saving tasks to {self._path}: {e}") from e
        logger.debug("Saved %d tasks to %s", len(manager), self._path)

    def load(self) -> TaskManager:
        if not self._path.exists():
            logger.info("No task file at %s, starting with an empty list.", self._path)
            return TaskManager()

        try:
            text = self._path.read_text("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Error when reading file {self._path}: {e}") from e

        if not text.strip():
            return TaskManager()

        try:
            data = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise PersistenceError(f"Error when deserializing file {self._path}: {e}") from e

        entries = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(entries, list):
            raise PersistenceError(f"Error when deserializing file {self._path}: no task list")

        try:
            tasks = [self._dict_to_task(raw) for raw in entries]
        except (TypeError, ValueError, OverflowError) as e:
            raise PersistenceError(f"Error when deserializing file {self._path}: {e}") from e

        logger.info("Loaded %d tasks from %s", len(tasks), self._path)
        return TaskManager(tasks)

    def quarantine(self) -> Path | None:
        """Move an unreadable task file aside so the next save cannot overwrite it."""
        if not self._path.exists():
            return None
        target = self._path.with_name(self._path.name + ".corrupt")
        # earlier backups are never replaced
        for n in itertools.count(1):
            if not target.exists():
                break
            target = self._path.with_name(f"{self._path.name}.corrupt.{n}")
        try:
            os.replace(self._path, target)
        except OSError as e:
            raise PersistenceError(f"Error when moving {self._path} aside: {e}") from e
        logger.warning("Moved unreadable task file %s to %s", self._path, target)
        return target
