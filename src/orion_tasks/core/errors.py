# src/orion_tasks/core/errors.py

"""
Error taxonomy.

ParseError and TaskIndexError are recovered by the REPL (printed, loop continues).
PersistenceError is logged and swallowed by the dispatcher.
StartupError aborts the process before the REPL starts.
"""

from __future__ import annotations


class OrionError(Exception):
    """Base error carrying a user-facing message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ParseError(OrionError):
    pass


class TaskIndexError(OrionError, IndexError):
    pass


class PersistenceError(OrionError):
    pass


class StartupError(OrionError):
    pass
