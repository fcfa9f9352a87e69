# src/orion_tasks/connectors/console_connector.py

from __future__ import annotations

import logging

from ..core.commands import CommandResult
from ..core.dispatcher import execute
from ..core.errors import ParseError, TaskIndexError
from ..core.parser import parse_command
from ..core.state import AppState

logger = logging.getLogger(__name__)

LINE_CHAR = "─"
LOGO = (
    " ____        _        \n"
    "|  _ \\ _   _| | _____ \n"
    "| | | | | | | |/ / _ \\\n"
    "| |_| | |_| |   <  __/\n"
    "|____/ \\__,_|_|\\_\\___|\n"
)


def _separator(state: AppState) -> str:
    width = int(getattr(state.settings, "separator_width", 60))
    return LINE_CHAR * width


def _print_block(state: AppState, text: str) -> None:
    print(text)
    print(_separator(state))


def handle_line(state: AppState, line: str) -> CommandResult:
    """
    Parse and execute one input line.

    User errors (bad syntax, bad index) become a plain message; the state is
    unchanged in that case.
    """
    try:
        command = parse_command(line)
        return execute(command, state.manager, state.store)
    except (ParseError, TaskIndexError) as e:
        logger.debug("Rejected input %r: %s", line, e)
        return CommandResult(str(e))


def run_console_loop(state: AppState) -> None:
    app_name = str(getattr(state.settings, "app_name", "Orion"))
    logger.info("Console connector started (%d tasks loaded).", len(state.manager))

    _print_block(state, "Hello from\n" + LOGO)
    _print_block(state, f"Hello! I'm {app_name}\nWhat can I do for you?\n")

    while True:
        try:
            line = input()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        try:
            result = handle_line(state, line)
        except Exception:
            logger.exception("Command handler crashed.")
            result = CommandResult("Internal error while handling a command.")

        if result.message:
            _print_block(state, result.message)

        # bye is checked before the next read
        if result.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
