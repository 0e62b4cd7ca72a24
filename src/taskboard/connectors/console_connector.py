# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..cli.commands import add_from_text, registry as command_registry
from ..core.state import AppState
from ..render import render_view

logger = logging.getLogger(__name__)

PROMPT = "taskboard> "


def handle_line(state: AppState, line: str) -> str | None:
    """
    Route one input line. Returns the text to print, or None for blank input.

    Handler crashes are logged and reported; they never end the loop.
    """
    line = line.strip()
    if not line:
        return None

    try:
        reply = command_registry.handle(state, line)
        if reply is None:
            reply = add_from_text(state, line)
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."
    return reply


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    logger.info("Console connector started (tasks=%d).", state.task_store.count())
    app_name = str(getattr(state.settings, "app_name", "taskboard"))

    write(render_view(state.current_view(), state.view_mode, app_name=app_name))
    write("\nType a task to add it. Use /help for commands. Use /exit to quit.\n")

    while True:
        try:
            user_input = read_line(PROMPT)
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            write("")
            break

        if user_input.strip().lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input)
        if reply is not None:
            write(reply)

    logger.info("Console connector finished.")
