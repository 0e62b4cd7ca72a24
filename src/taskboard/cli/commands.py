# src/taskboard/cli/commands.py

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date

from ..core.state import AppState
from ..render import ViewMode, render_view
from ..tasks.task_models import Category, Priority
from ..tasks.task_query import TaskFilter

CommandHandler = Callable[[AppState, list[str]], str]

_ID_RE = re.compile(r"#?(-?[0-9]+)")

logger = logging.getLogger(__name__)

ADD_USAGE = (
    "Usage: /add <text> [--priority high|medium|low] "
    "[--category work|personal|shopping|health] [--due YYYY-MM-DD]"
)

_ADD_OPTIONS = {
    "--priority": "priority",
    "-p": "priority",
    "--category": "category",
    "-c": "category",
    "--due": "due",
    "-d": "due",
}


class CommandRegistry:
    """Simple slash-command registry used by the console connector (/help, /add, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        parts = line[1:].split()
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("Plain text (no leading /) adds a task with default priority/category.")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskboard"))
    return render_view(state.current_view(), state.view_mode, app_name=app_name)


def _parse_id(raw: str) -> int | None:
    m = _ID_RE.fullmatch(raw.strip())
    if m is None:
        return None
    return int(m.group(1))


def parse_add_args(args: list[str]) -> tuple[str, dict[str, str]]:
    """
    Split /add arguments into (text, options).

    Raises ValueError on an option without a value or an invalid choice.
    """
    words: list[str] = []
    opts: dict[str, str] = {}
    i = 0
    while i < len(args):
        tok = args[i]
        field = _ADD_OPTIONS.get(tok.lower())
        if field is None:
            words.append(tok)
            i += 1
            continue
        if i + 1 >= len(args):
            raise ValueError(f"Missing value for {tok}.")
        opts[field] = args[i + 1]
        i += 2

    if "priority" in opts and opts["priority"].lower() not in {p.value for p in Priority}:
        raise ValueError(f"Unknown priority: {opts['priority']}.")
    if "category" in opts and opts["category"].lower() not in {c.value for c in Category}:
        raise ValueError(f"Unknown category: {opts['category']}.")
    if "due" in opts:
        try:
            date.fromisoformat(opts["due"])
        except ValueError:
            raise ValueError(f"Bad due date: {opts['due']} (expected YYYY-MM-DD).") from None

    return " ".join(words), opts


def add_from_text(state: AppState, text: str) -> str:
    """Plain (non-command) input: add a task with the store defaults."""
    task = state.task_store.add(text)
    if task is None:
        return "Nothing to add."
    return f"Added #{task.id}.\n\n{_render(state)}"


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    try:
        text, opts = parse_add_args(args)
    except ValueError as e:
        logger.debug("Rejected /add args=%s: %s", args, e)
        return f"{e}\n{ADD_USAGE}"

    task = state.task_store.add(
        text,
        priority=opts.get("priority"),
        category=opts.get("category"),
        due_date=opts.get("due"),
    )
    if task is None:
        return ADD_USAGE
    return f"Added #{task.id}.\n\n{_render(state)}"


def cmd_done(state: AppState, args: list[str]) -> str:
    """
    /done <id>  -> toggle completion (running it twice restores the task)
    """
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /done <id>"
    task = state.task_store.toggle_complete(task_id)
    if task is None:
        return f"No task #{task_id}."
    verb = "Completed" if task.completed else "Reopened"
    return f"{verb} #{task.id}.\n\n{_render(state)}"


def cmd_delete(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args[0]) if args else None
    if task_id is None:
        return "Usage: /del <id>"
    if not state.task_store.delete(task_id):
        return f"No task #{task_id}."
    return f"Deleted #{task_id}.\n\n{_render(state)}"


def cmd_filter(state: AppState, args: list[str]) -> str:
    """
    /filter                      -> show current filter
    /filter all|active|completed -> switch filter
    """
    if not args:
        return f"Filter is {state.filter.value}. Use /filter all|active|completed."
    token = args[0].lower()
    if token not in {f.value for f in TaskFilter}:
        return "Usage: /filter all|active|completed"
    state.filter = TaskFilter(token)
    return _render(state)


def cmd_search(state: AppState, args: list[str]) -> str:
    """
    /search <query> -> search within the current filter
    /search         -> clear search
    """
    state.search = " ".join(args)
    return _render(state)


def cmd_view(state: AppState, args: list[str]) -> str:
    if not args:
        return f"View is {state.view_mode.value}. Use /view list|grid."
    token = args[0].lower()
    if token not in {m.value for m in ViewMode}:
        return "Usage: /view list|grid"
    state.view_mode = ViewMode(token)
    return _render(state)


def cmd_list(state: AppState, args: list[str]) -> str:
    return _render(state)


def cmd_stats(state: AppState, args: list[str]) -> str:
    s = state.current_view().stats
    return (
        "Stats:\n"
        f"  Total: {s.total}\n"
        f"  Active: {s.active_count}\n"
        f"  Completed: {s.completed_count}\n"
        f"  High priority (open): {s.high_priority_count}"
    )


def cmd_status(state: AppState, args: list[str]) -> str:
    store_path = getattr(state.settings, "store_path", "?")
    search = f'"{state.search}"' if state.search else "(none)"
    return (
        "Status:\n"
        f"  Store: {store_path}\n"
        f"  Filter: {state.filter.value}\n"
        f"  Search: {search}\n"
        f"  View: {state.view_mode.value}"
    )


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text> [--priority P] [--category C] [--due DATE].", aliases=["a"])
registry.register("done", cmd_done, help_text="Toggle completion: /done <id>.", aliases=["toggle", "x"])
registry.register("del", cmd_delete, help_text="Delete a task: /del <id>.", aliases=["rm", "delete"])
registry.register("filter", cmd_filter, help_text="Filter tasks: /filter all|active|completed.", aliases=["f"])
registry.register("search", cmd_search, help_text="Search task text: /search <query> (empty clears).", aliases=["s"])
registry.register("view", cmd_view, help_text="Switch layout: /view list|grid.")
registry.register("list", cmd_list, help_text="Show the current view.", aliases=["ls"])
registry.register("stats", cmd_stats, help_text="Show task counts.")
registry.register("status", cmd_status, help_text="Show store path, filter, search and view.")
