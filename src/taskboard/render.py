# src/taskboard/render.py

"""Plain-text rendering of a TaskView (list rows or a grid of cards)."""

from __future__ import annotations

import shutil
import textwrap
from datetime import date
from enum import StrEnum

from .tasks.task_models import Category, Priority, Task
from .tasks.task_query import TaskFilter, TaskView

CARD_WIDTH = 28
CARD_GAP = "  "

PRIORITY_LABELS: dict[str, str] = {
    Priority.HIGH.value: "High",
    Priority.MEDIUM.value: "Medium",
    Priority.LOW.value: "Low",
}
CATEGORY_LABELS: dict[str, str] = {
    Category.WORK.value: "Work",
    Category.PERSONAL.value: "Personal",
    Category.SHOPPING.value: "Shopping",
    Category.HEALTH.value: "Health",
}


class ViewMode(StrEnum):
    LIST = "list"
    GRID = "grid"

    @classmethod
    def from_raw(cls, raw: object) -> ViewMode:
        if not raw:
            return cls.LIST
        try:
            return cls(str(raw).strip().lower())
        except Exception:
            return cls.LIST


def priority_label(raw: object) -> str:
    return PRIORITY_LABELS.get(str(raw), "Medium")


def category_label(raw: object) -> str:
    return CATEGORY_LABELS.get(str(raw), "Other")


def format_due_date(raw: str | None) -> str:
    """'2026-10-19' -> 'Oct 19'. Unparseable dates are shown as stored."""
    if not raw:
        return ""
    try:
        d = date.fromisoformat(raw)
    except ValueError:
        return raw
    return f"{d.strftime('%b')} {d.day}"


def _meta(task: Task) -> str:
    parts = [category_label(task.category), priority_label(task.priority)]
    if task.due_date:
        parts.append(f"due {format_due_date(task.due_date)}")
    return " | ".join(parts)


def _check(task: Task) -> str:
    return "[x]" if task.completed else "[ ]"


def render_header(view: TaskView, app_name: str = "taskboard") -> str:
    s = view.stats
    tabs = []
    for flt in TaskFilter:
        label = f"All ({s.total})" if flt is TaskFilter.ALL else flt.value.capitalize()
        tabs.append(f"<{label}>" if flt is view.filter else label)
    lines = [
        f"{app_name}: {s.active_count} active, {s.completed_count} completed, "
        f"{s.high_priority_count} high priority",
        "  ".join(tabs),
    ]
    if view.search:
        lines.append(f'search: "{view.search}"')
    return "\n".join(lines)


def render_task_line(task: Task) -> str:
    return f"{_check(task)} #{task.id}  {task.text}  ({_meta(task)})"


def _render_card(task: Task, width: int) -> list[str]:
    inner = width - 4
    body = [f"{_check(task)} #{task.id}"]
    body.extend(textwrap.wrap(task.text, inner) or [""])
    body.extend(textwrap.wrap(_meta(task), inner))
    border = "+" + "-" * (width - 2) + "+"
    return [border, *(f"| {line:<{inner}} |" for line in body), border]


def render_grid(tasks: list[Task], *, total_width: int | None = None) -> str:
    if total_width is None:
        total_width = shutil.get_terminal_size((80, 24)).columns
    per_row = max(1, (total_width + len(CARD_GAP)) // (CARD_WIDTH + len(CARD_GAP)))

    out: list[str] = []
    for start in range(0, len(tasks), per_row):
        cards = [_render_card(t, CARD_WIDTH) for t in tasks[start : start + per_row]]
        height = max(len(c) for c in cards)
        for c in cards:
            # Keep the bottom border last when padding shorter cards.
            c[-1:-1] = [f"|{' ' * (CARD_WIDTH - 2)}|"] * (height - len(c))
        for row in zip(*cards):
            out.append(CARD_GAP.join(row).rstrip())
    return "\n".join(out)


def render_view(
    view: TaskView,
    mode: ViewMode = ViewMode.LIST,
    *,
    app_name: str = "taskboard",
    total_width: int | None = None,
) -> str:
    header = render_header(view, app_name)
    if view.is_empty:
        return f"{header}\n\n{view.empty_message}"
    if mode is ViewMode.GRID:
        body = render_grid(view.tasks, total_width=total_width)
    else:
        body = "\n".join(render_task_line(t) for t in view.tasks)
    return f"{header}\n\n{body}"
