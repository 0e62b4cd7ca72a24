# src/taskboard/core/state.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..render import ViewMode
from ..tasks.task_query import TaskFilter, TaskView, build_view
from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    """
    Explicit owner of everything the UI needs.

    Built once in cli.bootstrap, passed to connectors and command handlers,
    shut down in cli.main.
    """

    # Settings object (real Settings or a SimpleNamespace in tests).
    settings: Any
    task_store: TaskStore

    filter: TaskFilter = TaskFilter.ALL
    search: str = ""
    view_mode: ViewMode = ViewMode.LIST

    def current_view(self) -> TaskView:
        return build_view(self.task_store.tasks(), self.filter, self.search)
