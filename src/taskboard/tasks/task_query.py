# src/taskboard/tasks/task_query.py

"""
Derived views over the task collection.

Everything here is a pure function of (tasks, filter, search): no side
effects, cheap enough to recompute on every render.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .task_models import Priority, Task


class TaskFilter(StrEnum):
    ALL = "all"
    ACTIVE = "active"
    COMPLETED = "completed"

    @classmethod
    def from_raw(cls, raw: object) -> TaskFilter:
        if not raw:
            return cls.ALL
        try:
            return cls(str(raw).strip().lower())
        except Exception:
            return cls.ALL


EMPTY_MESSAGES: dict[TaskFilter, str] = {
    TaskFilter.ALL: "No tasks yet. Add one to get started!",
    TaskFilter.ACTIVE: "No active tasks",
    TaskFilter.COMPLETED: "No completed tasks yet",
}


@dataclass(frozen=True, slots=True)
class TaskStats:
    # Always over the whole collection, never the filtered view.
    total: int
    active_count: int
    completed_count: int
    high_priority_count: int


@dataclass(frozen=True, slots=True)
class TaskView:
    tasks: list[Task]
    stats: TaskStats
    filter: TaskFilter
    search: str

    @property
    def is_empty(self) -> bool:
        return not self.tasks

    @property
    def empty_message(self) -> str:
        return EMPTY_MESSAGES[self.filter]


def matches_filter(task: Task, task_filter: TaskFilter) -> bool:
    if task_filter is TaskFilter.ACTIVE:
        return not task.completed
    if task_filter is TaskFilter.COMPLETED:
        return task.completed
    return True


def matches_search(task: Task, query: str) -> bool:
    if not query:
        return True
    return query.lower() in task.text.lower()


def sort_key(task: Task) -> tuple[int, int]:
    return (task.priority.rank, -task.id)


def sort_tasks(tasks: Iterable[Task]) -> list[Task]:
    """Priority rank ascending (high first), then newest id first."""
    return sorted(tasks, key=sort_key)


def query_tasks(
    tasks: Iterable[Task],
    task_filter: TaskFilter | str = TaskFilter.ALL,
    search: str = "",
) -> list[Task]:
    """Filter, then search within the filtered set, then sort."""
    flt = TaskFilter.from_raw(task_filter)
    return sort_tasks(t for t in tasks if matches_filter(t, flt) and matches_search(t, search))


def compute_stats(tasks: Iterable[Task]) -> TaskStats:
    total = active = completed = high = 0
    for t in tasks:
        total += 1
        if t.completed:
            completed += 1
            continue
        active += 1
        if t.priority is Priority.HIGH:
            high += 1
    return TaskStats(
        total=total,
        active_count=active,
        completed_count=completed,
        high_priority_count=high,
    )


def build_view(
    tasks: Iterable[Task],
    task_filter: TaskFilter | str = TaskFilter.ALL,
    search: str = "",
) -> TaskView:
    snapshot = list(tasks)
    flt = TaskFilter.from_raw(task_filter)
    return TaskView(
        tasks=query_tasks(snapshot, flt, search),
        stats=compute_stats(snapshot),
        filter=flt,
        search=search,
    )
