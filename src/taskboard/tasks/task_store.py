# src/taskboard/tasks/task_store.py

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from datetime import UTC, datetime

from ..core.ports import TaskSink
from .task_models import Category, Priority, Task

logger = logging.getLogger(__name__)


def _iso_utc(ts: float) -> str:
    # Same shape as JS Date.toISOString(): 2026-10-19T16:15:00.123Z
    return datetime.fromtimestamp(ts, UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TaskStore:
    """
    In-memory task collection, newest first.

    Every successful mutation pushes the full collection to the sink before
    returning, so memory and disk never drift apart between two user events.
    Mutations never raise for bad input: empty text or an unknown id is a
    silent no-op (the return value tells the caller what happened).

    Ids are millisecond creation timestamps, bumped past the current maximum
    when two tasks land in the same millisecond (or the clock went backwards).
    """

    def __init__(
        self,
        sink: TaskSink | None = None,
        *,
        default_priority: Priority = Priority.MEDIUM,
        default_category: Category = Category.WORK,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._sink = sink
        self._default_priority = default_priority
        self._default_category = default_category
        self._clock = clock
        self._tasks: list[Task] = list(sink.load()) if sink is not None else []
        logger.info("TaskStore ready total=%d", len(self._tasks))

    def close(self) -> None:
        """Shutdown hook. Everything is already flushed after each mutation."""
        logger.debug("TaskStore closed total=%d", len(self._tasks))

    # ---- low-level helpers ----

    def _sync(self) -> None:
        if self._sink is None:
            return
        self._sink.save(list(self._tasks))

    def _next_id(self, now: float) -> int:
        candidate = int(now * 1000)
        if self._tasks:
            highest = max(t.id for t in self._tasks)
            if candidate <= highest:
                candidate = highest + 1
        return candidate

    def _index_of(self, task_id: int) -> int | None:
        for i, t in enumerate(self._tasks):
            if t.id == task_id:
                return i
        return None

    # ---- public API ----

    def add(
        self,
        text: str,
        priority: Priority | str | None = None,
        category: Category | str | None = None,
        due_date: str | None = None,
    ) -> Task | None:
        clean = (text or "").strip()
        if not clean:
            logger.debug("Rejected task with empty text.")
            return None

        now = self._clock()
        due = due_date.strip() if due_date and due_date.strip() else None
        task = Task(
            id=self._next_id(now),
            text=clean,
            completed=False,
            priority=Priority.from_raw(priority, self._default_priority),
            category=Category.from_raw(category, self._default_category),
            due_date=due,
            created_at=_iso_utc(now),
        )
        self._tasks.insert(0, task)
        self._sync()
        logger.debug(
            "Task added id=%s priority=%s category=%s due=%s",
            task.id,
            task.priority.value,
            task.category.value,
            task.due_date,
        )
        return task

    def toggle_complete(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("toggle_complete: no task id=%s", task_id)
            return None
        updated = self._tasks[idx].toggled()
        self._tasks[idx] = updated
        self._sync()
        logger.debug("Task toggled id=%s completed=%s", task_id, updated.completed)
        return updated

    def delete(self, task_id: int) -> bool:
        idx = self._index_of(task_id)
        if idx is None:
            logger.debug("delete: no task id=%s", task_id)
            return False
        del self._tasks[idx]
        self._sync()
        logger.debug("Task deleted id=%s", task_id)
        return True

    def tasks(self) -> list[Task]:
        """Snapshot of the collection in insertion order (newest first)."""
        return list(self._tasks)

    def get(self, task_id: int) -> Task | None:
        idx = self._index_of(task_id)
        return self._tasks[idx] if idx is not None else None

    def count(self) -> int:
        return len(self._tasks)

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))
