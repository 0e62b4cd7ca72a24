# tests/test_task_query.py

from __future__ import annotations

from taskboard.tasks.task_models import Priority, Task
from taskboard.tasks.task_query import (
    TaskFilter,
    build_view,
    compute_stats,
    query_tasks,
    sort_tasks,
)


def _task(task_id: int, text: str, priority: str = "medium", completed: bool = False) -> Task:
    return Task(id=task_id, text=text, completed=completed, priority=Priority(priority))


def test_sort_by_priority_then_newest_first() -> None:
    tasks = [
        _task(1, "Buy milk", "low"),
        _task(2, "Fix bug", "high"),
        _task(3, "Call mom", "medium"),
    ]
    assert [t.text for t in sort_tasks(tasks)] == ["Fix bug", "Call mom", "Buy milk"]


def test_sort_ties_break_on_id_descending_and_is_idempotent() -> None:
    tasks = [
        _task(10, "old high", "high"),
        _task(30, "new low", "low"),
        _task(20, "new high", "high"),
        _task(5, "oldest low", "low"),
    ]
    once = sort_tasks(tasks)
    assert [t.id for t in once] == [20, 10, 30, 5]
    assert sort_tasks(once) == once


def test_filter_tokens() -> None:
    tasks = [_task(1, "a"), _task(2, "b", completed=True)]
    assert {t.id for t in query_tasks(tasks, TaskFilter.ALL)} == {1, 2}
    assert [t.id for t in query_tasks(tasks, "active")] == [1]
    assert [t.id for t in query_tasks(tasks, "completed")] == [2]
    # unknown token behaves like "all"
    assert len(query_tasks(tasks, "bogus")) == 2


def test_search_is_case_insensitive_and_empty_matches_all() -> None:
    tasks = [_task(1, "Call Mom"), _task(2, "Buy MILK")]
    assert [t.id for t in query_tasks(tasks, search="mom")] == [1]
    assert [t.id for t in query_tasks(tasks, search="milk")] == [2]
    assert len(query_tasks(tasks, search="")) == 2
    assert query_tasks(tasks, search="zzz") == []


def test_search_applies_within_filter() -> None:
    tasks = [
        _task(1, "Call mom", completed=True),
        _task(2, "Call dad"),
    ]
    assert query_tasks(tasks, TaskFilter.ACTIVE, "mom") == []
    assert [t.id for t in query_tasks(tasks, TaskFilter.COMPLETED, "call")] == [1]


def test_stats_cover_whole_collection() -> None:
    tasks = [
        _task(1, "done high", "high", completed=True),
        _task(2, "open high", "high"),
        _task(3, "open low", "low"),
        _task(4, "done low", "low", completed=True),
    ]
    stats = compute_stats(tasks)
    assert stats.total == 4
    assert stats.active_count == 2
    assert stats.completed_count == 2
    # the completed high-priority task is not counted
    assert stats.high_priority_count == 1

    view = build_view(tasks, TaskFilter.COMPLETED, "high")
    assert [t.id for t in view.tasks] == [1]
    assert view.stats == stats


def test_empty_view_messages() -> None:
    assert build_view([], "all").empty_message == "No tasks yet. Add one to get started!"
    assert build_view([], "active").empty_message == "No active tasks"
    view = build_view([_task(1, "a")], "completed")
    assert view.is_empty
    assert view.empty_message == "No completed tasks yet"
