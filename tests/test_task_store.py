# tests/test_task_store.py

from __future__ import annotations

from taskboard.storage.kv_store import MemoryKeyValueStore
from taskboard.storage.persistence import TaskPersistence
from taskboard.tasks.task_models import Category, Priority
from taskboard.tasks.task_store import TaskStore

from .fakes import FailingStore, FakeClock


def test_add_prepends_with_defaults(store: TaskStore) -> None:
    first = store.add("First")
    second = store.add("  Second  ", priority="high", category="health", due_date="2026-10-20")

    assert first is not None and second is not None
    assert len(store) == 2
    assert store.tasks()[0] == second
    assert second.text == "Second"
    assert second.completed is False
    assert second.priority is Priority.HIGH
    assert second.category is Category.HEALTH
    assert second.due_date == "2026-10-20"

    assert first.priority is Priority.MEDIUM
    assert first.category is Category.WORK
    assert first.due_date is None
    assert first.created_at == "2023-11-14T22:13:20.000Z"


def test_add_rejects_blank_text(store: TaskStore, kv: MemoryKeyValueStore) -> None:
    assert store.add("") is None
    assert store.add("   ") is None
    assert len(store) == 0
    # nothing was written either
    assert kv.get("tasks") is None


def test_add_normalizes_empty_due_date_and_unknown_enums(store: TaskStore) -> None:
    task = store.add("x", priority="urgent", category="hobby", due_date="  ")
    assert task is not None
    assert task.priority is Priority.MEDIUM
    assert task.category is Category.WORK
    assert task.due_date is None


def test_ids_are_unique_when_clock_stalls(persistence: TaskPersistence) -> None:
    store = TaskStore(persistence, clock=FakeClock(step=0.0))
    ids = [t.id for t in (store.add("a"), store.add("b"), store.add("c")) if t is not None]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_ids_stay_above_loaded_ids(kv: MemoryKeyValueStore) -> None:
    persistence = TaskPersistence(kv)
    TaskStore(persistence, clock=FakeClock(start=2_000_000_000.0)).add("from the future")

    store = TaskStore(persistence, clock=FakeClock(start=1_000_000_000.0))
    newer = store.add("later but clock is behind")
    assert newer is not None
    assert newer.id > store.tasks()[1].id


def test_toggle_is_an_involution(store: TaskStore) -> None:
    task = store.add("Water plants")
    assert task is not None

    once = store.toggle_complete(task.id)
    assert once is not None and once.completed is True
    twice = store.toggle_complete(task.id)
    assert twice is not None and twice.completed is False
    assert twice == task


def test_toggle_and_delete_unknown_id_are_noops(store: TaskStore, kv: MemoryKeyValueStore) -> None:
    store.add("only")
    before = kv.get("tasks")

    assert store.toggle_complete(42) is None
    assert store.delete(42) is False
    assert len(store) == 1
    assert kv.get("tasks") == before


def test_delete_removes_exactly_one(store: TaskStore) -> None:
    a = store.add("a")
    b = store.add("b")
    c = store.add("c")
    assert a and b and c

    assert store.delete(b.id) is True
    assert [t.text for t in store] == ["c", "a"]
    assert store.get(b.id) is None
    assert store.delete(b.id) is False


def test_every_mutation_is_persisted(persistence: TaskPersistence, clock: FakeClock) -> None:
    store = TaskStore(persistence, clock=clock)
    task = store.add("Persist me", priority="low")
    assert task is not None
    store.toggle_complete(task.id)

    reloaded = TaskStore(persistence, clock=clock)
    assert reloaded.tasks() == store.tasks()
    assert reloaded.get(task.id).completed is True  # type: ignore[union-attr]

    store.delete(task.id)
    assert TaskStore(persistence, clock=clock).count() == 0


def test_store_survives_failing_backend(clock: FakeClock) -> None:
    backend = FailingStore()
    store = TaskStore(TaskPersistence(backend), clock=clock)

    assert len(store) == 0
    task = store.add("still works")
    assert task is not None
    assert store.toggle_complete(task.id) is not None
    assert store.delete(task.id) is True
    # one read + three writes attempted
    assert backend.attempts == 4


def test_store_without_sink_and_defaults(clock: FakeClock) -> None:
    store = TaskStore(clock=clock, default_priority=Priority.LOW, default_category=Category.SHOPPING)
    task = store.add("Eggs")
    assert task is not None
    assert task.priority is Priority.LOW
    assert task.category is Category.SHOPPING
    store.close()
