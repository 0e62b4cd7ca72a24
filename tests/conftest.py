# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from taskboard.core.state import AppState
from taskboard.storage.kv_store import MemoryKeyValueStore
from taskboard.storage.persistence import TaskPersistence
from taskboard.tasks.task_store import TaskStore

from .fakes import FakeClock


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="taskboard",
        log_level="DEBUG",
        data_dir=tmp_path,
        store_path=tmp_path / "storage.json",
        storage_key="tasks",
        default_priority="medium",
        default_category="work",
        view_mode="list",
    )


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def persistence(kv: MemoryKeyValueStore) -> TaskPersistence:
    return TaskPersistence(kv)


@pytest.fixture()
def store(persistence: TaskPersistence, clock: FakeClock) -> TaskStore:
    return TaskStore(persistence, clock=clock)


@pytest.fixture()
def state(settings: SimpleNamespace, store: TaskStore) -> AppState:
    """
    AppState wired to an in-memory key-value store.

    NOTE: persistence still goes through the real JSON codec, because
    its correctness is part of what we want to test.
    """
    return AppState(settings=settings, task_store=store)
