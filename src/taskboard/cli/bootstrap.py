# src/taskboard/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the JSON store, persistence adapter and task store into AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..render import ViewMode
from ..storage.kv_store import JsonFileStore
from ..storage.persistence import TaskPersistence
from ..tasks.task_models import Category, Priority
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.store_path.parent.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    persistence = TaskPersistence(
        JsonFileStore(settings.store_path),
        key=getattr(settings, "storage_key", "tasks"),
    )
    task_store = TaskStore(
        persistence,
        default_priority=Priority.from_raw(getattr(settings, "default_priority", None)),
        default_category=Category.from_raw(getattr(settings, "default_category", None)),
    )

    state = AppState(
        settings=settings,
        task_store=task_store,
        view_mode=ViewMode.from_raw(getattr(settings, "view_mode", None)),
    )
    logger.info("State ready tasks=%d view=%s", task_store.count(), state.view_mode.value)
    return state
