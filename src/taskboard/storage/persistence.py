# src/taskboard/storage/persistence.py

"""
Task collection <-> key-value store.

Wire format (JSON, field names preserved so schema additions degrade gracefully):

    {"version": 1, "tasks": [{"id": ..., "text": ..., "completed": ...,
                              "priority": ..., "category": ...,
                              "dueDate": ..., "createdAt": ...}, ...]}

A bare JSON array of task records (the unversioned legacy layout) is still
accepted on load and is rewritten in the envelope on the next save.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.ports import KeyValueStore
from ..tasks.task_models import Category, Priority, Task

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
DEFAULT_STORAGE_KEY = "tasks"
_INT_RE = re.compile(r"-?[0-9]+")


def task_to_record(task: Task) -> dict[str, Any]:
    return {
        "id": task.id,
        "text": task.text,
        "completed": task.completed,
        "priority": task.priority.value,
        "category": task.category.value,
        "dueDate": task.due_date,
        "createdAt": task.created_at,
    }


def _coerce_id(raw: Any) -> int | None:
    # bool is an int subclass; a stored `true` is not an id.
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float) and raw.is_integer():
        return int(raw)
    if isinstance(raw, str) and _INT_RE.fullmatch(raw.strip()):
        return int(raw.strip())
    return None


def record_to_task(raw: Mapping[str, Any]) -> Task | None:
    """
    Decode one stored record. Returns None when the record cannot become a
    valid Task (no usable id or empty text). Unknown keys are ignored.
    """
    task_id = _coerce_id(raw.get("id"))
    if task_id is None:
        return None

    text = raw.get("text")
    if not isinstance(text, str) or not text.strip():
        return None

    due_raw = raw.get("dueDate")
    due_date = due_raw.strip() if isinstance(due_raw, str) and due_raw.strip() else None

    created_raw = raw.get("createdAt")
    created_at = created_raw if isinstance(created_raw, str) else ""

    return Task(
        id=task_id,
        text=text.strip(),
        completed=raw.get("completed") is True,
        priority=Priority.from_raw(raw.get("priority")),
        category=Category.from_raw(raw.get("category")),
        due_date=due_date,
        created_at=created_at,
    )


def serialize_tasks(tasks: Iterable[Task]) -> str:
    payload = {
        "version": SCHEMA_VERSION,
        "tasks": [task_to_record(t) for t in tasks],
    }
    return json.dumps(payload, ensure_ascii=False)


def deserialize_tasks(raw: str | None) -> list[Task]:
    """
    Parse a stored payload. Never raises: absent or corrupt data yields [].
    Records that fail to decode are skipped; duplicate ids keep the first.
    """
    if not raw:
        return []

    try:
        data = json.loads(raw)
    except Exception:
        logger.warning("Stored tasks are not valid JSON; starting empty.")
        return []

    if isinstance(data, list):
        records: Any = data
        version = 0
    elif isinstance(data, dict):
        records = data.get("tasks")
        version = data.get("version", 0)
    else:
        logger.warning("Stored tasks have unexpected type %s; starting empty.", type(data).__name__)
        return []

    if not isinstance(records, list):
        logger.warning("Stored tasks payload has no task list; starting empty.")
        return []

    if isinstance(version, int) and version > SCHEMA_VERSION:
        logger.warning(
            "Stored tasks schema version %s is newer than supported %s; reading best-effort.",
            version,
            SCHEMA_VERSION,
        )

    out: list[Task] = []
    seen: set[int] = set()
    skipped = 0
    for rec in records:
        try:
            task = record_to_task(rec) if isinstance(rec, Mapping) else None
        except Exception:
            logger.debug("Failed to decode task record %r", rec, exc_info=True)
            task = None
        if task is None or task.id in seen:
            skipped += 1
            continue
        seen.add(task.id)
        out.append(task)

    if skipped:
        logger.info("Skipped %d unreadable task record(s).", skipped)
    return out


class TaskPersistence:
    """
    Persistence adapter: one key in a KeyValueStore holds the whole collection.

    Both directions are best-effort: a failed read means "no prior data",
    a failed write is logged and the app keeps running.
    """

    def __init__(self, store: KeyValueStore, key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self._key = key

    @property
    def key(self) -> str:
        return self._key

    def load(self) -> list[Task]:
        try:
            raw = self._store.get(self._key)
        except Exception:
            logger.exception("Failed to read key=%s from store; starting empty.", self._key)
            return []
        tasks = deserialize_tasks(raw)
        logger.debug("Loaded %d task(s) from key=%s", len(tasks), self._key)
        return tasks

    def save(self, tasks: list[Task]) -> None:
        try:
            self._store.set(self._key, serialize_tasks(tasks))
        except Exception:
            logger.exception("Failed to save %d task(s) to key=%s", len(tasks), self._key)
            return
        logger.debug("Saved %d task(s) to key=%s", len(tasks), self._key)
