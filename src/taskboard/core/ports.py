# src/taskboard/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The task store depends on Protocols instead of concrete implementations.
This keeps the storage backend swappable and makes testing easier.
"""

from typing import Any, Protocol


class KeyValueStore(Protocol):
    """String-keyed local store (the desktop equivalent of browser localStorage)."""

    def get(self, key: str) -> str | None: ...
    def set(self, key: str, value: str) -> None: ...
    def delete(self, key: str) -> None: ...


class TaskSink(Protocol):
    """Where the task store loads from at start and pushes the full collection after every mutation."""

    def load(self) -> list[Any]: ...
    def save(self, tasks: list[Any]) -> None: ...
