# src/taskboard/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum


class Priority(StrEnum):
    """Task priority. Sort rank follows declaration order (high first)."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @classmethod
    def from_raw(cls, raw: object, default: Priority | None = None) -> Priority:
        fallback = default if default is not None else cls.MEDIUM
        if not raw:
            return fallback
        try:
            return cls(str(raw).strip().lower())
        except Exception:
            return fallback

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 0,
    Priority.MEDIUM: 1,
    Priority.LOW: 2,
}


class Category(StrEnum):
    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    HEALTH = "health"

    @classmethod
    def from_raw(cls, raw: object, default: Category | None = None) -> Category:
        fallback = default if default is not None else cls.WORK
        if not raw:
            return fallback
        try:
            return cls(str(raw).strip().lower())
        except Exception:
            return fallback


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do item.

    Only `completed` ever changes after creation; use `toggled()` to get the
    flipped copy instead of mutating in place.
    """

    id: int
    text: str
    completed: bool = False
    priority: Priority = Priority.MEDIUM
    category: Category = Category.WORK
    due_date: str | None = None
    created_at: str = ""

    def toggled(self) -> Task:
        return replace(self, completed=not self.completed)
