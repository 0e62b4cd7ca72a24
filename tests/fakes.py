# tests/fakes.py

from __future__ import annotations


class FakeClock:
    """
    Deterministic clock for TaskStore.

    Each call returns the current time and then advances by `step` seconds,
    so consecutive tasks get increasing ids unless a test pins the step to 0.
    """

    def __init__(self, start: float = 1_700_000_000.0, step: float = 1.0) -> None:
        self.now = start
        self.step = step
        self.calls = 0

    def __call__(self) -> float:
        self.calls += 1
        current = self.now
        self.now += self.step
        return current


class FailingStore:
    """KeyValueStore whose every operation fails (disk full, permissions, ...)."""

    def __init__(self) -> None:
        self.attempts = 0

    def get(self, key: str) -> str | None:
        self.attempts += 1
        raise OSError("store unavailable")

    def set(self, key: str, value: str) -> None:
        self.attempts += 1
        raise OSError("quota exceeded")

    def delete(self, key: str) -> None:
        self.attempts += 1
        raise OSError("store unavailable")
