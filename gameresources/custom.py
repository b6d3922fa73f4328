"""A keyed in-memory store for arbitrary game data."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class CustomManager(Generic[T]):
    """Holds values of any kind under string keys."""

    def __init__(self) -> None:
        self._cache: dict[str, T] = {}

    def put(self, key: str, value: T) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        self._cache[key] = value

    def get(self, key: str) -> T | None:
        """Return the value stored under ``key``, or ``None`` if there is none."""
        return self._cache.get(key)

    def remove(self, key: str) -> None:
        """Forget the value stored under ``key``; unknown keys are ignored."""
        self._cache.pop(key, None)

    def clear(self) -> None:
        """Remove all stored values."""
        self._cache.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        return len(self._cache)