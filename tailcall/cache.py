"""A small thread-safe key/value cache."""

from __future__ import annotations

import threading
from typing import Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class Cache(Generic[K, V]):
    """Mapping guarded by a lock, safe to share between threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        """Return the value stored under ``key``, or ``None``."""
        with self._lock:
            return self._entries.get(key)

    def insert(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``, replacing any earlier value."""
        with self._lock:
            self._entries[key] = value

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)