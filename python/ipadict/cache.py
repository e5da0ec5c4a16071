"""Compute-once caches shared across builds."""

import threading
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LazyCache(Generic[K, V]):
    """Thread-safe get-or-create cache.

    Each key's factory runs at most once, even when several threads ask for
    the same key at the same time. A factory that raises leaves the key
    unset so a later call can try again.
    """

    def __init__(self):
        self._values: dict[K, V] = {}
        self._locks: dict[K, threading.Lock] = {}
        self._guard = threading.Lock()

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        """Return the cached value for key, creating it with factory if needed."""
        if key in self._values:
            return self._values[key]

        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())

        with lock:
            if key not in self._values:
                self._values[key] = factory()
            return self._values[key]

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def clear(self) -> None:
        """Drop all cached values."""
        with self._guard:
            self._values.clear()
            self._locks.clear()
