"""Thread-safe in-memory caches."""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from types import MappingProxyType
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")


class Cache(Generic[K, V]):
    """A dict guarded by a lock so it can be shared between threads."""

    def __init__(self) -> None:
        self._data: dict[K, V] = {}
        self._lock = threading.RLock()

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Value stored under ``key``, or ``default``."""
        with self._lock:
            return self._data.get(key, default)

    def set(self, key: K, value: V) -> None:
        """Store ``value`` under ``key``."""
        with self._lock:
            self._data[key] = value

    def delete(self, key: K) -> None:
        """Remove ``key`` if present."""
        with self._lock:
            self._data.pop(key, None)

    def items(self) -> list[tuple[K, V]]:
        """A snapshot of the ``(key, value)`` pairs."""
        with self._lock:
            return list(self._data.items())

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def clear(self) -> None:
        """Remove every entry."""
        with self._lock:
            self._data = {}

    def keys(self) -> list[K]:
        """A snapshot of the keys."""
        with self._lock:
            return list(self._data)

    def values(self) -> list[V]:
        """A snapshot of the values."""
        with self._lock:
            return list(self._data.values())

    def get_or_set(self, key: K, default: V) -> V:
        """Return the stored value, storing ``default`` first if there is none."""
        with self._lock:
            return self._data.setdefault(key, default)

    def get_or_set_func(self, key: K, factory: Callable[[], V]) -> V:
        """Return the stored value, storing ``factory()`` first if there is none."""
        with self._lock:
            if key in self._data:
                return self._data[key]
            value = factory()
            self._data[key] = value
            return value

    def read(self, fn: Callable[[MappingProxyType], R]) -> R:
        """Call ``fn`` with a read-only view of the contents while holding the lock."""
        with self._lock:
            return fn(MappingProxyType(self._data))

    def write(self, fn: Callable[[dict[K, V]], R]) -> R:
        """Call ``fn`` with the underlying dict, which it may modify, under the lock."""
        with self._lock:
            return fn(self._data)


class ShardCache(Generic[V]):
    """A fixed number of caches, chosen by the length of a string key."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("shard count must be positive")
        self._shards: list[Cache[str, V]] = [Cache() for _ in range(size)]

    def __len__(self) -> int:
        return len(self._shards)

    def shard(self, key: str) -> Cache[str, V]:
        """The cache responsible for ``key``."""
        return self._shards[len(key) & (len(self._shards) - 1)]