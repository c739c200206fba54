"""Strategy pattern: a cache with a swappable eviction algorithm."""

from __future__ import annotations

from abc import ABC, abstractmethod
from itertools import count


class EvictionAlgo(ABC):
    """How a cache frees room when it is full."""

    @abstractmethod
    def evict(self, cache: Cache) -> str | None:
        """Evict one entry from the cache and return its key."""


class FIFOEvictionAlgo(EvictionAlgo):
    def evict(self, cache: Cache) -> str | None:
        print("Evicting by FIFO strategy.")
        victim = next(iter(cache.storage), None)
        return cache.discard(victim)


class LRUEvictionAlgo(EvictionAlgo):
    def evict(self, cache: Cache) -> str | None:
        print("Evicting by LRU strategy.")
        victim = min(cache.storage, key=cache.last_used.__getitem__, default=None)
        return cache.discard(victim)


class LFUEvictionAlgo(EvictionAlgo):
    def evict(self, cache: Cache) -> str | None:
        print("Evicting by LFU strategy.")
        victim = min(cache.storage, key=cache.frequency.__getitem__, default=None)
        return cache.discard(victim)


class Cache:
    """A string cache of fixed capacity that delegates eviction."""

    def __init__(self, algo: EvictionAlgo, capacity: int = 2) -> None:
        self.storage: dict[str, str] = {}
        self.eviction_algo = algo
        self.capacity = capacity
        self.last_used: dict[str, int] = {}
        self.frequency: dict[str, int] = {}
        self._clock = count()

    @property
    def size(self) -> int:
        return len(self.storage)

    def set_eviction_algo(self, algo: EvictionAlgo) -> None:
        self.eviction_algo = algo

    def add(self, key: str, value: str) -> None:
        if key not in self.storage and self.size >= self.capacity:
            self.eviction_algo.evict(self)
        self.storage[key] = value
        self._touch(key)

    def get(self, key: str) -> str:
        value = self.storage[key]
        self._touch(key)
        return value

    def discard(self, key: str | None) -> str | None:
        """Remove a key if present and return it."""
        if key is None or key not in self.storage:
            return None
        del self.storage[key]
        self.last_used.pop(key, None)
        self.frequency.pop(key, None)
        return key

    def _touch(self, key: str) -> None:
        self.last_used[key] = next(self._clock)
        self.frequency[key] = self.frequency.get(key, 0) + 1