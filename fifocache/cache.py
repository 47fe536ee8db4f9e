"""A thread-safe cache with small, main and ghost FIFO queues."""

from __future__ import annotations

import threading
from typing import Any, Dict, Hashable

from fifocache.node import Node, Placement
from fifocache.queues import GhostQueue, MainQueue, SmallQueue

_HASH_MASK = (1 << 64) - 1
_MAX_REINSERTIONS = 20


def _hash_key(key: Hashable) -> int:
    return hash(key) & _HASH_MASK


class Cache:
    """Bounded key-value cache; a tenth of its size admits new keys."""

    def __init__(self, size: int) -> None:
        small_cap = size // 10
        if small_cap < 1:
            raise ValueError("size must be larger than 10")
        self._small_cap = small_cap
        self._main_cap = size - small_cap
        self._lock = threading.Lock()
        self._reset()

    def _reset(self) -> None:
        self._data: Dict[int, Node] = {}
        self._main = MainQueue(self._main_cap)
        self._small = SmallQueue(self._small_cap)
        self._ghost = GhostQueue(self._main_cap)

    def where(self, key: Hashable) -> Placement:
        """Report which queue currently holds ``key``."""
        h = _hash_key(key)
        with self._lock:
            if h in self._ghost:
                return Placement.GHOST
            node = self._data.get(h)
            return node.placement if node is not None else Placement.NONE

    def set(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key``, evicting as needed."""
        h = _hash_key(key)
        with self._lock:
            existing = self._data.get(h)
            if existing is not None:
                existing.value = value
                return

            node = Node(value, h)
            self._data[h] = node

            if self._ghost.get_and_delete(h):
                evicted = self._main.put(node)
            else:
                evicted = self._small.put(node)

            room_in_main = len(self._main) < self._main_cap

            iterations = 0
            while evicted is not None:
                iterations += 1
                placement = evicted.next_placement(room_in_main)
                if placement is Placement.SMALL:
                    evicted = self._small.put(evicted)
                elif placement is Placement.MAIN:
                    evicted = self._main.put(evicted)
                    if evicted is not None and iterations > _MAX_REINSERTIONS:
                        evicted.placement = Placement.NONE
                else:
                    if placement is Placement.GHOST:
                        self._ghost.put(evicted.hash)
                    self._data.pop(evicted.hash, None)
                    evicted = None

    def get(self, key: Hashable, default: Any = None) -> Any:
        """Return the value for ``key`` and record the access, or ``default``."""
        h = _hash_key(key)
        with self._lock:
            node = self._data.get(h)
            if node is None:
                return default
            node.hit()
            return node.value

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def delete(self, key: Hashable) -> bool:
        """Remove ``key``; return whether it was known to the cache."""
        h = _hash_key(key)
        with self._lock:
            if self._ghost.get_and_delete(h):
                return True
            node = self._data.pop(h, None)
            if node is None:
                return False
            if node.placement is Placement.MAIN:
                self._main.delete(node)
            elif node.placement is Placement.SMALL:
                self._small.delete(node)
            return True

    def clear(self) -> None:
        """Drop every entry, keeping the configured capacities."""
        with self._lock:
            self._reset()