"""The small, main and ghost queues of the cache."""

from __future__ import annotations

from typing import Optional

from fifocache.hash_set import HashSet
from fifocache.node import Node, Placement
from fifocache.node_queue import NodeQueue


class GhostQueue:
    """Remembers hashes of recently evicted keys."""

    __slots__ = ("_data",)

    def __init__(self, size: int) -> None:
        self._data = HashSet(size)

    def put(self, hash_value: int) -> None:
        self._data.add(hash_value)

    def get_and_delete(self, hash_value: int) -> bool:
        """Forget ``hash_value`` and report whether it was remembered."""
        return self._data.contains_and_delete(hash_value)

    def __contains__(self, hash_value: object) -> bool:
        return hash_value in self._data


class MainQueue:
    """Holds entries that have proven themselves."""

    __slots__ = ("_queue",)

    def __init__(self, capacity: int) -> None:
        self._queue = NodeQueue(capacity)

    def put(self, node: Node) -> Optional[Node]:
        """Append ``node``; return the node evicted to make room, if any."""
        node.placement = Placement.MAIN
        return self._queue.put(node)

    def delete(self, node: Node) -> None:
        node.placement = Placement.NONE
        self._queue.delete(node)

    def __len__(self) -> int:
        return len(self._queue)


class SmallQueue:
    """Holds newly admitted entries."""

    __slots__ = ("_queue",)

    def __init__(self, capacity: int) -> None:
        self._queue = NodeQueue(capacity)

    def put(self, node: Node) -> Optional[Node]:
        """Append ``node``; return the node evicted to make room, if any."""
        node.placement = Placement.SMALL
        return self._queue.put(node)

    def delete(self, node: Node) -> None:
        node.placement = Placement.NONE
        self._queue.delete(node)

    def __len__(self) -> int:
        return len(self._queue)