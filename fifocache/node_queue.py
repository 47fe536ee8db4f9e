"""A bounded FIFO of nodes, linked through the nodes themselves."""

from __future__ import annotations

from typing import Any, Iterator, Optional

from fifocache.node import Node


class NodeQueue:
    """Doubly linked FIFO that evicts its oldest node when over capacity."""

    __slots__ = ("capacity", "first", "last", "_length")

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self.first: Optional[Node] = None
        self.last: Optional[Node] = None
        self._length = 0

    def put(self, node: Node) -> Optional[Node]:
        """Append ``node``; return the evicted oldest node, if any."""
        if self._length == 0 or self.last is None:
            self.first = self.last = node
            self._length = 1
            return None

        self.last.next = node
        node.prev = self.last
        self.last = node
        self._length += 1

        if self._length <= self.capacity:
            return None

        evicted = self.first
        assert evicted is not None and evicted.next is not None
        self.first = evicted.next
        self.first.prev = None
        self._length -= 1
        evicted.next = evicted.prev = None
        return evicted

    def pop(self) -> Any:
        """Remove the oldest node and return its value, or None when empty."""
        node = self.first
        if self._length == 0 or node is None:
            return None
        if self._length == 1:
            self.first = self.last = None
        else:
            assert node.next is not None
            self.first = node.next
            self.first.prev = None
        self._length -= 1
        node.next = node.prev = None
        return node.value

    def delete(self, node: Optional[Node]) -> None:
        """Unlink ``node``, which must belong to this queue."""
        if node is None or self._length == 0:
            return

        if node is self.first and node is self.last:
            self.first = self.last = None
        elif node is self.first:
            self.first = node.next
            if self.first is not None:
                self.first.prev = None
        elif node is self.last:
            self.last = node.prev
            if self.last is not None:
                self.last.next = None
        else:
            if node.prev is not None:
                node.prev.next = node.next
            if node.next is not None:
                node.next.prev = node.prev

        self._length -= 1
        node.next = node.prev = None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Node]:
        node = self.first
        while node is not None:
            yield node
            node = node.next