"""Cache entries and the queue they live in."""

from __future__ import annotations

import enum
from typing import Any, Optional

MAX_COUNT = 3


class Placement(str, enum.Enum):
    """Which queue an entry currently belongs to."""

    NONE = "none"
    MAIN = "main"
    GHOST = "ghost"
    SMALL = "small"


class Node:
    """A cached value with its key hash, access counter and list links."""

    __slots__ = ("value", "hash", "count", "placement", "next", "prev")

    def __init__(self, value: Any, hash_value: int = 0) -> None:
        self.value = value
        self.hash = hash_value
        self.count = 0
        self.placement = Placement.NONE
        self.next: Optional[Node] = None
        self.prev: Optional[Node] = None

    def __repr__(self) -> str:
        return (
            f"Node(value={self.value!r}, hash={self.hash}, "
            f"count={self.count}, placement={self.placement.value})"
        )

    def hit(self) -> None:
        """Record an access, saturating at the maximum count."""
        if self.count < MAX_COUNT:
            self.count += 1

    def reset_count(self) -> None:
        self.count = 0

    def next_placement(self, room_in_main: bool) -> Placement:
        """Decide where this entry goes after being evicted from its queue."""
        if self.placement is Placement.SMALL:
            return self._evicted_from_small(room_in_main)
        if self.placement is Placement.MAIN:
            return self._evicted_from_main()
        return Placement.NONE

    def _evicted_from_small(self, room_in_main: bool) -> Placement:
        count = self.count
        if room_in_main or count > 0:
            self.reset_count()
            return Placement.MAIN
        if count < 0:
            self.reset_count()
        return Placement.GHOST

    def _evicted_from_main(self) -> Placement:
        if self.count <= 0:
            return Placement.NONE
        self.count -= 1
        return Placement.MAIN