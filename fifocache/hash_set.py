"""A fixed-size, direct-mapped set of 64-bit hashes."""

from __future__ import annotations


class HashSet:
    """Stores at most one hash per slot; a new hash overwrites whatever shares its slot."""

    __slots__ = ("_slots",)

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[int | None] = [None] * capacity

    def _index(self, h: int) -> int:
        return h % len(self._slots)

    def add(self, h: int) -> None:
        """Insert ``h``, replacing any hash already in its slot."""
        self._slots[self._index(h)] = h

    def contains_and_delete(self, h: int) -> bool:
        """Remove ``h`` if present and report whether it was."""
        idx = self._index(h)
        if self._slots[idx] == h:
            self._slots[idx] = None
            return True
        return False

    def __contains__(self, h: object) -> bool:
        if not isinstance(h, int):
            return False
        return self._slots[self._index(h)] == h

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)