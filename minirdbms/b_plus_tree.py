"""An ordered integer index mapping keys to values."""

from __future__ import annotations

NOT_FOUND = -1
"""Returned by :meth:`BPlusTree.search` for an absent key."""


class BPlusTree:
    """An ordered mapping of integer keys to integer values."""

    def __init__(self) -> None:
        self._tree: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._tree)

    def insert(self, key: int, value: int) -> None:
        """Set ``key`` to ``value``, replacing any previous value."""
        self._tree[key] = value

    def remove(self, key: int) -> bool:
        """Remove ``key``; return whether it was present."""
        return self._tree.pop(key, None) is not None

    def search(self, key: int) -> int:
        """Return the value for ``key``, or NOT_FOUND."""
        return self._tree.get(key, NOT_FOUND)

    def search_by_condition(self, value: int, condition: str) -> list[int]:
        """Return keys, in ascending order, whose value satisfies ``condition`` (=, >, <)."""
        tests = {
            "=": lambda v: v == value,
            ">": lambda v: v > value,
            "<": lambda v: v < value,
        }
        test = tests.get(condition)
        if test is None:
            return []
        return [key for key, stored in self.items() if test(stored)]

    def items(self) -> list[tuple[int, int]]:
        """Return ``(key, value)`` pairs in ascending key order."""
        return sorted(self._tree.items())