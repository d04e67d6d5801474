"""Bounded array with an attached counting semaphore."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from typing import Any

__all__ = ["ArrayFullError", "ArrayEmptyError", "BoundedArray"]


class ArrayFullError(Exception):
    """Raised when adding to an array that is at capacity."""


class ArrayEmptyError(IndexError):
    """Raised when taking from or removing from an empty array."""


class BoundedArray:
    """A fixed-capacity sequence carrying a semaphore with ``permits`` slots."""

    def __init__(self, capacity: int, permits: int) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if permits < 0:
            raise ValueError("permits must not be negative")
        self.capacity = capacity
        self.semaphore = threading.Semaphore(permits)
        self._items: list[Any] = []
        self._lock = threading.RLock()

    def put(self, item: Any) -> None:
        """Append an item at the end."""
        with self._lock:
            if self.is_full():
                raise ArrayFullError("array is full")
            self._items.append(item)

    def take(self) -> Any:
        """Remove and return the last item."""
        with self._lock:
            if self.is_empty():
                raise ArrayEmptyError("array is empty")
            return self._items.pop()

    def pop(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items down."""
        with self._lock:
            if not 0 <= index < len(self._items):
                raise IndexError(f"index {index} out of range")
            return self._items.pop(index)

    def remove(self, item: Any) -> None:
        """Remove the first element that is ``item``; absent items are ignored."""
        with self._lock:
            if self.is_empty():
                raise ArrayEmptyError("array is empty")
            for position, current in enumerate(self._items):
                if current is item:
                    del self._items[position]
                    return

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        with self._lock:
            return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        with self._lock:
            snapshot = list(self._items)
        return iter(snapshot)

    def __repr__(self) -> str:
        return f"BoundedArray(capacity={self.capacity}, items={self._items!r})"