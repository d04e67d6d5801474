"""Shelf holding the vests, helmets and guns available to players."""

from __future__ import annotations

import threading

from lasertag.array import ArrayEmptyError, BoundedArray
from lasertag.config import Rng
from lasertag.player import Equipment, NO_EQUIPMENT

__all__ = ["Shelf"]


class Shelf:
    """Stores ``capacity`` uniquely numbered items of each kind."""

    def __init__(self, capacity: int, rng: Rng) -> None:
        if capacity <= 0:
            raise ValueError("shelf capacity must be positive")
        self.capacity = capacity
        self._rng = rng
        self._lock = threading.Lock()
        self.vests = BoundedArray(capacity, 0)
        self.helmets = BoundedArray(capacity, 0)
        self.guns = BoundedArray(capacity, 0)
        for item_id in range(capacity):
            for kind in self._kinds():
                kind.put(item_id)

    def _kinds(self) -> tuple[BoundedArray, BoundedArray, BoundedArray]:
        return self.vests, self.helmets, self.guns

    def _take_random(self, kind: BoundedArray) -> int:
        if kind.is_empty():
            raise ArrayEmptyError("shelf has no item of this kind left")
        return kind.pop(self._rng.between(0, len(kind)))

    def take(self) -> Equipment:
        """Take one random vest, helmet and gun off the shelf."""
        with self._lock:
            if any(kind.is_empty() for kind in self._kinds()):
                raise ArrayEmptyError("shelf is out of equipment")
            vest = self._take_random(self.vests)
            helmet = self._take_random(self.helmets)
            gun = self._take_random(self.guns)
        return Equipment(vest=vest, helmet=helmet, gun=gun)

    def release(self, equipment: Equipment) -> None:
        """Put a cleaned set of equipment back on the shelf."""
        items = (equipment.vest, equipment.helmet, equipment.gun)
        if any(item == NO_EQUIPMENT for item in items):
            raise ValueError("cannot release an incomplete equipment set")
        with self._lock:
            for kind, item in zip(self._kinds(), items):
                kind.put(item)

    def is_complete(self) -> bool:
        """True when every item is back on the shelf."""
        with self._lock:
            return all(len(kind) == self.capacity for kind in self._kinds())