"""Cleaner that sanitises equipment and returns it to the shelf."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace

from lasertag.config import msleep
from lasertag.player import Equipment
from lasertag.shelf import Shelf

__all__ = ["Cleaner"]


class Cleaner:
    """Takes equipment from players, cleans it and puts it back on the shelf."""

    def __init__(
        self,
        shelf: Shelf,
        delay: float,
        on_released: Callable[[], None] | None = None,
    ) -> None:
        if delay < 0:
            raise ValueError("cleaning delay must not be negative")
        self.shelf = shelf
        self.delay = delay
        self.on_released = on_released

    def request_cleaning(self, equipment: Equipment) -> None:
        """Strip ``equipment`` from its holder, clean it and shelve it."""
        held = replace(equipment)
        equipment.clear()
        msleep(self.delay)
        self.shelf.release(held)
        if self.on_released is not None:
            self.on_released()