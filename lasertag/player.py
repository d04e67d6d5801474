"""Players and the equipment they carry."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import IntEnum

from lasertag.team import TeamId

__all__ = ["NO_EQUIPMENT", "PlayerStatus", "Equipment", "Player"]

NO_EQUIPMENT = -1
FULL_LIFE = 100


class PlayerStatus(IntEnum):
    ENTERING = 0
    CHOOSING_TEAM = 1
    TAKING_EQUIPMENT = 2
    WAITING = 3
    PLAYING = 4
    DEAD = 5
    RELEASING_EQUIPMENT = 6
    LEAVING = 7


@dataclass
class Equipment:
    """Identifiers of the vest, helmet and gun a player holds."""

    vest: int = NO_EQUIPMENT
    helmet: int = NO_EQUIPMENT
    gun: int = NO_EQUIPMENT

    def clear(self) -> None:
        """Drop every item."""
        self.vest = NO_EQUIPMENT
        self.helmet = NO_EQUIPMENT
        self.gun = NO_EQUIPMENT

    def is_empty(self) -> bool:
        """True when no item is held."""
        return (self.vest, self.helmet, self.gun) == (
            NO_EQUIPMENT,
            NO_EQUIPMENT,
            NO_EQUIPMENT,
        )


class Player:
    """A player entering the arena with full life, no team and no equipment."""

    def __init__(self, player_id: int) -> None:
        self.id = player_id
        self.life = FULL_LIFE
        self.status = PlayerStatus.ENTERING
        self.team = TeamId.INVALID
        self.equipment = Equipment()
        self.thread: threading.Thread | None = None

    @property
    def is_alive(self) -> bool:
        return self.status != PlayerStatus.DEAD and self.life > 0

    def __repr__(self) -> str:
        return (
            f"Player(id={self.id}, life={self.life}, "
            f"status={self.status.name}, team={self.team.name})"
        )