"""Teams of players."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from lasertag.array import BoundedArray

__all__ = ["TeamId", "Team"]


class TeamId(IntEnum):
    INVALID = 0
    A = 1
    B = 2


class Team:
    """A team with a fixed number of player slots."""

    def __init__(self, team_id: TeamId, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("team capacity must be positive")
        if team_id not in (TeamId.A, TeamId.B):
            raise ValueError(f"invalid team id: {team_id!r}")
        self.team_id = TeamId(team_id)
        self.capacity = capacity
        self.players = BoundedArray(capacity, capacity)

    def count_with_status(self, status: Any) -> int:
        """Number of players on the team whose status equals ``status``."""
        return sum(1 for player in self.players if player.status == status)

    def __repr__(self) -> str:
        return f"Team({self.team_id.name}, {len(self.players)}/{self.capacity})"