"""State of the current match: teams, counters and coordination semaphores."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from enum import IntEnum
from typing import Any

from lasertag.config import Config, SimStats
from lasertag.player import PlayerStatus
from lasertag.team import Team, TeamId

__all__ = ["MatchStatus", "MatchResult", "Match", "filter_players"]

logger = logging.getLogger(__name__)


class MatchStatus(IntEnum):
    NOT_PREPARED = 0
    PREPARED = 1
    STARTED = 2
    FINISHED = 3


class MatchResult(IntEnum):
    TEAM_A_WON = 0
    TEAM_B_WON = 1
    DRAW = 2
    UNDEFINED = 3


def filter_players(players: Iterable[Any], status: PlayerStatus) -> list[Any]:
    """Players whose status equals ``status``, in their original order."""
    return [player for player in players if player.status == status]


class Match:
    """Groups both teams and the primitives players and the manager share."""

    def __init__(self, config: Config, stats: SimStats) -> None:
        self.config = config
        self.stats = stats
        slots = 2 * config.players_per_team

        self.team_a = Team(TeamId.A, config.players_per_team)
        self.team_b = Team(TeamId.B, config.players_per_team)

        self.status = MatchStatus.NOT_PREPARED
        self.number = 1
        self.elapsed = 0
        self.players_in_teams = 0
        self.players_waiting = 0
        self.players_left = 0
        self.lock = threading.RLock()

        # Player-side gates.
        self.wait_slots = threading.Semaphore(slots)
        self.equipment_available = threading.Semaphore(slots)
        self.choose_team_gate = threading.Semaphore(0)
        self.start_gate = threading.Semaphore(0)
        self.leave_gate = threading.Semaphore(0)

        # Manager-side gates.
        self.manager_teams_ready = threading.Semaphore(0)
        self.manager_all_waiting = threading.Semaphore(0)
        self.manager_next_match = threading.Semaphore(0)

        self.cleaner_lock = threading.Lock()

    @property
    def total_slots(self) -> int:
        return 2 * self.config.players_per_team

    def team_for(self, team_id: TeamId) -> Team:
        """The team identified by ``team_id``."""
        if team_id == TeamId.A:
            return self.team_a
        if team_id == TeamId.B:
            return self.team_b
        raise ValueError(f"no team for id {team_id!r}")

    def opponents_of(self, team_id: TeamId) -> Team:
        """The team playing against ``team_id``."""
        if team_id == TeamId.A:
            return self.team_b
        if team_id == TeamId.B:
            return self.team_a
        raise ValueError(f"no opponents for id {team_id!r}")

    def decide_winner(self, time_left: int) -> tuple[MatchResult, int]:
        """Outcome of the match and the survivor count to report with it."""
        alive_a = self.team_a.count_with_status(PlayerStatus.PLAYING)
        alive_b = self.team_b.count_with_status(PlayerStatus.PLAYING)

        if time_left <= 0:
            if alive_a > alive_b:
                return MatchResult.TEAM_A_WON, alive_a
            if alive_b > alive_a:
                return MatchResult.TEAM_B_WON, alive_b
            return MatchResult.DRAW, alive_b

        if alive_a == 0:
            return MatchResult.TEAM_B_WON, alive_b
        if alive_b == 0:
            return MatchResult.TEAM_A_WON, alive_a
        return MatchResult.UNDEFINED, 0

    def announce_winners(self, time_left: int) -> str:
        """Log and return the result line; an undefined result is an error."""
        result, survivors = self.decide_winner(time_left)
        number = self.stats.matches_played
        timing = f"(time {time_left}/{self.config.match_time_max})"
        if result == MatchResult.TEAM_A_WON:
            line = f"[result] Match {number}: Team A won with {survivors} survivors! {timing}"
        elif result == MatchResult.TEAM_B_WON:
            line = f"[result] Match {number}: Team B won with {survivors} survivors! {timing}"
        elif result == MatchResult.DRAW:
            line = (
                f"[result] Match {number}: Draw, players left on each team "
                f"{survivors} {timing}"
            )
        else:
            raise RuntimeError("match ended without a defined result")
        logger.info(line)
        return line

    def alive_total(self) -> int:
        """Players still playing across both teams."""
        return self.team_a.count_with_status(
            PlayerStatus.PLAYING
        ) + self.team_b.count_with_status(PlayerStatus.PLAYING)

    def all_waiting(self) -> bool:
        """True when every slot of both teams holds a waiting player."""
        waiting = self.team_a.count_with_status(
            PlayerStatus.WAITING
        ) + self.team_b.count_with_status(PlayerStatus.WAITING)
        return waiting == self.total_slots

    def __repr__(self) -> str:
        return (
            f"Match(number={self.number}, status={self.status.name}, "
            f"elapsed={self.elapsed}, {self.team_a!r}, {self.team_b!r})"
        )