"""Manager that coordinates each match from start to end."""

from __future__ import annotations

import logging

from lasertag.config import Config, SimStats, msleep
from lasertag.match import Match, MatchStatus
from lasertag.player import FULL_LIFE, PlayerStatus

__all__ = ["Manager"]

logger = logging.getLogger(__name__)


class Manager:
    """Forms teams, starts matches, heals players and ends matches."""

    def __init__(self, match: Match, config: Config, stats: SimStats) -> None:
        self.match = match
        self.config = config
        self.stats = stats

    def _release(self, semaphore, times: int | None = None) -> None:
        semaphore.release(self.match.total_slots if times is None else times)

    def run(self) -> None:
        """Coordinate matches until the configured number has been played."""
        logger.info("[manager] Started.")
        match = self.match
        while match.number <= self.config.matches_max:
            self._release(match.choose_team_gate)
            match.manager_teams_ready.acquire()
            match.status = MatchStatus.PREPARED

            match.manager_all_waiting.acquire()
            self._release(match.start_gate)

            with self.stats.lock:
                self.stats.matches_played += 1
            match.elapsed = 0
            match.status = MatchStatus.STARTED

            self._coordinate()

            match.manager_next_match.acquire()
            logger.info("[manager] Resetting match.")
            self.reset_match()

    def _coordinate(self) -> None:
        logger.info("[manager] Coordinating match.")
        delay = self.config.delay_manager
        while True:
            msleep(delay)
            self.match.elapsed += delay
            healed = self.heal_players()
            with self.stats.lock:
                self.stats.time_played += delay
                self.stats.players_healed += healed
            if self.match_over():
                return

    def heal_players(self) -> int:
        """Heal every player on both teams, capped at full life; return the count."""
        logger.info("[manager] Healing players.")
        healed = 0
        for team in (self.match.team_a, self.match.team_b):
            for player in team.players:
                player.life = min(FULL_LIFE, player.life + self.config.damage_heal)
                healed += 1
        return healed

    def match_over(self) -> bool:
        """End the match when time ran out or a team has nobody left playing."""
        match = self.match
        if (
            match.elapsed >= self.config.match_time_max
            or match.team_a.count_with_status(PlayerStatus.PLAYING) <= 0
            or match.team_b.count_with_status(PlayerStatus.PLAYING) <= 0
        ):
            match.status = MatchStatus.FINISHED
            match.announce_winners(self.config.match_time_max - match.elapsed)
            self._release(match.leave_gate)
            return True
        return False

    def reset_match(self) -> None:
        """Clear per-match state and open the waiting slots for the next match."""
        match = self.match
        with match.lock:
            match.status = MatchStatus.NOT_PREPARED
            match.elapsed = 0
            match.players_waiting = 0
            match.players_in_teams = 0
            match.players_left = 0
            match.number += 1
        self._release(match.wait_slots)