"""The arena: wires the shelf, match, manager, cleaner and doorman together."""

from __future__ import annotations

import logging
import threading

from lasertag.cleaner import Cleaner
from lasertag.config import Config, Rng, SimStats
from lasertag.doorman import Doorman
from lasertag.manager import Manager
from lasertag.match import Match
from lasertag.shelf import Shelf

__all__ = ["Arena", "SEPARATOR"]

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 69


class Arena:
    """Everything one simulation run shares between its threads."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.stats = SimStats()
        self.rng = Rng(config.seed)
        self.shelf = Shelf(2 * config.players_per_team, self.rng)
        self.match = Match(config, self.stats)
        self.manager = Manager(self.match, config, self.stats)
        self.cleaner = Cleaner(
            self.shelf,
            config.delay_cleaner,
            on_released=self.match.equipment_available.release,
        )
        self.doorman = Doorman(self)

    def run(self) -> SimStats:
        """Run the manager and doorman to completion and return the counters."""
        logger.info("[main] Program starting")
        threads = [
            threading.Thread(target=self.manager.run, name="manager"),
            threading.Thread(target=self.doorman.run, name="doorman"),
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        if self.shelf.is_complete():
            logger.info("Shelf holds as much equipment as it started with.")
        else:
            logger.error("Shelf does not hold all of its equipment.")
        return self.stats

    def report(self) -> str:
        """Summary of the run's counters."""
        stats = self.stats
        budget = self.config.matches_max * self.config.match_time_max
        lines = [
            SEPARATOR,
            "[main][sim] Simulation counters:",
            f"[main][sim] Players created:       {stats.players_created}",
            f"[main][sim] Players destroyed:     {stats.players_destroyed}",
            f"[main][sim] Players healed:        {stats.players_healed}",
            f"[main][sim] Players killed:        {stats.players_killed}",
            f"[main][sim] Matches played:        {stats.matches_played}",
            f"[main][sim] Time played:           {stats.time_played}/{budget}",
            f"[main][sim] Shelf complete:        "
            f"{'yes' if self.shelf.is_complete() else 'no'}",
            SEPARATOR,
        ]
        return "\n".join(lines)