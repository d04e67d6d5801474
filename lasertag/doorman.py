"""Doorman who lets players into the arena and signs them out when they leave."""

from __future__ import annotations

import logging
import threading
import time
from typing import Any

from lasertag.config import msleep
from lasertag.player import Player, PlayerStatus
from lasertag.players import run_player

__all__ = ["Doorman"]

logger = logging.getLogger(__name__)

_IDLE_PAUSE = 0.001


class Doorman:
    """Creates groups of players and reclaims each one once it has finished."""

    def __init__(self, arena: Any) -> None:
        self.arena = arena
        self._leaving = 0
        self._door = threading.Lock()
        self._turnstile = threading.Semaphore(1)
        self._signed = threading.Semaphore(0)
        self._departing: Player | None = None

    @property
    def pending(self) -> int:
        """Players that announced they are leaving but were not yet signed out."""
        with self._door:
            return self._leaving

    def checklist(self, player: Player) -> None:
        """Called by a player that has finished; hands itself to the doorman."""
        player.status = PlayerStatus.LEAVING
        with self._door:
            self._leaving += 1
        self._turnstile.acquire()
        self._departing = player
        self._signed.release()

    def _sign_out_departures(self) -> None:
        stats = self.arena.stats
        while True:
            with self._door:
                if self._leaving <= 0:
                    return
            self._signed.acquire()
            player = self._departing
            if player is None:
                raise RuntimeError("checklist signed without a player")
            if player.status != PlayerStatus.LEAVING:
                raise RuntimeError(f"player {player.id} signed out before finishing")
            if player.thread is not None:
                player.thread.join()
            self._departing = None
            with stats.lock:
                stats.players_destroyed += 1
            self._turnstile.release()
            with self._door:
                self._leaving -= 1

    def _admit(self) -> Player:
        stats = self.arena.stats
        with stats.lock:
            player = Player(stats.players_created)
            stats.players_created += 1
        player.thread = threading.Thread(
            target=run_player,
            args=(player, self.arena),
            name=f"player-{player.id}",
            daemon=True,
        )
        player.thread.start()
        return player

    def run(self) -> None:
        """Admit every player the run needs, then wait until all have left."""
        logger.info("[doorman] Started!")
        config = self.arena.config
        rng = self.arena.rng
        stats = self.arena.stats
        remaining = 2 * config.players_per_team * config.matches_max

        while remaining > 0:
            group = rng.between(config.group_min, config.group_max)
            logger.info("[doorman] Created a group of %d players", group)
            for _ in range(min(group, remaining)):
                self._admit()
                remaining -= 1
            msleep(rng.between(config.delay_min, 2 * config.delay_max))
            self._sign_out_departures()

        while stats.players_created > stats.players_destroyed:
            self._sign_out_departures()
            time.sleep(_IDLE_PAUSE)

        if stats.players_created != stats.players_destroyed:
            raise RuntimeError("some players never left the arena")