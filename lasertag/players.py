"""The life of a player: join a team, gear up, play, and leave."""

from __future__ import annotations

import logging
from typing import Any

from lasertag.cleaner import Cleaner
from lasertag.config import Config, Rng, SimStats, msleep
from lasertag.match import Match, MatchStatus, filter_players
from lasertag.player import Player, PlayerStatus
from lasertag.shelf import Shelf
from lasertag.team import Team, TeamId

__all__ = [
    "choose_team",
    "take_equipment",
    "wait_for_start",
    "play_match",
    "wait_for_end",
    "leave_team",
    "release_equipment",
    "run_player",
]

logger = logging.getLogger(__name__)


def _join(player: Player, team: Team, match: Match) -> None:
    team.players.put(player)
    player.team = team.team_id
    with match.lock:
        match.players_in_teams += 1
        if match.players_in_teams == match.total_slots:
            match.manager_teams_ready.release()


def choose_team(player: Player, match: Match, rng: Rng) -> TeamId:
    """Wait until teams are open, then join a random team with a free slot."""
    match.choose_team_gate.acquire()
    player.status = PlayerStatus.CHOOSING_TEAM
    logger.info("[player %d] Choosing a team.", player.id)

    first, second = (
        (match.team_a, match.team_b)
        if rng.between(0, 2) == 0
        else (match.team_b, match.team_a)
    )
    if first.players.semaphore.acquire(blocking=False):
        _join(player, first, match)
    else:
        second.players.semaphore.acquire()
        _join(player, second, match)

    logger.info("[player %d] Chose team %s.", player.id, player.team.name)
    return player.team


def take_equipment(player: Player, match: Match, shelf: Shelf) -> None:
    """Wait for a free set of equipment and take it from the shelf."""
    player.status = PlayerStatus.TAKING_EQUIPMENT
    match.equipment_available.acquire()
    player.equipment = shelf.take()
    logger.info(
        "[player %d] Took equipment [%d, %d, %d].",
        player.id,
        player.equipment.vest,
        player.equipment.helmet,
        player.equipment.gun,
    )


def wait_for_start(player: Player, match: Match) -> None:
    """Take a waiting slot and block until the manager starts the match."""
    player.status = PlayerStatus.WAITING
    logger.info("[player %d] Waiting for the match to start.", player.id)
    match.wait_slots.acquire()
    with match.lock:
        match.players_waiting += 1
        if match.players_waiting == match.total_slots:
            match.manager_all_waiting.release()
    match.start_gate.acquire()


def play_match(
    player: Player, match: Match, config: Config, stats: SimStats, rng: Rng
) -> None:
    """Attack random living opponents until the match ends or the player dies."""
    player.status = PlayerStatus.PLAYING
    logger.info("[player %d] Playing.", player.id)

    while match.status != MatchStatus.FINISHED and player.status != PlayerStatus.DEAD:
        damage = rng.between(config.damage_min, config.damage_max)
        opponents = filter_players(
            match.opponents_of(player.team).players, PlayerStatus.PLAYING
        )
        if opponents:
            target = opponents[rng.between(0, len(opponents))]
            with match.lock:
                target.life -= damage
                if target.life <= 0 and target.status != PlayerStatus.DEAD:
                    target.status = PlayerStatus.DEAD
                    with stats.lock:
                        stats.players_killed += 1
        msleep(rng.between(config.delay_min, config.delay_max))

    logger.info("[player %d] Leaving the game.", player.id)


def wait_for_end(player: Player, match: Match) -> None:
    """Block until the manager declares the match over."""
    logger.info("[player %d] Waiting for the match to end.", player.id)
    match.leave_gate.acquire()


def leave_team(player: Player, match: Match) -> None:
    """Free the player's team slot; the last one out lets the manager move on."""
    logger.info("[player %d] Freeing team slot.", player.id)
    team = match.team_for(player.team)
    team.players.remove(player)
    team.players.semaphore.release()
    with match.lock:
        match.players_left += 1
        if match.players_left >= match.total_slots:
            match.manager_next_match.release()


def release_equipment(player: Player, match: Match, cleaner: Cleaner) -> None:
    """Hand the equipment to the cleaner, one player at a time."""
    player.status = PlayerStatus.RELEASING_EQUIPMENT
    logger.info("[player %d] Releasing equipment.", player.id)
    with match.cleaner_lock:
        cleaner.request_cleaning(player.equipment)


def run_player(player: Player, arena: Any) -> None:
    """Take a player through one full visit to the arena."""
    logger.info("[player %d] Arrived at the arena.", player.id)
    match = arena.match
    choose_team(player, match, arena.rng)
    take_equipment(player, match, arena.shelf)
    wait_for_start(player, match)
    play_match(player, match, arena.config, arena.stats, arena.rng)
    wait_for_end(player, match)
    leave_team(player, match)
    release_equipment(player, match, arena.cleaner)
    arena.doorman.checklist(player)
    logger.info("[player %d] Going home.", player.id)