import threading
import time
from types import SimpleNamespace

from lasertag.cleaner import Cleaner
from lasertag.config import Config, Rng, SimStats
from lasertag.manager import Manager
from lasertag.match import Match, MatchStatus
from lasertag.player import Player, PlayerStatus
from lasertag.players import (
    choose_team,
    leave_team,
    play_match,
    release_equipment,
    run_player,
    take_equipment,
    wait_for_end,
    wait_for_start,
)
from lasertag.shelf import Shelf
from lasertag.team import TeamId


def make_config(**overrides):
    values = dict(
        players_per_team=1,
        damage_min=50,
        damage_max=60,
        delay_min=0,
        delay_max=1,
        delay_manager=1,
        delay_cleaner=0,
        matches_max=1,
        match_time_max=5,
        seed=7,
    )
    values.update(overrides)
    return Config(**values)


def make_match(**overrides):
    config = make_config(**overrides)
    stats = SimStats()
    return config, stats, Match(config, stats)


def seat(player, match, team_id):
    team = match.team_for(team_id)
    assert team.players.semaphore.acquire(blocking=False)
    team.players.put(player)
    player.team = team_id


def test_choose_team_joins_a_team():
    _, _, match = make_match()
    match.choose_team_gate.release()
    player = Player(0)
    team_id = choose_team(player, match, Rng(1))
    assert team_id in (TeamId.A, TeamId.B)
    assert player.team == team_id
    assert player in list(match.team_for(team_id).players)
    assert player.status == PlayerStatus.CHOOSING_TEAM
    assert match.players_in_teams == 1
    assert not match.manager_teams_ready.acquire(blocking=False)


def test_choose_team_fills_both_teams_and_signals_manager():
    _, _, match = make_match()
    match.choose_team_gate.release(2)
    rng = Rng(3)
    first, second = Player(0), Player(1)
    choose_team(first, match, rng)
    choose_team(second, match, rng)
    assert {first.team, second.team} == {TeamId.A, TeamId.B}
    assert len(match.team_a.players) == 1
    assert len(match.team_b.players) == 1
    assert match.manager_teams_ready.acquire(blocking=False)


def test_take_equipment_takes_one_of_each_kind():
    _, _, match = make_match()
    shelf = Shelf(2, Rng(5))
    player = Player(0)
    take_equipment(player, match, shelf)
    eq = player.equipment
    assert player.status == PlayerStatus.TAKING_EQUIPMENT
    assert all(0 <= item < 2 for item in (eq.vest, eq.helmet, eq.gun))
    assert len(shelf.vests) == len(shelf.helmets) == len(shelf.guns) == 1
    assert not shelf.is_complete()


def test_wait_for_start_signals_manager_when_all_waiting():
    _, _, match = make_match()
    match.start_gate.release(2)
    first = Player(0)
    wait_for_start(first, match)
    assert first.status == PlayerStatus.WAITING
    assert match.players_waiting == 1
    assert not match.manager_all_waiting.acquire(blocking=False)
    wait_for_start(Player(1), match)
    assert match.players_waiting == 2
    assert match.manager_all_waiting.acquire(blocking=False)
    assert not match.wait_slots.acquire(blocking=False)


def test_play_match_returns_at_once_when_match_finished():
    config, stats, match = make_match()
    match.status = MatchStatus.FINISHED
    player = Player(0)
    seat(player, match, TeamId.A)
    play_match(player, match, config, stats, Rng(2))
    assert player.status == PlayerStatus.PLAYING
    assert stats.players_killed == 0


def test_play_match_kills_opponent():
    config, stats, match = make_match()
    match.status = MatchStatus.STARTED
    attacker, victim = Player(0), Player(1)
    seat(attacker, match, TeamId.A)
    seat(victim, match, TeamId.B)
    victim.status = PlayerStatus.PLAYING
    victim.life = 10

    worker = threading.Thread(
        target=play_match, args=(attacker, match, config, stats, Rng(4))
    )
    worker.start()
    deadline = time.monotonic() + 5
    while victim.status != PlayerStatus.DEAD and time.monotonic() < deadline:
        time.sleep(0.001)
    match.status = MatchStatus.FINISHED
    worker.join(timeout=5)

    assert not worker.is_alive()
    assert victim.status == PlayerStatus.DEAD
    assert victim.life <= 0
    assert stats.players_killed == 1
    assert attacker.life == 100


def test_wait_for_end_consumes_leave_permit():
    _, _, match = make_match()
    match.leave_gate.release()
    wait_for_end(Player(0), match)
    assert not match.leave_gate.acquire(blocking=False)


def test_leave_team_frees_slot_and_last_signals_manager():
    _, _, match = make_match()
    first, second = Player(0), Player(1)
    seat(first, match, TeamId.A)
    seat(second, match, TeamId.B)

    leave_team(first, match)
    assert first not in list(match.team_a.players)
    assert match.players_left == 1
    assert not match.manager_next_match.acquire(blocking=False)
    assert match.team_a.players.semaphore.acquire(blocking=False)

    leave_team(second, match)
    assert len(match.team_b.players) == 0
    assert match.manager_next_match.acquire(blocking=False)


def test_release_equipment_returns_items_to_shelf():
    _, _, match = make_match()
    shelf = Shelf(2, Rng(6))
    cleaner = Cleaner(shelf, 0, match.equipment_available.release)
    player = Player(0)
    take_equipment(player, match, shelf)
    release_equipment(player, match, cleaner)
    assert player.status == PlayerStatus.RELEASING_EQUIPMENT
    assert player.equipment.is_empty()
    assert shelf.is_complete()


class RecordingDoorman:
    def __init__(self):
        self.seen = []
        self._lock = threading.Lock()

    def checklist(self, player):
        player.status = PlayerStatus.LEAVING
        with self._lock:
            self.seen.append(player.id)


def test_run_player_full_match():
    config, stats, match = make_match()
    rng = Rng(config.seed)
    shelf = Shelf(match.total_slots, rng)
    cleaner = Cleaner(shelf, config.delay_cleaner, match.equipment_available.release)
    doorman = RecordingDoorman()
    arena = SimpleNamespace(
        match=match,
        rng=rng,
        shelf=shelf,
        cleaner=cleaner,
        config=config,
        stats=stats,
        doorman=doorman,
    )
    players = [Player(0), Player(1)]
    threads = [threading.Thread(target=run_player, args=(p, arena)) for p in players]
    threads.append(threading.Thread(target=Manager(match, config, stats).run))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=10)

    assert not any(thread.is_alive() for thread in threads)
    assert sorted(doorman.seen) == [0, 1]
    assert all(p.status == PlayerStatus.LEAVING for p in players)
    assert all(p.equipment.is_empty() for p in players)
    assert shelf.is_complete()
    assert stats.matches_played == 1
    assert match.number == 2
    assert len(match.team_a.players) == 0 and len(match.team_b.players) == 0