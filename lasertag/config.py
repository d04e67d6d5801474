"""Run parameters, shared counters and timing/random helpers."""

from __future__ import annotations

import random
import threading
import time
from dataclasses import dataclass, field

__all__ = ["Config", "SimStats", "Rng", "msleep"]


@dataclass(frozen=True)
class Config:
    """Parameters of one simulation run. Delays and times are in milliseconds."""

    players_per_team: int = 25
    group_min: int = 1
    group_max: int = 4
    damage_min: int = 1
    damage_max: int = 10
    damage_heal: int = 5
    delay_min: int = 1
    delay_max: int = 5
    delay_manager: int = 3
    delay_cleaner: int = 1
    matches_max: int = 10
    match_time_max: int = 500
    seed: int = 12345

    def __post_init__(self) -> None:
        if self.players_per_team <= 0:
            raise ValueError("players_per_team must be positive")
        if self.matches_max <= 0:
            raise ValueError("matches_max must be positive")
        if self.match_time_max <= 0:
            raise ValueError("match_time_max must be positive")


@dataclass
class SimStats:
    """Counters collected during a run, guarded by ``lock`` for writers."""

    players_created: int = 0
    players_destroyed: int = 0
    players_healed: int = 0
    players_killed: int = 0
    matches_played: int = 0
    time_played: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


class Rng:
    """Seeded random number source shared by the simulation."""

    def __init__(self, seed: int) -> None:
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    def between(self, low: int, high: int) -> int:
        """Return ``low`` plus a random offset in ``[0, high)``."""
        if low > high:
            raise ValueError(f"low ({low}) must not exceed high ({high})")
        if high <= 0:
            raise ValueError("high must be positive")
        with self._lock:
            return low + self._random.randrange(high)


def msleep(milliseconds: float) -> None:
    """Sleep for the given number of milliseconds."""
    if milliseconds < 0:
        raise ValueError("cannot sleep for a negative time")
    time.sleep(milliseconds / 1000)