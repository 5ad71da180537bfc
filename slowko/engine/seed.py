"""
Seeded Puzzle Selector

Derives the active puzzle from time: every mode cuts time into fixed windows
(day, hour, second) counted from a shared epoch, and the window's start is
the seed that picks the solution. All times are unix milliseconds.
"""

import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Final, Union

SECOND: Final[int] = 1000
MINUTE: Final[int] = 60 * SECOND
HOUR: Final[int] = 60 * MINUTE
DAY: Final[int] = 24 * HOUR

# 2025-08-11 00:00 UTC+2
EPOCH_START: Final[int] = 1754863200000


class GameMode(Enum):
    DAILY = "daily"
    HOURLY = "hourly"
    INFINITE = "infinite"


@dataclass(frozen=True)
class ModeData:
    name: str
    unit: int
    start: int
    streak: bool = False
    use_time_zone: bool = False


MODES: Final[Dict[GameMode, ModeData]] = {
    GameMode.DAILY: ModeData("Dzienny", DAY, EPOCH_START, streak=True, use_time_zone=True),
    GameMode.HOURLY: ModeData("Godzinny", HOUR, EPOCH_START, streak=True),
    GameMode.INFINITE: ModeData("Nieskończony", SECOND, EPOCH_START),
}


def get_mode(mode: Union[GameMode, str]) -> GameMode:
    """Accepts a GameMode or its string value; raises ValueError for unknown modes."""
    return mode if isinstance(mode, GameMode) else GameMode(mode)


def new_seed(mode: Union[GameMode, str], now_millis: int, utc_offset_minutes: int = 0) -> int:
    """
    Returns the seed of the puzzle window containing `now_millis`.

    Daily seeds are the UTC midnight of the player's local calendar day, so
    the puzzle changes at local midnight; `utc_offset_minutes` is the local
    offset from UTC (positive east of Greenwich).
    """
    mode = get_mode(mode)
    if mode is GameMode.DAILY:
        local = now_millis + utc_offset_minutes * MINUTE
        return (local // DAY) * DAY
    if mode is GameMode.HOURLY:
        return now_millis - now_millis % HOUR
    return now_millis - now_millis % SECOND


def get_word_number(mode: Union[GameMode, str], seed: int) -> int:
    """Sequential puzzle number since the mode's epoch, starting at 1."""
    data = MODES[get_mode(mode)]
    return (seed - data.start) // data.unit + 1


def seeded_random_int(low: int, high: int, seed: int) -> int:
    """Deterministic integer in [low, high) drawn from a generator seeded by `seed` alone."""
    rng = random.Random(str(seed))
    return math.floor(low + (high - low) * rng.random())


def pick_solution_index(seed: int, list_length: int) -> int:
    """Index of the solution for a seed; the same seed always yields the same index."""
    if list_length <= 0:
        raise ValueError("Word list cannot be empty")
    return seeded_random_int(0, list_length, seed)


def time_remaining(mode: Union[GameMode, str], seed: int, now_millis: int,
                   utc_offset_minutes: int = 0) -> int:
    """Milliseconds until the puzzle after `seed` becomes available."""
    data = MODES[get_mode(mode)]
    if data.use_time_zone:
        return data.unit - (now_millis - (seed - utc_offset_minutes * MINUTE))
    return data.unit - (now_millis - seed)
