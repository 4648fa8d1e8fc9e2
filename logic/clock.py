"""logic/clock.py — Game clock and the wizard's daily schedule.

Real time (seconds) advances game time (minutes-of-day).  Midnight rolls
the day counter and re-arms both schedule bells.  The bells are one-shot
per day: each marker stores the last day it rang, and a bell only rings
when that day differs from today.

Schedule (defaults, see ``[clock]`` in tuning.toml)::

    00:00 ─── 09:00 ═══════ 15:00 ─── 24:00
              ninth bell    dusk bells
              (rides out)   (returns)
              └── is_npc_away() ──┘
"""

from __future__ import annotations
from components import GameClock, MessageLog
from core.constants import (
    MINUTES_PER_DAY, GAME_MINUTES_PER_SECOND, NPC_LEAVES, NPC_RETURNS,
    TIME_BUCKET_MINUTES,
)
from core.tuning import get as _tun


DEPART_MESSAGE = "Ninth bell rings. Manannan rides out from the manor."
RETURN_MESSAGE = "Dusk bells toll. Manannan has returned to the manor grounds."


def minute_of_day(clock: GameClock) -> int:
    """Whole minutes into the current day, 0 … 1439."""
    return int(clock.minutes) % MINUTES_PER_DAY


def is_npc_away(minute: float) -> bool:
    """True while the wizard is out: the half-open window [leaves, returns)."""
    leaves = _tun("clock", "npc_leaves", NPC_LEAVES)
    returns = _tun("clock", "npc_returns", NPC_RETURNS)
    return leaves <= minute < returns


def npc_away_now(world) -> bool:
    clock = world.res(GameClock)
    return clock is not None and is_npc_away(minute_of_day(clock))


def time_bucket(minute: float) -> int:
    """Coarse quantisation of the clock for throttling HUD refreshes."""
    return int(minute) // _tun("clock", "bucket_minutes", TIME_BUCKET_MINUTES)


def format_clock(minute: int) -> str:
    return f"{minute // 60:02d}:{minute % 60:02d}"


def advance_clock(clock: GameClock, dt: float) -> int:
    """Advance *clock* by *dt* real seconds.  Returns days rolled over."""
    rate = _tun("clock", "minutes_per_second", GAME_MINUTES_PER_SECOND)
    clock.minutes += dt * rate
    rolled = 0
    while clock.minutes >= MINUTES_PER_DAY:
        clock.minutes -= MINUTES_PER_DAY
        clock.day += 1
        clock.left_day = 0
        clock.return_day = 0
        rolled += 1
    return rolled


def ring_schedule_bells(clock: GameClock, log: MessageLog | None) -> list[str]:
    """Emit each bell whose threshold today's clock has reached, once per day."""
    m = minute_of_day(clock)
    rung: list[str] = []
    if m >= _tun("clock", "npc_leaves", NPC_LEAVES) and clock.left_day != clock.day:
        clock.left_day = clock.day
        rung.append(DEPART_MESSAGE)
    if m >= _tun("clock", "npc_returns", NPC_RETURNS) and clock.return_day != clock.day:
        clock.return_day = clock.day
        rung.append(RETURN_MESSAGE)
    if log is not None:
        for text in rung:
            log.push(text)
    return rung


def clock_system(world, dt: float) -> bool:
    """Tick the clock and bells.  Returns True when the HUD bucket changed."""
    clock = world.res(GameClock)
    if clock is None:
        return False
    if advance_clock(clock, dt):
        print(f"[CLOCK] Day {clock.day} begins")
    ring_schedule_bells(clock, world.res(MessageLog))

    bucket = time_bucket(minute_of_day(clock))
    if bucket != clock.last_bucket:
        clock.last_bucket = bucket
        return True
    return False
