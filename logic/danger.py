"""logic/danger.py — Wizard suspicion meter.

Standing in a risk room while Manannan is home raises the meter; being
anywhere else (or visiting while he is away) lets it drain.  Draining is
faster than rising, so a brief peek through the gate is forgiven.

Meter reaching the limit means capture:

    meter → 0, gate re-locked, next day 06:30, player back in the cottage

Once the spellbook is taken (``won``) the meter stays pinned at 0.
"""

from __future__ import annotations
import math
from components import (
    DangerMeter, StoryFlags, GameClock, MessageLog,
)
from core.constants import (
    DANGER_LIMIT, DANGER_RISE_RATE, DANGER_FALL_RATE, CAUGHT_MINUTES, SAFE_ROOM,
)
from core.rooms import RoomGraph
from core.tuning import get as _tun
from logic.clock import npc_away_now
from logic.rooms import current_room, relocate


CAUGHT_MESSAGE = ("Manannan catches you near the tower and drags you back "
                  "to the cottage.")


def danger_limit() -> float:
    return _tun("danger", "limit", DANGER_LIMIT)


def exposed(world) -> bool:
    """True while the player stands in a risk room with the wizard home."""
    room = current_room(world)
    return room is not None and room.high_risk and not npc_away_now(world)


def trigger_caught(world) -> None:
    """Punitive reset after the meter fills."""
    meter = world.res(DangerMeter)
    if meter is not None:
        meter.value = 0.0

    flags = world.res(StoryFlags)
    if flags is not None:
        flags.gate_unlocked = False

    clock = world.res(GameClock)
    if clock is not None:
        clock.day += 1
        clock.minutes = float(_tun("clock", "caught_minutes", CAUGHT_MINUTES))

    safe = _tun("danger", "safe_room", SAFE_ROOM)
    graph = world.res(RoomGraph)
    if graph is not None and safe in graph:
        relocate(world, safe, graph[safe].spawn)

    day = clock.day if clock else "?"
    print(f"[DANGER] Caught! Day {day}, back in {safe}")
    log = world.res(MessageLog)
    if log is not None:
        log.push(CAUGHT_MESSAGE)


def danger_system(world, dt: float) -> bool:
    """Update the meter for *dt* seconds.  Returns True if the player was caught."""
    meter = world.res(DangerMeter)
    if meter is None:
        return False
    limit = danger_limit()

    flags = world.res(StoryFlags)
    if flags is not None and flags.won:
        meter.value = 0.0
        return False

    if exposed(world):
        meter.value += dt * _tun("danger", "rise_rate", DANGER_RISE_RATE)
        if meter.value >= limit:
            trigger_caught(world)
            return True
    else:
        meter.value -= dt * _tun("danger", "fall_rate", DANGER_FALL_RATE)

    meter.value = max(0.0, min(limit, meter.value))
    return False


def danger_percent(world) -> int:
    meter = world.res(DangerMeter)
    if meter is None:
        return 0
    # half-up, so 42.5 reads 43
    return int(math.floor(100.0 * meter.value / danger_limit() + 0.5))
