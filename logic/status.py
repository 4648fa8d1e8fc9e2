"""logic/status.py — Read-only projections for the HUD.

Everything the presentation layer shows is derived here from the world;
nothing in this module mutates state.
"""

from __future__ import annotations
from components import Player, Position, Facing, Inventory, GameClock
from logic.clock import minute_of_day, format_clock, npc_away_now
from logic.danger import danger_percent
from logic.rooms import current_room


def clock_text(world) -> str:
    clock = world.res(GameClock)
    if clock is None:
        return ""
    return f"Day {clock.day}, {format_clock(minute_of_day(clock))}"


def npc_status_text(world) -> str:
    if npc_away_now(world):
        return "Away (safe window)"
    return "Nearby (danger at manor/tower)"


def danger_text(world) -> str:
    pct = danger_percent(world)
    return "Suspicion: Safe" if pct <= 0 else f"Suspicion: {pct}%"


def room_name(world) -> str:
    room = current_room(world)
    return room.name if room else "?"


def inventory_labels(world) -> list[str]:
    res = world.query_one(Player, Inventory)
    return list(res[2].items.values()) if res else []


def holds(world, item_id: str) -> bool:
    res = world.query_one(Player, Inventory)
    return bool(res) and res[2].has(item_id)


def player_pose(world) -> tuple[float, float, str, float] | None:
    """``(x, y, facing, step)`` for the sprite painter, or None."""
    res = world.query_one(Player, Position)
    if not res:
        return None
    eid, player, pos = res
    facing = world.get(eid, Facing)
    return pos.x, pos.y, facing.direction if facing else "down", player.step


# ── Time-of-day tint ─────────────────────────────────────────────────
DUSK_TINT = (238, 142, 86, 23)      # 16:00 – 19:00
NIGHT_TINT = (24, 31, 58, 64)       # 19:00 – 06:00


def time_tint(world) -> list[tuple[int, int, int, int]]:
    """RGBA washes laid over the room for the current hour.

    Only changes at bucket boundaries, so the scene recomputes it when
    ``tick_systems`` reports a new time bucket.
    """
    clock = world.res(GameClock)
    if clock is None:
        return []
    m = minute_of_day(clock)
    tints = []
    if 16 * 60 <= m < 19 * 60:
        tints.append(DUSK_TINT)
    if m >= 19 * 60 or m < 6 * 60:
        tints.append(NIGHT_TINT)
    return tints
