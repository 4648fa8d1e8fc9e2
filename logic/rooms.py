"""logic/rooms.py — Room transitions through exits.

The room transition machine's only state is ``Position.room``; the room
graph is its transition table.  Each tick, after movement, the first
exit (in declaration order) overlapping the player decides what happens:

* locked exit   → refuse, show its blocked message once per overlap
* open exit     → relocate to the target spawn, show its message
* no exit       → clear the blocked-message latch

Exits inside one room must not overlap each other, so "first match" is
only a tie-break for malformed content.
"""

from __future__ import annotations
from core.collision import Rect, VIEW_RECT, overlaps, rect_blocked
from core.rooms import Room, RoomGraph, Exit
from components import (
    Position, Hitbox, Player, StoryFlags, ExitLatch, MessageLog,
)
from logic.movement import player_rect


def current_room(world) -> Room | None:
    res = world.query_one(Player, Position)
    graph = world.res(RoomGraph)
    if not res or graph is None:
        return None
    return graph.get(res[2].room)


def exit_is_open(world, ex: Exit) -> bool:
    if not ex.guarded:
        return True
    flags = world.res(StoryFlags)
    return flags is not None and flags.is_set(ex.requires)


def find_safe_spawn(room: Room, x: float, y: float,
                    w: float, h: float) -> tuple[float, float]:
    """Return ``(x, y)`` near the requested point where a ``w×h`` box fits.

    Searches outward in 2 px rings up to a 40 px radius.  Falls back to
    the requested point if nothing nearby is free.
    """
    if not rect_blocked(Rect(x, y, w, h), room.solids, VIEW_RECT):
        return x, y
    for rad in range(2, 40, 2):
        for oy in range(-rad, rad + 1, 2):
            for ox in range(-rad, rad + 1, 2):
                tx, ty = x + ox, y + oy
                if not rect_blocked(Rect(tx, ty, w, h), room.solids, VIEW_RECT):
                    return tx, ty
    return x, y


def relocate(world, room_id: str, spawn: tuple[float, float]) -> bool:
    """Move the player into *room_id* at *spawn* (snapped if blocked)."""
    res = world.query_one(Player, Position, Hitbox)
    graph = world.res(RoomGraph)
    if not res or graph is None or room_id not in graph:
        print(f"[ROOM] cannot relocate to unknown room {room_id!r}")
        return False
    _, _, pos, box = res
    room = graph[room_id]
    pos.room = room_id
    pos.x, pos.y = find_safe_spawn(room, spawn[0], spawn[1], box.w, box.h)
    return True


def room_transition_system(world) -> str | None:
    """Honour at most one exit.  Returns the new room id, or None."""
    res = world.query_one(Player, Position, Hitbox)
    if not res:
        return None
    _, _, pos, box = res
    room = current_room(world)
    if room is None:
        return None

    latch = world.res(ExitLatch)
    if latch is None:
        latch = ExitLatch()
        world.set_res(latch)
    log = world.res(MessageLog)
    prect = player_rect(pos, box)

    for ex in room.exits:
        if not overlaps(prect, ex.rect):
            continue
        if not exit_is_open(world, ex):
            exit_id = f"{room.id}:{ex.target}"
            if latch.blocked != exit_id:
                latch.blocked = exit_id
                if log is not None and ex.blocked:
                    log.push(ex.blocked)
            return None

        latch.blocked = ""
        if not relocate(world, ex.target, ex.spawn):
            return None
        print(f"[ROOM] {room.id} → {ex.target}")
        if log is not None and ex.message:
            log.push(ex.message)
        return ex.target

    latch.blocked = ""
    return None
