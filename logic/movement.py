"""logic/movement.py — Player movement and collision.

Turns a held-key intent into a position update that never leaves the
view and never overlaps a solid of the current room.

Axis-separated resolution (x first, then y) lets the player slide along
a wall when only one axis is blocked.
"""

from __future__ import annotations
import math
from core.collision import Rect, VIEW_RECT, rect_blocked
from core.constants import STEP_PHASE
from core.rooms import RoomGraph
from components import Position, Hitbox, Facing, Player
from core.tuning import get as _tun

_DIAGONAL = 1.0 / math.sqrt(2.0)


def player_rect(pos: Position, box: Hitbox) -> Rect:
    return Rect(pos.x, pos.y, box.w, box.h)


def normalise_intent(dx: float, dy: float) -> tuple[float, float]:
    """Scale diagonal intents by 1/√2 so every direction covers equal distance."""
    if dx != 0 and dy != 0:
        return dx * _DIAGONAL, dy * _DIAGONAL
    return float(dx), float(dy)


def facing_for(dx: float, dy: float, current: str) -> str:
    """Facing after an intent.

    Horizontal is applied first, then vertical, so when both axes are
    nonzero the vertical direction wins.  A zero intent keeps *current*.
    """
    facing = current
    if dx < 0:
        facing = "left"
    elif dx > 0:
        facing = "right"
    if dy < 0:
        facing = "up"
    elif dy > 0:
        facing = "down"
    return facing


def movement_system(world, move: tuple[float, float], dt: float) -> bool:
    """Move the player by *move* (each axis in {-1, 0, 1}) for *dt* seconds.

    Returns True if the position changed.
    """
    res = world.query_one(Player, Position, Hitbox)
    if not res:
        return False
    eid, player, pos, box = res
    graph = world.res(RoomGraph)
    room = graph.get(pos.room) if graph else None
    solids = room.solids if room else ()

    dx, dy = normalise_intent(*move)
    moving = dx != 0 or dy != 0

    facing = world.get(eid, Facing)
    if facing is not None:
        facing.direction = facing_for(dx, dy, facing.direction)
    if moving:
        player.step += _tun("movement", "step_phase", STEP_PHASE)
    else:
        return False

    dist = player.speed * dt
    old_x, old_y = pos.x, pos.y

    nx = pos.x + dx * dist
    if not rect_blocked(Rect(nx, pos.y, box.w, box.h), solids, VIEW_RECT):
        pos.x = nx
    ny = pos.y + dy * dist
    if not rect_blocked(Rect(pos.x, ny, box.w, box.h), solids, VIEW_RECT):
        pos.y = ny

    return pos.x != old_x or pos.y != old_y
