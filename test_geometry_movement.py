"""test_geometry_movement.py — Rect primitives, player movement, frame clamp.

Run: python test_geometry_movement.py   (or: pytest test_geometry_movement.py)
"""
from __future__ import annotations
import sys, traceback, math

from core.collision import Rect, VIEW_RECT, overlaps, contains, inflate, rect_blocked
from core.bootstrap import create_world
from components import Player, Position, Hitbox, Facing, GameClock
from logic.movement import movement_system, facing_for, normalise_intent, player_rect
from logic.rooms import current_room
from logic.tick import tick_systems, clamp_delta

passed = 0
failed = 0


def ok(label: str):
    global passed
    passed += 1
    print(f"  [PASS] {label}")


def fail(label: str, detail: str = ""):
    global failed
    failed += 1
    print(f"  [FAIL] {label}")
    if detail:
        for line in detail.strip().splitlines():
            print(f"         {line}")


def _close(a: float, b: float, eps: float = 1e-6) -> bool:
    return abs(a - b) < eps


def _player(world):
    eid, player, pos, box = world.query_one(Player, Position, Hitbox)
    return eid, player, pos, box


def _place(world, room: str, x: float, y: float):
    _, _, pos, _ = _player(world)
    pos.room, pos.x, pos.y = room, x, y
    return pos


# ════════════════════════════════════════════════════════════════════════
#  Rect primitives
# ════════════════════════════════════════════════════════════════════════

def test_overlap_is_strict():
    a = Rect(0, 0, 10, 10)
    assert overlaps(a, Rect(9, 9, 5, 5))
    assert not overlaps(a, Rect(10, 0, 5, 5)), "touching on an edge is not overlap"
    assert not overlaps(a, Rect(0, 10, 5, 5))
    assert overlaps(Rect(2, 2, 2, 2), a), "inner box overlaps"
    ok("Edge contact is not an overlap; interior contact is")


def test_contains_is_inclusive():
    outer = Rect(0, 0, 10, 10)
    assert contains(outer, Rect(0, 0, 10, 10))
    assert contains(outer, Rect(2, 3, 4, 5))
    assert not contains(outer, Rect(-0.5, 0, 4, 4))
    assert not contains(outer, Rect(8, 8, 4, 4))
    ok("contains() accepts a box flush with every edge")


def test_inflate_grows_every_side():
    r = inflate(Rect(10, 20, 4, 6), 3)
    assert r == Rect(7, 17, 10, 12), r
    ok("inflate(margin) adds margin on all four sides")


def test_rect_blocked_by_bounds_and_solids():
    solids = [Rect(100, 100, 50, 50)]
    assert not rect_blocked(Rect(10, 10, 24, 40), solids)
    assert rect_blocked(Rect(-1, 10, 24, 40), solids), "left of view"
    assert rect_blocked(Rect(940, 10, 24, 40), solids), "right of view"
    assert rect_blocked(Rect(120, 120, 24, 40), solids), "inside solid"
    assert not rect_blocked(Rect(76, 100, 24, 40), solids), "flush against solid"
    assert not rect_blocked(Rect(0, 0, VIEW_RECT.w, VIEW_RECT.h), [])
    ok("rect_blocked covers view bounds and solid overlap")


# ════════════════════════════════════════════════════════════════════════
#  Intent helpers
# ════════════════════════════════════════════════════════════════════════

def test_diagonal_intent_has_unit_length():
    dx, dy = normalise_intent(1, -1)
    assert _close(math.hypot(dx, dy), 1.0)
    assert normalise_intent(1, 0) == (1.0, 0.0)
    assert normalise_intent(0, 0) == (0.0, 0.0)
    ok("Diagonal intent scaled by 1/sqrt(2)")


def test_facing_vertical_wins_ties():
    assert facing_for(1, -1, "down") == "up"
    assert facing_for(-1, 1, "up") == "down"
    assert facing_for(-1, 0, "up") == "left"
    assert facing_for(1, 0, "up") == "right"
    assert facing_for(0, 0, "left") == "left", "no intent keeps facing"
    ok("Vertical facing overrides horizontal on diagonals")


# ════════════════════════════════════════════════════════════════════════
#  movement_system
# ════════════════════════════════════════════════════════════════════════

def test_free_move_covers_speed_times_dt():
    world = create_world(start_room="cottage")
    _, player, pos, _ = _player(world)
    x0, y0 = pos.x, pos.y
    assert movement_system(world, (1, 0), 0.1)
    assert _close(pos.x, x0 + player.speed * 0.1), pos.x
    assert pos.y == y0
    ok("One tick right moves speed*dt px")


def test_diagonal_distance_matches_cardinal():
    world = create_world(start_room="cottage")
    _, player, pos, _ = _player(world)
    x0, y0 = pos.x, pos.y
    movement_system(world, (1, 1), 0.1)
    assert _close(math.hypot(pos.x - x0, pos.y - y0), player.speed * 0.1)
    ok("Diagonal step covers the same distance as a cardinal one")


def test_wall_slide_keeps_free_axis():
    world = create_world(start_room="cottage")
    pos = _place(world, "cottage", 20.0, 300.0)   # flush-ish to the west wall
    movement_system(world, (-1, 1), 0.1)
    assert pos.x == 20.0, "x blocked by wall"
    assert pos.y > 300.0, "y still slides"
    ok("Blocked x axis does not stop y movement")


def test_step_and_facing_update():
    world = create_world(start_room="cottage")
    eid, player, pos, _ = _player(world)
    facing = world.get(eid, Facing)
    movement_system(world, (1, 1), 0.05)
    assert facing.direction == "down"
    assert _close(player.step, 0.16)
    before = (pos.x, pos.y, player.step)
    assert movement_system(world, (0, 0), 0.05) is False
    assert (pos.x, pos.y, player.step) == before
    assert facing.direction == "down"
    ok("Moving advances step phase; idle leaves pose untouched")


def test_never_leaves_view_or_enters_solid():
    world = create_world(start_room="cottage")
    _, _, pos, box = _player(world)
    for _ in range(60):
        movement_system(world, (1, 0), 0.12)
        room = current_room(world)
        assert not rect_blocked(player_rect(pos, box), room.solids, VIEW_RECT)
    assert pos.x + box.w <= 942, "stopped at the east wall"
    assert pos.x > 900
    ok("Holding right stops at the wall, never inside it")


def test_patrol_pattern_stays_legal():
    world = create_world()
    _, _, pos, box = _player(world)
    pattern = [(1, 0)] * 40 + [(0, 1)] * 30 + [(-1, -1)] * 40 + [(0, -1)] * 30
    for move in pattern * 3:
        tick_systems(world, 60, move)
        room = current_room(world)
        assert not rect_blocked(player_rect(pos, box), room.solids, VIEW_RECT), \
            f"illegal position {pos}"
    ok("Arbitrary input sequence never yields an illegal position")


# ════════════════════════════════════════════════════════════════════════
#  Frame clamp
# ════════════════════════════════════════════════════════════════════════

def test_clamp_delta():
    assert clamp_delta(-50) == 0.0
    assert _close(clamp_delta(16), 0.016)
    assert _close(clamp_delta(5000), 0.12)
    ok("Frame delta clamped to [0, 120] ms")


def test_long_frame_moves_at_most_clamped_distance():
    world = create_world(start_room="cottage")
    _, player, pos, _ = _player(world)
    clock = world.res(GameClock)
    x0, m0 = pos.x, clock.minutes
    tick_systems(world, 1000, (1, 0))
    assert _close(pos.x, x0 + player.speed * 0.12)
    assert _close(clock.minutes, m0 + 3.0 * 0.12)
    ok("A one-second stall advances only 120 ms of game")


def test_negative_frame_is_a_no_op_for_time():
    world = create_world(start_room="cottage")
    clock = world.res(GameClock)
    m0 = clock.minutes
    tick_systems(world, -30)
    assert clock.minutes == m0
    ok("Negative delta does not rewind the clock")


# ════════════════════════════════════════════════════════════════════════
#  Script runner
# ════════════════════════════════════════════════════════════════════════

def _run_all() -> int:
    for name, fn in list(globals().items()):
        if name.startswith("test_") and callable(fn):
            print(f"\n=== {name} ===")
            try:
                fn()
            except Exception:
                fail(name, traceback.format_exc())
    print(f"\n{'═' * 50}")
    print(f"  Results: {passed} passed, {failed} failed")
    print(f"{'═' * 50}")
    return failed


if __name__ == "__main__":
    sys.exit(1 if _run_all() else 0)
