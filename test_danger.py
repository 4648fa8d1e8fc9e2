"""test_danger.py — Suspicion meter, capture reset and the won pin.

Run: python test_danger.py   (or: pytest test_danger.py)
"""
from __future__ import annotations
import sys, traceback

from core.bootstrap import create_world
from components import (
    Player, Position, Inventory, DangerMeter, StoryFlags, GameClock, MessageLog,
)
from logic.clock import minute_of_day
from logic.danger import CAUGHT_MESSAGE, danger_percent, danger_system, exposed
from logic.interact import player_interact
from logic.status import danger_text
from logic.tick import tick_systems

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


def _place(world, room: str, x: float, y: float) -> Position:
    pos = world.query_one(Player, Position)[2]
    pos.room, pos.x, pos.y = room, x, y
    return pos


# ════════════════════════════════════════════════════════════════════════
#  Exposure and meter rates
# ════════════════════════════════════════════════════════════════════════

def test_exposure_needs_risk_room_and_wizard_home():
    world = create_world()
    clock = world.res(GameClock)
    assert not exposed(world), "yard is safe"
    _place(world, "manor_gate", 70.0, 360.0)
    assert exposed(world)
    clock.minutes = 600.0
    assert not exposed(world), "wizard away"
    ok("Only risk rooms while the wizard is home are exposed")


def test_meter_rises_and_falls_at_their_rates():
    world = create_world(start_room="manor_gate")
    meter = world.res(DangerMeter)
    danger_system(world, 0.5)
    assert abs(meter.value - 7.0) < 1e-9
    _place(world, "yard", 145.0, 340.0)
    danger_system(world, 0.1)
    assert abs(meter.value - 5.0) < 1e-9
    danger_system(world, 1.0)
    assert meter.value == 0.0, "never below zero"
    ok("Rise 14%/s when exposed, fall 20%/s otherwise, floor at 0")


def test_visit_while_wizard_away_is_safe():
    world = create_world(start_room="tower")
    world.res(GameClock).minutes = 600.0
    meter = world.res(DangerMeter)
    for _ in range(100):
        tick_systems(world, 120)
    assert meter.value == 0.0
    assert world.query_one(Player, Position)[2].room == "tower"
    ok("Risk rooms are harmless during the safe window")


def test_meter_stays_in_bounds():
    world = create_world(start_room="manor_gate")
    meter = world.res(DangerMeter)
    for i in range(200):
        tick_systems(world, 120, (0, 0))
        assert 0.0 <= meter.value <= 100.0, meter.value
    ok("Meter always within [0, limit]")


def test_percent_and_text():
    world = create_world()
    meter = world.res(DangerMeter)
    assert danger_percent(world) == 0
    assert danger_text(world) == "Suspicion: Safe"
    meter.value = 42.4
    assert danger_percent(world) == 42
    assert danger_text(world) == "Suspicion: 42%"
    meter.value = 42.5
    assert danger_percent(world) == 43, "halves round up"
    meter.value = 0.4
    assert danger_percent(world) == 0
    ok("Percent rounding and HUD text")


# ════════════════════════════════════════════════════════════════════════
#  Scenario C: caught in the tower
# ════════════════════════════════════════════════════════════════════════

def test_caught_resets_progress_and_sends_player_home():
    world = create_world(start_room="tower")
    flags = world.res(StoryFlags)
    clock = world.res(GameClock)
    meter = world.res(DangerMeter)
    log = world.res(MessageLog)
    pos = world.query_one(Player, Position)[2]
    flags.gate_unlocked = True

    for _ in range(59):                     # 7.08 s → 99.12 %
        tick_systems(world, 120)
    assert pos.room == "tower"
    assert 99.0 < meter.value < 100.0

    tick_systems(world, 120)                # crosses 100 %
    assert meter.value == 0.0
    assert flags.gate_unlocked is False
    assert clock.day == 2
    assert minute_of_day(clock) == 390
    assert pos.room == "cottage"
    assert (pos.x, pos.y) == (474.0, 438.0)
    assert log.latest() == CAUGHT_MESSAGE
    ok("Full meter: gate re-locked, next day 06:30, back in the cottage")


def test_caught_keeps_inventory():
    world = create_world(start_room="manor_gate")
    inv = world.query_one(Player, Inventory)[2]
    inv.add("brass_key", "Brass Key")
    for _ in range(70):
        tick_systems(world, 120)
    assert world.query_one(Player, Position)[2].room == "cottage"
    assert inv.has("brass_key")
    ok("Capture costs the gate, not the items")


# ════════════════════════════════════════════════════════════════════════
#  Scenario E aftermath: won pins the meter
# ════════════════════════════════════════════════════════════════════════

def test_won_pins_meter_to_zero():
    world = create_world(start_room="tower")
    clock = world.res(GameClock)
    meter = world.res(DangerMeter)
    inv = world.query_one(Player, Inventory)[2]
    inv.add("moon_herb", "Moon Herb")
    inv.add("silver_sigil", "Silver Sigil")
    clock.minutes = 600.0
    _place(world, "tower", 480.0, 230.0)
    assert player_interact(world) == "book"
    assert world.res(StoryFlags).won

    clock.minutes = 450.0                    # wizard back home
    meter.value = 60.0
    tick_systems(world, 120)
    assert meter.value == 0.0
    for _ in range(100):
        tick_systems(world, 120)
    assert meter.value == 0.0
    assert world.query_one(Player, Position)[2].room == "tower"
    ok("After winning, the meter stays at 0 even in the tower")


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
