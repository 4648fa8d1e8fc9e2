"""logic/interact.py — E-key interaction, inspect and inventory report.

Interactables carry a tagged effect: ``effect`` names a handler in the
fixed ``EFFECTS`` table and ``params`` are its arguments.  A handler is
``handler(world, params) -> list[str]``: it may change inventory and
story flags, and returns the lines to show.  Failed preconditions are
reported as a line of text, never as an exception.

Dispatch is synchronous: every change and message an effect makes is
applied before ``player_interact`` returns.
"""

from __future__ import annotations
from typing import Callable

from core.collision import inflate, overlaps
from core.constants import REACH_MARGIN
from core.rooms import Interactable
from core.tuning import get as _tun
from components import (
    Player, Position, Hitbox, Inventory, ItemRegistry, StoryFlags, MessageLog,
)
from logic.clock import npc_away_now
from logic.movement import player_rect
from logic.rooms import current_room


NOTHING_NEARBY = "Nothing useful nearby."


# ── Shared helpers ───────────────────────────────────────────────────

def _inventory(world) -> Inventory | None:
    res = world.query_one(Player, Inventory)
    return res[2] if res else None


def _label(world, item_id: str) -> str:
    registry = world.res(ItemRegistry)
    return registry.display_name(item_id) if registry else item_id


def give_item(world, item_id: str) -> tuple[bool, str]:
    """Add *item_id* to the player's inventory.

    Returns ``(added, message)``; re-acquiring a held item changes nothing.
    """
    inv = _inventory(world)
    label = _label(world, item_id)
    if inv is None:
        return False, f"You cannot carry {label}."
    if not inv.add(item_id, label):
        return False, f"You already have {label}."
    print(f"[INTERACT] picked up {item_id}")
    return True, f"Picked up: {label}."


def _requirements(params: dict) -> list[str]:
    req = params.get("requires", [])
    if isinstance(req, str):
        return [req] if req else []
    return list(req)


# ── Effect handlers ──────────────────────────────────────────────────

def effect_say(world, params: dict) -> list[str]:
    return [params.get("text", "Nothing happens.")]


def effect_take_item(world, params: dict) -> list[str]:
    """Pick up ``item``; optionally only while holding every ``requires`` item."""
    inv = _inventory(world)
    needed = _requirements(params)
    if needed and (inv is None or not inv.has_all(needed)):
        names = " and ".join(_label(world, i) for i in needed)
        return [params.get("missing", f"You need the {names} first.")]
    added, msg = give_item(world, params["item"])
    lines = [msg]
    if added and params.get("success"):
        lines.append(params["success"])
    return lines


def effect_read_note(world, params: dict) -> list[str]:
    added, msg = give_item(world, params.get("item", "island_note"))
    if not added:
        return [msg]
    flags = world.res(StoryFlags)
    if flags is not None:
        flags.read_note = True
    return [msg, *params.get("lines", [])]


def effect_unlock_gate(world, params: dict) -> list[str]:
    flags = world.res(StoryFlags)
    if flags is None:
        return ["The gate does not budge."]
    if flags.gate_unlocked:
        return ["The gate stands open. The tower path awaits."]
    inv = _inventory(world)
    key = params.get("item", "brass_key")
    if inv is None or not inv.has(key):
        return ["Locked tight. You need a key."]
    flags.gate_unlocked = True
    print("[INTERACT] gate unlocked")
    return [f"The {_label(world, key)} turns. The gate unlocks with a grinding groan."]


def effect_take_spellbook(world, params: dict) -> list[str]:
    """The win condition: ward items held, wizard away, book taken."""
    inv = _inventory(world)
    needed = _requirements(params)
    if needed and (inv is None or not inv.has_all(needed)):
        names = " and ".join(_label(world, i) for i in needed)
        return [f"A ward flares over the book. You need the {names}."]
    if not npc_away_now(world):
        return ["Footsteps echo below. Too dangerous while he is nearby."]
    added, msg = give_item(world, params.get("item", "spellbook"))
    if not added:
        return [msg]
    flags = world.res(StoryFlags)
    if flags is not None:
        flags.won = True
    print("[INTERACT] spellbook recovered, game won")
    return [msg, "You found the spellbook. Slip away before the dusk bells."]


EffectHandler = Callable[[object, dict], list]

EFFECTS: dict[str, EffectHandler] = {
    "say": effect_say,
    "take_item": effect_take_item,
    "read_note": effect_read_note,
    "unlock_gate": effect_unlock_gate,
    "take_spellbook": effect_take_spellbook,
}


def apply_effect(world, obj: Interactable) -> list[str]:
    """Run *obj*'s effect and return its lines (without logging them)."""
    handler = EFFECTS.get(obj.effect)
    if handler is None:
        print(f"[INTERACT] {obj.id}: no handler for effect {obj.effect!r}")
        return ["Nothing happens."]
    return handler(world, obj.params)


# ── Player actions ───────────────────────────────────────────────────

def nearby_interactable(world) -> Interactable | None:
    """First interactable (declaration order) touching the reach probe."""
    res = world.query_one(Player, Position, Hitbox)
    room = current_room(world)
    if not res or room is None:
        return None
    _, _, pos, box = res
    probe = inflate(player_rect(pos, box), _tun("interact", "reach", REACH_MARGIN))
    for obj in room.interactables:
        if overlaps(probe, obj.rect):
            return obj
    return None


def _log_all(world, lines: list[str]) -> None:
    log = world.res(MessageLog)
    if log is None:
        return
    for line in lines:
        log.push(line)


def player_interact(world) -> str | None:
    """Player presses E.  Returns the id of the interactable used, or None."""
    obj = nearby_interactable(world)
    if obj is None:
        _log_all(world, [NOTHING_NEARBY])
        return None
    _log_all(world, apply_effect(world, obj))
    return obj.id


def inspect_area(world) -> str:
    """Player presses Space: describe the current room."""
    room = current_room(world)
    line = room.inspect if room and room.inspect else "You sense old magic nearby."
    _log_all(world, [line])
    return line


def report_inventory(world) -> str:
    """Player presses I: list held items in pickup order."""
    inv = _inventory(world)
    names = ", ".join(inv.items.values()) if inv and inv.items else "nothing"
    line = f"Inventory: {names}."
    _log_all(world, [line])
    return line
