"""logic/quests.py — Objective text derived from story progress.

Nothing here is stored: the objective is recomputed from flags and
inventory whenever the HUD asks for it.
"""

from __future__ import annotations
from components import Player, Inventory, StoryFlags


def objective_text(world) -> str:
    flags = world.res(StoryFlags) or StoryFlags()
    res = world.query_one(Player, Inventory)
    inv = res[2] if res else Inventory()

    if flags.won:
        return "You escaped with the spellbook."
    if not inv.has("island_note"):
        return "Search the cottage for clues."
    if not inv.has("brass_key"):
        return "Find where the sea kisses stone."
    if not flags.gate_unlocked:
        return "Unlock the manor gate with the Brass Key."
    if not inv.has_all(("moon_herb", "silver_sigil")):
        return "Find the Moon Herb and Silver Sigil to break the tower ward."
    if not inv.has("spellbook"):
        return "Enter the tower during the wizard's absence and recover the spellbook."
    return "Find a way into the tower."
