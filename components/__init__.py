"""components — ECS component dataclasses, organised by domain.

Submodules
----------
spatial        Position, Hitbox, Facing
rpg            Inventory
resources      GameClock, DangerMeter, StoryFlags, ExitLatch, Player
message_log    MessageLog
item_registry  ItemRegistry

All public names are re-exported here so systems can do
``from components import Position``.
"""

# ── Spatial ──────────────────────────────────────────────────────────
from components.spatial import Position, Hitbox, Facing

# ── RPG ──────────────────────────────────────────────────────────────
from components.rpg import Inventory

# ── World resources / singletons ─────────────────────────────────────
from components.resources import GameClock, DangerMeter, StoryFlags, ExitLatch, Player
from components.message_log import MessageLog

# ── Registries ───────────────────────────────────────────────────────
from components.item_registry import ItemRegistry

__all__ = [
    # spatial
    "Position", "Hitbox", "Facing",
    # rpg
    "Inventory",
    # resources
    "GameClock", "DangerMeter", "StoryFlags", "ExitLatch", "Player",
    "MessageLog",
    # registries
    "ItemRegistry",
]
