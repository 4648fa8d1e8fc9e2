"""components.spatial — Position, hitbox and facing.

All coordinates and dimensions are in view pixels (see core/constants.py).
"""

from __future__ import annotations
from dataclasses import dataclass
from core.constants import PLAYER_W, PLAYER_H


@dataclass
class Position:
    x: float = 0.0        # px, top-left corner
    y: float = 0.0        # px
    room: str = "yard"    # id of the room the entity stands in


@dataclass
class Hitbox:
    """Fixed collision size.  The world-space rect is ``(pos.x, pos.y, w, h)``."""
    w: float = PLAYER_W
    h: float = PLAYER_H


@dataclass
class Facing:
    """Which direction an entity faces.  Updated from movement intent.

    Values: 'right', 'left', 'up', 'down'
    Used by sprite rendering only.
    """
    direction: str = "down"
