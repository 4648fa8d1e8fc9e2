"""components.rpg — The player's inventory."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class Inventory:
    """Set of held item IDs.

    ``items`` maps item ID → display label captured at pickup.  Dict
    insertion order is the order items were found, which only matters
    to the HUD; gameplay checks are membership tests.
    """
    items: dict[str, str] = field(default_factory=dict)

    def has(self, item_id: str) -> bool:
        return item_id in self.items

    def has_all(self, item_ids) -> bool:
        return all(i in self.items for i in item_ids)

    def add(self, item_id: str, label: str) -> bool:
        """Insert *item_id*.  Returns False (no change) if already held."""
        if item_id in self.items:
            return False
        self.items[item_id] = label
        return True
