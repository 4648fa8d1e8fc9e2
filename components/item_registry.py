"""components.item_registry — Item label lookup table."""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass
class ItemRegistry:
    """Lookup table mapping item IDs → display data.

    Populated by ``core.bootstrap.load_items`` from ``data/items.toml``.
    Systems and UI can do::

        registry = world.res(ItemRegistry)
        name = registry.display_name("brass_key")
    """
    _entries: dict = field(default_factory=dict)

    def register(self, item_id: str, name: str, **extra):
        self._entries[item_id] = {"name": name, **extra}

    def display_name(self, item_id: str) -> str:
        """Human-readable name for an item ID, falling back to the ID itself."""
        entry = self._entries.get(item_id)
        return entry["name"] if entry else item_id

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)
