"""
core/ecs.py — Entity-Component-System

The World is the one aggregate every system reads and writes.  A fresh
World per game (and per test) means no hidden module-level state.

Entities are ints.  Components are dataclasses, stored by type.
Singletons (clock, flags, danger meter, message log, room graph) are
*resources*: one instance per type, not tied to an entity.

    w = World()
    e = w.spawn()
    w.add(e, Position(145.0, 388.0, room="yard"))
    w.set_res(GameClock())

    for eid, pos, box in w.query(Position, Hitbox):
        ...
"""

from __future__ import annotations
from typing import Any, Iterator

_RES_KEY = -1


class World:
    def __init__(self):
        self._next_id = 0
        self._stores: dict[type, dict[int, Any]] = {}

    # -- Entities --

    def spawn(self) -> int:
        self._next_id += 1
        return self._next_id

    # -- Components --

    def add(self, eid: int, comp: Any):
        self._stores.setdefault(type(comp), {})[eid] = comp

    def get(self, eid: int, comp_type: type) -> Any | None:
        return self._stores.get(comp_type, {}).get(eid)

    # -- Queries --

    def query(self, *types: type) -> Iterator[tuple]:
        """Yield (eid, comp1, comp2, ...) for entities that have ALL types."""
        if not types:
            return
        buckets = [self._stores.get(t, {}) for t in types]
        smallest = min(buckets, key=len)
        for eid in list(smallest):
            if eid == _RES_KEY:
                continue
            if all(eid in b for b in buckets):
                yield (eid, *(b[eid] for b in buckets))

    def query_one(self, *types: type) -> tuple | None:
        """Return first match or None."""
        for result in self.query(*types):
            return result
        return None

    # -- Resources (singletons, not tied to entities) --

    def set_res(self, resource: Any):
        self._stores.setdefault(type(resource), {})[_RES_KEY] = resource

    def res(self, res_type: type) -> Any | None:
        return self._stores.get(res_type, {}).get(_RES_KEY)
