"""core/rooms.py — Static room graph: rooms, exits, interactables.

Rooms are loaded once from ``data/rooms.toml`` and never mutated.  The
graph is stored on the World as the ``RoomGraph`` resource; exits are
its directed edges (not necessarily symmetric).

File layout::

    [[room]]
    id = "yard"
    name = "Cottage Yard"
    spawn = [145, 340]
    high_risk = false
    solids = [[40, 92, 250, 160], ...]

    [[room.exit]]
    rect = [760, 58, 150, 46]
    target = "manor_gate"
    spawn = [70, 360]
    requires = "gate_unlocked"     # optional lock guard (story flag)
    blocked = "The iron gate blocks your path."   # shown while locked
    message = "You pass through the stone gate."

    [[room.interactable]]
    id = "hen"
    label = "Hen"
    rect = [158, 314, 32, 26]
    effect = "say"
    params = { text = "Hen: cluck cluck." }
"""
from __future__ import annotations
try:
    import tomllib
except ModuleNotFoundError:  # Python < 3.11
    import tomli as tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Iterable

from core.collision import Rect, VIEW_RECT, overlaps, rect_blocked
from core.constants import PLAYER_W, PLAYER_H


ROOMS_PATH = Path(__file__).resolve().parent.parent / "data" / "rooms.toml"


@dataclass(frozen=True)
class Exit:
    """Directed, possibly guarded link to another room."""
    rect: Rect
    target: str
    spawn: tuple[float, float]
    message: str = ""             # shown on every transition
    requires: str = ""            # story flag that must be set; "" = unguarded
    blocked: str = ""             # shown once per overlap while locked

    @property
    def guarded(self) -> bool:
        return bool(self.requires)


@dataclass(frozen=True)
class Interactable:
    """Trigger zone plus a tagged effect (handler name + arguments)."""
    id: str
    label: str
    rect: Rect
    effect: str = "say"
    params: dict = field(default_factory=dict, hash=False, compare=False)


@dataclass(frozen=True)
class Room:
    id: str
    name: str
    spawn: tuple[float, float]
    solids: tuple[Rect, ...] = ()
    exits: tuple[Exit, ...] = ()
    interactables: tuple[Interactable, ...] = ()
    high_risk: bool = False
    scene: str = ""               # renderer hook; defaults to the room id
    inspect: str = ""             # flavour line for the inspect action


@dataclass
class RoomGraph:
    """World resource: every room, indexed by id."""
    rooms: dict[str, Room] = field(default_factory=dict)

    def get(self, room_id: str) -> Room | None:
        return self.rooms.get(room_id)

    def __getitem__(self, room_id: str) -> Room:
        return self.rooms[room_id]

    def __contains__(self, room_id: str) -> bool:
        return room_id in self.rooms

    def __len__(self) -> int:
        return len(self.rooms)


# ── Loading ──────────────────────────────────────────────────────────

def _rect(raw) -> Rect:
    x, y, w, h = raw
    return Rect(float(x), float(y), float(w), float(h))


def _point(raw) -> tuple[float, float]:
    return float(raw[0]), float(raw[1])


def parse_room(raw: dict, effect_kinds: Iterable[str] | None = None) -> Room:
    """Build a Room from one ``[[room]]`` table.

    Missing required keys raise ``KeyError``.  When *effect_kinds* is
    given, an interactable naming any other effect raises ``ValueError``.
    """
    known = set(effect_kinds) if effect_kinds is not None else None
    exits = tuple(
        Exit(
            rect=_rect(e["rect"]),
            target=e["target"],
            spawn=_point(e["spawn"]),
            message=e.get("message", ""),
            requires=e.get("requires", ""),
            blocked=e.get("blocked", e.get("message", "")),
        )
        for e in raw.get("exit", [])
    )
    interactables = []
    for it in raw.get("interactable", []):
        effect = it.get("effect", "say")
        if known is not None and effect not in known:
            raise ValueError(
                f"room {raw['id']!r}: interactable {it['id']!r} "
                f"uses unknown effect {effect!r}")
        interactables.append(Interactable(
            id=it["id"],
            label=it.get("label", it["id"]),
            rect=_rect(it["rect"]),
            effect=effect,
            params=dict(it.get("params", {})),
        ))
    return Room(
        id=raw["id"],
        name=raw.get("name", raw["id"]),
        spawn=_point(raw["spawn"]),
        solids=tuple(_rect(s) for s in raw.get("solids", [])),
        exits=exits,
        interactables=tuple(interactables),
        high_risk=bool(raw.get("high_risk", False)),
        scene=raw.get("scene", raw["id"]),
        inspect=raw.get("inspect", ""),
    )


def load_rooms(path: str | Path | None = None,
               effect_kinds: Iterable[str] | None = None) -> RoomGraph:
    """Load the room graph from ``data/rooms.toml`` (or *path*)."""
    path = ROOMS_PATH if path is None else Path(path)
    with open(path, "rb") as f:
        data = tomllib.load(f)
    graph = RoomGraph()
    for raw in data.get("room", []):
        room = parse_room(raw, effect_kinds)
        graph.rooms[room.id] = room
    print(f"[CONTENT] loaded {len(graph)} rooms from {path}")
    return graph


# ── Content checks (authoring aid, never run inside the tick) ───────

def check_rooms(graph: RoomGraph, flag_names: Iterable[str] = ()) -> list[str]:
    """Return human-readable warnings about suspicious room content.

    Flags exits into unknown rooms, spawn points that start the player
    inside a solid or off-view, and lock guards naming unknown flags.
    """
    flags = set(flag_names)
    warnings: list[str] = []

    def _spawn_ok(room: Room, point: tuple[float, float]) -> bool:
        rect = Rect(point[0], point[1], PLAYER_W, PLAYER_H)
        return not rect_blocked(rect, room.solids, VIEW_RECT)

    def _exit_under(room: Room, point: tuple[float, float]) -> Exit | None:
        rect = Rect(point[0], point[1], PLAYER_W, PLAYER_H)
        for ex in room.exits:
            if overlaps(rect, ex.rect):
                return ex
        return None

    for room in graph.rooms.values():
        if not _spawn_ok(room, room.spawn):
            warnings.append(f"{room.id}: room spawn {room.spawn} is blocked")
        for ex in room.exits:
            target = graph.get(ex.target)
            if target is None:
                warnings.append(f"{room.id}: exit targets unknown room {ex.target!r}")
                continue
            if not _spawn_ok(target, ex.spawn):
                warnings.append(
                    f"{room.id}: exit to {ex.target} lands on blocked spawn {ex.spawn}")
            bounce = _exit_under(target, ex.spawn)
            if bounce is not None:
                warnings.append(
                    f"{room.id}: exit to {ex.target} lands inside "
                    f"{ex.target}'s exit to {bounce.target}")
            if ex.requires and flags and ex.requires not in flags:
                warnings.append(
                    f"{room.id}: exit to {ex.target} guarded by unknown flag {ex.requires!r}")
    return warnings


def flag_names(flags_type) -> list[str]:
    """Field names of a flags dataclass, for ``check_rooms``."""
    return [f.name for f in fields(flags_type)]
