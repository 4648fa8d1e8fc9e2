"""core/bootstrap.py — Game bootstrap helpers.

Extracted from main.py to keep the entry point clean and readable.
Handles:
  - Item label loading from items.toml
  - Room graph loading and content checks
  - Player creation at the starting room's spawn
  - World resources (clock, meter, flags, log, latch)

``create_world()`` is also what every test calls for a fresh game.
"""

from __future__ import annotations

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib
from pathlib import Path

from components import (
    Position, Hitbox, Facing, Player, Inventory,
    GameClock, DangerMeter, StoryFlags, ExitLatch, MessageLog, ItemRegistry,
)
from core.constants import (
    PLAYER_W, PLAYER_H, PLAYER_SPEED, START_MINUTES, MESSAGE_LOG_SIZE,
)
from core.ecs import World
from core.rooms import RoomGraph, load_rooms, check_rooms, flag_names
from core.tuning import get as _tun
from logic.interact import EFFECTS
from logic.rooms import find_safe_spawn


DATA_DIR = Path(__file__).resolve().parent.parent / "data"

INTRO_LINES = (
    "Night falls over Llewdor. You must reach the wizard's tower.",
    "Manannan leaves at ninth bell and returns at dusk.",
)


# ── Data loading ─────────────────────────────────────────────────────

def load_items(path: str | Path | None = None) -> ItemRegistry:
    """Read ``[item_id] name = "..."`` tables into an ItemRegistry."""
    path = DATA_DIR / "items.toml" if path is None else Path(path)
    registry = ItemRegistry()
    if not path.exists():
        print(f"[CONTENT] {path} not found — item ids used as labels")
        return registry

    with open(path, "rb") as f:
        data = tomllib.load(f)

    for item_id, entry in data.items():
        if not isinstance(entry, dict):
            continue
        extra = {k: v for k, v in entry.items() if k != "name"}
        registry.register(item_id, entry.get("name", item_id), **extra)
    print(f"[CONTENT] loaded {len(registry)} items")
    return registry


def load_content(rooms_path: str | Path | None = None,
                 items_path: str | Path | None = None
                 ) -> tuple[RoomGraph, ItemRegistry]:
    """Load rooms and items, printing content warnings without aborting."""
    graph = load_rooms(rooms_path or DATA_DIR / "rooms.toml",
                       effect_kinds=EFFECTS.keys())
    items = load_items(items_path)
    for warning in check_rooms(graph, flag_names(StoryFlags)):
        print(f"[CONTENT] warning: {warning}")
    return graph, items


# ── World construction ───────────────────────────────────────────────

def create_player(world: World, graph: RoomGraph, start_room: str) -> int:
    """Spawn the player entity at *start_room*'s spawn point."""
    room = graph[start_room]
    w, h = PLAYER_W, PLAYER_H
    x, y = find_safe_spawn(room, room.spawn[0], room.spawn[1], w, h)

    player = world.spawn()
    world.add(player, Position(x=x, y=y, room=start_room))
    world.add(player, Hitbox(w=w, h=h))
    world.add(player, Facing(direction="down"))
    world.add(player, Player(speed=_tun("movement", "speed", PLAYER_SPEED)))
    world.add(player, Inventory())
    return player


def setup_world_resources(world: World, graph: RoomGraph,
                          items: ItemRegistry) -> None:
    world.set_res(graph)
    world.set_res(items)
    world.set_res(GameClock(day=1, minutes=float(START_MINUTES)))
    world.set_res(DangerMeter())
    world.set_res(StoryFlags())
    world.set_res(ExitLatch())

    log = MessageLog(max_lines=int(_tun("messages", "log_size", MESSAGE_LOG_SIZE)))
    for line in INTRO_LINES:
        log.push(line)
    world.set_res(log)


def create_world(graph: RoomGraph | None = None,
                 items: ItemRegistry | None = None,
                 start_room: str = "yard") -> World:
    """Build a fresh game: Day 1, 07:30, empty inventory, player in the yard.

    Content not passed in is loaded from ``data/``.
    """
    if graph is None or items is None:
        loaded_graph, loaded_items = load_content()
        graph = loaded_graph if graph is None else graph
        items = loaded_items if items is None else items
    if start_room not in graph:
        raise KeyError(f"unknown start room {start_room!r}")

    world = World()
    setup_world_resources(world, graph, items)
    create_player(world, graph, start_room)
    return world
