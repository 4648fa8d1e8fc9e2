"""
scenes/world_scene.py — Single-screen room view

Draws the current room full-screen with the player on top.
WASD / arrows to move, E interact, Space inspect, I inventory.
F5 hot-reloads data/tuning.toml.

Each frame: gather input → dispatch edge intents → tick_systems → draw.
"""

from __future__ import annotations
import pygame
from core.scene import Scene
from core.app import App
from core import tuning as tuning_mod
from components import Player, Hitbox
from logic.input_manager import InputManager
from logic.interact import player_interact, inspect_area, report_inventory
from logic.rooms import current_room
from logic.status import time_tint
from logic.tick import tick_systems
from scenes.world_draw import (
    paint_backdrop, draw_room_props, draw_player, draw_time_overlay,
    draw_interaction_hint, draw_hud, draw_message_log, draw_win_banner,
)


class WorldScene(Scene):
    def __init__(self):
        # Intent-based input system
        self.input = InputManager()
        # scene key → cached static backdrop
        self._backdrops: dict[str, pygame.Surface] = {}
        # time-of-day washes, refreshed on a new clock bucket
        self._tint: list | None = None

    # ── event handler ────────────────────────────────────────────────

    def handle_event(self, event: pygame.event.Event, app: App):
        self.input.feed(event)

    # ── update ───────────────────────────────────────────────────────

    def update(self, delta_ms: float, app: App):
        self.input.end_frame()
        world = app.world

        # Edge intents run before the tick, matching key-press order
        if self.input.just("interact"):
            player_interact(world)
        if self.input.just("inspect"):
            inspect_area(world)
        if self.input.just("inventory"):
            report_inventory(world)
        if self.input.just("reload_tuning"):
            tuning_mod.reload()

        if tick_systems(world, delta_ms, self.input.movement()) or self._tint is None:
            self._tint = time_tint(world)
        self.input.begin_frame()

    # ── draw ─────────────────────────────────────────────────────────

    def _backdrop(self, key: str) -> pygame.Surface:
        if key not in self._backdrops:
            self._backdrops[key] = paint_backdrop(key)
        return self._backdrops[key]

    def draw(self, surface: pygame.Surface, app: App):
        world = app.world
        room = current_room(world)
        key = room.scene if room else ""
        surface.blit(self._backdrop(key), (0, 0))
        draw_room_props(surface, world, key)
        draw_time_overlay(surface, self._tint or [])

        res = world.query_one(Player, Hitbox)
        if res:
            box = res[2]
            draw_player(surface, world, box.w, box.h)

        draw_interaction_hint(surface, app)
        draw_hud(surface, app)
        draw_message_log(surface, app)
        draw_win_banner(surface, app)
