"""
core/scene.py — Scene interface

A Scene is one screen of the game (the room view is the only one so far).
The App keeps a stack and only the top scene receives events, updates
and draws; anything underneath is paused.

    class RoomScene(Scene):
        def handle_event(self, event, app):
            ...                     # raw pygame event
        def update(self, delta_ms, app):
            ...                     # wall-clock ms since the last frame
        def draw(self, surface, app):
            ...                     # paint the 960×540 design surface

Scenes never loop themselves.  ``update`` hands ``delta_ms`` straight to
``logic.tick.tick_systems``, which does its own clamping.
"""

from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import pygame
    from core.app import App


class Scene:
    def on_enter(self, app: App):
        """Called when this scene becomes the top of the stack."""

    def on_exit(self, app: App):
        """Called when this scene is popped or covered."""

    def handle_event(self, event: pygame.event.Event, app: App):
        """Process a single pygame event."""

    def update(self, delta_ms: float, app: App):
        """Advance the game by *delta_ms* wall-clock milliseconds."""

    def draw(self, surface: pygame.Surface, app: App):
        """Draw the scene onto the virtual surface."""
