"""logic/input_manager.py — Intent-based input layer.

Sits between raw pygame events and game actions.  The scene feeds in
raw events; the manager maps them to *intents*.  Gameplay code reads
the intents and never touches raw keycodes.

Usage (in world_scene):

    self.input = InputManager()
    # each frame:
    self.input.begin_frame()
    for event in events:
        self.input.feed(event)
    self.input.end_frame()          # captures held-key state

    if self.input.just("interact"): # discrete press
        ...
    move = self.input.movement()    # → (dx, dy), each in {-1, 0, 1}
"""

from __future__ import annotations
import pygame


# ── Intent names ────────────────────────────────────────────────────
# Held:      move_up  move_down  move_left  move_right
# Pressed:   interact  inspect  inventory  reload_tuning


# ── Default key bindings ────────────────────────────────────────────

# Each binding is  (pygame key constant, modifier mask or 0)

_GAMEPLAY_BINDS: dict[str, list[tuple[int, int]]] = {
    # Movement  (held — continuous)
    "move_up":       [(pygame.K_w, 0), (pygame.K_UP, 0)],
    "move_down":     [(pygame.K_s, 0), (pygame.K_DOWN, 0)],
    "move_left":     [(pygame.K_a, 0), (pygame.K_LEFT, 0)],
    "move_right":    [(pygame.K_d, 0), (pygame.K_RIGHT, 0)],
    # Actions  (press — discrete)
    "interact":      [(pygame.K_e, 0)],
    "inspect":       [(pygame.K_SPACE, 0)],
    "inventory":     [(pygame.K_i, 0)],
    # Debug
    "reload_tuning": [(pygame.K_F5, 0)],
}


# ── InputManager ────────────────────────────────────────────────────

class InputManager:
    """Key-binding mapper.

    Call ``begin_frame()`` before processing events,
    ``feed(event)`` for each pygame event,
    ``end_frame()`` after all events.

    Then use ``just(intent)`` for discrete presses and
    ``held(intent)`` for continuous holds.
    """

    def __init__(self, binds: dict[str, list[tuple[int, int]]] | None = None):
        self.binds = binds if binds is not None else _GAMEPLAY_BINDS
        # Intents pressed *this frame* (rising edge)
        self._pressed: set[str] = set()
        # Intents currently held (key is down right now)
        self._held: set[str] = set()

    # ── frame lifecycle ─────────────────────────────────────────

    def begin_frame(self):
        """Call at the start of each frame before feeding events."""
        self._pressed.clear()

    def feed(self, event: pygame.event.Event):
        """Feed a raw pygame event and map it to intents."""
        if event.type != pygame.KEYDOWN:
            return
        mods = pygame.key.get_mods()
        for intent, key_list in self.binds.items():
            for key, req_mod in key_list:
                if event.key == key and (req_mod == 0 or (mods & req_mod)):
                    self._pressed.add(intent)
                    break

    def end_frame(self):
        """Snapshot held-key state for continuous intents (movement)."""
        self._held.clear()
        keys = pygame.key.get_pressed()
        mods = pygame.key.get_mods()
        for intent, key_list in self.binds.items():
            for key, req_mod in key_list:
                if keys[key] and (req_mod == 0 or (mods & req_mod)):
                    self._held.add(intent)
                    break

    # ── queries ─────────────────────────────────────────────────

    def just(self, intent: str) -> bool:
        """True if the intent was triggered this frame (rising edge)."""
        return intent in self._pressed

    def held(self, intent: str) -> bool:
        """True if the intent is continuously held down."""
        return intent in self._held

    def movement(self) -> tuple[int, int]:
        """Raw (dx, dy) from held keys.  Opposite keys cancel out.

        Diagonal scaling happens in ``logic.movement``, not here.
        """
        dx = int(self.held("move_right")) - int(self.held("move_left"))
        dy = int(self.held("move_down")) - int(self.held("move_up"))
        return dx, dy
