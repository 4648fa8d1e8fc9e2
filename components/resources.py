"""components.resources — World-level singletons (not per-entity)."""

from __future__ import annotations
from dataclasses import dataclass
from core.constants import START_MINUTES, PLAYER_SPEED


@dataclass
class GameClock:
    """Day counter plus minutes into the current day.

    ``minutes`` is real-valued and always in ``[0, 1440)``.
    ``left_day`` / ``return_day`` record the last day on which the
    wizard's departure / return bell rang; 0 means "not yet today".
    ``last_bucket`` is the most recent 15-minute bucket seen, used only
    to throttle HUD refreshes (derived, never authoritative).
    """
    day: int = 1
    minutes: float = START_MINUTES
    left_day: int = 0
    return_day: int = 0
    last_bucket: int = -1


@dataclass
class DangerMeter:
    """Suspicion accumulated while exposed in a risk room (0 … limit)."""
    value: float = 0.0


@dataclass
class StoryFlags:
    """Story progress booleans."""
    read_note: bool = False
    gate_unlocked: bool = False
    won: bool = False

    def is_set(self, name: str) -> bool:
        """Look a flag up by name.  Unknown names read as unset."""
        return bool(getattr(self, name, False))


@dataclass
class ExitLatch:
    """Locked exit currently suppressing its blocking message.

    Holds ``"<room>:<target>"`` while the player keeps overlapping the
    same locked exit, and ``""`` once no exit overlaps.
    """
    blocked: str = ""


@dataclass
class Player:
    """Marks the player entity."""
    speed: float = PLAYER_SPEED   # px per second
    step: float = 0.0             # walk-cycle phase, monotonic
