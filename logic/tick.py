"""logic/tick.py — System tick orchestration.

One call advances the whole simulation by one frame.  Order matters:

    clock → movement → room transitions → danger

so exits and suspicion see this frame's clock and position.

Usage::

    from logic.tick import tick_systems
    changed = tick_systems(world, delta_ms, move=(1, 0))
"""

from __future__ import annotations
from typing import TYPE_CHECKING

from core.constants import MAX_FRAME_MS
from core.tuning import get as _tun
from logic.clock import clock_system
from logic.movement import movement_system
from logic.rooms import room_transition_system
from logic.danger import danger_system

if TYPE_CHECKING:
    from core.ecs import World


def clamp_delta(delta_ms: float) -> float:
    """Clamp a frame delta to ``[0, max_frame_ms]`` and return seconds."""
    limit = _tun("movement", "max_frame_ms", MAX_FRAME_MS)
    return max(0.0, min(float(limit), float(delta_ms))) / 1000.0


def tick_systems(world: "World", delta_ms: float,
                 move: tuple[float, float] = (0, 0)) -> bool:
    """Run all gameplay systems for one frame.

    Parameters
    ----------
    world : World
        The ECS world.
    delta_ms : float
        Wall-clock milliseconds since the previous tick.  Negative or
        oversized values (window drags, breakpoints) are clamped.
    move : tuple
        Held movement intent, each axis in {-1, 0, 1}.

    Returns True when the clock crossed into a new time bucket.
    """
    dt = clamp_delta(delta_ms)
    bucket_changed = clock_system(world, dt)
    movement_system(world, move, dt)
    room_transition_system(world)
    danger_system(world, dt)
    return bucket_changed
