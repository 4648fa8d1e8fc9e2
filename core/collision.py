"""core/collision.py — Low-level axis-aligned rectangle primitives.

These live in ``core/`` (not ``logic/``) because both the content layer
(room spawn checks) and gameplay systems (movement, exits, interaction
probes) need them.  Keeping them here prevents a circular dependency.

Everything is pure: no world access, no side effects.
"""

from __future__ import annotations
from dataclasses import dataclass
from core.constants import VIEW_W, VIEW_H


@dataclass(frozen=True)
class Rect:
    """Axis-aligned box.  ``(x, y)`` is the top-left corner, in px."""
    x: float
    y: float
    w: float
    h: float

    @property
    def right(self) -> float:
        return self.x + self.w

    @property
    def bottom(self) -> float:
        return self.y + self.h


VIEW_RECT = Rect(0, 0, VIEW_W, VIEW_H)


def overlaps(a: Rect, b: Rect) -> bool:
    """True iff *a* and *b* intersect on both axes.

    Strict comparisons: boxes that merely touch along an edge do not
    overlap, so a player flush against a wall can still slide along it.
    """
    return a.x < b.right and a.right > b.x and a.y < b.bottom and a.bottom > b.y


def contains(outer: Rect, inner: Rect) -> bool:
    """True iff *inner* lies entirely within *outer* (edges inclusive)."""
    return (inner.x >= outer.x and inner.y >= outer.y
            and inner.right <= outer.right and inner.bottom <= outer.bottom)


def inflate(rect: Rect, margin: float) -> Rect:
    """Grow *rect* by *margin* on every side."""
    return Rect(rect.x - margin, rect.y - margin,
                rect.w + margin * 2, rect.h + margin * 2)


def rect_blocked(rect: Rect, solids, bounds: Rect = VIEW_RECT) -> bool:
    """Return True if *rect* leaves *bounds* or overlaps any solid."""
    if not contains(bounds, rect):
        return True
    for solid in solids:
        if overlaps(rect, solid):
            return True
    return False
