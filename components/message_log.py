"""components.message_log — Player-facing event log.

A bounded resource holding the most recent lines written by the clock,
room transitions, the danger meter and interactions.  The HUD reads it;
nothing in the simulation ever reads it back.

Usage:
    log = world.res(MessageLog)
    log.push("You enter the cottage.")
    log.recent(5)       # newest first
"""

from __future__ import annotations
from dataclasses import dataclass, field
from core.constants import MESSAGE_LOG_SIZE


@dataclass
class MessageLog:
    """Most-recent-N message lines, oldest first in ``lines``."""

    lines: list[str] = field(default_factory=list)
    max_lines: int = MESSAGE_LOG_SIZE
    total: int = 0          # lines ever pushed, including trimmed ones

    def push(self, text: str) -> None:
        self.lines.append(text)
        self.total += 1
        if len(self.lines) > self.max_lines:
            self.lines = self.lines[-self.max_lines:]

    def recent(self, n: int | None = None) -> list[str]:
        """Return up to *n* lines, newest first (all of them by default)."""
        newest_first = self.lines[::-1]
        return newest_first if n is None else newest_first[:n]

    def latest(self) -> str:
        return self.lines[-1] if self.lines else ""

    def count(self, text: str) -> int:
        """How many retained lines equal *text*."""
        return sum(1 for line in self.lines if line == text)
