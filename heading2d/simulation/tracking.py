"""Tick-based change tracking for entity fields.

Every write stamps the field with a fresh tick from a shared
:class:`ChangeClock`. An :class:`Observer` remembers the clock tick at which it
last finished; a field counts as changed for that observer when its stamp is
newer. Because an observer's own writes are stamped before it finishes, it
never sees them on its next run, while any other observer does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class ChangeClock:
    """Monotonic tick source shared by all tracked fields of one world."""

    def __init__(self) -> None:
        self.tick = 0

    def advance(self) -> int:
        self.tick += 1
        return self.tick


class Tracked(Generic[T]):
    """A value cell that records the tick of its most recent write.

    Creation counts as a write, so newly spawned fields are seen as changed.
    """

    __slots__ = ("_clock", "_value", "changed_tick")

    def __init__(self, value: T, clock: ChangeClock) -> None:
        self._clock = clock
        self._value = value
        self.changed_tick = clock.advance()

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def set(self, value: T) -> None:
        """Store *value* and mark the field changed, even if equal."""
        self._value = value
        self.changed_tick = self._clock.advance()

    def is_changed(self, since: int) -> bool:
        return self.changed_tick > since

    def __repr__(self) -> str:
        return f"Tracked({self._value!r}, changed_tick={self.changed_tick})"


@dataclass
class Observer:
    """Change-detection cursor for one reconciliation phase."""

    clock: ChangeClock
    last_run: int = 0

    def is_changed(self, field: Tracked[object] | None) -> bool:
        return field is not None and field.is_changed(self.last_run)

    def finish(self) -> None:
        """Mark everything written so far as seen."""
        self.last_run = self.clock.tick
