"""Planar entity position and the headings between positions."""

from __future__ import annotations

from dataclasses import dataclass

from heading2d.domain.angle import AngleValue
from heading2d.domain.heading import VectorHeading
from heading2d.domain.vector import Vec2


@dataclass(frozen=True)
class Position:
    """An (x, y) location in the plane."""

    x: float = 0.0
    y: float = 0.0

    def as_vec2(self) -> Vec2:
        return Vec2(self.x, self.y)

    def offset_to(self, other: Position) -> Vec2:
        return other.as_vec2() - self.as_vec2()

    def rotation_to(self, other: Position) -> AngleValue:
        """Heading angle from here to *other*.

        Raises :exc:`DegenerateHeading` when the two positions coincide.
        """
        return AngleValue.from_vec2(self.offset_to(other))

    def direction_to(self, other: Position) -> VectorHeading:
        """Heading vector from here to *other*; NEUTRAL when they coincide."""
        return VectorHeading(self.offset_to(other))
