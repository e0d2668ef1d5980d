"""Plain 2-D float vector used at the boundary of the heading model."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Vec2:
    """Immutable 2D vector."""

    x: float
    y: float

    ZERO: ClassVar[Vec2]

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vec2:
        return self * scalar

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def normalize_or_zero(self) -> Vec2:
        """Return the unit vector in this direction, or ``Vec2.ZERO``.

        Falls back to zero whenever the reciprocal length is not a finite
        positive number (zero, subnormal-overflow, infinite or NaN input).
        """
        length = self.length()
        if not length > 0.0:
            return Vec2.ZERO
        recip = 1.0 / length
        if not (math.isfinite(recip) and recip > 0.0):
            return Vec2.ZERO
        return self * recip

    def extend(self, z: float = 0.0) -> tuple[float, float, float]:
        """Lift into 3D as an ``(x, y, z)`` tuple."""
        return (self.x, self.y, z)


Vec2.ZERO = Vec2(0.0, 0.0)
