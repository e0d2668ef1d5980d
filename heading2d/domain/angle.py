"""Discretized heading angle stored in wrapped tenths of a degree.

Angles are measured clockwise from north (the +y axis). Storage is an exact
integer in ``[0, FULL_CIRCLE)``, so repeated addition and negation never drift.

``distance`` is the straight absolute difference of the two stored values, not
the shortest arc around the circle: ``distance(10 deg, 350 deg)`` is 340 deg.
``rotation_direction`` and partition snapping are defined relative to it.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from heading2d.config.constants import (
    DECI_DEGREES_PER_DEGREE,
    DEGENERATE_EPSILON,
    FULL_CIRCLE,
    HALF_CIRCLE,
)

if TYPE_CHECKING:
    from heading2d.domain.vector import Vec2


class DegenerateHeading(ValueError):
    """Input had near-zero magnitude and therefore no defined planar angle."""


class RotationDirection(Enum):
    """Sense of travel between two angles."""

    CLOCKWISE = "clockwise"
    COUNTERCLOCKWISE = "counterclockwise"


@dataclass(frozen=True, order=True)
class AngleValue:
    """A heading in tenths of a degree, clockwise from north.

    Any integer is accepted and wrapped into ``[0, FULL_CIRCLE)``.
    """

    deci_degrees: int

    FULL_CIRCLE: ClassVar[int] = FULL_CIRCLE

    NORTH: ClassVar[AngleValue]
    NORTHEAST: ClassVar[AngleValue]
    EAST: ClassVar[AngleValue]
    SOUTHEAST: ClassVar[AngleValue]
    SOUTH: ClassVar[AngleValue]
    SOUTHWEST: ClassVar[AngleValue]
    WEST: ClassVar[AngleValue]
    NORTHWEST: ClassVar[AngleValue]

    def __post_init__(self) -> None:
        raw = operator.index(self.deci_degrees)
        object.__setattr__(self, "deci_degrees", raw % FULL_CIRCLE)

    # -- arithmetic ---------------------------------------------------------

    def __add__(self, other: AngleValue) -> AngleValue:
        return AngleValue(self.deci_degrees + other.deci_degrees)

    def __sub__(self, other: AngleValue) -> AngleValue:
        if self.deci_degrees >= other.deci_degrees:
            return AngleValue(self.deci_degrees - other.deci_degrees)
        return AngleValue(self.deci_degrees + FULL_CIRCLE - other.deci_degrees)

    def __neg__(self) -> AngleValue:
        return AngleValue(FULL_CIRCLE - self.deci_degrees)

    def __mul__(self, factor: float) -> AngleValue:
        # Goes through float degrees: not exact under repeated scaling.
        return AngleValue.from_degrees(self.into_degrees() * factor)

    def __rmul__(self, factor: float) -> AngleValue:
        return self * factor

    def distance(self, other: AngleValue) -> AngleValue:
        """Return ``|self - other|`` of the stored values as an AngleValue."""
        return AngleValue(abs(self.deci_degrees - other.deci_degrees))

    def rotation_direction(self, target: AngleValue) -> RotationDirection:
        """Direction to turn towards *target*.

        Clockwise when the distance exceeds half a circle; an exact half
        circle resolves to counterclockwise.
        """
        if self.distance(target).deci_degrees > HALF_CIRCLE:
            return RotationDirection.CLOCKWISE
        return RotationDirection.COUNTERCLOCKWISE

    def rotate_towards(self, target: AngleValue, max_step: AngleValue) -> AngleValue:
        """Advance at most *max_step* towards *target*.

        Lands exactly on *target* when it is within reach, so stepping never
        overshoots or oscillates around it. A counterclockwise direction steps
        along the straight segment between the two values; a clockwise one
        steps the other way, across north, so repeated steps always arrive.
        """
        if self.distance(target) <= max_step:
            return target
        upward = target.deci_degrees > self.deci_degrees
        if self.rotation_direction(target) is RotationDirection.CLOCKWISE:
            upward = not upward
        return self + max_step if upward else self - max_step

    # -- conversions --------------------------------------------------------

    @classmethod
    def from_degrees(cls, degrees: float) -> AngleValue:
        """Build from degrees clockwise from north; the fraction is truncated."""
        normalized = float(degrees) % 360.0
        return cls(int(normalized * DECI_DEGREES_PER_DEGREE))

    @classmethod
    def from_radians(cls, radians: float) -> AngleValue:
        """Build from radians clockwise from north; the fraction is truncated."""
        return cls.from_degrees(math.degrees(radians))

    @classmethod
    def from_vec2(cls, vec: Vec2) -> AngleValue:
        """Angle of an ``(x, y)`` vector, with x = sin and y = cos.

        Raises :exc:`DegenerateHeading` if the vector is too close to zero.
        """
        # Negated so NaN components count as degenerate.
        if not vec.length_squared() >= DEGENERATE_EPSILON * DEGENERATE_EPSILON:
            raise DegenerateHeading(f"vector ({vec.x}, {vec.y}) has no heading")
        return cls.from_radians(math.atan2(vec.x, vec.y))

    def into_degrees(self) -> float:
        return self.deci_degrees / DECI_DEGREES_PER_DEGREE

    def into_radians(self) -> float:
        return math.radians(self.into_degrees())


AngleValue.NORTH = AngleValue(0)
AngleValue.NORTHEAST = AngleValue(450)
AngleValue.EAST = AngleValue(900)
AngleValue.SOUTHEAST = AngleValue(1350)
AngleValue.SOUTH = AngleValue(1800)
AngleValue.SOUTHWEST = AngleValue(2250)
AngleValue.WEST = AngleValue(2700)
AngleValue.NORTHWEST = AngleValue(3150)
