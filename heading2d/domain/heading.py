"""Unit-vector heading with a zero "no heading" sentinel."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar

from heading2d.domain.angle import AngleValue
from heading2d.domain.vector import Vec2

_DIAGONAL = 1.0 / math.sqrt(2.0)


@dataclass(frozen=True)
class VectorHeading:
    """A 2D direction whose magnitude is always exactly zero or one.

    The vector is normalized on construction; a near-zero input becomes
    :attr:`NEUTRAL` instead of failing.
    """

    unit_vector: Vec2

    NEUTRAL: ClassVar[VectorHeading]
    NORTH: ClassVar[VectorHeading]
    NORTHEAST: ClassVar[VectorHeading]
    EAST: ClassVar[VectorHeading]
    SOUTHEAST: ClassVar[VectorHeading]
    SOUTH: ClassVar[VectorHeading]
    SOUTHWEST: ClassVar[VectorHeading]
    WEST: ClassVar[VectorHeading]
    NORTHWEST: ClassVar[VectorHeading]

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_vector", self.unit_vector.normalize_or_zero())

    @classmethod
    def from_xy(cls, x: float, y: float) -> VectorHeading:
        return cls(Vec2(x, y))

    @property
    def x(self) -> float:
        return self.unit_vector.x

    @property
    def y(self) -> float:
        return self.unit_vector.y

    @property
    def is_neutral(self) -> bool:
        return self.unit_vector == Vec2.ZERO

    def distance(self, other: VectorHeading) -> AngleValue:
        """Angular distance between two headings, as in :meth:`AngleValue.distance`.

        Raises :exc:`DegenerateHeading` if either heading is neutral.
        """
        return AngleValue.from_vec2(self.unit_vector).distance(
            AngleValue.from_vec2(other.unit_vector)
        )

    def __add__(self, other: VectorHeading) -> VectorHeading:
        return VectorHeading(self.unit_vector + other.unit_vector)

    def __sub__(self, other: VectorHeading) -> VectorHeading:
        return VectorHeading(self.unit_vector - other.unit_vector)

    def __neg__(self) -> VectorHeading:
        return VectorHeading(-self.unit_vector)

    def __mul__(self, factor: float) -> Vec2:
        # Scaled headings are plain vectors: magnitude is no longer one.
        return self.unit_vector * factor

    def __rmul__(self, factor: float) -> Vec2:
        return self * factor

    def to_vec3(self) -> tuple[float, float, float]:
        return self.unit_vector.extend(0.0)


VectorHeading.NEUTRAL = VectorHeading(Vec2.ZERO)
VectorHeading.NORTH = VectorHeading(Vec2(0.0, 1.0))
VectorHeading.NORTHEAST = VectorHeading(Vec2(_DIAGONAL, _DIAGONAL))
VectorHeading.EAST = VectorHeading(Vec2(1.0, 0.0))
VectorHeading.SOUTHEAST = VectorHeading(Vec2(_DIAGONAL, -_DIAGONAL))
VectorHeading.SOUTH = VectorHeading(Vec2(0.0, -1.0))
VectorHeading.SOUTHWEST = VectorHeading(Vec2(-_DIAGONAL, -_DIAGONAL))
VectorHeading.WEST = VectorHeading(Vec2(-1.0, 0.0))
VectorHeading.NORTHWEST = VectorHeading(Vec2(-_DIAGONAL, _DIAGONAL))
