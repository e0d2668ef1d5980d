"""Finite direction sets and nearest-partition snapping.

Each concrete set is an :class:`~enum.Enum` whose member values are the
partition angles in whole degrees, clockwise from north. The member
definitions are the only angle table; their order is the tie-break order
used by :meth:`DirectionPartitioning.snap`.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from heading2d.domain.angle import AngleValue, DegenerateHeading
from heading2d.domain.conversions import (
    HeadingLike,
    angle_to_heading,
    angle_to_vec2,
    to_angle,
)
from heading2d.domain.heading import VectorHeading
from heading2d.domain.vector import Vec2

P = TypeVar("P", bound="DirectionPartitioning")


class DirectionPartitioning(Enum):
    """An exhaustive partitioning of the circle into a few named directions.

    Subclasses only define members; every operation is shared.
    """

    @property
    def angle(self) -> AngleValue:
        return AngleValue.from_degrees(self.value)

    @property
    def heading(self) -> VectorHeading:
        return angle_to_heading(self.angle)

    @property
    def unit_vector(self) -> Vec2:
        return angle_to_vec2(self.angle)

    @classmethod
    def partitions(cls: type[P]) -> list[P]:
        """All members in table order."""
        return list(cls)

    @classmethod
    def rotations(cls) -> list[AngleValue]:
        return [partition.angle for partition in cls.partitions()]

    @classmethod
    def directions(cls) -> list[VectorHeading]:
        return [partition.heading for partition in cls.partitions()]

    @classmethod
    def unit_vectors(cls) -> list[Vec2]:
        return [partition.unit_vector for partition in cls.partitions()]

    @classmethod
    def snap(cls: type[P], headinglike: HeadingLike) -> P:
        """Return the partition closest to *headinglike*.

        Distances use :meth:`AngleValue.distance`. On a tie the member that
        appears first in :meth:`partitions` wins. Degenerate input raises
        :exc:`DegenerateHeading`.
        """
        angle = to_angle(headinglike)
        closest: P | None = None
        closest_distance: AngleValue | None = None
        for partition in cls.partitions():
            distance = angle.distance(partition.angle)
            if closest_distance is None or distance < closest_distance:
                closest = partition
                closest_distance = distance
        if closest is None:
            raise ValueError(f"{cls.__name__}.partitions() must return at least one element")
        return closest

    @classmethod
    def snap_angle(cls, angle: AngleValue) -> AngleValue:
        return cls.snap(angle).angle

    @classmethod
    def snap_direction(cls, heading: VectorHeading) -> VectorHeading:
        """Snap a heading; a neutral heading snaps to NEUTRAL."""
        try:
            return cls.snap(heading).heading
        except DegenerateHeading:
            return VectorHeading.NEUTRAL

    @classmethod
    def snap_vec2(cls, vec: Vec2) -> Vec2:
        """Snap a raw vector to a partition unit vector; near-zero input gives ZERO."""
        try:
            return cls.snap(vec).unit_vector
        except DegenerateHeading:
            return Vec2.ZERO


class CardinalQuadrant(DirectionPartitioning):
    """The four cardinal directions."""

    NORTH = 0
    EAST = 90
    SOUTH = 180
    WEST = 270


class OffsetQuadrant(DirectionPartitioning):
    """The four cardinal directions offset by 45 degrees."""

    NORTHEAST = 45
    SOUTHEAST = 135
    SOUTHWEST = 225
    NORTHWEST = 315


class CardinalOctant(DirectionPartitioning):
    """Cardinal directions plus the diagonals between them."""

    NORTH = 0
    NORTHEAST = 45
    EAST = 90
    SOUTHEAST = 135
    SOUTH = 180
    SOUTHWEST = 225
    WEST = 270
    NORTHWEST = 315


class CardinalSextant(DirectionPartitioning):
    """The six edge directions of a pointy-top hexagon (rows tile side by side)."""

    NORTH = 0
    NORTHEAST = 60
    SOUTHEAST = 120
    SOUTH = 180
    SOUTHWEST = 240
    NORTHWEST = 300


class OffsetSextant(DirectionPartitioning):
    """The six edge directions of a flat-top hexagon (columns tile vertically)."""

    NORTHEAST = 30
    EAST = 90
    SOUTHEAST = 150
    SOUTHWEST = 210
    WEST = 270
    NORTHWEST = 330
