"""Domain layer: heading value types, conversions, and direction partitions."""

from heading2d.domain.angle import AngleValue, DegenerateHeading, RotationDirection
from heading2d.domain.conversions import (
    HeadingLike,
    angle_to_heading,
    angle_to_rotation,
    angle_to_vec2,
    heading_to_angle,
    heading_to_rotation,
    rotation_forward,
    rotation_to_angle,
    rotation_to_heading,
    rotations_equal,
    to_angle,
    vec2_to_angle,
)
from heading2d.domain.heading import VectorHeading
from heading2d.domain.partitions import (
    CardinalOctant,
    CardinalQuadrant,
    CardinalSextant,
    DirectionPartitioning,
    OffsetQuadrant,
    OffsetSextant,
)
from heading2d.domain.position import Position
from heading2d.domain.transform import Transform
from heading2d.domain.vector import Vec2

__all__ = [
    "AngleValue",
    "CardinalOctant",
    "CardinalQuadrant",
    "CardinalSextant",
    "DegenerateHeading",
    "DirectionPartitioning",
    "HeadingLike",
    "OffsetQuadrant",
    "OffsetSextant",
    "Position",
    "RotationDirection",
    "Transform",
    "Vec2",
    "VectorHeading",
    "angle_to_heading",
    "angle_to_rotation",
    "angle_to_vec2",
    "heading_to_angle",
    "heading_to_rotation",
    "rotation_forward",
    "rotation_to_angle",
    "rotation_to_heading",
    "rotations_equal",
    "to_angle",
    "vec2_to_angle",
]
