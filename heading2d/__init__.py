"""Two-dimensional headings kept consistent across angle, vector and 3D rotation."""

from heading2d.domain import (
    AngleValue,
    CardinalOctant,
    CardinalQuadrant,
    CardinalSextant,
    DegenerateHeading,
    DirectionPartitioning,
    OffsetQuadrant,
    OffsetSextant,
    Position,
    RotationDirection,
    Transform,
    Vec2,
    VectorHeading,
)
from heading2d.simulation import HeadingWorld, run_cycle, run_cycles

__all__ = [
    "AngleValue",
    "CardinalOctant",
    "CardinalQuadrant",
    "CardinalSextant",
    "DegenerateHeading",
    "DirectionPartitioning",
    "HeadingWorld",
    "OffsetQuadrant",
    "OffsetSextant",
    "Position",
    "RotationDirection",
    "Transform",
    "Vec2",
    "VectorHeading",
    "run_cycle",
    "run_cycles",
]
