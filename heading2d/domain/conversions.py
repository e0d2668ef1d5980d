"""Conversions between AngleValue, VectorHeading and 3D rotations.

Conventions shared by every function here:

- Angles are clockwise from north; the matching vector is ``(sin, cos)``,
  i.e. x = sin and y = cos.
- A heading rotation turns about ``HEADING_ROTATION_AXIS`` (-z) by the angle
  in radians, carrying ``NORTH_REFERENCE`` onto the heading vector.
- Reading a heading back from an arbitrary rotation projects the rotated north
  reference onto the xy plane; any pitch or roll is ignored, not removed.

Every fallible conversion raises :exc:`DegenerateHeading`. Callers that
catch it must leave their destination value unchanged.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeAlias

import numpy as np
from scipy.spatial.transform import Rotation

from heading2d.config.constants import HEADING_ROTATION_AXIS, NORTH_REFERENCE
from heading2d.domain.angle import AngleValue, DegenerateHeading
from heading2d.domain.heading import VectorHeading
from heading2d.domain.vector import Vec2

if TYPE_CHECKING:
    from heading2d.domain.partitions import DirectionPartitioning

HeadingLike: TypeAlias = "AngleValue | VectorHeading | Vec2 | Rotation | DirectionPartitioning"
"""Anything :func:`to_angle` can turn into an AngleValue."""

_AXIS = np.asarray(HEADING_ROTATION_AXIS, dtype=np.float64)
_NORTH = np.asarray(NORTH_REFERENCE, dtype=np.float64)

__all__ = [
    "DegenerateHeading",
    "HeadingLike",
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


# ---------------------------------------------------------------------------
# Angle <-> vector
# ---------------------------------------------------------------------------


def vec2_to_angle(vec: Vec2) -> AngleValue:
    """Truncated clockwise-from-north angle of *vec*."""
    return AngleValue.from_vec2(vec)


def angle_to_vec2(angle: AngleValue) -> Vec2:
    """Unit vector ``(sin, cos)`` for *angle*."""
    radians = angle.into_radians()
    return Vec2(math.sin(radians), math.cos(radians))


def heading_to_angle(heading: VectorHeading) -> AngleValue:
    return AngleValue.from_vec2(heading.unit_vector)


def angle_to_heading(angle: AngleValue) -> VectorHeading:
    return VectorHeading(angle_to_vec2(angle))


# ---------------------------------------------------------------------------
# Angle / heading <-> rotation
# ---------------------------------------------------------------------------


def angle_to_rotation(angle: AngleValue) -> Rotation:
    """Pure z-axis rotation for *angle*; never fails."""
    return Rotation.from_rotvec(_AXIS * angle.into_radians())


def rotation_forward(rotation: Rotation) -> Vec2:
    """xy projection of the north reference after applying *rotation*."""
    forward = rotation.apply(_NORTH)
    return Vec2(float(forward[0]), float(forward[1]))


def rotation_to_angle(rotation: Rotation) -> AngleValue:
    """Heading angle implied by *rotation*.

    Raises :exc:`DegenerateHeading` when the rotated north reference points
    (almost) straight along z.
    """
    return AngleValue.from_vec2(rotation_forward(rotation))


def heading_to_rotation(heading: VectorHeading) -> Rotation:
    """Rotation for *heading*; raises :exc:`DegenerateHeading` if it is neutral."""
    return angle_to_rotation(heading_to_angle(heading))


def rotation_to_heading(rotation: Rotation) -> VectorHeading:
    """Heading implied by *rotation*; never fails.

    A forward vector with no xy component at all yields NEUTRAL.
    """
    return VectorHeading(rotation_forward(rotation))


def rotations_equal(a: Rotation, b: Rotation) -> bool:
    """Exact component-wise quaternion equality, as used for guarded writes."""
    return bool(np.array_equal(a.as_quat(), b.as_quat()))


# ---------------------------------------------------------------------------
# Generic entry point
# ---------------------------------------------------------------------------


def to_angle(headinglike: HeadingLike) -> AngleValue:
    """Convert any supported heading representation into an AngleValue."""
    from heading2d.domain.partitions import DirectionPartitioning

    if isinstance(headinglike, AngleValue):
        return headinglike
    if isinstance(headinglike, VectorHeading):
        return heading_to_angle(headinglike)
    if isinstance(headinglike, Vec2):
        return vec2_to_angle(headinglike)
    if isinstance(headinglike, DirectionPartitioning):
        return headinglike.angle
    if isinstance(headinglike, Rotation):
        return rotation_to_angle(headinglike)
    raise TypeError(f"cannot convert {type(headinglike).__name__} to AngleValue")
