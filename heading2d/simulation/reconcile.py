"""Pure reconciliation rules between paired heading representations.

Every rule takes the two current values and explicit ``*_changed`` flags and
returns a :class:`SyncWrite` describing which side, if any, must be written.
The first value of each pair is the *primary*: it wins when both sides
changed in the same cycle. A derived value is only reported when it differs
from the stored one, so applying the result never re-triggers change
detection for an unchanged value.

A :exc:`DegenerateHeading` raised while deriving a value means no write is
possible this cycle; the destination is left untouched.
"""

from __future__ import annotations

import logging
import operator
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from scipy.spatial.transform import Rotation

from heading2d.domain.angle import AngleValue, DegenerateHeading
from heading2d.domain.conversions import (
    angle_to_heading,
    angle_to_rotation,
    heading_to_angle,
    heading_to_rotation,
    rotation_to_angle,
    rotation_to_heading,
    rotations_equal,
)
from heading2d.domain.heading import VectorHeading
from heading2d.domain.position import Position

logger = logging.getLogger(__name__)

P = TypeVar("P")
S = TypeVar("S")

PlanarTranslation = tuple[float, float]
"""The x and y components of a transform translation."""


class ReconcilePhase(Enum):
    """Reconciliation phases, in execution order."""

    SYNC_ANGLE_HEADING = "sync_angle_heading"
    """Phase A: AngleValue <-> VectorHeading."""
    SYNC_TRANSFORM = "sync_transform"
    """Phase B: angle, heading and position <-> external transform."""


@dataclass(frozen=True)
class SyncWrite(Generic[P, S]):
    """Outcome of one reconciliation rule: values to write, if any."""

    primary: P | None = None
    secondary: S | None = None
    degenerate: bool = False
    """A conversion had no well-defined heading; nothing was derived."""

    @property
    def writes(self) -> int:
        return int(self.primary is not None) + int(self.secondary is not None)


def _merge(
    primary: P,
    secondary: S,
    *,
    primary_changed: bool,
    secondary_changed: bool,
    to_secondary: Callable[[P], S],
    to_primary: Callable[[S], P],
    same_secondary: Callable[[S, S], bool] = operator.eq,
    same_primary: Callable[[P, P], bool] = operator.eq,
) -> SyncWrite[P, S]:
    if primary_changed:
        try:
            derived_secondary = to_secondary(primary)
        except DegenerateHeading as exc:
            logger.debug("Skipping secondary write: %s", exc)
            return SyncWrite(degenerate=True)
        if same_secondary(derived_secondary, secondary):
            return SyncWrite()
        return SyncWrite(secondary=derived_secondary)

    if secondary_changed:
        try:
            derived_primary = to_primary(secondary)
        except DegenerateHeading as exc:
            logger.debug("Skipping primary write: %s", exc)
            return SyncWrite(degenerate=True)
        if same_primary(derived_primary, primary):
            return SyncWrite()
        return SyncWrite(primary=derived_primary)

    return SyncWrite()


def sync_angle_and_heading(
    angle: AngleValue,
    heading: VectorHeading,
    *,
    angle_changed: bool,
    heading_changed: bool,
) -> SyncWrite[AngleValue, VectorHeading]:
    """Phase A rule: the angle wins; a neutral heading never overwrites the angle."""
    return _merge(
        angle,
        heading,
        primary_changed=angle_changed,
        secondary_changed=heading_changed,
        to_secondary=angle_to_heading,
        to_primary=heading_to_angle,
    )


def sync_angle_with_rotation(
    angle: AngleValue,
    rotation: Rotation,
    *,
    angle_changed: bool,
    rotation_changed: bool,
) -> SyncWrite[AngleValue, Rotation]:
    """Phase B rule: the angle wins over the transform rotation."""
    return _merge(
        angle,
        rotation,
        primary_changed=angle_changed,
        secondary_changed=rotation_changed,
        to_secondary=angle_to_rotation,
        to_primary=rotation_to_angle,
        same_secondary=rotations_equal,
    )


def sync_heading_with_rotation(
    heading: VectorHeading,
    rotation: Rotation,
    *,
    heading_changed: bool,
    rotation_changed: bool,
) -> SyncWrite[VectorHeading, Rotation]:
    """Phase B rule: the heading wins over the transform rotation.

    A neutral heading leaves the rotation alone. The reverse conversion never
    fails, so a changed rotation always propagates, even onto a heading that
    was deliberately neutral.
    """
    return _merge(
        heading,
        rotation,
        primary_changed=heading_changed,
        secondary_changed=rotation_changed,
        to_secondary=heading_to_rotation,
        to_primary=rotation_to_heading,
        same_secondary=rotations_equal,
    )


def sync_position_with_translation(
    position: Position,
    translation: PlanarTranslation,
    *,
    position_changed: bool,
    translation_changed: bool,
) -> SyncWrite[Position, PlanarTranslation]:
    """Phase B rule: the position wins over the transform translation (x, y only)."""
    return _merge(
        position,
        translation,
        primary_changed=position_changed,
        secondary_changed=translation_changed,
        to_secondary=lambda p: (p.x, p.y),
        to_primary=lambda xy: Position(xy[0], xy[1]),
    )
