"""Configuration layer: constants and typed config dataclasses."""

from heading2d.config.constants import (
    DECI_DEGREES_PER_DEGREE,
    DEGENERATE_EPSILON,
    FLUSH_THRESHOLD,
    FULL_CIRCLE,
    HALF_CIRCLE,
    HEADING_ROTATION_AXIS,
    NORTH_REFERENCE,
)
from heading2d.config.types import ReconcileConfig, RunConfig

__all__ = [
    "DECI_DEGREES_PER_DEGREE",
    "DEGENERATE_EPSILON",
    "FLUSH_THRESHOLD",
    "FULL_CIRCLE",
    "HALF_CIRCLE",
    "HEADING_ROTATION_AXIS",
    "NORTH_REFERENCE",
    "ReconcileConfig",
    "RunConfig",
]
