"""Centralized constants for heading arithmetic and reconciliation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

import numpy as np

FULL_CIRCLE = 3600
"""Number of tenths-of-a-degree in one full turn."""

HALF_CIRCLE = FULL_CIRCLE // 2
"""Tenths-of-a-degree in half a turn; threshold for rotation direction."""

DECI_DEGREES_PER_DEGREE = 10
"""Fixed-point scale between degrees and stored angle units."""

DEGENERATE_EPSILON = float(np.finfo(np.float32).eps)
"""Vectors with squared length below this value squared have no heading."""

NORTH_REFERENCE: tuple[float, float, float] = (0.0, 1.0, 0.0)
"""Forward vector of an unrotated transform; angle zero points here."""

HEADING_ROTATION_AXIS: tuple[float, float, float] = (0.0, 0.0, -1.0)
"""Axis for heading rotations: positive angles turn clockwise seen from +z."""

FLUSH_THRESHOLD = 8_192
"""Flush heading log rows to Parquet once this in-memory row count is reached."""
