"""Configuration dataclasses for reconciliation runs.

Both dataclasses are frozen and validate their fields on construction.
"""

from __future__ import annotations

from dataclasses import dataclass

from heading2d.config.constants import FLUSH_THRESHOLD

__all__ = [
    "FLUSH_THRESHOLD",
    "ReconcileConfig",
    "RunConfig",
]


@dataclass(frozen=True)
class ReconcileConfig:
    """Which reconciliation branches run each cycle."""

    sync_angle_heading: bool = True
    """Phase A: keep AngleValue and VectorHeading consistent."""
    sync_angle_rotation: bool = True
    """Phase B: keep AngleValue and the transform rotation consistent."""
    sync_heading_rotation: bool = True
    """Phase B: keep VectorHeading and the transform rotation consistent."""
    sync_position: bool = True
    """Phase B: keep Position and the transform translation consistent."""

    @property
    def sync_transform(self) -> bool:
        """True when any Phase B branch is enabled."""
        return self.sync_angle_rotation or self.sync_heading_rotation or self.sync_position


@dataclass(frozen=True)
class RunConfig:
    """Multi-cycle run parameters, including optional Parquet logging."""

    cycles: int = 1
    write_log: bool = False
    flush_threshold: int = FLUSH_THRESHOLD
    reconcile: ReconcileConfig = ReconcileConfig()

    def __post_init__(self) -> None:
        if self.cycles < 1:
            raise ValueError("cycles must be >= 1")
        if self.flush_threshold < 1:
            raise ValueError("flush_threshold must be >= 1")
