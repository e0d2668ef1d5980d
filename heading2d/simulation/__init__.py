"""Simulation layer: change tracking, reconciliation rules, and the cycle engine."""

from heading2d.simulation.engine import CycleReport, run_cycle, run_cycles
from heading2d.simulation.persistence import flush_heading_columns
from heading2d.simulation.reconcile import (
    ReconcilePhase,
    SyncWrite,
    sync_angle_and_heading,
    sync_angle_with_rotation,
    sync_heading_with_rotation,
    sync_position_with_translation,
)
from heading2d.simulation.tracking import ChangeClock, Observer, Tracked
from heading2d.simulation.world import EntityRecord, HeadingWorld

__all__ = [
    "ChangeClock",
    "CycleReport",
    "EntityRecord",
    "HeadingWorld",
    "Observer",
    "ReconcilePhase",
    "SyncWrite",
    "Tracked",
    "flush_heading_columns",
    "run_cycle",
    "run_cycles",
    "sync_angle_and_heading",
    "sync_angle_with_rotation",
    "sync_heading_with_rotation",
    "sync_position_with_translation",
]
