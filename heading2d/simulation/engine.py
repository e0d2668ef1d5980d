"""Cycle driver: applies the reconciliation rules to every entity of a world.

One cycle runs Phase A (angle <-> heading) for all entities, then Phase B
(angle, heading, position <-> transform) for all entities. Change flags for an
entity are read before any write to that entity within a phase.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pyarrow.parquet as pq

from heading2d.config.types import ReconcileConfig, RunConfig
from heading2d.io.paths import heading_log_path, logs_dir
from heading2d.simulation.persistence import (
    append_heading_rows,
    flush_heading_columns,
    new_heading_columns,
)
from heading2d.simulation.reconcile import (
    ReconcilePhase,
    sync_angle_and_heading,
    sync_angle_with_rotation,
    sync_heading_with_rotation,
    sync_position_with_translation,
)
from heading2d.simulation.tracking import Observer
from heading2d.simulation.world import EntityRecord, HeadingWorld

logger = logging.getLogger(__name__)

BeforeCycle = Callable[[HeadingWorld, int], None]
"""Hook for outside edits, called with the world and cycle index."""


@dataclass(frozen=True)
class CycleReport:
    """Write counts produced by one reconciliation cycle."""

    cycle: int
    local_writes: int = 0
    transform_writes: int = 0
    position_writes: int = 0
    degenerate_skips: int = 0

    @property
    def total_writes(self) -> int:
        return self.local_writes + self.transform_writes + self.position_writes


@dataclass
class _Tally:
    local_writes: int = 0
    transform_writes: int = 0
    position_writes: int = 0
    degenerate_skips: int = 0


def _sync_local(record: EntityRecord, observer: Observer, tally: _Tally) -> None:
    if record.angle is None or record.heading is None:
        return
    result = sync_angle_and_heading(
        record.angle.value,
        record.heading.value,
        angle_changed=observer.is_changed(record.angle),
        heading_changed=observer.is_changed(record.heading),
    )
    if result.primary is not None:
        record.angle.set(result.primary)
    if result.secondary is not None:
        record.heading.set(result.secondary)
    tally.local_writes += result.writes
    tally.degenerate_skips += int(result.degenerate)


def _sync_transform(
    record: EntityRecord, observer: Observer, config: ReconcileConfig, tally: _Tally
) -> None:
    transform = record.transform
    if transform is None:
        return

    # Read every flag before the first write to this entity.
    angle_changed = observer.is_changed(record.angle)
    heading_changed = observer.is_changed(record.heading)
    position_changed = observer.is_changed(record.position)
    transform_changed = observer.is_changed(transform)

    if config.sync_angle_rotation and record.angle is not None:
        result = sync_angle_with_rotation(
            record.angle.value,
            transform.value.rotation,
            angle_changed=angle_changed,
            rotation_changed=transform_changed,
        )
        if result.primary is not None:
            record.angle.set(result.primary)
        if result.secondary is not None:
            transform.set(transform.value.with_rotation(result.secondary))
        tally.transform_writes += result.writes
        tally.degenerate_skips += int(result.degenerate)

    # A changed angle already decided the rotation this cycle.
    angle_wins = config.sync_angle_rotation and record.angle is not None and angle_changed
    if config.sync_heading_rotation and record.heading is not None and not angle_wins:
        result = sync_heading_with_rotation(
            record.heading.value,
            transform.value.rotation,
            heading_changed=heading_changed,
            rotation_changed=transform_changed,
        )
        if result.primary is not None:
            record.heading.set(result.primary)
        if result.secondary is not None:
            transform.set(transform.value.with_rotation(result.secondary))
        tally.transform_writes += result.writes
        tally.degenerate_skips += int(result.degenerate)

    if config.sync_position and record.position is not None:
        translation = transform.value.translation
        result = sync_position_with_translation(
            record.position.value,
            (translation[0], translation[1]),
            position_changed=position_changed,
            translation_changed=transform_changed,
        )
        if result.primary is not None:
            record.position.set(result.primary)
        if result.secondary is not None:
            transform.set(transform.value.with_translation_xy(*result.secondary))
        tally.position_writes += result.writes


def run_cycle(world: HeadingWorld, config: ReconcileConfig | None = None) -> CycleReport:
    """Reconcile every entity once: all of Phase A, then all of Phase B."""
    config = config or ReconcileConfig()
    tally = _Tally()

    if config.sync_angle_heading:
        observer = world.observers[ReconcilePhase.SYNC_ANGLE_HEADING]
        for record in world.entities.values():
            _sync_local(record, observer, tally)
        observer.finish()

    if config.sync_transform:
        observer = world.observers[ReconcilePhase.SYNC_TRANSFORM]
        for record in world.entities.values():
            _sync_transform(record, observer, config, tally)
        observer.finish()

    report = CycleReport(
        cycle=world.cycle,
        local_writes=tally.local_writes,
        transform_writes=tally.transform_writes,
        position_writes=tally.position_writes,
        degenerate_skips=tally.degenerate_skips,
    )
    world.cycle += 1
    logger.debug(
        "cycle %d: %d local, %d transform, %d position writes (%d degenerate)",
        report.cycle,
        report.local_writes,
        report.transform_writes,
        report.position_writes,
        report.degenerate_skips,
    )
    return report


def run_cycles(
    world: HeadingWorld,
    config: RunConfig | None = None,
    *,
    out_dir: Path | None = None,
    before_cycle: BeforeCycle | None = None,
) -> list[CycleReport]:
    """Run several cycles, optionally persisting a heading log under *out_dir*."""
    run_config = config or RunConfig()
    if run_config.write_log and out_dir is None:
        raise ValueError("out_dir is required when write_log is set")

    log_path: Path | None = None
    if run_config.write_log and out_dir is not None:
        logs_dir(Path(out_dir)).mkdir(parents=True, exist_ok=True)
        log_path = heading_log_path(Path(out_dir))

    columns = new_heading_columns()
    buffered_rows = 0
    writer: pq.ParquetWriter | None = None
    reports: list[CycleReport] = []

    try:
        for _ in range(run_config.cycles):
            if before_cycle is not None:
                before_cycle(world, world.cycle)
            report = run_cycle(world, run_config.reconcile)
            reports.append(report)

            if log_path is None:
                continue
            buffered_rows += append_heading_rows(columns, report.cycle, world)
            if buffered_rows >= run_config.flush_threshold:
                writer = flush_heading_columns(columns, log_path, writer)
                logger.info("Flushed %d heading rows to %s", buffered_rows, log_path)
                buffered_rows = 0

        if log_path is not None:
            writer = flush_heading_columns(columns, log_path, writer)
    finally:
        if writer is not None:
            writer.close()

    return reports
