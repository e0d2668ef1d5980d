"""Parquet persistence helpers for the heading log stream."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pyarrow as pa
import pyarrow.parquet as pq

from heading2d.domain.angle import DegenerateHeading
from heading2d.domain.conversions import rotation_to_angle
from heading2d.io.schemas import HEADING_LOG_COLUMNS, HEADING_LOG_SCHEMA

if TYPE_CHECKING:
    from heading2d.simulation.world import HeadingWorld

HeadingColumns = dict[str, list[int | float | None]]


def new_heading_columns() -> HeadingColumns:
    """Empty column buffers in schema order."""
    return {name: [] for name in HEADING_LOG_COLUMNS}


def append_heading_rows(columns: HeadingColumns, cycle: int, world: HeadingWorld) -> int:
    """Buffer one row per entity describing its fields after *cycle*.

    Returns the number of rows appended.
    """
    for record in world.entities.values():
        columns["cycle"].append(cycle)
        columns["entity_id"].append(record.entity_id)

        angle = record.angle.value if record.angle is not None else None
        columns["deci_degrees"].append(angle.deci_degrees if angle is not None else None)

        heading = record.heading.value if record.heading is not None else None
        columns["heading_x"].append(heading.x if heading is not None else None)
        columns["heading_y"].append(heading.y if heading is not None else None)

        rotation_deci_degrees: int | None = None
        if record.transform is not None:
            try:
                rotation_deci_degrees = rotation_to_angle(
                    record.transform.value.rotation
                ).deci_degrees
            except DegenerateHeading:
                rotation_deci_degrees = None
        columns["rotation_deci_degrees"].append(rotation_deci_degrees)

        position = record.position.value if record.position is not None else None
        columns["position_x"].append(position.x if position is not None else None)
        columns["position_y"].append(position.y if position is not None else None)
    return len(world.entities)


def flush_heading_columns(
    columns: HeadingColumns,
    heading_log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated heading rows to Parquet and clear in-memory buffers."""
    if not columns["cycle"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=HEADING_LOG_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(heading_log_path, HEADING_LOG_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
