"""Parquet schema for the per-cycle heading log.

Every module that reads or writes heading logs works against this one column
contract. Columns for fields an entity lacks are null.
"""

from __future__ import annotations

import pyarrow as pa

HEADING_LOG_SCHEMA_VERSION = 1

HEADING_LOG_SCHEMA = pa.schema(
    [
        ("cycle", pa.int64()),
        ("entity_id", pa.int64()),
        ("deci_degrees", pa.int64()),
        ("heading_x", pa.float64()),
        ("heading_y", pa.float64()),
        ("rotation_deci_degrees", pa.int64()),
        ("position_x", pa.float64()),
        ("position_y", pa.float64()),
    ],
    metadata={"schema_version": str(HEADING_LOG_SCHEMA_VERSION)},
)

HEADING_LOG_COLUMNS: tuple[str, ...] = tuple(HEADING_LOG_SCHEMA.names)
"""Column names in schema order."""
