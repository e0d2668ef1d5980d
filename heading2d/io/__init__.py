"""I/O layer: Parquet schemas and output path conventions."""

from heading2d.io.paths import heading_log_path, logs_dir
from heading2d.io.schemas import (
    HEADING_LOG_COLUMNS,
    HEADING_LOG_SCHEMA,
    HEADING_LOG_SCHEMA_VERSION,
)

__all__ = [
    "HEADING_LOG_COLUMNS",
    "HEADING_LOG_SCHEMA",
    "HEADING_LOG_SCHEMA_VERSION",
    "heading_log_path",
    "logs_dir",
]
