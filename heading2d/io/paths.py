"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def heading_log_path(out_dir: Path) -> Path:
    """Return path to the heading log Parquet file."""
    return logs_dir(out_dir) / "heading_log.parquet"
