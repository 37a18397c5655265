"""Path construction helpers for run output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def placement_log_path(out_dir: Path) -> Path:
    """Return path to the placement log Parquet file."""
    return logs_dir(out_dir) / "placement_log.parquet"


def frontier_log_path(out_dir: Path) -> Path:
    """Return path to the frontier log Parquet file."""
    return logs_dir(out_dir) / "frontier_log.parquet"


def summary_path(out_dir: Path) -> Path:
    """Return path to the run summary JSON file."""
    return out_dir / "summary.json"
