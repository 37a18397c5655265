"""Parquet schema definitions for trace-log artifacts.

Column contracts for the placement and frontier event streams written by
:class:`kluring.simulation.persistence.PlacementLogRecorder`.
"""

from __future__ import annotations

import pyarrow as pa

PLACEMENT_LOG_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("shape_id", pa.int64()),
        ("rotation", pa.int64()),
        ("flipped", pa.bool_()),
        ("anchor_x", pa.int64()),
        ("anchor_y", pa.int64()),
        ("n_cells", pa.int64()),
    ]
)

FRONTIER_LOG_SCHEMA = pa.schema(
    [
        ("step", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("adjacency_score", pa.int64()),
        ("distance_score", pa.int64()),
    ]
)
