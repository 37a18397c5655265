"""Centralized domain constants for the tiling engine.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

DEFAULT_RESTOCK_COUNT = 1
"""Per-shape bag count used at startup and when restock input is unusable."""

NUM_ROTATIONS = 4
"""Quarter-turn rotations per shape (0, 90, 180, 270 degrees)."""

NUM_ORIENTATIONS = 8
"""Rotation x flip combinations per shape (not deduplicated for symmetry)."""

MAX_ADJACENCY_SCORE = 4
"""Upper bound of the adjacency score: all four orthogonal neighbors occupied."""

DISTANCE_SCORE_SCALE = 10
"""Distance score range: a cell on the seed scores this, the bounds diagonal scores 0."""

BLOCKED = -(2**31)
"""Reserved field value meaning "permanently occupied"; never a real score."""

SEED_CELL: tuple[int, int] = (0, 0)
"""Default anchor for the bootstrap placement and reference point for distance scoring."""

NUM_STEPS = 200
"""Default number of ticks for a headless run."""

FLUSH_THRESHOLD = 8_192
"""Flush trace log rows to Parquet once this in-memory row count is reached."""
