"""Configuration layer: constants and typed config dataclasses."""

from kluring.config.constants import (
    BLOCKED,
    DEFAULT_RESTOCK_COUNT,
    DISTANCE_SCORE_SCALE,
    FLUSH_THRESHOLD,
    MAX_ADJACENCY_SCORE,
    NUM_ORIENTATIONS,
    NUM_ROTATIONS,
    NUM_STEPS,
    SEED_CELL,
)
from kluring.config.types import SearchStrategy, SimulationConfig

__all__ = [
    "BLOCKED",
    "DEFAULT_RESTOCK_COUNT",
    "DISTANCE_SCORE_SCALE",
    "FLUSH_THRESHOLD",
    "MAX_ADJACENCY_SCORE",
    "NUM_ORIENTATIONS",
    "NUM_ROTATIONS",
    "NUM_STEPS",
    "SEED_CELL",
    "SearchStrategy",
    "SimulationConfig",
]
