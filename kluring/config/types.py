"""Configuration dataclasses for tiling runs.

Frozen dataclasses validate themselves in ``__post_init__`` so that a bad
value fails at construction time rather than mid-simulation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kluring.config.constants import DEFAULT_RESTOCK_COUNT, NUM_STEPS, SEED_CELL

__all__ = [
    "SearchStrategy",
    "SimulationConfig",
]


class SearchStrategy(Enum):
    """How the placement search picks among legal candidates."""

    BEST_SCORE = "best_score"
    FIRST_FIT = "first_fit"


@dataclass(frozen=True)
class SimulationConfig:
    """Runtime knobs for one simulation instance."""

    restock_count: int = DEFAULT_RESTOCK_COUNT
    """Per-shape bag count applied at startup."""
    seed_cell: tuple[int, int] = SEED_CELL
    """Bootstrap anchor and distance-score reference point."""
    all_orientations: bool = False
    """Search all 8 rotation/flip variants instead of the unrotated footprint only."""
    strategy: SearchStrategy = SearchStrategy.BEST_SCORE
    steps: int = NUM_STEPS
    """Ticks executed by a headless run."""
    sim_seed: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.restock_count, bool) or not isinstance(self.restock_count, int):
            raise ValueError("restock_count must be an integer")
        if self.restock_count < 0:
            raise ValueError("restock_count must be >= 0")
        if (
            len(self.seed_cell) != 2
            or any(isinstance(v, bool) or not isinstance(v, int) for v in self.seed_cell)
        ):
            raise ValueError("seed_cell must be a pair of integers")
        if not isinstance(self.strategy, SearchStrategy):
            raise ValueError("strategy must be a SearchStrategy")
        if self.steps < 1:
            raise ValueError("steps must be >= 1")
