"""Frontier scoring pass.

Each frontier cell gets an adjacency score (occupied orthogonal neighbors,
0 to 4) and a distance score that is highest near the seed and falls to 0 at
the diagonal length of the current bounds. The sum is written back into the
field, where the placement search reads it.
"""

from __future__ import annotations

import numpy as np

from kluring.config.constants import DISTANCE_SCORE_SCALE
from kluring.domain.cell import Cell
from kluring.domain.field import ScoreField
from kluring.domain.frontier import Frontier, FrontierCell


def adjacency_score(field: ScoreField, cell: Cell) -> int:
    return sum(1 for neighbor in cell.neighbors() if field.is_occupied(neighbor))


def distance_scores(
    cells: list[Cell], seed_cell: tuple[int, int], max_diagonal: float
) -> np.ndarray:
    """Vectorised ``round(scale * (max_diagonal - dist) / max_diagonal)``."""
    coords = np.asarray(cells, dtype=np.float64).reshape(-1, 2)
    distances = np.hypot(coords[:, 0] - seed_cell[0], coords[:, 1] - seed_cell[1])
    normalized = (max_diagonal - distances) / max_diagonal
    return np.rint(normalized * DISTANCE_SCORE_SCALE).astype(np.int64)


def score_frontier(
    field: ScoreField, frontier: Frontier, seed_cell: tuple[int, int]
) -> list[FrontierCell]:
    """Recompute every frontier cell's scores; return the updated entries.

    Does nothing while the bounds are still empty.
    """
    bounds = field.bounds
    if bounds.is_default() or len(frontier) == 0:
        return []

    entries = list(frontier)
    max_diagonal = float(np.hypot(bounds.width(), bounds.height()))
    distances = distance_scores([entry.cell for entry in entries], seed_cell, max_diagonal)
    for entry, distance in zip(entries, distances.tolist(), strict=True):
        entry.adjacency_score = adjacency_score(field, entry.cell)
        entry.distance_score = int(distance)
        field.set_score(entry.cell, entry.score)
    return entries
