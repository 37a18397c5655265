"""Integer lattice coordinates."""

from __future__ import annotations

from collections.abc import Iterator
from typing import NamedTuple

# Orthogonal neighborhood, in the order neighbors are visited everywhere.
NEIGHBORHOOD: tuple[tuple[int, int], ...] = ((1, 0), (0, 1), (-1, 0), (0, -1))


class Cell(NamedTuple):
    """One cell on the unbounded integer plane."""

    x: int
    y: int

    def shifted(self, offset: tuple[int, int]) -> Cell:
        return Cell(self.x + offset[0], self.y + offset[1])

    def offset_from(self, other: tuple[int, int]) -> Cell:
        """Return ``self - other`` component-wise."""
        return Cell(self.x - other[0], self.y - other[1])

    def neighbors(self) -> Iterator[Cell]:
        """Yield the 4-neighborhood (von Neumann, radius 1)."""
        for dx, dy in NEIGHBORHOOD:
            yield Cell(self.x + dx, self.y + dy)
