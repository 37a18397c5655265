"""Frontier: free cells orthogonally adjacent to the occupied region."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from kluring.domain.cell import Cell


@dataclass
class FrontierCell:
    """A border cell and its two derived scores, recomputed every tick."""

    cell: Cell
    adjacency_score: int = 0
    distance_score: int = 0

    @property
    def score(self) -> int:
        return self.adjacency_score + self.distance_score


class Frontier:
    """Tracked border cells keyed by coordinate."""

    def __init__(self) -> None:
        self._cells: dict[Cell, FrontierCell] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __iter__(self) -> Iterator[FrontierCell]:
        return iter(self._cells.values())

    def get(self, cell: Cell) -> FrontierCell | None:
        return self._cells.get(cell)

    def ensure(self, cell: Cell) -> FrontierCell:
        """Return the entry for ``cell``, creating it with zero scores if new."""
        entry = self._cells.get(cell)
        if entry is None:
            entry = FrontierCell(cell=cell)
            self._cells[cell] = entry
        return entry

    def discard(self, cell: Cell) -> None:
        self._cells.pop(cell, None)

    def cells(self) -> set[Cell]:
        return set(self._cells)

    def ranked(self) -> list[Cell]:
        """Cells by descending total score.

        Ties keep insertion order, which callers must not rely on.
        """
        entries = sorted(self._cells.values(), key=lambda entry: entry.score, reverse=True)
        return [entry.cell for entry in entries]

    def clear(self) -> None:
        self._cells = {}
