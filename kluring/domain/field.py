"""Sparse occupancy/score field and the bounding rectangle of occupied cells.

Field values are either :data:`BLOCKED` (occupied) or a desirability score.
A missing key means "not scored yet": the cell is free, and it contributes
zero to a placement's score.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from kluring.config.constants import BLOCKED
from kluring.domain.cell import Cell
from kluring.errors import InvariantViolation

_EMPTY_MIN = sys.maxsize
_EMPTY_MAX = -sys.maxsize - 1


@dataclass
class Bounds:
    """Smallest axis-aligned rectangle covering every occupied cell.

    A fresh instance is in the empty state (min above max) until the first
    :meth:`expand`. It only ever grows.
    """

    min_x: int = _EMPTY_MIN
    min_y: int = _EMPTY_MIN
    max_x: int = _EMPTY_MAX
    max_y: int = _EMPTY_MAX

    def is_default(self) -> bool:
        return (
            self.min_x == _EMPTY_MIN
            and self.min_y == _EMPTY_MIN
            and self.max_x == _EMPTY_MAX
            and self.max_y == _EMPTY_MAX
        )

    def expand(self, cell: tuple[int, int]) -> None:
        x, y = cell
        self.min_x = min(self.min_x, x)
        self.min_y = min(self.min_y, y)
        self.max_x = max(self.max_x, x)
        self.max_y = max(self.max_y, y)

    def width(self) -> int:
        return self.max_x - self.min_x + 1

    def height(self) -> int:
        return self.max_y - self.min_y + 1

    def area(self) -> int:
        """Cell count of the rectangle; 0 while empty."""
        if self.is_default():
            return 0
        return self.width() * self.height()

    def contains(self, cell: tuple[int, int]) -> bool:
        x, y = cell
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    def contains_bounds(self, other: Bounds) -> bool:
        """True when ``other`` lies inside this rectangle (an empty rectangle always does)."""
        if other.is_default():
            return True
        return (
            self.min_x <= other.min_x
            and self.min_y <= other.min_y
            and self.max_x >= other.max_x
            and self.max_y >= other.max_y
        )

    def copy(self) -> Bounds:
        return Bounds(self.min_x, self.min_y, self.max_x, self.max_y)


class ScoreField:
    """Mapping of cell to :data:`BLOCKED` or score, plus the occupied bounds."""

    def __init__(self) -> None:
        self._values: dict[Cell, int] = {}
        self._occupied_count = 0
        self.bounds = Bounds()

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, cell: object) -> bool:
        return cell in self._values

    @property
    def occupied_count(self) -> int:
        return self._occupied_count

    def is_empty(self) -> bool:
        """True when no cell is occupied (scored cells may still exist)."""
        return self._occupied_count == 0

    def is_occupied(self, cell: Cell) -> bool:
        return self._values.get(cell) == BLOCKED

    def get(self, cell: Cell) -> int | None:
        """Raw field value: None if unscored, BLOCKED if occupied."""
        return self._values.get(cell)

    def score_of(self, cell: Cell) -> int:
        """Stored score of a free cell; unscored cells score 0."""
        value = self._values.get(cell, 0)
        if value == BLOCKED:
            raise InvariantViolation(f"cell {cell} is occupied and has no score")
        return value

    def occupy(self, cell: Cell) -> None:
        """Mark ``cell`` occupied and grow the bounds to include it."""
        if self._values.get(cell) == BLOCKED:
            raise InvariantViolation(f"cell {cell} is already occupied")
        self._values[cell] = BLOCKED
        self._occupied_count += 1
        self.bounds.expand(cell)

    def set_score(self, cell: Cell, score: int) -> None:
        if self._values.get(cell) == BLOCKED:
            raise InvariantViolation(f"cannot score occupied cell {cell}")
        if score == BLOCKED:
            raise InvariantViolation(f"score for {cell} collides with the occupied sentinel")
        self._values[cell] = score

    def placement_score(self, cells: Iterable[Cell]) -> int | None:
        """Sum of stored scores over ``cells``, or None if any is occupied."""
        total = 0
        for cell in cells:
            value = self._values.get(cell, 0)
            if value == BLOCKED:
                return None
            total += value
        return total

    def occupied_cells(self) -> Iterator[Cell]:
        return (cell for cell, value in self._values.items() if value == BLOCKED)

    def scored_cells(self) -> Iterator[tuple[Cell, int]]:
        return ((cell, value) for cell, value in self._values.items() if value != BLOCKED)

    def clear(self) -> None:
        """Drop all cells and return the bounds to the empty state."""
        self._values = {}
        self._occupied_count = 0
        self.bounds = Bounds()
