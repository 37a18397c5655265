"""Per-shape supply counters."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from random import Random

from kluring.config.constants import DEFAULT_RESTOCK_COUNT, NUM_ROTATIONS
from kluring.domain.permutation import Permutation
from kluring.domain.shapes import Shape


class ShapeBag:
    """Remaining count per catalog shape.

    Shape ids index into the catalog, so counts are kept in a list parallel
    to it.
    """

    def __init__(self, catalog: Sequence[Shape], count: int = DEFAULT_RESTOCK_COUNT) -> None:
        if not catalog:
            raise ValueError("catalog must not be empty")
        for index, shape in enumerate(catalog):
            if shape.shape_id != index:
                raise ValueError(f"catalog position {index} holds shape {shape.shape_id}")
        self.catalog: tuple[Shape, ...] = tuple(catalog)
        self._remaining: list[int] = []
        self.reset(count)

    def reset(self, count: int) -> None:
        """Set every shape's remaining count to ``count``."""
        if count < 0:
            raise ValueError("count must be >= 0")
        self._remaining = [count] * len(self.catalog)

    def available_shapes(self) -> Iterator[Shape]:
        """Lazily yield shapes with stock left, in catalog order."""
        return (shape for shape in self.catalog if self._remaining[shape.shape_id] > 0)

    def try_consume(self, shape_id: int) -> bool:
        """Take one unit of ``shape_id``; return False when none is left."""
        if self._remaining[shape_id] <= 0:
            return False
        self._remaining[shape_id] -= 1
        return True

    def random_permutation(self, rng: Random) -> Permutation | None:
        """Draw a uniformly random shape and orientation.

        The shape is drawn from the whole catalog and its stock is checked
        only afterwards, so a depleted draw yields None even when other
        shapes are still available.
        """
        shape_id = rng.randrange(len(self.catalog))
        rotation = rng.randrange(NUM_ROTATIONS)
        flipped = rng.random() < 0.5
        if self._remaining[shape_id] <= 0:
            return None
        return Permutation(shape_id=shape_id, rotation=rotation, flipped=flipped)

    def remaining(self, shape_id: int) -> int:
        return self._remaining[shape_id]

    def counts(self) -> dict[int, int]:
        return {shape.shape_id: self._remaining[shape.shape_id] for shape in self.catalog}

    def total_remaining(self) -> int:
        return sum(self._remaining)

    def is_empty(self) -> bool:
        return self.total_remaining() == 0
