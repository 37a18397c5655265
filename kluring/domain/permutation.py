"""Rotation and flip of shape footprints.

Rotations are counter-clockwise quarter turns applied with integer 2x2
matrices, so every orientation is exact. A flip mirrors across the y-axis
and is applied after the rotation. Results are not re-centered: callers
treat them as offsets from whatever anchor they choose.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from kluring.config.constants import NUM_ROTATIONS
from kluring.domain.cell import Cell
from kluring.domain.shapes import Shape

# (a, b, c, d) encodes [[a, b], [c, d]]: (x, y) -> (a*x + b*y, c*x + d*y)
ROTATION_MATRICES: tuple[tuple[int, int, int, int], ...] = (
    (1, 0, 0, 1),
    (0, -1, 1, 0),
    (-1, 0, 0, -1),
    (0, 1, -1, 0),
)


@dataclass(frozen=True)
class Permutation:
    """One orientation of one catalog shape."""

    shape_id: int
    rotation: int = 0
    flipped: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.rotation < NUM_ROTATIONS:
            raise ValueError(f"rotation must be in [0, {NUM_ROTATIONS - 1}]")

    def offsets(self, shape: Shape) -> tuple[Cell, ...]:
        if shape.shape_id != self.shape_id:
            raise ValueError(
                f"permutation is for shape {self.shape_id}, got shape {shape.shape_id}"
            )
        return apply_permutation(shape.offsets, self.rotation, self.flipped)

    def cells(self, shape: Shape, anchor: Cell) -> tuple[Cell, ...]:
        """World cells covered when this orientation is placed at ``anchor``."""
        return tuple(anchor.shifted(offset) for offset in self.offsets(shape))


def rotate_offsets(offsets: Iterable[tuple[int, int]], rotation: int) -> tuple[Cell, ...]:
    a, b, c, d = ROTATION_MATRICES[rotation % NUM_ROTATIONS]
    return tuple(Cell(a * x + b * y, c * x + d * y) for x, y in offsets)


def flip_offsets(offsets: Iterable[tuple[int, int]]) -> tuple[Cell, ...]:
    return tuple(Cell(-x, y) for x, y in offsets)


def apply_permutation(
    offsets: Iterable[tuple[int, int]], rotation: int, flipped: bool
) -> tuple[Cell, ...]:
    rotated = rotate_offsets(offsets, rotation)
    return flip_offsets(rotated) if flipped else rotated


def all_permutations(shape_id: int) -> tuple[Permutation, ...]:
    """All 8 orientations, rotation-major, unflipped before flipped."""
    return tuple(
        Permutation(shape_id=shape_id, rotation=rotation, flipped=flipped)
        for rotation in range(NUM_ROTATIONS)
        for flipped in (False, True)
    )
