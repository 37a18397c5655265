"""Domain layer: coordinates, shapes, orientations, bag, field and frontier."""

from kluring.domain.bag import ShapeBag
from kluring.domain.cell import NEIGHBORHOOD, Cell
from kluring.domain.field import Bounds, ScoreField
from kluring.domain.frontier import Frontier, FrontierCell
from kluring.domain.permutation import (
    Permutation,
    all_permutations,
    apply_permutation,
    flip_offsets,
    rotate_offsets,
)
from kluring.domain.shapes import SHAPE_MASKS, Shape, load_catalog

__all__ = [
    "Bounds",
    "Cell",
    "Frontier",
    "FrontierCell",
    "NEIGHBORHOOD",
    "Permutation",
    "SHAPE_MASKS",
    "ScoreField",
    "Shape",
    "ShapeBag",
    "all_permutations",
    "apply_permutation",
    "flip_offsets",
    "load_catalog",
    "rotate_offsets",
]
