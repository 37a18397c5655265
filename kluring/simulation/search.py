"""Placement search over the frontier.

Candidate anchors are restricted to those that land some footprint cell on
some frontier cell: ``anchor = frontier_cell - offset``. Any legal placement
other than the first one must touch the frontier, so this explores the
boundary instead of the whole plane.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from random import Random

from kluring.config.types import SearchStrategy
from kluring.domain.bag import ShapeBag
from kluring.domain.cell import Cell
from kluring.domain.field import ScoreField
from kluring.domain.frontier import Frontier
from kluring.domain.permutation import Permutation, all_permutations
from kluring.domain.shapes import Shape

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """A chosen orientation anchored at a world cell."""

    permutation: Permutation
    anchor: Cell
    score: int = 0

    @property
    def shape_id(self) -> int:
        return self.permutation.shape_id

    def cells(self, shape: Shape) -> tuple[Cell, ...]:
        return self.permutation.cells(shape, self.anchor)


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search: the placement (if any) and anchors evaluated."""

    placement: Placement | None
    attempts: int


def permutations_for(shape: Shape, all_orientations: bool) -> tuple[Permutation, ...]:
    if all_orientations:
        return all_permutations(shape.shape_id)
    return (Permutation(shape_id=shape.shape_id),)


def candidate_anchors(
    offsets: Sequence[Cell], frontier_cells: Sequence[Cell]
) -> Iterator[Cell]:
    """Distinct anchors aligning some offset with some frontier cell.

    Frontier order is preserved: anchors for earlier frontier cells come first.
    """
    seen: set[Cell] = set()
    for frontier_cell in frontier_cells:
        for offset in offsets:
            anchor = frontier_cell.offset_from(offset)
            if anchor in seen:
                continue
            seen.add(anchor)
            yield anchor


def find_placement(
    catalog: Sequence[Shape],
    bag: ShapeBag,
    field: ScoreField,
    frontier: Frontier,
    *,
    rng: Random,
    seed_cell: Cell,
    all_orientations: bool = False,
    strategy: SearchStrategy = SearchStrategy.BEST_SCORE,
) -> SearchOutcome:
    """Choose the placement for this tick.

    An empty field bootstraps with a random orientation at ``seed_cell``.
    Otherwise every available shape is tried at every frontier-aligned
    anchor. ``BEST_SCORE`` keeps the highest placement score, with ties
    going to the candidate found last. ``FIRST_FIT`` returns the first
    legal candidate in search order (bag order, then ranked frontier).
    """
    if field.is_empty():
        permutation = bag.random_permutation(rng)
        if permutation is None:
            logger.debug("bootstrap draw hit a depleted shape; no placement")
            return SearchOutcome(placement=None, attempts=1)
        return SearchOutcome(placement=Placement(permutation, seed_cell), attempts=1)

    ranked = frontier.ranked()
    attempts = 0
    best: Placement | None = None
    for shape in bag.available_shapes():
        for permutation in permutations_for(shape, all_orientations):
            offsets = permutation.offsets(shape)
            for anchor in candidate_anchors(offsets, ranked):
                attempts += 1
                score = field.placement_score(anchor.shifted(offset) for offset in offsets)
                if score is None:
                    continue
                candidate = Placement(permutation, anchor, score)
                if strategy is SearchStrategy.FIRST_FIT:
                    return SearchOutcome(placement=candidate, attempts=attempts)
                if best is None or score >= best.score:
                    best = candidate

    if best is None:
        logger.debug("no legal placement after %d attempts", attempts)
    return SearchOutcome(placement=best, attempts=attempts)
