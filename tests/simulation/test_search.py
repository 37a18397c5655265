"""Tests for kluring.simulation.search (placement search)."""

from __future__ import annotations

from random import Random

from kluring.config.types import SearchStrategy
from kluring.domain.bag import ShapeBag
from kluring.domain.cell import Cell
from kluring.domain.field import ScoreField
from kluring.domain.frontier import Frontier
from kluring.domain.shapes import Shape, load_catalog
from kluring.simulation.search import candidate_anchors, find_placement, permutations_for

ORIGIN = Cell(0, 0)


def _board(
    occupied: list[Cell], scores: dict[Cell, int], frontier_cells: list[Cell] | None = None
) -> tuple[ScoreField, Frontier]:
    """Field with ``occupied`` cells and frontier entries scored per ``scores``."""
    field = ScoreField()
    for cell in occupied:
        field.occupy(cell)
    frontier = Frontier()
    if frontier_cells is None:
        frontier_cells = sorted(
            {n for cell in occupied for n in cell.neighbors() if not field.is_occupied(n)}
        )
    for cell in frontier_cells:
        entry = frontier.ensure(cell)
        entry.distance_score = scores.get(cell, 0)
        field.set_score(cell, entry.score)
    return field, frontier


class TestCandidateAnchors:
    def test_anchor_aligns_offset_with_frontier_cell(self) -> None:
        offsets = [Cell(0, 0), Cell(1, 0)]
        anchors = list(candidate_anchors(offsets, [Cell(5, 5)]))
        assert anchors == [Cell(5, 5), Cell(4, 5)]

    def test_duplicate_anchors_yielded_once(self) -> None:
        offsets = [Cell(0, 0), Cell(1, 0)]
        anchors = list(candidate_anchors(offsets, [Cell(0, 0), Cell(1, 0)]))
        assert anchors == [Cell(0, 0), Cell(-1, 0), Cell(1, 0)]

    def test_permutations_for_single_or_all(self) -> None:
        shape = load_catalog()[1]
        assert len(permutations_for(shape, False)) == 1
        assert permutations_for(shape, False)[0].rotation == 0
        assert len(permutations_for(shape, True)) == 8


class TestBootstrap:
    def test_empty_field_anchors_at_seed(self) -> None:
        catalog = load_catalog()
        bag = ShapeBag(catalog, count=1)
        outcome = find_placement(
            catalog, bag, ScoreField(), Frontier(), rng=Random(0), seed_cell=Cell(32, 32)
        )
        assert outcome.placement is not None
        assert outcome.placement.anchor == Cell(32, 32)
        assert outcome.attempts == 1

    def test_bootstrap_on_depleted_draw_places_nothing(self) -> None:
        catalog = load_catalog()
        bag = ShapeBag(catalog, count=0)
        outcome = find_placement(
            catalog, bag, ScoreField(), Frontier(), rng=Random(0), seed_cell=ORIGIN
        )
        assert outcome.placement is None


class TestBestScore:
    def test_picks_highest_scoring_frontier_cell(self) -> None:
        catalog = (Shape.from_mask(0, "X"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board(
            [ORIGIN], {Cell(1, 0): 3, Cell(0, 1): 7, Cell(-1, 0): 2, Cell(0, -1): 1}
        )
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        assert outcome.placement is not None
        assert outcome.placement.anchor == Cell(0, 1)
        assert outcome.placement.score == 7
        assert outcome.attempts == 4

    def test_score_sums_footprint(self) -> None:
        catalog = (Shape.from_mask(0, "XX"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board([ORIGIN], {Cell(0, 1): 5})
        field.set_score(Cell(1, 1), 4)
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        assert outcome.placement is not None
        assert outcome.placement.anchor == Cell(0, 1)
        assert outcome.placement.score == 9

    def test_overlapping_candidates_excluded_even_if_high_scoring(self) -> None:
        # Every horizontal tromino through (1, 0) hits (0, 0) or (2, 0).
        catalog = (Shape.from_mask(0, "XXX"),)
        bag = ShapeBag(catalog, count=1)
        occupied = [Cell(0, 0), Cell(2, 0)]
        field, frontier = _board(occupied, {Cell(1, 0): 50, Cell(0, 1): 1})
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        placement = outcome.placement
        assert placement is not None
        cells = placement.cells(catalog[0])
        assert Cell(1, 0) not in cells
        assert not any(field.is_occupied(cell) for cell in cells)
        assert placement.score < 50

    def test_depleted_shape_never_selected(self) -> None:
        catalog = (Shape.from_mask(0, "X"), Shape.from_mask(1, "XX"))
        bag = ShapeBag(catalog, count=1)
        bag.try_consume(1)
        field, frontier = _board([ORIGIN], {Cell(1, 0): 1})
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        assert outcome.placement is not None
        assert outcome.placement.shape_id == 0

    def test_no_available_shape_means_no_placement(self) -> None:
        catalog = (Shape.from_mask(0, "X"),)
        bag = ShapeBag(catalog, count=0)
        field, frontier = _board([ORIGIN], {})
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        assert outcome.placement is None
        assert outcome.attempts == 0

    def test_no_legal_anchor_means_no_placement(self) -> None:
        # Lone frontier cell boxed in vertically; a vertical domino cannot fit.
        catalog = (Shape.from_mask(0, "X\nX"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board(
            [Cell(0, 0), Cell(1, 1), Cell(1, -1)], {}, frontier_cells=[Cell(1, 0)]
        )
        outcome = find_placement(catalog, bag, field, frontier, rng=Random(0), seed_cell=ORIGIN)
        assert outcome.placement is None
        assert outcome.attempts == 2


class TestOrientations:
    def test_all_orientations_finds_rotated_fit(self) -> None:
        catalog = (Shape.from_mask(0, "X\nX"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board(
            [Cell(0, 0), Cell(1, 1), Cell(1, -1)], {}, frontier_cells=[Cell(1, 0)]
        )
        outcome = find_placement(
            catalog,
            bag,
            field,
            frontier,
            rng=Random(0),
            seed_cell=ORIGIN,
            all_orientations=True,
        )
        placement = outcome.placement
        assert placement is not None
        assert placement.permutation.rotation in (1, 3)
        cells = placement.cells(catalog[0])
        assert Cell(1, 0) in cells
        assert not any(field.is_occupied(cell) for cell in cells)


class TestFirstFit:
    def test_returns_first_legal_candidate_in_ranked_order(self) -> None:
        catalog = (Shape.from_mask(0, "X"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board([ORIGIN], {Cell(-1, 0): 9, Cell(1, 0): 2})
        outcome = find_placement(
            catalog,
            bag,
            field,
            frontier,
            rng=Random(0),
            seed_cell=ORIGIN,
            strategy=SearchStrategy.FIRST_FIT,
        )
        assert outcome.placement is not None
        assert outcome.placement.anchor == Cell(-1, 0)
        assert outcome.attempts == 1

    def test_first_fit_skips_illegal_candidates(self) -> None:
        catalog = (Shape.from_mask(0, "XX"),)
        bag = ShapeBag(catalog, count=1)
        field, frontier = _board([ORIGIN], {Cell(-1, 0): 9})
        outcome = find_placement(
            catalog,
            bag,
            field,
            frontier,
            rng=Random(0),
            seed_cell=ORIGIN,
            strategy=SearchStrategy.FIRST_FIT,
        )
        placement = outcome.placement
        assert placement is not None
        # Anchor (-1, 0) would cover the origin; (-2, 0) is the next candidate.
        assert placement.anchor == Cell(-2, 0)
        assert outcome.attempts == 2
