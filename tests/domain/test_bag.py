"""Tests for kluring.domain.bag module."""

from __future__ import annotations

from random import Random

import pytest

from kluring.domain.bag import ShapeBag
from kluring.domain.shapes import Shape, load_catalog


class TestShapeBagCounts:
    def test_reset_sets_every_count(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        bag.reset(4)
        assert all(count == 4 for count in bag.counts().values())
        assert bag.total_remaining() == 24

    def test_negative_reset_rejected(self) -> None:
        bag = ShapeBag(load_catalog())
        with pytest.raises(ValueError, match="count must be >= 0"):
            bag.reset(-1)

    def test_try_consume_decrements(self) -> None:
        bag = ShapeBag(load_catalog(), count=2)
        assert bag.try_consume(3) is True
        assert bag.remaining(3) == 1

    def test_try_consume_never_goes_below_zero(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        assert bag.try_consume(0) is True
        assert bag.try_consume(0) is False
        assert bag.remaining(0) == 0

    def test_is_empty_after_everything_consumed(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        for shape_id in range(6):
            bag.try_consume(shape_id)
        assert bag.is_empty()

    def test_catalog_ids_must_match_positions(self) -> None:
        with pytest.raises(ValueError, match="catalog position 0 holds shape 1"):
            ShapeBag([Shape.from_mask(1, "X")])

    def test_empty_catalog_rejected(self) -> None:
        with pytest.raises(ValueError, match="catalog must not be empty"):
            ShapeBag([])


class TestAvailableShapes:
    def test_catalog_order(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        assert [shape.shape_id for shape in bag.available_shapes()] == list(range(6))

    def test_depleted_shape_excluded(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        bag.try_consume(2)
        ids = [shape.shape_id for shape in bag.available_shapes()]
        assert 2 not in ids
        assert ids == [0, 1, 3, 4, 5]

    def test_is_lazy(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        shapes = bag.available_shapes()
        bag.try_consume(0)
        # Generator evaluates counts when iterated, not when created.
        assert [shape.shape_id for shape in shapes][0] == 1


class TestRandomPermutation:
    def test_returns_none_when_everything_depleted(self) -> None:
        bag = ShapeBag(load_catalog(), count=0)
        rng = Random(0)
        assert all(bag.random_permutation(rng) is None for _ in range(20))

    def test_samples_whole_catalog_before_checking_stock(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        for shape_id in range(1, 6):
            bag.try_consume(shape_id)
        rng = Random(7)
        draws = [bag.random_permutation(rng) for _ in range(60)]
        drawn = [d for d in draws if d is not None]
        assert any(d is None for d in draws)
        assert drawn
        assert all(d.shape_id == 0 for d in drawn)

    def test_draw_does_not_consume(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        bag.random_permutation(Random(0))
        assert bag.total_remaining() == 6

    def test_draw_covers_rotations_and_flips(self) -> None:
        bag = ShapeBag(load_catalog(), count=1)
        rng = Random(3)
        draws = [bag.random_permutation(rng) for _ in range(200)]
        assert {d.rotation for d in draws if d is not None} == {0, 1, 2, 3}
        assert {d.flipped for d in draws if d is not None} == {False, True}
