"""Simulation engine: tick driver, commit, scoring and reset.

One :class:`Simulation` owns the bag, the field (with its bounds) and the
frontier. Each tick runs exactly one of:

1. reset, when a restart was requested since the last tick;
2. step: search, then commit, then scoring, strictly in that order.

Observers receive a :class:`PlacementEvent` per commit and a
:class:`FrontierEvent` per rescored frontier cell.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from random import Random
from typing import Protocol

from kluring.config.constants import DEFAULT_RESTOCK_COUNT
from kluring.config.types import SimulationConfig
from kluring.domain.bag import ShapeBag
from kluring.domain.cell import Cell
from kluring.domain.field import Bounds, ScoreField
from kluring.domain.frontier import Frontier
from kluring.domain.shapes import Shape, load_catalog
from kluring.errors import InvariantViolation
from kluring.simulation.scoring import score_frontier
from kluring.simulation.search import Placement, find_placement

logger = logging.getLogger(__name__)


class SimulationState(Enum):
    """Reset controller state; RESETTING only lasts for the reset call."""

    RUNNING = "running"
    RESETTING = "resetting"


@dataclass(frozen=True)
class PlacementEvent:
    """A committed placement, for collaborators that materialize tiles."""

    step: int
    shape_id: int
    rotation: int
    flipped: bool
    anchor: Cell
    cells: tuple[Cell, ...]


@dataclass(frozen=True)
class FrontierEvent:
    """A frontier cell's scores after a scoring pass."""

    step: int
    cell: Cell
    adjacency_score: int
    distance_score: int


class SimulationObserver(Protocol):
    def on_placement(self, event: PlacementEvent) -> None: ...

    def on_frontier_update(self, event: FrontierEvent) -> None: ...


@dataclass(frozen=True)
class BoardSummary:
    """Read-only snapshot for display collaborators."""

    bounds: Bounds
    width: int
    height: int
    area: int
    attempts: int
    placements: int
    occupied_cells: int
    frontier_size: int
    bag_counts: dict[int, int] = field(default_factory=dict)

    def to_dict(self) -> dict[str, object]:
        return {
            "width": self.width,
            "height": self.height,
            "area": self.area,
            "attempts": self.attempts,
            "placements": self.placements,
            "occupied_cells": self.occupied_cells,
            "frontier_size": self.frontier_size,
            "bag_counts": {str(k): v for k, v in self.bag_counts.items()},
        }


def parse_restock_count(raw: object) -> int:
    """Parse external restock input; unusable values fall back to the default."""
    if raw is None:
        return DEFAULT_RESTOCK_COUNT
    value: int | None = None
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    elif isinstance(raw, str):
        try:
            value = int(raw.strip())
        except ValueError:
            value = None
    if value is None or value < 0:
        logger.warning(
            "unusable restock count %r; falling back to %d", raw, DEFAULT_RESTOCK_COUNT
        )
        return DEFAULT_RESTOCK_COUNT
    return value


class Simulation:
    """Greedy tiling of the plane, one placement attempt per tick."""

    def __init__(
        self,
        config: SimulationConfig | None = None,
        catalog: Sequence[Shape] | None = None,
        rng: Random | None = None,
    ) -> None:
        self.config = config or SimulationConfig()
        self.catalog: tuple[Shape, ...] = (
            tuple(catalog) if catalog is not None else load_catalog()
        )
        self.rng = rng if rng is not None else Random(self.config.sim_seed)
        self.seed_cell = Cell(*self.config.seed_cell)
        self.bag = ShapeBag(self.catalog, self.config.restock_count)
        self.field = ScoreField()
        self.frontier = Frontier()
        self.state = SimulationState.RUNNING
        self.attempts = 0
        self.placements = 0
        self.steps_taken = 0
        self._observers: list[SimulationObserver] = []
        self._restart_requested = False
        self._restart_count: object = None

    def add_observer(self, observer: SimulationObserver) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: SimulationObserver) -> None:
        self._observers.remove(observer)

    # -- external events ---------------------------------------------------

    def request_restart(self, count: object = None) -> None:
        """Latch a restart; the next :meth:`tick` performs it instead of a step."""
        self._restart_requested = True
        self._restart_count = count

    def tick(self) -> Placement | None:
        if self._restart_requested:
            count = self._restart_count
            self._restart_requested = False
            self._restart_count = None
            self.reset(count)
            return None
        return self.step()

    def run(self, steps: int) -> int:
        """Tick ``steps`` times; return how many placements were committed."""
        before = self.placements
        for _ in range(steps):
            self.tick()
        return self.placements - before

    # -- pipeline ----------------------------------------------------------

    def step(self) -> Placement | None:
        """Search, commit and rescore once. None when nothing could be placed."""
        outcome = find_placement(
            self.catalog,
            self.bag,
            self.field,
            self.frontier,
            rng=self.rng,
            seed_cell=self.seed_cell,
            all_orientations=self.config.all_orientations,
            strategy=self.config.strategy,
        )
        self.attempts += outcome.attempts
        placement = outcome.placement
        if placement is not None:
            self.commit(placement)
            self.update_scores()
        self.steps_taken += 1
        return placement

    def commit(self, placement: Placement) -> list[Cell]:
        """Occupy the placement's cells, grow the frontier and take from the bag."""
        shape = self.catalog[placement.shape_id]
        cells = placement.cells(shape)
        for cell in cells:
            self.field.occupy(cell)
            self.frontier.discard(cell)

        border: set[Cell] = set()
        for cell in cells:
            border.update(cell.neighbors())
        for cell in border:
            if not self.field.is_occupied(cell):
                self.frontier.ensure(cell)

        if not self.bag.try_consume(placement.shape_id):
            raise InvariantViolation(f"shape {placement.shape_id} placed with none remaining")
        self.placements += 1

        permutation = placement.permutation
        logger.debug(
            "placed shape %d (rot=%d, flip=%s) at %s, score %d",
            permutation.shape_id,
            permutation.rotation,
            permutation.flipped,
            placement.anchor,
            placement.score,
        )
        event = PlacementEvent(
            step=self.steps_taken,
            shape_id=permutation.shape_id,
            rotation=permutation.rotation,
            flipped=permutation.flipped,
            anchor=placement.anchor,
            cells=cells,
        )
        for observer in self._observers:
            observer.on_placement(event)
        return list(cells)

    def update_scores(self) -> None:
        updated = score_frontier(self.field, self.frontier, self.seed_cell)
        if not self._observers:
            return
        for entry in updated:
            event = FrontierEvent(
                step=self.steps_taken,
                cell=entry.cell,
                adjacency_score=entry.adjacency_score,
                distance_score=entry.distance_score,
            )
            for observer in self._observers:
                observer.on_frontier_update(event)

    def reset(self, count: object = None) -> None:
        """Discard the board and refill the bag with ``count`` of every shape."""
        self.state = SimulationState.RESETTING
        restock = parse_restock_count(count)
        self.field.clear()
        self.frontier.clear()
        self.bag.reset(restock)
        self.attempts = 0
        self.placements = 0
        self.state = SimulationState.RUNNING
        logger.info("simulation reset; bag restocked to %d per shape", restock)

    # -- read-only views ---------------------------------------------------

    @property
    def bounds(self) -> Bounds:
        return self.field.bounds

    def summary(self) -> BoardSummary:
        bounds = self.field.bounds
        width, height = (0, 0) if bounds.is_default() else (bounds.width(), bounds.height())
        return BoardSummary(
            bounds=bounds.copy(),
            width=width,
            height=height,
            area=width * height,
            attempts=self.attempts,
            placements=self.placements,
            occupied_cells=self.field.occupied_count,
            frontier_size=len(self.frontier),
            bag_counts=self.bag.counts(),
        )

    def status_line(self) -> str:
        summary = self.summary()
        attempts = 0 if self.field.bounds.is_default() else summary.attempts
        return (
            f"Area: {summary.area} ({summary.width} * {summary.height}) "
            f"({attempts} attempts)"
        )
