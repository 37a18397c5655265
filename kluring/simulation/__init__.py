"""Simulation layer: placement search, scoring, engine and trace persistence."""

from kluring.simulation.engine import (
    BoardSummary,
    FrontierEvent,
    PlacementEvent,
    Simulation,
    SimulationObserver,
    SimulationState,
    parse_restock_count,
)
from kluring.simulation.persistence import PlacementLogRecorder, flush_columns
from kluring.simulation.scoring import score_frontier
from kluring.simulation.search import Placement, SearchOutcome, find_placement

__all__ = [
    "BoardSummary",
    "FrontierEvent",
    "Placement",
    "PlacementEvent",
    "PlacementLogRecorder",
    "SearchOutcome",
    "Simulation",
    "SimulationObserver",
    "SimulationState",
    "find_placement",
    "flush_columns",
    "parse_restock_count",
    "score_frontier",
]
