"""Greedy polyomino tiling: placement search and scoring engine."""

from kluring.config.types import SearchStrategy, SimulationConfig
from kluring.errors import InvariantViolation, KluringError
from kluring.simulation.engine import Simulation

__all__ = [
    "InvariantViolation",
    "KluringError",
    "SearchStrategy",
    "Simulation",
    "SimulationConfig",
]

__version__ = "0.1.0"
