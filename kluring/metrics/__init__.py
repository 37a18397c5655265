"""Metrics over simulation state."""

from kluring.metrics.spatial import (
    fill_ratio,
    occupancy_graph,
    occupancy_grid,
    occupied_component_count,
)

__all__ = [
    "fill_ratio",
    "occupancy_graph",
    "occupancy_grid",
    "occupied_component_count",
]
