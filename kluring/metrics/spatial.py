"""Spatial metrics over the occupied region: raster, connectivity, fill ratio."""

from __future__ import annotations

import networkx as nx
import numpy as np

from kluring.domain.field import ScoreField


def occupancy_grid(field: ScoreField) -> np.ndarray:
    """Rasterize occupied cells over the bounds.

    Returns a ``uint8`` array of shape ``(height, width)`` where row ``r``,
    column ``c`` is cell ``(min_x + c, min_y + r)``. Empty field gives a
    ``(0, 0)`` array.
    """
    bounds = field.bounds
    if bounds.is_default():
        return np.zeros((0, 0), dtype=np.uint8)
    grid = np.zeros((bounds.height(), bounds.width()), dtype=np.uint8)
    for x, y in field.occupied_cells():
        grid[y - bounds.min_y, x - bounds.min_x] = 1
    return grid


def occupancy_graph(field: ScoreField) -> nx.Graph:
    """Graph of occupied cells with an edge per orthogonally adjacent pair."""
    occupied = set(field.occupied_cells())
    graph = nx.Graph()
    graph.add_nodes_from(occupied)
    for cell in occupied:
        # Right and up only, so each pair is added once.
        for neighbor in (cell.shifted((1, 0)), cell.shifted((0, 1))):
            if neighbor in occupied:
                graph.add_edge(cell, neighbor)
    return graph


def occupied_component_count(field: ScoreField) -> int:
    """Number of 4-connected components of the occupied region (0 when empty)."""
    if field.is_empty():
        return 0
    return nx.number_connected_components(occupancy_graph(field))


def fill_ratio(field: ScoreField) -> float:
    """Occupied cells divided by bounds area; NaN while nothing is placed."""
    area = field.bounds.area()
    if area == 0:
        return float("nan")
    return field.occupied_count / area
