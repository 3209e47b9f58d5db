"""
Perfect-maze verification on physical floor/wall grids.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.sparse.csgraph import connected_components

from gridmaze.core.grid import FLOOR, as_grid
from gridmaze.pathfinding.graph import build_path_graph

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


def floor_components(grid: NDArray | Sequence[Sequence[int]]) -> NDArray[np.int32]:
    """
    Label the 4-connected floor regions of a grid.

    Returns:
        Array shaped like ``grid``: ``-1`` for walls, otherwise a region label
        numbered from 0 in row-major order of first appearance
    """
    grid = as_grid(grid)
    graph = build_path_graph(grid)
    _, labels = connected_components(graph.to_adjacency_matrix(), directed=False)

    floor_mask = grid.reshape(-1) == FLOOR
    floor_labels = labels[floor_mask]
    # Relabel so that region ids are dense over floor cells only
    _, first_index, dense = np.unique(floor_labels, return_index=True, return_inverse=True)
    order = np.argsort(np.argsort(first_index))

    result = np.full(grid.size, -1, dtype=np.int32)
    result[floor_mask] = order[dense.reshape(-1)]
    return result.reshape(grid.shape)


def verify_perfect_maze(grid: NDArray | Sequence[Sequence[int]]) -> dict[str, Any]:
    """
    Verify that a grid is a perfect maze (fully connected, no loops).

    A perfect maze must satisfy:
    1. Connectivity: All floor cells form one 4-connected region
    2. Acyclicity: Exactly (n-1) floor-to-floor edges for n floor cells

    Args:
        grid: Floor/wall grid to verify

    Returns:
        Dictionary with verification results including:
        - is_perfect: Overall validity
        - is_connected: Connectivity check
        - is_no_loops: Acyclicity check
        - floor_cells: Number of floor cells
        - components: Number of floor regions
        - edge_count: Number of floor-to-floor adjacencies
        - expected_edges: Edge count of a tree on the floor cells
    """
    grid = as_grid(grid)
    graph = build_path_graph(grid)

    floor_cells = graph.num_vertices
    labels = floor_components(grid)
    components = int(labels.max()) + 1 if floor_cells else 0

    edge_count = graph.num_edges
    expected_edges = max(floor_cells - 1, 0)

    is_connected = components == 1
    is_no_loops = edge_count == expected_edges if is_connected else edge_count == floor_cells - components

    return {
        "is_perfect": is_connected and is_no_loops,
        "is_connected": is_connected,
        "is_no_loops": is_no_loops,
        "floor_cells": floor_cells,
        "components": components,
        "edge_count": edge_count,
        "expected_edges": expected_edges,
    }
