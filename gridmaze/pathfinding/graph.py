"""
Implicit floor-cell graph of a maze grid.

Vertex ids are ``row * width + col`` for every cell; wall cells keep an empty
adjacency list, so they are never reached by a search. A floor cell lists its
floor neighbors in the fixed order West, East, North, South, which is what
makes breadth-first search results reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from scipy.sparse import csr_matrix

from gridmaze.core.grid import as_grid
from gridmaze.core.types import MazeCoordinates

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray


@dataclass
class PathGraph:
    """
    Adjacency lists over the cells of a grid.

    Attributes:
        width: Grid width (columns)
        height: Grid height (rows)
        adjacency: ``adjacency[v]`` lists the floor neighbors of vertex ``v``
        floor_cells: Number of floor cells
    """

    width: int
    height: int
    adjacency: list[list[int]]
    floor_cells: int

    @property
    def num_cells(self) -> int:
        return self.width * self.height

    @property
    def num_vertices(self) -> int:
        """Number of floor cells."""
        return self.floor_cells

    @property
    def num_edges(self) -> int:
        """Number of undirected floor-to-floor edges."""
        return sum(len(neighbors) for neighbors in self.adjacency) // 2

    def vertex_id(self, coordinates: MazeCoordinates | tuple[int, int]) -> int:
        coordinates = MazeCoordinates.coerce(coordinates)
        return coordinates.y * self.width + coordinates.x

    def coordinates_of(self, vertex: int) -> MazeCoordinates:
        return MazeCoordinates(vertex % self.width, vertex // self.width)

    def neighbors(self, vertex: int) -> list[int]:
        return self.adjacency[vertex]

    def to_adjacency_matrix(self) -> csr_matrix:
        """
        Sparse symmetric adjacency matrix of shape ``(width*height, width*height)``.

        Entry ``[i, j]`` is 1 when cells ``i`` and ``j`` are adjacent floor cells.
        """
        rows = []
        cols = []
        for vertex, neighbors in enumerate(self.adjacency):
            rows.extend([vertex] * len(neighbors))
            cols.extend(neighbors)

        data = np.ones(len(rows), dtype=np.int8)
        return csr_matrix((data, (rows, cols)), shape=(self.num_cells, self.num_cells))


def build_path_graph(grid: NDArray | Sequence[Sequence[int]]) -> PathGraph:
    """
    Build the floor-cell graph of ``grid``.

    The input is not modified. O(width * height) time and memory.

    Args:
        grid: Floor/wall grid (1 = floor, 0 = wall)

    Returns:
        Fresh ``PathGraph``
    """
    grid = as_grid(grid)
    height, width = grid.shape
    cells = grid.tolist()

    adjacency: list[list[int]] = []
    num_floor = 0
    for y in range(height):
        row = cells[y]
        for x in range(width):
            vertex = y * width + x
            neighbors: list[int] = []
            adjacency.append(neighbors)
            if not row[x]:
                continue

            num_floor += 1
            if x > 0 and row[x - 1]:  # West
                neighbors.append(vertex - 1)
            if x + 1 < width and row[x + 1]:  # East
                neighbors.append(vertex + 1)
            if y > 0 and cells[y - 1][x]:  # North
                neighbors.append(vertex - width)
            if y + 1 < height and cells[y + 1][x]:  # South
                neighbors.append(vertex + width)

    return PathGraph(int(width), int(height), adjacency, num_floor)
