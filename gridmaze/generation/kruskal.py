"""
Randomized Kruskal.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.core.disjoint_set import DisjointSet
from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import Cell, CellGrid


class KruskalGenerator(MazeGenerator):
    """
    Randomized Kruskal's algorithm.

    Treats the maze as a minimum spanning tree problem with random edge
    weights: every cell starts in its own set, walls are visited in random
    order and a wall is removed whenever the cells on either side belong to
    different sets.

    Algorithm:
    1. Collect every wall between adjacent cells (east and south of each cell)
    2. Shuffle the walls
    3. For each wall: if its cells are in different sets, link them and merge
       the sets; stop once a single set remains

    Characteristics:
    - O(n log* n) with union-find
    - Many short dead ends, low bias
    """

    algorithm = MazeAlgorithm.KRUSKAL

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        walls: list[tuple[Cell, Cell]] = []
        for row in grid.cells:
            for cell in row:
                if cell.col + 1 < grid.cols:
                    walls.append((cell, row[cell.col + 1]))
                if cell.row + 1 < grid.rows:
                    walls.append((cell, grid.cells[cell.row + 1][cell.col]))

        rng.shuffle(walls)

        sets = DisjointSet(grid.rows * grid.cols)
        for cell, neighbor in walls:
            if sets.components == 1:
                break
            if sets.union(grid.index_of(cell), grid.index_of(neighbor)):
                cell.link(neighbor)
