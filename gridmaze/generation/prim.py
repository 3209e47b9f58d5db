"""
Randomized Prim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import Cell, CellGrid


class PrimGenerator(MazeGenerator):
    """
    Randomized Prim's algorithm (frontier based).

    Algorithm:
    1. Mark a random cell as part of the maze; its neighbors form the frontier
    2. While the frontier is not empty:
       - Remove a random frontier cell
       - Link it to a random neighbor already in the maze
       - Add its unvisited neighbors to the frontier

    Characteristics:
    - Grows outward from the start cell
    - Many short dead ends and a high branching factor
    """

    algorithm = MazeAlgorithm.PRIM

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        frontier: list[Cell] = []
        in_frontier: set[Cell] = set()

        def add_frontier(cell: Cell) -> None:
            for neighbor in grid.get_unvisited_neighbors(cell):
                if neighbor not in in_frontier:
                    in_frontier.add(neighbor)
                    frontier.append(neighbor)

        start_cell = grid.random_cell(rng)
        start_cell.visited = True
        add_frontier(start_cell)

        while frontier:
            # swap-remove keeps the pick O(1); list order stays deterministic
            idx = rng.next_int(0, len(frontier) - 1)
            cell = frontier[idx]
            frontier[idx] = frontier[-1]
            frontier.pop()

            cell.link(rng.choice(grid.get_visited_neighbors(cell)))
            cell.visited = True
            add_frontier(cell)
