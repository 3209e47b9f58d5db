"""
Hunt-and-Kill.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import Cell, CellGrid


class HuntAndKillGenerator(MazeGenerator):
    """
    Hunt-and-Kill algorithm.

    Algorithm:
    1. Walk: from the current cell, link a random unvisited neighbor and move there
    2. Hunt: when the walk dead-ends, scan rows top to bottom for the first
       unvisited cell that touches a visited one, link it to a random visited
       neighbor and resume the walk from it
    3. Stop when the hunt finds nothing

    Characteristics:
    - Long corridors like the backtracker, but no stack
    - The hunt skips rows that are already fully visited
    """

    algorithm = MazeAlgorithm.HUNT_AND_KILL

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        current: Cell | None = grid.random_cell(rng)
        current.visited = True
        # Rows above this index contain no unvisited cells
        scan_from = 0

        while current is not None:
            unvisited = grid.get_unvisited_neighbors(current)
            if unvisited:
                neighbor = rng.choice(unvisited)
                current.link(neighbor)
                neighbor.visited = True
                current = neighbor
            else:
                current, scan_from = self._hunt(grid, rng, scan_from)

    @staticmethod
    def _hunt(grid: CellGrid, rng: RandomStream, scan_from: int) -> tuple[Cell | None, int]:
        for row_idx in range(scan_from, grid.rows):
            row_complete = True
            for cell in grid.cells[row_idx]:
                if cell.visited:
                    continue
                row_complete = False
                visited_neighbors = grid.get_visited_neighbors(cell)
                if visited_neighbors:
                    cell.link(rng.choice(visited_neighbors))
                    cell.visited = True
                    return cell, scan_from
            if row_complete and row_idx == scan_from:
                scan_from += 1
        return None, scan_from
