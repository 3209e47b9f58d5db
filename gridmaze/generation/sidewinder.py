"""
Sidewinder.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import Cell, CellGrid


class SidewinderGenerator(MazeGenerator):
    """
    Sidewinder algorithm.

    Processes rows from the top. The first row becomes one long east-west
    corridor. In every later row a *run* of cells grows eastward; at each cell
    the run is either extended east or closed out, in which case one random
    member of the run is linked north. The last cell of a row always closes
    the run.

    Characteristics:
    - O(n) time, only the current run in memory
    - Unbroken corridor along the top row
    - Every cell of a lower row reaches the top row by moving only east/west
      inside its run and then north
    """

    algorithm = MazeAlgorithm.SIDEWINDER

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        for row in grid.cells:
            run: list[Cell] = []
            for cell in row:
                at_east_boundary = cell.col == grid.cols - 1

                if cell.row == 0:
                    if not at_east_boundary:
                        cell.link(row[cell.col + 1])
                    continue

                run.append(cell)
                if at_east_boundary or rng.next_bool():
                    member = rng.choice(run)
                    member.link(grid.cells[member.row - 1][member.col])
                    run.clear()
                else:
                    cell.link(row[cell.col + 1])
