"""
Recursive Division.

Unlike the passage carvers, this algorithm is a wall adder: it starts from an
open field and keeps splitting it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from gridmaze.generation.base import MazeAlgorithm, MazeGenerator

if TYPE_CHECKING:
    from gridmaze.core.random_stream import RandomStream
    from gridmaze.generation.base import CellGrid


class Region(NamedTuple):
    """Rectangular block of logical cells."""

    row: int
    col: int
    height: int
    width: int


class DivisionGenerator(MazeGenerator):
    """
    Recursive Division algorithm.

    Algorithm:
    1. Link every pair of adjacent cells (open field)
    2. Split the region with a straight wall that keeps one passage
       - Tall regions are split horizontally, wide ones vertically,
         squares pick an orientation at random
    3. Repeat on both halves until a region is one cell thick

    Characteristics:
    - Long straight walls and a visible rectangular structure
    - Each split removes exactly one edge-cut of the region, so the
      result is a spanning tree
    - Regions are processed from an explicit stack rather than by recursion
    """

    algorithm = MazeAlgorithm.DIVISION

    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        grid.link_all()

        regions = [Region(0, 0, grid.rows, grid.cols)]
        while regions:
            region = regions.pop()
            if region.height <= 1 or region.width <= 1:
                continue

            if region.height > region.width or (region.height == region.width and rng.next_bool()):
                regions.extend(self._divide_horizontally(grid, rng, region))
            else:
                regions.extend(self._divide_vertically(grid, rng, region))

    @staticmethod
    def _divide_horizontally(grid: CellGrid, rng: RandomStream, region: Region) -> tuple[Region, Region]:
        """Close the passages south of one row of the region, except one."""
        divide_south_of = rng.next_int(0, region.height - 2)
        passage_at = rng.next_int(0, region.width - 1)

        row = region.row + divide_south_of
        for offset in range(region.width):
            if offset == passage_at:
                continue
            cell = grid.cells[row][region.col + offset]
            cell.unlink(grid.cells[row + 1][cell.col])

        top = Region(region.row, region.col, divide_south_of + 1, region.width)
        bottom = Region(row + 1, region.col, region.height - divide_south_of - 1, region.width)
        return top, bottom

    @staticmethod
    def _divide_vertically(grid: CellGrid, rng: RandomStream, region: Region) -> tuple[Region, Region]:
        """Close the passages east of one column of the region, except one."""
        divide_east_of = rng.next_int(0, region.width - 2)
        passage_at = rng.next_int(0, region.height - 1)

        col = region.col + divide_east_of
        for offset in range(region.height):
            if offset == passage_at:
                continue
            cell = grid.cells[region.row + offset][col]
            cell.unlink(grid.cells[cell.row][col + 1])

        left = Region(region.row, region.col, region.height, divide_east_of + 1)
        right = Region(region.row, col + 1, region.height, region.width - divide_east_of - 1)
        return left, right
