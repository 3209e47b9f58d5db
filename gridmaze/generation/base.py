"""
Shared machinery for the maze generation algorithms.

Every algorithm carves a *logical* maze: a grid of cells joined by passages.
``CellGrid.to_grid`` then lays the logical maze out on the physical
floor/wall grid that callers receive:

    logical cell (r, c)      -> physical cell (2r, 2c)
    passage east of (r, c)   -> physical cell (2r, 2c + 1)
    passage south of (r, c)  -> physical cell (2r + 1, 2c)

Every other physical cell is a wall. A maze of ``width`` x ``height`` physical
cells holds ``ceil(height / 2)`` x ``ceil(width / 2)`` logical cells; for an
even dimension the trailing row or column stays wall. Because logical cells
are never physically adjacent, a logical spanning tree becomes a physical
floor tree: ``n`` cells plus ``n - 1`` passages, joined by ``2(n - 1)`` edges.

Reference: Jamis Buck, "Mazes for Programmers" (2015)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

import numpy as np

from gridmaze.core.grid import FLOOR, make_wall_grid
from gridmaze.core.random_stream import RandomStream
from gridmaze.core.types import MazeSize
from gridmaze.utils.exceptions import validate_parameter_value
from gridmaze.utils.maze_logging import get_logger, log_generation_summary

if TYPE_CHECKING:
    from numpy.typing import NDArray

logger = get_logger(__name__)


class MazeAlgorithm(Enum):
    """Available maze generation algorithms."""

    BACKTRACKER = "backtracker"
    DIVISION = "division"
    HUNT_AND_KILL = "hunt_and_kill"
    SIDEWINDER = "sidewinder"
    KRUSKAL = "kruskal"
    ELLER = "eller"
    PRIM = "prim"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    MazeAlgorithm.BACKTRACKER: "Recursive Backtracker",
    MazeAlgorithm.DIVISION: "Recursive Division",
    MazeAlgorithm.HUNT_AND_KILL: "Hunt-and-Kill",
    MazeAlgorithm.SIDEWINDER: "Sidewinder",
    MazeAlgorithm.KRUSKAL: "Kruskal",
    MazeAlgorithm.ELLER: "Eller",
    MazeAlgorithm.PRIM: "Prim",
}


@dataclass(frozen=False, eq=True)
class Cell:
    """
    Represents a logical cell of the maze.

    Attributes:
        row: Row index in the logical grid
        col: Column index in the logical grid
        north: Passage exists to north neighbor
        south: Passage exists to south neighbor
        east: Passage exists to east neighbor
        west: Passage exists to west neighbor
        visited: Temporary flag for generation algorithms
    """

    row: int
    col: int
    north: bool = False
    south: bool = False
    east: bool = False
    west: bool = False
    visited: bool = False

    def __hash__(self):
        """Make cell hashable based on position only."""
        return hash((self.row, self.col))

    def __eq__(self, other):
        """Equality based on position only."""
        if not isinstance(other, Cell):
            return False
        return self.row == other.row and self.col == other.col

    def link(self, other: Cell) -> None:
        """Open the passage between this cell and an adjacent cell."""
        self._set_passage(other, True)

    def unlink(self, other: Cell) -> None:
        """Close the passage between this cell and an adjacent cell."""
        self._set_passage(other, False)

    def is_linked(self, other: Cell) -> bool:
        if other.row == self.row - 1 and other.col == self.col:
            return self.north
        if other.row == self.row + 1 and other.col == self.col:
            return self.south
        if other.col == self.col - 1 and other.row == self.row:
            return self.west
        if other.col == self.col + 1 and other.row == self.row:
            return self.east
        return False

    def _set_passage(self, other: Cell, value: bool) -> None:
        if other.row == self.row - 1 and other.col == self.col:
            self.north = other.south = value
        elif other.row == self.row + 1 and other.col == self.col:
            self.south = other.north = value
        elif other.col == self.col - 1 and other.row == self.row:
            self.west = other.east = value
        elif other.col == self.col + 1 and other.row == self.row:
            self.east = other.west = value
        else:
            raise ValueError(f"Cells ({self.row}, {self.col}) and ({other.row}, {other.col}) are not adjacent")


class CellGrid:
    """Logical grid of cells for maze generation."""

    def __init__(self, rows: int, cols: int):
        """
        Initialize grid.

        Args:
            rows: Number of logical rows
            cols: Number of logical columns
        """
        self.rows = rows
        self.cols = cols
        self.cells: list[list[Cell]] = [[Cell(r, c) for c in range(cols)] for r in range(rows)]

    @classmethod
    def for_maze_size(cls, size: MazeSize) -> CellGrid:
        """Create the logical grid that fills a physical maze of ``size``."""
        return cls((size.height + 1) // 2, (size.width + 1) // 2)

    def get_cell(self, row: int, col: int) -> Cell | None:
        """
        Get cell at position.

        Returns:
            Cell if valid position, None otherwise
        """
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.cells[row][col]
        return None

    def get_neighbors(self, cell: Cell) -> list[Cell]:
        """
        Get all neighboring cells (4-connected), in north, south, west, east order.
        """
        neighbors = []
        for dr, dc in [(-1, 0), (1, 0), (0, -1), (0, 1)]:
            neighbor = self.get_cell(cell.row + dr, cell.col + dc)
            if neighbor is not None:
                neighbors.append(neighbor)
        return neighbors

    def get_unvisited_neighbors(self, cell: Cell) -> list[Cell]:
        return [n for n in self.get_neighbors(cell) if not n.visited]

    def get_visited_neighbors(self, cell: Cell) -> list[Cell]:
        return [n for n in self.get_neighbors(cell) if n.visited]

    def random_cell(self, rng: RandomStream) -> Cell:
        """Get a random cell from the grid."""
        row = rng.next_int(0, self.rows - 1)
        col = rng.next_int(0, self.cols - 1)
        return self.cells[row][col]

    def all_cells(self) -> list[Cell]:
        """Get all cells in row-major order."""
        cells = []
        for row in self.cells:
            cells.extend(row)
        return cells

    def index_of(self, cell: Cell) -> int:
        return cell.row * self.cols + cell.col

    def link_all(self) -> None:
        """Open every passage between adjacent cells."""
        for row in self.cells:
            for cell in row:
                if cell.col + 1 < self.cols:
                    cell.link(row[cell.col + 1])
                if cell.row + 1 < self.rows:
                    cell.link(self.cells[cell.row + 1][cell.col])

    def passage_count(self) -> int:
        """Number of open passages (each counted once)."""
        return sum(int(cell.east) + int(cell.south) for cell in self.all_cells())

    def to_grid(self, size: MazeSize) -> NDArray[np.uint8]:
        """
        Lay the logical maze out on a physical floor/wall grid.

        Single-row and single-column mazes also open the trailing cell left by
        an even length, so the result is one wall-free corridor.

        Args:
            size: Physical maze size; must hold this logical grid

        Returns:
            Fresh ``uint8`` grid, 1 = floor, 0 = wall
        """
        grid = make_wall_grid(size)

        for row in self.cells:
            for cell in row:
                r, c = 2 * cell.row, 2 * cell.col
                grid[r, c] = FLOOR
                if cell.east:
                    grid[r, c + 1] = FLOOR
                if cell.south:
                    grid[r + 1, c] = FLOOR

        if size.width == 1 or size.height == 1:
            grid[:, :] = FLOOR

        return grid


class MazeGenerator(ABC):
    """
    Base class for maze generation algorithms.

    Subclasses implement ``_carve`` on a fresh ``CellGrid`` and must leave it a
    spanning tree. Generators hold no per-call state, so one instance can serve
    any number of calls.
    """

    algorithm: ClassVar[MazeAlgorithm]

    def generate(self, size: MazeSize | tuple[int, int], seed: int) -> NDArray[np.uint8]:
        """
        Generate a maze grid.

        Args:
            size: Physical maze size (``MazeSize`` or ``(width, height)``)
            seed: Seed of the random stream owned by this call

        Returns:
            Fresh ``uint8`` grid of shape ``(height, width)``, 1 = floor, 0 = wall
        """
        size = MazeSize.coerce(size)
        validate_parameter_value(seed, "seed", expected_type=(int, np.integer), component=type(self).__name__)

        rng = RandomStream(int(seed))
        cells = CellGrid.for_maze_size(size)
        self._carve(cells, rng)
        grid = cells.to_grid(size)

        log_generation_summary(logger, self.algorithm.display_name, size.width, size.height, int(seed), grid)
        return grid

    @abstractmethod
    def _carve(self, grid: CellGrid, rng: RandomStream) -> None:
        """Turn ``grid`` into a perfect maze by linking cells."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
