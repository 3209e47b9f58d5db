"""
Value types shared by generation, search and layout code.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import numpy as np

from gridmaze.utils.exceptions import validate_maze_size, validate_parameter_value


@dataclass(frozen=True)
class MazeSize:
    """
    Maze dimensions in cells.

    Attributes:
        x: Width (number of columns)
        y: Height (number of rows)
    """

    x: int = 5
    y: int = 5

    def __post_init__(self):
        validate_maze_size(self.x, self.y, component="MazeSize")

    @property
    def width(self) -> int:
        return self.x

    @property
    def height(self) -> int:
        return self.y

    @property
    def shape(self) -> tuple[int, int]:
        """Numpy shape ``(rows, cols)`` of a grid with this size."""
        return (self.y, self.x)

    @property
    def num_cells(self) -> int:
        return self.x * self.y

    @classmethod
    def coerce(cls, size: MazeSize | tuple[int, int]) -> MazeSize:
        """Accept a ``MazeSize`` or a ``(width, height)`` pair."""
        if isinstance(size, cls):
            return size
        width, height = size
        return cls(width, height)


@dataclass(frozen=True)
class MazeCoordinates:
    """
    Cell coordinates: ``x`` is the column, ``y`` the row, both 0-indexed.
    """

    x: int = 0
    y: int = 0

    def __post_init__(self):
        validate_parameter_value(self.x, "x", expected_type=(int, np.integer), component="MazeCoordinates")
        validate_parameter_value(self.y, "y", expected_type=(int, np.integer), component="MazeCoordinates")

    def clamped_by_maze_size(self, size: MazeSize) -> MazeCoordinates:
        """
        Return a copy moved inside ``size``.

        Coordinates past the last column/row snap to it; negative values snap to 0.
        """
        x = min(max(self.x, 0), size.width - 1)
        y = min(max(self.y, 0), size.height - 1)
        if (x, y) == (self.x, self.y):
            return self
        return MazeCoordinates(x, y)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    @classmethod
    def coerce(cls, coordinates: MazeCoordinates | tuple[int, int]) -> MazeCoordinates:
        """Accept ``MazeCoordinates`` or an ``(x, y)`` pair."""
        if isinstance(coordinates, cls):
            return coordinates
        x, y = coordinates
        return cls(x, y)


class Direction(Enum):
    """Cardinal directions as ``(dx, dy)`` steps; +y points south."""

    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> Direction:
        return Direction((-self.dx, -self.dy))
