"""
Floor/wall grid helpers.

A grid is a ``uint8`` numpy array of shape ``(height, width)`` in row-major
order where ``FLOOR == 1`` and ``WALL == 0``. Path overlays share the shape and
mark path cells with ``ON_PATH == 1``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.types import MazeCoordinates, MazeSize
from gridmaze.utils.exceptions import validate_grid

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

WALL = 0
FLOOR = 1
ON_PATH = 1


def make_wall_grid(size: MazeSize) -> NDArray[np.uint8]:
    """Return a fresh all-wall grid."""
    return np.full(size.shape, WALL, dtype=np.uint8)


def make_floor_grid(size: MazeSize) -> NDArray[np.uint8]:
    """Return a fresh all-floor grid."""
    return np.full(size.shape, FLOOR, dtype=np.uint8)


def as_grid(grid: NDArray | Sequence[Sequence[int | bool]]) -> NDArray[np.uint8]:
    """Validate ``grid`` and return it as a ``uint8`` array (no copy when already ``uint8``)."""
    return validate_grid(grid)


def grid_size(grid: NDArray) -> MazeSize:
    """Return the ``MazeSize`` of a grid array."""
    height, width = grid.shape
    return MazeSize(int(width), int(height))


def is_floor(grid: NDArray, coordinates: MazeCoordinates) -> bool:
    return bool(grid[coordinates.y, coordinates.x] == FLOOR)


def floor_count(grid: NDArray) -> int:
    return int(np.count_nonzero(grid == FLOOR))


def grid_to_lists(grid: NDArray) -> list[list[int]]:
    """Convert a grid to nested Python lists (row-major), e.g. for a host API."""
    return [[int(value) for value in row] for row in grid]


def format_grid(
    grid: NDArray,
    overlay: NDArray | None = None,
    floor: str = ".",
    wall: str = "#",
    path: str = "o",
) -> str:
    """
    Render a grid as text, one line per row.

    Args:
        grid: Floor/wall grid
        overlay: Optional path overlay of the same shape
        floor: Character for floor cells
        wall: Character for wall cells
        path: Character for overlay cells

    Returns:
        Multi-line string
    """
    lines = []
    for y, row in enumerate(grid):
        chars = []
        for x, value in enumerate(row):
            if overlay is not None and overlay[y, x] == ON_PATH:
                chars.append(path)
            elif value == FLOOR:
                chars.append(floor)
            else:
                chars.append(wall)
        lines.append("".join(chars))
    return "\n".join(lines)
