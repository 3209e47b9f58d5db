"""
Floor-cell placement queries.

Helpers a host uses to place spawn points, doors and pickups on a generated
grid. All functions work on grid coordinates ``(x, y)``; nothing here knows
about world-space scaling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.grid import as_grid, grid_size
from gridmaze.core.random_stream import RandomStream, as_random_stream
from gridmaze.core.types import Direction, MazeCoordinates, MazeSize
from gridmaze.utils.exceptions import validate_parameter_value

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from numpy.typing import NDArray


def all_floor_cells(grid: NDArray | Sequence[Sequence[int]]) -> list[MazeCoordinates]:
    """All floor cells in row-major order."""
    rows, cols = np.nonzero(as_grid(grid))
    return [MazeCoordinates(int(x), int(y)) for y, x in zip(rows, cols, strict=True)]


def random_floor_cells(
    grid: NDArray | Sequence[Sequence[int]],
    count: int,
    rng: RandomStream | int | None = None,
) -> list[MazeCoordinates]:
    """
    Pick ``count`` distinct floor cells at random.

    Args:
        grid: Floor/wall grid
        count: Number of cells wanted; all floor cells are returned in row-major
            order, without drawing from ``rng``, when no more are available
        rng: ``RandomStream``, integer seed, or ``None`` for fresh entropy

    Raises:
        ConfigurationError: ``count`` is negative or not an integer
    """
    validate_parameter_value(count, "count", expected_type=int, valid_range=(0, float("inf")))
    return _pick(all_floor_cells(grid), count, as_random_stream(rng))


def random_floor_cells_excluding(
    grid: NDArray | Sequence[Sequence[int]],
    count: int,
    exclude: Iterable[MazeCoordinates | tuple[int, int]],
    radius: float = 1.0,
    rng: RandomStream | int | None = None,
) -> list[MazeCoordinates]:
    """
    Pick ``count`` distinct floor cells away from the ``exclude`` cells.

    A floor cell is skipped when its Euclidean distance (in cells) to any
    excluded cell is at most ``radius``.
    """
    validate_parameter_value(count, "count", expected_type=int, valid_range=(0, float("inf")))
    validate_parameter_value(radius, "radius", expected_type=(int, float), valid_range=(0, float("inf")))

    candidates = all_floor_cells(grid)
    excluded = np.array([MazeCoordinates.coerce(c).as_tuple() for c in exclude], dtype=float)
    if candidates and excluded.size:
        points = np.array([c.as_tuple() for c in candidates], dtype=float)
        distances = np.linalg.norm(points[:, None, :] - excluded[None, :, :], axis=-1)
        keep = np.all(distances > radius, axis=1)
        candidates = [c for c, kept in zip(candidates, keep, strict=True) if kept]

    return _pick(candidates, count, as_random_stream(rng))


def random_spawn_cell(
    grid: NDArray | Sequence[Sequence[int]],
    rng: RandomStream | int | None = None,
) -> MazeCoordinates | None:
    """One random floor cell, or ``None`` if the grid has no floor."""
    cells = all_floor_cells(grid)
    if not cells:
        return None
    return as_random_stream(rng).choice(cells)


def edge_floor_cells(grid: NDArray | Sequence[Sequence[int]]) -> list[MazeCoordinates]:
    """
    Floor cells on the border of the grid, without duplicates.

    Order: north and south edge per column, then west and east edge per row.
    Corner cells appear once, at their first position in that order.
    """
    grid = as_grid(grid)
    size = grid_size(grid)
    last_x, last_y = size.width - 1, size.height - 1

    border: list[tuple[int, int]] = []
    for x in range(size.width):
        border.append((x, 0))
        border.append((x, last_y))
    for y in range(size.height):
        border.append((0, y))
        border.append((last_x, y))

    cells = []
    seen = set()
    for x, y in border:
        if (x, y) in seen or not grid[y, x]:
            continue
        seen.add((x, y))
        cells.append(MazeCoordinates(x, y))
    return cells


def inward_direction(
    coordinates: MazeCoordinates | tuple[int, int],
    size: MazeSize | tuple[int, int],
) -> Direction | None:
    """
    Direction pointing into the maze from a border cell.

    Edges are checked north, south, west, east; the first match wins, so a
    corner cell faces along its vertical axis. Interior cells give ``None``.
    """
    coordinates = MazeCoordinates.coerce(coordinates)
    size = MazeSize.coerce(size)

    if coordinates.y == 0:
        return Direction.SOUTH
    if coordinates.y == size.height - 1:
        return Direction.NORTH
    if coordinates.x == 0:
        return Direction.EAST
    if coordinates.x == size.width - 1:
        return Direction.WEST
    return None


def _pick(cells: list[MazeCoordinates], count: int, rng: RandomStream) -> list[MazeCoordinates]:
    if count >= len(cells):
        return cells
    rng.shuffle(cells)
    return cells[:count]
