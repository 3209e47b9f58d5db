"""
Core data model: random stream, maze types, grid helpers and union-find.
"""

from .disjoint_set import DisjointSet
from .grid import (
    FLOOR,
    ON_PATH,
    WALL,
    as_grid,
    floor_count,
    format_grid,
    grid_size,
    grid_to_lists,
    is_floor,
    make_floor_grid,
    make_wall_grid,
)
from .random_stream import RandomStream, as_random_stream
from .types import Direction, MazeCoordinates, MazeSize

__all__ = [
    "RandomStream",
    "as_random_stream",
    "MazeSize",
    "MazeCoordinates",
    "Direction",
    "DisjointSet",
    "FLOOR",
    "WALL",
    "ON_PATH",
    "as_grid",
    "floor_count",
    "format_grid",
    "grid_size",
    "grid_to_lists",
    "is_floor",
    "make_floor_grid",
    "make_wall_grid",
]
