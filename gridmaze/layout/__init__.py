"""
Maze layout: floor-cell placement queries and settings-driven builds.
"""

from .builder import MazeBuilder, MazeBuildResult
from .placement import (
    all_floor_cells,
    edge_floor_cells,
    inward_direction,
    random_floor_cells,
    random_floor_cells_excluding,
    random_spawn_cell,
)

__all__ = [
    "MazeBuilder",
    "MazeBuildResult",
    "all_floor_cells",
    "edge_floor_cells",
    "inward_direction",
    "random_floor_cells",
    "random_floor_cells_excluding",
    "random_spawn_cell",
]
