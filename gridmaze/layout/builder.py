"""
Maze build orchestration.

``MazeBuilder`` turns ``MazeSettings`` into a grid plus the derived path,
door and endpoint placement that a host needs to lay out a maze.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from gridmaze.config.settings import CoordinatesConfig, MazeSettings
from gridmaze.core.grid import FLOOR
from gridmaze.core.random_stream import RandomStream
from gridmaze.core.types import MazeCoordinates
from gridmaze.generation.base import MazeAlgorithm
from gridmaze.generation.registry import generate
from gridmaze.layout.placement import edge_floor_cells
from gridmaze.pathfinding.search import PathResult, find_path
from gridmaze.utils.exceptions import BlockedCoordinateError
from gridmaze.utils.maze_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

logger = get_logger(__name__)

MIN_RANDOM_DIMENSION = 3
MAX_RANDOM_DIMENSION = 101
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


@dataclass
class MazeBuildResult:
    """
    Everything produced by one build.

    Attributes:
        settings: Settings the grid was built from
        grid: Floor/wall grid
        path: Path search result, or None when path generation is off
        path_start: Clamped path start (None when path generation is off)
        path_end: Clamped path end (None when path generation is off)
        entrance_door: Entrance door cell (None when doors are off)
        exit_door: Exit door cell (None when doors are off)
        endpoint: Clamped endpoint (None when there is no endpoint)
    """

    settings: MazeSettings
    grid: NDArray[np.uint8]
    path: PathResult | None = None
    path_start: MazeCoordinates | None = None
    path_end: MazeCoordinates | None = None
    entrance_door: MazeCoordinates | None = None
    exit_door: MazeCoordinates | None = None
    endpoint: MazeCoordinates | None = None

    @property
    def path_length(self) -> int:
        return self.path.length if self.path else 0


class MazeBuilder:
    """
    Build mazes from settings.

    Example:
        >>> builder = MazeBuilder(MazeSettings(width=11, height=11, generate_path=True, path_end=(10, 10)))
        >>> result = builder.build()
        >>> result.path.reachable
        True
    """

    def __init__(self, settings: MazeSettings | None = None):
        self.settings = settings if settings is not None else MazeSettings()

    def build(self) -> MazeBuildResult:
        """Generate the grid and derive path, doors and endpoint from the current settings."""
        settings = self.settings
        size = settings.size

        operation = f"{settings.algorithm.display_name} build {size.x}x{size.y}"
        with LoggedOperation(logger, operation, log_level=logging.DEBUG):
            grid = generate(settings.algorithm, size, settings.seed)

        result = MazeBuildResult(settings=settings.model_copy(deep=True), grid=grid)

        if settings.generate_path:
            start = settings.path_start.to_coordinates().clamped_by_maze_size(size)
            end = settings.path_end.to_coordinates().clamped_by_maze_size(size)
            logger.info(
                f"Path start {start.as_tuple()} is {_cell_kind(grid, start)}. "
                f"Path end {end.as_tuple()} is {_cell_kind(grid, end)}."
            )

            try:
                result.path = find_path(grid, start, end)
            except BlockedCoordinateError as err:
                logger.warning(f"No path generated: {err.diagnostic_data}")
                result.path = PathResult.not_reachable()

            result.path_start = start
            result.path_end = end
            if settings.create_doors:
                result.entrance_door = start
                result.exit_door = end
        elif settings.create_doors:
            result.entrance_door = settings.entrance_door.to_coordinates().clamped_by_maze_size(size)
            result.exit_door = settings.exit_door.to_coordinates().clamped_by_maze_size(size)

        if settings.has_endpoint:
            result.endpoint = settings.endpoint.to_coordinates().clamped_by_maze_size(size)

        return result

    def randomize(self, seed: int | None = None) -> MazeBuildResult:
        """
        Pick a random odd size, algorithm and seed, then build.

        With ``force_edge_doors`` the path endpoints are two different random
        floor cells on the maze border; otherwise they are opposite corners.

        Args:
            seed: Seed for the randomizer itself; ``None`` uses fresh entropy
        """
        rng = RandomStream(seed)
        settings = self.settings.model_copy(deep=True)

        settings.width = rng.next_int(MIN_RANDOM_DIMENSION, MAX_RANDOM_DIMENSION) | 1
        settings.height = rng.next_int(MIN_RANDOM_DIMENSION, MAX_RANDOM_DIMENSION) | 1
        settings.algorithm = rng.choice(list(MazeAlgorithm))
        settings.seed = rng.next_int(INT32_MIN, INT32_MAX)

        size = settings.size
        start = MazeCoordinates(0, 0)
        end = MazeCoordinates(size.width - 1, size.height - 1)

        if settings.force_edge_doors:
            grid = generate(settings.algorithm, size, settings.seed)
            edges = edge_floor_cells(grid)
            if len(edges) >= 2:
                start_index = rng.next_int(0, len(edges) - 1)
                end_index = start_index
                while end_index == start_index:
                    end_index = rng.next_int(0, len(edges) - 1)
                start, end = edges[start_index], edges[end_index]
            else:
                logger.warning("Not enough floor cells on edges. Using corners.")

        settings.path_start = CoordinatesConfig.from_coordinates(start)
        settings.path_end = CoordinatesConfig.from_coordinates(end)

        logger.info(
            f"Randomized maze: {settings.algorithm.display_name} {size.x}x{size.y} seed={settings.seed}, "
            f"path {start.as_tuple()} -> {end.as_tuple()}"
        )
        self.settings = settings
        return self.build()


def _cell_kind(grid: NDArray, coordinates: MazeCoordinates) -> str:
    return "FLOOR" if grid[coordinates.y, coordinates.x] == FLOOR else "WALL"
