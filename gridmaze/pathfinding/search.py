"""
Shortest-path search on maze grids.

Breadth-first search over the floor-cell graph. The graph is rebuilt from the
grid on every call.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from gridmaze.core.grid import ON_PATH, WALL, as_grid, grid_size
from gridmaze.core.types import MazeCoordinates
from gridmaze.pathfinding.graph import build_path_graph
from gridmaze.utils.exceptions import BlockedCoordinateError, validate_coordinates
from gridmaze.utils.maze_logging import get_logger, log_path_summary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

logger = get_logger(__name__)


@dataclass
class PathResult:
    """
    Outcome of a path search.

    Attributes:
        reachable: Whether ``end`` can be reached from ``start``
        length: Number of cells on the path, both endpoints included (0 if unreachable)
        overlay: Fresh grid with 1 on path cells, or None if unreachable
        cells: Path cells from start to end
    """

    reachable: bool
    length: int = 0
    overlay: NDArray[np.uint8] | None = None
    cells: list[MazeCoordinates] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.reachable

    @classmethod
    def not_reachable(cls) -> PathResult:
        return cls(reachable=False)


def find_path(
    grid: NDArray | Sequence[Sequence[int]],
    start: MazeCoordinates | tuple[int, int],
    end: MazeCoordinates | tuple[int, int],
) -> PathResult:
    """
    Find the shortest 4-connected path between two floor cells.

    Ties between equally short paths are broken by the neighbor expansion
    order West, East, North, South.

    Args:
        grid: Floor/wall grid (1 = floor, 0 = wall)
        start: Start cell ``(x, y)``
        end: End cell ``(x, y)``

    Returns:
        ``PathResult``; ``reachable`` is False when ``end`` lies in a floor
        region not connected to ``start``

    Raises:
        OutOfBoundsCoordinateError: ``start`` or ``end`` outside the grid
        BlockedCoordinateError: ``start`` or ``end`` on a wall cell
    """
    grid = as_grid(grid)
    size = grid_size(grid)
    start = MazeCoordinates.coerce(start)
    end = MazeCoordinates.coerce(end)

    for name, point in (("start", start), ("end", end)):
        validate_coordinates(point, size, name=name, component="find_path")
        if grid[point.y, point.x] == WALL:
            raise BlockedCoordinateError(name, point.x, point.y, component="find_path")

    graph = build_path_graph(grid)
    width = size.width
    start_vertex = graph.vertex_id(start)
    end_vertex = graph.vertex_id(end)

    num_cells = graph.num_cells
    visited = np.zeros(num_cells, dtype=bool)
    parents = np.full(num_cells, -1, dtype=np.int64)
    distances = np.zeros(num_cells, dtype=np.int64)

    vertices = deque([start_vertex])
    visited[start_vertex] = True
    while vertices and not visited[end_vertex]:
        vertex = vertices.popleft()
        for adjacent in graph.adjacency[vertex]:
            if not visited[adjacent]:
                visited[adjacent] = True
                vertices.append(adjacent)
                distances[adjacent] = distances[vertex] + 1
                parents[adjacent] = vertex

    if not visited[end_vertex]:
        logger.warning(f"Path is not reachable: {start.as_tuple()} -> {end.as_tuple()}")
        return PathResult.not_reachable()

    graph_path = []
    vertex = end_vertex
    while vertex != -1:
        graph_path.append(int(vertex))
        vertex = parents[vertex]
    graph_path.reverse()

    overlay = np.zeros(grid.shape, dtype=np.uint8)
    cells = []
    for vertex in graph_path:
        y, x = divmod(vertex, width)
        overlay[y, x] = ON_PATH
        cells.append(MazeCoordinates(x, y))

    length = int(distances[end_vertex]) + 1
    log_path_summary(logger, start.as_tuple(), end.as_tuple(), length)
    return PathResult(reachable=True, length=length, overlay=overlay, cells=cells)
