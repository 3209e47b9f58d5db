from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gridmaze")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import CoordinatesConfig, MazeSettings, load_settings, save_settings
from .core import (
    FLOOR,
    ON_PATH,
    WALL,
    Direction,
    MazeCoordinates,
    MazeSize,
    RandomStream,
    format_grid,
)
from .generation import (
    MazeAlgorithm,
    available_algorithms,
    generate,
    generate_maze,
    get_generator,
    verify_perfect_maze,
)
from .layout import (
    MazeBuilder,
    MazeBuildResult,
    all_floor_cells,
    edge_floor_cells,
    inward_direction,
    random_floor_cells,
    random_floor_cells_excluding,
    random_spawn_cell,
)
from .pathfinding import PathGraph, PathResult, build_path_graph, find_path
from .utils import (
    BlockedCoordinateError,
    ConfigurationError,
    GridShapeError,
    InvalidSizeError,
    MazeError,
    MazeGenerationError,
    OutOfBoundsCoordinateError,
    configure_logging,
    get_logger,
)

__all__ = [
    "__version__",
    # Generation
    "MazeAlgorithm",
    "available_algorithms",
    "generate",
    "generate_maze",
    "get_generator",
    "verify_perfect_maze",
    # Path search
    "PathGraph",
    "PathResult",
    "build_path_graph",
    "find_path",
    # Core types
    "Direction",
    "MazeCoordinates",
    "MazeSize",
    "RandomStream",
    "FLOOR",
    "WALL",
    "ON_PATH",
    "format_grid",
    # Layout
    "MazeBuilder",
    "MazeBuildResult",
    "all_floor_cells",
    "edge_floor_cells",
    "inward_direction",
    "random_floor_cells",
    "random_floor_cells_excluding",
    "random_spawn_cell",
    # Settings
    "CoordinatesConfig",
    "MazeSettings",
    "load_settings",
    "save_settings",
    # Errors
    "MazeError",
    "InvalidSizeError",
    "OutOfBoundsCoordinateError",
    "BlockedCoordinateError",
    "GridShapeError",
    "ConfigurationError",
    "MazeGenerationError",
    # Logging
    "configure_logging",
    "get_logger",
]
