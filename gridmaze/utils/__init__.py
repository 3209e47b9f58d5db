"""
GridMaze Utilities Module.

Organization:
- exceptions: Structured error types and validation helpers
- maze_logging/: Logging configuration and structured log helpers
"""

from .exceptions import (
    BlockedCoordinateError,
    ConfigurationError,
    GridShapeError,
    InvalidSizeError,
    MazeError,
    MazeGenerationError,
    OutOfBoundsCoordinateError,
    validate_coordinates,
    validate_grid,
    validate_maze_size,
    validate_parameter_value,
)
from .maze_logging import LoggedOperation, configure_logging, get_logger

__all__ = [
    # Exceptions
    "MazeError",
    "InvalidSizeError",
    "OutOfBoundsCoordinateError",
    "BlockedCoordinateError",
    "GridShapeError",
    "ConfigurationError",
    "MazeGenerationError",
    # Validation
    "validate_coordinates",
    "validate_grid",
    "validate_maze_size",
    "validate_parameter_value",
    # Logging
    "LoggedOperation",
    "configure_logging",
    "get_logger",
]
