"""
Exception classes for GridMaze with helpful error messages and user guidance.

Every error carries the component that raised it, an optional suggested
action, a stable error code and a small diagnostic block, so that a host
layer can log a single message and still know what to fix.

Note that an unreachable path is *not* an exception: ``find_path`` returns a
``PathResult`` with ``reachable=False`` and the caller decides what to do.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import NDArray

    from gridmaze.core.types import MazeCoordinates, MazeSize


class MazeError(Exception):
    """
    Base exception for GridMaze errors with helpful context and suggestions.

    This exception class provides structured error information including:
    - Clear error description
    - Component context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        component: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.component = component or "GridMaze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.component}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class InvalidSizeError(MazeError):
    """Exception raised when a maze size cannot produce a grid."""

    def __init__(self, width: Any, height: Any, component: str | None = None):
        diagnostic_data = {
            "width": str(width),
            "height": str(height),
        }

        problems = []
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
                problems.append(f"{name} must be an integer")
            elif value <= 0:
                problems.append(f"{name} must be at least 1")

        suggested_action = " | ".join(problems) if problems else "Use positive integer dimensions"

        super().__init__(
            message=f"Invalid maze size {width}x{height}",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_SIZE",
            diagnostic_data=diagnostic_data,
        )


class OutOfBoundsCoordinateError(MazeError):
    """Exception raised when a coordinate lies outside the grid."""

    def __init__(self, name: str, x: int, y: int, width: int, height: int, component: str | None = None):
        self.x = x
        self.y = y

        diagnostic_data = {
            "coordinate": f"{name}=({x}, {y})",
            "grid_size": f"{width}x{height}",
            "valid_x": f"[0, {width - 1}]",
            "valid_y": f"[0, {height - 1}]",
        }

        super().__init__(
            message=f"Coordinate '{name}' ({x}, {y}) is outside the {width}x{height} grid",
            component=component,
            suggested_action="Clamp coordinates with MazeCoordinates.clamped_by_maze_size() before searching",
            error_code="OUT_OF_BOUNDS",
            diagnostic_data=diagnostic_data,
        )


class BlockedCoordinateError(MazeError):
    """Exception raised when a path endpoint sits on a wall cell."""

    def __init__(self, name: str, x: int, y: int, component: str | None = None):
        self.x = x
        self.y = y

        super().__init__(
            message=f"Coordinate '{name}' ({x}, {y}) is a wall cell",
            component=component,
            suggested_action="Pick endpoints from floor cells, e.g. edge_floor_cells() or all_floor_cells()",
            error_code="BLOCKED_COORDINATE",
            diagnostic_data={"coordinate": f"{name}=({x}, {y})"},
        )


class GridShapeError(MazeError):
    """Exception raised when an array is not a valid floor/wall grid."""

    def __init__(self, reason: str, provided_shape: tuple | None = None, component: str | None = None):
        diagnostic_data: dict[str, Any] = {"reason": reason}
        if provided_shape is not None:
            diagnostic_data["provided_shape"] = str(provided_shape)

        super().__init__(
            message=f"Invalid maze grid: {reason}",
            component=component,
            suggested_action="Pass a non-empty rectangular 2D array of 0 (wall) and 1 (floor) values",
            error_code="INVALID_GRID",
            diagnostic_data=diagnostic_data,
        )


class ConfigurationError(MazeError):
    """Exception raised when a parameter value is invalid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | tuple[type, ...] | None = None,
        valid_range: tuple | None = None,
        component: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = _type_name(expected_type)

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            component=component,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class MazeGenerationError(MazeError):
    """Exception raised when a generated grid fails perfect-maze verification."""

    def __init__(self, algorithm: str, verification: dict[str, Any], component: str | None = None):
        self.verification = verification

        problems = []
        if not verification.get("is_connected", True):
            problems.append(f"{verification.get('components')} floor components")
        if not verification.get("is_no_loops", True):
            problems.append(
                f"{verification.get('edge_count')} floor edges, expected {verification.get('expected_edges')}"
            )

        super().__init__(
            message=f"Generated maze is not perfect ({', '.join(problems) or 'unknown reason'})",
            component=component or algorithm,
            suggested_action="Report the algorithm, size and seed; the grid should be a spanning tree",
            error_code="GENERATION_FAILURE",
            diagnostic_data=dict(verification),
        )


def _type_name(expected_type: type | tuple[type, ...]) -> str:
    if isinstance(expected_type, tuple):
        return " | ".join(t.__name__ for t in expected_type)
    return expected_type.__name__


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | tuple[type, ...] | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""

    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {_type_name(expected_type)}")

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if "count" in parameter_name.lower() and isinstance(provided_value, (int, float)) and provided_value < 0:
        suggestions.append("Counts cannot be negative")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


# Convenience functions for common error scenarios


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | tuple[type, ...] | None = None,
    valid_range: tuple | None = None,
    component: str | None = None,
):
    """Validate parameter value and type."""
    if expected_type and (not isinstance(value, expected_type) or isinstance(value, bool)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type,
            component=component,
        )

    if valid_range and isinstance(value, (int, float)):
        if not (valid_range[0] <= value <= valid_range[1]):
            raise ConfigurationError(
                parameter_name=parameter_name,
                provided_value=value,
                valid_range=valid_range,
                component=component,
            )


def validate_maze_size(width: Any, height: Any, component: str | None = None):
    """Validate that both dimensions are positive integers."""
    for value in (width, height):
        if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value <= 0:
            raise InvalidSizeError(width, height, component=component)


def validate_grid(grid: NDArray | Sequence[Sequence[Any]], component: str | None = None) -> NDArray[np.uint8]:
    """
    Validate a floor/wall grid and return it as a ``uint8`` array.

    Arrays that already have dtype ``uint8`` are returned without copying.
    """
    if isinstance(grid, np.ndarray):
        array = grid
    else:
        try:
            array = np.asarray(grid)
        except ValueError as err:
            raise GridShapeError("rows have different lengths", component=component) from err

    if array.dtype == object:
        raise GridShapeError("rows have different lengths", component=component)

    if array.ndim != 2:
        raise GridShapeError(f"expected 2 dimensions, got {array.ndim}", array.shape, component=component)

    if array.size == 0:
        raise GridShapeError("grid is empty", array.shape, component=component)

    if not np.all((array == 0) | (array == 1)):
        raise GridShapeError("cells must be 0 (wall) or 1 (floor)", array.shape, component=component)

    if array.dtype == np.uint8:
        return array
    return array.astype(np.uint8)


def validate_coordinates(
    coordinates: MazeCoordinates,
    size: MazeSize,
    name: str = "coordinates",
    component: str | None = None,
):
    """Validate that coordinates fall inside a maze of the given size."""
    if not (0 <= coordinates.x < size.width and 0 <= coordinates.y < size.height):
        raise OutOfBoundsCoordinateError(
            name, coordinates.x, coordinates.y, size.width, size.height, component=component
        )
