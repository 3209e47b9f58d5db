"""
Maze settings model.

``MazeSettings`` holds the editable properties of a maze host: which
algorithm to run, the size and seed, and the optional path, door and endpoint
placement. Validation runs on construction and on every assignment.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridmaze.core.types import MazeCoordinates, MazeSize
from gridmaze.generation.base import MazeAlgorithm

MAX_MAZE_DIMENSION = 9999


class CoordinatesConfig(BaseModel):
    """Grid coordinates as stored in settings files."""

    x: int = Field(0, ge=0, description="Column")
    y: int = Field(0, ge=0, description="Row")

    model_config = ConfigDict(validate_assignment=True)

    def to_coordinates(self) -> MazeCoordinates:
        return MazeCoordinates(self.x, self.y)

    @classmethod
    def from_coordinates(cls, coordinates: MazeCoordinates | tuple[int, int]) -> CoordinatesConfig:
        coordinates = MazeCoordinates.coerce(coordinates)
        return cls(x=coordinates.x, y=coordinates.y)


class MazeSettings(BaseModel):
    """
    Settings for one maze build.

    Path endpoints and doors are stored unclamped; ``MazeBuilder`` clamps
    them to the grid when building.
    """

    algorithm: MazeAlgorithm = Field(MazeAlgorithm.BACKTRACKER, description="Generation algorithm")
    seed: int = Field(0, description="Random seed")
    width: int = Field(5, ge=1, le=MAX_MAZE_DIMENSION, description="Grid width in cells")
    height: int = Field(5, ge=1, le=MAX_MAZE_DIMENSION, description="Grid height in cells")

    generate_path: bool = Field(False, description="Search a path between path_start and path_end")
    path_start: CoordinatesConfig = Field(default_factory=CoordinatesConfig)
    path_end: CoordinatesConfig = Field(default_factory=CoordinatesConfig)

    create_doors: bool = Field(False, description="Open entrance and exit doors in the outline")
    force_edge_doors: bool = Field(True, description="Randomize picks path endpoints on the maze edge")
    entrance_door: CoordinatesConfig = Field(default_factory=CoordinatesConfig)
    exit_door: CoordinatesConfig = Field(default_factory=CoordinatesConfig)

    has_endpoint: bool = Field(False, description="Place an endpoint marker")
    endpoint: CoordinatesConfig = Field(default_factory=CoordinatesConfig)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("path_start", "path_end", "entrance_door", "exit_door", "endpoint", mode="before")
    @classmethod
    def accept_coordinate_pairs(cls, v):
        """Allow ``(x, y)`` pairs and ``MazeCoordinates`` in place of a mapping."""
        if isinstance(v, MazeCoordinates):
            return {"x": v.x, "y": v.y}
        if isinstance(v, (tuple, list)) and len(v) == 2:
            return {"x": v[0], "y": v[1]}
        return v

    @property
    def size(self) -> MazeSize:
        return MazeSize(self.width, self.height)
