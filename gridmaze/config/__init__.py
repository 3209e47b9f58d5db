"""
Settings for GridMaze.

- settings: pydantic models with validation on assignment
- loader: YAML load/save through OmegaConf
"""

from .loader import load_settings, save_settings, settings_from_config, settings_to_config
from .settings import MAX_MAZE_DIMENSION, CoordinatesConfig, MazeSettings

__all__ = [
    "MAX_MAZE_DIMENSION",
    "CoordinatesConfig",
    "MazeSettings",
    "load_settings",
    "save_settings",
    "settings_from_config",
    "settings_to_config",
]
