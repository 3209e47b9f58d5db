"""
YAML persistence for ``MazeSettings`` through OmegaConf.

Files may use OmegaConf interpolation, e.g.::

    width: 21
    height: ${width}
    algorithm: kruskal
    path_end: {x: 20, y: 20}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf
from omegaconf.errors import OmegaConfBaseException
from pydantic import ValidationError

from gridmaze.config.settings import MazeSettings
from gridmaze.utils.exceptions import ConfigurationError
from gridmaze.utils.maze_logging import get_logger

logger = get_logger(__name__)


def settings_to_config(settings: MazeSettings) -> DictConfig:
    """Convert settings to an OmegaConf ``DictConfig``."""
    return OmegaConf.create(settings.model_dump(mode="json"))


def settings_from_config(config: DictConfig | dict[str, Any]) -> MazeSettings:
    """
    Build ``MazeSettings`` from an OmegaConf config or a plain mapping.

    Raises:
        ConfigurationError: Interpolation cannot be resolved, or a value fails validation
    """
    if isinstance(config, DictConfig):
        try:
            raw = OmegaConf.to_container(config, resolve=True)
        except OmegaConfBaseException as err:
            raise ConfigurationError("settings", str(err), component="load_settings") from err
    else:
        raw = config

    if not isinstance(raw, dict):
        raise ConfigurationError("settings", raw, expected_type=dict, component="load_settings")

    try:
        return MazeSettings.model_validate(raw)
    except ValidationError as err:
        first = err.errors()[0]
        parameter = ".".join(str(part) for part in first["loc"]) or "settings"
        raise ConfigurationError(parameter, first.get("input"), component="load_settings") from err


def load_settings(path: str | Path, **overrides: Any) -> MazeSettings:
    """
    Load settings from a YAML file.

    Args:
        path: YAML file
        **overrides: Values merged over the file contents

    Raises:
        FileNotFoundError: ``path`` does not exist
        ConfigurationError: The file is not a mapping, or its values are invalid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")

    config = OmegaConf.load(path)
    if not isinstance(config, DictConfig):
        raise ConfigurationError("settings", type(config).__name__, expected_type=dict, component="load_settings")

    if overrides:
        config = OmegaConf.merge(config, OmegaConf.create(overrides))

    settings = settings_from_config(config)
    logger.debug(f"Settings loaded from: {path}")
    return settings


def save_settings(settings: MazeSettings, path: str | Path) -> Path:
    """
    Save settings to a YAML file, creating parent directories as needed.

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    OmegaConf.save(settings_to_config(settings), path)
    logger.info(f"Settings saved to: {path}")
    return path
