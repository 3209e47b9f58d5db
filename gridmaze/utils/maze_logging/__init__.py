"""
Logging utilities for GridMaze.

Usage:
    >>> from gridmaze.utils.maze_logging import get_logger, configure_logging
    >>> configure_logging(level="DEBUG")
    >>> logger = get_logger(__name__)
    >>> logger.info("Generating maze...")
"""

from __future__ import annotations

from .logger import (
    LoggedOperation,
    MazeFormatter,
    MazeLogger,
    configure_development_logging,
    configure_logging,
    configure_production_logging,
    get_logger,
    log_generation_summary,
    log_path_summary,
)

__all__ = [
    # Core logging
    "configure_logging",
    "get_logger",
    # Environment configurations
    "configure_development_logging",
    "configure_production_logging",
    # Structured logging helpers
    "log_generation_summary",
    "log_path_summary",
    # Classes
    "LoggedOperation",
    "MazeFormatter",
    "MazeLogger",
]
