"""
Pytest configuration and shared fixtures for the GridMaze test suite.
"""

import pytest

import numpy as np

from gridmaze import MazeAlgorithm

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (may take >10 seconds)")


def pytest_collection_modifyitems(config, items):
    """Add markers based on test paths and names."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        if "large" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Grid Fixtures
# =============================================================================

# Backtracker, 5x5, seed 42
GOLDEN_BACKTRACKER_5X5 = [
    [1, 1, 1, 1, 1],
    [0, 0, 1, 0, 1],
    [1, 1, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 1, 1],
]


@pytest.fixture
def golden_grid():
    """Backtracker maze for size 5x5 and seed 42."""
    return np.array(GOLDEN_BACKTRACKER_5X5, dtype=np.uint8)


@pytest.fixture
def two_rooms_grid():
    """Two floor regions separated by a wall column."""
    return np.array(
        [
            [1, 1, 0, 1, 1],
            [1, 1, 0, 1, 1],
            [1, 1, 0, 1, 1],
        ],
        dtype=np.uint8,
    )


@pytest.fixture
def open_grid():
    """5x4 grid without walls."""
    return np.ones((4, 5), dtype=np.uint8)


@pytest.fixture(params=list(MazeAlgorithm), ids=lambda a: a.value)
def algorithm(request):
    """Every generation algorithm."""
    return request.param
