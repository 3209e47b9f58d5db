"""
Stateless dispatch from ``MazeAlgorithm`` to generator classes.

Generators carry no per-call state, so the table maps each algorithm to a
class and every lookup returns a fresh instance; nothing is shared between
calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from gridmaze.generation.backtracker import BacktrackerGenerator
from gridmaze.generation.base import MazeAlgorithm, MazeGenerator
from gridmaze.generation.division import DivisionGenerator
from gridmaze.generation.eller import EllerGenerator
from gridmaze.generation.hunt_and_kill import HuntAndKillGenerator
from gridmaze.generation.kruskal import KruskalGenerator
from gridmaze.generation.prim import PrimGenerator
from gridmaze.generation.sidewinder import SidewinderGenerator
from gridmaze.generation.verification import verify_perfect_maze
from gridmaze.utils.exceptions import MazeGenerationError

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from gridmaze.core.types import MazeSize

_GENERATORS: dict[MazeAlgorithm, type[MazeGenerator]] = {
    MazeAlgorithm.BACKTRACKER: BacktrackerGenerator,
    MazeAlgorithm.DIVISION: DivisionGenerator,
    MazeAlgorithm.HUNT_AND_KILL: HuntAndKillGenerator,
    MazeAlgorithm.SIDEWINDER: SidewinderGenerator,
    MazeAlgorithm.KRUSKAL: KruskalGenerator,
    MazeAlgorithm.ELLER: EllerGenerator,
    MazeAlgorithm.PRIM: PrimGenerator,
}


def available_algorithms() -> list[MazeAlgorithm]:
    """List the supported algorithms in declaration order."""
    return list(MazeAlgorithm)


def get_generator(algorithm: MazeAlgorithm | str) -> MazeGenerator:
    """
    Return a generator for ``algorithm``.

    Args:
        algorithm: ``MazeAlgorithm`` member or its value (e.g. ``"kruskal"``)

    Raises:
        ValueError: Unknown algorithm name
    """
    return _GENERATORS[MazeAlgorithm(algorithm)]()


def generate(algorithm: MazeAlgorithm | str, size: MazeSize | tuple[int, int], seed: int) -> NDArray[np.uint8]:
    """
    Generate a maze grid.

    Args:
        algorithm: Generation algorithm (member or value)
        size: ``MazeSize`` or ``(width, height)``
        seed: Random seed; identical inputs give identical grids. Seeds are
            reduced modulo 2**32, so seeds that differ by a multiple of 2**32
            (e.g. -1 and 4294967295) give the same grid

    Returns:
        ``uint8`` grid of shape ``(height, width)``, 1 = floor, 0 = wall

    Example:
        >>> grid = generate("backtracker", (21, 15), seed=42)
        >>> grid.shape
        (15, 21)
    """
    return get_generator(algorithm).generate(size, seed)


def generate_maze(
    algorithm: MazeAlgorithm | str,
    size: MazeSize | tuple[int, int],
    seed: int,
    verify: bool = False,
) -> NDArray[np.uint8]:
    """
    High-level helper: generate a maze and optionally verify it is perfect.

    Raises:
        MazeGenerationError: ``verify`` is set and the grid has loops or
            disconnected floor regions
    """
    algorithm = MazeAlgorithm(algorithm)
    grid = generate(algorithm, size, seed)

    if verify:
        verification = verify_perfect_maze(grid)
        if not verification["is_perfect"]:
            raise MazeGenerationError(algorithm.value, verification)

    return grid
