"""
Maze generation algorithms.

Seven interchangeable algorithms turn a size and a seed into a floor/wall
grid. Each one carves a perfect maze (a spanning tree of logical cells) that
is laid out on the physical grid with explicit wall cells.

Examples
--------
>>> from gridmaze.generation import MazeAlgorithm, generate
>>> grid = generate(MazeAlgorithm.PRIM, (21, 21), seed=7)
>>> grid.shape
(21, 21)
"""

from .backtracker import BacktrackerGenerator
from .base import Cell, CellGrid, MazeAlgorithm, MazeGenerator
from .division import DivisionGenerator
from .eller import EllerGenerator
from .hunt_and_kill import HuntAndKillGenerator
from .kruskal import KruskalGenerator
from .prim import PrimGenerator
from .registry import available_algorithms, generate, generate_maze, get_generator
from .sidewinder import SidewinderGenerator
from .verification import floor_components, verify_perfect_maze

__all__ = [
    # Dispatch
    "MazeAlgorithm",
    "available_algorithms",
    "generate",
    "generate_maze",
    "get_generator",
    # Building blocks
    "Cell",
    "CellGrid",
    "MazeGenerator",
    # Algorithms
    "BacktrackerGenerator",
    "DivisionGenerator",
    "EllerGenerator",
    "HuntAndKillGenerator",
    "KruskalGenerator",
    "PrimGenerator",
    "SidewinderGenerator",
    # Verification
    "floor_components",
    "verify_perfect_maze",
]
