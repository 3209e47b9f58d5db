"""
Path Graph construction and shortest-path search.

Examples
--------
>>> from gridmaze.pathfinding import find_path
>>> result = find_path([[1, 1, 1]], (0, 0), (2, 0))
>>> result.length
3
"""

from .graph import PathGraph, build_path_graph
from .search import PathResult, find_path

__all__ = [
    "PathGraph",
    "PathResult",
    "build_path_graph",
    "find_path",
]
