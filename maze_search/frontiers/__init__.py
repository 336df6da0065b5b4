"""
Frontiers module.

Provides the expansion strategies shared by the traversal engine:
- StackFrontier: Depth-First Search (LIFO)
- QueueFrontier: Breadth-First Search (FIFO)
- PriorityFrontier: A* (min-heap on f = g + h)
"""

from maze_search.frontiers.base import Frontier
from maze_search.frontiers.priority import PriorityFrontier
from maze_search.frontiers.queue import QueueFrontier
from maze_search.frontiers.stack import StackFrontier

__all__ = [
    "Frontier",
    "StackFrontier",
    "QueueFrontier",
    "PriorityFrontier",
    "FRONTIER_NAMES",
    "get_frontier",
]

FRONTIER_NAMES = ("dfs", "bfs", "astar")


def get_frontier(name: str) -> Frontier:
    """
    Get a fresh frontier by algorithm name.

    Args:
        name: Algorithm identifier (dfs, bfs, astar); "a*" is accepted for astar

    Returns:
        Instantiated, empty frontier

    Raises:
        ValueError: If the name is unknown
    """
    frontiers = {
        "dfs": StackFrontier,
        "bfs": QueueFrontier,
        "astar": PriorityFrontier,
        "a*": PriorityFrontier,
    }

    key = name.strip().lower()
    if key not in frontiers:
        available = ", ".join(FRONTIER_NAMES)
        raise ValueError(f"Unknown algorithm '{name}'. Available: {available}")

    return frontiers[key]()
