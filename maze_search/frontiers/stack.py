"""
Depth-first frontier - expands the most recently discovered cell first.
"""

from __future__ import annotations

from maze_search.frontiers.base import Frontier
from maze_search.grid.cell import Cell


class StackFrontier(Frontier):
    """
    LIFO frontier used by Depth-First Search.

    Goes as deep as possible before backtracking, so the path it finds
    is usually longer than the shortest one.
    """

    def __init__(self) -> None:
        self._stack: list[Cell] = []

    @property
    def name(self) -> str:
        return "dfs"

    @property
    def description(self) -> str:
        return "Depth-first (LIFO stack)"

    def insert(self, cell: Cell) -> None:
        self._stack.append(cell)

    def extract(self) -> Cell | None:
        return self._stack.pop() if self._stack else None

    def remaining_count(self) -> int:
        return len(self._stack)

    def clear(self) -> None:
        self._stack.clear()
