"""
Breadth-first frontier - expands cells in the order they were discovered.
"""

from __future__ import annotations

from collections import deque

from maze_search.frontiers.base import Frontier
from maze_search.grid.cell import Cell


class QueueFrontier(Frontier):
    """
    FIFO frontier used by Breadth-First Search.

    Cells are expanded level by level, so the first time the target is
    discovered its path is a shortest one on an unweighted grid.
    """

    def __init__(self) -> None:
        self._queue: deque[Cell] = deque()

    @property
    def name(self) -> str:
        return "bfs"

    @property
    def description(self) -> str:
        return "Breadth-first (FIFO queue)"

    def insert(self, cell: Cell) -> None:
        self._queue.append(cell)

    def extract(self) -> Cell | None:
        return self._queue.popleft() if self._queue else None

    def remaining_count(self) -> int:
        return len(self._queue)

    def clear(self) -> None:
        self._queue.clear()
