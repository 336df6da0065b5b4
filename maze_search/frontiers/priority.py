"""
A* frontier - expands the cell with the lowest estimated total cost.
"""

from __future__ import annotations

import logging

from maze_search.frontiers.base import Frontier
from maze_search.grid.cell import Cell
from maze_search.grid.maze import manhattan
from maze_search.search.tree import depth
from maze_search.structures.heap import BinaryHeap

logger = logging.getLogger(__name__)


class PriorityFrontier(Frontier):
    """
    Min-heap frontier used by A*.

    Cells are ordered by f(n) = g(n) + h(n), where g(n) is the number of
    moves from start along the cell's current discovery path and h(n) is
    the Manhattan distance to the target. Manhattan distance never
    overestimates on a 4-connected grid, so A* keeps BFS's path length.

    g(n) is read from the parent links at comparison time, so a cell whose
    path is shortened only needs reprioritize() to move up the heap.
    """

    def __init__(self) -> None:
        self._heap: BinaryHeap[Cell] = BinaryHeap(self._compare)
        self._target: Cell | None = None

    @property
    def name(self) -> str:
        return "astar"

    @property
    def description(self) -> str:
        return "A* (min-heap on path cost + Manhattan distance)"

    def bind(self, start: Cell, target: Cell) -> None:
        self._target = target

    def f_score(self, cell: Cell) -> int:
        """Estimated length of the cheapest start -> target path through `cell`."""
        return depth(cell) + manhattan(cell, self._target)

    def _compare(self, a: Cell, b: Cell) -> int:
        # Without a target there is no heuristic; every cell ties
        if self._target is None:
            return 0
        return self.f_score(a) - self.f_score(b)

    def insert(self, cell: Cell) -> None:
        self._heap.offer(cell)

    def extract(self) -> Cell | None:
        return self._heap.poll()

    def reprioritize(self, cell: Cell) -> None:
        self._heap.update_priority(cell)

    def peek(self) -> Cell | None:
        return self._heap.peek()

    def remaining_count(self) -> int:
        return self._heap.size()

    def clear(self) -> None:
        self._heap = BinaryHeap(self._compare)
