"""
Frontier base class for maze search strategies.

A frontier holds the cells that have been discovered but not yet
expanded. DFS, BFS and A* share one traversal loop and differ only in
which frontier they hand it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from maze_search.grid.cell import Cell


class Frontier(ABC):
    """
    Abstract base class for search frontiers.

    Implementations decide the order in which discovered cells are
    expanded. They never touch the discovery tree themselves; the
    traversal engine owns that state.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier for the strategy (e.g., 'dfs', 'bfs', 'astar')."""
        ...

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of the expansion order."""
        ...

    @abstractmethod
    def insert(self, cell: Cell) -> None:
        """Add a newly discovered cell."""
        ...

    @abstractmethod
    def extract(self) -> Cell | None:
        """
        Remove and return the next cell to expand.

        Returns:
            The next cell, or None if the frontier is empty
        """
        ...

    @abstractmethod
    def remaining_count(self) -> int:
        """Number of cells waiting to be expanded."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every queued cell."""
        ...

    def reprioritize(self, cell: Cell) -> None:
        """Called when a queued cell gets a shorter path. Override if order depends on it."""
        pass

    def bind(self, start: Cell, target: Cell) -> None:
        """Called when a search begins. Override if ordering depends on the endpoints."""
        pass

    def __len__(self) -> int:
        return self.remaining_count()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, size={self.remaining_count()})"
