"""
Search state dataclasses for tracking a traversal run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class SearchStatus(Enum):
    """Lifecycle of a traversal: IDLE -> RUNNING -> FOUND or EXHAUSTED."""

    IDLE = "idle"
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"

    @property
    def is_finished(self) -> bool:
        return self in (SearchStatus.FOUND, SearchStatus.EXHAUSTED)


@dataclass
class SearchStep:
    """
    Records a single frontier pop.

    Attributes:
        step_number: 1-indexed expansion count
        cell: Position of the expanded cell
        walk: Tree edges the agent walked to reach it (0 for the first step)
        discovered: Positions first discovered by this expansion
        relaxed: Positions whose parent was moved to this cell
        frontier_size: Cells left in the frontier after the expansion
    """

    step_number: int
    cell: tuple[int, int]
    walk: int
    discovered: list[tuple[int, int]] = field(default_factory=list)
    relaxed: list[tuple[int, int]] = field(default_factory=list)
    frontier_size: int = 0


@dataclass
class SearchResult:
    """
    Complete record of a finished search.

    Attributes:
        algorithm: Name of the frontier strategy used
        start: Start position
        target: Target position
        path: Positions from the first move to the target (start excluded)
        found: Whether the target was reached
        cells_explored: Cells discovered during the search (start included)
        expanded: Number of frontier pops
        execution_cost: Total tree edges walked by the agent
        elapsed_ms: Wall-clock search time in milliseconds
        timestamp: When the search was run
    """

    algorithm: str
    start: tuple[int, int]
    target: tuple[int, int]
    path: list[tuple[int, int]]
    found: bool
    cells_explored: int
    expanded: int
    execution_cost: int
    elapsed_ms: float
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def path_length(self) -> int:
        """Number of moves on the returned path (0 if not found)."""
        return len(self.path)

    def to_dict(self) -> dict:
        return {
            "algorithm": self.algorithm,
            "start": self.start,
            "target": self.target,
            "found": self.found,
            "path_length": self.path_length,
            "cells_explored": self.cells_explored,
            "expanded": self.expanded,
            "execution_cost": self.execution_cost,
            "elapsed_ms": round(self.elapsed_ms, 3),
        }
