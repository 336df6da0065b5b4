"""
Grid cells and their per-search discovery state.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CellType(Enum):
    """Whether a cell can be walked through."""

    FREE = "free"
    OBSTACLE = "obstacle"


@dataclass(eq=False)
class Cell:
    """
    A single square of the maze.

    The cell type is fixed once the maze is generated. The discovery state
    (parent and is_root) belongs to whichever search is running and is
    cleared by reset() so the same maze can be searched again.

    Attributes:
        row: Row index in the maze
        col: Column index in the maze
        cell_type: FREE or OBSTACLE
        parent: Cell whose expansion discovered this one (None if undiscovered)
        is_root: True for the start cell of the running search
    """

    row: int
    col: int
    cell_type: CellType = CellType.FREE
    parent: Cell | None = field(default=None, repr=False)
    is_root: bool = field(default=False, repr=False)

    @property
    def position(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def is_obstacle(self) -> bool:
        return self.cell_type is CellType.OBSTACLE

    @property
    def discovered(self) -> bool:
        """A cell is discovered once it is the root or has a parent."""
        return self.is_root or self.parent is not None

    def mark_root(self) -> None:
        """Make this cell the root of the discovery tree."""
        self.parent = None
        self.is_root = True

    def reset(self) -> None:
        """Clear discovery state left over from a previous search."""
        self.parent = None
        self.is_root = False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.row == other.row and self.col == other.col

    def __hash__(self) -> int:
        return hash((self.row, self.col))
