"""
Grid module.

Provides the maze the searches run over:
- Cell: One square with its type and discovery state
- CellType: FREE or OBSTACLE
- Maze: Grid of cells with start, target, and neighbor lookup
"""

from maze_search.grid.cell import Cell, CellType
from maze_search.grid.maze import Maze, manhattan

__all__ = [
    "Cell",
    "CellType",
    "Maze",
    "manhattan",
]
