"""
Rectangular maze of free and obstacle cells.

Usage:
    from maze_search.grid import Maze

    maze = Maze.generate(30, 30, 0.2, seed=7)
    maze.neighbors(maze.start)
    maze.reset()
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

import numpy as np

from maze_search.config import (
    ASCII_FREE,
    ASCII_OBSTACLE,
    FREE_CHARS,
    MAX_SAMPLING_ATTEMPTS,
    MIN_SEPARATION_DIVISOR,
    OBSTACLE_CHARS,
    validate_grid_config,
)
from maze_search.exceptions import MazeGenerationError
from maze_search.grid.cell import Cell, CellType

logger = logging.getLogger(__name__)

# Up, down, right, left
NEIGHBOR_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def manhattan(a: Cell, b: Cell) -> int:
    """Grid distance between two cells ignoring obstacles."""
    return abs(a.row - b.row) + abs(a.col - b.col)


class Maze:
    """
    Grid of cells with a fixed start and target.

    The maze owns its cells, but the discovery state stored on each cell
    belongs to the search currently running over it. Call reset() between
    searches.

    Attributes:
        rows: Number of rows
        cols: Number of columns
        density: Obstacle probability used to generate the maze (None if built by hand)
        start: Free cell where searches begin
        target: Free cell searches try to reach
    """

    def __init__(
        self,
        cells: list[list[Cell]],
        start: Cell,
        target: Cell,
        density: float | None = None,
    ) -> None:
        """
        Build a maze from an existing 2-D array of cells.

        Args:
            cells: Row-major grid of cells; every row must have the same length
            start: Starting cell (must belong to the grid and be free)
            target: Target cell (must belong to the grid, be free, and differ from start)
            density: Obstacle density the grid was generated with, if any

        Raises:
            ValueError: If the grid is empty or ragged, or start/target are invalid
        """
        if not cells or not cells[0]:
            raise ValueError("Maze needs at least one row and one column")
        width = len(cells[0])
        if any(len(row) != width for row in cells):
            raise ValueError("All maze rows must have the same length")

        self._cells = cells
        self.rows = len(cells)
        self.cols = width
        self.density = density

        self.start = self._own(start, "start")
        self.target = self._own(target, "target")
        if self.start == self.target:
            raise ValueError(f"Start and target must differ, both are {self.start.position}")

    def _own(self, cell: Cell, role: str) -> Cell:
        """Return the grid's own cell at the given cell's position."""
        if not self.in_bounds(cell.row, cell.col):
            raise ValueError(f"{role.capitalize()} {cell.position} is outside the maze")
        own = self.get(cell.row, cell.col)
        if own.is_obstacle:
            raise ValueError(f"{role.capitalize()} {cell.position} is an obstacle")
        return own

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def generate(
        cls,
        rows: int,
        cols: int,
        density: float,
        rng: np.random.Generator | None = None,
        seed: int | None = None,
    ) -> Maze:
        """
        Generate a random maze.

        Every cell is independently an obstacle with probability `density`.
        A free start and a free target are then rejection-sampled so that
        they differ and are at least rows // 2 apart in Manhattan distance.
        Starts with no free cell that far away are redrawn.

        Args:
            rows: Number of rows
            cols: Number of columns
            density: Probability of any individual cell being an obstacle
            rng: Random generator to draw from (takes precedence over seed)
            seed: Seed for a fresh generator when rng is not given

        Raises:
            ValueError: If the dimensions or density are invalid
            MazeGenerationError: If no valid start/target pair exists
        """
        validate_grid_config(rows, cols, density)
        if rng is None:
            rng = np.random.default_rng(seed)

        obstacles = rng.random((rows, cols)) < density
        cells = [
            [
                Cell(r, c, CellType.OBSTACLE if obstacles[r, c] else CellType.FREE)
                for c in range(cols)
            ]
            for r in range(rows)
        ]

        min_separation = rows // MIN_SEPARATION_DIVISOR
        _check_endpoints_possible(obstacles, min_separation)

        # Redraw the start until some free cell is far enough away from it
        start = _sample_free(
            cells,
            rng,
            lambda cell: _has_partner(obstacles, cell, min_separation),
        )
        if start is None:
            raise MazeGenerationError("Could not sample a free start cell")
        target = _sample_free(
            cells,
            rng,
            lambda cell: cell != start and manhattan(start, cell) >= min_separation,
        )
        if target is None:
            raise MazeGenerationError(
                f"No free target at distance >= {min_separation} from start {start.position}"
            )

        logger.debug(
            f"Generated {rows}x{cols} maze (density={density}): "
            f"start={start.position}, target={target.position}, "
            f"obstacles={int(obstacles.sum())}"
        )
        return cls(cells, start, target, density=density)

    @classmethod
    def from_layout(
        cls,
        lines: Iterable[str],
        start: tuple[int, int] | None = None,
        target: tuple[int, int] | None = None,
    ) -> Maze:
        """
        Build a maze from text rows.

        '#' or 'X' marks an obstacle, '.' or ' ' a free cell, and 'S'/'T'
        mark free start and target cells. Explicit start/target positions
        override the markers.

        Example:
            Maze.from_layout([
                "S..#",
                ".#..",
                "...T",
            ])

        Raises:
            ValueError: On unknown characters or missing start/target
        """
        cells: list[list[Cell]] = []
        markers: dict[str, tuple[int, int]] = {}

        for r, line in enumerate(lines):
            row = []
            for c, char in enumerate(line):
                if char in OBSTACLE_CHARS:
                    row.append(Cell(r, c, CellType.OBSTACLE))
                    continue
                if char in "ST":
                    markers[char] = (r, c)
                elif char not in FREE_CHARS:
                    raise ValueError(f"Unknown layout character {char!r} at ({r}, {c})")
                row.append(Cell(r, c, CellType.FREE))
            cells.append(row)

        start = start or markers.get("S")
        target = target or markers.get("T")
        if start is None or target is None:
            raise ValueError("Layout needs a start and a target")

        return cls(cells, Cell(*start), Cell(*target))

    # =========================================================================
    # Accessors
    # =========================================================================

    def get(self, row: int, col: int) -> Cell:
        """Get the cell at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) out of range for {self.rows}x{self.cols} maze")
        return self._cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_obstacle(self, cell: Cell) -> bool:
        """Check the grid's own cell at the given cell's position."""
        return self.get(cell.row, cell.col).is_obstacle

    def neighbors(self, cell: Cell) -> list[Cell]:
        """
        Free cells adjacent to `cell` (up, down, right, left).

        Out-of-bounds positions and obstacles are skipped.
        """
        result = []
        for dr, dc in NEIGHBOR_STEPS:
            r, c = cell.row + dr, cell.col + dc
            if self.in_bounds(r, c) and not self.is_obstacle(self._cells[r][c]):
                result.append(self._cells[r][c])
        return result

    def manhattan(self, a: Cell, b: Cell) -> int:
        return manhattan(a, b)

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._cells:
            yield from row

    # =========================================================================
    # Discovery state
    # =========================================================================

    def reset(self) -> None:
        """Clear the discovery state of every cell."""
        for cell in self:
            cell.reset()

    def count_discovered(self) -> int:
        """Number of cells discovered by the last search."""
        return sum(1 for cell in self if cell.discovered)

    def is_clean(self) -> bool:
        """True if no cell carries discovery state."""
        return not any(cell.discovered for cell in self)

    # =========================================================================
    # Summaries
    # =========================================================================

    def obstacle_mask(self) -> np.ndarray:
        """Boolean array, True where the cell is an obstacle."""
        return np.array(
            [[cell.is_obstacle for cell in row] for row in self._cells],
            dtype=bool,
        )

    def free_count(self) -> int:
        return int((~self.obstacle_mask()).sum())

    def __str__(self) -> str:
        border = "-" * (self.cols + 3)
        lines = [border]
        for row in self._cells:
            body = "".join(ASCII_OBSTACLE if cell.is_obstacle else ASCII_FREE for cell in row)
            lines.append(f"| {body}|")
        lines.append(border)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"Maze({self.rows}x{self.cols}, start={self.start.position}, "
            f"target={self.target.position})"
        )


def _check_endpoints_possible(obstacles: np.ndarray, min_separation: int) -> None:
    """Fail fast when no pair of free cells satisfies the start/target rules."""
    free_rows, free_cols = np.nonzero(~obstacles)
    if len(free_rows) < 2:
        raise MazeGenerationError(
            f"Maze has {len(free_rows)} free cell(s); need at least 2 for start and target"
        )

    # The largest Manhattan distance between two points is the larger spread
    # of (row + col) and (row - col)
    diag = free_rows + free_cols
    anti = free_rows - free_cols
    widest = max(int(diag.max() - diag.min()), int(anti.max() - anti.min()))
    if widest < min_separation:
        raise MazeGenerationError(
            f"Free cells are at most {widest} apart; need {min_separation}"
        )


def _has_partner(obstacles: np.ndarray, cell: Cell, min_separation: int) -> bool:
    """True if another free cell lies at least min_separation away from `cell`."""
    free_rows, free_cols = np.nonzero(~obstacles)
    distances = np.abs(free_rows - cell.row) + np.abs(free_cols - cell.col)
    return bool((distances >= max(min_separation, 1)).any())


def _sample_free(cells: list[list[Cell]], rng: np.random.Generator, accept) -> Cell | None:
    """Draw uniformly random cells until one is free and accepted."""
    rows, cols = len(cells), len(cells[0])
    for _ in range(MAX_SAMPLING_ATTEMPTS):
        cell = cells[int(rng.integers(rows))][int(rng.integers(cols))]
        if not cell.is_obstacle and accept(cell):
            return cell
    return None
