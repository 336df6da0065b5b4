"""
Traversal engine shared by DFS, BFS and A*.

The engine runs one generic graph-search loop over a maze. Which cell is
expanded next is decided entirely by the frontier it is given; the engine
owns the rest of the search state (start, target, current cell, simulated
agent position and walking cost) and writes discovery parents onto the
maze's cells as it goes.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from maze_search.exceptions import StaleGridError
from maze_search.search.state import SearchResult, SearchStatus, SearchStep
from maze_search.search.tree import depth, rope_distance, traceback

if TYPE_CHECKING:
    from maze_search.frontiers.base import Frontier
    from maze_search.grid.cell import Cell
    from maze_search.grid.maze import Maze

logger = logging.getLogger(__name__)

StepCallback = Callable[["TraversalEngine"], None]


class TraversalEngine:
    """
    Runs a frontier-driven search from start to target.

    The engine handles:
    - Seeding the frontier and marking the start as the tree root
    - Expanding cells in frontier order and discovering their neighbors
    - Relaxing parents when a shorter discovery path shows up
    - Tracking the agent's walking cost between expansions
    - Reconstructing the path once the target is discovered

    Every field a renderer needs (current cell, start, target, path,
    discovery edges) can be read after each step, typically from the
    on_step callback.
    """

    def __init__(
        self,
        maze: Maze,
        frontier: Frontier,
        on_step: StepCallback | None = None,
    ) -> None:
        """
        Initialize the engine.

        Args:
            maze: Maze to search; its cells receive the discovery state
            frontier: Expansion strategy (stack, queue, or priority heap)
            on_step: Called with the engine after every frontier pop
        """
        self._maze = maze
        self._frontier = frontier
        self._on_step = on_step

        self._status = SearchStatus.IDLE
        self._start: Cell | None = None
        self._target: Cell | None = None
        self._current: Cell | None = None
        self._agent_pos: Cell | None = None
        self._execution_cost = 0
        self._path: list[Cell] | None = None
        self._steps: list[SearchStep] = []

    # =========================================================================
    # Observable state
    # =========================================================================

    @property
    def maze(self) -> Maze:
        return self._maze

    @property
    def frontier(self) -> Frontier:
        return self._frontier

    @property
    def algorithm(self) -> str:
        return self._frontier.name

    @property
    def status(self) -> SearchStatus:
        return self._status

    @property
    def start(self) -> Cell | None:
        return self._start

    @property
    def target(self) -> Cell | None:
        return self._target

    @property
    def current(self) -> Cell | None:
        """Cell expanded most recently."""
        return self._current

    @property
    def agent_pos(self) -> Cell | None:
        """Where the simulated agent is standing."""
        return self._agent_pos

    @property
    def execution_cost(self) -> int:
        """Total number of tree edges the agent has walked so far."""
        return self._execution_cost

    @property
    def path(self) -> list[Cell] | None:
        """Path from target back to (excluding) start, once found."""
        return self._path

    @property
    def steps(self) -> list[SearchStep]:
        return list(self._steps)

    @property
    def expanded_count(self) -> int:
        return len(self._steps)

    def discovery_edges(self) -> list[tuple[Cell, Cell]]:
        """(child, parent) pairs of the current discovery tree."""
        return [(cell, cell.parent) for cell in self._maze if cell.parent is not None]

    def reset(self) -> None:
        """
        Clear engine-level search state.

        Per-cell discovery state is left alone; call maze.reset() before
        searching the same maze again.
        """
        self._status = SearchStatus.IDLE
        self._start = None
        self._target = None
        self._current = None
        self._agent_pos = None
        self._execution_cost = 0
        self._path = None
        self._steps = []
        self._frontier.clear()

    # =========================================================================
    # Search
    # =========================================================================

    def _resolve(self, cell: Cell | None, default: Cell, role: str) -> Cell:
        """Map a requested endpoint onto the maze's own cell."""
        if cell is None:
            return default
        if not self._maze.in_bounds(cell.row, cell.col):
            raise ValueError(f"{role.capitalize()} {cell.position} is outside the maze")
        own = self._maze.get(cell.row, cell.col)
        if own.is_obstacle:
            raise ValueError(f"{role.capitalize()} {cell.position} is an obstacle")
        return own

    def search(
        self,
        start: Cell | None = None,
        target: Cell | None = None,
    ) -> list[Cell] | None:
        """
        Search the maze from start to target.

        Args:
            start: Starting cell (defaults to the maze's start)
            target: Target cell (defaults to the maze's target)

        Returns:
            Cells from the target back to the first move (start excluded),
            or None if the frontier ran out before the target was discovered

        Raises:
            StaleGridError: If the maze still holds state from an earlier search
            ValueError: If start/target are outside the maze, obstacles, or equal
        """
        start = self._resolve(start, self._maze.start, "start")
        target = self._resolve(target, self._maze.target, "target")
        if start == target:
            raise ValueError(f"Start and target must differ, both are {start.position}")

        if not self._maze.is_clean():
            raise StaleGridError(
                f"Maze has {self._maze.count_discovered()} discovered cells left "
                "from an earlier search; call maze.reset() first"
            )

        self.reset()
        self._start = start
        self._target = target
        self._current = start
        self._status = SearchStatus.RUNNING

        logger.info(
            f"Starting {self.algorithm} search: {start.position} -> {target.position}"
        )

        start.mark_root()
        self._frontier.bind(start, target)
        self._frontier.insert(start)

        while self._frontier.remaining_count() > 0:
            self._current = self._frontier.extract()
            step = self._walk_to(self._current)

            found = self._expand(self._current, step)
            step.frontier_size = self._frontier.remaining_count()
            self._steps.append(step)

            if found:
                self._path = traceback(target, start)
                self._status = SearchStatus.FOUND
                logger.info(
                    f"Found target after {self.expanded_count} expansions: "
                    f"path length {len(self._path)}, execution cost {self._execution_cost}"
                )
            if self._on_step is not None:
                self._on_step(self)
            if found:
                return self._path

        self._status = SearchStatus.EXHAUSTED
        logger.info(
            f"Frontier exhausted after {self.expanded_count} expansions; "
            f"target {target.position} unreachable"
        )
        return None

    def _walk_to(self, cell: Cell) -> SearchStep:
        """Move the agent along the discovery tree to `cell` and charge the walk."""
        walk = rope_distance(self._agent_pos, cell)
        if walk > 0:
            self._execution_cost += walk
        self._agent_pos = cell
        return SearchStep(
            step_number=len(self._steps) + 1,
            cell=cell.position,
            walk=max(walk, 0),
        )

    def _expand(self, current: Cell, step: SearchStep) -> bool:
        """
        Discover or relax every free neighbor of `current`.

        Returns:
            True as soon as the target is among the neighbors
        """
        for neighbor in self._maze.neighbors(current):
            if not neighbor.discovered:
                neighbor.parent = current
                self._frontier.insert(neighbor)
                step.discovered.append(neighbor.position)
            elif depth(current) + 1 < depth(neighbor):
                logger.debug(
                    f"Relaxing {neighbor.position}: parent "
                    f"{neighbor.parent.position} -> {current.position}"
                )
                neighbor.parent = current
                self._frontier.reprioritize(neighbor)
                step.relaxed.append(neighbor.position)

            if neighbor == self._target:
                return True
        return False

    def run(
        self,
        start: Cell | None = None,
        target: Cell | None = None,
    ) -> SearchResult:
        """
        Search and summarize the outcome.

        Same arguments and errors as search().

        Returns:
            SearchResult with path, exploration counts, and cost
        """
        started = time.time() * 1000
        path = self.search(start, target)
        elapsed = time.time() * 1000 - started

        # Report the path in walking order, first move to target
        walked = [cell.position for cell in reversed(path)] if path else []

        return SearchResult(
            algorithm=self.algorithm,
            start=self._start.position,
            target=self._target.position,
            path=walked,
            found=path is not None,
            cells_explored=self._maze.count_discovered(),
            expanded=self.expanded_count,
            execution_cost=self._execution_cost,
            elapsed_ms=elapsed,
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(algorithm={self.algorithm!r}, "
            f"status={self._status.value})"
        )
