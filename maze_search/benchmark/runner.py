"""
Benchmark runner comparing DFS, BFS and A* on shared mazes.

Every algorithm searches the same maze (reset in between), so path
lengths, cells explored and execution costs are directly comparable.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from maze_search.config import DEFAULT_TRIALS
from maze_search.frontiers import FRONTIER_NAMES, get_frontier
from maze_search.grid.maze import Maze
from maze_search.search.engine import TraversalEngine
from maze_search.search.state import SearchResult

logger = logging.getLogger(__name__)


@dataclass
class AlgorithmSummary:
    """
    Aggregate statistics for one algorithm over several mazes.

    Attributes:
        algorithm: Frontier strategy name
        trials: Mazes searched
        successes: Mazes where the target was reached
        avg_path_length: Mean path length over successful searches (None if none)
        avg_cells_explored: Mean discovered-cell count over all searches
        avg_execution_cost: Mean agent walking cost over all searches
    """

    algorithm: str
    trials: int
    successes: int
    avg_path_length: float | None
    avg_cells_explored: float
    avg_execution_cost: float

    @property
    def success_rate(self) -> float:
        """Percentage of mazes where the target was reached."""
        return 100.0 * self.successes / self.trials if self.trials else 0.0


def run_algorithm(maze: Maze, algorithm: str) -> SearchResult:
    """
    Search `maze` with one algorithm and leave the maze clean afterwards.

    Raises:
        ValueError: If the algorithm name is unknown
    """
    maze.reset()
    engine = TraversalEngine(maze, get_frontier(algorithm))
    try:
        return engine.run()
    finally:
        maze.reset()


def compare_algorithms(
    maze: Maze,
    algorithms: tuple[str, ...] | list[str] = FRONTIER_NAMES,
) -> dict[str, SearchResult]:
    """
    Run every algorithm on the same maze.

    Returns:
        Mapping of algorithm name to its SearchResult, in the given order
    """
    results = {}
    for name in algorithms:
        result = run_algorithm(maze, name)
        logger.info(
            f"{result.algorithm}: found={result.found} path={result.path_length} "
            f"explored={result.cells_explored} cost={result.execution_cost}"
        )
        results[result.algorithm] = result
    return results


def run_trials(
    rows: int,
    cols: int,
    density: float,
    trials: int = DEFAULT_TRIALS,
    algorithms: tuple[str, ...] | list[str] = FRONTIER_NAMES,
    seed: int | None = None,
) -> dict[str, AlgorithmSummary]:
    """
    Compare algorithms over `trials` independent random mazes.

    Args:
        rows: Maze rows
        cols: Maze columns
        density: Obstacle density
        trials: Number of mazes to generate
        algorithms: Algorithms to run on every maze
        seed: Seed for the maze generator (None for fresh entropy)

    Returns:
        Mapping of algorithm name to its AlgorithmSummary
    """
    if trials <= 0:
        raise ValueError(f"Trials must be positive, got {trials}")

    rng = np.random.default_rng(seed)
    per_algorithm: dict[str, list[SearchResult]] = {}

    for trial in range(trials):
        maze = Maze.generate(rows, cols, density, rng=rng)
        for name, result in compare_algorithms(maze, algorithms).items():
            per_algorithm.setdefault(name, []).append(result)
        logger.debug(f"Trial {trial + 1}/{trials} done")

    return {name: summarize(name, results) for name, results in per_algorithm.items()}


def summarize(algorithm: str, results: list[SearchResult]) -> AlgorithmSummary:
    """Aggregate a list of results for a single algorithm."""
    found = [r.path_length for r in results if r.found]
    explored = np.array([r.cells_explored for r in results], dtype=float)
    costs = np.array([r.execution_cost for r in results], dtype=float)

    return AlgorithmSummary(
        algorithm=algorithm,
        trials=len(results),
        successes=len(found),
        avg_path_length=float(np.mean(found)) if found else None,
        avg_cells_explored=float(explored.mean()) if len(results) else 0.0,
        avg_execution_cost=float(costs.mean()) if len(results) else 0.0,
    )
