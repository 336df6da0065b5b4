"""
Benchmark module.

Provides infrastructure for comparing search algorithms:
- run_algorithm: One algorithm on one maze
- compare_algorithms: Every algorithm on the same maze
- run_trials: Aggregate statistics over many random mazes
- AlgorithmSummary: Success rate and averages for one algorithm
"""

from maze_search.benchmark.runner import (
    AlgorithmSummary,
    compare_algorithms,
    run_algorithm,
    run_trials,
    summarize,
)

__all__ = [
    "AlgorithmSummary",
    "compare_algorithms",
    "run_algorithm",
    "run_trials",
    "summarize",
]
