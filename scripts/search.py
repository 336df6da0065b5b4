#!/usr/bin/env python3
"""
Maze Search CLI - Run one search algorithm on a random maze.

Usage:
    python scripts/search.py                     # MAZE_ROWS x MAZE_COLS, MAZE_DENSITY
    python scripts/search.py 30 30 0.2
    python scripts/search.py 20 40 0.3 --algo astar --seed 7
    python scripts/search.py 15 15 0.25 --algo dfs --display --delay 100
    python scripts/search.py 30 30 0.2 --algo bfs --plot

Algorithms:
    dfs   - Depth-first search (stack)
    bfs   - Breadth-first search (queue)
    astar - A* with Manhattan heuristic (binary heap)
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from maze_search.config import (  # noqa: E402
    DEFAULT_ALGORITHM,
    DEFAULT_COLS,
    DEFAULT_DELAY_MS,
    DEFAULT_DENSITY,
    DEFAULT_ROWS,
    LOG_DATEFMT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from maze_search.exceptions import MazeGenerationError  # noqa: E402
from maze_search.frontiers import FRONTIER_NAMES, get_frontier  # noqa: E402
from maze_search.grid import Maze  # noqa: E402
from maze_search.render import create_search_figure, render_ascii  # noqa: E402
from maze_search.search import TraversalEngine  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Search a random maze with DFS, BFS, or A*",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "rows", type=int, nargs="?", default=DEFAULT_ROWS,
        help=f"Number of maze rows (default: {DEFAULT_ROWS})",
    )
    parser.add_argument(
        "cols", type=int, nargs="?", default=DEFAULT_COLS,
        help=f"Number of maze columns (default: {DEFAULT_COLS})",
    )
    parser.add_argument(
        "density", type=float, nargs="?", default=DEFAULT_DENSITY,
        help=f"Obstacle probability per cell, 0-1 (default: {DEFAULT_DENSITY})",
    )
    parser.add_argument(
        "--algo",
        type=str.lower,
        default=DEFAULT_ALGORITHM,
        choices=[*FRONTIER_NAMES, "a*"],
        help=f"Search algorithm (default: {DEFAULT_ALGORITHM})",
    )
    parser.add_argument(
        "--display",
        action="store_true",
        help="Print the maze after every expansion",
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help="Milliseconds to pause between displayed steps",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for maze generation",
    )
    parser.add_argument(
        "--plot",
        action="store_true",
        help="Open a plotly figure of the finished search",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def make_display_callback(delay_ms: int):
    """Step callback that prints a frame, then sleeps."""

    def on_step(engine: TraversalEngine) -> None:
        print(render_ascii(engine))
        print()
        if delay_ms > 0:
            time.sleep(delay_ms / 1000)

    return on_step


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)

    try:
        maze = Maze.generate(args.rows, args.cols, args.density, seed=args.seed)
    except (ValueError, MazeGenerationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    on_step = make_display_callback(args.delay) if args.display else None
    engine = TraversalEngine(maze, get_frontier(args.algo), on_step=on_step)

    try:
        result = engine.run()
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130

    if result.found:
        print(f"Path length = {result.path_length}")
    else:
        print("Path NOT found")
    print(f"Cells explored = {result.cells_explored}")
    print(f"Execution cost = {result.execution_cost}")

    if args.plot:
        create_search_figure(engine).show()

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
