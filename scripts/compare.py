#!/usr/bin/env python3
"""
Compare DFS, BFS and A* on the same random maze(s).

Usage:
    python scripts/compare.py                        # one maze at the configured defaults
    python scripts/compare.py --rows 30 --cols 30 --density 0.2 --seed 3
    python scripts/compare.py --density 0.3 --trials 50   # success rates
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from maze_search.benchmark import compare_algorithms, run_trials  # noqa: E402
from maze_search.config import (  # noqa: E402
    DEFAULT_COLS,
    DEFAULT_DENSITY,
    DEFAULT_ROWS,
    LOG_DATEFMT,
    LOG_FORMAT,
)
from maze_search.exceptions import MazeGenerationError  # noqa: E402
from maze_search.grid import Maze  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Compare maze search algorithms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--rows", type=int, default=DEFAULT_ROWS, help=f"Maze rows (default: {DEFAULT_ROWS})"
    )
    parser.add_argument(
        "--cols", type=int, default=DEFAULT_COLS, help=f"Maze columns (default: {DEFAULT_COLS})"
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help=f"Obstacle density (default: {DEFAULT_DENSITY})",
    )
    parser.add_argument(
        "--trials",
        type=int,
        default=1,
        help="Number of random mazes; more than 1 prints averages and success rates",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    return parser.parse_args(argv)


def print_single(maze: Maze) -> None:
    results = compare_algorithms(maze)

    print(maze)
    print(f"Start: {maze.start.position}  Target: {maze.target.position}\n")
    print(f"{'Algorithm':<10} {'Found':<6} {'Path':>6} {'Explored':>9} {'Cost':>7}")
    print("-" * 42)
    for name, r in results.items():
        path = str(r.path_length) if r.found else "-"
        print(f"{name:<10} {str(r.found):<6} {path:>6} {r.cells_explored:>9} {r.execution_cost:>7}")


def print_trials(args: argparse.Namespace) -> None:
    summaries = run_trials(
        args.rows, args.cols, args.density, trials=args.trials, seed=args.seed
    )

    print(f"{args.trials} random {args.rows}x{args.cols} mazes, density {args.density}\n")
    print(f"{'Algorithm':<10} {'Success':>8} {'Avg path':>9} {'Avg explored':>13} {'Avg cost':>9}")
    print("-" * 53)
    for s in summaries.values():
        path = f"{s.avg_path_length:.1f}" if s.avg_path_length is not None else "-"
        print(
            f"{s.algorithm:<10} {s.success_rate:>7.1f}% {path:>9} "
            f"{s.avg_cells_explored:>13.1f} {s.avg_execution_cost:>9.1f}"
        )


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )

    try:
        if args.trials > 1:
            print_trials(args)
        else:
            print_single(Maze.generate(args.rows, args.cols, args.density, seed=args.seed))
    except (ValueError, MazeGenerationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
