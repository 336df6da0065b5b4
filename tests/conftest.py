"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import pytest

from maze_search.grid import Maze


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def open_maze() -> Maze:
    """5x5 maze with no obstacles, start (0, 0), target (4, 4)."""
    return Maze.from_layout([
        "S....",
        ".....",
        ".....",
        ".....",
        "....T",
    ])


@pytest.fixture
def corridor_maze() -> Maze:
    """Single row: start, three free cells, target."""
    return Maze.from_layout(["S...T"])


@pytest.fixture
def blocked_maze() -> Maze:
    """Start boxed in by obstacles, target unreachable."""
    return Maze.from_layout([
        "S#.",
        "##.",
        "..T",
    ])


@pytest.fixture
def detour_maze() -> Maze:
    """
    3x3 open block beside an isolated target.

    DFS first reaches (2, 0) the long way round and later relaxes it
    through (1, 0).
    """
    return Maze.from_layout([
        "S..#",
        "...#",
        "..#T",
    ])


@pytest.fixture
def wide_open_maze() -> Maze:
    """11x11 open maze with start and target on the same middle row."""
    return Maze.from_layout(["." * 11] * 11, start=(5, 0), target=(5, 10))


@pytest.fixture
def seeds() -> list[int]:
    """Seeds for randomized maze tests."""
    return [0, 1, 2, 3, 4, 5, 6, 7, 8, 9]
