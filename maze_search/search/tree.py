"""
Helpers for the implicit discovery tree formed by cell parent links.

The root of the tree is the cell flagged is_root (the search start).
"""

from __future__ import annotations

from typing import Iterator

from maze_search.config import NOT_CONNECTED
from maze_search.grid.cell import Cell


def iter_ancestors(cell: Cell) -> Iterator[Cell]:
    """
    Yield `cell`, its parent, its grandparent, ... up to the root.

    Raises:
        RuntimeError: If the parent links loop back on themselves
    """
    seen: set[Cell] = set()
    node: Cell | None = cell
    while node is not None:
        if node in seen:
            raise RuntimeError(f"Discovery tree has a cycle through {node.position}")
        seen.add(node)
        yield node
        if node.is_root:
            return
        node = node.parent


def depth(cell: Cell) -> int:
    """Number of parent links between `cell` and the root."""
    return sum(1 for _ in iter_ancestors(cell)) - 1


def traceback(cell: Cell, start: Cell) -> list[Cell]:
    """
    Collect the path from `cell` back to `start` by following parent links.

    The returned list starts with `cell` and excludes `start`, so its length
    is the number of moves from start to cell.

    Raises:
        ValueError: If `cell` is not connected to `start` in the tree
    """
    path = []
    for node in iter_ancestors(cell):
        if node == start:
            return path
        path.append(node)
    raise ValueError(f"Cell {cell.position} is not connected to start {start.position}")


def rope_distance(from_cell: Cell | None, to_cell: Cell | None) -> int:
    """
    Number of tree edges an agent walks to get from one cell to another.

    The agent may only move along discovered parent links, so the walk goes
    up from `from_cell` to the lowest common ancestor and back down to
    `to_cell`.

    Returns:
        Edge count, or NOT_CONNECTED if either cell is None or the two
        cells share no ancestor
    """
    if from_cell is None or to_cell is None:
        return NOT_CONNECTED

    steps_from: dict[Cell, int] = {
        node: steps for steps, node in enumerate(iter_ancestors(from_cell))
    }

    for steps_to, node in enumerate(iter_ancestors(to_cell)):
        if node in steps_from:
            return steps_from[node] + steps_to

    return NOT_CONNECTED
