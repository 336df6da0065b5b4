"""
Rendering of a traversal engine's state.

The engine only exposes state; everything here reads it:
- snapshot(): Plain dataclass of everything a renderer needs
- render_ascii(): Text frame for terminal display
- create_search_figure(): Plotly figure of maze, discovery tree, and path
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
import plotly.graph_objects as go

from maze_search.config import (
    ASCII_CURRENT,
    ASCII_DISCOVERED,
    ASCII_FREE,
    ASCII_OBSTACLE,
    ASCII_PATH,
    ASCII_START,
    ASCII_TARGET,
    COLOR_CURRENT,
    COLOR_DISCOVERED,
    COLOR_FREE,
    COLOR_OBSTACLE,
    COLOR_PATH_CELL,
    COLOR_PATH_LINE,
    COLOR_START,
    COLOR_TARGET,
    COLOR_TREE_EDGE,
    FIGURE_CELL_SCALE,
)

if TYPE_CHECKING:
    from maze_search.search.engine import TraversalEngine

Position = tuple[int, int]

# Heatmap levels for create_search_figure()
LEVEL_FREE = 0
LEVEL_OBSTACLE = 1
LEVEL_DISCOVERED = 2
LEVEL_PATH = 3


@dataclass
class SearchSnapshot:
    """
    Everything needed to draw one frame of a search.

    Attributes:
        rows: Maze rows
        cols: Maze columns
        algorithm: Frontier strategy name
        status: Engine status value
        obstacles: Boolean mask, True where a cell is an obstacle
        discovered: Positions with discovery state (start included)
        edges: (child, parent) position pairs of the discovery tree
        path: Path positions from target back to the first move
        start: Start position (None before the first search)
        target: Target position
        current: Most recently expanded position
        execution_cost: Agent walking cost so far
        expanded: Frontier pops so far
    """

    rows: int
    cols: int
    algorithm: str
    status: str
    obstacles: np.ndarray
    discovered: set[Position] = field(default_factory=set)
    edges: list[tuple[Position, Position]] = field(default_factory=list)
    path: list[Position] = field(default_factory=list)
    start: Position | None = None
    target: Position | None = None
    current: Position | None = None
    execution_cost: int = 0
    expanded: int = 0


def snapshot(engine: TraversalEngine) -> SearchSnapshot:
    """Copy the engine's renderable state."""
    maze = engine.maze

    def pos(cell):
        return cell.position if cell is not None else None

    return SearchSnapshot(
        rows=maze.rows,
        cols=maze.cols,
        algorithm=engine.algorithm,
        status=engine.status.value,
        obstacles=maze.obstacle_mask(),
        discovered={cell.position for cell in maze if cell.discovered},
        edges=[(child.position, parent.position) for child, parent in engine.discovery_edges()],
        path=[cell.position for cell in engine.path or []],
        start=pos(engine.start) or maze.start.position,
        target=pos(engine.target) or maze.target.position,
        current=pos(engine.current),
        execution_cost=engine.execution_cost,
        expanded=engine.expanded_count,
    )


def render_ascii(engine: TraversalEngine) -> str:
    """
    Draw the search as text.

    Obstacles '#', discovered '.', path '*', start 'S', target 'T' and the
    current cell '@', framed like str(maze).
    """
    snap = snapshot(engine)
    grid = [
        [ASCII_OBSTACLE if snap.obstacles[r, c] else ASCII_FREE for c in range(snap.cols)]
        for r in range(snap.rows)
    ]

    for r, c in snap.discovered:
        grid[r][c] = ASCII_DISCOVERED
    for r, c in snap.path:
        grid[r][c] = ASCII_PATH
    if snap.current is not None:
        grid[snap.current[0]][snap.current[1]] = ASCII_CURRENT
    grid[snap.start[0]][snap.start[1]] = ASCII_START
    grid[snap.target[0]][snap.target[1]] = ASCII_TARGET

    border = "-" * (snap.cols + 3)
    lines = [border]
    lines.extend(f"| {''.join(row)}|" for row in grid)
    lines.append(border)
    lines.append(
        f"{snap.algorithm} [{snap.status}] expanded={snap.expanded} "
        f"cost={snap.execution_cost}"
    )
    return "\n".join(lines)


def _state_levels(snap: SearchSnapshot) -> np.ndarray:
    levels = np.where(snap.obstacles, LEVEL_OBSTACLE, LEVEL_FREE)
    for r, c in snap.discovered:
        levels[r, c] = LEVEL_DISCOVERED
    for r, c in snap.path:
        levels[r, c] = LEVEL_PATH
    return levels


def create_search_figure(engine: TraversalEngine, scale: int = FIGURE_CELL_SCALE) -> go.Figure:
    """
    Figure of the maze with the discovery tree and (if found) the path.

    Cells are shaded by state, tree edges are drawn in red, the path as a
    blue line, and start/target/current as markers.
    """
    snap = snapshot(engine)
    levels = _state_levels(snap)

    # Discrete colorscale: one band per level
    palette = [COLOR_FREE, COLOR_OBSTACLE, COLOR_DISCOVERED, COLOR_PATH_CELL]
    colorscale = []
    for i, color in enumerate(palette):
        colorscale.append([i / len(palette), color])
        colorscale.append([(i + 1) / len(palette), color])

    fig = go.Figure()
    fig.add_trace(go.Heatmap(
        z=levels,
        zmin=-0.5,
        zmax=len(palette) - 0.5,
        colorscale=colorscale,
        showscale=False,
        hoverinfo="skip",
        xgap=1,
        ygap=1,
    ))

    # Tree edges as one trace with None separators
    edge_x: list[float | None] = []
    edge_y: list[float | None] = []
    for (cr, cc), (pr, pc) in snap.edges:
        edge_x.extend([cc, pc, None])
        edge_y.extend([cr, pr, None])
    fig.add_trace(go.Scatter(
        x=edge_x, y=edge_y, mode="lines",
        line=dict(color=COLOR_TREE_EDGE, width=1),
        name="discovery tree",
    ))

    if snap.path:
        walk = [snap.start] + list(reversed(snap.path))
        fig.add_trace(go.Scatter(
            x=[c for _, c in walk], y=[r for r, _ in walk], mode="lines",
            line=dict(color=COLOR_PATH_LINE, width=3),
            name=f"path ({len(snap.path)})",
        ))

    markers = [("start", snap.start, COLOR_START), ("target", snap.target, COLOR_TARGET)]
    if snap.current is not None:
        markers.append(("current", snap.current, COLOR_CURRENT))
    for label, (r, c), color in markers:
        fig.add_trace(go.Scatter(
            x=[c], y=[r], mode="markers",
            marker=dict(size=max(scale // 2, 6), color=color, symbol="square"),
            name=label,
        ))

    fig.update_layout(
        title=(
            f"{snap.algorithm.upper()} - {snap.status} "
            f"(explored {len(snap.discovered)}, cost {snap.execution_cost})"
        ),
        width=snap.cols * scale + 200,
        height=snap.rows * scale + 120,
        margin=dict(t=50, b=20, l=20, r=20),
        plot_bgcolor="white",
    )
    fig.update_xaxes(visible=False, range=[-0.5, snap.cols - 0.5])
    fig.update_yaxes(visible=False, range=[snap.rows - 0.5, -0.5], scaleanchor="x")
    return fig
