"""
Tests for the traversal engine with every frontier strategy.
"""

import pytest

from maze_search.exceptions import StaleGridError
from maze_search.frontiers import FRONTIER_NAMES, get_frontier
from maze_search.grid import Cell, Maze, manhattan
from maze_search.search import SearchStatus, TraversalEngine


def search(maze: Maze, algorithm: str):
    """Reset the maze and search it, returning (engine, path)."""
    maze.reset()
    engine = TraversalEngine(maze, get_frontier(algorithm))
    return engine, engine.search()


def assert_valid_path(maze: Maze, path: list[Cell]) -> None:
    """Path walked from start reaches target through adjacent free cells."""
    walk = [maze.start] + list(reversed(path))
    assert walk[-1] == maze.target
    for a, b in zip(walk, walk[1:]):
        assert manhattan(a, b) == 1
        assert not b.is_obstacle
    # Consecutive cells are linked by parent pointers
    for child, parent in zip(path, path[1:] + [maze.start]):
        assert child.parent is parent


class TestOpenGridScenario:
    """5x5 open maze from (0, 0) to (4, 4)."""

    def test_bfs_is_manhattan(self, open_maze):
        """BFS returns a path of length 8."""
        _, path = search(open_maze, "bfs")
        assert len(path) == 8
        assert path[0] is open_maze.target

    def test_astar_is_manhattan(self, open_maze):
        """A* returns a path of length 8."""
        _, path = search(open_maze, "astar")
        assert len(path) == 8

    def test_dfs_at_least_manhattan(self, open_maze):
        """DFS returns a path of length 8 or more."""
        _, path = search(open_maze, "dfs")
        assert len(path) >= 8

    @pytest.mark.parametrize("algorithm", FRONTIER_NAMES)
    def test_paths_are_valid(self, open_maze, algorithm):
        """Every algorithm's path reconnects start to target."""
        _, path = search(open_maze, algorithm)
        assert_valid_path(open_maze, path)


class TestStateMachine:
    """Test status transitions and observable state."""

    def test_idle_before_search(self, open_maze):
        """A new engine is idle with no endpoints."""
        engine = TraversalEngine(open_maze, get_frontier("bfs"))
        assert engine.status is SearchStatus.IDLE
        assert engine.start is None
        assert engine.path is None

    def test_found(self, corridor_maze):
        """Reaching the target ends in FOUND with the path stored."""
        engine, path = search(corridor_maze, "bfs")
        assert engine.status is SearchStatus.FOUND
        assert engine.status.is_finished
        assert engine.path == path
        assert [c.position for c in path] == [(0, 4), (0, 3), (0, 2), (0, 1)]

    def test_exhausted(self, blocked_maze):
        """An unreachable target ends in EXHAUSTED with no path."""
        engine, path = search(blocked_maze, "bfs")
        assert path is None
        assert engine.status is SearchStatus.EXHAUSTED
        assert engine.expanded_count == 1
        assert blocked_maze.count_discovered() == 1

    @pytest.mark.parametrize("algorithm", FRONTIER_NAMES)
    def test_start_is_root(self, open_maze, algorithm):
        """Start is the tree root and never gets a parent."""
        engine, _ = search(open_maze, algorithm)
        assert open_maze.start.is_root
        assert open_maze.start.parent is None
        assert engine.current is not None

    def test_on_step_called_per_expansion(self, open_maze):
        """The step callback runs once per frontier pop, in running or final state."""
        seen = []
        open_maze.reset()
        engine = TraversalEngine(
            open_maze,
            get_frontier("bfs"),
            on_step=lambda e: seen.append((e.current.position, e.status)),
        )
        engine.search()
        assert len(seen) == engine.expanded_count
        assert seen[0] == ((0, 0), SearchStatus.RUNNING)
        assert seen[-1][1] is SearchStatus.FOUND

    def test_discovery_edges(self, corridor_maze):
        """Edges are (child, parent) pairs of the tree."""
        engine, _ = search(corridor_maze, "bfs")
        edges = {(c.position, p.position) for c, p in engine.discovery_edges()}
        assert edges == {((0, 1), (0, 0)), ((0, 2), (0, 1)), ((0, 3), (0, 2)), ((0, 4), (0, 3))}

    def test_steps_record_discoveries(self, corridor_maze):
        """Each step lists what it discovered."""
        engine, _ = search(corridor_maze, "bfs")
        steps = engine.steps
        assert [s.cell for s in steps] == [(0, 0), (0, 1), (0, 2), (0, 3)]
        assert steps[0].discovered == [(0, 1)]
        assert steps[-1].discovered == [(0, 4)]


class TestExecutionCost:
    """Test the agent's walking cost."""

    def test_corridor_cost(self, corridor_maze):
        """Walking a corridor costs one edge per expansion after the first."""
        engine, _ = search(corridor_maze, "bfs")
        assert engine.execution_cost == 3
        assert [s.walk for s in engine.steps] == [0, 1, 1, 1]

    @pytest.mark.parametrize("algorithm", FRONTIER_NAMES)
    def test_cost_at_least_expansions(self, algorithm, seeds):
        """Each pop after the first moves the agent at least one edge."""
        for seed in seeds:
            maze = Maze.generate(15, 15, 0.2, seed=seed)
            engine, _ = search(maze, algorithm)
            assert engine.execution_cost >= engine.expanded_count - 1
            assert engine.execution_cost == sum(s.walk for s in engine.steps)

    def test_bfs_walks_more_than_path(self, open_maze):
        """BFS jumps between branches, so the agent walks further than the path."""
        engine, path = search(open_maze, "bfs")
        assert engine.execution_cost > len(path)


class TestRelaxation:
    """Test parent reassignment when a shorter path appears."""

    def test_dfs_relaxes_long_branch(self, detour_maze):
        """DFS first reaches (2, 0) in four moves, then relinks it through (1, 0)."""
        engine, path = search(detour_maze, "dfs")
        assert path is None

        relaxed = {s.cell: s.relaxed for s in engine.steps if s.relaxed}
        assert relaxed == {(1, 0): [(2, 0)]}
        assert detour_maze.get(2, 0).parent is detour_maze.get(1, 0)

    def test_bfs_never_relaxes(self, seeds):
        """BFS discovers every cell at its minimum depth."""
        for seed in seeds:
            maze = Maze.generate(15, 15, 0.25, seed=seed)
            engine, _ = search(maze, "bfs")
            assert all(not s.relaxed for s in engine.steps)


class TestOptimality:
    """Compare algorithms on random mazes."""

    def test_bfs_optimal_on_open_grid(self, seeds):
        """Without obstacles BFS path length equals Manhattan distance."""
        for seed in seeds:
            maze = Maze.generate(12, 12, 0.0, seed=seed)
            _, path = search(maze, "bfs")
            assert len(path) == manhattan(maze.start, maze.target)

    def test_astar_matches_bfs(self, seeds):
        """A* finds paths exactly as short as BFS."""
        for seed in seeds:
            maze = Maze.generate(20, 20, 0.25, seed=seed)
            _, bfs_path = search(maze, "bfs")
            _, astar_path = search(maze, "astar")
            assert (bfs_path is None) == (astar_path is None)
            if bfs_path is not None:
                assert len(astar_path) == len(bfs_path)
                assert_valid_path(maze, astar_path)

    def test_dfs_not_shorter_than_bfs(self, seeds):
        """DFS never beats BFS on path length."""
        for seed in seeds:
            maze = Maze.generate(20, 20, 0.25, seed=seed)
            _, bfs_path = search(maze, "bfs")
            _, dfs_path = search(maze, "dfs")
            assert (bfs_path is None) == (dfs_path is None)
            if bfs_path is not None:
                assert len(dfs_path) >= len(bfs_path)
                assert_valid_path(maze, dfs_path)

    def test_astar_explores_less(self, wide_open_maze):
        """The heuristic keeps A* on the middle row while BFS floods the grid."""
        search(wide_open_maze, "bfs")
        bfs_explored = wide_open_maze.count_discovered()
        _, path = search(wide_open_maze, "astar")
        astar_explored = wide_open_maze.count_discovered()

        assert len(path) == 10
        assert astar_explored == 31
        assert astar_explored < bfs_explored

    @pytest.mark.parametrize("seed", range(20))
    def test_astar_explores_no_more_with_obstacles(self, seed):
        """On random mazes with obstacles A* never discovers more cells than BFS."""
        maze = Maze.generate(20, 20, 0.2, seed=seed)
        _, bfs_path = search(maze, "bfs")
        bfs_explored = maze.count_discovered()
        _, astar_path = search(maze, "astar")
        astar_explored = maze.count_discovered()

        assert (astar_path is None) == (bfs_path is None)
        assert astar_explored <= bfs_explored


class TestResetDiscipline:
    """Test reuse of a maze across searches."""

    def test_stale_maze_rejected(self, open_maze):
        """Searching again without maze.reset() fails loudly."""
        engine = TraversalEngine(open_maze, get_frontier("bfs"))
        engine.search()
        with pytest.raises(StaleGridError):
            engine.search()

    def test_reset_round_trip(self):
        """A reset maze searches exactly like a freshly generated twin."""
        maze = Maze.generate(20, 20, 0.2, seed=21)
        twin = Maze.generate(20, 20, 0.2, seed=21)

        for algorithm in FRONTIER_NAMES:
            maze.reset()
            assert all(cell.parent is None and not cell.is_root for cell in maze)
            TraversalEngine(maze, get_frontier(algorithm)).search()

            twin.reset()
            TraversalEngine(twin, get_frontier(algorithm)).search()

            visited = {c.position for c in maze if c.discovered}
            twin_visited = {c.position for c in twin if c.discovered}
            assert visited == twin_visited

    def test_engine_reused_after_maze_reset(self, corridor_maze):
        """One engine can search again once the maze is reset."""
        engine = TraversalEngine(corridor_maze, get_frontier("astar"))
        first = engine.search()
        corridor_maze.reset()
        second = engine.search()
        assert first == second
        assert engine.execution_cost == 3


class TestEndpointValidation:
    """Test explicit start/target arguments."""

    def test_custom_endpoints(self, open_maze):
        """Explicit cells override the maze's endpoints."""
        engine = TraversalEngine(open_maze, get_frontier("bfs"))
        path = engine.search(Cell(2, 2), Cell(2, 4))
        assert len(path) == 2
        assert engine.start is open_maze.get(2, 2)

    def test_obstacle_start(self, blocked_maze):
        """An obstacle start raises ValueError."""
        engine = TraversalEngine(blocked_maze, get_frontier("bfs"))
        with pytest.raises(ValueError):
            engine.search(Cell(0, 1))

    def test_out_of_bounds_target(self, open_maze):
        """A target outside the maze raises ValueError."""
        engine = TraversalEngine(open_maze, get_frontier("bfs"))
        with pytest.raises(ValueError):
            engine.search(target=Cell(9, 9))

    def test_same_endpoints(self, open_maze):
        """Start equal to target raises ValueError."""
        engine = TraversalEngine(open_maze, get_frontier("bfs"))
        with pytest.raises(ValueError):
            engine.search(Cell(1, 1), Cell(1, 1))


class TestRun:
    """Test the SearchResult summary."""

    def test_found_result(self, corridor_maze):
        """run() reports path in walking order and the counters."""
        corridor_maze.reset()
        result = TraversalEngine(corridor_maze, get_frontier("dfs")).run()
        assert result.found
        assert result.algorithm == "dfs"
        assert result.path == [(0, 1), (0, 2), (0, 3), (0, 4)]
        assert result.path_length == 4
        assert result.cells_explored == 5
        assert result.expanded == 4
        assert result.execution_cost == 3
        assert result.elapsed_ms >= 0

    def test_not_found_result(self, blocked_maze):
        """run() on an unreachable target reports an empty path."""
        result = TraversalEngine(blocked_maze, get_frontier("astar")).run()
        assert not result.found
        assert result.path == []
        assert result.path_length == 0
        assert result.to_dict()["found"] is False
