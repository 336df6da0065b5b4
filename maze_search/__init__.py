"""
Maze Search Explorer.

Runs Depth-First Search, Breadth-First Search and A* over the same
randomly generated maze and reports cells explored, path length and
the walking cost of a simulated agent.
"""

__version__ = "0.1.0"
