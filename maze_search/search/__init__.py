"""
Search module.

Provides the shared traversal loop and its bookkeeping:
- TraversalEngine: Frontier-driven search over a maze
- SearchStatus: IDLE / RUNNING / FOUND / EXHAUSTED
- SearchStep: Record of one frontier pop
- SearchResult: Summary of a finished search
- traceback, depth, rope_distance: Discovery-tree helpers
"""

from maze_search.search.engine import TraversalEngine
from maze_search.search.state import SearchResult, SearchStatus, SearchStep
from maze_search.search.tree import depth, iter_ancestors, rope_distance, traceback

__all__ = [
    "TraversalEngine",
    "SearchStatus",
    "SearchStep",
    "SearchResult",
    "depth",
    "iter_ancestors",
    "rope_distance",
    "traceback",
]
