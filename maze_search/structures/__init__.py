"""
Data structures module.

Provides the priority queue used as the A* frontier:
- BinaryHeap: Array-backed min/max heap with update_priority()
"""

from maze_search.structures.heap import BinaryHeap, natural_order

__all__ = ["BinaryHeap", "natural_order"]
