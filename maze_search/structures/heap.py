"""
Array-backed binary heap with a pluggable comparator.

The heap is stored in level order: the root lives at index 0, the
children of index i at 2i + 1 and 2i + 2, and the parent at (i - 1) // 2.
A comparator returns a negative number when its first argument should
leave the heap before its second.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")

Comparator = Callable[[T, T], int]


def natural_order(a, b) -> int:
    """Three-way comparison using the items' own ordering."""
    return (a > b) - (a < b)


class BinaryHeap(Generic[T]):
    """
    Priority queue backed by a Python list.

    Supports min-heap behavior (the default) and max-heap behavior by
    inverting the comparator. Used as the A* frontier, where priorities
    of queued cells change when a cheaper path is discovered, hence
    update_priority().

    Example:
        heap = BinaryHeap()
        for n in [5, 3, 8]:
            heap.offer(n)
        heap.poll()  # -> 3
    """

    def __init__(
        self,
        comparator: Comparator | None = None,
        max_heap: bool = False,
    ) -> None:
        """
        Initialize an empty heap.

        Args:
            comparator: Three-way comparison function. Defaults to natural ordering.
            max_heap: If True, invert the ordering so the largest item is polled first
        """
        base = comparator or natural_order
        self._comparator: Comparator = (lambda a, b: base(b, a)) if max_heap else base
        self._max_heap = max_heap
        self._items: list[T] = []

    @property
    def is_max_heap(self) -> bool:
        return self._max_heap

    # =========================================================================
    # Index arithmetic
    # =========================================================================

    @staticmethod
    def _parent(idx: int) -> int:
        return (idx - 1) // 2 if idx > 0 else -1

    def _left(self, idx: int) -> int:
        child = 2 * idx + 1
        return child if child < len(self._items) else -1

    def _right(self, idx: int) -> int:
        child = 2 * idx + 2
        return child if child < len(self._items) else -1

    def _precedes(self, a: T, b: T) -> bool:
        return self._comparator(a, b) < 0

    def _swap(self, i: int, j: int) -> None:
        self._items[i], self._items[j] = self._items[j], self._items[i]

    # =========================================================================
    # Rebalancing
    # =========================================================================

    def _bubble_up(self, idx: int) -> None:
        """Move the item at idx towards the root until its parent precedes it."""
        while idx > 0:
            parent = self._parent(idx)
            if not self._precedes(self._items[idx], self._items[parent]):
                break
            self._swap(idx, parent)
            idx = parent

    def _bubble_down(self, idx: int) -> None:
        """Move the item at idx towards the leaves until it precedes both children."""
        while True:
            left = self._left(idx)
            if left == -1:
                return

            right = self._right(idx)
            child = left
            if right != -1 and self._precedes(self._items[right], self._items[left]):
                child = right

            if not self._precedes(self._items[child], self._items[idx]):
                return
            self._swap(idx, child)
            idx = child

    # =========================================================================
    # Queue operations
    # =========================================================================

    def offer(self, item: T) -> None:
        """Add an item and restore heap order. O(log n)."""
        self._items.append(item)
        self._bubble_up(len(self._items) - 1)

    def poll(self) -> T | None:
        """Remove and return the highest-priority item, or None if empty."""
        if not self._items:
            return None

        root = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._bubble_down(0)
        return root

    def peek(self) -> T | None:
        """Return the highest-priority item without removing it."""
        return self._items[0] if self._items else None

    def size(self) -> int:
        return len(self._items)

    def update_priority(self, item: T) -> None:
        """
        Restore heap order around an item whose priority changed in place.

        The item is located by equality with a linear scan. All other items
        are assumed to keep their priorities. Does nothing if the item is not
        in the heap.
        """
        try:
            idx = self._items.index(item)
        except ValueError:
            return

        parent = self._parent(idx)
        if parent >= 0 and self._precedes(self._items[idx], self._items[parent]):
            self._bubble_up(idx)
        else:
            self._bubble_down(idx)

    def is_valid(self) -> bool:
        """Check the heap property for every non-root index."""
        return all(
            self._comparator(self._items[i], self._items[self._parent(i)]) >= 0
            for i in range(1, len(self._items))
        )

    # =========================================================================
    # Python protocol
    # =========================================================================

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in level order (not priority order)."""
        return iter(list(self._items))

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def to_tree_string(self) -> str:
        """
        Render the heap sideways as a tree.

        The right subtree is printed above each node and the left subtree
        below it, with one tab of indentation per level.
        """
        return self._tree_string(0, 0)

    def _tree_string(self, idx: int, level: int) -> str:
        if idx == -1 or idx >= len(self._items):
            return ""
        right = self._tree_string(self._right(idx), level + 1)
        left = self._tree_string(self._left(idx), level + 1)
        return right + "\t" * level + f"{self._items[idx]}\n" + left

    def __str__(self) -> str:
        return self.to_tree_string()

    def __repr__(self) -> str:
        kind = "max" if self._max_heap else "min"
        return f"{self.__class__.__name__}({kind}, size={len(self._items)})"
