"""
Binary-heap priority queue over a "has priority over" comparison.

Items are not ordered by a numeric key. Instead the queue asks a
comparison function whether one item should come out before another:
- By default the item's own has_priority_over(other) method is used
- A custom higher_priority(a, b) function can be passed instead

pop() on an empty queue raises IndexError. Check size() first.
"""

from __future__ import annotations

import heapq
from typing import Callable, Generic, Protocol, TypeVar


class Prioritized(Protocol):
    """Protocol for items that can rank themselves against each other."""

    def has_priority_over(self, other: "Prioritized") -> bool:
        """Return True if this item should be popped before other."""
        ...


T = TypeVar("T")


def _item_priority(a, b) -> bool:
    return a.has_priority_over(b)


class _HeapEntry(Generic[T]):
    """Adapts the comparison function to heapq's min-heap __lt__."""

    __slots__ = ("item", "_higher")

    def __init__(self, item: T, higher: Callable[[T, T], bool]):
        self.item = item
        self._higher = higher

    def __lt__(self, other: "_HeapEntry[T]") -> bool:
        return self._higher(self.item, other.item)


class PriorityQueue(Generic[T]):
    """
    Max-priority queue: pop() returns the item that beats every other.

    Ties come out in heap order, which is deterministic for a given push
    sequence but not guaranteed to follow insertion order.
    """

    def __init__(self, higher_priority: Callable[[T, T], bool] | None = None):
        self._higher = higher_priority or _item_priority
        self._heap: list[_HeapEntry[T]] = []

    def push(self, item: T) -> None:
        """Insert an item in O(log n)."""
        heapq.heappush(self._heap, _HeapEntry(item, self._higher))

    def pop(self) -> T:
        """Remove and return the highest-priority item in O(log n)."""
        return heapq.heappop(self._heap).item

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)
