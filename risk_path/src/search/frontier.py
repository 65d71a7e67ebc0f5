"""Min-priority frontier used by the shortest path search."""

from __future__ import annotations

import heapq
from typing import Any, Callable, Generic, List, Tuple, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Min-heap ordered by ``key(item)``.

    Items never need to be comparable themselves: every entry is stored as
    ``(key, seq, item)`` and ``seq`` settles ties in insertion order.
    """

    def __init__(self, key: Callable[[T], Any]):
        self.key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._seq = 0

    def push(self, item: T) -> None:
        self._seq += 1
        heapq.heappush(self._heap, (self.key(item), self._seq, item))

    def pop(self) -> T:
        """Remove and return the item with the smallest key."""
        if not self._heap:
            raise IndexError("pop from an empty frontier")
        return heapq.heappop(self._heap)[2]

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek at an empty frontier")
        return self._heap[0][2]

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


__all__ = ["PriorityQueue"]
