"""Minimum priority queue backed by `MinHeap`."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional

from spgraph.heap import HeapNode, MinHeap


class MinPriorityQueue(ABC):
    """Interface of a queue that releases the lowest priority value first."""

    @abstractmethod
    def is_empty(self) -> bool:
        """Return True if the queue holds no elements."""

    @abstractmethod
    def insert(self, element: Any, priority: float) -> None:
        """Add `element` with `priority`; lower values are more urgent."""

    @abstractmethod
    def extract_min(self) -> Optional[Any]:
        """Remove and return the most urgent element, or None if empty."""

    @abstractmethod
    def adjust_priority(self, element: Any, new_priority: float) -> None:
        """Change the priority of a queued element; no-op if it is not queued."""


class PriorityQueue(MinPriorityQueue):
    """`MinPriorityQueue` implemented on top of a binary `MinHeap`.

    The same element may be inserted several times; each insertion is a
    separate entry. `extract_min` returns None on an empty queue, so None
    cannot be used as an element.

    Example:
        >>> pq = PriorityQueue()
        >>> pq.insert("Low", 5.0)
        >>> pq.insert("High", 1.0)
        >>> pq.extract_min()
        'High'
    """

    def __init__(self) -> None:
        self._heap = MinHeap()

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        return self._heap.is_empty()

    def insert(self, element: Any, priority: float) -> None:
        self._heap.insert(HeapNode(element, priority))

    def extract_min(self) -> Optional[Any]:
        node = self._heap.extract_min()
        if node is None:
            return None
        return node.element

    def adjust_priority(self, element: Any, new_priority: float) -> None:
        # Linear scan; prefer re-inserting when decrease-key is frequent
        self._heap.update_priority(element, new_priority)
