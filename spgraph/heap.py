"""Array-backed binary min-heap of (element, priority) nodes.

The heap is stored as a list representing a complete binary tree: the
children of index ``i`` live at ``2 * i + 1`` and ``2 * i + 2``. Every node's
priority is less than or equal to the priorities of its children. Equal
priorities are ordered only by heap structure, so no FIFO order is implied.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass
class HeapNode:
    """A heap entry.

    Attributes:
        element: The stored element.
        priority: Lower values are extracted first.
    """

    element: Any
    priority: float


class MinHeap:
    """Binary min-heap keyed by `HeapNode.priority`.

    Priority changes locate elements by equality with a linear scan; no
    element-to-index map is kept, so `update_priority` is O(n) while
    `insert` and `extract_min` are O(log n).
    """

    def __init__(self) -> None:
        self._heap: List[HeapNode] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[HeapNode]:
        """Iterate over nodes in array order (not priority order)."""
        return iter(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def peek(self) -> Optional[HeapNode]:
        """Return the minimum node without removing it, or None if empty."""
        if not self._heap:
            return None
        return self._heap[0]

    def insert(self, node: HeapNode) -> None:
        """Append `node` and sift it up to restore the heap property."""
        self._heap.append(node)
        self._sift_up(len(self._heap) - 1)

    def extract_min(self) -> Optional[HeapNode]:
        """Remove and return the node with the lowest priority.

        Returns:
            The minimum node, or None if the heap is empty.
        """
        if not self._heap:
            return None
        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return root

    def update_priority(self, element: Any, new_priority: float) -> bool:
        """Change the priority of the first node holding `element`.

        The node is sifted up when its priority decreased and down otherwise.

        Args:
            element: Element to look up by equality.
            new_priority: The new priority value.

        Returns:
            True if a node was updated, False if `element` is not in the heap.
        """
        index = self._index_of(element)
        if index is None:
            return False
        node = self._heap[index]
        old_priority = node.priority
        node.priority = new_priority
        if new_priority < old_priority:
            self._sift_up(index)
        else:
            self._sift_down(index)
        return True

    def _index_of(self, element: Any) -> Optional[int]:
        for index, node in enumerate(self._heap):
            if node.element == element:
                return index
        return None

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if heap[index].priority < heap[parent].priority:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            smallest = index

            if left < size and heap[left].priority < heap[smallest].priority:
                smallest = left
            if right < size and heap[right].priority < heap[smallest].priority:
                smallest = right

            if smallest == index:
                break
            heap[index], heap[smallest] = heap[smallest], heap[index]
            index = smallest
