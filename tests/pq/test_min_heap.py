import random

import pytest

from spgraph.heap import HeapNode, MinHeap


def _assert_heap_property(heap: MinHeap) -> None:
    nodes = list(heap)
    for idx, node in enumerate(nodes):
        for child in (2 * idx + 1, 2 * idx + 2):
            if child < len(nodes):
                assert node.priority <= nodes[child].priority


def test_empty_heap():
    heap = MinHeap()
    assert heap.is_empty()
    assert len(heap) == 0
    assert heap.peek() is None
    assert heap.extract_min() is None


def test_insert_keeps_minimum_at_root():
    heap = MinHeap()
    heap.insert(HeapNode("c", 3.0))
    heap.insert(HeapNode("a", 1.0))
    heap.insert(HeapNode("b", 2.0))
    assert len(heap) == 3
    assert heap.peek() == HeapNode("a", 1.0)
    _assert_heap_property(heap)


def test_extract_min_returns_node_with_priority():
    heap = MinHeap()
    heap.insert(HeapNode("low", 5.0))
    heap.insert(HeapNode("high", 1.0))

    node = heap.extract_min()
    assert node.element == "high"
    assert node.priority == 1.0
    assert heap.extract_min() == HeapNode("low", 5.0)
    assert heap.extract_min() is None
    assert heap.is_empty()


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_extraction_order_is_non_decreasing(seed):
    rng = random.Random(seed)
    heap = MinHeap()
    priorities = [rng.uniform(-50, 50) for _ in range(200)]
    for idx, priority in enumerate(priorities):
        heap.insert(HeapNode(idx, priority))
        _assert_heap_property(heap)

    extracted = []
    while not heap.is_empty():
        extracted.append(heap.extract_min().priority)
        _assert_heap_property(heap)
    assert extracted == sorted(priorities)


def test_update_priority_decrease_moves_up():
    heap = MinHeap()
    for element, priority in [("a", 4.0), ("b", 2.0), ("c", 3.0), ("d", 5.0)]:
        heap.insert(HeapNode(element, priority))

    assert heap.update_priority("d", 0.5)
    assert heap.peek().element == "d"
    _assert_heap_property(heap)


def test_update_priority_increase_moves_down():
    heap = MinHeap()
    for element, priority in [("a", 1.0), ("b", 2.0), ("c", 3.0)]:
        heap.insert(HeapNode(element, priority))

    assert heap.update_priority("a", 10.0)
    _assert_heap_property(heap)
    assert [heap.extract_min().element for _ in range(3)] == ["b", "c", "a"]


def test_update_priority_missing_element_is_noop():
    heap = MinHeap()
    heap.insert(HeapNode("a", 1.0))
    assert not heap.update_priority("zzz", 0.0)
    assert list(heap) == [HeapNode("a", 1.0)]


def test_duplicate_elements_are_separate_entries():
    heap = MinHeap()
    heap.insert(HeapNode("a", 3.0))
    heap.insert(HeapNode("a", 1.0))
    assert len(heap) == 2
    assert heap.extract_min() == HeapNode("a", 1.0)
    assert heap.extract_min() == HeapNode("a", 3.0)


def test_equal_priorities_all_extracted():
    heap = MinHeap()
    for element in "abcde":
        heap.insert(HeapNode(element, 1.0))
    extracted = {heap.extract_min().element for _ in range(5)}
    assert extracted == set("abcde")
    assert heap.is_empty()
