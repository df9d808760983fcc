import random

import pytest

from spgraph.priority_queue import MinPriorityQueue, PriorityQueue


def test_is_empty():
    pq = PriorityQueue()
    assert pq.is_empty()

    pq.insert("Task1", 5.0)
    assert not pq.is_empty()

    pq.extract_min()
    assert pq.is_empty()


def test_insert_lowest_priority_value_first():
    pq = PriorityQueue()
    pq.insert("Low", 5.0)
    pq.insert("High", 1.0)

    assert len(pq) == 2
    assert pq.extract_min() == "High"
    assert pq.extract_min() == "Low"


def test_extract_min_order_and_empty():
    pq = PriorityQueue()
    pq.insert("Low", 5.0)
    pq.insert("Medium", 3.0)
    pq.insert("High", 1.0)

    assert pq.extract_min() == "High"
    assert pq.extract_min() == "Medium"
    assert pq.extract_min() == "Low"
    # Empty queue returns None instead of raising
    assert pq.extract_min() is None


def test_adjust_priority():
    pq = PriorityQueue()
    pq.insert("A", 4.0)
    pq.insert("B", 2.0)
    pq.insert("C", 3.0)

    assert pq.extract_min() == "B"

    pq.adjust_priority("A", 1.0)

    assert pq.extract_min() == "A"
    assert pq.extract_min() == "C"
    assert pq.is_empty()


def test_adjust_priority_increase():
    pq = PriorityQueue()
    pq.insert("A", 1.0)
    pq.insert("B", 2.0)
    pq.adjust_priority("A", 3.0)
    assert pq.extract_min() == "B"
    assert pq.extract_min() == "A"


def test_adjust_priority_missing_element_is_noop():
    pq = PriorityQueue()
    pq.insert("A", 1.0)
    pq.adjust_priority("Z", 0.0)
    assert len(pq) == 1
    assert pq.extract_min() == "A"
    assert pq.extract_min() is None


@pytest.mark.parametrize("seed", [7, 11])
def test_random_inserts_extract_in_priority_order(seed):
    rng = random.Random(seed)
    pq = PriorityQueue()
    items = {f"item-{i}": rng.uniform(0, 100) for i in range(100)}
    for element, priority in items.items():
        pq.insert(element, priority)

    extracted = []
    while not pq.is_empty():
        extracted.append(items[pq.extract_min()])
    assert extracted == sorted(items.values())


def test_min_priority_queue_is_abstract():
    with pytest.raises(TypeError):
        MinPriorityQueue()  # type: ignore[abstract]
    assert isinstance(PriorityQueue(), MinPriorityQueue)
