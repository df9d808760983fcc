"""Global pytest configuration and shared graph fixtures."""

from __future__ import annotations

import pytest

from spgraph.graph.weighted_digraph import WeightedDiGraph


@pytest.fixture
def triangle1():
    # Weights:
    #       [2]        [2]
    #   A────────►B────────►C
    #   │                   ▲
    #   └───────────────────┘
    #            [5]
    g = WeightedDiGraph()
    g.add_edge("A", "B", 2.0)
    g.add_edge("B", "C", 2.0)
    g.add_edge("A", "C", 5.0)
    return g


@pytest.fixture
def disconnected1():
    # Two components: A──►B   C──►D
    g = WeightedDiGraph()
    g.add_edge("A", "B", 1.0)
    g.add_edge("C", "D", 1.0)
    return g


@pytest.fixture
def square1():
    # Weights:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    g = WeightedDiGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 1)
    g.add_edge("A", "D", 2)
    g.add_edge("D", "C", 2)
    return g


@pytest.fixture
def graph3():
    # Weights:
    #  ┌────────►E─────────┐
    #  │ [1]        [1]    │
    #  │                   │
    #  │                   ▼   [1]
    #  A────────►B────────►C──────┐
    #  │   [1]       [3]   │      │
    #  │                   │      ▼
    #  │                   │[2]   F
    #  │                   │      │
    #  │                   │      │
    #  │   [4]             ▼      │[1]
    #  └──────────────────►D◄─────┘
    g = WeightedDiGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 3)
    g.add_edge("C", "D", 2)
    g.add_edge("A", "E", 1)
    g.add_edge("E", "C", 1)
    g.add_edge("A", "D", 4)
    g.add_edge("C", "F", 1)
    g.add_edge("F", "D", 1)
    return g


@pytest.fixture
def road_network():
    """Bidirectional road network with distances in miles."""
    roads = [
        ("Boston", "New York", 215.0),
        ("Boston", "Albany", 170.0),
        ("New York", "Philadelphia", 95.0),
        ("Philadelphia", "Washington DC", 123.0),
        ("Albany", "Buffalo", 290.0),
        ("Buffalo", "Cleveland", 190.0),
        ("Cleveland", "Chicago", 345.0),
        ("New York", "Cleveland", 460.0),
        ("Chicago", "St. Louis", 300.0),
        ("Washington DC", "Atlanta", 640.0),
    ]
    g = WeightedDiGraph()
    for a, b, miles in roads:
        g.add_edge(a, b, miles)
        g.add_edge(b, a, miles)
    return g

