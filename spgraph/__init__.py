"""spgraph: directed weighted graphs and single-pair shortest paths.

spgraph pairs a validated directed weighted graph with a binary-heap
priority queue and Dijkstra's algorithm built on both.

Primary API:
    WeightedDiGraph - Directed graph with non-negative edge weights
    shortest_path() - Vertex sequence of a shortest path, or None
    shortest_path_with_cost() - Same search returning a ShortestPath
    PriorityQueue, MinHeap - Binary min-heap priority queue

Example:
    from spgraph import WeightedDiGraph, shortest_path

    g = WeightedDiGraph()
    g.add_edge("A", "B", 2.0)
    g.add_edge("B", "C", 2.0)
    g.add_edge("A", "C", 5.0)

    shortest_path(g, "A", "C")  # ['A', 'B', 'C']
"""

from __future__ import annotations

from spgraph import logging
from spgraph._version import __version__
from spgraph.algorithms.dijkstra import (
    path_cost,
    shortest_path,
    shortest_path_with_cost,
)
from spgraph.config import SPF_CONFIG, ShortestPathConfig
from spgraph.graph.weighted_digraph import Vertex, Weight, WeightedDiGraph
from spgraph.heap import HeapNode, MinHeap
from spgraph.model.path import ShortestPath
from spgraph.priority_queue import MinPriorityQueue, PriorityQueue

__all__ = [
    # Version
    "__version__",
    # Graph
    "Vertex",
    "Weight",
    "WeightedDiGraph",
    # Queue
    "HeapNode",
    "MinHeap",
    "MinPriorityQueue",
    "PriorityQueue",
    # Algorithms
    "shortest_path",
    "shortest_path_with_cost",
    "path_cost",
    "ShortestPath",
    # Configuration
    "ShortestPathConfig",
    "SPF_CONFIG",
    # Utilities
    "logging",
]
