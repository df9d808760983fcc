"""Single-pair shortest paths with Dijkstra's algorithm.

The search drives a `PriorityQueue` with lazy re-insertion instead of
decrease-key: an improved tentative distance pushes a new queue entry and
leaves the old one in place. A superseded entry extracted later cannot relax
any edge, because every relaxation requires a strict improvement over the
recorded distance. The loop stops the first time the destination is
extracted, which is final because all edge weights are non-negative.

Distance and predecessor maps are allocated per call; nothing is stored on
the graph, so concurrent queries are safe while the graph is not mutated.
"""

from __future__ import annotations

import math
from typing import Dict, List, Optional, Sequence, Set, Tuple

from spgraph.config import SPF_CONFIG, ShortestPathConfig
from spgraph.graph.weighted_digraph import Vertex, WeightedDiGraph
from spgraph.logging import get_logger
from spgraph.model.path import ShortestPath
from spgraph.priority_queue import PriorityQueue

logger = get_logger(__name__)

INF = math.inf


def _get_dist(dist: Dict[Vertex, float], vertex: Vertex) -> float:
    """Return the tentative distance of `vertex`, +inf when unseen."""
    return dist.get(vertex, INF)


def _dijkstra(
    graph: WeightedDiGraph,
    start: Vertex,
    destination: Vertex,
    config: ShortestPathConfig,
) -> Tuple[Dict[Vertex, float], Dict[Vertex, Optional[Vertex]]]:
    """Run the search and return the ``(dist, prev)`` working maps.

    Args:
        graph: Graph with non-negative edge weights.
        start: Source vertex. Need not be in the graph.
        destination: Target vertex; the search stops when it is extracted.
        config: Query options.

    Returns:
        A tuple of (dist, prev):
          - dist: Tentative distance per vertex; only the destination's entry
            is guaranteed final when the search stopped early.
          - prev: Predecessor per vertex on the best known path, None for
            the start and unreached vertices.
    """
    dist: Dict[Vertex, float] = {}
    prev: Dict[Vertex, Optional[Vertex]] = {}
    for vertex in graph.vertices():
        dist[vertex] = INF
        prev[vertex] = None
    dist[start] = 0.0
    prev[start] = None

    pq = PriorityQueue()
    pq.insert(start, 0.0)

    finalized: Set[Vertex] = set()
    extractions = 0
    stale = 0

    while not pq.is_empty():
        u = pq.extract_min()
        extractions += 1
        if u == destination:
            break

        if u in finalized:
            stale += 1
            if config.skip_finalized:
                continue
        finalized.add(u)

        u_dist = _get_dist(dist, u)
        for neighbor, weight in graph.edges_from(u).items():
            alt = u_dist + weight
            if alt < _get_dist(dist, neighbor):
                dist[neighbor] = alt
                prev[neighbor] = u
                pq.insert(neighbor, alt)

    if config.log_queries:
        logger.debug(
            "Dijkstra %r -> %r: %d extractions (%d stale), %d left in queue",
            start,
            destination,
            extractions,
            stale,
            len(pq),
        )
    return dist, prev


def _reconstruct(
    prev: Dict[Vertex, Optional[Vertex]], start: Vertex, destination: Vertex
) -> List[Vertex]:
    """Walk `prev` back from `destination` to `start` and return the path."""
    path: List[Vertex] = [destination]
    current = destination
    while current != start:
        current = prev[current]
        path.append(current)
    path.reverse()
    return path


def shortest_path(
    graph: WeightedDiGraph,
    start: Vertex,
    destination: Vertex,
    config: Optional[ShortestPathConfig] = None,
) -> Optional[List[Vertex]]:
    """Find a minimum-weight path from `start` to `destination`.

    Args:
        graph: Directed graph with non-negative edge weights.
        start: Source vertex.
        destination: Target vertex.
        config: Query options; defaults to `SPF_CONFIG`.

    Returns:
        The vertices of a shortest path, both endpoints included, or None if
        `destination` is unreachable from `start`. If ``start == destination``
        the result is ``[start]``.
    """
    result = shortest_path_with_cost(graph, start, destination, config)
    if result is None:
        return None
    return list(result.vertices)


def shortest_path_with_cost(
    graph: WeightedDiGraph,
    start: Vertex,
    destination: Vertex,
    config: Optional[ShortestPathConfig] = None,
) -> Optional[ShortestPath]:
    """Find a shortest path and its total cost.

    Same search as `shortest_path`.

    Args:
        graph: Directed graph with non-negative edge weights.
        start: Source vertex.
        destination: Target vertex.
        config: Query options; defaults to `SPF_CONFIG`.

    Returns:
        A `ShortestPath`, or None if no path exists.
    """
    dist, prev = _dijkstra(graph, start, destination, config or SPF_CONFIG)

    cost = _get_dist(dist, destination)
    if cost == INF:
        return None
    return ShortestPath(tuple(_reconstruct(prev, start, destination)), cost)


def path_cost(graph: WeightedDiGraph, path: Sequence[Vertex]) -> float:
    """Return the summed edge weight along `path`.

    Args:
        graph: The graph the path runs through.
        path: Vertex sequence; a single vertex costs 0.

    Returns:
        Total weight of the consecutive edges.

    Raises:
        ValueError: If `path` is empty or a consecutive pair is not an edge.
    """
    if not path:
        raise ValueError("Cannot compute the cost of an empty path.")
    total = 0.0
    for u, v in zip(path, path[1:]):
        weight = graph.edge_weight(u, v)
        if weight is None:
            raise ValueError(f"No edge from '{u}' to '{v}' in the graph.")
        total += weight
    return total
