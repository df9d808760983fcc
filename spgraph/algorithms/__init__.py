"""Path-finding algorithms over `WeightedDiGraph`."""

from spgraph.algorithms.dijkstra import (
    path_cost,
    shortest_path,
    shortest_path_with_cost,
)

__all__ = ["path_cost", "shortest_path", "shortest_path_with_cost"]
