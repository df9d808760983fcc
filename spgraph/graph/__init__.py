"""Graph primitives.

This package provides the directed weighted graph type `WeightedDiGraph`
used by the shortest-path algorithms.
"""

from spgraph.graph.weighted_digraph import (
    WEIGHT_ATTR,
    EdgeAttrDict,
    Vertex,
    Weight,
    WeightedDiGraph,
)

__all__ = ["WEIGHT_ATTR", "EdgeAttrDict", "Vertex", "Weight", "WeightedDiGraph"]
