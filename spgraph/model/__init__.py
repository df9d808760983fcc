"""Result types returned by the shortest-path API."""

from spgraph.model.path import ShortestPath

__all__ = ["ShortestPath"]
