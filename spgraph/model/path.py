"""Result of a single-pair shortest-path query.

The ``ShortestPath`` dataclass stores the visited vertex sequence (both
endpoints included) and its total cost. Helpers expose the endpoints, the
hop count and the traversed ``(u, v)`` edges; instances order by cost.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple

from spgraph.graph.weighted_digraph import Vertex


@dataclass(frozen=True)
class ShortestPath:
    """A shortest path between two vertices.

    Attributes:
        vertices: Vertices from source to destination, inclusive.
        cost: Sum of the edge weights along the path.
    """

    vertices: Tuple[Vertex, ...]
    cost: float

    def __post_init__(self) -> None:
        if not self.vertices:
            raise ValueError("A path must contain at least one vertex.")

    def __getitem__(self, idx: int) -> Vertex:
        return self.vertices[idx]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    def __lt__(self, other: ShortestPath) -> bool:
        """Compare paths by cost.

        Args:
            other: Another ShortestPath.

        Returns:
            True if this path is cheaper than `other`.
        """
        if not isinstance(other, ShortestPath):
            return NotImplemented
        return self.cost < other.cost

    @property
    def source(self) -> Vertex:
        return self.vertices[0]

    @property
    def destination(self) -> Vertex:
        return self.vertices[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.vertices) - 1

    @property
    def edges(self) -> Tuple[Tuple[Vertex, Vertex], ...]:
        """Traversed edges as ordered ``(u, v)`` pairs."""
        return tuple(zip(self.vertices, self.vertices[1:]))
