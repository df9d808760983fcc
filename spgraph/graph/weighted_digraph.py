"""Directed weighted graph with non-negative edge weights.

`WeightedDiGraph` extends `networkx.DiGraph` so that each ordered vertex pair
carries at most one edge whose weight is stored under the ``"weight"``
attribute. Edge attribute dicts are `EdgeAttrDict` instances that validate the
weight on every write, so neither the insertion methods nor writes through
``g[u][v]``, ``g.edges[u, v]`` or `networkx.set_edge_attributes` can store a
negative weight. Re-adding an edge overwrites its weight. Individual edges and
vertices cannot be removed; `clear()` empties the whole graph.
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, Hashable, Iterable, Optional, Set, Tuple, Union

import networkx as nx

Vertex = Hashable
Weight = Union[int, float]

#: Edge attribute holding the traversal weight.
WEIGHT_ATTR = "weight"


def _check_weight(weight: Any, edge: str = "the edge") -> Weight:
    """Return `weight` if it is a valid non-negative real number.

    Args:
        weight: Candidate weight.
        edge: Description of the edge used in error messages.

    Raises:
        ValueError: If the weight is missing, not a real number (bools
            included), negative or NaN.
    """
    if weight is None:
        raise ValueError(f"No weight given for {edge}.")
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise ValueError(f"Weight of {edge} must be a real number, got {weight!r}.")
    # NaN fails every comparison, so test the accepted range instead of `< 0`
    if not weight >= 0:
        raise ValueError(f"Edge weight must not be negative: {edge} has weight {weight}.")
    return weight


class EdgeAttrDict(dict):
    """Edge attribute dict that keeps ``"weight"`` valid.

    Writes to the weight key go through the same check as `add_edge`; the
    weight key cannot be deleted once set. Other attributes are unrestricted.
    """

    def __setitem__(self, key: Any, value: Any) -> None:
        if key == WEIGHT_ATTR:
            value = _check_weight(value)
        super().__setitem__(key, value)

    def update(self, *args: Any, **kwargs: Any) -> None:  # type: ignore[override]
        items = dict(*args, **kwargs)
        if WEIGHT_ATTR in items:
            _check_weight(items[WEIGHT_ATTR])
        super().update(items)

    def __ior__(self, other: Any) -> EdgeAttrDict:  # type: ignore[override]
        self.update(other)
        return self

    def setdefault(self, key: Any, default: Any = None) -> Any:
        if key not in self:
            self[key] = default
        return self[key]

    def __delitem__(self, key: Any) -> None:
        if key == WEIGHT_ATTR:
            raise ValueError("Edge weight cannot be removed.")
        super().__delitem__(key)

    def pop(self, key: Any, *default: Any) -> Any:
        if key == WEIGHT_ATTR and key in self:
            raise ValueError("Edge weight cannot be removed.")
        return super().pop(key, *default)

    def popitem(self) -> Tuple[Any, Any]:
        if WEIGHT_ATTR in self:
            raise ValueError("Edge weight cannot be removed.")
        return super().popitem()

    def clear(self) -> None:
        if WEIGHT_ATTR in self:
            raise ValueError("Edge weight cannot be removed.")
        super().clear()


class WeightedDiGraph(nx.DiGraph):
    """A directed graph with a single non-negative weight per ordered pair.

    This class enforces:
      - Adding an edge implicitly adds both endpoints.
      - Every edge has a ``weight`` attribute that is a real number ``>= 0``;
        an invalid weight raises ValueError and leaves the edge unchanged,
        whichever API performed the write.
      - Adding an existing ``(u, v)`` edge again overwrites its weight.
      - Edges and vertices are never removed individually; the removal
        methods inherited from networkx raise NotImplementedError.

    Vertices may be any hashable objects. The graph exposes no algorithm
    logic; see `spgraph.algorithms.dijkstra` for path queries.

    Inherits from:
        networkx.DiGraph
    """

    edge_attr_dict_factory = EdgeAttrDict

    def vertices(self) -> Set[Vertex]:
        """Return a snapshot of all vertices in the graph.

        Returns:
            Set[Vertex]: Every vertex ever added, directly or as an edge endpoint.
        """
        return set(self._node)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_of_edge: Vertex,
        v_of_edge: Vertex,
        weight: Weight = None,  # type: ignore[assignment]
        **attr: Any,
    ) -> None:
        """Add or overwrite the directed edge ``u_of_edge -> v_of_edge``.

        Args:
            u_of_edge: Source vertex. Added to the graph if absent.
            v_of_edge: Target vertex. Added to the graph if absent.
            weight: Non-negative traversal weight. May also be passed as the
                ``weight`` keyword, which is what networkx helpers do.
            **attr: Additional edge attributes.

        Raises:
            ValueError: If the weight is missing, not a real number, negative
                or NaN.
        """
        weight = _check_weight(weight, f"edge '{u_of_edge}' -> '{v_of_edge}'")
        super().add_edge(u_of_edge, v_of_edge, **attr)
        # Last write wins for the weight of an existing (u, v) pair
        self._succ[u_of_edge][v_of_edge][WEIGHT_ATTR] = weight

    def add_edges_from(
        self,
        ebunch_to_add: Iterable[Tuple[Any, ...]],
        **attr: Any,
    ) -> None:
        """Add edges from an iterable of ``(u, v)`` or ``(u, v, data)`` tuples.

        Every edge goes through `add_edge`, so the weight rules apply. networkx
        uses this method to rebuild graphs (``copy()``, ``reverse()``), which
        keeps those results valid too.

        Args:
            ebunch_to_add: Edge tuples. A ``data`` dict, if present, must hold
                the weight unless ``weight`` is given in ``attr``.
            **attr: Attributes applied to every edge; tuple data overrides them.

        Raises:
            ValueError: If an edge tuple is malformed or a weight is invalid.
                Edges earlier in the iterable remain added.
        """
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, data = edge
            elif len(edge) == 2:
                u, v = edge
                data = {}
            else:
                raise ValueError(f"Edge tuple {edge} must be a 2-tuple or 3-tuple.")
            edge_attr = {**attr, **data}
            weight = edge_attr.pop(WEIGHT_ATTR, None)
            self.add_edge(u, v, weight, **edge_attr)

    def add_weighted_edges_from(
        self,
        ebunch_to_add: Iterable[Tuple[Vertex, Vertex, Weight]],
        weight: str = WEIGHT_ATTR,
        **attr: Any,
    ) -> None:
        """Add edges from an iterable of ``(u, v, weight)`` triples.

        Args:
            ebunch_to_add: Triples of source, target and weight.
            weight: Must be ``"weight"``; other attribute names are not
                supported because the graph has a single weight attribute.
            **attr: Additional attributes applied to every edge.

        Raises:
            ValueError: If ``weight`` names another attribute or a weight is
                invalid.
        """
        if weight != WEIGHT_ATTR:
            raise ValueError(
                f"Only the '{WEIGHT_ATTR}' attribute can carry edge weights, got '{weight}'."
            )
        for u, v, w in ebunch_to_add:
            self.add_edge(u, v, w, **attr)

    def edges_from(self, u: Vertex) -> Dict[Vertex, Weight]:
        """Return a copy of the outgoing edges of `u`.

        Args:
            u: The source vertex.

        Returns:
            Dict[Vertex, Weight]: Neighbor to weight. Empty if `u` has no
                outgoing edges or is not in the graph. The dict is a snapshot;
                mutating it does not change the graph.
        """
        neighbors = self._succ.get(u)
        if not neighbors:
            return {}
        return {v: data[WEIGHT_ATTR] for v, data in neighbors.items()}

    def edge_weight(self, u: Vertex, v: Vertex) -> Optional[Weight]:
        """Return the weight of edge ``u -> v``, or None if there is no such edge."""
        data = self._succ.get(u, {}).get(v)
        if data is None:
            return None
        return data[WEIGHT_ATTR]

    #
    # Removal is not supported; clear() resets the whole graph
    #
    def _removal_unsupported(self, what: str) -> None:
        raise NotImplementedError(
            f"{type(self).__name__} does not support removing {what}; "
            "use clear() to reset the graph."
        )

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        """Raise NotImplementedError; individual edges cannot be removed."""
        self._removal_unsupported("edges")

    def remove_edges_from(self, ebunch: Iterable[Tuple[Any, ...]]) -> None:
        """Raise NotImplementedError; individual edges cannot be removed."""
        self._removal_unsupported("edges")

    def clear_edges(self) -> None:
        """Raise NotImplementedError; edges cannot be removed without their vertices."""
        self._removal_unsupported("edges")

    def remove_node(self, n: Vertex) -> None:
        """Raise NotImplementedError; individual vertices cannot be removed."""
        self._removal_unsupported("vertices")

    def remove_nodes_from(self, nodes: Iterable[Vertex]) -> None:
        """Raise NotImplementedError; individual vertices cannot be removed."""
        self._removal_unsupported("vertices")
