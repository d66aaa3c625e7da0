"""
Minimum spanning tree via Kruskal's algorithm.

Edges are scanned lightest first; an edge is kept when its endpoints lie in
different components, which a disjoint-set forest tracks.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from ..logging import get_logger
from .disjoint_set import DisjointSet
from .utils import path_weight

if TYPE_CHECKING:
    from .core import E, WeightedGraph

logger = get_logger(__name__)


def kruskal_mst(graph: "WeightedGraph") -> List["E"]:
    """
    Kruskal's algorithm for minimum spanning tree.

    A fresh disjoint set is built on every call, so the graph itself is never
    mutated and repeated calls return the same edges.

    Args:
        graph: WeightedGraph to span. Expected to be connected.

    Returns:
        List of edges in the MST, in the order they were accepted (lightest
        first). For disconnected graphs, returns an MST forest (one tree per
        component) without raising.

    Complexity: O(E log E) for the sort done at graph construction plus
    O(E alpha(V)) for the union-find loop.

    Example:
        >>> G = WeightedGraph(
        ...     ["A", "B", "C"],
        ...     [Edge("A", "B", 1.0), Edge("B", "C", 2.0), Edge("A", "C", 3.0)],
        ... )
        >>> len(kruskal_mst(G))
        2
    """
    vertices = graph.vertices()
    forest: DisjointSet = DisjointSet(capacity=max(len(vertices), 1))
    for vertex in vertices:
        forest.make_set(vertex)

    mst_edges: List["E"] = []
    for edge in graph.edges():
        if forest.find_set(edge.u) != forest.find_set(edge.v):
            mst_edges.append(edge)
            forest.union(edge.u, edge.v)

    logger.debug(
        "Kruskal accepted %d of %d edges (total weight %s)",
        len(mst_edges),
        graph.num_edges(),
        path_weight(mst_edges),
    )
    return mst_edges
