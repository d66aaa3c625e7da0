"""
Single-source shortest paths via Dijkstra's algorithm.

Edge weights are non-negative, which WeightedGraph guarantees at
construction. The frontier is a binary heap that may hold several entries
for the same vertex; outdated ones are skipped when popped.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import heapq
import itertools
from typing import TYPE_CHECKING, Dict, Hashable, List, Optional, Tuple

from ..exceptions import NoPathExistsError, UnknownVertexError
from ..logging import get_logger
from .utils import reconstruct_edge_path

if TYPE_CHECKING:
    from .core import E, WeightedGraph

logger = get_logger(__name__)


def dijkstra(
    graph: "WeightedGraph", source: Hashable
) -> Tuple[Dict[Hashable, float], Dict[Hashable, Optional["E"]]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest distances from source to every vertex, together with
    the last edge on a shortest path to each reachable vertex.

    Args:
        graph: WeightedGraph with non-negative edge weights.
        source: Source vertex.

    Returns:
        Tuple of:
        - dist: Dictionary mapping vertex -> shortest distance from source
          (``inf`` if unreachable)
        - parent_edge: Dictionary mapping vertex -> incoming edge on a
          shortest path (None for the source and unreachable vertices)

    Raises:
        UnknownVertexError: If source is not in graph.

    Complexity: O(E log E) using binary heap priority queue.

    Example:
        >>> G = WeightedGraph(["A", "B", "C"], [Edge("A", "B", 1.0), Edge("B", "C", 2.0)])
        >>> dist, parent_edge = dijkstra(G, "A")
        >>> dist["C"]
        3.0
    """
    if source not in graph:
        raise UnknownVertexError(source)

    dist: Dict[Hashable, float] = {node: float("inf") for node in graph.vertices()}
    parent_edge: Dict[Hashable, Optional["E"]] = {node: None for node in graph.vertices()}
    dist[source] = 0.0

    # Entries are (dist, str(node), seq, node); seq keeps equal keys from
    # ever comparing the nodes themselves.
    counter = itertools.count()
    pq: List[Tuple[float, str, int, Hashable]] = [(0.0, str(source), next(counter), source)]

    while pq:
        d, _, _, u = heapq.heappop(pq)

        if d > dist[u]:
            continue

        for edge in graph.adj[u]:
            v = edge.v if edge.u == u else edge.u
            new_dist = d + edge.weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                parent_edge[v] = edge
                heapq.heappush(pq, (new_dist, str(v), next(counter), v))

    return dist, parent_edge


def shortest_path(graph: "WeightedGraph", start: Hashable, end: Hashable) -> List["E"]:
    """
    Return the edges of a shortest path from start to end.

    Args:
        graph: WeightedGraph with non-negative edge weights.
        start: Vertex the path leaves from.
        end: Vertex the path arrives at.

    Returns:
        List of edges; the first touches start and the last touches end.
        Empty if start == end, in which case neither vertex is validated.

    Raises:
        UnknownVertexError: If start or end is not in graph.
        NoPathExistsError: If end is unreachable from start.

    Example:
        >>> G = WeightedGraph(
        ...     ["A", "B", "C"],
        ...     [Edge("A", "B", 1.0), Edge("B", "C", 1.0), Edge("A", "C", 5.0)],
        ... )
        >>> [(e.u, e.v) for e in shortest_path(G, "A", "C")]
        [('A', 'B'), ('B', 'C')]
    """
    if start == end:
        return []

    for vertex in (start, end):
        if vertex not in graph:
            raise UnknownVertexError(vertex)

    dist, parent_edge = dijkstra(graph, start)
    if dist[end] == float("inf"):
        raise NoPathExistsError(start, end)

    path = reconstruct_edge_path(parent_edge, start, end)
    if path is None:
        raise NoPathExistsError(start, end)

    logger.debug("Shortest path %r -> %r: %d edges, weight %s", start, end, len(path), dist[end])
    return path
