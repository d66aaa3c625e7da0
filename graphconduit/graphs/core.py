"""
Core graph data structures.

Provides the Edge type and an immutable, undirected WeightedGraph built
once from explicit vertex and edge collections. Self-loops, parallel edges
and disconnected components are allowed. Edges are kept sorted by weight
for Kruskal, and each vertex keeps the list of edges touching it for
Dijkstra.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, Iterable, List, Protocol, Set, Tuple, TypeVar

from ..diagnostics.core import assert_spanning_forest, assert_valid_path
from ..diagnostics.debug_mode import run_debug_check
from ..exceptions import DuplicateElementError, InvalidWeightError, UnknownVertexError
from ..logging import get_logger
from .mst import kruskal_mst
from .shortest import shortest_path
from .utils import as_ordered_list, sort_edges

logger = get_logger(__name__)


class EdgeLike(Protocol):
    """Anything with two endpoints and a weight can be used as a graph edge."""

    @property
    def u(self) -> Hashable: ...

    @property
    def v(self) -> Hashable: ...

    @property
    def weight(self) -> float: ...


@dataclass(frozen=True)
class Edge:
    """Simple data structure for an undirected, weighted edge.

    Parameters
    ----------
    u:
        One endpoint of the edge.
    v:
        The other endpoint of the edge. May equal ``u`` for a self-loop.
    weight:
        Non-negative real edge weight. For unweighted graphs, this is 1.0.
    """

    u: Hashable
    v: Hashable
    weight: float = 1.0

    def endpoints(self) -> Tuple[Hashable, Hashable]:
        return (self.u, self.v)

    def other(self, vertex: Hashable) -> Hashable:
        """Return the endpoint opposite to vertex.

        Raises:
            ValueError: If vertex is not an endpoint of this edge.
        """
        if vertex == self.u:
            return self.v
        if vertex == self.v:
            return self.u
        raise ValueError(f"Vertex {vertex!r} is not an endpoint of {self!r}")

    def is_self_loop(self) -> bool:
        return self.u == self.v


V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=EdgeLike)


class WeightedGraph(Generic[V, E]):
    """
    Undirected weighted graph with adjacency-list representation.

    The graph is immutable: all vertices and edges are supplied at
    construction and validated there.

    Attributes:
        adj: Mapping vertex -> list of incident edges (each edge at most once
            per vertex; a self-loop appears once).

    Complexity:
        - construction: O(E log E + V) for sorting and indexing
        - num_vertices / num_edges: O(1)
        - incident_edges: O(deg(v))
        - find_minimum_spanning_tree: O(E log E + E alpha(V))
        - find_shortest_path_between: O(E log E) using binary heap

    Example:
        >>> G = WeightedGraph(["A", "B", "C"], [Edge("A", "B", 1.0), Edge("B", "C", 2.0)])
        >>> G.num_edges()
        2
        >>> [e.weight for e in G.find_shortest_path_between("A", "C")]
        [1.0, 2.0]
    """

    def __init__(self, vertices: Iterable[V], edges: Iterable[E]):
        """
        Build a graph from vertex and edge collections.

        Sets are converted to lists in a deterministic order first; any other
        iterable is consumed in its own order.

        Args:
            vertices: Vertices of the graph. Must be unique.
            edges: Edges of the graph; both endpoints of each must be in
                vertices.

        Raises:
            InvalidWeightError: If any edge has a negative or NaN weight.
            DuplicateElementError: If a vertex appears more than once.
            UnknownVertexError: If an edge references a vertex that is not
                in vertices.
        """
        vertex_list = as_ordered_list(vertices)
        self._sorted_edges: List[E] = sort_edges(as_ordered_list(edges))

        # NaN breaks the sort order, so every weight is checked
        for edge in self._sorted_edges:
            if not edge.weight >= 0:
                raise InvalidWeightError(edge, edge.weight)

        self.adj: Dict[V, List[E]] = {}
        seen: Dict[V, Set[E]] = {}
        for vertex in vertex_list:
            if vertex in self.adj:
                raise DuplicateElementError(vertex)
            self.adj[vertex] = []
            seen[vertex] = set()

        for edge in self._sorted_edges:
            for endpoint in (edge.u, edge.v):
                if endpoint not in self.adj:
                    raise UnknownVertexError(endpoint)

            for endpoint in {edge.u, edge.v}:
                if edge not in seen[endpoint]:
                    seen[endpoint].add(edge)
                    self.adj[endpoint].append(edge)

        logger.debug(
            "Built graph with %d vertices and %d edges",
            self.num_vertices(),
            self.num_edges(),
        )

    def __contains__(self, vertex: object) -> bool:
        return vertex in self.adj

    def __repr__(self) -> str:
        return f"WeightedGraph(num_vertices={self.num_vertices()}, num_edges={self.num_edges()})"

    def num_vertices(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self.adj)

    def num_edges(self) -> int:
        """Return the number of edges in the graph, counting parallel edges."""
        return len(self._sorted_edges)

    def vertices(self) -> List[V]:
        """Return the vertices in the order they were supplied."""
        return list(self.adj.keys())

    def edges(self) -> List[E]:
        """Return all edges sorted ascending by weight."""
        return list(self._sorted_edges)

    def incident_edges(self, vertex: V) -> List[E]:
        """
        Return the edges touching vertex, lightest first.

        Raises:
            UnknownVertexError: If vertex is not in graph.
        """
        if vertex not in self.adj:
            raise UnknownVertexError(vertex)
        return list(self.adj[vertex])

    def find_minimum_spanning_tree(self) -> Set[E]:
        """
        Return the edges of a minimum spanning tree of this graph.

        If several minimum spanning trees exist, any one of them is returned.
        The graph is expected to be connected; for a disconnected graph the
        result is a minimum spanning forest and no error is raised.

        Returns:
            Set of edges in the tree.
        """
        mst = kruskal_mst(self)
        run_debug_check("minimum spanning tree", assert_spanning_forest, self, mst)
        return set(mst)

    def find_shortest_path_between(self, start: V, end: V) -> List[E]:
        """
        Return the edges of a shortest path from start to end.

        The first edge touches start and the last edge touches end. If start
        and end are equal, an empty list is returned without checking that
        the vertex exists.

        Raises:
            UnknownVertexError: If start or end is not in graph.
            NoPathExistsError: If end is unreachable from start.
        """
        path = shortest_path(self, start, end)
        run_debug_check("shortest path", assert_valid_path, path, start, end)
        return path
