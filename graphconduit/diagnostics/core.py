"""Core diagnostic functions for spanning trees and edge paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, Hashable, Iterable, Sequence

if TYPE_CHECKING:
    from ..graphs.core import EdgeLike, WeightedGraph


def is_spanning_forest(graph: "WeightedGraph", edges: Iterable["EdgeLike"]) -> bool:
    """
    Check whether edges form a spanning forest of graph.

    A spanning forest uses only edges of the graph, contains no cycle, and
    connects every pair of vertices the graph itself connects. The last
    condition holds exactly when the forest has ``V - C`` edges, where C is
    the number of connected components of the graph.

    Parameters
    ----------
    graph:
        Graph the forest should span.
    edges:
        Candidate forest edges.

    Returns
    -------
    bool
        True if edges form a spanning forest of graph, False otherwise.
    """
    from ..graphs.disjoint_set import DisjointSet

    edge_list = list(edges)
    graph_edges = graph.edges()
    known = set(graph_edges)
    if any(edge not in known for edge in edge_list):
        return False

    vertices = graph.vertices()
    capacity = max(len(vertices), 1)

    forest: DisjointSet = DisjointSet(capacity=capacity)
    for vertex in vertices:
        forest.make_set(vertex)
    for edge in edge_list:
        if forest.connected(edge.u, edge.v):
            return False
        forest.union(edge.u, edge.v)

    components: DisjointSet = DisjointSet(capacity=capacity)
    for vertex in vertices:
        components.make_set(vertex)
    num_components = len(vertices)
    for edge in graph_edges:
        if not components.connected(edge.u, edge.v):
            components.union(edge.u, edge.v)
            num_components -= 1

    return len(edge_list) == len(vertices) - num_components


def assert_spanning_forest(graph: "WeightedGraph", edges: Iterable["EdgeLike"]) -> None:
    """
    Assert that edges form a spanning forest of graph.

    Raises
    ------
    ValueError
        If edges contain a cycle, an edge foreign to graph, or leave two
        connected vertices apart.
    """
    if not is_spanning_forest(graph, edges):
        raise ValueError("Edges do not form a spanning forest of the graph.")


def is_valid_path(path: Sequence["EdgeLike"], start: Hashable, end: Hashable) -> bool:
    """
    Check whether path is a chain of edges leading from start to end.

    Each edge must share an endpoint with the vertex reached so far. An
    empty path is valid only when start equals end.

    Parameters
    ----------
    path:
        Edges in travel order.
    start:
        Vertex the path should leave from.
    end:
        Vertex the path should arrive at.

    Returns
    -------
    bool
        True if the edges chain from start to end, False otherwise.
    """
    current = start
    for edge in path:
        if edge.u == current:
            current = edge.v
        elif edge.v == current:
            current = edge.u
        else:
            return False
    return current == end


def assert_valid_path(path: Sequence["EdgeLike"], start: Hashable, end: Hashable) -> None:
    """
    Assert that path is a chain of edges leading from start to end.

    Raises
    ------
    ValueError
        If the edges do not chain from start to end.
    """
    if not is_valid_path(path, start, end):
        raise ValueError(f"Edges do not form a path from {start!r} to {end!r}.")
