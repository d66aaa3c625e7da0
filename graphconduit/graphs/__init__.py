"""
Graph algorithms package for graphconduit.

This package provides:
- An immutable undirected WeightedGraph and its Edge type
- A disjoint-set (union-find) structure with path compression and union by rank
- Minimum spanning trees (Kruskal)
- Single-source shortest paths (Dijkstra) with edge-path reconstruction

Edges are ordered by (weight, str(u), str(v)) so results are reproducible.
"""

from .core import Edge, EdgeLike, WeightedGraph
from .disjoint_set import DEFAULT_CAPACITY, DisjointSet
from .mst import kruskal_mst
from .shortest import dijkstra, shortest_path
from .utils import (
    edge_sort_key,
    as_ordered_list,
    path_weight,
    reconstruct_edge_path,
    sort_edges,
    top_k_sort,
)

__all__ = [
    "Edge",
    "EdgeLike",
    "WeightedGraph",
    "DisjointSet",
    "DEFAULT_CAPACITY",
    "kruskal_mst",
    "dijkstra",
    "shortest_path",
    "edge_sort_key",
    "as_ordered_list",
    "path_weight",
    "reconstruct_edge_path",
    "sort_edges",
    "top_k_sort",
]

# Example usage:
# from graphconduit.graphs import Edge, WeightedGraph
#
# G = WeightedGraph(["A", "B", "C"], [Edge("A", "B", 1.0), Edge("B", "C", 2.0)])
# G.find_minimum_spanning_tree()           # {Edge(u="A", v="B", weight=1.0), Edge(u="B", v="C", weight=2.0)}
# G.find_shortest_path_between("A", "C")   # [Edge(u="A", v="B", weight=1.0), Edge(u="B", v="C", weight=2.0)]
