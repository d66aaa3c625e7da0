"""Performance benchmarks for Graph Conduit.

This package contains microbenchmarks for the hot paths of the library:
union-find operations, Kruskal's MST and Dijkstra's shortest paths.
"""
