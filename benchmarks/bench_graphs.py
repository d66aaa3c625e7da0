"""Benchmark union-find, MST and shortest-path queries on random graphs."""

import time
from typing import Dict

import numpy as np

from graphconduit import DisjointSet, Edge, WeightedGraph


def random_connected_graph(n_vertices: int, n_extra_edges: int, seed: int = 0) -> WeightedGraph:
    """Random spanning path plus extra random edges, weights in [0, 100)."""
    rng = np.random.default_rng(seed)
    order = rng.permutation(n_vertices)
    weights = rng.uniform(0.0, 100.0, size=n_vertices - 1 + n_extra_edges)

    edges = [Edge(int(order[i]), int(order[i + 1]), float(weights[i])) for i in range(n_vertices - 1)]
    ends = rng.integers(0, n_vertices, size=(n_extra_edges, 2))
    for k, (u, v) in enumerate(ends):
        edges.append(Edge(int(u), int(v), float(weights[n_vertices - 1 + k])))

    return WeightedGraph(range(n_vertices), edges)


def benchmark_disjoint_set(n_items: int, seed: int = 0) -> Dict[str, float]:
    """Benchmark make_set + random unions + find_set over every item.

    Args:
        n_items: Number of elements.
        seed: RNG seed for the union pairs.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    pairs = rng.integers(0, n_items, size=(n_items, 2))

    start = time.perf_counter()
    forest = DisjointSet()
    for i in range(n_items):
        forest.make_set(i)
    for a, b in pairs:
        if not forest.connected(int(a), int(b)):
            forest.union(int(a), int(b))
    for i in range(n_items):
        forest.find_set(i)
    end = time.perf_counter()

    total_time = end - start
    return {
        "n_items": n_items,
        "total_time_sec": total_time,
        "ops_per_sec": 3 * n_items / total_time,
    }


def benchmark_queries(n_vertices: int, n_extra_edges: int) -> Dict[str, float]:
    """Benchmark graph construction, MST and a shortest-path query.

    Args:
        n_vertices: Number of vertices.
        n_extra_edges: Edges added on top of a random spanning path.

    Returns:
        Dictionary with timing results.
    """
    start = time.perf_counter()
    graph = random_connected_graph(n_vertices, n_extra_edges)
    built = time.perf_counter()
    graph.find_minimum_spanning_tree()
    mst_done = time.perf_counter()
    graph.find_shortest_path_between(0, n_vertices - 1)
    path_done = time.perf_counter()

    return {
        "n_vertices": n_vertices,
        "n_edges": graph.num_edges(),
        "build_time_sec": built - start,
        "mst_time_sec": mst_done - built,
        "shortest_path_time_sec": path_done - mst_done,
    }


if __name__ == "__main__":
    print("Benchmarking disjoint set...")
    results = benchmark_disjoint_set(n_items=100000)
    print("Disjoint set (100k items):")
    print(f"  Operations per second: {results['ops_per_sec']:.0f}")

    print("Benchmarking graph queries...")
    results = benchmark_queries(n_vertices=20000, n_extra_edges=80000)
    print(f"Graph ({results['n_vertices']} vertices, {results['n_edges']} edges):")
    print(f"  Build: {results['build_time_sec']*1e3:.1f} ms")
    print(f"  MST: {results['mst_time_sec']*1e3:.1f} ms")
    print(f"  Shortest path: {results['shortest_path_time_sec']*1e3:.1f} ms")
