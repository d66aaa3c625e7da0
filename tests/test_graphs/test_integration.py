"""Integration tests for the graphs package within graphconduit."""

import itertools

import numpy as np
import pytest

from graphconduit.diagnostics import is_spanning_forest, is_valid_path
from graphconduit.exceptions import NoPathExistsError
from graphconduit.graphs import Edge, WeightedGraph, path_weight


def random_graph(rng, n, p, max_weight=10):
    """Erdos-Renyi style graph with integer weights, self-loops and parallels."""
    edges = []
    for u, v in itertools.combinations(range(n), 2):
        if rng.random() < p:
            edges.append(Edge(u, v, float(rng.integers(0, max_weight))))
            if rng.random() < 0.1:
                edges.append(Edge(v, u, float(rng.integers(0, max_weight))))
    for u in range(n):
        if rng.random() < 0.1:
            edges.append(Edge(u, u, float(rng.integers(0, max_weight))))
    return WeightedGraph(range(n), edges)


def floyd_warshall(graph):
    """Reference all-pairs distances as a dense numpy matrix."""
    n = graph.num_vertices()
    dist = np.full((n, n), np.inf)
    np.fill_diagonal(dist, 0.0)
    for e in graph.edges():
        dist[e.u, e.v] = min(dist[e.u, e.v], e.weight)
        dist[e.v, e.u] = min(dist[e.v, e.u], e.weight)
    for k in range(n):
        dist = np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :])
    return dist


def brute_force_mst_weight(graph):
    """Minimum over all (V-1)-edge subsets that form a spanning tree."""
    n = graph.num_vertices()
    edges = [e for e in graph.edges() if e.u != e.v]
    best = np.inf
    for subset in itertools.combinations(edges, n - 1):
        if is_spanning_forest(graph, subset):
            best = min(best, path_weight(list(subset)))
    return best


def test_graphs_import_from_main():
    """Test that graph types can be imported from the main package."""
    import graphconduit
    from graphconduit import DisjointSet, Edge, WeightedGraph, dijkstra, kruskal_mst

    assert DisjointSet is not None
    assert WeightedGraph is not None
    assert {"Edge", "WeightedGraph", "kruskal_mst", "dijkstra"} <= set(graphconduit.__all__)


@pytest.mark.parametrize("trial", range(10))
def test_shortest_paths_match_floyd_warshall(rng, trial):
    """Test Dijkstra paths against a dense reference on random graphs."""
    n = int(rng.integers(2, 12))
    graph = random_graph(rng, n, p=0.3)
    reference = floyd_warshall(graph)

    for start, end in itertools.product(range(n), repeat=2):
        if np.isinf(reference[start, end]):
            with pytest.raises(NoPathExistsError):
                graph.find_shortest_path_between(start, end)
            continue

        path = graph.find_shortest_path_between(start, end)
        assert is_valid_path(path, start, end)
        assert path_weight(path) == pytest.approx(reference[start, end])
        assert all(e.u != e.v for e in path)


@pytest.mark.parametrize("trial", range(10))
def test_mst_is_minimum(rng, trial):
    """Test Kruskal's total weight against exhaustive search on small graphs."""
    n = int(rng.integers(2, 6))
    graph = random_graph(rng, n, p=0.8)
    mst = graph.find_minimum_spanning_tree()

    assert is_spanning_forest(graph, mst)
    if len(mst) == n - 1:
        assert path_weight(list(mst)) == pytest.approx(brute_force_mst_weight(graph))


def test_realistic_scenario():
    """Test both queries on a small road network."""
    roads = [
        Edge("depot", "north", 4.0),
        Edge("depot", "east", 2.0),
        Edge("east", "north", 1.0),
        Edge("north", "market", 5.0),
        Edge("east", "market", 8.0),
        Edge("market", "harbor", 3.0),
    ]
    G = WeightedGraph({"depot", "north", "east", "market", "harbor"}, set(roads))

    path = G.find_shortest_path_between("depot", "harbor")
    assert [(e.u, e.v) for e in path] == [
        ("depot", "east"),
        ("east", "north"),
        ("north", "market"),
        ("market", "harbor"),
    ]
    assert path_weight(path) == 11.0

    mst = G.find_minimum_spanning_tree()
    assert path_weight(list(mst)) == 11.0
    assert len(mst) == G.num_vertices() - 1
