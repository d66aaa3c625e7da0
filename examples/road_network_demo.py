"""
Example: Road Network Planning with Graph Conduit

This example builds a small undirected road network and answers the two
questions the library is designed for: which roads form the cheapest
network that still connects every town (minimum spanning tree), and which
route is cheapest between two towns (shortest path).
"""

import logging

from graphconduit import (
    Edge,
    NoPathExistsError,
    UnknownVertexError,
    WeightedGraph,
    configure_logging,
    debug_context,
    path_weight,
)

TOWNS = ["Ashford", "Bexley", "Crayford", "Dartford", "Erith", "Foots Cray"]

ROADS = [
    Edge("Ashford", "Bexley", 7.0),
    Edge("Ashford", "Crayford", 9.0),
    Edge("Ashford", "Foots Cray", 14.0),
    Edge("Bexley", "Crayford", 10.0),
    Edge("Bexley", "Dartford", 15.0),
    Edge("Crayford", "Dartford", 11.0),
    Edge("Crayford", "Foots Cray", 2.0),
    Edge("Dartford", "Erith", 6.0),
    Edge("Erith", "Foots Cray", 9.0),
]


def describe(edges):
    return ", ".join(f"{e.u}-{e.v} ({e.weight:g})" for e in edges)


def example_minimum_spanning_tree(graph):
    """Example: cheapest set of roads keeping every town reachable."""
    print("=" * 60)
    print("Example 1: Minimum Spanning Tree")
    print("=" * 60)

    mst = sorted(graph.find_minimum_spanning_tree(), key=lambda e: e.weight)
    print(f"Roads kept: {describe(mst)}")
    print(f"Total length: {path_weight(mst):g}")
    print()


def example_shortest_path(graph):
    """Example: cheapest route between two towns."""
    print("=" * 60)
    print("Example 2: Shortest Path")
    print("=" * 60)

    path = graph.find_shortest_path_between("Ashford", "Erith")
    print(f"Route Ashford -> Erith: {describe(path)}")
    print(f"Route length: {path_weight(path):g}")
    print()


def example_errors(graph):
    """Example: queries the library refuses to answer."""
    print("=" * 60)
    print("Example 3: Error Handling")
    print("=" * 60)

    try:
        graph.find_shortest_path_between("Ashford", "Greenwich")
    except UnknownVertexError as exc:
        print(f"Unknown town: {exc}")

    island = WeightedGraph(TOWNS + ["Isle of Grain"], ROADS)
    try:
        island.find_shortest_path_between("Ashford", "Isle of Grain")
    except NoPathExistsError as exc:
        print(f"Unreachable: {exc}")
    print()


if __name__ == "__main__":
    configure_logging(level=logging.WARNING)

    print("\n" + "=" * 60)
    print("Graph Conduit - Road Network Examples")
    print("=" * 60 + "\n")

    network = WeightedGraph(TOWNS, ROADS)
    print(f"Network: {network.num_vertices()} towns, {network.num_edges()} roads\n")

    with debug_context(True):
        example_minimum_spanning_tree(network)
        example_shortest_path(network)
    example_errors(network)

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)
