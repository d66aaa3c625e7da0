"""Graph Conduit - minimum spanning trees and shortest paths over weighted graphs."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_spanning_forest,
    assert_valid_path,
    debug_context,
    is_debug_enabled,
    is_spanning_forest,
    is_valid_path,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    DuplicateElementError,
    ElementNotFoundError,
    GraphConduitError,
    InvalidWeightError,
    NoPathExistsError,
    SameSetError,
    UnknownVertexError,
)

# Graphs and algorithms
from .graphs import (
    DisjointSet,
    Edge,
    EdgeLike,
    WeightedGraph,
    dijkstra,
    kruskal_mst,
    path_weight,
    shortest_path,
    top_k_sort,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "DisjointSet",
    "Edge",
    "EdgeLike",
    "WeightedGraph",
    "dijkstra",
    "kruskal_mst",
    "path_weight",
    "shortest_path",
    "top_k_sort",
    # Errors
    "GraphConduitError",
    "DuplicateElementError",
    "ElementNotFoundError",
    "SameSetError",
    "InvalidWeightError",
    "UnknownVertexError",
    "NoPathExistsError",
    # Diagnostics
    "is_spanning_forest",
    "assert_spanning_forest",
    "is_valid_path",
    "assert_valid_path",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
