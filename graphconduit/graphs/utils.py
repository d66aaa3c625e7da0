"""
Utility functions for graph algorithms.

Provides the top-k sort used to order edges by weight, deterministic
conversion of unordered collections, and helpers for edge paths.
"""

from __future__ import annotations

import collections.abc
import heapq
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

if TYPE_CHECKING:
    from .core import EdgeLike

T = TypeVar("T")
E = TypeVar("E", bound="EdgeLike")


def top_k_sort(k: int, items: Iterable[T], key: Optional[Callable[[T], Any]] = None) -> List[T]:
    """
    Return the k largest items in ascending order.

    When k is at least the number of items this is a full ascending sort.

    Args:
        k: Number of items to keep.
        items: Items to select from.
        key: Optional sort key, as for ``sorted``.

    Returns:
        List of at most k items, smallest first.

    Raises:
        ValueError: If k is negative.

    Complexity: O(n log k) using a bounded heap.

    Example:
        >>> top_k_sort(2, [5, 1, 4, 3])
        [4, 5]
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0:
        return []

    largest = heapq.nlargest(k, items, key=key)
    largest.reverse()
    return largest


def edge_sort_key(edge: "EdgeLike") -> Tuple[float, str, str]:
    """Sort key ordering edges by weight, then endpoints for determinism."""
    return (edge.weight, str(edge.u), str(edge.v))


def sort_edges(edges: Iterable[E]) -> List[E]:
    """
    Sort edges ascending by weight.

    Ties are broken by the string form of the endpoints so that the same
    input always gives the same order.

    Args:
        edges: Edges to sort.

    Returns:
        New list of edges, lightest first.
    """
    edge_list = list(edges)
    return top_k_sort(len(edge_list), edge_list, key=edge_sort_key)


def as_ordered_list(items: Iterable[T]) -> List[T]:
    """
    Convert a collection to a list with a deterministic order.

    Sequences keep their order and their duplicates, so parallel edges given
    as a list are all counted. Sets have no order of their own, so they are
    sorted by string representation.

    Example:
        >>> as_ordered_list({"c", "a", "b"})
        ['a', 'b', 'c']
    """
    if isinstance(items, collections.abc.Set):
        return sorted(items, key=lambda x: str(x))
    return list(items)


def reconstruct_edge_path(
    parent_edge: Dict[Hashable, Optional[E]], start: Hashable, end: Hashable
) -> Optional[List[E]]:
    """
    Reconstruct the edge path from start to end using a predecessor-edge map.

    ``parent_edge[v]`` is the last edge on the best known path to v, or None
    if v is the start or was never reached.

    Args:
        parent_edge: Mapping node -> incoming edge (or None).
        start: Node the search started from.
        end: Node to reconstruct the path to.

    Returns:
        List of edges from start to end (empty if start == end), or None if
        end is unreachable.

    Example:
        >>> ab, bc = Edge("A", "B", 1.0), Edge("B", "C", 2.0)
        >>> reconstruct_edge_path({"A": None, "B": ab, "C": bc}, "A", "C")
        [Edge(u='A', v='B', weight=1.0), Edge(u='B', v='C', weight=2.0)]
    """
    if end == start:
        return []
    if parent_edge.get(end) is None:
        return None

    path: List[E] = []
    current = end
    visited = set()
    while current != start:
        if current in visited:
            # Cycle in the predecessor map
            return None
        visited.add(current)

        edge = parent_edge.get(current)
        if edge is None:
            return None
        path.append(edge)
        current = edge.v if edge.u == current else edge.u

    path.reverse()
    return path


def path_weight(path: Sequence["EdgeLike"]) -> float:
    """Return the total weight of a sequence of edges (0.0 for an empty path)."""
    return float(sum(edge.weight for edge in path))
