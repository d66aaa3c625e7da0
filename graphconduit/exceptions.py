"""Exception hierarchy for Graph Conduit.

Every error raised by the library derives from :class:`GraphConduitError`.
Where a built-in exception already describes the failure, the library error
also derives from it, so ``except ValueError`` and ``except KeyError`` keep
working for callers that do not know about this module.

All of these signal caller mistakes or unsatisfiable queries. None of them
is transient, and retrying the same call raises again.
"""

from __future__ import annotations

from typing import Hashable


class GraphConduitError(Exception):
    """Base class for all Graph Conduit errors."""


class DuplicateElementError(GraphConduitError, ValueError):
    """An element was inserted twice into a structure that requires uniqueness."""

    def __init__(self, item: Hashable):
        super().__init__(f"Element {item!r} is already present")
        self.item = item


class ElementNotFoundError(GraphConduitError, KeyError):
    """An element was looked up in a disjoint set that never received it."""

    def __init__(self, item: Hashable):
        super().__init__(f"Element {item!r} is not present")
        self.item = item

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return str(self.args[0])


class SameSetError(GraphConduitError, ValueError):
    """Two elements passed to ``union`` already belong to the same set."""

    def __init__(self, item1: Hashable, item2: Hashable):
        super().__init__(f"Elements {item1!r} and {item2!r} are already in the same set")
        self.item1 = item1
        self.item2 = item2


class InvalidWeightError(GraphConduitError, ValueError):
    """A graph was built with an edge of negative (or NaN) weight."""

    def __init__(self, edge: object, weight: float):
        super().__init__(f"Edge weights must be non-negative, found {weight} on {edge!r}")
        self.edge = edge
        self.weight = weight


class UnknownVertexError(GraphConduitError, ValueError):
    """A vertex referenced by an edge or a query is not part of the graph."""

    def __init__(self, vertex: Hashable):
        super().__init__(f"Vertex {vertex!r} not in graph")
        self.vertex = vertex


class NoPathExistsError(GraphConduitError):
    """The end vertex of a shortest-path query is unreachable from the start."""

    def __init__(self, start: Hashable, end: Hashable):
        super().__init__(f"No path exists from {start!r} to {end!r}")
        self.start = start
        self.end = end
