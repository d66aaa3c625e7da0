"""
Disjoint-set (union-find) data structure.

Elements are mapped to sequential integer ids and stored in two parallel
numpy arrays: ``parent`` (a root points at itself) and ``rank`` (an upper
bound on tree height, only meaningful at roots). Path compression in
``find_set`` together with union by rank gives amortized near-constant
time per operation.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 21 (Data Structures for Disjoint Sets).
"""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, TypeVar

import numpy as np

from ..exceptions import DuplicateElementError, ElementNotFoundError, SameSetError

T = TypeVar("T", bound=Hashable)

DEFAULT_CAPACITY = 1024


class DisjointSet(Generic[T]):
    """
    Union-Find (Disjoint Set) with path compression and union by rank.

    Each element receives a stable integer id in insertion order; the id of
    a set is the id of its root element. Backing storage doubles when full
    and never shrinks.

    Complexity:
        - make_set: O(1) amortized
        - find_set: O(alpha(n)) amortized
        - union: O(alpha(n)) amortized

    Example:
        >>> forest = DisjointSet()
        >>> for item in "abc":
        ...     forest.make_set(item)
        >>> forest.union("a", "b")
        >>> forest.find_set("a") == forest.find_set("b")
        True
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty disjoint set.

        Args:
            capacity: Initial number of slots in the backing arrays.

        Raises:
            ValueError: If capacity is less than 1.
        """
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")

        self._index: Dict[T, int] = {}
        self._parent = np.zeros(capacity, dtype=np.int64)
        self._rank = np.zeros(capacity, dtype=np.int64)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def __iter__(self) -> Iterator[T]:
        return iter(self._index)

    @property
    def capacity(self) -> int:
        """Number of slots currently allocated in the backing arrays."""
        return int(self._parent.shape[0])

    def make_set(self, item: T) -> None:
        """
        Create a new singleton set containing item.

        Args:
            item: Hashable element to add.

        Raises:
            DuplicateElementError: If item was already added.
        """
        if item in self._index:
            raise DuplicateElementError(item)

        idx = len(self._index)
        if idx == self.capacity:
            self._grow()

        self._parent[idx] = idx
        self._rank[idx] = 0
        self._index[item] = idx

    def find_set(self, item: T) -> int:
        """
        Return the id of the set containing item.

        Every node visited on the way to the root is re-pointed directly at
        the root.

        Args:
            item: Element to look up.

        Returns:
            Id of the root of item's set.

        Raises:
            ElementNotFoundError: If item was never added.
        """
        idx = self._index.get(item)
        if idx is None:
            raise ElementNotFoundError(item)
        return self._find_root(idx)

    def union(self, item1: T, item2: T) -> None:
        """
        Merge the sets containing item1 and item2.

        The root of higher rank absorbs the other. On equal ranks, the root
        of item1's set absorbs the root of item2's set and its rank grows by
        one.

        Args:
            item1: Element of the first set.
            item2: Element of the second set.

        Raises:
            ElementNotFoundError: If either item was never added.
            SameSetError: If both items already belong to the same set.
        """
        root1 = self.find_set(item1)
        root2 = self.find_set(item2)

        if root1 == root2:
            raise SameSetError(item1, item2)

        rank1 = self._rank[root1]
        rank2 = self._rank[root2]
        if rank2 > rank1:
            self._parent[root1] = root2
        else:
            self._parent[root2] = root1
            if rank1 == rank2:
                self._rank[root1] += 1

    def connected(self, item1: T, item2: T) -> bool:
        """
        Return True if item1 and item2 belong to the same set.

        Raises:
            ElementNotFoundError: If either item was never added.
        """
        return self.find_set(item1) == self.find_set(item2)

    def _find_root(self, idx: int) -> int:
        parent = self._parent

        root = idx
        while parent[root] != root:
            root = int(parent[root])

        # Second pass: compress
        while parent[idx] != root:
            nxt = int(parent[idx])
            parent[idx] = root
            idx = nxt

        return root

    def _grow(self) -> None:
        size = self.capacity
        self._parent = np.concatenate([self._parent, np.zeros(size, dtype=np.int64)])
        self._rank = np.concatenate([self._rank, np.zeros(size, dtype=np.int64)])

    def __repr__(self) -> str:
        return f"DisjointSet(size={len(self)}, capacity={self.capacity})"
