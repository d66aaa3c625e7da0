"""Tests for the disjoint-set (union-find) structure."""

import pytest

from graphconduit.exceptions import (
    DuplicateElementError,
    ElementNotFoundError,
    GraphConduitError,
    SameSetError,
)
from graphconduit.graphs import DEFAULT_CAPACITY, DisjointSet


def make_forest(items, capacity=DEFAULT_CAPACITY):
    forest = DisjointSet(capacity=capacity)
    for item in items:
        forest.make_set(item)
    return forest


ITEMS = ["a", "b", "c", "d", "e"]


class TestMakeSetAndFindSet:
    """Tests for make_set and find_set."""

    def test_singletons_get_sequential_ids(self):
        """Test that each new element is its own set with the next id."""
        forest = make_forest(ITEMS)

        for _ in range(5):
            assert [forest.find_set(item) for item in ITEMS] == [0, 1, 2, 3, 4]

    def test_singletons_are_distinct(self):
        """Test that no two singletons share an id."""
        forest = make_forest(range(50))
        ids = {forest.find_set(i) for i in range(50)}
        assert len(ids) == 50

    def test_duplicate_make_set(self):
        """Test that adding an element twice raises."""
        forest = make_forest(ITEMS)
        with pytest.raises(DuplicateElementError, match="already present"):
            forest.make_set("c")

    def test_find_set_missing(self):
        """Test find_set on an element never added."""
        forest = make_forest(ITEMS)
        with pytest.raises(ElementNotFoundError):
            forest.find_set("f")

    def test_missing_is_also_key_error(self):
        """Test that a missing element can be caught as KeyError."""
        forest = make_forest(ITEMS)
        with pytest.raises(KeyError):
            forest.find_set("f")

    def test_len_and_contains(self):
        """Test size and membership."""
        forest = make_forest(ITEMS)
        assert len(forest) == 5
        assert "a" in forest
        assert "z" not in forest
        assert list(forest) == ITEMS

    def test_invalid_capacity(self):
        """Test that a non-positive capacity is rejected."""
        with pytest.raises(ValueError, match="capacity"):
            DisjointSet(capacity=0)


class TestUnion:
    """Tests for union."""

    def test_union_simple(self):
        """Test that union merges two singletons and leaves others alone."""
        forest = make_forest(ITEMS)

        forest.union("a", "b")
        id1 = forest.find_set("a")
        assert id1 in (0, 1)
        assert forest.find_set("b") == id1

        forest.union("c", "d")
        id2 = forest.find_set("c")
        assert id2 in (2, 3)
        assert forest.find_set("d") == id2

        assert forest.find_set("e") == 4

    def test_union_tie_keeps_first_root(self):
        """Test that on equal ranks the first element's root wins."""
        forest = make_forest(ITEMS)
        forest.union("a", "b")
        assert forest.find_set("b") == 0

        forest.union("e", "d")
        assert forest.find_set("d") == 4

    def test_union_by_rank(self):
        """Test that the taller tree absorbs the shorter one."""
        forest = make_forest(ITEMS)
        forest.union("a", "b")  # rank 1 at id 0
        forest.union("c", "a")  # rank 0 root at id 2 joins the rank 1 root

        assert forest.find_set("c") == 0

    def test_union_unequal_trees(self):
        """Test ids after merging a pair with a singleton."""
        forest = make_forest(ITEMS)

        forest.union("a", "b")
        root = forest.find_set("a")
        forest.union("a", "c")

        for _ in range(5):
            assert [forest.find_set(item) for item in ITEMS] == [root, root, root, 3, 4]

    def test_union_same_set(self):
        """Test that union of already merged elements raises."""
        forest = make_forest(ITEMS)
        forest.union("a", "b")

        with pytest.raises(SameSetError, match="same set"):
            forest.union("a", "b")
        with pytest.raises(SameSetError):
            forest.union("b", "a")

    def test_union_same_element(self):
        """Test that an element cannot be merged with itself."""
        forest = make_forest(ITEMS)
        with pytest.raises(SameSetError):
            forest.union("a", "a")

    def test_union_missing(self):
        """Test union with an element never added."""
        forest = make_forest(ITEMS)
        with pytest.raises(ElementNotFoundError):
            forest.union("a", "f")
        with pytest.raises(ElementNotFoundError):
            forest.union("f", "a")

    def test_errors_share_base_class(self):
        """Test that all disjoint-set errors derive from GraphConduitError."""
        forest = make_forest(ITEMS)
        forest.union("a", "b")
        for call in (
            lambda: forest.make_set("a"),
            lambda: forest.find_set("z"),
            lambda: forest.union("a", "b"),
        ):
            with pytest.raises(GraphConduitError):
                call()

    def test_union_survives_unrelated_unions(self):
        """Test that merged elements stay together through later unions."""
        forest = make_forest(range(10))
        forest.union(0, 1)
        forest.union(2, 3)
        forest.union(4, 5)
        forest.union(2, 4)
        forest.union(6, 7)

        assert forest.find_set(0) == forest.find_set(1)
        assert forest.connected(0, 1)
        assert not forest.connected(0, 2)
        assert forest.connected(3, 5)

    def test_connected_missing(self):
        """Test connected with an element never added."""
        forest = make_forest(ITEMS)
        with pytest.raises(ElementNotFoundError):
            forest.connected("a", "q")


class TestLargeForest:
    """Tests for growth and path compression on many elements."""

    def test_chain_of_unions(self):
        """Test that find_set is stable across repeated calls on a big set."""
        forest = DisjointSet()
        forest.make_set(0)

        num_items = 5000
        for i in range(1, num_items):
            forest.make_set(i)
            forest.union(0, i)

        root = forest.find_set(0)
        for _ in range(3):
            assert all(forest.find_set(j) == root for j in range(num_items))

    def test_grows_past_default_capacity(self):
        """Test inserting one element past the default capacity."""
        forest = DisjointSet()
        assert forest.capacity == DEFAULT_CAPACITY

        for i in range(DEFAULT_CAPACITY + 1):
            forest.make_set(i)

        assert forest.capacity == 2 * DEFAULT_CAPACITY
        assert len(forest) == DEFAULT_CAPACITY + 1
        assert forest.find_set(DEFAULT_CAPACITY) == DEFAULT_CAPACITY

    def test_resize_preserves_roots(self):
        """Test that growing keeps every existing id-to-root mapping."""
        size = 100
        forest = make_forest(range(size), capacity=size)
        for i in range(0, size, 2):
            forest.union(i, i + 1)
        before = {i: forest.find_set(i) for i in range(size)}

        forest.make_set(size)

        assert forest.capacity == 2 * size
        assert {i: forest.find_set(i) for i in range(size)} == before
        assert forest.find_set(size) == size

    def test_capacity_one(self):
        """Test repeated doubling from the smallest capacity."""
        forest = make_forest(range(9), capacity=1)
        assert forest.capacity == 16
        assert [forest.find_set(i) for i in range(9)] == list(range(9))
