"""Tests for the A* frontier."""

import pytest

from astar_engine.core.data_models import Node
from astar_engine.search.frontier import Frontier


def make_node(index: int, g: int, h: int = 0) -> Node:
    return Node(index=index, state=f"s{index}", g=g, h=h)


class TestFrontierOrdering:
    """Test insertion and extraction order."""

    def test_pop_min_returns_lowest_f(self):
        """Test that nodes come out by increasing f."""
        frontier = Frontier()
        nodes = [make_node(0, 5), make_node(1, 2, 1), make_node(2, 1, 1)]
        for node in nodes:
            frontier.insert(node)

        assert [frontier.pop_min().index for _ in range(3)] == [2, 1, 0]
        assert frontier.is_empty()

    def test_ties_are_fifo(self):
        """Test that equal f values come out in insertion order."""
        frontier = Frontier()
        for index, (g, h) in enumerate([(3, 0), (1, 2), (0, 3), (2, 1)]):
            frontier.insert(make_node(index, g, h))

        assert [frontier.pop_min().index for _ in range(4)] == [0, 1, 2, 3]

    def test_len_and_contains(self):
        """Test size and membership of live entries."""
        frontier = Frontier()
        a, b = make_node(0, 1), make_node(1, 2)
        frontier.insert(a)

        assert len(frontier) == 1
        assert a in frontier
        assert b not in frontier

        frontier.pop_min()
        assert a not in frontier
        assert len(frontier) == 0

    def test_pop_empty_raises(self):
        """Test popping an empty frontier."""
        with pytest.raises(IndexError):
            Frontier().pop_min()

    def test_duplicate_insert_rejected(self):
        """Test that a queued node cannot be inserted twice."""
        frontier = Frontier()
        node = make_node(0, 1)
        frontier.insert(node)

        with pytest.raises(ValueError, match="already in the frontier"):
            frontier.insert(node)

    def test_peek_does_not_remove(self):
        """Test peek on empty and non-empty frontiers."""
        frontier = Frontier()
        assert frontier.peek() is None

        node = make_node(0, 1)
        frontier.insert(node)
        assert frontier.peek() is node
        assert len(frontier) == 1


class TestFrontierRekey:
    """Test re-keying of queued nodes."""

    def test_rekey_moves_node_forward(self):
        """Test that lowering a key moves the node ahead."""
        frontier = Frontier()
        a, b = make_node(0, 5), make_node(1, 3)
        frontier.insert(a)
        frontier.insert(b)

        old_f = a.f
        a.g = 1
        assert frontier.rekey(a, old_f, a.f)

        assert frontier.key_of(a) == 1
        assert frontier.pop_min() is a
        assert frontier.pop_min() is b
        assert frontier.is_empty()

    def test_rekeyed_node_goes_behind_equal_keys(self):
        """Test that a re-keyed node joins the back of its tie group."""
        frontier = Frontier()
        a, b = make_node(0, 2), make_node(1, 5)
        frontier.insert(a)
        frontier.insert(b)

        old_f = b.f
        b.g = 2
        frontier.rekey(b, old_f, b.f)

        assert frontier.pop_min() is a
        assert frontier.pop_min() is b

    def test_rekey_absent_node_is_noop(self):
        """Test re-keying a node that was already popped."""
        frontier = Frontier()
        a = make_node(0, 4)
        frontier.insert(a)
        frontier.pop_min()

        assert not frontier.rekey(a, 4, 2)
        assert frontier.is_empty()

    def test_rekey_with_wrong_old_key_is_noop(self):
        """Test re-keying under a key the node is not stored under."""
        frontier = Frontier()
        a = make_node(0, 4)
        frontier.insert(a)

        assert not frontier.rekey(a, 7, 1)
        assert frontier.key_of(a) == 4
        assert len(frontier) == 1

    def test_snapshot_skips_invalidated_entries(self):
        """Test that snapshots list live entries in pop order."""
        frontier = Frontier()
        a, b, c = make_node(0, 4), make_node(1, 2), make_node(2, 3)
        for node in (a, b, c):
            frontier.insert(node)

        old_f = a.f
        a.g = 1
        frontier.rekey(a, old_f, a.f)

        snapshot = frontier.snapshot()
        assert snapshot == [a, b, c]
        assert len(frontier) == 3
