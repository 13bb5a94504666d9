"""Tests for core data models."""

import json

from astar_engine.core.data_models import Node, SearchResult, SearchStatistics, SearchStatus
from astar_engine.domains.river_crossing import RiverCrossingState


class TestNode:
    """Test Node functionality."""

    def test_f_is_g_plus_h(self):
        """Test f-score calculation."""
        node = Node(index=3, state="s", g=2.5, h=1.5)

        assert node.f == 4.0
        assert node.is_root
        assert node.children == []

    def test_f_follows_revised_g(self):
        """Test that f tracks a lowered g."""
        node = Node(index=1, state="s", g=5, h=2, parent=0)
        node.g = 3

        assert node.f == 5
        assert not node.is_root

    def test_children_not_shared(self):
        """Test that nodes do not share children lists."""
        a = Node(index=0, state="a", g=0, h=0)
        b = Node(index=1, state="b", g=0, h=0)
        a.children.append(1)

        assert b.children == []

    def test_identity_equality(self):
        """Test that nodes compare by identity."""
        assert Node(index=0, state="a", g=0, h=0) != Node(index=0, state="a", g=0, h=0)

    def test_repr(self):
        """Test node representation."""
        node = Node(index=2, state=RiverCrossingState(True, False, True, False), g=1, h=2)
        assert repr(node) == "Node(#2 [FD||WC] g=1 h=2 f=3)"


class TestSearchStatistics:
    """Test statistics counters."""

    def test_frontier_size_keeps_maximum(self):
        """Test peak frontier size tracking."""
        stats = SearchStatistics()
        for size in (1, 4, 2):
            stats.update_frontier_size(size)

        assert stats.max_frontier_size == 4

    def test_to_dict(self):
        """Test statistics conversion to dictionary."""
        stats = SearchStatistics(nodes_expanded=3, nodes_revised=1)
        data = stats.to_dict()

        assert data['nodes_expanded'] == 3
        assert data['nodes_revised'] == 1
        assert data['propagated_revisions'] == 0


class TestSearchResult:
    """Test search result helpers."""

    def test_status_terminality(self):
        """Test terminal statuses."""
        assert not SearchStatus.RUNNING.is_terminal
        assert SearchStatus.GOAL_FOUND.is_terminal
        assert SearchStatus.EXHAUSTED.is_terminal

    def test_num_transitions(self):
        """Test transition count for found and missing paths."""
        states = [RiverCrossingState(), RiverCrossingState(True, False, True, False)]

        assert SearchResult(True, SearchStatus.GOAL_FOUND, path=states).num_transitions == 1
        assert SearchResult(False, SearchStatus.EXHAUSTED).num_transitions == 0

    def test_to_dict_is_json_serializable(self):
        """Test result serialization."""
        result = SearchResult(
            success=True,
            status=SearchStatus.GOAL_FOUND,
            path=[RiverCrossingState(), RiverCrossingState(True, False, True, False)],
            cost=1,
            termination_reason="goal_reached"
        )
        data = json.loads(json.dumps(result.to_dict()))

        assert data['status'] == 'goal_found'
        assert data['path'] == ["[||FWDC]", "[FD||WC]"]
        assert data['num_transitions'] == 1
