"""Core data models for the A* engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .state import Cost, SearchState


class SearchStatus(Enum):
    """Lifecycle of a search session."""
    RUNNING = "running"
    GOAL_FOUND = "goal_found"
    EXHAUSTED = "exhausted"

    @property
    def is_terminal(self) -> bool:
        return self is not SearchStatus.RUNNING


@dataclass(eq=False)
class Node:
    """Vertex of the search graph, stored in the graph arena.

    ``parent`` and ``children`` hold arena indices, not node references, so
    the graph stays the sole owner of every node.
    """

    index: int  # Stable slot in the graph arena
    state: SearchState
    g: Cost  # Path cost from the start, only ever lowered
    h: Cost  # Heuristic estimate, fixed at creation
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)

    @property
    def f(self) -> Cost:
        """Total projected cost f(n) = g(n) + h(n)."""
        return self.g + self.h

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def __repr__(self) -> str:
        return f"Node(#{self.index} {self.state} g={self.g} h={self.h} f={self.f})"


@dataclass
class SearchStatistics:
    """Counters collected while a session runs."""
    nodes_expanded: int = 0
    nodes_generated: int = 0  # Includes the root
    nodes_regenerated: int = 0  # Successors that were already in the graph
    nodes_revised: int = 0  # Regenerated nodes whose cost improved
    propagated_revisions: int = 0  # Descendants revised through children links
    max_frontier_size: int = 0

    def update_frontier_size(self, size: int) -> None:
        if size > self.max_frontier_size:
            self.max_frontier_size = size

    def to_dict(self) -> Dict[str, Any]:
        """Convert statistics to dictionary."""
        return {
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'nodes_regenerated': self.nodes_regenerated,
            'nodes_revised': self.nodes_revised,
            'propagated_revisions': self.propagated_revisions,
            'max_frontier_size': self.max_frontier_size
        }


@dataclass
class SearchResult:
    """Result from an A* search."""
    success: bool
    status: SearchStatus
    path: List[SearchState] = field(default_factory=list)
    cost: Optional[Cost] = None
    nodes_expanded: int = 0
    nodes_generated: int = 0
    nodes_regenerated: int = 0
    nodes_revised: int = 0
    max_frontier_size: int = 0
    computation_time: float = 0.0
    termination_reason: str = "unknown"

    @property
    def num_transitions(self) -> int:
        """Number of moves on the solution path (0 when there is none)."""
        return max(len(self.path) - 1, 0)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to a JSON-serializable dictionary."""
        return {
            'success': self.success,
            'status': self.status.value,
            'path': [str(state) for state in self.path],
            'cost': self.cost,
            'num_transitions': self.num_transitions,
            'nodes_expanded': self.nodes_expanded,
            'nodes_generated': self.nodes_generated,
            'nodes_regenerated': self.nodes_regenerated,
            'nodes_revised': self.nodes_revised,
            'max_frontier_size': self.max_frontier_size,
            'computation_time': self.computation_time,
            'termination_reason': self.termination_reason
        }
