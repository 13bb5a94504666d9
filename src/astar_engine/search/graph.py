"""Generated-set registry for A* search.

The graph is an arena: it owns every node created during a session, keyed by
state, and hands out stable integer indices that nodes use to refer to their
parent and children.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from astar_engine.core.data_models import Node
from astar_engine.core.state import SearchState, StateContractError, check_cost_value, check_state

logger = logging.getLogger(__name__)


class SearchGraph:
    """Registry holding at most one node per distinct state."""

    def __init__(self, check_contracts: bool = True):
        """Initialize an empty graph.

        Args:
            check_contracts: Validate states before registering them
        """
        self.check_contracts = check_contracts
        self._nodes: List[Node] = []
        self._index: Dict[SearchState, int] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __contains__(self, state: SearchState) -> bool:
        return state in self._index

    def __getitem__(self, state: SearchState) -> Node:
        return self._nodes[self._index[state]]

    def contains(self, state: SearchState) -> bool:
        return state in self._index

    def node(self, index: int) -> Node:
        """Return the node stored at ``index``."""
        return self._nodes[index]

    def parent_of(self, node: Node) -> Optional[Node]:
        if node.parent is None:
            return None
        return self._nodes[node.parent]

    def get_or_create(self, state: SearchState,
                      parent: Optional[Node] = None) -> Tuple[Node, bool]:
        """Fetch the node for ``state``, creating it when first discovered.

        An existing node is returned untouched; cost revision is a separate,
        explicit step.

        Args:
            state: State to look up
            parent: Node the state was generated from, None for the root

        Returns:
            Tuple of (node, is_new)
        """
        existing = self._index.get(state)
        if existing is not None:
            return self._nodes[existing], False

        if self.check_contracts:
            check_state(state)

        if parent is None:
            g = 0
            parent_index = None
        else:
            step = check_cost_value(parent.state.step_cost(state), "step cost", parent.state)
            g = parent.g + step
            parent_index = parent.index

        # Heuristic values are always checked; a negative h breaks ordering
        h = check_cost_value(state.heuristic(), "heuristic", state)

        node = Node(index=len(self._nodes), state=state, g=g, h=h, parent=parent_index)
        self._nodes.append(node)
        self._index[state] = node.index
        return node, True

    def path_to(self, node: Node) -> List[Node]:
        """Reconstruct the path from the root to ``node`` via parent links."""
        path = []
        current: Optional[Node] = node
        while current is not None:
            path.append(current)
            if len(path) > len(self._nodes):
                raise StateContractError(f"Parent links from {node!r} form a cycle")
            current = self.parent_of(current)
        return list(reversed(path))

    def is_ancestor(self, candidate: Node, node: Node) -> bool:
        """Whether ``candidate`` lies on the parent chain of ``node`` (or is it)."""
        current: Optional[Node] = node
        steps = 0
        while current is not None and steps <= len(self._nodes):
            if current.index == candidate.index:
                return True
            current = self.parent_of(current)
            steps += 1
        return False

    def check_invariants(self) -> None:
        """Verify the structural invariants of the graph.

        Raises:
            StateContractError: Describing the first violation found
        """
        seen: Dict[SearchState, int] = {}
        for node in self._nodes:
            # Equal states hashing differently would slip past the index
            for other_state, other_index in seen.items():
                if other_state == node.state:
                    raise StateContractError(
                        f"Nodes #{other_index} and #{node.index} hold equal states {node.state!r}"
                    )
            seen[node.state] = node.index

            if node.g < 0:
                raise StateContractError(f"{node!r} has negative g")
            if node.h != node.state.heuristic():
                raise StateContractError(f"Heuristic of {node!r} changed after creation")
            if node.parent is None and node.index != 0:
                raise StateContractError(f"Non-root {node!r} has no parent")
            self.path_to(node)

        logger.debug(f"Graph invariants hold for {len(self._nodes)} nodes")
