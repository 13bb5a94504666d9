"""A* search driver.

This module runs the expand/generate/revise loop over any domain implementing
:class:`~astar_engine.core.state.SearchState`. A :class:`SearchSession` owns
the graph and frontier of one run and advances a small state machine
(running, goal found, exhausted); :class:`AStarSearcher` wraps sessions behind
a configuration and turns them into :class:`SearchResult` objects.

By default the search stops as soon as a goal state is *generated*, not when
it is popped from the frontier. Under an admissible heuristic with unit costs
this returns an optimal path on the problems the engine was built for, but it
is weaker than textbook A* termination; ``goal_test="expand"`` selects the
strict variant.
"""

import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from astar_engine.core.data_models import Node, SearchResult, SearchStatistics, SearchStatus
from astar_engine.core.state import SearchState, check_state
from .frontier import Frontier
from .graph import SearchGraph
from .revision import revise_cost
from .trace import NullTracer, SearchTracer

logger = logging.getLogger(__name__)

GOAL_TEST_MODES = ('generate', 'expand')


@dataclass
class SearchConfig:
    """Configuration for A* search."""
    goal_test: str = 'generate'  # 'generate' or 'expand'
    skip_predecessor: bool = True  # Skip the successor that undoes the move just made
    check_contracts: bool = True  # Validate states as they are registered
    check_invariants: bool = False  # Verify graph invariants when a session ends

    def __post_init__(self) -> None:
        if self.goal_test not in GOAL_TEST_MODES:
            raise ValueError(f"goal_test must be one of {GOAL_TEST_MODES}, got {self.goal_test!r}")

    @classmethod
    def from_config(cls, cfg: Any) -> 'SearchConfig':
        """Build a search config from the ``search`` section of a loaded config."""
        if cfg is None:
            return cls()
        section = cfg['search'] if 'search' in cfg else cfg
        defaults = cls()
        return cls(
            goal_test=str(section.get('goal_test', defaults.goal_test)),
            skip_predecessor=bool(section.get('skip_predecessor', defaults.skip_predecessor)),
            check_contracts=bool(section.get('check_contracts', defaults.check_contracts)),
            check_invariants=bool(section.get('check_invariants', defaults.check_invariants))
        )


class SearchSession:
    """State of a single search run.

    The session exclusively owns its graph and frontier. It is created per
    search and discarded afterwards, releasing every node at once.
    """

    def __init__(self, start: SearchState,
                 config: Optional[SearchConfig] = None,
                 tracer: Optional[SearchTracer] = None):
        self.config = config or SearchConfig()
        self.tracer = tracer or NullTracer()
        # Frontier snapshots are built for every sink except a plain NullTracer
        self._tracing = type(self.tracer) is not NullTracer
        self.statistics = SearchStatistics()
        self.graph = SearchGraph(check_contracts=self.config.check_contracts)
        self.frontier = Frontier()
        self.goal: Optional[Node] = None
        self.status = SearchStatus.RUNNING
        self.termination_reason = "running"

        self.root, _ = self.graph.get_or_create(start)
        self.frontier.insert(self.root)
        self.statistics.nodes_generated = 1
        self.statistics.update_frontier_size(len(self.frontier))

        # Extension over the plain driver loop, which never goal-tests the root:
        # a start state that is already a goal ends the search before expansion
        if self.config.goal_test == 'generate' and start.is_goal():
            self._finish_with_goal(self.root, "initial_match")

    @property
    def is_running(self) -> bool:
        return self.status is SearchStatus.RUNNING

    def step(self) -> SearchStatus:
        """Expand one node, or move to a terminal status.

        Returns:
            Status after the step
        """
        if not self.is_running:
            return self.status

        if self._tracing:
            self.tracer.on_frontier_snapshot(self.frontier.snapshot())

        if self.frontier.is_empty():
            self.status = SearchStatus.EXHAUSTED
            self.termination_reason = "search_exhausted"
            self.tracer.on_exhausted()
            self._on_terminal()
            return self.status

        current = self.frontier.pop_min()
        self.tracer.on_expand(current)
        self.statistics.nodes_expanded += 1

        if self.config.goal_test == 'expand' and current.state.is_goal():
            self._finish_with_goal(current, "goal_reached")
            return self.status

        self._expand(current)
        self.statistics.update_frontier_size(len(self.frontier))
        return self.status

    def run(self) -> SearchStatus:
        """Step until the session reaches a terminal status."""
        while self.is_running:
            self.step()
        return self.status

    def goal_path(self) -> List[Node]:
        """Nodes from the root to the goal.

        Raises:
            RuntimeError: If no goal has been found
        """
        if self.goal is None:
            raise RuntimeError(f"No goal found (status: {self.status.value})")
        return self.graph.path_to(self.goal)

    def _expand(self, current: Node) -> None:
        predecessor = self.graph.parent_of(current)
        predecessor_state = predecessor.state if predecessor is not None else None

        for state in current.state.successors():
            if self.config.check_contracts:
                check_state(state)
            if state == current.state:
                continue
            if (self.config.skip_predecessor and predecessor_state is not None
                    and state == predecessor_state):
                continue

            node, is_new = self.graph.get_or_create(state, current)
            was_updated = False
            if is_new:
                self.frontier.insert(node)
                self.statistics.nodes_generated += 1
            else:
                self.statistics.nodes_regenerated += 1
                was_updated = revise_cost(self.graph, self.frontier, node, current,
                                          self.statistics)

            current.children.append(node.index)
            self.tracer.on_generate(node, is_new, was_updated)

            if is_new and self.config.goal_test == 'generate' and state.is_goal():
                self._finish_with_goal(node, "goal_reached")
                break

    def _finish_with_goal(self, node: Node, reason: str) -> None:
        self.goal = node
        self.status = SearchStatus.GOAL_FOUND
        self.termination_reason = reason
        self.tracer.on_goal(node)
        self._on_terminal()

    def _on_terminal(self) -> None:
        if self.config.check_invariants:
            self.graph.check_invariants()


class AStarSearcher:
    """A* search with incremental cost revision."""

    def __init__(self, config: Optional[SearchConfig] = None,
                 tracer: Optional[SearchTracer] = None):
        """Initialize A* searcher.

        Args:
            config: Search configuration parameters
            tracer: Default trace sink for searches run by this searcher
        """
        self.config = config or SearchConfig()
        self.tracer = tracer
        self.statistics = SearchStatistics()

        logger.info(f"A* searcher initialized with goal_test={self.config.goal_test}, "
                    f"skip_predecessor={self.config.skip_predecessor}")

    def start(self, start: SearchState,
              tracer: Optional[SearchTracer] = None) -> SearchSession:
        """Create a session positioned at ``start`` without running it."""
        return SearchSession(start, self.config, tracer or self.tracer)

    def search(self, start: SearchState,
               tracer: Optional[SearchTracer] = None) -> SearchResult:
        """Search for a path from ``start`` to a goal state.

        Args:
            start: Start state of the problem
            tracer: Trace sink overriding the searcher's default

        Returns:
            SearchResult with the path and statistics. An exhausted search is
            a normal, unsuccessful result.
        """
        start_time = time.perf_counter()
        logger.info(f"Starting A* search from {start}")

        session = self.start(start, tracer)
        session.run()
        computation_time = time.perf_counter() - start_time

        self.statistics = session.statistics
        result = self._create_result(session, computation_time)

        if result.success:
            logger.info(f"Goal reached in {result.num_transitions} transitions "
                        f"({result.nodes_expanded} expanded, {result.nodes_generated} generated)")
        else:
            logger.info(f"Search exhausted after {result.nodes_expanded} expansions, no path to goal")
        return result

    def get_search_stats(self) -> Dict[str, Any]:
        """Statistics of the most recent search."""
        return {
            **self.statistics.to_dict(),
            'config': {
                'goal_test': self.config.goal_test,
                'skip_predecessor': self.config.skip_predecessor,
                'check_contracts': self.config.check_contracts
            }
        }

    def _create_result(self, session: SearchSession, computation_time: float) -> SearchResult:
        stats = session.statistics
        path: List[SearchState] = []
        cost = None
        if session.goal is not None:
            path = [node.state for node in session.goal_path()]
            cost = session.goal.g

        return SearchResult(
            success=session.status is SearchStatus.GOAL_FOUND,
            status=session.status,
            path=path,
            cost=cost,
            nodes_expanded=stats.nodes_expanded,
            nodes_generated=stats.nodes_generated,
            nodes_regenerated=stats.nodes_regenerated,
            nodes_revised=stats.nodes_revised,
            max_frontier_size=stats.max_frontier_size,
            computation_time=computation_time,
            termination_reason=session.termination_reason
        )


def create_astar_searcher(goal_test: str = 'generate',
                          skip_predecessor: bool = True,
                          check_contracts: bool = True,
                          check_invariants: bool = False,
                          tracer: Optional[SearchTracer] = None) -> AStarSearcher:
    """Factory function to create an A* searcher with custom configuration.

    Args:
        goal_test: 'generate' stops at the first generated goal, 'expand' at the first popped one
        skip_predecessor: Skip successors equal to the expanded node's parent state
        check_contracts: Validate states as they are registered
        check_invariants: Verify graph invariants at the end of each search
        tracer: Default trace sink

    Returns:
        Configured AStarSearcher instance
    """
    config = SearchConfig(
        goal_test=goal_test,
        skip_predecessor=skip_predecessor,
        check_contracts=check_contracts,
        check_invariants=check_invariants
    )

    return AStarSearcher(config, tracer)
