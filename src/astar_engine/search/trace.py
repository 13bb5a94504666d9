"""Trace sinks observing a search session.

Tracers decouple the search loop from recording and debugging concerns. They
are purely observational: nothing they return or do feeds back into the
algorithm.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Tuple

from astar_engine.core.data_models import Node

logger = logging.getLogger(__name__)


class SearchTracer(ABC):
    """Event hooks called by a search session."""

    @abstractmethod
    def on_frontier_snapshot(self, nodes: List[Node]) -> None:
        """Frontier contents, in pop order, before each expansion step."""
        pass

    @abstractmethod
    def on_expand(self, node: Node) -> None:
        """Node chosen for expansion."""
        pass

    @abstractmethod
    def on_generate(self, node: Node, is_new: bool, was_updated: bool) -> None:
        """Successor fetched or created while expanding."""
        pass

    @abstractmethod
    def on_goal(self, node: Node) -> None:
        pass

    @abstractmethod
    def on_exhausted(self) -> None:
        pass


class NullTracer(SearchTracer):
    """Tracer that ignores every event."""
    def on_frontier_snapshot(self, nodes: List[Node]) -> None: pass
    def on_expand(self, node: Node) -> None: pass
    def on_generate(self, node: Node, is_new: bool, was_updated: bool) -> None: pass
    def on_goal(self, node: Node) -> None: pass
    def on_exhausted(self) -> None: pass


class RecordingTracer(SearchTracer):
    """Keeps every event for later inspection.

    Nodes are live arena records, so the recorder also captures the g value
    each node had when the event fired.
    """

    def __init__(self):
        # (event name, payload) in arrival order
        self.events: List[Tuple[str, Any]] = []
        self.snapshots: List[List[Tuple[Any, Any]]] = []
        self.expanded: List[Any] = []
        self.generated: List[Tuple[Any, bool, bool, Any]] = []
        self.goal = None
        self.exhausted = False

    def on_frontier_snapshot(self, nodes: List[Node]) -> None:
        snapshot = [(node.state, node.f) for node in nodes]
        self.snapshots.append(snapshot)
        self.events.append(('frontier', snapshot))

    def on_expand(self, node: Node) -> None:
        self.expanded.append(node.state)
        self.events.append(('expand', node.state))

    def on_generate(self, node: Node, is_new: bool, was_updated: bool) -> None:
        record = (node.state, is_new, was_updated, node.g)
        self.generated.append(record)
        self.events.append(('generate', record))

    def on_goal(self, node: Node) -> None:
        self.goal = node.state
        self.events.append(('goal', node.state))

    def on_exhausted(self) -> None:
        self.exhausted = True
        self.events.append(('exhausted', None))

    def event_names(self) -> List[str]:
        return [name for name, _ in self.events]


class LoggingTracer(SearchTracer):
    """Writes each event to a logger."""

    def __init__(self, level: int = logging.INFO, log: logging.Logger = None):
        self.level = level
        self.log = log or logger

    def on_frontier_snapshot(self, nodes: List[Node]) -> None:
        entries = ", ".join(f"{node.state} h={node.h} g={node.g} f={node.f}" for node in nodes)
        self.log.log(self.level, f"Frontier nodes are: {entries}")

    def on_expand(self, node: Node) -> None:
        self.log.log(self.level, f"Expand: {node.state}")

    def on_generate(self, node: Node, is_new: bool, was_updated: bool) -> None:
        if is_new:
            outcome = "New node"
        elif was_updated:
            outcome = "Regenerated, updated f"
        else:
            outcome = "Regenerated, no update"
        self.log.log(self.level, f"Generated: {node.state} {outcome} g={node.g} h={node.h} f={node.f}")

    def on_goal(self, node: Node) -> None:
        self.log.log(self.level, f"Goal reached: {node.state} g={node.g}")

    def on_exhausted(self) -> None:
        self.log.log(self.level, "Frontier exhausted, no path to goal")
