"""States over an explicitly enumerated weighted graph.

Useful for route-finding style problems and for exercising the engine on
graphs with non-unit edge costs, dead ends and cycles.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from astar_engine.core.state import Cost, SearchState

Edge = Tuple[str, str, Cost]


class StateGraph:
    """Adjacency table with per-vertex heuristic estimates and goal vertices."""

    def __init__(self,
                 adjacency: Mapping[str, Mapping[str, Cost]],
                 goals: Iterable[str],
                 heuristics: Optional[Mapping[str, Cost]] = None):
        self.adjacency: Dict[str, Dict[str, Cost]] = {
            vertex: dict(neighbors) for vertex, neighbors in adjacency.items()
        }
        self.goals = frozenset(goals)
        self.heuristics: Dict[str, Cost] = dict(heuristics or {})

    @classmethod
    def from_edges(cls, edges: Iterable[Edge],
                   goals: Iterable[str],
                   heuristics: Optional[Mapping[str, Cost]] = None,
                   directed: bool = True) -> 'StateGraph':
        """Build a graph from ``(source, target, cost)`` triples."""
        adjacency: Dict[str, Dict[str, Cost]] = {}
        for source, target, cost in edges:
            adjacency.setdefault(source, {})[target] = cost
            if not directed:
                adjacency.setdefault(target, {})[source] = cost
        return cls(adjacency, goals, heuristics)

    def state(self, name: str) -> 'GraphState':
        return GraphState(name, self)

    def neighbors(self, name: str) -> Dict[str, Cost]:
        return self.adjacency.get(name, {})


@dataclass(frozen=True)
class GraphState(SearchState):
    """A vertex of a :class:`StateGraph`; identity is the vertex name."""

    name: str
    graph: StateGraph = field(compare=False, repr=False)

    def successors(self) -> List['GraphState']:
        return [GraphState(name, self.graph) for name in self.graph.neighbors(self.name)]

    def is_goal(self) -> bool:
        return self.name in self.graph.goals

    def heuristic(self) -> Cost:
        return self.graph.heuristics.get(self.name, 0)

    def step_cost(self, successor: 'GraphState') -> Cost:
        return self.graph.neighbors(self.name)[successor.name]

    def __str__(self) -> str:
        return self.name
