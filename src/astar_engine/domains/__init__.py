"""Example domains implementing the state contract."""

from .river_crossing import RiverCrossingState, UninformedRiverCrossingState, start_state
from .explicit_graph import StateGraph, GraphState

DOMAINS = {
    'river-crossing': start_state,
}

__all__ = [
    'RiverCrossingState',
    'UninformedRiverCrossingState',
    'start_state',
    'StateGraph',
    'GraphState',
    'DOMAINS'
]
