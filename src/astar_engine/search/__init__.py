"""Search engine for the A* solver.

This module implements A* over implicitly defined state graphs, with
incremental revision of already-generated nodes when cheaper paths appear.
"""

from .graph import SearchGraph
from .frontier import Frontier
from .revision import revise_cost
from .trace import SearchTracer, NullTracer, RecordingTracer, LoggingTracer
from .astar import AStarSearcher, SearchSession, SearchConfig, create_astar_searcher

__all__ = [
    'SearchGraph',
    'Frontier',
    'revise_cost',
    'SearchTracer',
    'NullTracer',
    'RecordingTracer',
    'LoggingTracer',
    'AStarSearcher',
    'SearchSession',
    'SearchConfig',
    'create_astar_searcher'
]
