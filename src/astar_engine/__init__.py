"""A* search engine with incremental cost revision.

Domains plug in by implementing :class:`~astar_engine.core.state.SearchState`;
:class:`~astar_engine.search.astar.AStarSearcher` does the rest.
"""

from astar_engine.core.state import SearchState, StateContractError
from astar_engine.core.data_models import Node, SearchResult, SearchStatus
from astar_engine.search.astar import AStarSearcher, SearchConfig, SearchSession, create_astar_searcher

__version__ = "0.1.0"

__all__ = [
    'SearchState',
    'StateContractError',
    'Node',
    'SearchResult',
    'SearchStatus',
    'AStarSearcher',
    'SearchConfig',
    'SearchSession',
    'create_astar_searcher'
]
