"""Core types shared by the search engine and its domains."""

from .state import SearchState, StateContractError, check_cost_value, check_state
from .data_models import Node, SearchStatus, SearchStatistics, SearchResult

__all__ = [
    'SearchState',
    'StateContractError',
    'check_cost_value',
    'check_state',
    'Node',
    'SearchStatus',
    'SearchStatistics',
    'SearchResult'
]
