"""State capability contract for the A* engine.

Any domain plugged into the engine provides states implementing
:class:`SearchState`. States are immutable values: equality and hashing are
used to key the generated-set registry, so two states that compare equal must
hash equally and describe the same situation.
"""

import math
import numbers
from abc import ABC, abstractmethod
from typing import Any, Iterable, Union

Cost = Union[int, float]


class StateContractError(ValueError):
    """Raised when a state implementation violates the engine's contract."""
    pass


class SearchState(ABC):
    """Abstract state of a search problem.

    Subclasses must be immutable and implement value equality with a
    consistent ``__hash__`` (frozen dataclasses do both).
    """

    @abstractmethod
    def successors(self) -> Iterable['SearchState']:
        """Return the states directly reachable by one legal transition.

        The sequence must be finite and freshly produced on every call.
        """
        pass

    @abstractmethod
    def is_goal(self) -> bool:
        """Whether this state satisfies the goal condition."""
        pass

    @abstractmethod
    def heuristic(self) -> Cost:
        """Non-negative estimate of the remaining cost to any goal.

        The engine does not verify admissibility; an estimate that
        overestimates may produce a suboptimal path.
        """
        pass

    def step_cost(self, successor: 'SearchState') -> Cost:
        """Cost of the transition from this state to ``successor``."""
        return 1


def check_cost_value(value: Any, what: str, state: Any) -> Cost:
    """Validate a heuristic or step-cost value.

    Returns:
        The value unchanged when it is a non-negative real number

    Raises:
        StateContractError: If the value is not a real number, is NaN or is negative
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise StateContractError(
            f"{what} of {state!r} must be a real number, got {type(value).__name__}"
        )
    if isinstance(value, float) and math.isnan(value):
        raise StateContractError(f"{what} of {state!r} is NaN")
    if value < 0:
        raise StateContractError(f"{what} of {state!r} must be non-negative, got {value}")
    return value


def check_state(state: Any) -> SearchState:
    """Fail fast on objects that cannot serve as registry keys."""
    if not isinstance(state, SearchState):
        raise StateContractError(
            f"Expected a SearchState, got {type(state).__name__}: {state!r}"
        )
    try:
        hash(state)
    except TypeError as e:
        raise StateContractError(f"State {state!r} is not hashable: {e}")
    if not state == state:
        raise StateContractError(f"State {state!r} is not equal to itself")
    return state
