"""Farmer, wolf, duck and corn river-crossing puzzle.

Everyone starts on the right bank; the goal is to get all four to the left
bank. The farmer rows and can carry at most one passenger. The wolf may never
be left alone with the duck, nor the duck alone with the corn.
"""

from dataclasses import dataclass, replace
from typing import List

from astar_engine.core.state import SearchState


@dataclass(frozen=True, order=True)
class RiverCrossingState(SearchState):
    """Bank of each actor; True means the left (goal) bank."""

    farmer: bool = False
    wolf: bool = False
    duck: bool = False
    corn: bool = False

    # Legality of each crossing, checked on the state before the move

    def can_move_farmer_wolf(self) -> bool:
        return self.farmer == self.wolf and self.duck != self.corn

    def can_move_farmer_duck(self) -> bool:
        return self.farmer == self.duck

    def can_move_farmer_corn(self) -> bool:
        return self.farmer == self.corn and self.wolf != self.duck

    def can_move_farmer_alone(self) -> bool:
        return self.duck != self.corn and self.wolf != self.duck

    def successors(self) -> List['RiverCrossingState']:
        moves = []
        if self.can_move_farmer_wolf():
            moves.append(replace(self, farmer=not self.farmer, wolf=not self.wolf))
        if self.can_move_farmer_duck():
            moves.append(replace(self, farmer=not self.farmer, duck=not self.duck))
        if self.can_move_farmer_corn():
            moves.append(replace(self, farmer=not self.farmer, corn=not self.corn))
        if self.can_move_farmer_alone():
            moves.append(replace(self, farmer=not self.farmer))
        return moves

    def is_goal(self) -> bool:
        return self.farmer and self.wolf and self.duck and self.corn

    def heuristic(self) -> int:
        # Passengers still on the right bank; the farmer is not counted
        return (not self.wolf) + (not self.duck) + (not self.corn)

    def __str__(self) -> str:
        actors = (('F', self.farmer), ('W', self.wolf), ('D', self.duck), ('C', self.corn))
        left = "".join(name for name, on_left in actors if on_left)
        right = "".join(name for name, on_left in actors if not on_left)
        return f"[{left}||{right}]"


@dataclass(frozen=True, order=True)
class UninformedRiverCrossingState(RiverCrossingState):
    """Same puzzle with h = 0 everywhere, turning A* into uniform-cost search."""

    def heuristic(self) -> int:
        return 0


def start_state(zero_heuristic: bool = False) -> RiverCrossingState:
    """All four actors on the right bank."""
    if zero_heuristic:
        return UninformedRiverCrossingState()
    return RiverCrossingState()
