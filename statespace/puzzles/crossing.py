"""
Goat, Cabbage and Wolf Puzzle

Three actors cross a river one at a time. The goat may not be left with
the wolf, nor with the cabbage, while the third actor is travelling.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from statespace.search import Transition

from .base import Puzzle


class Position(Enum):
    """Where an actor is; the value is its rendering."""
    SHORE1 = "1"
    TRAVEL = "~"
    SHORE2 = "2"


ACTORS = ("cabbage", "goat", "wolf")
CABBAGE, GOAT, WOLF = range(len(ACTORS))


@dataclass(frozen=True)
class CrossingState:
    """
    Positions of the cabbage, goat and wolf (in that order).

    Attributes:
        positions: One Position per actor
    """
    positions: Tuple[Position, ...] = (Position.SHORE1,) * len(ACTORS)

    def moved(self, actor: int, position: Position) -> "CrossingState":
        """Return a copy with one actor at a new position."""
        positions = list(self.positions)
        positions[actor] = position
        return CrossingState(positions=tuple(positions))


@dataclass(frozen=True)
class MoveActor(Transition):
    """
    One actor changes position.

    Attributes:
        actor: Actor index (CABBAGE, GOAT or WOLF)
        target: Position after the move
    """
    actor: int
    target: Position

    def apply(self, state: CrossingState) -> CrossingState:
        return state.moved(self.actor, self.target)

    @property
    def label(self) -> str:
        return f"{ACTORS[self.actor]} -> {self.target.name.lower()}"


class CrossingPuzzle(Puzzle):
    """
    Goat, cabbage and wolf river crossing.

    Each actor goes from a shore to the river and from the river to either
    shore. Only one actor may travel at a time.
    """
    name = "crossing"
    description = "Goat, cabbage and wolf river crossing"

    def initial_state(self) -> CrossingState:
        return CrossingState()

    def transitions(self, state: CrossingState) -> List[Transition]:
        moves: List[Transition] = []
        for actor, position in enumerate(state.positions):
            if position is Position.TRAVEL:
                moves.append(MoveActor(actor, Position.SHORE1))
                moves.append(MoveActor(actor, Position.SHORE2))
            else:
                moves.append(MoveActor(actor, Position.TRAVEL))
        return moves

    def violation(self, state: CrossingState) -> Optional[str]:
        p = state.positions
        if sum(1 for position in p if position is Position.TRAVEL) > 1:
            return "more than one passenger"
        if p[GOAT] == p[WOLF] and p[CABBAGE] is Position.TRAVEL:
            return "goat left alone with wolf"
        if p[GOAT] == p[CABBAGE] and p[WOLF] is Position.TRAVEL:
            return "goat left alone with cabbage"
        return None

    def is_goal(self, state: CrossingState) -> bool:
        return all(position is Position.SHORE2 for position in state.positions)

    def render(self, state: CrossingState) -> str:
        return "".join(position.value for position in state.positions)

    def header(self) -> str:
        return "#  CGW"
