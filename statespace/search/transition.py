"""
Transition Module - Data-only moves and successor generator adapters.

A puzzle describes its moves as small frozen dataclasses deriving from
Transition. The engine never sees them: successors() turns a function that
enumerates transitions into a function that enumerates resulting states.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, List

from .errors import SearchError

State = Any
TransitionsFn = Callable[[State], Iterable["Transition"]]
SuccessorFn = Callable[[State], List[State]]


class Transition(ABC):
    """
    Abstract base class for a single atomic move.

    Subclasses are expected to be frozen dataclasses so transitions can be
    compared, hashed and logged.
    """

    @abstractmethod
    def apply(self, state: State) -> State:
        """
        Compute the state reached by taking this move.

        Must not modify the given state.

        Args:
            state: State the move is applied to

        Returns:
            New state
        """
        pass

    @property
    def label(self) -> str:
        """Short description used when annotating a solution."""
        return repr(self)


def successors(transitions: TransitionsFn) -> SuccessorFn:
    """
    Build a successor generator from a transition enumerator.

    Args:
        transitions: Function listing the transitions applicable to a state

    Returns:
        Function returning the successor states, in enumeration order
    """
    def generate(state: State) -> List[State]:
        return [t.apply(state) for t in transitions(state)]

    return generate


def annotate_path(path: List[State], transitions: TransitionsFn) -> List["Transition"]:
    """
    Recover the move taken between each pair of consecutive path states.

    When several transitions lead to the same successor the first one
    enumerated is reported.

    Args:
        path: States returned by a successful search
        transitions: Transition enumerator the search was built from

    Returns:
        List of len(path) - 1 transitions

    Raises:
        SearchError: If two consecutive states are not linked by any move
    """
    moves: List[Transition] = []
    for index, (current, following) in enumerate(zip(path, path[1:])):
        for move in transitions(current):
            if move.apply(current) == following:
                moves.append(move)
                break
        else:
            raise SearchError(f"No transition links path states {index} and {index + 1}")
    return moves
