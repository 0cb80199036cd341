"""
Frontier Module - Abstract waiting set of discovered, unexpanded states.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Set

from .order import SearchOrder

State = Any
CostFn = Callable[[State, Any], Any]


def zero_cost(state: State, previous_cost: Any) -> int:
    """Default cost evaluator: every state costs nothing."""
    return 0


class Frontier(ABC):
    """
    Abstract base class for frontier disciplines.

    Every discipline inserts by appending; only pop differs. Membership is
    answered from a hash index, so a state type must be hashable with an
    equality consistent with its hash.

    Subclasses must implement _append() and _take() and define the
    order and description class attributes.

    Attributes:
        order: SearchOrder this discipline implements
        description: Human-readable description for UI
        cost_fn: Cost evaluator (only cost-guided disciplines use it)
        previous_cost: Cost of the most recently popped state
    """
    order: SearchOrder
    description: str = "Base frontier"

    def __init__(self, cost_fn: CostFn = zero_cost, initial_cost: Any = 0):
        """
        Initialize an empty frontier.

        Args:
            cost_fn: Evaluator called as cost_fn(state, previous_cost)
            initial_cost: Value of previous_cost before the first pop
        """
        self.cost_fn = cost_fn
        self.previous_cost = initial_cost
        self._members: Set[State] = set()

    def push(self, state: State) -> None:
        """
        Add a newly discovered state.

        Callers must check membership first; a state is never held twice.

        Args:
            state: State to add
        """
        self._members.add(state)
        self._append(state)

    def pop(self) -> State:
        """
        Remove and return the next state to expand.

        Returns:
            State chosen by this discipline

        Raises:
            IndexError: If the frontier is empty
        """
        state = self._take()
        self._members.discard(state)
        return state

    @abstractmethod
    def _append(self, state: State) -> None:
        """Store a state at the back of the insertion order."""
        pass

    @abstractmethod
    def _take(self) -> State:
        """Remove and return the state selected by this discipline."""
        pass

    def __contains__(self, state: State) -> bool:
        return state in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __bool__(self) -> bool:
        return bool(self._members)
