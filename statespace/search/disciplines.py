"""
Frontier Disciplines - Stack, queue and cost-guided pop strategies.

Import this module to register the built-in disciplines.
"""

from collections import deque
from typing import Any, Deque, List

from .factory import register_frontier
from .frontier import Frontier, State
from .order import SearchOrder


@register_frontier
class DepthFirstFrontier(Frontier):
    """Pops the most recently discovered state."""
    order = SearchOrder.DEPTH_FIRST
    description = "Depth-first - Newest state first"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._states: Deque[State] = deque()

    def _append(self, state: State) -> None:
        self._states.append(state)

    def _take(self) -> State:
        return self._states.pop()


@register_frontier
class BreadthFirstFrontier(Frontier):
    """Pops the earliest discovered state still waiting."""
    order = SearchOrder.BREADTH_FIRST
    description = "Breadth-first - Oldest state first (shortest trace)"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._states: Deque[State] = deque()

    def _append(self, state: State) -> None:
        self._states.append(state)

    def _take(self) -> State:
        return self._states.popleft()


@register_frontier
class CostGuidedFrontier(Frontier):
    """
    Greedy best-first discipline.

    On every pop each waiting state is evaluated as
    cost_fn(state, previous_cost), the first state with the minimal cost is
    removed and its cost becomes previous_cost for the next pop.

    previous_cost is the cost of the last popped state, not the cost of the
    path leading to each candidate. Rankings are therefore local: this is not
    Dijkstra or A*, and no optimality guarantee is given.
    """
    order = SearchOrder.COST_GUIDED
    description = "Cost-guided - Cheapest state first (greedy)"

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self._states: List[State] = []

    def _append(self, state: State) -> None:
        self._states.append(state)

    def _take(self) -> State:
        if not self._states:
            raise IndexError("pop from an empty frontier")

        best_index = 0
        best_cost = None
        for index, state in enumerate(self._states):
            cost = self.cost_fn(state, self.previous_cost)
            # strict comparison keeps the first minimal state
            if best_cost is None or cost < best_cost:
                best_index = index
                best_cost = cost

        self.previous_cost = best_cost
        return self._states.pop(best_index)
