"""
State Space Module - The reachability search driver.

StateSpace ties a successor generator, an invariant and a cost evaluator to
an initial state and answers check(goal, order) with a SearchResult.
"""

import logging
import time
from typing import Any, Callable, Dict, Iterable, List, Optional, Set

from .context import SearchContext
from .errors import TraceError
from .factory import create_frontier
from .frontier import CostFn, zero_cost
from .order import SearchOrder
from .result import SearchMetrics, SearchResult, SearchStatus

logger = logging.getLogger(__name__)

State = Any
SuccessorGenerator = Callable[[State], Iterable[State]]
Predicate = Callable[[State], bool]


def accept_all(state: State) -> bool:
    """Default invariant: every state is legal."""
    return True


class StateSpace:
    """
    Implicit graph of states reachable from an initial state.

    Contract for the caller-supplied pieces (not validated at runtime):
        - states are immutable and hashable, equality consistent with hash
        - successors(state) is pure and terminates, returning the states one
          move away (possibly none)
        - invariant(state) is a pure predicate over a single state
        - cost_fn(state, previous_cost) returns a value ordered with <

    Attributes:
        initial_state: State every search starts from
        successors: Successor generator
        invariant: Filter deciding whether a state may ever be entered
        cost_fn: Cost evaluator for cost-guided order
        initial_cost: Running cost at the start of every search
    """

    def __init__(self, initial_state: State, successors: SuccessorGenerator,
                 invariant: Optional[Predicate] = None,
                 cost_fn: Optional[CostFn] = None,
                 initial_cost: Any = 0):
        """
        Initialize the state space.

        Args:
            initial_state: State to start from
            successors: Function listing the states directly reachable from a state
            invariant: Legality predicate (default accepts every state)
            cost_fn: Cost evaluator (default constant zero)
            initial_cost: Cost assigned to the initial state
        """
        self.initial_state = initial_state
        self.successors = successors
        self.invariant = invariant if invariant is not None else accept_all
        self.cost_fn = cost_fn if cost_fn is not None else zero_cost
        self.initial_cost = initial_cost

    def check(self, goal: Predicate,
              order: "SearchOrder | str" = SearchOrder.BREADTH_FIRST,
              context: Optional[SearchContext] = None) -> SearchResult:
        """
        Search for a state satisfying the goal.

        Each call starts from scratch: fresh frontier, visited set and trace
        map, and the running cost re-seeded to initial_cost.

        Args:
            goal: Predicate identifying goal states
            order: Exploration order (SearchOrder or its name)
            context: Optional cancellation, timeout and state budget

        Returns:
            SearchResult with status FOUND and the path from the initial state
            to the goal, or NOT_FOUND/CANCELLED/LIMIT_REACHED with an empty path

        Raises:
            ValueError: If the order is not supported
            TraceError: If the trace map is inconsistent (engine defect)
        """
        order = SearchOrder.parse(order)
        frontier = create_frontier(order, self.cost_fn, self.initial_cost)

        start_time = time.perf_counter()
        metrics = SearchMetrics(search_order=order.value)
        passed: Set[State] = set()
        trace: Dict[State, State] = {}

        frontier.push(self.initial_state)
        metrics.peak_frontier = 1
        logger.info(f"[StateSpace] Starting {order.label} search")

        while frontier:
            if context is not None and context.is_cancelled():
                logger.info("[StateSpace] Search cancelled")
                return self._build_result(SearchStatus.CANCELLED, [], metrics, start_time)

            state = frontier.pop()
            if goal(state):
                path = self._trace_path(trace, state)
                return self._build_result(SearchStatus.FOUND, path, metrics, start_time)

            if context is not None and context.limit_reached(metrics.states_expanded):
                logger.info(f"[StateSpace] State limit reached after "
                            f"{metrics.states_expanded} expansions")
                return self._build_result(SearchStatus.LIMIT_REACHED, [], metrics, start_time)

            passed.add(state)
            metrics.states_expanded += 1

            for succ in self.successors(state):
                metrics.states_generated += 1
                if not self.invariant(succ):
                    metrics.rejected_by_invariant += 1
                    continue
                if succ in frontier or succ in passed:
                    metrics.duplicates_skipped += 1
                    continue
                trace[succ] = state
                frontier.push(succ)

            metrics.peak_frontier = max(metrics.peak_frontier, len(frontier))

            if context is not None:
                context.report_progress(
                    metrics.states_expanded,
                    f"{metrics.states_expanded} states expanded, {len(frontier)} waiting"
                )

        return self._build_result(SearchStatus.NOT_FOUND, [], metrics, start_time)

    def _trace_path(self, trace: Dict[State, State], goal_state: State) -> List[State]:
        """
        Rebuild the path to a goal state from the trace map.

        Args:
            trace: Map from each discovered state to the state that discovered it
            goal_state: State satisfying the goal

        Returns:
            States from the initial state to goal_state inclusive

        Raises:
            TraceError: If a predecessor is missing or the chain loops
        """
        path = [goal_state]
        state = goal_state
        while state != self.initial_state:
            if state not in trace:
                raise TraceError(f"No predecessor recorded for state {state!r}")
            state = trace[state]
            path.append(state)
            if len(path) > len(trace) + 1:
                raise TraceError("Trace map contains a cycle")

        path.reverse()
        return path

    def _build_result(self, status: SearchStatus, path: List[State],
                      metrics: SearchMetrics, start_time: float) -> SearchResult:
        """Build SearchResult object from computation results."""
        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        result = SearchResult(status=status, path=path, metrics=metrics)

        logger.info(
            f"[StateSpace] Search finished: {status.value}, "
            f"{metrics.states_expanded} states expanded, "
            f"{metrics.computation_time_ms:.1f}ms"
        )
        return result
