"""
Search Package - Generic reachability search over implicit state spaces.

Given an initial state, a successor generator, an optional invariant and an
optional cost evaluator, StateSpace.check() explores the reachable states in
depth-first, breadth-first or cost-guided order and returns the trace from
the initial state to the first goal state it pops.

Public API:
    - StateSpace: Search driver
    - SearchOrder: Exploration order
    - SearchContext: Cancellation, timeout and state budget
    - SearchResult / SearchStatus / SearchMetrics: Outcome of a search
    - Transition, successors(), annotate_path(): Move descriptors
    - Frontier, create_frontier(), register_frontier(): Pop disciplines
    - SearchError / TraceError: Engine defects

Usage:
    from statespace.search import StateSpace, SearchOrder

    space = StateSpace(start, successors_fn, invariant=is_valid)
    result = space.check(lambda s: s == finish, SearchOrder.BREADTH_FIRST)

    if result.found:
        for state in result.path:
            print(state)
    else:
        print(result.summary())
"""

# Core data structures
from .order import SearchOrder
from .context import SearchContext
from .result import SearchResult, SearchStatus, SearchMetrics
from .errors import SearchError, TraceError
from .transition import Transition, successors, annotate_path

# Frontier framework
from .frontier import Frontier, zero_cost
from .factory import (
    create_frontier,
    register_frontier,
    get_supported_orders,
    get_frontier_info,
)

# Driver
from .space import StateSpace, accept_all

# Import disciplines to register them
from . import disciplines

__all__ = [
    # Data structures
    "SearchOrder",
    "SearchContext",
    "SearchResult",
    "SearchStatus",
    "SearchMetrics",
    "SearchError",
    "TraceError",
    "Transition",
    "successors",
    "annotate_path",
    # Frontier framework
    "Frontier",
    "zero_cost",
    "create_frontier",
    "register_frontier",
    "get_supported_orders",
    "get_frontier_info",
    # Driver
    "StateSpace",
    "accept_all",
]
