"""
Search Result Module - Outcome of a reachability check and its metrics.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional


class SearchStatus(Enum):
    """
    How a search ended.

    States:
        FOUND: A goal state was reached, path is populated
        NOT_FOUND: Every legal reachable state was expanded without a goal
        CANCELLED: Stopped by the cancel flag or the timeout
        LIMIT_REACHED: Stopped after expanding max_states states
    """
    FOUND = "found"
    NOT_FOUND = "not_found"
    CANCELLED = "cancelled"
    LIMIT_REACHED = "limit_reached"


@dataclass
class SearchMetrics:
    """
    Performance metrics for one check() call.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_expanded: States popped and expanded (size of the visited set)
        states_generated: Successor states produced by the generator
        rejected_by_invariant: Successors discarded by the invariant
        duplicates_skipped: Successors already in the frontier or visited set
        peak_frontier: Largest frontier size observed
        search_order: Value of the SearchOrder used
    """
    computation_time_ms: float = 0.0
    states_expanded: int = 0
    states_generated: int = 0
    rejected_by_invariant: int = 0
    duplicates_skipped: int = 0
    peak_frontier: int = 0
    search_order: str = ""


@dataclass
class SearchResult:
    """
    Result of a reachability check.

    Attributes:
        status: How the search ended
        path: States from the initial state to the goal (empty unless FOUND)
        metrics: Performance statistics
    """
    status: SearchStatus
    path: List[Any] = field(default_factory=list)
    metrics: SearchMetrics = field(default_factory=SearchMetrics)

    @property
    def found(self) -> bool:
        """True if a goal state was reached."""
        return self.status is SearchStatus.FOUND

    @property
    def goal(self) -> Optional[Any]:
        """The goal state reached, or None."""
        return self.path[-1] if self.path else None

    @property
    def length(self) -> int:
        """Number of states in the path (transitions + 1)."""
        return len(self.path)

    def __bool__(self) -> bool:
        return self.found

    def summary(self) -> str:
        """
        One-line description of the outcome.

        Returns:
            Text suitable for console output or a status label
        """
        m = self.metrics
        stats = (f"{m.states_expanded} states expanded in "
                 f"{m.computation_time_ms:.1f}ms ({m.search_order})")
        if self.status is SearchStatus.FOUND:
            return f"Solution: a trace of {self.length} states, {stats}"
        if self.status is SearchStatus.NOT_FOUND:
            return f"No solution: goal is unreachable, {stats}"
        if self.status is SearchStatus.CANCELLED:
            return f"Search cancelled after {stats}"
        return f"Search stopped at state limit after {stats}"
