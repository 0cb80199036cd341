"""
Puzzle Base Interface

Abstract base class defining the puzzle model contract. A puzzle supplies
the state shape, the moves and the rules; solving is delegated to the
search engine.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from statespace.search import (
    SearchContext,
    SearchOrder,
    SearchResult,
    StateSpace,
    Transition,
    annotate_path,
    successors,
)
from statespace.search.frontier import CostFn

logger = logging.getLogger(__name__)


class Puzzle(ABC):
    """
    Abstract base class for puzzle models.

    All puzzles must inherit from this class and implement initial_state(),
    transitions(), is_goal() and render().

    Attributes:
        name: Short identifier for the puzzle
        description: Human-readable description for UI
        default_order: Search order used when none is given
        default_cost: Name of the cost function used when none is given
        initial_cost: Cost of the initial state for cost-guided search
    """
    name: str = "base"
    description: str = "Base puzzle"
    default_order: SearchOrder = SearchOrder.BREADTH_FIRST
    default_cost: Optional[str] = None
    initial_cost: Any = 0

    @abstractmethod
    def initial_state(self) -> Any:
        """
        Build the starting state.

        Returns:
            Immutable, hashable state
        """
        pass

    @abstractmethod
    def transitions(self, state: Any) -> List[Transition]:
        """
        List every move applicable to a state without applying any.

        Args:
            state: Current state

        Returns:
            Transitions in a fixed enumeration order
        """
        pass

    @abstractmethod
    def is_goal(self, state: Any) -> bool:
        """
        Check whether a state solves the puzzle.

        Args:
            state: State to test

        Returns:
            True for goal states
        """
        pass

    @abstractmethod
    def render(self, state: Any) -> str:
        """
        Format a state for console output.

        Args:
            state: State to format

        Returns:
            Single-line text
        """
        pass

    def violation(self, state: Any) -> Optional[str]:
        """
        Explain why a state breaks the puzzle rules.

        Default implementation accepts every state.

        Args:
            state: State to check

        Returns:
            Short reason, or None if the state is legal
        """
        return None

    def is_valid(self, state: Any) -> bool:
        """
        Invariant handed to the search engine.

        Rejections are narrated at DEBUG level.

        Args:
            state: Candidate state

        Returns:
            True if the state may be entered
        """
        reason = self.violation(state)
        if reason is None:
            return True
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"[{self.name}] {self.render(state)} rejected: {reason}")
        return False

    def cost_functions(self) -> Dict[str, CostFn]:
        """
        Named cost evaluators for cost-guided search.

        Returns:
            Mapping from name to evaluator (empty if the puzzle has none)
        """
        return {}

    def header(self) -> str:
        """Column header printed above a solution (empty for none)."""
        return ""

    def is_shown(self, state: Any) -> bool:
        """Whether a state is listed when a solution is formatted."""
        return True

    def configure(self, **kwargs) -> None:
        """
        Configure puzzle parameters.

        Override in subclasses to support runtime configuration.
        Default implementation ignores every option.

        Args:
            **kwargs: Puzzle-specific configuration options
        """
        if kwargs:
            logger.debug(f"[{self.name}] Ignoring options: {sorted(kwargs)}")

    def state_space(self, cost: Optional[str] = None) -> StateSpace:
        """
        Build the state space of this puzzle.

        Args:
            cost: Name of a cost function (default: default_cost)

        Returns:
            StateSpace ready for check()

        Raises:
            ValueError: If the cost function name is unknown
        """
        cost_name = cost if cost is not None else self.default_cost
        cost_fn = None
        if cost_name is not None:
            functions = self.cost_functions()
            if cost_name not in functions:
                available = ", ".join(functions.keys()) or "none"
                raise ValueError(f"Unknown cost function: {cost_name}. Available: {available}")
            cost_fn = functions[cost_name]

        return StateSpace(
            self.initial_state(),
            successors(self.transitions),
            invariant=self.is_valid,
            cost_fn=cost_fn,
            initial_cost=self.initial_cost,
        )

    def solve(self, order: "SearchOrder | str | None" = None,
              cost: Optional[str] = None,
              context: Optional[SearchContext] = None) -> SearchResult:
        """
        Search for a solution.

        Args:
            order: Search order (default: default_order)
            cost: Cost function name (default: default_cost)
            context: Optional cancellation, timeout and state budget

        Returns:
            SearchResult from the engine
        """
        order = SearchOrder.parse(order) if order is not None else self.default_order
        logger.info(f"[{self.name}] Solving with {order.label} search, cost={cost or self.default_cost}")
        return self.state_space(cost).check(self.is_goal, order, context)

    def format_solution(self, result: SearchResult, show_moves: bool = False) -> List[str]:
        """
        Render a search result as numbered console lines.

        Args:
            result: Result of solve()
            show_moves: Append the move leading to each state

        Returns:
            Lines to print; only the summary when no solution was found
        """
        if not result.found:
            return [result.summary()]

        lines = []
        header = self.header()
        if header:
            lines.append(header)

        moves = annotate_path(result.path, self.transitions) if show_moves else []
        for index, state in enumerate(result.path):
            if not self.is_shown(state):
                continue
            line = f"{index}: {self.render(state)}"
            if show_moves and index > 0:
                line += f"  ({moves[index - 1].label})"
            lines.append(line)

        lines.append(result.summary())
        return lines
