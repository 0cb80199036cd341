"""
Search Order Module - Exploration disciplines supported by the engine.
"""

from enum import Enum
from typing import Dict


class SearchOrder(Enum):
    """
    Order in which the frontier is popped.

    Values:
        DEPTH_FIRST: Most recently discovered state first (stack)
        BREADTH_FIRST: Earliest discovered state first (queue)
        COST_GUIDED: Cheapest state under the cost evaluator first (greedy)
    """
    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"
    COST_GUIDED = "cost_guided"

    @property
    def label(self) -> str:
        """Human-readable name for UIs and logs."""
        return self.value.replace("_", "-")

    @classmethod
    def parse(cls, text: "str | SearchOrder") -> "SearchOrder":
        """
        Convert user input into a SearchOrder.

        Accepts enum members, enum names or values in any case, dashes in
        place of underscores and the short aliases dfs, bfs and cost.

        Args:
            text: Order name or SearchOrder member

        Returns:
            Matching SearchOrder

        Raises:
            ValueError: If the text names no supported order
        """
        if isinstance(text, cls):
            return text

        key = str(text).strip().lower().replace("-", "_")
        if key in _ALIASES:
            return _ALIASES[key]
        for order in cls:
            if key == order.value:
                return order

        available = ", ".join(o.value for o in cls)
        raise ValueError(f"Unknown search order: {text}. Available: {available}")


_ALIASES: Dict[str, SearchOrder] = {
    "dfs": SearchOrder.DEPTH_FIRST,
    "depth": SearchOrder.DEPTH_FIRST,
    "bfs": SearchOrder.BREADTH_FIRST,
    "breadth": SearchOrder.BREADTH_FIRST,
    "cost": SearchOrder.COST_GUIDED,
    "greedy": SearchOrder.COST_GUIDED,
}
