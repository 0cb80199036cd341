"""
Frontier Factory Module - Registry and factory for frontier disciplines.
"""

from typing import Any, Dict, List, Type

from .frontier import CostFn, Frontier, zero_cost
from .order import SearchOrder


# Global registry of frontier disciplines
_FRONTIERS: Dict[SearchOrder, Type[Frontier]] = {}


def register_frontier(cls: Type[Frontier]) -> Type[Frontier]:
    """
    Decorator to register a frontier class for its search order.

    Usage:
        @register_frontier
        class MyFrontier(Frontier):
            order = SearchOrder.DEPTH_FIRST
            ...

    Args:
        cls: Frontier class to register

    Returns:
        The same class (for decorator chaining)
    """
    _FRONTIERS[cls.order] = cls
    return cls


def create_frontier(order: "SearchOrder | str", cost_fn: CostFn = zero_cost,
                    initial_cost: Any = 0) -> Frontier:
    """
    Create an empty frontier for a search order.

    Args:
        order: SearchOrder member or name (see SearchOrder.parse)
        cost_fn: Cost evaluator for cost-guided order
        initial_cost: Running cost before the first pop

    Returns:
        Frontier instance

    Raises:
        ValueError: If no discipline is registered for the order
    """
    order = SearchOrder.parse(order)
    if order not in _FRONTIERS:
        available = ", ".join(o.value for o in _FRONTIERS)
        raise ValueError(f"Unsupported search order: {order.value}. Available: {available}")
    return _FRONTIERS[order](cost_fn=cost_fn, initial_cost=initial_cost)


def get_supported_orders() -> List[SearchOrder]:
    """
    Get list of search orders with a registered discipline.

    Returns:
        List of SearchOrder members
    """
    return list(_FRONTIERS.keys())


def get_frontier_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered disciplines.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": order.value, "description": cls.description}
        for order, cls in _FRONTIERS.items()
    ]
