"""
Puzzles Package - Puzzle models solved with the reachability engine.

Usage:
    from statespace.puzzles import create_puzzle

    # Create a puzzle model
    puzzle = create_puzzle("frogs", frogs=2)

    # Solve it (default order of the puzzle unless given)
    result = puzzle.solve("dfs")

    # Print the trace
    for line in puzzle.format_solution(result):
        print(line)
"""

# Public API - Base class for custom puzzles
from .base import Puzzle

# Public API - Factory functions
from .factory import (
    create_puzzle,
    register_puzzle,
    available_puzzles,
    get_puzzle_info,
)

__all__ = [
    # Base class
    "Puzzle",
    # Factory
    "create_puzzle",
    "register_puzzle",
    "available_puzzles",
    "get_puzzle_info",
]
