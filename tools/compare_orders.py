"""
Benchmark script comparing search orders on the bundled puzzles.
Prints trace length and search metrics for every puzzle/order pair.

Usage:
    python tools/compare_orders.py
    python tools/compare_orders.py --frogs 4 --max-states 200000
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from statespace.puzzles import available_puzzles, create_puzzle
from statespace.search import SearchContext, SearchOrder


def compare(puzzle_name: str, frogs: int, max_states: int):
    """Solve one puzzle with every order and print a table row per order."""
    puzzle = create_puzzle(puzzle_name, frogs=frogs)

    print(f"\n{'='*72}")
    print(f"{puzzle.description}")
    print(f"{'='*72}")
    print(f"{'order':<15}{'status':<15}{'length':>8}{'expanded':>10}"
          f"{'generated':>11}{'rejected':>10}{'time ms':>11}")

    for order in SearchOrder:
        result = puzzle.solve(order, context=SearchContext(max_states=max_states))
        m = result.metrics
        print(f"{order.label:<15}{result.status.value:<15}{result.length:>8}"
              f"{m.states_expanded:>10}{m.states_generated:>11}"
              f"{m.rejected_by_invariant:>10}{m.computation_time_ms:>11.1f}")


def main():
    parser = argparse.ArgumentParser(description="Compare search orders")
    parser.add_argument("puzzles", nargs="*", default=available_puzzles(),
                        help="Puzzles to run (default: all)")
    parser.add_argument("--frogs", type=int, default=3,
                        help="Frogs of each colour for the frogs puzzle")
    parser.add_argument("--max-states", type=int, default=100000,
                        help="Expansion budget per search")
    args = parser.parse_args()

    for name in args.puzzles:
        compare(name, args.frogs, args.max_states)


if __name__ == "__main__":
    main()
