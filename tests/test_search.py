"""
Test script for search engine validation

Uses small hand-built state spaces to test:
1. Breadth-first, depth-first and cost-guided search orders
2. Invariant filtering and duplicate suppression
3. Cost-guided pop rule (first minimum, running previous cost)
4. SearchContext cancellation, timeout and state budget
5. Path reconstruction and move annotation

Usage:
    python test_search.py
"""

import sys
from dataclasses import dataclass
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from statespace.search import (
    SearchContext,
    SearchError,
    SearchOrder,
    SearchStatus,
    StateSpace,
    TraceError,
    Transition,
    annotate_path,
    create_frontier,
    get_supported_orders,
    successors,
)


LEFT, TRANSIT, RIGHT = "left", "transit", "right"


def two_actor_successors(state):
    """Each actor may step into transit, and from transit onto the right shore."""
    result = []
    for actor, position in enumerate(state):
        moved = list(state)
        if position == LEFT:
            moved[actor] = TRANSIT
        elif position == TRANSIT:
            moved[actor] = RIGHT
        else:
            continue
        result.append(tuple(moved))
    return result


def at_most_one_in_transit(state):
    return sum(1 for position in state if position == TRANSIT) <= 1


def counter_successors(limit):
    """Integers 0..limit, each leading to n + 1 and n + 2."""
    def generate(n):
        return [m for m in (n + 1, n + 2) if m <= limit]
    return generate


@dataclass(frozen=True)
class Step(Transition):
    """Add a constant to an integer state."""
    amount: int

    def apply(self, state):
        return state + self.amount


def test_breadth_first_two_actors():
    """Test the two-actor crossing under breadth-first order."""
    print("\n" + "="*60)
    print("TEST: Breadth-First Two Actors")
    print("="*60)

    space = StateSpace((LEFT, LEFT), two_actor_successors, invariant=at_most_one_in_transit)
    result = space.check(lambda s: s == (RIGHT, RIGHT), SearchOrder.BREADTH_FIRST)

    for state in result.path:
        print(f"  {state}")
    print(f"  {result.summary()}")

    assert result.status is SearchStatus.FOUND
    assert result.path == [
        (LEFT, LEFT),
        (TRANSIT, LEFT),
        (RIGHT, LEFT),
        (RIGHT, TRANSIT),
        (RIGHT, RIGHT),
    ]
    assert result.length == 5
    assert result.goal == (RIGHT, RIGHT)
    # (transit, transit) is generated twice and rejected both times
    assert result.metrics.rejected_by_invariant == 2
    assert all(at_most_one_in_transit(state) for state in result.path)

    print("  [PASS] Breadth-first two actors")


def test_goal_is_initial_state():
    """Test that a satisfied initial state never expands anything."""
    print("\n" + "="*60)
    print("TEST: Goal Is Initial State")
    print("="*60)

    def exploding_successors(state):
        raise AssertionError("successor generator must not be called")

    for order in SearchOrder:
        space = StateSpace("start", exploding_successors)
        result = space.check(lambda s: s == "start", order)
        print(f"  {order.label}: {result.path}")
        assert result.found
        assert result.path == ["start"]
        assert result.metrics.states_expanded == 0

    print("  [PASS] Goal is initial state")


def test_unreachable_goal():
    """Test that exhausting the space is an ordinary result."""
    print("\n" + "="*60)
    print("TEST: Unreachable Goal")
    print("="*60)

    for order in SearchOrder:
        space = StateSpace(0, counter_successors(10))
        result = space.check(lambda n: n == 99, order)
        print(f"  {order.label}: {result.summary()}")
        assert result.status is SearchStatus.NOT_FOUND
        assert not result
        assert result.path == []
        assert result.goal is None
        # every integer 0..10 is expanded exactly once
        assert result.metrics.states_expanded == 11

    print("  [PASS] Unreachable goal")


def test_no_state_expanded_twice():
    """Test that duplicates are suppressed across frontier and visited set."""
    print("\n" + "="*60)
    print("TEST: No Duplicate Expansion")
    print("="*60)

    for order in SearchOrder:
        calls = []
        generate = counter_successors(30)

        def counting(n):
            calls.append(n)
            return generate(n)

        result = StateSpace(0, counting).check(lambda n: n == 30, order)
        print(f"  {order.label}: {len(calls)} expansions, "
              f"{result.metrics.duplicates_skipped} duplicates skipped")
        assert result.found
        assert len(calls) == len(set(calls))

    print("  [PASS] No duplicate expansion")


def test_depth_first_order():
    """Test that depth-first follows the last generated successor."""
    print("\n" + "="*60)
    print("TEST: Depth-First Order")
    print("="*60)

    result = StateSpace(0, counter_successors(6)).check(lambda n: n == 6, "dfs")
    print(f"  Path: {result.path}")

    # the +2 successor is pushed last and popped first
    assert result.path == [0, 2, 4, 6]

    bfs = StateSpace(0, counter_successors(6)).check(lambda n: n == 5, "bfs")
    print(f"  BFS path to 5: {bfs.path}")
    assert bfs.path == [0, 1, 3, 5]

    print("  [PASS] Depth-first order")


def test_deterministic_results():
    """Test that repeated checks return identical traces."""
    print("\n" + "="*60)
    print("TEST: Determinism")
    print("="*60)

    space = StateSpace((LEFT, LEFT), two_actor_successors, invariant=at_most_one_in_transit)
    for order in SearchOrder:
        first = space.check(lambda s: s == (RIGHT, RIGHT), order)
        second = space.check(lambda s: s == (RIGHT, RIGHT), order)
        print(f"  {order.label}: {first.length} states")
        assert first.path == second.path
        assert first.metrics.states_expanded == second.metrics.states_expanded

    print("  [PASS] Determinism")


def test_cost_guided_pop_rule():
    """Test first-minimum selection and the running previous cost."""
    print("\n" + "="*60)
    print("TEST: Cost-Guided Pop Rule")
    print("="*60)

    seen = []

    def cost(state, previous):
        seen.append((state, previous))
        return abs(state - 5)

    frontier = create_frontier("cost_guided", cost, initial_cost=100)
    for state in (9, 3, 7, 4, 6):
        frontier.push(state)

    # 4 and 6 tie at distance 1; the one pushed first wins
    assert frontier.pop() == 4
    assert all(previous == 100 for _, previous in seen)
    assert frontier.previous_cost == 1
    assert 4 not in frontier
    assert len(frontier) == 4

    seen.clear()
    assert frontier.pop() == 6
    assert all(previous == 1 for _, previous in seen)
    print(f"  Remaining: {len(frontier)} members, previous cost {frontier.previous_cost}")

    # zero cost makes every member tie, so the oldest is popped
    fifo = create_frontier(SearchOrder.COST_GUIDED)
    for state in ("a", "b", "c"):
        fifo.push(state)
    assert [fifo.pop(), fifo.pop(), fifo.pop()] == ["a", "b", "c"]

    try:
        fifo.pop()
    except IndexError:
        pass
    else:
        raise AssertionError("pop() on an empty frontier must raise IndexError")

    print("  [PASS] Cost-guided pop rule")


def test_cost_guided_search():
    """Test a full cost-guided search steering towards a target."""
    print("\n" + "="*60)
    print("TEST: Cost-Guided Search")
    print("="*60)

    def distance_to_eight(state, previous):
        return abs(8 - state)

    space = StateSpace(0, counter_successors(8), cost_fn=distance_to_eight, initial_cost=0)
    result = space.check(lambda n: n == 8, SearchOrder.COST_GUIDED)
    print(f"  Path: {result.path}")
    assert result.path == [0, 2, 4, 6, 8]

    # previous cost is re-seeded for every check
    again = space.check(lambda n: n == 8, SearchOrder.COST_GUIDED)
    assert again.path == result.path

    print("  [PASS] Cost-guided search")


def test_search_context():
    """Test cancellation, state budget, timeout and progress reporting."""
    print("\n" + "="*60)
    print("TEST: SearchContext")
    print("="*60)

    space = StateSpace(0, lambda n: [n + 1])

    def never(n):
        return False

    cancelled = SearchContext()
    cancelled.cancel()
    result = space.check(never, "bfs", cancelled)
    print(f"  Cancelled: {result.summary()}")
    assert result.status is SearchStatus.CANCELLED
    assert result.metrics.states_expanded == 0

    limited = SearchContext(max_states=50)
    result = space.check(never, "dfs", limited)
    print(f"  Limited: {result.summary()}")
    assert result.status is SearchStatus.LIMIT_REACHED
    assert result.metrics.states_expanded == 50
    assert not result.found

    # a goal popped within the budget is still reported
    result = space.check(lambda n: n == 0, "bfs", SearchContext(max_states=0))
    assert result.status is SearchStatus.FOUND
    assert result.path == [0]

    result = space.check(lambda n: n == 3, "dfs", SearchContext(max_states=3))
    print(f"  Goal at the budget: {result.summary()}")
    assert result.status is SearchStatus.FOUND
    assert result.path == [0, 1, 2, 3]
    assert result.metrics.states_expanded == 3

    expired = SearchContext(timeout_sec=0.0)
    expired.start_time -= 1.0
    result = space.check(never, "bfs", expired)
    assert result.status is SearchStatus.CANCELLED

    reports = []
    progress = SearchContext(max_states=30, progress_interval=10,
                             progress_callback=lambda n, msg: reports.append(n))
    space.check(never, "bfs", progress)
    print(f"  Progress reports: {reports}")
    assert reports == [10, 20, 30]

    print("  [PASS] SearchContext")


def test_search_order_parsing():
    """Test order names, aliases and unsupported orders."""
    print("\n" + "="*60)
    print("TEST: Search Order Parsing")
    print("="*60)

    assert SearchOrder.parse("dfs") is SearchOrder.DEPTH_FIRST
    assert SearchOrder.parse("Breadth-First") is SearchOrder.BREADTH_FIRST
    assert SearchOrder.parse("COST_GUIDED") is SearchOrder.COST_GUIDED
    assert SearchOrder.parse(SearchOrder.COST_GUIDED) is SearchOrder.COST_GUIDED
    assert set(get_supported_orders()) == set(SearchOrder)

    for bad in ("sideways", ""):
        try:
            SearchOrder.parse(bad)
        except ValueError as e:
            print(f"  '{bad}' rejected: {e}")
        else:
            raise AssertionError(f"'{bad}' should not parse")

    space = StateSpace(0, counter_successors(3))
    try:
        space.check(lambda n: n == 3, "random_walk")
    except ValueError:
        pass
    else:
        raise AssertionError("check() must reject an unsupported order")

    print("  [PASS] Search order parsing")


def test_trace_errors():
    """Test that an inconsistent trace map is reported, not returned."""
    print("\n" + "="*60)
    print("TEST: Trace Errors")
    print("="*60)

    space = StateSpace(0, counter_successors(3))

    try:
        space._trace_path({2: 1}, 2)
    except TraceError as e:
        print(f"  Missing predecessor: {e}")
    else:
        raise AssertionError("missing predecessor must raise TraceError")

    try:
        space._trace_path({2: 1, 1: 2}, 2)
    except TraceError as e:
        print(f"  Cycle: {e}")
    else:
        raise AssertionError("cycle must raise TraceError")

    assert space._trace_path({2: 1, 1: 0}, 2) == [0, 1, 2]
    assert issubclass(TraceError, SearchError)

    print("  [PASS] Trace errors")


def test_transitions_and_annotation():
    """Test the transition adapter and move recovery along a path."""
    print("\n" + "="*60)
    print("TEST: Transitions And Annotation")
    print("="*60)

    def steps(n):
        return [Step(1), Step(2)] if n < 6 else []

    space = StateSpace(0, successors(steps))
    result = space.check(lambda n: n == 5, "bfs")
    moves = annotate_path(result.path, steps)
    print(f"  Path: {result.path}")
    print(f"  Moves: {[move.label for move in moves]}")

    assert len(moves) == len(result.path) - 1
    for move, (before, after) in zip(moves, zip(result.path, result.path[1:])):
        assert move.apply(before) == after

    try:
        annotate_path([0, 4], steps)
    except SearchError:
        pass
    else:
        raise AssertionError("unlinked states must raise SearchError")

    print("  [PASS] Transitions and annotation")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# SEARCH ENGINE VALIDATION TESTS")
    print("#"*60)

    tests = [
        ("Breadth-First Two Actors", test_breadth_first_two_actors),
        ("Goal Is Initial State", test_goal_is_initial_state),
        ("Unreachable Goal", test_unreachable_goal),
        ("No Duplicate Expansion", test_no_state_expanded_twice),
        ("Depth-First Order", test_depth_first_order),
        ("Determinism", test_deterministic_results),
        ("Cost-Guided Pop Rule", test_cost_guided_pop_rule),
        ("Cost-Guided Search", test_cost_guided_search),
        ("SearchContext", test_search_context),
        ("Search Order Parsing", test_search_order_parsing),
        ("Trace Errors", test_trace_errors),
        ("Transitions And Annotation", test_transitions_and_annotation),
    ]

    results = []
    for name, test in tests:
        try:
            test()
            results.append((name, True))
        except AssertionError as e:
            print(f"  [FAIL] {e}")
            results.append((name, False))

    print("\n" + "="*60)
    print("SUMMARY")
    print("="*60)

    all_passed = True
    for name, passed in results:
        status = "PASS" if passed else "FAIL"
        print(f"  {name}: [{status}]")
        if not passed:
            all_passed = False

    print()
    if all_passed:
        print("All tests PASSED!")
        return 0
    else:
        print("Some tests FAILED!")
        return 1


if __name__ == "__main__":
    sys.exit(main())
