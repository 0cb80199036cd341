"""
Leaping Frogs Puzzle

Green frogs sit left of a single empty stone, brown frogs to its right.
Green frogs only move right, brown frogs only move left, each either onto
the neighbouring empty stone or hopping over one frog onto it. The puzzle
is solved when the two groups have swapped sides.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple

from statespace.search import Transition

from .base import Puzzle


class Frog(Enum):
    """Content of a stone; the value is its rendering."""
    EMPTY = "_"
    GREEN = "G"
    BROWN = "B"


Stones = Tuple[Frog, ...]


def parse_stones(text: str) -> Stones:
    """
    Parse a row of stones such as "GG_BB".

    Args:
        text: One character per stone (G, B or _)

    Returns:
        Tuple of Frog values

    Raises:
        ValueError: On an unknown character
    """
    return tuple(Frog(char) for char in text.strip().upper())


def make_row(frogs: int, left: Frog, right: Frog) -> Stones:
    """Build a row with `frogs` of one colour, a gap, then the other colour."""
    return (left,) * frogs + (Frog.EMPTY,) + (right,) * frogs


@dataclass(frozen=True)
class Jump(Transition):
    """
    A frog moves onto the empty stone.

    Attributes:
        source: Stone the frog leaves
        target: Empty stone it lands on
        frog: Colour of the frog
    """
    source: int
    target: int
    frog: Frog

    def apply(self, state: Stones) -> Stones:
        stones = list(state)
        stones[self.source] = Frog.EMPTY
        stones[self.target] = self.frog
        return tuple(stones)

    @property
    def label(self) -> str:
        kind = "jumps to next" if abs(self.source - self.target) == 1 else "jumps over one"
        return f"{self.frog.name.lower()} {kind} ({self.source}->{self.target})"


class FrogsPuzzle(Puzzle):
    """
    Leaping frogs puzzle with a configurable number of frogs per colour.

    Rows grow as 2 * frogs + 1 stones; 4 frogs per colour still solve
    quickly, much larger rows exhaust memory.
    """
    name = "frogs"
    description = "Leaping frogs (swap green and brown)"

    def __init__(self, frogs: int = 2):
        self.frogs = frogs

    def configure(self, **kwargs) -> None:
        frogs = kwargs.pop("frogs", None)
        if frogs is not None:
            if int(frogs) < 1:
                raise ValueError(f"Need at least one frog of each colour, got {frogs}")
            self.frogs = int(frogs)
        super().configure(**kwargs)

    def initial_state(self) -> Stones:
        return make_row(self.frogs, Frog.GREEN, Frog.BROWN)

    def finish_state(self) -> Stones:
        """The goal row: colours swapped around the gap."""
        return make_row(self.frogs, Frog.BROWN, Frog.GREEN)

    def transitions(self, state: Stones) -> List[Transition]:
        moves: List[Transition] = []
        if len(state) < 2:
            return moves
        if Frog.EMPTY not in state:
            return moves
        gap = state.index(Frog.EMPTY)

        # green frogs fill the gap from the left
        if gap > 0 and state[gap - 1] is Frog.GREEN:
            moves.append(Jump(gap - 1, gap, Frog.GREEN))
        if gap > 1 and state[gap - 2] is Frog.GREEN:
            moves.append(Jump(gap - 2, gap, Frog.GREEN))
        # brown frogs fill it from the right
        if gap < len(state) - 1 and state[gap + 1] is Frog.BROWN:
            moves.append(Jump(gap + 1, gap, Frog.BROWN))
        if gap < len(state) - 2 and state[gap + 2] is Frog.BROWN:
            moves.append(Jump(gap + 2, gap, Frog.BROWN))
        return moves

    def is_goal(self, state: Stones) -> bool:
        return state == self.finish_state()

    def render(self, state: Stones) -> str:
        return "".join(frog.value for frog in state)

    def header(self) -> str:
        start = self.render(self.initial_state())
        finish = self.render(self.finish_state())
        return f"Leaping frog puzzle start: {start}, finish: {finish}"

    def successor_tree(self, state: Stones) -> Iterator[str]:
        """
        Describe every state reachable from `state` as an indented tree.

        Uses an explicit stack so deep trees do not hit the recursion limit.
        The tree repeats shared sub-trees and grows exponentially with the
        number of frogs; intended for rows of five stones or so.

        Args:
            state: Root of the tree

        Yields:
            One line per tree node, in depth-first order
        """
        stack = [(0, state)]
        while stack:
            level, current = stack.pop()
            moves = self.transitions(current)
            line = (f"{'  ' * level}state {self.render(current)} "
                    f"has {len(moves)} transitions")
            if moves:
                line += ", leading to:"
            yield line
            for move in reversed(moves):
                stack.append((level + 1, move.apply(current)))
