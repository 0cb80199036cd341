"""
Puzzle Factory

Factory for creating puzzle model instances.
"""

import importlib
from typing import Dict, List, Type, Union

from .base import Puzzle


# Registry of available puzzles (dotted path or registered class)
_PUZZLE_REGISTRY: Dict[str, Union[str, Type[Puzzle]]] = {
    "crossing": "crossing.CrossingPuzzle",
    "frogs": "frogs.FrogsPuzzle",
    "family": "family.FamilyPuzzle",
}

# Cache for loaded puzzle classes
_PUZZLE_CACHE: Dict[str, Type[Puzzle]] = {}


def _load_puzzle_class(name: str) -> Type[Puzzle]:
    """Lazily load a puzzle class by name."""
    if name in _PUZZLE_CACHE:
        return _PUZZLE_CACHE[name]

    entry = _PUZZLE_REGISTRY[name]
    if isinstance(entry, str):
        module_name, class_name = entry.rsplit(".", 1)
        module = importlib.import_module(f".{module_name}", package=__package__)
        puzzle_class = getattr(module, class_name)
    else:
        puzzle_class = entry

    _PUZZLE_CACHE[name] = puzzle_class
    return puzzle_class


def create_puzzle(name: str = "frogs", **config) -> Puzzle:
    """
    Create a puzzle model by name.

    Args:
        name: Puzzle identifier. Available names:
            - "frogs" (default): Leaping frogs
            - "crossing": Goat, cabbage and wolf
            - "family": Japanese family river crossing
        **config: Puzzle-specific configuration options:
            For "frogs":
                - frogs: Number of frogs of each colour
            For "family":
                - capacity: Boat capacity
                - travel_only: List only travelling states

    Returns:
        Configured Puzzle instance

    Raises:
        ValueError: If name is not recognized

    Example:
        puzzle = create_puzzle("frogs", frogs=3)
        result = puzzle.solve("bfs")
    """
    if name not in _PUZZLE_REGISTRY:
        available = ", ".join(_PUZZLE_REGISTRY.keys())
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")

    puzzle = _load_puzzle_class(name)()
    if config:
        puzzle.configure(**config)
    return puzzle


def register_puzzle(name: str, puzzle_class: type) -> None:
    """
    Register a custom puzzle type.

    Args:
        name: Puzzle identifier
        puzzle_class: Puzzle subclass

    Example:
        from statespace.puzzles import register_puzzle, Puzzle

        class MyPuzzle(Puzzle):
            ...

        register_puzzle("mine", MyPuzzle)
    """
    if not isinstance(puzzle_class, type) or not issubclass(puzzle_class, Puzzle):
        raise TypeError(f"{puzzle_class} must be a subclass of Puzzle")
    _PUZZLE_REGISTRY[name] = puzzle_class
    _PUZZLE_CACHE.pop(name, None)


def available_puzzles() -> List[str]:
    """
    List available puzzle names.

    Returns:
        List of registered puzzle names
    """
    return list(_PUZZLE_REGISTRY.keys())


def get_puzzle_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered puzzles.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": name, "description": _load_puzzle_class(name).description}
        for name in _PUZZLE_REGISTRY
    ]
