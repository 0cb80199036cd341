"""
Japanese Family River Crossing Puzzle

A mother, a father, two daughters, two sons, a policeman and a prisoner
cross a river in a boat carrying at most two people. Rules:
    - only an adult may take the boat across, children never travel with
      another child or the prisoner
    - the prisoner may not be near family members without the policeman
    - the father may not stay with a daughter without the mother
    - the mother may not stay with a son without the father

Every boarding, leaving, departure and arrival is its own move, so the
rules are checked on single states while the boat is underway.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from statespace.search import SearchOrder, Transition
from statespace.search.frontier import CostFn

from .base import Puzzle


class Place(Enum):
    """Where a person is; the value is its rendering."""
    SHORE1 = "SH1"
    ONBOARD = "~~~"
    SHORE2 = "SH2"


class BoatPosition(Enum):
    """Where the boat is; the value is its rendering."""
    SHORE1 = "sh1"
    TRAVEL = "trv"
    SHORE2 = "sh2"


PERSONS = ("mother", "father", "daughter1", "daughter2",
           "son1", "son2", "policeman", "prisoner")
MOTHER, FATHER, DAUGHTER1, DAUGHTER2, SON1, SON2, POLICEMAN, PRISONER = range(len(PERSONS))
CHILDREN = (DAUGHTER1, DAUGHTER2, SON1, SON2)

# (child, adult who may not be alone with the child, adult who must be present)
GUARDIANS = (
    (DAUGHTER1, FATHER, MOTHER),
    (DAUGHTER2, FATHER, MOTHER),
    (SON1, MOTHER, FATHER),
    (SON2, MOTHER, FATHER),
)

SHORE_PLACES = {
    BoatPosition.SHORE1: Place.SHORE1,
    BoatPosition.SHORE2: Place.SHORE2,
}


@dataclass(frozen=True)
class Boat:
    """
    The boat and its load.

    Attributes:
        position: Shore the boat is at, or TRAVEL
        capacity: Maximum number of passengers
        passengers: Number of people onboard
    """
    position: BoatPosition = BoatPosition.SHORE1
    capacity: int = 2
    passengers: int = 0


@dataclass(frozen=True)
class FamilyState:
    """
    Boat plus the place of every person (indexed as in PERSONS).
    """
    boat: Boat = field(default_factory=Boat)
    persons: Tuple[Place, ...] = (Place.SHORE1,) * len(PERSONS)

    def with_person(self, person: int, place: Place, passengers: int) -> "FamilyState":
        """Return a copy with one person moved and the passenger count adjusted."""
        persons = list(self.persons)
        persons[person] = place
        boat = replace(self.boat, passengers=self.boat.passengers + passengers)
        return FamilyState(boat=boat, persons=tuple(persons))


@dataclass(frozen=True)
class Depart(Transition):
    """The loaded boat leaves the shore."""

    def apply(self, state: FamilyState) -> FamilyState:
        return replace(state, boat=replace(state.boat, position=BoatPosition.TRAVEL))

    @property
    def label(self) -> str:
        return "boat departs"


@dataclass(frozen=True)
class Arrive(Transition):
    """
    The boat reaches a shore and everyone onboard steps off.

    Attributes:
        shore: BoatPosition.SHORE1 or BoatPosition.SHORE2
    """
    shore: BoatPosition

    def apply(self, state: FamilyState) -> FamilyState:
        landing = SHORE_PLACES[self.shore]
        persons = tuple(landing if place is Place.ONBOARD else place
                        for place in state.persons)
        boat = replace(state.boat, position=self.shore, passengers=0)
        return FamilyState(boat=boat, persons=persons)

    @property
    def label(self) -> str:
        return f"boat arrives at {self.shore.name.lower()}"


@dataclass(frozen=True)
class Board(Transition):
    """
    A person on the boat's shore gets onboard.

    Attributes:
        person: Index into PERSONS
    """
    person: int

    def apply(self, state: FamilyState) -> FamilyState:
        return state.with_person(self.person, Place.ONBOARD, +1)

    @property
    def label(self) -> str:
        return f"{PERSONS[self.person]} boards"


@dataclass(frozen=True)
class Disembark(Transition):
    """
    A person onboard steps off onto the boat's shore.

    Attributes:
        person: Index into PERSONS
        place: Shore the person steps onto
    """
    person: int
    place: Place

    def apply(self, state: FamilyState) -> FamilyState:
        return state.with_person(self.person, self.place, -1)

    @property
    def label(self) -> str:
        return f"{PERSONS[self.person]} leaves the boat"


class FamilyCost(NamedTuple):
    """
    Cost for cost-guided search, compared by depth then noise.

    Attributes:
        depth: Number of transitions
        noise: Kids get bored on shore1 and start making noise there
    """
    depth: int = 0
    noise: int = 0


def depth_cost(state: FamilyState, previous: FamilyCost) -> FamilyCost:
    """Every step costs one; ranks like breadth-first."""
    return FamilyCost(previous.depth + 1, previous.noise)


def noise_cost(state: FamilyState, previous: FamilyCost) -> FamilyCost:
    """Older son is noisier on shore1, so he tends to cross first."""
    noise = previous.noise
    if state.persons[SON1] is Place.SHORE1:
        noise += 2
    if state.persons[SON2] is Place.SHORE1:
        noise += 1
    return FamilyCost(previous.depth, noise)


def younger_noise_cost(state: FamilyState, previous: FamilyCost) -> FamilyCost:
    """Younger son is more distressed on shore1, so he tends to cross first."""
    noise = previous.noise
    if state.persons[SON1] is Place.SHORE1:
        noise += 1
    if state.persons[SON2] is Place.SHORE1:
        noise += 2
    return FamilyCost(previous.depth, noise)


class FamilyPuzzle(Puzzle):
    """
    Japanese family river crossing.

    Solved cost-guided by default. Changing the cost function expresses a
    preference between symmetric solutions (which son crosses first).
    """
    name = "family"
    description = "Japanese family river crossing"
    default_order = SearchOrder.COST_GUIDED
    default_cost = "depth"
    initial_cost = FamilyCost()

    def __init__(self, capacity: int = 2, travel_only: bool = True):
        self.capacity = capacity
        self.travel_only = travel_only

    def configure(self, **kwargs) -> None:
        capacity = kwargs.pop("capacity", None)
        if capacity is not None:
            self.capacity = int(capacity)
        travel_only = kwargs.pop("travel_only", None)
        if travel_only is not None:
            self.travel_only = bool(travel_only)
        super().configure(**kwargs)

    def initial_state(self) -> FamilyState:
        return FamilyState(boat=Boat(capacity=self.capacity))

    def transitions(self, state: FamilyState) -> List[Transition]:
        moves: List[Transition] = []
        boat = state.boat
        if boat.position is BoatPosition.TRAVEL:
            moves.append(Arrive(BoatPosition.SHORE1))
            moves.append(Arrive(BoatPosition.SHORE2))
        elif boat.passengers > 0:
            moves.append(Depart())

        shore = SHORE_PLACES.get(boat.position)
        if shore is None:
            return moves
        for person, place in enumerate(state.persons):
            if place is shore:
                moves.append(Board(person))
            elif place is Place.ONBOARD:
                moves.append(Disembark(person, shore))
        return moves

    def violation(self, state: FamilyState) -> Optional[str]:
        p = state.persons
        boat = state.boat

        if boat.passengers > boat.capacity:
            return "boat overload"

        if boat.position is BoatPosition.TRAVEL:
            # the first child found onboard decides
            for child in CHILDREN:
                if p[child] is not Place.ONBOARD:
                    continue
                companions = [c for c in CHILDREN + (PRISONER,) if c != child]
                if boat.passengers == 1 or any(p[c] is Place.ONBOARD for c in companions):
                    return f"{PERSONS[child]} travels without an adult"
                break

            if p[PRISONER] != p[POLICEMAN]:
                family = CHILDREN + (MOTHER, FATHER)
                if any(p[member] == p[PRISONER] for member in family):
                    return "prisoner with family"

            if p[PRISONER] is Place.ONBOARD and boat.passengers < 2:
                return "prisoner on boat alone"

        for child, adult, guardian in GUARDIANS:
            if p[child] == p[adult] and p[child] != p[guardian]:
                return f"{PERSONS[child]} with {PERSONS[adult]} without {PERSONS[guardian]}"
        return None

    def is_goal(self, state: FamilyState) -> bool:
        return all(place is Place.SHORE2 for place in state.persons)

    def cost_functions(self) -> Dict[str, CostFn]:
        return {
            "depth": depth_cost,
            "noise": noise_cost,
            "noise_younger": younger_noise_cost,
        }

    def render(self, state: FamilyState) -> str:
        boat = state.boat
        persons = ",".join(f"{{{place.value}}}" for place in state.persons)
        return f"{{{boat.position.value},{boat.passengers},{boat.capacity}}},{persons}"

    def header(self) -> str:
        return "Boat,     Mothr,Fathr,Daug1,Daug2,Son1, Son2, Polic,Prisn"

    def is_shown(self, state: FamilyState) -> bool:
        return not self.travel_only or state.boat.position is BoatPosition.TRAVEL
