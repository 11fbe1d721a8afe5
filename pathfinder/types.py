"""Shared type aliases and the search-problem protocol."""

from __future__ import annotations

from typing import Callable, List, Protocol, TypeVar, Union

#: Numeric cost of a step or of a whole path.
Cost = Union[int, float]

#: Canonical key identifying a state. Two states with equal keys are one node.
StateKey = str

#: Opaque caller-defined state.
S = TypeVar("S")

HashFunc = Callable[[S], StateKey]
NeighborsFunc = Callable[[S], List[S]]
HeuristicFunc = Callable[[S, S], Cost]
IsTargetFunc = Callable[[S, S], bool]
DistanceFunc = Callable[[S, S], Cost]

#: Method names every search problem must provide.
PROBLEM_METHODS = ("hash", "neighbors", "heuristic", "is_target", "distance")


class SearchProblem(Protocol[S]):
    """Capability interface describing an implicit graph over states of type S.

    All methods must be pure. `hash` is called on every insert, lookup and
    removal, so it should be cheap.
    """

    def hash(self, state: S) -> StateKey: ...

    def neighbors(self, state: S) -> List[S]: ...

    def heuristic(self, state: S, target: S) -> Cost: ...

    def is_target(self, state: S, target: S) -> bool: ...

    def distance(self, state_a: S, state_b: S) -> Cost: ...
