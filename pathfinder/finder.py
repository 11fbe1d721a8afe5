"""Best-first (A*-style) search over implicitly defined graphs.

States are opaque. The caller supplies five pure functions describing the
graph, and `PathFinder.find_path` repeatedly selects the frontier node with
the lowest ``heuristic + distance``, tests it against the target, and expands
it otherwise.

Notes:
    The search never relaxes a node. Once a state's key is in the frontier or
    the closed set, a later and cheaper route to it is ignored. Results are
    therefore not guaranteed optimal when several routes of different cost
    reach the same state before it is expanded.

    Ties on ``heuristic + distance`` go to the node inserted into the frontier
    first.
"""

from __future__ import annotations

from typing import Generic, Iterable, List, Optional, Tuple

from pathfinder.config import SEARCH_CONFIG
from pathfinder.logging import get_logger
from pathfinder.nodes import NodeSet, PathNode
from pathfinder.result import SearchResult
from pathfinder.types import (
    PROBLEM_METHODS,
    S,
    DistanceFunc,
    HashFunc,
    HeuristicFunc,
    IsTargetFunc,
    NeighborsFunc,
    SearchProblem,
)

logger = get_logger(__name__)


class PathFinder(Generic[S]):
    """Reusable search configuration over states of type S.

    The finder holds only the five functions; every `find_path` call builds
    and discards its own frontier, closed set and node arena, so one finder
    can serve many independent searches.

    Args:
        hash: Canonical key for a state. Equal keys mean the same node.
        neighbors: States reachable from a state in one step.
        heuristic: Estimated remaining cost from a state to the target.
        is_target: Goal test, called as ``is_target(state, target)``.
        distance: Exact cost of a single step between adjacent states.

    Raises:
        TypeError: If any of the five functions is not callable.
    """

    def __init__(
        self,
        *,
        hash: HashFunc,
        neighbors: NeighborsFunc,
        heuristic: HeuristicFunc,
        is_target: IsTargetFunc,
        distance: DistanceFunc,
    ) -> None:
        functions = {
            "hash": hash,
            "neighbors": neighbors,
            "heuristic": heuristic,
            "is_target": is_target,
            "distance": distance,
        }
        for name, func in functions.items():
            if not callable(func):
                logger.error("PathFinder.%s must be callable: %r", name, func)
                raise TypeError(f"PathFinder.{name} must be callable")

        self._hash = hash
        self._neighbors = neighbors
        self._heuristic = heuristic
        self._is_target = is_target
        self._distance = distance

    @classmethod
    def from_problem(cls, problem: SearchProblem[S]) -> "PathFinder[S]":
        """Build a finder from an object implementing `SearchProblem`.

        Raises:
            TypeError: If `problem` lacks one of the required methods.
        """
        missing = [
            name
            for name in PROBLEM_METHODS
            if not callable(getattr(problem, name, None))
        ]
        if missing:
            logger.error(
                "%s is missing search methods: %s",
                type(problem).__name__,
                ", ".join(missing),
            )
            raise TypeError(
                f"{type(problem).__name__} does not implement: {', '.join(missing)}"
            )
        return cls(**{name: getattr(problem, name) for name in PROBLEM_METHODS})

    def find_path(
        self,
        sources: Iterable[S],
        target: S,
        max_iterations: Optional[int] = None,
    ) -> SearchResult[S]:
        """Search for a path from any of `sources` to `target`.

        Sources whose keys collide keep only the first occurrence. Each loop
        iteration selects the best frontier node; the loop stops when that
        node is a target, when the frontier is empty, or after
        `max_iterations` iterations.

        Args:
            sources: Candidate start states, all seeded with distance 0.
            target: State passed to `heuristic` and `is_target`.
            max_iterations: Iteration budget. None uses
                `SEARCH_CONFIG.default_max_iterations`.

        Returns:
            SearchResult describing the outcome.

        Raises:
            TypeError: If `max_iterations` is not an integer.
            ValueError: If `max_iterations` is negative.
        """
        budget = SEARCH_CONFIG.resolve_max_iterations(max_iterations)

        arena: List[PathNode[S]] = []
        frontier: NodeSet[S] = NodeSet(arena)
        closed: NodeSet[S] = NodeSet(arena)

        for source in sources:
            key = self._hash(source)
            if not frontier.has(key):
                arena.append(PathNode(source))
                frontier.add(key, len(arena) - 1)

        terminal: Optional[int] = None
        expanded_order: List[S] = []

        iteration = 0
        while iteration < budget:
            selected = self._select(frontier, target)
            if selected is None:
                break

            node_index, node = selected
            if self._is_target(node.state, target):
                terminal = node_index
                break

            self._expand(node_index, arena, frontier, closed)
            expanded_order.append(node.state)
            iteration += 1

        steps = self._backtrack(arena, terminal)
        cost = arena[terminal].distance if terminal is not None else None

        logger.debug(
            "Search %s after %d iteration(s) (budget %d): "
            "expanded=%d, frontier=%d, steps=%d",
            "succeeded" if terminal is not None else "failed",
            iteration,
            budget,
            len(expanded_order),
            len(frontier),
            len(steps),
        )

        return SearchResult(
            found=terminal is not None,
            expanded_order=tuple(expanded_order),
            steps=steps,
            iterations=iteration,
            cost=cost,
        )

    def _select(
        self, frontier: NodeSet[S], target: S
    ) -> Optional[Tuple[int, PathNode[S]]]:
        """Return the frontier entry with the lowest f-value, or None if empty."""
        best: Optional[Tuple[int, PathNode[S]]] = None
        best_score = None

        for node_index, node in frontier.items():
            score = self._heuristic(node.state, target) + node.distance
            # Strict comparison keeps the earliest-inserted node on ties
            if best is None or score < best_score:
                best = (node_index, node)
                best_score = score

        return best

    def _expand(
        self,
        node_index: int,
        arena: List[PathNode[S]],
        frontier: NodeSet[S],
        closed: NodeSet[S],
    ) -> None:
        """Move a node to the closed set and push its unseen neighbors."""
        node = arena[node_index]
        key = self._hash(node.state)
        closed.add(key, node_index)
        frontier.remove(key)

        for neighbor in self._neighbors(node.state):
            neighbor_key = self._hash(neighbor)
            if closed.has(neighbor_key) or frontier.has(neighbor_key):
                continue

            neighbor_distance = node.distance + self._distance(node.state, neighbor)
            arena.append(PathNode(neighbor, node_index, neighbor_distance))
            frontier.add(neighbor_key, len(arena) - 1)

    @staticmethod
    def _backtrack(arena: List[PathNode[S]], terminal: Optional[int]) -> Tuple[S, ...]:
        """Follow parent indices from `terminal` back to its source."""
        steps: List[S] = []
        node_index = terminal
        while node_index is not None:
            node = arena[node_index]
            steps.append(node.state)
            node_index = node.parent
        steps.reverse()
        return tuple(steps)
