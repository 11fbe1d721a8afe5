"""Path nodes and the insertion-ordered node sets used by the search.

A search call owns an arena (a plain list) of `PathNode` records. Parents are
referenced by arena index, so no node holds a reference to another node and
nothing is mutated after it is appended.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Iterator, List, Optional

from pathfinder.types import S, Cost, StateKey


@dataclass(frozen=True, slots=True)
class PathNode(Generic[S]):
    """A discovered state with its parent link and cumulative distance.

    Attributes:
        state: The wrapped caller state.
        parent: Arena index of the parent node, or None for a source.
        distance: Exact accumulated cost from the source (0 for sources).
    """

    state: S
    parent: Optional[int] = None
    distance: Cost = 0


class NodeSet(Generic[S]):
    """Keyed set of arena nodes that iterates in insertion order.

    Each key is inserted at most once: adding a key that is already present is
    a no-op, even if the new node is cheaper. Removal keeps the relative order
    of the remaining nodes.
    """

    def __init__(self, arena: List[PathNode[S]]) -> None:
        self._arena = arena
        self._index: Dict[StateKey, int] = {}

    def add(self, key: StateKey, node_index: int) -> None:
        """Insert the arena node at `node_index` under `key` unless present."""
        if key in self._index:
            return
        self._index[key] = node_index

    def fetch(self, key: StateKey) -> Optional[PathNode[S]]:
        """Return the node stored under `key`, or None."""
        node_index = self._index.get(key)
        if node_index is None:
            return None
        return self._arena[node_index]

    def has(self, key: StateKey) -> bool:
        return key in self._index

    def remove(self, key: StateKey) -> None:
        """Drop `key` if present."""
        self._index.pop(key, None)

    def items(self) -> Iterator[tuple[int, PathNode[S]]]:
        """Yield (arena index, node) pairs in insertion order."""
        for node_index in self._index.values():
            yield node_index, self._arena[node_index]

    def __len__(self) -> int:
        return len(self._index)
