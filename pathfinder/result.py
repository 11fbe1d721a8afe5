"""Result container returned by `PathFinder.find_path`."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, Tuple

from pathfinder.types import S, Cost


@dataclass(frozen=True)
class SearchResult(Generic[S]):
    """Outcome of a single search.

    `found` is False both when the frontier ran dry and when the iteration
    budget ran out. Compare `iterations` with the budget to tell them apart.

    Attributes:
        found: Whether a target state was selected from the frontier.
        expanded_order: States in the order they were expanded. The target
            state itself is never included.
        steps: States from the chosen source to the target, inclusive. Empty
            when nothing was found.
        iterations: Number of loop iterations executed, at most the budget.
        cost: Cumulative distance of the target node, or None if not found.
    """

    found: bool
    expanded_order: Tuple[S, ...] = field(default_factory=tuple)
    steps: Tuple[S, ...] = field(default_factory=tuple)
    iterations: int = 0
    cost: Optional[Cost] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return a dict with list-valued state sequences.

        States are included as-is; they are JSON-safe only if the caller's
        states are.
        """
        return {
            "found": self.found,
            "expanded_order": list(self.expanded_order),
            "steps": list(self.steps),
            "iterations": self.iterations,
            "cost": self.cost,
        }
