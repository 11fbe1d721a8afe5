"""pathfinder: best-first path search over implicitly defined graphs.

States are opaque caller-defined values. The caller describes the graph with
five pure functions and the engine finds a path from one of several sources
to a target, bounded by an iteration budget.

Primary API:
    PathFinder - Search configuration; call find_path() per query
    SearchResult - Outcome of a search
    SearchProblem - Protocol for objects usable with PathFinder.from_problem()
    finder_from_networkx() - PathFinder over a NetworkX graph

Example:
    from pathfinder import PathFinder

    finder = PathFinder(
        hash=str,
        neighbors=lambda n: [n + 1, n - 1],
        heuristic=lambda n, t: abs(t - n),
        is_target=lambda n, t: n == t,
        distance=lambda a, b: abs(a - b),
    )
    result = finder.find_path([0], 3)
    assert result.steps == (0, 1, 2, 3)
"""

from __future__ import annotations

from pathfinder import logging
from pathfinder._version import __version__
from pathfinder.config import SEARCH_CONFIG, SearchConfig
from pathfinder.finder import PathFinder
from pathfinder.lib.nx import finder_from_networkx
from pathfinder.nodes import NodeSet, PathNode
from pathfinder.result import SearchResult
from pathfinder.types import Cost, SearchProblem, StateKey

__all__ = [
    # Version
    "__version__",
    # Search
    "PathFinder",
    "SearchResult",
    "SearchProblem",
    # Building blocks
    "NodeSet",
    "PathNode",
    # Types
    "Cost",
    "StateKey",
    # Configuration
    "SearchConfig",
    "SEARCH_CONFIG",
    # Library integrations (NetworkX)
    "finder_from_networkx",
    # Utilities
    "logging",
]
