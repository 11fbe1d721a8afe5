"""NetworkX adapter.

Builds a `PathFinder` whose states are the node names of a NetworkX graph.
The graph is read on demand through its adjacency view and is never copied,
so edits made to the graph between searches are visible to later searches.

Example:
    >>> import networkx as nx
    >>> from pathfinder.lib.nx import finder_from_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=2)
    >>> G.add_edge("B", "C", cost=3)
    >>> finder_from_networkx(G).find_path(["A"], "C").steps
    ('A', 'B', 'C')
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Union

from pathfinder.finder import PathFinder
from pathfinder.logging import get_logger
from pathfinder.types import Cost, HeuristicFunc

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

logger = get_logger(__name__)


def _zero_heuristic(state: Hashable, target: Hashable) -> Cost:
    return 0


def finder_from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "cost",
    default_weight: Cost = 1,
    heuristic: Optional[HeuristicFunc] = None,
) -> PathFinder[Hashable]:
    """Create a path finder over a NetworkX graph.

    Neighbors follow the graph's adjacency order (successors for directed
    graphs). For multigraphs the step distance is the smallest weight among
    the parallel edges.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the step cost (default: "cost").
        default_weight: Cost used when the attribute is missing (default: 1).
        heuristic: Optional ``heuristic(node, target)``. Defaults to 0, which
            turns the search into uniform-cost search.

    Returns:
        PathFinder whose states are node names.

    Raises:
        ValueError: If `default_weight` is negative.
    """
    if default_weight < 0:
        logger.error("default_weight must be non-negative: %r", default_weight)
        raise ValueError(f"default_weight must be non-negative, got {default_weight}")

    adjacency = G.adj
    is_multigraph = G.is_multigraph()

    # Keys follow node equality as NetworkX sees it, never repr()
    keys: Dict[Hashable, str] = {}

    def node_key(node: Hashable) -> str:
        return keys.setdefault(node, str(len(keys)))

    def neighbors(node: Hashable) -> List[Hashable]:
        return list(adjacency[node])

    def distance(node_a: Hashable, node_b: Hashable) -> Cost:
        edge_data = adjacency[node_a][node_b]
        if is_multigraph:
            return min(
                attrs.get(weight_attr, default_weight) for attrs in edge_data.values()
            )
        return edge_data.get(weight_attr, default_weight)

    def is_target(node: Hashable, target: Hashable) -> bool:
        return node == target

    return PathFinder(
        hash=node_key,
        neighbors=neighbors,
        heuristic=heuristic if heuristic is not None else _zero_heuristic,
        is_target=is_target,
        distance=distance,
    )
