"""Adapters that build path finders over third-party graph objects."""

from pathfinder.lib.nx import finder_from_networkx

__all__ = ["finder_from_networkx"]
