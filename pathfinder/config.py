"""Configuration classes for pathfinder searches."""

from dataclasses import dataclass
from typing import Optional

from pathfinder.logging import get_logger

logger = get_logger(__name__)


@dataclass
class SearchConfig:
    """Defaults applied by `PathFinder.find_path`."""

    # Iteration budget used when the caller does not pass one
    default_max_iterations: int = 100

    def resolve_max_iterations(self, value: Optional[int] = None) -> int:
        """Return the iteration budget for a search.

        Args:
            value: Explicit budget, or None for `default_max_iterations`.

        Returns:
            A non-negative iteration budget.

        Raises:
            TypeError: If the budget is not an integer.
            ValueError: If the budget is negative.
        """
        if value is None:
            value = self.default_max_iterations
        if isinstance(value, bool) or not isinstance(value, int):
            logger.error("max_iterations must be an int: %r", value)
            raise TypeError(
                f"max_iterations must be an int, got {type(value).__name__}"
            )
        if value < 0:
            logger.error("max_iterations must be non-negative: %r", value)
            raise ValueError(f"max_iterations must be non-negative, got {value}")
        return value


# Global configuration instance
SEARCH_CONFIG = SearchConfig()
