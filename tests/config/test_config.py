"""Tests for `pathfinder.config` focusing on behavior and correctness."""

import pytest

from pathfinder.config import SEARCH_CONFIG, SearchConfig


def test_resolve_defaults_to_configured_budget() -> None:
    config = SearchConfig()
    assert config.default_max_iterations == 100
    assert config.resolve_max_iterations() == 100
    assert config.resolve_max_iterations(None) == 100


def test_resolve_passes_explicit_budget_through() -> None:
    config = SearchConfig(default_max_iterations=7)
    assert config.resolve_max_iterations(0) == 0
    assert config.resolve_max_iterations(3) == 3
    assert config.resolve_max_iterations(None) == 7


@pytest.mark.parametrize("value", [2.0, "5", False])
def test_resolve_rejects_non_int(value) -> None:
    with pytest.raises(TypeError):
        SearchConfig().resolve_max_iterations(value)


def test_resolve_rejects_negative() -> None:
    with pytest.raises(ValueError):
        SearchConfig().resolve_max_iterations(-3)


def test_global_default_drives_find_path(line_finder, monkeypatch) -> None:
    """PathFinder.find_path picks up changes to the global config."""
    monkeypatch.setattr(SEARCH_CONFIG, "default_max_iterations", 4)
    result = line_finder.find_path([0], 1000)
    assert not result.found
    assert result.iterations == 4

    # Explicit budgets still win
    assert line_finder.find_path([0], 1000, max_iterations=2).iterations == 2
