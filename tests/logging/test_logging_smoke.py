from __future__ import annotations

import logging

import pytest

from pathfinder.logging import get_logger, set_global_log_level


def test_set_global_log_level_and_get_logger_smoke(caplog) -> None:
    set_global_log_level(logging.WARNING)
    lg = get_logger("pathfinder.smoke")
    assert lg.isEnabledFor(logging.WARNING)

    caplog.set_level(logging.DEBUG, logger="pathfinder.smoke")
    lg.debug("debug message")
    assert any(
        r.levelno == logging.DEBUG and r.name == "pathfinder.smoke"
        for r in caplog.records
    )
    set_global_log_level(logging.INFO)


def test_search_logs_summary_at_debug(grid_finder, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="pathfinder.finder")

    grid_finder.find_path([(0, 0)], (7, 0))

    messages = [r.getMessage() for r in caplog.records if r.name == "pathfinder.finder"]
    assert len(messages) == 1
    assert "failed after 22 iteration(s)" in messages[0]
    assert "frontier=0" in messages[0]


def test_validation_errors_are_logged(line_finder, caplog) -> None:
    caplog.set_level(logging.ERROR, logger="pathfinder.config")
    with pytest.raises(ValueError):
        line_finder.find_path([0], 1, max_iterations=-2)
    assert any("non-negative" in r.getMessage() for r in caplog.records)
