"""Shared fixtures: a walled grid maze and a path finder over its cells.

Cells are ``(row, col)`` tuples. Walls are ``1``; open cells are ``0``.
"""

from __future__ import annotations

from typing import List, Tuple

import pytest

from pathfinder import PathFinder

Cell = Tuple[int, int]

MAZE = [
    [0, 0, 1, 0, 0, 0, 1, 0],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 1, 0, 1, 0, 1, 0],
    [0, 0, 0, 0, 1, 0, 1, 0],
]


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def make_grid_finder(maze: List[List[int]]) -> PathFinder[Cell]:
    """Build a 4-directional grid finder with Manhattan heuristic and distance."""

    def neighbors(cell: Cell) -> List[Cell]:
        row, col = cell
        candidates = [
            (row + 1, col),
            (row, col - 1),
            (row, col + 1),
            (row - 1, col),
        ]
        return [
            (r, c)
            for r, c in candidates
            if 0 <= r < len(maze) and 0 <= c < len(maze[0]) and maze[r][c] == 0
        ]

    return PathFinder(
        hash=lambda cell: f"{cell[0]}-{cell[1]}",
        neighbors=neighbors,
        heuristic=manhattan,
        is_target=lambda cell, target: cell == target,
        distance=manhattan,
    )


@pytest.fixture
def maze() -> List[List[int]]:
    return [row[:] for row in MAZE]


@pytest.fixture
def grid_finder(maze) -> PathFinder[Cell]:
    return make_grid_finder(maze)


@pytest.fixture
def line_finder() -> PathFinder[int]:
    # Unbounded integer line: n <-> n-1, n+1, unit cost, no heuristic guidance.
    return PathFinder(
        hash=str,
        neighbors=lambda n: [n + 1, n - 1],
        heuristic=lambda n, target: 0,
        is_target=lambda n, target: n == target,
        distance=lambda a, b: abs(a - b),
    )
