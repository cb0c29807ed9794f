"""
Pytest configuration and shared fixtures.

Grids are written as text rows: '.' empty, '#' wall, 'S' start, 'E' end.
Coordinates are (x, y) = (column, row).
"""

import pytest

from src.core.types import Grid


@pytest.fixture
def open_grid() -> Grid:
    """5x5, Start top-left, End bottom-right, no walls."""
    return Grid.from_rows([
        "S....",
        ".....",
        ".....",
        ".....",
        "....E",
    ])


@pytest.fixture
def gap_grid() -> Grid:
    """5x5 with a wall column at x=2 except a gap at y=2."""
    return Grid.from_rows([
        "S.#..",
        "..#..",
        ".....",
        "..#..",
        "..#.E",
    ])


@pytest.fixture
def enclosed_grid() -> Grid:
    """End boxed in by walls on every side."""
    return Grid.from_rows([
        "S....",
        ".....",
        "...#.",
        "..#E#",
        "...#.",
    ])


@pytest.fixture
def maze_grid() -> Grid:
    """A winding 8x8 layout where greedy and depth-first go astray."""
    return Grid.from_rows([
        "S.......",
        "######.#",
        "........",
        ".######.",
        "........",
        "#.######",
        "........",
        "######.E",
    ])
