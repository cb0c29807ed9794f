"""Tests for SearchContext: editing, reset, maze generation and runs."""

import random

import pytest

from src.core.context import LEFT, RIGHT, SearchContext
from src.core.errors import InvalidEndpoints, OutOfRange
from src.core.search import Algorithm
from src.core.sink import CallbackSink
from src.core.types import CellType, Grid


@pytest.fixture
def ctx() -> SearchContext:
    return SearchContext(5)


class TestPainting:
    """Mouse editing rules."""

    def test_left_places_start_end_then_walls(self, ctx):
        """First click Start, second End, the rest walls."""
        ctx.paint(0, 0, LEFT)
        ctx.paint(4, 4, LEFT)
        ctx.paint(2, 2, LEFT)
        assert ctx.start == (0, 0)
        assert ctx.end == (4, 4)
        assert ctx.grid.cell_at(2, 2).type == CellType.WALL

    def test_left_on_start_clears_it(self, ctx):
        """Clicking Start again removes it and frees the slot."""
        ctx.paint(0, 0, LEFT)
        ctx.paint(4, 4, LEFT)
        ctx.paint(0, 0, LEFT)
        assert ctx.start is None
        assert ctx.grid.cell_at(0, 0).type == CellType.EMPTY
        ctx.paint(1, 1, LEFT)
        assert ctx.start == (1, 1)

    def test_left_on_wall_does_nothing(self, ctx):
        """Walls are removed with the right button only."""
        ctx.paint(0, 0, LEFT)
        ctx.paint(4, 4, LEFT)
        ctx.paint(2, 2, LEFT)
        ctx.paint(2, 2, LEFT)
        assert ctx.grid.cell_at(2, 2).type == CellType.WALL

    def test_right_erases(self, ctx):
        """Right button clears walls and terminals."""
        ctx.paint(0, 0, LEFT)
        ctx.paint(4, 4, LEFT)
        ctx.paint(2, 2, LEFT)
        for x, y in [(0, 0), (4, 4), (2, 2)]:
            ctx.paint(x, y, RIGHT)
        assert ctx.grid.count(CellType.EMPTY) == 25
        assert ctx.start is None and ctx.end is None

    def test_at_most_one_start(self, ctx):
        """Moving Start clears the old cell."""
        ctx.place_start(0, 0)
        ctx.place_start(3, 3)
        assert ctx.grid.find(CellType.START) == [(3, 3)]

    def test_set_wall_refuses_terminals(self, ctx):
        """The editor never turns Start or End into a wall."""
        ctx.place_start(0, 0)
        assert ctx.set_wall(0, 0) is False
        assert ctx.grid.cell_at(0, 0).type == CellType.START

    def test_paint_out_of_range(self, ctx):
        """Painting outside the grid raises OutOfRange."""
        with pytest.raises(OutOfRange):
            ctx.paint(5, 0, LEFT)

    def test_context_picks_up_marked_grid(self):
        """A pre-built grid's Start/End become the context endpoints."""
        ctx = SearchContext(grid=Grid.from_rows(["S.", ".E"]))
        assert (ctx.start, ctx.end) == ((0, 0), (1, 1))


class TestBulk:
    """reset, clear_search and generate_maze."""

    def test_reset(self, ctx):
        """Reset empties the grid and forgets endpoints and results."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        ctx.run(Algorithm.BFS)
        ctx.reset()
        assert ctx.grid.count(CellType.EMPTY) == 25
        assert ctx.start is None and ctx.end is None
        assert ctx.last_result is None
        assert ctx.status == "Grid Reset"

    def test_clear_search_keeps_walls(self, ctx):
        """clear_search removes annotations only."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        ctx.set_wall(2, 2)
        ctx.run(Algorithm.DFS)
        ctx.clear_search()
        assert ctx.grid.count(CellType.VISITED) == 0
        assert ctx.grid.count(CellType.PATH) == 0
        assert ctx.grid.cell_at(2, 2).type == CellType.WALL

    def test_maze_keeps_terminals(self, ctx):
        """Random walls never land on Start or End."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        ctx.generate_maze(1.0)
        assert ctx.grid.count(CellType.WALL) == 23
        assert ctx.grid.cell_at(0, 0).type == CellType.START
        assert ctx.grid.cell_at(4, 4).type == CellType.END
        assert ctx.status == "Maze Generated"

    def test_maze_reproducible_with_seed(self):
        """Same seed, same walls."""
        a, b = SearchContext(10), SearchContext(10)
        a.generate_maze(0.3, random.Random(7))
        b.generate_maze(0.3, random.Random(7))
        assert a.grid.to_rows() == b.grid.to_rows()

    def test_maze_probability_bounds(self, ctx):
        """Probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            ctx.generate_maze(1.5)

    def test_zero_probability_clears_walls(self, ctx):
        """p=0 turns every non-terminal cell empty."""
        ctx.set_wall(1, 1)
        ctx.generate_maze(0.0)
        assert ctx.grid.count(CellType.WALL) == 0


class TestRun:
    """Running searches through the context."""

    def test_requires_both_endpoints(self, ctx):
        """No End placed means InvalidEndpoints and an untouched grid."""
        ctx.place_start(0, 0)
        before = ctx.grid.to_rows()
        with pytest.raises(InvalidEndpoints, match="both Start and End must be set"):
            ctx.run(Algorithm.ASTAR)
        assert ctx.grid.to_rows() == before

    def test_records_result_and_status(self, ctx):
        """last_result and status reflect the run."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        result = ctx.run("Dijkstra")
        assert ctx.last_result is result
        assert result.found
        assert ctx.status == "Path found!"

    def test_no_path_status(self):
        """A blocked End reports 'No path found'."""
        ctx = SearchContext(grid=Grid.from_rows(["S#.", "##.", "..E"]))
        result = ctx.run(Algorithm.GREEDY)
        assert not result.found
        assert ctx.status == "No path found"

    def test_previous_annotations_cleared(self, ctx):
        """A new run starts from a clean overlay."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        ctx.run(Algorithm.DFS)
        ctx.run(Algorithm.ASTAR)
        fresh = SearchContext(grid=Grid.from_rows(["S....", ".....", ".....", ".....", "....E"]))
        fresh.run(Algorithm.ASTAR)
        assert ctx.grid.to_rows() == fresh.grid.to_rows()

    def test_no_edits_while_running(self, ctx):
        """The grid cannot be edited from inside a running search."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        sink = CallbackSink(on_visit=lambda cell: ctx.paint(*cell, RIGHT))
        with pytest.raises(RuntimeError):
            ctx.run(Algorithm.BFS, sink)
        assert ctx.running is False

    def test_no_nested_runs(self, ctx):
        """A second run cannot start while one is in flight."""
        ctx.place_start(0, 0)
        ctx.place_end(4, 4)
        sink = CallbackSink(on_path=lambda cell: ctx.run(Algorithm.BFS))
        with pytest.raises(RuntimeError):
            ctx.run(Algorithm.DIJKSTRA, sink)
