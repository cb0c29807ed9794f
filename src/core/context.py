# src/core/context.py
#!/usr/bin/env python3
"""
SearchContext: the one object a driver holds.

It owns the grid, the current Start/End, the status line and the last
result, and it is the only place that edits cells on the user's behalf.
Runs go through run(), which refuses to start while another run on the
same context is still in flight.
"""

import logging
import random
from typing import Optional

from src.core.base import validate_endpoints
from src.core.maze import generate_random_walls
from src.core.search import AlgorithmChoice, make_algorithm
from src.core.sink import VisitationSink
from src.core.types import CellType, Coord, Grid, PathResult, TRANSIENT

logger = logging.getLogger(__name__)

LEFT = 1
RIGHT = 3


class SearchContext:
    def __init__(self, size: int = 40, grid: Optional[Grid] = None):
        self.grid = grid if grid is not None else Grid(size)
        self.start: Optional[Coord] = self.grid.first(CellType.START)
        self.end: Optional[Coord] = self.grid.first(CellType.END)
        self.last_result: Optional[PathResult] = None
        self.status = "Ready"
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    # -------------------- editing --------------------

    def _kind(self, x: int, y: int) -> CellType:
        kind = self.grid.cell_at(x, y).type
        return CellType.EMPTY if kind in TRANSIENT else kind

    def _set(self, x: int, y: int, kind: CellType) -> None:
        cell = self.grid.cell_at(x, y)
        if cell.pos == self.start and kind != CellType.START:
            self.start = None
        if cell.pos == self.end and kind != CellType.END:
            self.end = None
        cell.type = kind

    def place_start(self, x: int, y: int) -> None:
        if self.start is not None:
            self._set(*self.start, CellType.EMPTY)
        self._set(x, y, CellType.START)
        self.start = (x, y)

    def place_end(self, x: int, y: int) -> None:
        if self.end is not None:
            self._set(*self.end, CellType.EMPTY)
        self._set(x, y, CellType.END)
        self.end = (x, y)

    def set_wall(self, x: int, y: int) -> bool:
        """Walls only go on empty (or previously searched) cells."""
        if self._kind(x, y) != CellType.EMPTY:
            return False
        self._set(x, y, CellType.WALL)
        return True

    def erase(self, x: int, y: int) -> None:
        self._set(x, y, CellType.EMPTY)

    def paint(self, x: int, y: int, button: int) -> None:
        """
        Mouse editing.

        Left on an empty cell places Start, then End, then Walls; left on
        Start or End removes it. Right clears a Wall, Start or End.
        """
        self._guard_idle()
        kind = self._kind(x, y)
        if button == LEFT:
            if kind == CellType.EMPTY:
                if self.start is None:
                    self.place_start(x, y)
                elif self.end is None:
                    self.place_end(x, y)
                else:
                    self.set_wall(x, y)
            elif kind in (CellType.START, CellType.END):
                self.erase(x, y)
        elif button == RIGHT:
            if kind in (CellType.WALL, CellType.START, CellType.END):
                self.erase(x, y)

    # -------------------- bulk --------------------

    def reset(self) -> None:
        self._guard_idle()
        self.grid.reset()
        self.start = None
        self.end = None
        self.last_result = None
        self.status = "Grid Reset"
        logger.debug("grid reset (%dx%d)", self.grid.size, self.grid.size)

    def clear_search(self) -> None:
        self._guard_idle()
        self.grid.clear_search()
        self.status = "Ready"

    def generate_maze(self, probability: float = 0.3, rng: Optional[random.Random] = None) -> int:
        self._guard_idle()
        walls = generate_random_walls(self.grid, probability, rng)
        self.status = "Maze Generated"
        return walls

    # -------------------- search --------------------

    def run(self, algorithm: AlgorithmChoice, sink: Optional[VisitationSink] = None) -> PathResult:
        self._guard_idle()
        algo = make_algorithm(algorithm)
        validate_endpoints(self.grid, self.start, self.end)

        self.grid.clear_search()
        self._running = True
        try:
            result = algo.run(self.grid, self.start, self.end, sink)
        finally:
            self._running = False

        self.last_result = result
        self.status = "Path found!" if result.found else "No path found"
        return result

    def _guard_idle(self) -> None:
        if self._running:
            raise RuntimeError("a search is already running on this grid")
