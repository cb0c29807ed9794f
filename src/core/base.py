# src/core/base.py
#!/usr/bin/env python3
"""
Shared run contract for the five grid searches.

A subclass only implements `_explore`: drive its frontier from start until
it pops end (return the predecessor map) or runs dry (return None), calling
`visit(cell)` whenever it discovers or relaxes a cell. Everything else is
done here, identically for every algorithm:

- endpoint validation, before the grid is touched
- grid tagging (VISITED / PATH, Start and End left alone)
- path reconstruction through the same sink
- timing and the PathResult
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from src.core.errors import InvalidEndpoints
from src.core.reconstruct import reconstruct
from src.core.sink import GridTagger, VisitationSink
from src.core.types import CellType, Coord, Grid, PathResult

logger = logging.getLogger(__name__)

Visit = Callable[[Coord], None]


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def validate_endpoints(grid: Grid, start: Optional[Coord], end: Optional[Coord]) -> None:
    if start is None or end is None:
        raise InvalidEndpoints("both Start and End must be set before searching")
    if start == end:
        raise InvalidEndpoints(f"Start and End are the same cell {start}")
    for label, c in (("Start", start), ("End", end)):
        if not grid.in_bounds(*c):
            raise InvalidEndpoints(f"{label} {c} is outside the {grid.size}x{grid.size} grid")
        if not grid.is_passable(*c):
            raise InvalidEndpoints(f"{label} {c} is a wall")

    for label, kind, expected in (("Start", CellType.START, start), ("End", CellType.END, end)):
        marked = grid.find(kind)
        if len(marked) > 1:
            raise InvalidEndpoints(f"grid marks {len(marked)} {label} cells: {marked}")
        if marked and marked[0] != expected:
            raise InvalidEndpoints(f"grid marks {label} at {marked[0]} but search asked for {expected}")


@dataclass
class SearchAlgorithm:
    name: str = "search"

    # filled by _explore, read back by run()
    expanded: int = 0

    def run(self, grid: Grid, start: Coord, end: Coord,
            sink: Optional[VisitationSink] = None) -> PathResult:
        try:
            validate_endpoints(grid, start, end)
        except InvalidEndpoints as ex:
            logger.warning("%s rejected: %s", self.name, ex)
            raise

        tagger = GridTagger(grid, start, end, sink)
        self.expanded = 0
        logger.debug("%s: searching %s -> %s on %dx%d grid", self.name, start, end, grid.size, grid.size)

        t0 = time.perf_counter()
        parent = self._explore(grid, start, end, tagger.on_visit)
        path = reconstruct(parent, end, start, tagger) if parent is not None else []
        elapsed = time.perf_counter() - t0

        result = PathResult(
            found=parent is not None,
            elapsed=elapsed,
            algorithm=self.name,
            path=path,
            visited=len(tagger.visited),
            expanded=self.expanded,
        )
        logger.info("%s: %s, visited=%d, path_len=%d, %.3fs",
                    self.name, "found" if result.found else "no path",
                    result.visited, result.path_len, result.elapsed)
        return result

    def _explore(self, grid: Grid, start: Coord, end: Coord,
                 visit: Visit) -> Optional[Dict[Coord, Coord]]:
        raise NotImplementedError
