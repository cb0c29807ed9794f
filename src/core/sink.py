# src/core/sink.py
#!/usr/bin/env python3
"""
Visitation sinks: how a run reports progress to whoever is watching.

The engine calls on_visit when a cell is discovered and on_path for each
reconstructed path cell, synchronously, and then carries on. Pacing and
drawing belong to the sink, never to the search.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from src.core.types import CellType, Coord, Grid

VISIT = "visit"
PATH = "path"


class VisitationSink:
    def on_visit(self, cell: Coord) -> None:
        pass

    def on_path(self, cell: Coord) -> None:
        pass


class NullSink(VisitationSink):
    pass


@dataclass
class RecordingSink(VisitationSink):
    """Keeps every event in order; the viewer replays these frame by frame."""
    events: List[Tuple[str, Coord]] = field(default_factory=list)

    def on_visit(self, cell: Coord) -> None:
        self.events.append((VISIT, cell))

    def on_path(self, cell: Coord) -> None:
        self.events.append((PATH, cell))

    @property
    def visits(self) -> List[Coord]:
        return [c for kind, c in self.events if kind == VISIT]

    @property
    def path(self) -> List[Coord]:
        return [c for kind, c in self.events if kind == PATH]

    def clear(self) -> None:
        self.events.clear()


class CallbackSink(VisitationSink):
    def __init__(self, on_visit: Optional[Callable[[Coord], None]] = None,
                 on_path: Optional[Callable[[Coord], None]] = None):
        self._on_visit = on_visit
        self._on_path = on_path

    def on_visit(self, cell: Coord) -> None:
        if self._on_visit:
            self._on_visit(cell)

    def on_path(self, cell: Coord) -> None:
        if self._on_path:
            self._on_path(cell)


class GridTagger(VisitationSink):
    """
    Tags the grid as events arrive, then forwards them to the caller's sink.

    Start and End are known by coordinate, so they are protected whether or
    not the grid marks them. They are never re-tagged. Visit events for them
    are not forwarded; path events are, so the renderer sees the whole chain.
    """

    def __init__(self, grid: Grid, start: Coord, end: Coord,
                 downstream: Optional[VisitationSink] = None):
        self.grid = grid
        self.terminals = (start, end)
        self.downstream = downstream or NullSink()
        self.visited: set = set()

    def on_visit(self, cell: Coord) -> None:
        if cell in self.terminals:
            return
        x, y = cell
        self.grid.cells[y][x].type = CellType.VISITED
        self.visited.add(cell)
        self.downstream.on_visit(cell)

    def on_path(self, cell: Coord) -> None:
        if cell not in self.terminals:
            x, y = cell
            self.grid.cells[y][x].type = CellType.PATH
        self.downstream.on_path(cell)
