# src/core/dfs.py
#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Dict, Optional

from src.core.base import SearchAlgorithm, Visit
from src.core.frontier import LifoFrontier
from src.core.types import Coord, Grid


@dataclass
class DFSAlgo(SearchAlgorithm):
    """
    Depth-first with an explicit stack.

    Cells are marked on push, so a cell keeps the predecessor that first saw
    it; the last neighbor pushed is the first one explored. Paths are valid
    but usually far from shortest.
    """
    name: str = "DFS"

    def _explore(self, grid: Grid, start: Coord, end: Coord,
                 visit: Visit) -> Optional[Dict[Coord, Coord]]:
        frontier = LifoFrontier()
        visited = {start}
        parent: Dict[Coord, Coord] = {}
        frontier.push(start)

        while frontier:
            u = frontier.pop()
            self.expanded += 1
            if u == end:
                return parent

            for v in grid.neighbors4(*u):
                if v in visited or not grid.is_passable(*v):
                    continue
                visited.add(v)
                parent[v] = u
                frontier.push(v)
                visit(v)
        return None
