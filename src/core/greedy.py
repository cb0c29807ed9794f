# src/core/greedy.py
#!/usr/bin/env python3
from dataclasses import dataclass
from typing import Dict, Optional

from src.core.base import SearchAlgorithm, Visit, manhattan
from src.core.frontier import PriorityFrontier
from src.core.types import Coord, Grid


@dataclass
class GreedyAlgo(SearchAlgorithm):
    """
    Greedy best-first: always expand whatever looks closest to the goal.

    Priority is the Manhattan distance to end only, path cost is ignored,
    so the result is fast to find and not optimal.
    """
    name: str = "Greedy"

    def _explore(self, grid: Grid, start: Coord, end: Coord,
                 visit: Visit) -> Optional[Dict[Coord, Coord]]:
        frontier = PriorityFrontier()
        visited = {start}
        parent: Dict[Coord, Coord] = {}
        frontier.push(start, manhattan(start, end))

        while frontier:
            _, u = frontier.pop()
            self.expanded += 1
            if u == end:
                return parent

            for v in grid.neighbors4(*u):
                if v in visited or not grid.is_passable(*v):
                    continue
                visited.add(v)
                parent[v] = u
                frontier.push(v, manhattan(v, end))
                visit(v)
        return None
