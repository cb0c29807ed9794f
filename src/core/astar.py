# src/core/astar.py
#!/usr/bin/env python3
"""
A* over the 4-connected grid.

g = steps from start (every edge costs 1), h = Manhattan distance to end.
Manhattan never overestimates on a 4-connected unit grid, so the path
length always matches Dijkstra's. Equal f values come out of the queue in
insertion order.
"""

from dataclasses import dataclass
from math import inf
from typing import Dict, Optional

from src.core.base import SearchAlgorithm, Visit, manhattan
from src.core.frontier import PriorityFrontier
from src.core.types import Coord, Grid


@dataclass
class AStarAlgo(SearchAlgorithm):
    name: str = "A*"

    def _explore(self, grid: Grid, start: Coord, end: Coord,
                 visit: Visit) -> Optional[Dict[Coord, Coord]]:
        frontier = PriorityFrontier()
        g: Dict[Coord, float] = {start: 0.0}
        parent: Dict[Coord, Coord] = {}
        frontier.push(start, manhattan(start, end))

        while frontier:
            f_u, u = frontier.pop()
            if u == end:
                self.expanded += 1
                return parent

            g_u = g[u]
            # Ignore stale pops: a better g was pushed after this entry
            if f_u > g_u + manhattan(u, end):
                continue
            self.expanded += 1

            for v in grid.neighbors4(*u):
                if not grid.is_passable(*v):
                    continue
                tentative = g_u + 1
                if tentative < g.get(v, inf):
                    g[v] = tentative
                    parent[v] = u
                    frontier.push(v, tentative + manhattan(v, end))
                    visit(v)
        return None
