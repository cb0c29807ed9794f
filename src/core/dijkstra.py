# src/core/dijkstra.py
#!/usr/bin/env python3
from dataclasses import dataclass
from math import inf
from typing import Dict, Optional

from src.core.base import SearchAlgorithm, Visit
from src.core.frontier import PriorityFrontier
from src.core.types import Coord, Grid


@dataclass
class DijkstraAlgo(SearchAlgorithm):
    name: str = "Dijkstra"

    def _new_frontier(self) -> PriorityFrontier:
        return PriorityFrontier()

    def _explore(self, grid: Grid, start: Coord, end: Coord,
                 visit: Visit) -> Optional[Dict[Coord, Coord]]:
        frontier = self._new_frontier()
        dist: Dict[Coord, float] = {start: 0.0}
        parent: Dict[Coord, Coord] = {}
        frontier.push(start, 0.0)

        while frontier:
            d_u, u = frontier.pop()
            if u == end:
                self.expanded += 1
                return parent

            # Ignore stale pops
            if d_u > dist.get(u, inf):
                continue
            self.expanded += 1

            for v in grid.neighbors4(*u):
                if not grid.is_passable(*v):
                    continue
                alt = d_u + 1
                if alt < dist.get(v, inf):
                    dist[v] = alt
                    parent[v] = u
                    frontier.push(v, alt)
                    visit(v)
        return None
