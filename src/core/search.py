# src/core/search.py
#!/usr/bin/env python3
"""
Algorithm selection and the single `find_path` entry point.

Drivers pick an algorithm by value (enum member or its label) instead of
switching on it; every choice resolves to a SearchAlgorithm with the same
run() contract.
"""

from enum import Enum
from typing import Dict, Optional, Type, Union

from src.core.astar import AStarAlgo
from src.core.base import SearchAlgorithm
from src.core.bfs import BFSAlgo
from src.core.dfs import DFSAlgo
from src.core.dijkstra import DijkstraAlgo
from src.core.greedy import GreedyAlgo
from src.core.sink import VisitationSink
from src.core.types import Coord, Grid, PathResult


class Algorithm(Enum):
    BFS = "BFS"
    DFS = "DFS"
    ASTAR = "A*"
    DIJKSTRA = "Dijkstra"
    GREEDY = "Greedy"

    @property
    def label(self) -> str:
        return self.value


# button / key order in the viewer
ALGORITHMS: Dict[Algorithm, Type[SearchAlgorithm]] = {
    Algorithm.BFS: BFSAlgo,
    Algorithm.DFS: DFSAlgo,
    Algorithm.ASTAR: AStarAlgo,
    Algorithm.DIJKSTRA: DijkstraAlgo,
    Algorithm.GREEDY: GreedyAlgo,
}

AlgorithmChoice = Union[Algorithm, str, SearchAlgorithm]


def make_algorithm(choice: AlgorithmChoice) -> SearchAlgorithm:
    if isinstance(choice, SearchAlgorithm):
        return choice
    if isinstance(choice, str):
        try:
            choice = Algorithm(choice)
        except ValueError:
            known = ", ".join(a.label for a in Algorithm)
            raise ValueError(f"unknown algorithm {choice!r} (expected one of: {known})") from None
    return ALGORITHMS[choice]()


def find_path(algorithm: AlgorithmChoice, grid: Grid, start: Optional[Coord], end: Optional[Coord],
              sink: Optional[VisitationSink] = None) -> PathResult:
    return make_algorithm(algorithm).run(grid, start, end, sink)
