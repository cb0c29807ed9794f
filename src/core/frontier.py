# src/core/frontier.py
#!/usr/bin/env python3
"""
Frontier containers, one fresh instance per run.

All three expose push / pop / __len__ so the search loop does not care
which ordering it is driving.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Tuple
import heapq

from src.core.types import Coord


@dataclass
class FifoFrontier:
    items: Deque[Coord] = field(default_factory=deque)

    def push(self, cell: Coord) -> None:
        self.items.append(cell)

    def pop(self) -> Coord:
        return self.items.popleft()

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class LifoFrontier:
    items: List[Coord] = field(default_factory=list)

    def push(self, cell: Coord) -> None:
        self.items.append(cell)

    def pop(self) -> Coord:
        return self.items.pop()

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class PriorityFrontier:
    """
    Min-priority queue keyed by a float priority.

    Entries are (priority, seq, cell); seq is a monotonic counter so equal
    priorities come out in insertion order and cells are never compared.
    """
    heap: List[Tuple[float, int, Coord]] = field(default_factory=list)
    seq: int = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def push(self, cell: Coord, priority: float) -> None:
        heapq.heappush(self.heap, (priority, self._bump(), cell))

    def pop(self) -> Tuple[float, Coord]:
        priority, _, cell = heapq.heappop(self.heap)
        return priority, cell

    def __len__(self) -> int:
        return len(self.heap)
