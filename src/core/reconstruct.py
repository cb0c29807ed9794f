# src/core/reconstruct.py
#!/usr/bin/env python3
from typing import Dict, List, Optional

from src.core.errors import BrokenChain
from src.core.sink import VisitationSink
from src.core.types import Coord


def reconstruct(parent: Dict[Coord, Coord], end: Coord, start: Coord,
                sink: Optional[VisitationSink] = None) -> List[Coord]:
    """
    Walk predecessor links from end back to start.

    Returns the cells in end -> start order with start itself left out, and
    reports each one to the sink in that same order. The map is only read,
    so calling this twice gives the same sequence.
    """
    path: List[Coord] = []
    seen = set()
    cur = end
    while cur != start:
        if cur in seen:
            raise BrokenChain(f"cycle through {cur} while walking back from {end}")
        if cur not in parent:
            raise BrokenChain(f"{cur} has no predecessor, cannot reach start {start}")
        seen.add(cur)
        path.append(cur)
        cur = parent[cur]

    if sink is not None:
        for c in path:
            sink.on_path(c)
    return path
