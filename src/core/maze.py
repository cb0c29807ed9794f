# src/core/maze.py
#!/usr/bin/env python3
import logging
import random
from typing import Optional

from src.core.types import CellType, Grid, TERMINALS

logger = logging.getLogger(__name__)


def generate_random_walls(grid: Grid, probability: float = 0.3,
                          rng: Optional[random.Random] = None) -> int:
    """Bernoulli wall fill over every non-terminal cell. Returns the wall count."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"wall probability must be within [0, 1], got {probability}")
    rng = rng or random.Random()

    walls = 0
    for c in grid:
        if c.type in TERMINALS:
            continue
        if rng.random() < probability:
            c.type = CellType.WALL
            walls += 1
        else:
            c.type = CellType.EMPTY
    logger.debug("random walls: %d of %d cells (p=%.2f)", walls, grid.size * grid.size, probability)
    return walls
