"""
Configuration for the grid search visualizer.

Defaults live here as module constants. Environment variables override
them, and `--key=value` command-line flags override the environment.
"""

import os
import sys
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

# =============================================================================
# Grid Configuration
# =============================================================================

# Cells per side; the grid is always square
GRID_SIZE = 40

# Probability that "Generate Random Maze" turns a cell into a wall
WALL_PROBABILITY = 0.3

# =============================================================================
# Animation Configuration
# =============================================================================

# Delay between two replayed visitation events (milliseconds)
VISUALIZATION_DELAY_MS = 10

# Bounds for the speed +/- controls (events per second)
MIN_STEPS_PER_SEC = 1
MAX_STEPS_PER_SEC = 1000

# =============================================================================
# Window Configuration
# =============================================================================

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
PANEL_W = 300
GRID_MARGIN = 16
FPS = 60

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# =============================================================================
# Runtime settings
# =============================================================================

ENV_PREFIX = "GRID_SEARCH_"


@dataclass(frozen=True)
class Settings:
    grid_size: int = GRID_SIZE
    delay_ms: int = VISUALIZATION_DELAY_MS
    wall_probability: float = WALL_PROBABILITY
    log_level: str = LOG_LEVEL

    @property
    def steps_per_sec(self) -> int:
        if self.delay_ms <= 0:
            return MAX_STEPS_PER_SEC
        return max(MIN_STEPS_PER_SEC, min(MAX_STEPS_PER_SEC, round(1000 / self.delay_ms)))


def _parse_int(name: str, raw: str, minimum: int) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def _parse_probability(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{name} must be within [0, 1], got {value}")
    return value


def resolve_settings(argv: Optional[Sequence[str]] = None,
                     environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Defaults, then GRID_SEARCH_* environment variables, then --size= / --delay= / --wall-prob= flags."""
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ

    raw = {
        "size": environ.get(f"{ENV_PREFIX}SIZE"),
        "delay": environ.get(f"{ENV_PREFIX}DELAY_MS"),
        "wall-prob": environ.get(f"{ENV_PREFIX}WALL_PROB"),
        "log-level": environ.get("LOG_LEVEL"),
    }
    for arg in argv:
        if arg.startswith("--") and "=" in arg:
            key, value = arg[2:].split("=", 1)
            if key in raw:
                raw[key] = value

    return Settings(
        grid_size=_parse_int("size", raw["size"], 2) if raw["size"] is not None else GRID_SIZE,
        delay_ms=_parse_int("delay", raw["delay"], 0) if raw["delay"] is not None else VISUALIZATION_DELAY_MS,
        wall_probability=(_parse_probability("wall-prob", raw["wall-prob"])
                          if raw["wall-prob"] is not None else WALL_PROBABILITY),
        log_level=(raw["log-level"] or LOG_LEVEL).upper(),
    )
