# src/core/errors.py
#!/usr/bin/env python3
"""Exceptions raised by the grid search core."""


class GridSearchError(Exception):
    """Base class for everything the search core raises on purpose."""


class OutOfRange(GridSearchError, IndexError):
    def __init__(self, x: int, y: int, size: int):
        self.x = x
        self.y = y
        self.size = size
        super().__init__(f"({x}, {y}) is outside the {size}x{size} grid")


class InvalidEndpoints(GridSearchError, ValueError):
    """Start/End missing, duplicated, equal, out of bounds or blocked."""


class BrokenChain(GridSearchError, RuntimeError):
    """Predecessor map does not lead back to the start cell."""
