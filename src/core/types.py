# src/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Tuple, Optional

from src.core.errors import OutOfRange

Coord = Tuple[int, int]  # (col, row)


class CellType(Enum):
    EMPTY = "empty"
    WALL = "wall"
    START = "start"
    END = "end"
    PATH = "path"
    VISITED = "visited"


# annotations a search run leaves behind
TRANSIENT = (CellType.PATH, CellType.VISITED)
TERMINALS = (CellType.START, CellType.END)

_TEXT = {
    CellType.EMPTY: ".",
    CellType.WALL: "#",
    CellType.START: "S",
    CellType.END: "E",
    CellType.PATH: "*",
    CellType.VISITED: "o",
}
_FROM_TEXT = {ch: t for t, ch in _TEXT.items()}


@dataclass
class Cell:
    x: int
    y: int
    type: CellType = CellType.EMPTY

    @property
    def pos(self) -> Coord:
        return (self.x, self.y)


@dataclass
class Grid:
    size: int
    cells: List[List[Cell]] = field(default_factory=list)   # [row][col]

    def __post_init__(self):
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if not self.cells:
            self.cells = [[Cell(x, y) for x in range(self.size)] for y in range(self.size)]

    @classmethod
    def from_rows(cls, rows: List[str]) -> "Grid":
        """Build a square grid from text rows ('.' empty, '#' wall, 'S' start, 'E' end)."""
        n = len(rows)
        if n == 0 or any(len(r) != n for r in rows):
            raise ValueError("rows must form a non-empty square")
        grid = cls(n)
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in _FROM_TEXT:
                    raise ValueError(f"unknown cell marker {ch!r} at ({x}, {y})")
                grid.cells[y][x].type = _FROM_TEXT[ch]
        return grid

    def to_rows(self) -> List[str]:
        return ["".join(_TEXT[c.type] for c in row) for row in self.cells]

    # -------------------- topology --------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.in_bounds(x, y):
            raise OutOfRange(x, y, self.size)
        return self.cells[y][x]

    def is_passable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and self.cells[y][x].type != CellType.WALL

    def neighbors4(self, x: int, y: int) -> List[Coord]:
        """In-bounds orthogonal neighbors, always left, up, down, right."""
        candidates = [(x - 1, y), (x, y - 1), (x, y + 1), (x + 1, y)]
        return [(nx, ny) for nx, ny in candidates if self.in_bounds(nx, ny)]

    # -------------------- classification --------------------

    def __iter__(self) -> Iterator[Cell]:
        for row in self.cells:
            yield from row

    def find(self, kind: CellType) -> List[Coord]:
        return [c.pos for c in self if c.type == kind]

    def count(self, kind: CellType) -> int:
        return sum(1 for c in self if c.type == kind)

    def first(self, kind: CellType) -> Optional[Coord]:
        found = self.find(kind)
        return found[0] if found else None

    # -------------------- bulk edits --------------------

    def reset(self) -> None:
        """Every cell back to EMPTY, Start/End included."""
        for c in self:
            c.type = CellType.EMPTY

    def clear_search(self) -> None:
        """Drop PATH/VISITED annotations, keep walls and terminals."""
        for c in self:
            if c.type in TRANSIENT:
                c.type = CellType.EMPTY


@dataclass
class PathResult:
    found: bool
    elapsed: float = 0.0                  # seconds
    algorithm: str = ""
    path: List[Coord] = field(default_factory=list)   # end -> start, start excluded
    visited: int = 0
    expanded: int = 0

    @property
    def path_len(self) -> int:
        return len(self.path)
