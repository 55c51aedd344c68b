from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

# 3x3 square minus dy == -dx: drops the centre and the (-1,1)/(1,-1) diagonal.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (dy, dx)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if dy != -dx
)


@dataclass(eq=False)
class Cell:
    y: int
    x: int
    is_wall: bool = False

    # occupancy
    player: bool = False
    prize: bool = False

    # generation scratch; empty outside MazeGenerator passes
    seen: bool = False
    claimed: bool = False
    border: List["Cell"] = field(default_factory=list)

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.y, self.x)

    def same_place(self, other: Optional["Cell"]) -> bool:
        return other is not None and self.pos == other.pos


@dataclass
class Grid:
    height: int
    width: int
    buf: List[List[Cell]] = field(default_factory=list)

    @classmethod
    def empty(cls, height: int, width: int) -> "Grid":
        buf = [[Cell(y, x) for x in range(width)] for y in range(height)]
        return cls(height=height, width=width, buf=buf)

    def in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.height and 0 <= x < self.width

    def get(self, y: int, x: int) -> Optional[Cell]:
        if not self.in_bounds(y, x):
            return None
        return self.buf[y][x]

    def rows(self) -> List[List[Cell]]:
        return self.buf

    def cells(self) -> List[Cell]:
        return [c for row in self.buf for c in row]

    def open_cells(self) -> List[Cell]:
        return [c for row in self.buf for c in row if not c.is_wall]

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        for dy, dx in NEIGHBOR_OFFSETS:
            n = self.get(cell.y + dy, cell.x + dx)
            if n is not None:
                yield n

    def as_wall_matrix(self) -> List[List[bool]]:
        return [[c.is_wall for c in row] for row in self.buf]
