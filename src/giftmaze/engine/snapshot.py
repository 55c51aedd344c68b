from dataclasses import dataclass
from typing import Tuple

from ..grid import Grid
from ..tiles import tile_for


@dataclass(frozen=True)
class CellView:
    y: int
    x: int
    is_wall: bool
    player: bool
    prize: bool

    @property
    def tile(self) -> int:
        return tile_for(self.is_wall, self.player, self.prize)


@dataclass(frozen=True)
class Snapshot:
    height: int
    width: int
    cells: Tuple[Tuple[CellView, ...], ...]
    score: int
    pickups: int
    ended: bool

    def tile_matrix(self):
        return [[c.tile for c in row] for row in self.cells]


def take_snapshot(grid: Grid, score: int, pickups: int, ended: bool) -> Snapshot:
    cells = tuple(
        tuple(CellView(c.y, c.x, c.is_wall, c.player, c.prize) for c in row)
        for row in grid.rows()
    )
    return Snapshot(grid.height, grid.width, cells, score, pickups, ended)
