# src/giftmaze/render/board.py
from __future__ import annotations
from typing import Tuple

from ..engine.snapshot import Snapshot
from .tileset import Tileset

def board_size(snap: Snapshot, tile: int) -> Tuple[int, int]:
    return snap.width * tile, snap.height * tile

def draw_board(screen, snap: Snapshot, tileset: Tileset, origin_xy: Tuple[int, int] = (0, 0)) -> None:
    ox, oy = origin_xy
    t = tileset.tile_size
    for row in snap.cells:
        for c in row:
            screen.blit(tileset.get(c.tile), (ox + c.x * t, oy + c.y * t))
