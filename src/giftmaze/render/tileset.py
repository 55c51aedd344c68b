# src/giftmaze/render/tileset.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Dict, Tuple

from ..tiles import HALL, WALL, PRIZE, PLAYER

RGBA = Tuple[int, int, int, int]

TILE_COLORS: Dict[int, RGBA] = {
    HALL:   (220, 220, 220, 255),
    WALL:   ( 80,  80,  80, 255),
    PRIZE:  (  0, 200,  60, 255),
    PLAYER: (230,  60,  40, 255),
}

def tile_color(tile_id: int) -> RGBA:
    return TILE_COLORS.get(tile_id, (255, 0, 255, 255))

class Tileset:
    """
    Tiny cached surface factory: one flat square per tile ID, with the
    player and prize drawn as discs over the hall colour.
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=64)
    def get(self, tile_id: int) -> pygame.Surface:
        size = self.tile_size
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        if tile_id in (PRIZE, PLAYER):
            img.fill(tile_color(HALL))
            pygame.draw.circle(img, tile_color(tile_id), (size // 2, size // 2), max(1, size * 2 // 5))
        else:
            img.fill(tile_color(tile_id))
        return img
