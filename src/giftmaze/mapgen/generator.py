# src/giftmaze/mapgen/generator.py
# Maze generation: scatter, find components, find borders, repair.

import logging
from typing import Optional

from ..config import DEFAULT_CONFIG, GameConfig
from ..grid import Grid
from ..rng import RandomSource
from .borders import find_borders, remove_border_walls
from .chunks import find_chunks
from .scatter import scatter_walls

logger = logging.getLogger(__name__)


def generate_grid(height: int, width: int, rng: RandomSource, config: Optional[GameConfig] = None) -> Grid:
    config = config or DEFAULT_CONFIG

    grid = scatter_walls(height, width, rng, threshold=config.wall_threshold)
    hall = grid.open_cells()
    chunks = find_chunks(grid, hall)
    borders = find_borders(grid, hall)
    opened = remove_border_walls(grid, chunks, rng, threshold=config.repair_threshold)

    logger.debug(
        "generated %dx%d maze: %d open, %d components, %d border walls, %d removed",
        height, width, len(hall), len(chunks), len(borders), len(opened),
    )
    return grid
