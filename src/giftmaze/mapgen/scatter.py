# src/giftmaze/mapgen/scatter.py
# Initial wall scatter: every cell flips an independent biased coin.

from ..grid import Grid
from ..rng import RandomSource


def scatter_walls(height: int, width: int, rng: RandomSource, threshold: float = 0.5) -> Grid:
    """
    Return a fresh height×width grid, drawing is_wall per cell in row-major
    order. With the default threshold roughly half the cells are walls.
    """
    grid = Grid.empty(height, width)
    for row in grid.rows():
        for cell in row:
            cell.is_wall = rng.biased_bool(threshold)
    return grid
