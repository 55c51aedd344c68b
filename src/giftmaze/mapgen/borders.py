# src/giftmaze/mapgen/borders.py
# Border-wall discovery and the randomized repair pass.
#
# Each wall next to the hall is claimed by the first open cell (row-major
# scan, NEIGHBOR_OFFSETS order) that sees it. Repair then walks components
# and knocks out each claimed wall on a coin flip. Nothing checks that the
# result is a single region.

from typing import List

from ..grid import Cell, Grid
from ..rng import RandomSource


def find_borders(grid: Grid, hall: List[Cell]) -> List[Cell]:
    borders: List[Cell] = []
    for cell in hall:
        cell.border = []
        for n in grid.neighbors(cell):
            if not n.is_wall or n.claimed:
                continue
            n.claimed = True
            cell.border.append(n)
            borders.append(n)
    return borders


def remove_border_walls(
    grid: Grid,
    chunks: List[List[Cell]],
    rng: RandomSource,
    threshold: float = 0.5,
) -> List[Cell]:
    """
    Open a random subset of each component's claimed walls.

    Returns the cells that were opened. Clears the claimed/border scratch
    state on every cell.
    """
    opened: List[Cell] = []
    for chunk in chunks:
        for cell in chunk:
            for wall in cell.border:
                if rng.biased_bool(threshold):
                    wall.is_wall = False
                    opened.append(wall)
    for cell in grid.cells():
        cell.claimed = False
        cell.border = []
    return opened
