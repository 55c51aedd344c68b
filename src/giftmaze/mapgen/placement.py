# src/giftmaze/mapgen/placement.py
from dataclasses import dataclass
from typing import Optional

from ..errors import NoOpenCells, RetryLimitExceeded
from ..grid import Cell, Grid
from ..rng import RandomSource


@dataclass
class PickStats:
    passes: int = 0
    draws: int = 0


def random_open_cell(
    grid: Grid,
    rng: RandomSource,
    threshold: float = 0.998,
    max_passes: Optional[int] = None,
    stats: Optional[PickStats] = None,
) -> Cell:
    """
    Sweep the hall in row-major order, accepting each candidate with
    probability 1 - threshold, and start over until one is accepted.

    At the default threshold a sweep succeeds ~0.2% per cell, so this
    typically takes hundreds of passes. There is no bound unless max_passes
    is given, in which case RetryLimitExceeded is raised once it is used up.
    """
    hall = grid.open_cells()
    if not hall:
        raise NoOpenCells("maze has no open cells to place on")
    if stats is None:
        stats = PickStats()
    passes = 0
    while True:
        if max_passes is not None and passes >= max_passes:
            raise RetryLimitExceeded(passes)
        passes += 1
        stats.passes += 1
        for cell in hall:
            stats.draws += 1
            if rng.biased_bool(threshold):
                return cell
