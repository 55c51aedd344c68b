# src/giftmaze/engine/state.py
# GameState orchestrator: builds the maze, places player and prize, runs the
# score/finish state machine. No rendering, no timers.

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from ..config import DEFAULT_CONFIG, GameConfig
from ..errors import InvalidDimensions, NotEnoughOpenCells
from ..grid import Cell, Grid
from ..mapgen.generator import generate_grid
from ..mapgen.placement import PickStats, random_open_cell
from ..rng import PMRandom, RandomSource, seed_from_entropy
from .collisions import PlayerRule, PrizeRule
from .entity import Entity
from .snapshot import Snapshot, take_snapshot

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

# (dy, dx) per input direction
DIRECTIONS: Dict[str, XY] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def _valid_dim(v) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v > 0


@dataclass
class TickOut:
    score: int
    pickups: int
    ended: bool


class GameState:
    def __init__(
        self,
        height: int,
        width: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[RandomSource] = None,
        config: Optional[GameConfig] = None,
        on_finish: Optional[Callable[["GameState"], None]] = None,
        grid: Optional[Grid] = None,
    ) -> None:
        if not (_valid_dim(height) and _valid_dim(width)):
            raise InvalidDimensions(height, width)
        if grid is not None and (grid.height, grid.width) != (height, width):
            raise InvalidDimensions(height, width)

        self.config = config or DEFAULT_CONFIG
        if rng is None:
            self.seed = seed if seed is not None else seed_from_entropy()
            rng = PMRandom(self.seed)
        else:
            self.seed = seed
        self.rng = rng
        self.pick_stats = PickStats()

        # Map
        self.grid = grid if grid is not None else generate_grid(height, width, self.rng, self.config)
        if len(self.grid.open_cells()) < 2:
            raise NotEnoughOpenCells("maze needs at least two open cells for player and prize")

        # Score
        square = height * width
        self.score = square
        self.prize_value = math.isqrt(square)
        self.pickups = 0
        self.ended = False
        self.on_finish = on_finish

        # Entities: player first, prize must then avoid it
        self.player = Entity(grid=self.grid, rule=PlayerRule(self), pick=self.random_open_cell)
        self.prize = Entity(grid=self.grid, rule=PrizeRule(self), pick=self.random_open_cell)
        self.player.refresh()
        self.prize.refresh()

        logger.debug(
            "session %dx%d seed=%s player=%s prize=%s",
            height, width, self.seed, self.player.pos, self.prize.pos,
        )

    @property
    def height(self) -> int:
        return self.grid.height

    @property
    def width(self) -> int:
        return self.grid.width

    def random_open_cell(self) -> Cell:
        return random_open_cell(
            self.grid,
            self.rng,
            threshold=self.config.pick_threshold,
            max_passes=self.config.max_pick_passes,
            stats=self.pick_stats,
        )

    # ---- Input ----
    def move_player(self, dy: int, dx: int) -> bool:
        """Step the player by (dy, dx). False if blocked or the game is over."""
        if self.ended:
            return False
        return self.player.move_by(dy, dx)

    def move_player_to(self, y: int, x: int) -> bool:
        if self.ended:
            return False
        return self.player.move_to(y, x)

    # ---- Lifecycle ----
    def finish(self) -> None:
        if self.ended:
            return
        self.ended = True
        logger.debug("session finished, pickups=%d", self.pickups)
        if self.on_finish is not None:
            self.on_finish(self)

    # ---- Polling ----
    def tick(self) -> TickOut:
        return TickOut(score=self.score, pickups=self.pickups, ended=self.ended)

    def snapshot(self) -> Snapshot:
        return take_snapshot(self.grid, self.score, self.pickups, self.ended)
