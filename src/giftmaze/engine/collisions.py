# src/giftmaze/engine/collisions.py
# Occupancy rules: which cells an entity may take and what happens when the
# player steps onto one. Entity stays rule-agnostic; GameState wires these in.

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict

from ..grid import Cell

if TYPE_CHECKING:
    from .state import GameState

logger = logging.getLogger(__name__)


# ---------- Enter effects ----------

def on_enter_player(state: "GameState", cell: Cell) -> Dict[str, bool]:
    """
    Scoring step for one player move. Exactly one branch fires, in order:
    pickup, then finish at zero, then decay by one.
    """
    events = {"prize_collected": False, "finished": False}

    if cell.same_place(state.prize.cell):
        state.score += state.prize_value
        state.pickups += 1
        state.prize.refresh()
        events["prize_collected"] = True
        logger.debug("prize collected at %s, score=%d", cell.pos, state.score)
        return events

    if state.score <= 0:
        state.finish()
        events["finished"] = True
        return events

    state.score -= 1
    return events


# ---------- Rules ----------

class PlayerRule:
    flag = "player"

    def __init__(self, state: "GameState") -> None:
        self.state = state

    def allows(self, cell: Cell) -> bool:
        return not cell.is_wall

    def on_enter(self, cell: Cell) -> Dict[str, bool]:
        return on_enter_player(self.state, cell)


class PrizeRule:
    flag = "prize"

    def __init__(self, state: "GameState") -> None:
        self.state = state

    def allows(self, cell: Cell) -> bool:
        if cell.is_wall or cell.player:
            return False
        return not cell.same_place(self.state.player.cell)

    def on_enter(self, cell: Cell) -> Dict[str, bool]:
        return {}
