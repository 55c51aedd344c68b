# src/giftmaze/engine/entity.py
# One placeable/movable thing on the grid. Behaviour that differs between the
# player and the prize lives in the injected rule (see collisions.py).

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Protocol, Tuple

from ..grid import Cell, Grid


class OccupancyRule(Protocol):
    flag: str
    def allows(self, cell: Cell) -> bool: ...
    def on_enter(self, cell: Cell) -> Dict[str, bool]: ...


@dataclass
class Entity:
    grid: Grid
    rule: OccupancyRule
    pick: Callable[[], Cell]
    cell: Optional[Cell] = None
    last_events: Dict[str, bool] = field(default_factory=dict)

    @property
    def pos(self) -> Optional[Tuple[int, int]]:
        return self.cell.pos if self.cell is not None else None

    def place(self, cell: Cell, *, effects: bool = True) -> bool:
        if not self.rule.allows(cell):
            return False
        flag = self.rule.flag
        if self.cell is not None:
            setattr(self.cell, flag, False)
        # Rules see the new position before the flag lands (pickup refresh
        # must avoid it).
        self.cell = cell
        self.last_events = self.rule.on_enter(cell) if effects else {}
        setattr(cell, flag, True)
        return True

    def refresh(self) -> Cell:
        """Re-place on random open cells until the rule accepts one."""
        while True:
            cell = self.pick()
            if self.place(cell, effects=False):
                return cell

    def move_to(self, y: int, x: int) -> bool:
        cell = self.grid.get(y, x)
        if cell is None or cell.is_wall:
            return False
        return self.place(cell)

    def move_by(self, dy: int, dx: int) -> bool:
        if self.cell is None:
            return False
        return self.move_to(self.cell.y + dy, self.cell.x + dx)
