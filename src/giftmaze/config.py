from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True)
class GameConfig:
    # Draw thresholds; biased_bool(t) is true with probability 1 - t.
    wall_threshold: float = 0.5
    repair_threshold: float = 0.5
    pick_threshold: float = 0.998
    # None keeps random_open_cell unbounded.
    max_pick_passes: Optional[int] = None

# Global defaults (can be swapped by launcher)
DEFAULT_CONFIG = GameConfig()
