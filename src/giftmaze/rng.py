import os
from dataclasses import dataclass
from typing import Protocol

A = 16807
M = 0x7FFFFFFF  # 2^31-1


class RandomSource(Protocol):
    def random(self) -> float: ...
    def biased_bool(self, threshold: float = 0.5) -> bool: ...


def pm_next(state: int) -> int:
    return (state * A) % M


def seed_from_entropy() -> int:
    """Fresh Park–Miller seed in 1..M-1 drawn from the OS."""
    return int.from_bytes(os.urandom(4), "little") % (M - 1) + 1


@dataclass
class PMRandom:
    state: int

    def __post_init__(self) -> None:
        # 0 and multiples of M are fixed points of the generator
        self.state %= M
        if self.state == 0:
            self.state = 1

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def random(self) -> float:
        # next32() is 1..M-1, so this lands in [0, 1)
        return (self.next32() - 1) / (M - 1)

    def biased_bool(self, threshold: float = 0.5) -> bool:
        """True with probability 1 - threshold."""
        return self.random() > threshold
