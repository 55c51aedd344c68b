# src/giftmaze/ui/hud.py
from typing import Tuple

def counter_digits(value: int, nd: int) -> Tuple[int, ...]:
    """
    Zero-padded digits of a HUD counter, most significant first. Values that
    don't fit are clamped to the largest nd-digit number.
    """
    if nd <= 0:
        raise ValueError("nd must be positive")
    value = max(0, min(value, 10 ** nd - 1))
    return tuple(int(ch) for ch in f"{value:0{nd}d}")

def score_digits(score: int) -> Tuple[int, ...]:
    # Score starts at height*width; 6 digits covers any board that fits a screen.
    return counter_digits(score, 6)
