# src/giftmaze/engine/timing.py
# Redraw cadence for session drivers. The engine itself never schedules.

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TimingModel:
    redraw_interval_ms: int = 100   # periodic redraw of the board
    finish_delay_ms: int = 100      # pause between finish and the end banner
    fps: int = 60                   # driver loop rate

    def frames(self, ms: int) -> int:
        """Driver frames covering `ms` milliseconds (at least one)."""
        return max(1, round(ms * self.fps / 1000))

    @property
    def redraw_frames(self) -> int:
        return self.frames(self.redraw_interval_ms)

    @property
    def finish_delay_frames(self) -> int:
        return self.frames(self.finish_delay_ms)
