"""A repeating countdown timer driven by frame deltas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

ENEMY_SPAWN_TIME = 10.0
STAR_SPAWN_TIME = 1.0

_MAX_TIMES = 2**32 - 1


@dataclass
class RepeatingTimer:
    """Timer that finishes every ``duration`` seconds and then starts over."""

    duration: float
    elapsed: float = 0.0
    finished: bool = field(default=False, init=False)
    times_finished_this_tick: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.duration < 0:
            raise ValueError(f"timer duration must not be negative: {self.duration}")
        if self.elapsed < 0:
            raise ValueError(f"elapsed time must not be negative: {self.elapsed}")

    def tick(self, delta: float) -> int:
        """Advance by ``delta`` seconds; return how many times the timer finished."""
        if delta < 0:
            raise ValueError(f"tick delta must not be negative: {delta}")
        self.elapsed += delta
        self.finished = self.elapsed >= self.duration
        if not self.finished:
            self.times_finished_this_tick = 0
        elif self.duration == 0:
            self.times_finished_this_tick = _MAX_TIMES
            self.elapsed = 0.0
        else:
            self.times_finished_this_tick = int(self.elapsed // self.duration)
            self.elapsed = math.fmod(self.elapsed, self.duration)
        return self.times_finished_this_tick

    def reset(self) -> None:
        """Start the timer over from zero."""
        self.elapsed = 0.0
        self.finished = False
        self.times_finished_this_tick = 0


def enemy_spawn_timer() -> RepeatingTimer:
    """Timer that signals when a new enemy should appear."""
    return RepeatingTimer(ENEMY_SPAWN_TIME)


def star_spawn_timer() -> RepeatingTimer:
    """Timer that signals when a new star should appear."""
    return RepeatingTimer(STAR_SPAWN_TIME)