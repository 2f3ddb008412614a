"""Stars for the player to collect."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

from ballgame.core import Window
from ballgame.player import PLAYER_SIZE_HALF, Player
from ballgame.timer import RepeatingTimer

NUMBER_OF_STARS = 10
STAR_SIZE = 30.0
STAR_SIZE_HALF = STAR_SIZE / 2.0

STAR_SPRITE = "sprites/star.png"
STAR_SOUND = "audio/laserLarge_000.ogg"


@dataclass
class Star:
    """A collectable star, positioned by its centre."""

    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def _random_star(window: Window, rng: random.Random) -> Star:
    x = rng.random() * window.width
    y = rng.random() * window.height
    return Star(x, y)


def spawn_stars(window: Window, rng: random.Random) -> list[Star]:
    """Scatter ``NUMBER_OF_STARS`` stars over the window."""
    return [_random_star(window, rng) for _ in range(NUMBER_OF_STARS)]


def player_hit_star(player: Player | None, stars: list[Star]) -> list[Star]:
    """Remove the stars the player touches from ``stars`` and return them.

    Each collected star is worth one point.
    """
    if player is None:
        return []
    reach = PLAYER_SIZE_HALF + STAR_SIZE_HALF
    collected: list[Star] = []
    remaining: list[Star] = []
    for star in stars:
        if math.hypot(player.x - star.x, player.y - star.y) < reach:
            collected.append(star)
        else:
            remaining.append(star)
    stars[:] = remaining
    return collected


def spawn_star_over_time(
    window: Window, timer: RepeatingTimer, rng: random.Random
) -> Star | None:
    """Return a new star when the spawn timer has just finished."""
    if not timer.finished:
        return None
    return _random_star(window, rng)