"""Enemy balls: spawning, bouncing around the window and hitting the player."""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable, MutableSequence
from dataclasses import dataclass

from ballgame.core import Window
from ballgame.player import PLAYER_SIZE_HALF, Player
from ballgame.timer import RepeatingTimer

ENEMY_SIZE = 64.0
ENEMY_SIZE_HALF = ENEMY_SIZE / 2.0
ENEMY_SIZE_8X = ENEMY_SIZE * 8.0
NUMBER_OF_ENEMIES = 4
ENEMY_SPEED = 200.0

ENEMY_SPRITE = "sprites/ball_red_large.png"
ENEMY_BOUNCE_SOUNDS = ("audio/pluck_001.ogg", "audio/pluck_002.ogg")
EXPLOSION_SOUND = "audio/explosionCrunch_000.ogg"

_log = logging.getLogger(__name__)


@dataclass
class Enemy:
    """An enemy ball, positioned by its centre and moving along ``direction``."""

    x: float
    y: float
    dx: float
    dy: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def direction(self) -> tuple[float, float]:
        return (self.dx, self.dy)


def _random_point(window: Window, rng: random.Random) -> tuple[float, float]:
    x = rng.random() * window.width
    y = rng.random() * window.height
    return x, y


def _too_close(x: float, y: float, player_position: tuple[float, float]) -> bool:
    px, py = player_position
    return abs(x - px) < ENEMY_SIZE_8X and abs(y - py) < ENEMY_SIZE_8X


def spawn_initial_enemies(
    window: Window,
    player_position: tuple[float, float] | None,
    rng: random.Random,
) -> list[Enemy]:
    """Try to place ``NUMBER_OF_ENEMIES`` enemies, skipping spots near the player.

    Without a player the origin is used as the player's position.
    """
    centre = player_position if player_position is not None else (0.0, 0.0)
    enemies: list[Enemy] = []
    for _ in range(NUMBER_OF_ENEMIES):
        x, y = _random_point(window, rng)
        if _too_close(x, y, centre):
            _log.info("Enemy spawn too close to player, skipping spawn")
            continue
        enemies.append(Enemy(x, y, rng.random(), rng.random()))
    return enemies


def enemy_movement(enemies: Iterable[Enemy], delta: float) -> None:
    """Move every enemy along its direction for ``delta`` seconds."""
    for enemy in enemies:
        enemy.x += enemy.dx * ENEMY_SPEED * delta
        enemy.y += enemy.dy * ENEMY_SPEED * delta


def _bounds(window: Window) -> tuple[float, float, float, float]:
    return (
        ENEMY_SIZE_HALF,
        window.width - ENEMY_SIZE_HALF,
        ENEMY_SIZE_HALF,
        window.height - ENEMY_SIZE_HALF,
    )


def confine_enemy_movement(enemies: Iterable[Enemy], window: Window) -> None:
    """Keep every enemy wholly inside the window."""
    x_min, x_max, y_min, y_max = _bounds(window)
    for enemy in enemies:
        if enemy.x < x_min:
            enemy.x = x_min
        elif enemy.x > x_max:
            enemy.x = x_max
        if enemy.y < y_min:
            enemy.y = y_min
        elif enemy.y > y_max:
            enemy.y = y_max


def update_enemy_direction(
    enemies: Iterable[Enemy], window: Window, rng: random.Random
) -> list[str]:
    """Reverse enemies that left the play area on an axis.

    Returns the sound effect to play for each enemy that bounced.
    """
    x_min, x_max, y_min, y_max = _bounds(window)
    sounds: list[str] = []
    for enemy in enemies:
        changed = False
        if enemy.x < x_min or enemy.x > x_max:
            enemy.dx *= -1.0
            changed = True
        if enemy.y < y_min or enemy.y > y_max:
            enemy.dy *= -1.0
            changed = True
        if changed:
            sounds.append(rng.choice(ENEMY_BOUNCE_SOUNDS))
    return sounds


def enemy_hit_player(enemies: Iterable[Enemy], player: Player | None) -> bool:
    """True if any enemy touches the player, which ends the game."""
    if player is None:
        return False
    hit = False
    for enemy in enemies:
        distance = math.hypot(player.x - enemy.x, player.y - enemy.y)
        if distance < PLAYER_SIZE_HALF + ENEMY_SIZE_HALF:
            _log.info("Enemy hit player! Game Over!")
            hit = True
    return hit


def spawn_enemy_over_time(
    window: Window,
    player_position: tuple[float, float] | None,
    timer: RepeatingTimer,
    rng: random.Random,
) -> Enemy | None:
    """Return a new enemy when the spawn timer has just finished.

    No enemy is made if the chosen spot is too close to the player.
    The new enemy's direction has unit length.
    """
    if not timer.finished:
        return None
    x, y = _random_point(window, rng)
    if player_position is not None and _too_close(x, y, player_position):
        _log.info("Enemy spawn too close to player, skipping spawn")
        return None
    dx, dy = rng.random(), rng.random()
    length = math.hypot(dx, dy)
    if length > 0.0:
        dx /= length
        dy /= length
    return Enemy(x, y, dx, dy)


def remove_all(enemies: MutableSequence[Enemy]) -> None:
    """Despawn every enemy."""
    del enemies[:]