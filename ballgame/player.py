"""The player ball: spawning, keyboard movement and keeping it on screen."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ballgame.core import Key, KeyboardInput, Window

PLAYER_SIZE = 64.0
PLAYER_SIZE_HALF = PLAYER_SIZE / 2.0
PLAYER_SPEED = 500.0
PLAYER_SPRITE = "sprites/ball_blue_large.png"

_CONTROLS = (
    ((Key.LEFT, Key.A), (-1.0, 0.0)),
    ((Key.RIGHT, Key.D), (1.0, 0.0)),
    ((Key.UP, Key.W), (0.0, 1.0)),
    ((Key.DOWN, Key.S), (0.0, -1.0)),
)


@dataclass
class Player:
    """The player's ball, positioned by its centre."""

    x: float
    y: float

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)


def spawn_player(window: Window) -> Player:
    """Place a new player in the middle of the window."""
    return Player(window.width / 2.0, window.height / 2.0)


def player_movement(player: Player | None, keyboard: KeyboardInput, delta: float) -> None:
    """Move the player along the held arrow or WASD keys for ``delta`` seconds."""
    if player is None:
        return
    dx = dy = 0.0
    for keys, (step_x, step_y) in _CONTROLS:
        if any(keyboard.pressed(key) for key in keys):
            dx += step_x
            dy += step_y
    length = math.hypot(dx, dy)
    if length > 0.0:
        dx /= length
        dy /= length
    player.x += dx * PLAYER_SPEED * delta
    player.y += dy * PLAYER_SPEED * delta


def _bound(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def confine_player_movement(player: Player | None, window: Window) -> None:
    """Keep the whole ball inside the window."""
    if player is None:
        return
    player.x = _bound(player.x, PLAYER_SIZE_HALF, window.width - PLAYER_SIZE_HALF)
    player.y = _bound(player.y, PLAYER_SIZE_HALF, window.height - PLAYER_SIZE_HALF)