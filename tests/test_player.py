import math

import pytest

from ballgame.core import Key, KeyboardInput, Window
from ballgame.player import (
    PLAYER_SIZE_HALF,
    PLAYER_SPEED,
    Player,
    confine_player_movement,
    player_movement,
    spawn_player,
)

WINDOW = Window(800.0, 600.0)


def keyboard_with(*keys):
    keyboard = KeyboardInput()
    for key in keys:
        keyboard.press(key)
    return keyboard


def test_spawn_in_centre():
    player = spawn_player(WINDOW)
    assert player.position == (400.0, 300.0)


def test_no_keys_no_movement():
    player = Player(100.0, 100.0)
    player_movement(player, KeyboardInput(), 0.1)
    assert player.position == (100.0, 100.0)


@pytest.mark.parametrize(
    "key, sign_x, sign_y",
    [
        (Key.RIGHT, 1, 0),
        (Key.D, 1, 0),
        (Key.LEFT, -1, 0),
        (Key.A, -1, 0),
        (Key.UP, 0, 1),
        (Key.W, 0, 1),
        (Key.DOWN, 0, -1),
        (Key.S, 0, -1),
    ],
)
def test_single_direction(key, sign_x, sign_y):
    player = Player(100.0, 100.0)
    player_movement(player, keyboard_with(key), 0.1)
    # 500 units per second for 0.1 seconds
    assert player.x == pytest.approx(100.0 + sign_x * 50.0)
    assert player.y == pytest.approx(100.0 + sign_y * 50.0)


def test_diagonal_is_normalised():
    player = Player(0.0, 0.0)
    player_movement(player, keyboard_with(Key.RIGHT, Key.UP), 0.2)
    assert math.hypot(player.x, player.y) == pytest.approx(PLAYER_SPEED * 0.2)
    assert player.x == pytest.approx(player.y)


def test_opposite_keys_cancel():
    player = Player(50.0, 50.0)
    player_movement(player, keyboard_with(Key.LEFT, Key.RIGHT), 0.5)
    assert player.position == (50.0, 50.0)


def test_arrow_and_letter_same_direction_count_once():
    player = Player(0.0, 0.0)
    player_movement(player, keyboard_with(Key.RIGHT, Key.D), 0.1)
    assert player.x == pytest.approx(PLAYER_SPEED * 0.1)


def test_confine_clamps_low():
    player = Player(-10.0, -10.0)
    confine_player_movement(player, WINDOW)
    assert player.position == (32.0, 32.0)


def test_confine_clamps_high():
    player = Player(5000.0, 5000.0)
    confine_player_movement(player, WINDOW)
    assert player.position == (WINDOW.width - PLAYER_SIZE_HALF, WINDOW.height - PLAYER_SIZE_HALF)
    assert player.position == (768.0, 568.0)


def test_confine_leaves_inside_alone():
    player = Player(200.0, 150.0)
    confine_player_movement(player, WINDOW)
    assert player.position == (200.0, 150.0)