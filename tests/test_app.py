import random

import pytest

from ballgame.app import Game, main_menu
from ballgame.core import AppState, Key, SimulationState
from ballgame.enemy import Enemy
from ballgame.interactions import Interaction
from ballgame.menus import Marker
from ballgame.star import STAR_SOUND, Star


def _tap(game, key):
    game.keyboard.press(key)
    game.update(0.0)
    game.keyboard.release(key)
    game.update(0.0)


def _start_game(seed=1):
    game = Game(rng=random.Random(seed))
    _tap(game, Key.G)
    game.enemies.clear()
    game.stars.clear()
    return game


def test_starts_in_main_menu():
    game = Game(rng=random.Random(0))
    assert game.app_state is AppState.MAIN_MENU
    assert game.simulation_state is SimulationState.RUNNING
    assert game.ui == [game.main_menu_ui]
    assert game.player is None


def test_g_key_enters_game():
    game = Game(rng=random.Random(0))
    _tap(game, Key.G)
    assert game.app_state is AppState.GAME
    assert game.main_menu_ui is None
    assert game.hud is not None and game.hud in game.ui
    assert game.player.position == (game.window.width / 2, game.window.height / 2)
    assert game.score.value == 0
    assert len(game.stars) >= 1
    assert game.enemy_spawn_count == len(game.enemies)


def test_play_button_enters_game():
    game = Game(rng=random.Random(0))
    assert game.interact(Marker.PLAY_BUTTON, Interaction.PRESSED) is True
    assert game.app_state is AppState.MAIN_MENU
    game.update(0.0)
    assert game.app_state is AppState.GAME


def test_quit_button_requests_exit():
    game = Game(rng=random.Random(0))
    game.interact(Marker.QUIT_BUTTON, Interaction.PRESSED)
    assert game.exit_requested is True


def test_escape_requests_exit():
    game = Game(rng=random.Random(0))
    game.keyboard.press(Key.ESCAPE)
    game.update(0.0)
    assert game.exit_requested is True


def test_unknown_button_is_not_handled():
    game = Game(rng=random.Random(0))
    assert game.interact(Marker.RESUME_BUTTON, Interaction.PRESSED) is False
    assert game.next_app_state is None


def test_player_moves_with_keys():
    game = _start_game()
    start = game.player.x
    game.keyboard.press(Key.RIGHT)
    game.update(0.1)
    assert game.player.x > start


def test_space_pauses_and_freezes_world():
    game = _start_game()
    _tap(game, Key.SPACE)
    assert game.simulation_state is SimulationState.PAUSED
    assert game.pause_menu_ui in game.ui
    start = game.player.position
    game.keyboard.press(Key.RIGHT)
    game.update(0.5)
    assert game.player.position == start
    game.keyboard.release(Key.RIGHT)
    _tap(game, Key.SPACE)
    assert game.simulation_state is SimulationState.RUNNING
    assert game.pause_menu_ui is None


def test_pause_menu_main_menu_button():
    game = _start_game()
    _tap(game, Key.SPACE)
    assert game.interact(Marker.MAIN_MENU_BUTTON, Interaction.PRESSED) is True
    game.update(0.0)
    assert game.app_state is AppState.MAIN_MENU
    assert game.simulation_state is SimulationState.RUNNING
    assert game.hud is None


def test_collecting_star_scores_and_updates_hud():
    game = _start_game()
    game.stars.append(Star(*game.player.position))
    game.update(0.0)
    assert game.score.value == 1
    assert game.stars == [] or all(s.position != game.player.position for s in game.stars)
    assert game.hud.find(Marker.SCORE_TEXT).text == str(game.score.value)
    assert STAR_SOUND in game.sounds


def test_enemy_text_tracks_spawn_count():
    game = _start_game()
    game.update(0.0)
    assert game.hud.find(Marker.ENEMY_TEXT).text == str(game.enemy_spawn_count)


def test_enemy_hit_ends_game():
    game = _start_game()
    x, y = game.player.position
    game.enemies.append(Enemy(x, y, 0.0, 0.0))
    game.update(0.0)
    assert game.player is None
    assert game.high_scores.scores == [("Player", game.last_game_over.score)]
    game.update(0.0)
    assert game.app_state is AppState.GAME_OVER
    assert game.game_over_ui in game.ui
    assert game.hud is None
    assert game.enemies == []
    assert game.enemy_spawn_count == 0
    assert game.score is None


def test_restart_after_game_over():
    game = _start_game()
    x, y = game.player.position
    game.enemies.append(Enemy(x, y, 0.0, 0.0))
    game.update(0.0)
    game.update(0.0)
    assert game.interact(Marker.RESTART_BUTTON, Interaction.PRESSED) is True
    game.update(0.0)
    assert game.app_state is AppState.GAME
    assert game.game_over_ui is None
    assert game.player is not None


def test_m_key_returns_to_main_menu():
    game = _start_game()
    _tap(game, Key.M)
    assert game.app_state is AppState.MAIN_MENU
    assert game.main_menu_ui is not None
    assert game.player is None


def test_negative_delta_rejected():
    game = Game(rng=random.Random(0))
    with pytest.raises(ValueError):
        game.update(-0.1)


def test_main_menu_message(capsys):
    main_menu()
    assert capsys.readouterr().out == "You are in the main menu!\n"