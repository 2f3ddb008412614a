import pytest

from ballgame.core import AppState, SimulationState
from ballgame.interactions import (
    ButtonAction,
    Interaction,
    handle_button,
    update_enemy_text,
    update_score_text,
)
from ballgame.menus import (
    Marker,
    build_game_over_menu,
    build_hud,
    build_main_menu,
    build_pause_menu,
)
from ballgame.styles import (
    HOVERED_BUTTON_COLOUR,
    NORMAL_BUTTON_COLOUR,
    PRESSED_BUTTON_COLOUR,
)

_MENUS = {
    Marker.MAIN_MENU: build_main_menu,
    Marker.PAUSE_MENU: build_pause_menu,
    Marker.GAME_OVER_MENU: build_game_over_menu,
}


def _button(menu, marker):
    return _MENUS[menu]().find(marker)


def test_play_button_pressed_starts_game():
    node = _button(Marker.MAIN_MENU, Marker.PLAY_BUTTON)
    action = handle_button(node, Interaction.PRESSED, Marker.MAIN_MENU)
    assert action == ButtonAction(app_state=AppState.GAME)
    assert node.background == PRESSED_BUTTON_COLOUR


def test_hover_recolours_without_action():
    node = _button(Marker.MAIN_MENU, Marker.PLAY_BUTTON)
    assert handle_button(node, Interaction.HOVERED, Marker.MAIN_MENU) is None
    assert node.background == HOVERED_BUTTON_COLOUR


def test_none_restores_normal_colour():
    node = _button(Marker.PAUSE_MENU, Marker.RESUME_BUTTON)
    handle_button(node, Interaction.PRESSED, Marker.PAUSE_MENU)
    assert handle_button(node, Interaction.NONE, Marker.PAUSE_MENU) is None
    assert node.background == NORMAL_BUTTON_COLOUR


@pytest.mark.parametrize("menu", list(_MENUS))
def test_quit_button_requests_exit(menu):
    node = _button(menu, Marker.QUIT_BUTTON)
    action = handle_button(node, Interaction.PRESSED, menu)
    assert action.exit is True
    assert action.app_state is None


def test_restart_returns_to_running_game():
    node = _button(Marker.GAME_OVER_MENU, Marker.RESTART_BUTTON)
    action = handle_button(node, Interaction.PRESSED, Marker.GAME_OVER_MENU)
    assert action == ButtonAction(
        app_state=AppState.GAME, simulation_state=SimulationState.RUNNING
    )


def test_resume_only_touches_simulation():
    node = _button(Marker.PAUSE_MENU, Marker.RESUME_BUTTON)
    action = handle_button(node, Interaction.PRESSED, Marker.PAUSE_MENU)
    assert action == ButtonAction(simulation_state=SimulationState.RUNNING)


def test_main_menu_button_differs_between_menus():
    pause = _button(Marker.PAUSE_MENU, Marker.MAIN_MENU_BUTTON)
    over = _button(Marker.GAME_OVER_MENU, Marker.MAIN_MENU_BUTTON)
    from_pause = handle_button(pause, Interaction.PRESSED, Marker.PAUSE_MENU)
    from_over = handle_button(over, Interaction.PRESSED, Marker.GAME_OVER_MENU)
    assert from_pause.app_state is AppState.MAIN_MENU
    assert from_pause.simulation_state is SimulationState.RUNNING
    assert from_over.app_state is AppState.MAIN_MENU
    assert from_over.simulation_state is None


def test_button_from_other_menu_is_rejected():
    node = _button(Marker.PAUSE_MENU, Marker.RESUME_BUTTON)
    with pytest.raises(ValueError):
        handle_button(node, Interaction.PRESSED, Marker.MAIN_MENU)


def test_unmarked_node_is_rejected():
    node = build_main_menu().children[0]
    with pytest.raises(ValueError):
        handle_button(node, Interaction.PRESSED, Marker.MAIN_MENU)


def test_score_text_is_updated():
    hud = build_hud()
    assert update_score_text(hud, 7) is True
    assert hud.find(Marker.SCORE_TEXT).text == "7"
    assert hud.find(Marker.ENEMY_TEXT).text == "0"


def test_enemy_text_is_updated():
    hud = build_hud()
    assert update_enemy_text(hud, 3) is True
    assert hud.find(Marker.ENEMY_TEXT).text == "3"


def test_missing_text_reports_false():
    menu = build_main_menu()
    assert update_score_text(menu, 5) is False
    assert update_enemy_text(menu, 5) is False