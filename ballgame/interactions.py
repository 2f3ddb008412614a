"""Button presses in the menus and the counters shown on the HUD."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from ballgame.core import AppState, SimulationState
from ballgame.menus import Marker, UiNode
from ballgame.styles import (
    HOVERED_BUTTON_COLOUR,
    NORMAL_BUTTON_COLOUR,
    PRESSED_BUTTON_COLOUR,
)


class Interaction(enum.Enum):
    """State of the pointer relative to a button."""

    PRESSED = enum.auto()
    HOVERED = enum.auto()
    NONE = enum.auto()


@dataclass(frozen=True)
class ButtonAction:
    """What pressing a button asks of the game.

    A field left as None leaves that state alone.
    """

    app_state: AppState | None = None
    simulation_state: SimulationState | None = None
    exit: bool = False


_QUIT = ButtonAction(exit=True)

_ACTIONS: dict[tuple[Marker, Marker], ButtonAction] = {
    (Marker.MAIN_MENU, Marker.PLAY_BUTTON): ButtonAction(app_state=AppState.GAME),
    (Marker.MAIN_MENU, Marker.QUIT_BUTTON): _QUIT,
    (Marker.PAUSE_MENU, Marker.RESUME_BUTTON): ButtonAction(
        simulation_state=SimulationState.RUNNING
    ),
    (Marker.PAUSE_MENU, Marker.MAIN_MENU_BUTTON): ButtonAction(
        app_state=AppState.MAIN_MENU, simulation_state=SimulationState.RUNNING
    ),
    (Marker.PAUSE_MENU, Marker.QUIT_BUTTON): _QUIT,
    (Marker.GAME_OVER_MENU, Marker.RESTART_BUTTON): ButtonAction(
        app_state=AppState.GAME, simulation_state=SimulationState.RUNNING
    ),
    (Marker.GAME_OVER_MENU, Marker.MAIN_MENU_BUTTON): ButtonAction(
        app_state=AppState.MAIN_MENU
    ),
    (Marker.GAME_OVER_MENU, Marker.QUIT_BUTTON): _QUIT,
}

_COLOURS = {
    Interaction.PRESSED: PRESSED_BUTTON_COLOUR,
    Interaction.HOVERED: HOVERED_BUTTON_COLOUR,
    Interaction.NONE: NORMAL_BUTTON_COLOUR,
}


def handle_button(
    node: UiNode, interaction: Interaction, menu: Marker
) -> ButtonAction | None:
    """Recolour a button of ``menu`` and return its action if it was pressed.

    Raises ValueError if ``node`` is not a button belonging to ``menu``.
    """
    if node.marker is None:
        raise ValueError("node carries no marker")
    try:
        action = _ACTIONS[(menu, node.marker)]
    except KeyError:
        raise ValueError(f"{node.marker.name} is not a button of {menu.name}") from None
    node.background = _COLOURS[interaction]
    return action if interaction is Interaction.PRESSED else None


def _set_text(hud: UiNode, marker: Marker, value: int) -> bool:
    node = hud.find(marker)
    if node is None:
        return False
    node.text = str(value)
    return True


def update_score_text(hud: UiNode, score: int) -> bool:
    """Show ``score`` in the HUD; False if the HUD has no score text."""
    return _set_text(hud, Marker.SCORE_TEXT, score)


def update_enemy_text(hud: UiNode, count: int) -> bool:
    """Show the enemy count in the HUD; False if the HUD has no enemy text."""
    return _set_text(hud, Marker.ENEMY_TEXT, count)