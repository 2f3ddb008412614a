"""Trees of UI nodes for the main menu, pause menu, game-over menu and HUD."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field

from ballgame.styles import (
    BACKGROUND_COLOUR,
    BUTTON_NODE_STYLE,
    GAME_OVER_IMAGE_NODE_STYLE,
    HUD_IMAGE_TINT,
    HUD_NODE_STYLE,
    LHS_NODE_STYLE,
    MAIN_MENU_IMAGE_NODE_STYLE,
    MENU_NODE_STYLE,
    NORMAL_BUTTON_COLOUR,
    PAUSE_IMAGE_NODE_STYLE,
    RHS_NODE_STYLE,
    TITLE_NODE_STYLE,
    WHITE,
    Colour,
    NodeStyle,
    TextFont,
    button_text_font,
    title_text_font,
)

BLUE_BALL_SPRITE = "sprites/ball_blue_large.png"
RED_BALL_SPRITE = "sprites/ball_red_large.png"
STAR_SPRITE = "sprites/star.png"


class Marker(enum.Enum):
    """Tags that identify the nodes the game looks up or reacts to."""

    MAIN_MENU = enum.auto()
    TITLE = enum.auto()
    PLAY_BUTTON = enum.auto()
    QUIT_BUTTON = enum.auto()
    PAUSE_MENU = enum.auto()
    RESUME_BUTTON = enum.auto()
    MAIN_MENU_BUTTON = enum.auto()
    GAME_OVER_MENU = enum.auto()
    RESTART_BUTTON = enum.auto()
    HUD_OVERLAY = enum.auto()
    SCORE_TEXT = enum.auto()
    ENEMY_TEXT = enum.auto()


@dataclass
class UiNode:
    """One node of a UI tree: a box that may hold text, an image or a button."""

    style: NodeStyle = field(default_factory=NodeStyle)
    marker: Marker | None = None
    text: str | None = None
    font: TextFont | None = None
    text_colour: Colour | None = None
    wrap: bool = True
    image: str | None = None
    image_tint: Colour | None = None
    background: Colour | None = None
    button: bool = False
    children: list[UiNode] = field(default_factory=list)

    def walk(self) -> Iterator[UiNode]:
        """Yield this node and all its descendants, depth first, parents first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, marker: Marker) -> UiNode | None:
        """Return the first node carrying ``marker``, or None if there is none."""
        return next((node for node in self.walk() if node.marker is marker), None)


def _image(path: str, style: NodeStyle, tint: Colour = WHITE) -> UiNode:
    return UiNode(style=style, image=path, image_tint=tint)


def _title(text: str, image_style: NodeStyle, left: str, right: str) -> UiNode:
    return UiNode(
        style=TITLE_NODE_STYLE,
        children=[
            _image(left, image_style),
            UiNode(text=text, font=title_text_font(), text_colour=WHITE, wrap=False),
            _image(right, image_style),
        ],
    )


def _button(marker: Marker, label: str) -> UiNode:
    return UiNode(
        style=BUTTON_NODE_STYLE,
        marker=marker,
        background=NORMAL_BUTTON_COLOUR,
        button=True,
        children=[UiNode(text=label, font=button_text_font(), text_colour=WHITE)],
    )


def _counter(marker: Marker) -> UiNode:
    return UiNode(marker=marker, text="0", font=title_text_font(), text_colour=WHITE)


def build_main_menu() -> UiNode:
    """The title screen with Play and Quit buttons."""
    return UiNode(
        style=MENU_NODE_STYLE,
        marker=Marker.MAIN_MENU,
        children=[
            _title("Bevy Ball Game", MAIN_MENU_IMAGE_NODE_STYLE, BLUE_BALL_SPRITE, RED_BALL_SPRITE),
            _button(Marker.PLAY_BUTTON, "Play"),
            _button(Marker.QUIT_BUTTON, "Quit"),
        ],
    )


def build_pause_menu() -> UiNode:
    """The menu shown while the simulation is paused."""
    return UiNode(
        style=MENU_NODE_STYLE,
        marker=Marker.PAUSE_MENU,
        children=[
            _title("Game Paused", PAUSE_IMAGE_NODE_STYLE, STAR_SPRITE, STAR_SPRITE),
            _button(Marker.RESUME_BUTTON, "Resume"),
            _button(Marker.MAIN_MENU_BUTTON, "Main Menu"),
            _button(Marker.QUIT_BUTTON, "Quit"),
        ],
    )


def build_game_over_menu() -> UiNode:
    """The menu shown after the player has been hit."""
    return UiNode(
        style=MENU_NODE_STYLE,
        marker=Marker.GAME_OVER_MENU,
        children=[
            _title("Game Over", GAME_OVER_IMAGE_NODE_STYLE, RED_BALL_SPRITE, RED_BALL_SPRITE),
            _button(Marker.RESTART_BUTTON, "Restart"),
            _button(Marker.MAIN_MENU_BUTTON, "Main Menu"),
            _button(Marker.QUIT_BUTTON, "Quit"),
        ],
    )


def build_hud() -> UiNode:
    """The in-game overlay: score on the left, enemy count on the right."""
    stars = UiNode(
        style=LHS_NODE_STYLE,
        background=BACKGROUND_COLOUR,
        children=[
            _image(STAR_SPRITE, GAME_OVER_IMAGE_NODE_STYLE, HUD_IMAGE_TINT),
            _counter(Marker.SCORE_TEXT),
        ],
    )
    enemies = UiNode(
        style=RHS_NODE_STYLE,
        background=BACKGROUND_COLOUR,
        children=[
            _counter(Marker.ENEMY_TEXT),
            _image(RED_BALL_SPRITE, GAME_OVER_IMAGE_NODE_STYLE, HUD_IMAGE_TINT),
        ],
    )
    return UiNode(style=HUD_NODE_STYLE, marker=Marker.HUD_OVERLAY, children=[stars, enemies])