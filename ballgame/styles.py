"""Colours, layout styles and fonts shared by the menus and the HUD."""

from __future__ import annotations

from dataclasses import dataclass

AUTO = "auto"
PX = "px"
PERCENT = "percent"
_UNITS = frozenset({AUTO, PX, PERCENT})

FONT_PATH = "fonts/FiraSans-Bold.ttf"
TITLE_FONT_SIZE = 64.0
BUTTON_FONT_SIZE = 32.0


@dataclass(frozen=True)
class Colour:
    """An sRGB colour with straight alpha, each channel from 0 to 1."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0


@dataclass(frozen=True)
class Val:
    """A length in a layout: pixels, a percentage of the parent, or automatic."""

    value: float = 0.0
    unit: str = PX

    def __post_init__(self) -> None:
        if self.unit not in _UNITS:
            raise ValueError(f"unknown length unit: {self.unit!r}")


_ZERO = Val(0.0, PX)
_AUTO = Val(0.0, AUTO)


@dataclass(frozen=True)
class NodeStyle:
    """Flexbox layout of one UI node.

    ``margin`` is ordered left, right, top, bottom.
    """

    flex_direction: str = "row"
    justify_content: str = "default"
    align_items: str = "default"
    width: Val = _AUTO
    height: Val = _AUTO
    margin: tuple[Val, Val, Val, Val] = (_ZERO, _ZERO, _ZERO, _ZERO)
    row_gap: Val = _ZERO
    column_gap: Val = _ZERO


@dataclass(frozen=True)
class TextFont:
    """Font file and size used to draw a piece of text."""

    font: str
    font_size: float


WHITE = Colour(1.0, 1.0, 1.0)

NORMAL_BUTTON_COLOUR = Colour(0.15, 0.15, 0.15)
HOVERED_BUTTON_COLOUR = Colour(0.25, 0.25, 0.25)
PRESSED_BUTTON_COLOUR = Colour(0.35, 0.35, 0.35)

BACKGROUND_COLOUR = Colour(0.25, 0.25, 0.25, 0.5)
HUD_IMAGE_TINT = Colour(1.0, 1.0, 1.0, 0.7)


def _px(value: float) -> Val:
    return Val(value, PX)


def _percent(value: float) -> Val:
    return Val(value, PERCENT)


def _even_margin(value: float) -> tuple[Val, Val, Val, Val]:
    return (_px(value), _px(value), _px(value), _px(value))


MENU_NODE_STYLE = NodeStyle(
    flex_direction="column",
    justify_content="center",
    align_items="center",
    width=_percent(100.0),
    height=_percent(100.0),
    row_gap=_px(8.0),
    column_gap=_px(8.0),
)

TITLE_NODE_STYLE = NodeStyle(
    flex_direction="row",
    justify_content="center",
    align_items="center",
    width=_px(300.0),
    height=_px(120.0),
)

HUD_NODE_STYLE = NodeStyle(
    flex_direction="row",
    justify_content="space-between",
    align_items="start",
    width=_percent(100.0),
    height=_percent(12.5),
)

BUTTON_NODE_STYLE = NodeStyle(
    justify_content="center",
    align_items="center",
    width=_px(200.0),
    height=_px(80.0),
)

MAIN_MENU_IMAGE_NODE_STYLE = NodeStyle(
    width=_px(64.0),
    height=_px(64.0),
    margin=_even_margin(8.0),
)

PAUSE_IMAGE_NODE_STYLE = NodeStyle(
    width=_px(32.0),
    height=_px(32.0),
    margin=_even_margin(8.0),
)

GAME_OVER_IMAGE_NODE_STYLE = NodeStyle(
    width=_px(64.0),
    height=_px(64.0),
    margin=_even_margin(8.0),
)

LHS_NODE_STYLE = NodeStyle(
    flex_direction="row",
    justify_content="center",
    align_items="center",
    width=_px(200.0),
    height=_percent(80.0),
    margin=(_px(32.0), _px(0.0), _px(16.0), _px(0.0)),
)

RHS_NODE_STYLE = NodeStyle(
    flex_direction="row",
    justify_content="center",
    align_items="center",
    width=_px(200.0),
    height=_percent(80.0),
    margin=(_px(0.0), _px(32.0), _px(16.0), _px(0.0)),
)


def title_text_font() -> TextFont:
    """Large font for menu titles and HUD counters."""
    return TextFont(FONT_PATH, TITLE_FONT_SIZE)


def button_text_font() -> TextFont:
    """Font for button labels."""
    return TextFont(FONT_PATH, BUTTON_FONT_SIZE)