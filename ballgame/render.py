"""Drawing the game with pygame and running it in a window."""

from __future__ import annotations

import argparse
import math
from collections.abc import Iterable
from pathlib import Path

import pygame

from ballgame.app import Game
from ballgame.core import Key, Window
from ballgame.enemy import ENEMY_SIZE, ENEMY_SPRITE
from ballgame.interactions import Interaction
from ballgame.menus import BLUE_BALL_SPRITE, RED_BALL_SPRITE, STAR_SPRITE, Marker, UiNode
from ballgame.player import PLAYER_SIZE, PLAYER_SPRITE
from ballgame.star import STAR_SIZE
from ballgame.styles import PERCENT, PX, WHITE, Colour, Val

TITLE = "Ball Game"
DEFAULT_FPS = 60
DEFAULT_ASSET_DIR = "assets"

CLEAR_COLOUR = (43, 44, 47)
PLAYER_COLOUR = (52, 120, 220)
ENEMY_COLOUR = (210, 50, 50)
STAR_COLOUR = (250, 210, 40)

_SPRITE_COLOURS = {
    BLUE_BALL_SPRITE: PLAYER_COLOUR,
    PLAYER_SPRITE: PLAYER_COLOUR,
    RED_BALL_SPRITE: ENEMY_COLOUR,
    ENEMY_SPRITE: ENEMY_COLOUR,
    STAR_SPRITE: STAR_COLOUR,
}

_KEYS = {
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_a: Key.A,
    pygame.K_d: Key.D,
    pygame.K_w: Key.W,
    pygame.K_s: Key.S,
    pygame.K_g: Key.G,
    pygame.K_m: Key.M,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_ESCAPE: Key.ESCAPE,
}

_FONTS: dict[int, pygame.font.Font] = {}


def to_screen(position: tuple[float, float], window: Window) -> tuple[float, float]:
    """Convert a world point (origin bottom left, y up) to screen coordinates."""
    x, y = position
    return (x, window.height - y)


def map_key(pygame_key: int) -> Key | None:
    """The game key for a pygame key code, or None if the game ignores it."""
    return _KEYS.get(pygame_key)


# Colours and shapes


def _rgba(colour: Colour) -> tuple[int, int, int, int]:
    return tuple(  # type: ignore[return-value]
        round(channel * 255) for channel in (colour.red, colour.green, colour.blue, colour.alpha)
    )


def _font(size: float) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    key = int(size)
    if key not in _FONTS:
        _FONTS[key] = pygame.font.Font(None, key)
    return _FONTS[key]


def _star_points(radius: float) -> list[tuple[float, float]]:
    points = []
    for corner in range(10):
        angle = -math.pi / 2 + corner * math.pi / 5
        reach = radius if corner % 2 == 0 else radius * 0.45
        points.append((radius + reach * math.cos(angle), radius + reach * math.sin(angle)))
    return points


def _draw_sprite(
    surface: pygame.Surface, sprite: str, rect: pygame.Rect, tint: Colour = WHITE
) -> None:
    if rect.width <= 0 or rect.height <= 0:
        return
    colour = _SPRITE_COLOURS.get(sprite, (255, 255, 255))
    image = pygame.Surface(rect.size, pygame.SRCALPHA)
    radius = min(rect.width, rect.height) / 2.0
    if sprite == STAR_SPRITE:
        pygame.draw.polygon(image, colour, _star_points(radius))
    else:
        pygame.draw.circle(image, colour, (rect.width / 2.0, rect.height / 2.0), radius)
    if tint != WHITE:
        image.fill(_rgba(tint), special_flags=pygame.BLEND_RGBA_MULT)
    surface.blit(image, rect.topleft)


def _draw_entity(
    surface: pygame.Surface,
    sprite: str,
    position: tuple[float, float],
    size: float,
    window: Window,
) -> None:
    x, y = to_screen(position, window)
    rect = pygame.Rect(0, 0, round(size), round(size))
    rect.center = (round(x), round(y))
    _draw_sprite(surface, sprite, rect)


# Layout


def _length(val: Val, basis: float) -> float | None:
    if val.unit == PX:
        return val.value
    if val.unit == PERCENT:
        return basis * val.value / 100.0
    return None


def _margins(node: UiNode, basis_w: float) -> tuple[float, float, float, float]:
    return tuple(_length(side, basis_w) or 0.0 for side in node.style.margin)  # type: ignore[return-value]


def _gap(node: UiNode, basis_w: float, basis_h: float) -> float:
    if node.style.flex_direction == "row":
        return _length(node.style.column_gap, basis_w) or 0.0
    return _length(node.style.row_gap, basis_h) or 0.0


def _size(node: UiNode, basis_w: float, basis_h: float) -> tuple[float, float]:
    width = _length(node.style.width, basis_w)
    height = _length(node.style.height, basis_h)
    if width is None or height is None:
        content_w, content_h = _content_size(
            node,
            width if width is not None else basis_w,
            height if height is not None else basis_h,
        )
        width = content_w if width is None else width
        height = content_h if height is None else height
    return width, height


def _outer(node: UiNode, basis_w: float, basis_h: float) -> tuple[float, float]:
    width, height = _size(node, basis_w, basis_h)
    left, right, top, bottom = _margins(node, basis_w)
    return width + left + right, height + top + bottom


def _content_size(node: UiNode, basis_w: float, basis_h: float) -> tuple[float, float]:
    if node.text is not None:
        size = node.font.font_size if node.font is not None else 32.0
        return _font(size).size(node.text)
    if not node.children:
        return 0.0, 0.0
    outers = [_outer(child, basis_w, basis_h) for child in node.children]
    gaps = _gap(node, basis_w, basis_h) * (len(outers) - 1)
    widths = [w for w, _ in outers]
    heights = [h for _, h in outers]
    if node.style.flex_direction == "row":
        return sum(widths) + gaps, max(heights)
    return max(widths), sum(heights) + gaps


def _place(
    node: UiNode,
    x: float,
    y: float,
    width: float,
    height: float,
    out: list[tuple[UiNode, pygame.Rect]],
) -> None:
    out.append((node, pygame.Rect(round(x), round(y), round(width), round(height))))
    if not node.children:
        return
    row = node.style.flex_direction == "row"
    placed = [(_size(child, width, height), _margins(child, width)) for child in node.children]
    gap = _gap(node, width, height)
    mains = [
        (w + left + right) if row else (h + top + bottom)
        for (w, h), (left, right, top, bottom) in placed
    ]
    free = (width if row else height) - sum(mains) - gap * (len(mains) - 1)

    justify = node.style.justify_content
    pos, spacing = 0.0, gap
    if justify == "center":
        pos = free / 2.0
    elif justify == "space-between" and len(mains) > 1:
        spacing = gap + free / (len(mains) - 1)
    elif justify == "end":
        pos = free

    centred = node.style.align_items == "center"
    for child, ((cw, ch), (left, right, top, bottom)) in zip(node.children, placed):
        if row:
            cross = (height - (ch + top + bottom)) / 2.0 if centred else 0.0
            _place(child, x + pos + left, y + cross + top, cw, ch, out)
            pos += cw + left + right + spacing
        else:
            cross = (width - (cw + left + right)) / 2.0 if centred else 0.0
            _place(child, x + cross + left, y + pos + top, cw, ch, out)
            pos += ch + top + bottom + spacing


def _layout(root: UiNode, window: Window) -> list[tuple[UiNode, pygame.Rect]]:
    width, height = _size(root, window.width, window.height)
    left, _, top, _ = _margins(root, window.width)
    out: list[tuple[UiNode, pygame.Rect]] = []
    _place(root, left, top, width, height, out)
    return out


def _draw_ui(surface: pygame.Surface, placed: Iterable[tuple[UiNode, pygame.Rect]]) -> None:
    for node, rect in placed:
        if node.background is not None:
            panel = pygame.Surface(rect.size, pygame.SRCALPHA)
            panel.fill(_rgba(node.background))
            surface.blit(panel, rect.topleft)
        if node.image is not None:
            _draw_sprite(surface, node.image, rect, node.image_tint or WHITE)
        if node.text is not None:
            size = node.font.font_size if node.font is not None else 32.0
            colour = _rgba(node.text_colour or WHITE)
            rendered = _font(size).render(node.text, True, colour[:3])
            rendered.set_alpha(colour[3])
            surface.blit(rendered, rendered.get_rect(center=rect.center))


def draw(surface: pygame.Surface, game: Game) -> None:
    """Draw the world and every UI tree the game is showing onto ``surface``."""
    surface.fill(CLEAR_COLOUR)
    window = game.window
    for star in game.stars:
        _draw_entity(surface, STAR_SPRITE, star.position, STAR_SIZE, window)
    for enemy in game.enemies:
        _draw_entity(surface, ENEMY_SPRITE, enemy.position, ENEMY_SIZE, window)
    if game.player is not None:
        _draw_entity(surface, PLAYER_SPRITE, game.player.position, PLAYER_SIZE, window)
    for root in game.ui:
        _draw_ui(surface, _layout(root, window))


# Running in a window


class _SoundPlayer:
    """Plays sound effects found under an asset directory, if audio is available."""

    def __init__(self, root: Path):
        self.root = root
        self._cache: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
            self.enabled = True
        except pygame.error:
            self.enabled = False

    def play(self, path: str) -> None:
        if not self.enabled:
            return
        sound = self._cache.get(path)
        if sound is None:
            file = self.root / path
            if not file.is_file():
                return
            try:
                sound = pygame.mixer.Sound(str(file))
            except pygame.error:
                return
            self._cache[path] = sound
        sound.play()


def _pointer_interactions(game: Game) -> dict[Marker, Interaction]:
    mouse = pygame.mouse.get_pos()
    held = pygame.mouse.get_pressed()[0]
    states: dict[Marker, Interaction] = {}
    for root in game.ui:
        for node, rect in _layout(root, game.window):
            if not node.button or node.marker is None:
                continue
            if rect.collidepoint(mouse):
                state = Interaction.PRESSED if held else Interaction.HOVERED
            else:
                state = Interaction.NONE
            previous = states.get(node.marker, Interaction.NONE)
            if previous is Interaction.NONE or state is Interaction.PRESSED:
                states[node.marker] = state
    return states


def _update_pointer(game: Game, previous: dict[Marker, Interaction]) -> None:
    current = _pointer_interactions(game)
    for marker, state in current.items():
        if previous.get(marker) is not state:
            game.interact(marker, state)
    previous.clear()
    previous.update(current)


def _handle_events(game: Game) -> bool:
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            key = map_key(event.key)
            if key is None:
                continue
            if event.type == pygame.KEYDOWN:
                game.keyboard.press(key)
            else:
                game.keyboard.release(key)
    return True


def _positive(text: str) -> float:
    value = float(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {text}")
    return value


def _count(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _parser() -> argparse.ArgumentParser:
    defaults = Window()
    parser = argparse.ArgumentParser(prog="ballgame", description="Dodge the red balls, collect the stars.")
    parser.add_argument("--width", type=_positive, default=defaults.width)
    parser.add_argument("--height", type=_positive, default=defaults.height)
    parser.add_argument("--fps", type=_count, default=DEFAULT_FPS)
    parser.add_argument("--frames", type=_count, default=None, help="stop after this many frames")
    parser.add_argument("--assets", type=Path, default=Path(DEFAULT_ASSET_DIR))
    return parser


def main(argv: list[str] | None = None) -> int:
    """Open a window and play until the game asks to exit or the window closes."""
    args = _parser().parse_args(argv)
    pygame.init()
    try:
        window = Window(args.width, args.height)
        screen = pygame.display.set_mode((round(window.width), round(window.height)))
        pygame.display.set_caption(TITLE)
        game = Game(window)
        sounds = _SoundPlayer(args.assets)
        clock = pygame.time.Clock()
        pointer: dict[Marker, Interaction] = {}
        frame = 0
        while not game.exit_requested:
            if args.frames is not None and frame >= args.frames:
                break
            delta = clock.tick(args.fps) / 1000.0
            if not _handle_events(game):
                break
            _update_pointer(game, pointer)
            game.update(delta)
            for sound in game.sounds:
                sounds.play(sound)
            game.sounds.clear()
            draw(screen, game)
            pygame.display.flip()
            frame += 1
    finally:
        _FONTS.clear()
        pygame.quit()
    return 0