"""Game states, events, the window and keyboard input."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class AppState(enum.Enum):
    """Top-level screen the application is showing."""

    MAIN_MENU = enum.auto()
    GAME = enum.auto()
    GAME_OVER = enum.auto()


class SimulationState(enum.Enum):
    """Whether the game world is advancing."""

    RUNNING = enum.auto()
    PAUSED = enum.auto()


DEFAULT_APP_STATE = AppState.MAIN_MENU
DEFAULT_SIMULATION_STATE = SimulationState.RUNNING


@dataclass(frozen=True)
class GameOverEvent:
    """Raised when the player is hit; carries the final score."""

    score: int


@dataclass(frozen=True)
class Window:
    """Size of the play area in pixels, origin at the bottom left."""

    width: float = 1280.0
    height: float = 720.0


class Key(enum.Enum):
    """Keys the game reacts to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    A = enum.auto()
    D = enum.auto()
    W = enum.auto()
    S = enum.auto()
    G = enum.auto()
    M = enum.auto()
    SPACE = enum.auto()
    ESCAPE = enum.auto()


@dataclass
class KeyboardInput:
    """Keys held down, and keys pressed since the last frame."""

    _pressed: set[Key] = field(default_factory=set)
    _just_pressed: set[Key] = field(default_factory=set)

    def press(self, key: Key) -> None:
        """Register a key going down; it is just pressed only if it was up."""
        if key not in self._pressed:
            self._pressed.add(key)
            self._just_pressed.add(key)

    def release(self, key: Key) -> None:
        """Register a key going up."""
        self._pressed.discard(key)

    def pressed(self, key: Key) -> bool:
        """True while the key is held down."""
        return key in self._pressed

    def just_pressed(self, key: Key) -> bool:
        """True if the key went down during the current frame."""
        return key in self._just_pressed

    def clear_just_pressed(self) -> None:
        """Forget which keys went down this frame; call at the end of a frame."""
        self._just_pressed.clear()