"""The game loop: states, their transitions and the systems run each frame."""

from __future__ import annotations

import logging
import random

from ballgame.core import (
    DEFAULT_APP_STATE,
    DEFAULT_SIMULATION_STATE,
    AppState,
    GameOverEvent,
    Key,
    KeyboardInput,
    SimulationState,
    Window,
)
from ballgame.enemy import (
    EXPLOSION_SOUND,
    Enemy,
    confine_enemy_movement,
    enemy_hit_player,
    enemy_movement,
    spawn_enemy_over_time,
    spawn_initial_enemies,
    update_enemy_direction,
)
from ballgame.interactions import (
    ButtonAction,
    Interaction,
    handle_button,
    update_enemy_text,
    update_score_text,
)
from ballgame.menus import (
    Marker,
    UiNode,
    build_game_over_menu,
    build_hud,
    build_main_menu,
    build_pause_menu,
)
from ballgame.player import (
    Player,
    confine_player_movement,
    player_movement,
    spawn_player,
)
from ballgame.score import DEFAULT_PLAYER_NAME, HighScores, Score
from ballgame.star import (
    STAR_SOUND,
    Star,
    player_hit_star,
    spawn_star_over_time,
    spawn_stars,
)
from ballgame.timer import enemy_spawn_timer, star_spawn_timer

_log = logging.getLogger(__name__)


def main_menu() -> None:
    """Tell the user they are in the main menu."""
    print("You are in the main menu!")


class Game:
    """All game state, advanced one frame at a time by :meth:`update`.

    State changes requested during a frame take effect at the start of
    the next one, running the exit and enter steps of the states involved.
    """

    def __init__(self, window: Window | None = None, rng: random.Random | None = None):
        self.window = window if window is not None else Window()
        self.rng = rng if rng is not None else random.Random()
        self.keyboard = KeyboardInput()
        self.camera = (self.window.width / 2.0, self.window.height / 2.0)

        self.app_state = DEFAULT_APP_STATE
        self.simulation_state = DEFAULT_SIMULATION_STATE
        self.next_app_state: AppState | None = None
        self.next_simulation_state: SimulationState | None = None
        self.exit_requested = False

        self.player: Player | None = None
        self.enemies: list[Enemy] = []
        self.stars: list[Star] = []
        self.enemy_spawn_count = 0
        self.enemy_timer = enemy_spawn_timer()
        self.star_timer = star_spawn_timer()
        self.score: Score | None = None
        self.high_scores = HighScores()
        self.last_game_over: GameOverEvent | None = None
        self.sounds: list[str] = []

        self.main_menu_ui: UiNode | None = None
        self.pause_menu_ui: UiNode | None = None
        self.game_over_ui: UiNode | None = None
        self.hud: UiNode | None = None
        self._shown_score: int | None = None
        self._events: list[GameOverEvent] = []

        self._enter_app_state(self.app_state)

    @property
    def ui(self) -> list[UiNode]:
        """UI trees currently shown, in drawing order."""
        roots = (self.hud, self.main_menu_ui, self.game_over_ui, self.pause_menu_ui)
        return [root for root in roots if root is not None]

    # State transitions

    def _enter_app_state(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu_ui = build_main_menu()
        elif state is AppState.GAME_OVER:
            self.game_over_ui = build_game_over_menu()
        else:
            self.hud = build_hud()
            self._shown_score = None
            # Initial enemies are placed before the player exists, so the origin is kept clear.
            self.enemies = spawn_initial_enemies(self.window, None, self.rng)
            self.enemy_spawn_count += len(self.enemies)
            self.player = spawn_player(self.window)
            self.score = Score()
            self.stars = spawn_stars(self.window, self.rng)

    def _exit_app_state(self, state: AppState) -> None:
        if state is AppState.MAIN_MENU:
            self.main_menu_ui = None
        elif state is AppState.GAME_OVER:
            self.game_over_ui = None
        else:
            self.hud = None
            self.enemies.clear()
            self.enemy_spawn_count = 0
            self.player = None
            self.score = None
            self.stars.clear()

    def _apply_transitions(self) -> None:
        target_app, self.next_app_state = self.next_app_state, None
        if target_app is not None and target_app is not self.app_state:
            self._exit_app_state(self.app_state)
            self.app_state = target_app
            self._enter_app_state(target_app)

        target_sim, self.next_simulation_state = self.next_simulation_state, None
        if target_sim is not None and target_sim is not self.simulation_state:
            if self.simulation_state is SimulationState.PAUSED:
                self.pause_menu_ui = None
            self.simulation_state = target_sim
            if target_sim is SimulationState.PAUSED:
                self.pause_menu_ui = build_pause_menu()

    def _apply_action(self, action: ButtonAction) -> None:
        if action.app_state is not None:
            self.next_app_state = action.app_state
        if action.simulation_state is not None:
            self.next_simulation_state = action.simulation_state
        if action.exit:
            self.exit_requested = True

    # Systems

    def _global_keys(self) -> None:
        if self.keyboard.just_pressed(Key.G) and self.app_state is not AppState.GAME:
            self.next_app_state = AppState.GAME
            _log.info("Entered AppState::Game")
        if self.keyboard.just_pressed(Key.M) and self.app_state is not AppState.MAIN_MENU:
            self.next_app_state = AppState.MAIN_MENU
            _log.info("Entered AppState::MainMenu")
        if self.keyboard.just_pressed(Key.ESCAPE):
            self.exit_requested = True

    def _toggle_simulation(self) -> None:
        if not self.keyboard.just_pressed(Key.SPACE):
            return
        if self.simulation_state is SimulationState.RUNNING:
            self.next_simulation_state = SimulationState.PAUSED
            _log.info("Simulation Paused")
        else:
            self.next_simulation_state = SimulationState.RUNNING
            _log.info("Simulation Resumed")

    def _simulate(self, delta: float) -> None:
        player_movement(self.player, self.keyboard, delta)
        confine_player_movement(self.player, self.window)

        enemy_movement(self.enemies, delta)
        self.sounds.extend(update_enemy_direction(self.enemies, self.window, self.rng))
        confine_enemy_movement(self.enemies, self.window)
        if enemy_hit_player(self.enemies, self.player):
            self.sounds.append(EXPLOSION_SOUND)
            self.player = None
            score = self.score.value if self.score is not None else 0
            self._events.append(GameOverEvent(score))
        self.enemy_timer.tick(delta)
        player_position = self.player.position if self.player is not None else None
        enemy = spawn_enemy_over_time(self.window, player_position, self.enemy_timer, self.rng)
        if enemy is not None:
            self.enemies.append(enemy)
            self.enemy_spawn_count += 1

        collected = player_hit_star(self.player, self.stars)
        if self.score is not None:
            self.score.value += len(collected)
        self.sounds.extend(STAR_SOUND for _ in collected)
        self.star_timer.tick(delta)
        star = spawn_star_over_time(self.window, self.star_timer, self.rng)
        if star is not None:
            self.stars.append(star)

    def _update_hud(self) -> None:
        if self.hud is None:
            return
        if self.score is not None and self.score.value != self._shown_score:
            update_score_text(self.hud, self.score.value)
            self._shown_score = self.score.value
        update_enemy_text(self.hud, self.enemy_spawn_count)

    def _handle_game_over(self) -> None:
        events, self._events = self._events, []
        if not events:
            return
        if self.app_state is AppState.GAME and self.score is not None:
            self.high_scores.record(DEFAULT_PLAYER_NAME, self.score.value)
        for event in events:
            _log.info("Game Over! Final Score: %d", event.score)
            self.last_game_over = event
            self.next_app_state = AppState.GAME_OVER

    # Public API

    def update(self, delta: float) -> None:
        """Advance the game by one frame of ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"frame delta must not be negative: {delta}")
        self._apply_transitions()
        self._global_keys()
        if self.app_state is AppState.GAME:
            self._toggle_simulation()
            if self.simulation_state is SimulationState.RUNNING:
                self._simulate(delta)
            self._update_hud()
        self._handle_game_over()
        self.keyboard.clear_just_pressed()

    def _interactive_menus(self) -> list[tuple[Marker, UiNode]]:
        menus: list[tuple[Marker, UiNode]] = []
        if self.app_state is AppState.MAIN_MENU and self.main_menu_ui is not None:
            menus.append((Marker.MAIN_MENU, self.main_menu_ui))
        if self.simulation_state is SimulationState.PAUSED and self.pause_menu_ui is not None:
            menus.append((Marker.PAUSE_MENU, self.pause_menu_ui))
        if self.app_state is AppState.GAME_OVER and self.game_over_ui is not None:
            menus.append((Marker.GAME_OVER_MENU, self.game_over_ui))
        return menus

    def interact(self, marker: Marker, interaction: Interaction) -> bool:
        """Report a change in how the pointer relates to a button.

        Returns False if no active menu has a button with ``marker``.
        """
        handled = False
        for menu, root in self._interactive_menus():
            node = root.find(marker)
            if node is None or not node.button:
                continue
            action = handle_button(node, interaction, menu)
            if action is not None:
                self._apply_action(action)
            handled = True
        return handled