# ballgame

A small 2D arcade game. You steer a blue ball around the window, collecting
stars for points while red balls bounce off the walls. More red balls appear
over time; touch one and the game is over.

## Installing

```
pip install .
```

The game draws with pygame, which is installed as a dependency.

## Playing

Start the game with:

```
ballgame
```

Options:

- `--width`, `--height`: window size in pixels (default 1280 by 720)
- `--fps`: frame-rate cap (default 60)
- `--frames`: stop after this many frames
- `--assets`: directory searched for sound effects (default `assets`)

Controls:

- Arrow keys or W/A/S/D: move the player
- G: start a game from any screen
- M: go back to the main menu
- Space: pause or resume during a game
- Escape: quit

The main menu, pause menu and game-over menu each have buttons you can click:
Play, Resume, Restart, Main Menu and Quit. During a game a panel at the top
shows your score on the left and the number of red balls on the right.

## Rules

- Each star you touch adds one point to your score. A new star appears every
  second.
- A new red ball appears every ten seconds, unless it would land too close to
  you.
- When a red ball touches you, the game ends, the final score is written to
  the log, and it is added to the high-score table, which keeps the top ten.

## Using the game logic in code

The game's logic does not depend on a display, so it can be driven from Python:

```python
from ballgame.app import Game
from ballgame.core import Key

game = Game()
game.keyboard.press(Key.G)   # ask to leave the main menu
game.update(1 / 60)
game.keyboard.release(Key.G)
game.keyboard.press(Key.RIGHT)
game.update(1 / 60)          # the game starts, then the player moves right
print(game.player, game.score)
```

State changes asked for during a frame take effect at the start of the next
call to `Game.update`. Menu buttons are driven with
`Game.interact(marker, interaction)`, using `ballgame.menus.Marker` and
`ballgame.interactions.Interaction`. Sound effects the game wants played
collect in `Game.sounds`; `game.high_scores` holds the score table.

The pieces it is built from live in `ballgame.player`, `ballgame.enemy`,
`ballgame.star`, `ballgame.score` and `ballgame.timer`; the menu layouts are
built by `ballgame.menus`, styled by `ballgame.styles`, and drawn by
`ballgame.render`.

## What it does not do

- The player, red balls and stars are drawn as plain shapes, and text uses
  pygame's built-in font; no image or font files are loaded.
- Sound effects are played only if the matching files exist under the
  `--assets` directory and audio is available.
- The high-score table lives only in memory for the current run, and every
  entry is recorded under the name "Player"; there is no name entry.

## Running the tests

```
pip install .[test]
pytest
```