# arcadecase

Two classic arcade games written with pygame.

- **Pong**: two paddles, one ball, first to 5 points wins. Press `Enter` to
  start, to serve and to restart after a match. In the `arcadecase-pong`
  command both paddles are steered by the computer: the paddle follows the
  ball while it comes towards it and otherwise drifts back to the middle.
  Close the window to quit.
- **Flappy Bird**: press `Enter` on the title screen, wait for the
  count-down, then click the left mouse button to flap past the scrolling
  logs. Each pair of logs passed scores a point; hitting a log or the ground
  sends you back to the count-down. Press `P` to pause and resume, and
  `Escape` (or close the window) to quit. Background music loops while you
  play.

## Installation

```
pip install .
```

## Playing

Both games read their graphics, sounds and fonts from an asset directory,
by default the current directory.

Pong expects `fonts/font.ttf` and `sounds/paddle_hit.wav`,
`sounds/wall_hit.wav` and `sounds/score.wav`.

Flappy Bird expects `graphics/` (`bird.png`, `background.png`, `ground.png`,
`log.png`), `sounds/` (`jump.wav`, `explosion.wav`, `hurt.wav`, `score.wav`,
`marios_way.ogg`) and `fonts/` (`font.ttf`, `flappy.ttf`). A missing file
stops the game with an error naming it.

Run a game from the directory that holds its assets, or pass the directory
with `--assets`:

```
arcadecase-pong
arcadecase-pong --assets path/to/pong-assets

arcadecase-flappy
arcadecase-flappy --assets path/to/flappy-assets
```

## Using the game logic

The rules can be driven without opening a window. `Pong.handle_input` takes
the set of pygame key codes currently held down:

```python
import pygame

from arcadecase.pong.game import Pong, PongState

pong = Pong(ai_players=(False, False))   # both paddles under player control
pong.handle_input({pygame.K_RETURN})     # START -> SERVE
pong.handle_input({pygame.K_RETURN})     # SERVE -> PLAY
assert pong.state is PongState.PLAY
pong.handle_input({pygame.K_w})          # left paddle moves up
pong.update(1 / 60)
```

`Pong` also accepts a `random.Random` as `rng` for repeatable serves and
bounces, and any object with a `play(name, pan)` method as `sounds`.

The Flappy Bird pieces live in `arcadecase.flappy`: `Bird` and `Rect`
(`bird`), `Log` and `LogPair` (`logs`), `World` (`world`), the object pool
`Factory` (`factory`), `render_text` (`text`), the `StateMachine` with its
`TitleScreenState`, `CountDownState`, `PlayingState` and `PauseState`
(`states`), and `Game` (`game`). Media files are loaded with
`arcadecase.flappy.settings.load_assets`; every piece also works without
assets, in which case it plays no sound and draws no images.

## Running the tests

```
pip install .[test]
pytest
```