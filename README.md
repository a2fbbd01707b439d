# pongus

A small arcade Pong game built on pygame. Two paddles, one ball, and a score
at the top of the screen. Play against a friend on the same keyboard or
against a bot.

## Installing

```
pip install .
```

## Playing

The game looks for its assets relative to the working directory:

- `Assets/settings.json`: colours, frame rate and background music (required)
- `Assets/textures/backdrop.png`: the background image (skipped if it cannot be loaded)
- `Assets/fonts/CreatoDisplay/CreatoDisplay-Medium.ttf`: the menu font
  (pygame's default font is used if it cannot be loaded)

Start it from the directory that holds `Assets/`:

```
pongus
```

Only one `Game` may exist at a time; creating a second one prints an error
and exits the process.

### Settings file

```json
{
    "PaddleColor": "ffffff",
    "BallColor": "ff4040",
    "BackgroundMusic": "Assets/music/theme.ogg",
    "fps": 60
}
```

All four keys must be present; a missing key raises `KeyError`. Colours are
six hex digits (red, green, blue) and are always fully opaque. When `fps` is
zero or less, the frame rate is not capped. The background music loops for as
long as the game runs; if it cannot be loaded the game plays without sound.

### Controls

| Action              | Keys                  |
|---------------------|-----------------------|
| Menu up / down      | `W` / `S`, arrow keys |
| Choose menu entry   | `Enter` or `Space`    |
| Back to main menu   | `Esc`                 |
| Close the game      | `F8` or closing the window |
| Left paddle         | `W` / `S`             |
| Right paddle        | Up / Down arrows      |
| Quit prompt         | `Y` / `N`             |

In "Player vs AI" the right paddle follows the ball by itself.

A point goes to the left player when the ball leaves the right edge, and to
the right player when it leaves the left edge. The ball is then put back in
the centre of the screen.

### What it does not do

The main menu shows a "Settings" entry, but choosing it does nothing: there is
no in-game settings screen. Settings are changed only by editing
`Assets/settings.json`. Scores are not saved between runs.

## Using it from Python

```python
from pongus.game import Game

with Game() as game:
    game.run()
```

`pongus.game.main()` does the same and returns `0`.

Other pieces can be used on their own:

- `pongus.settings.load_settings(path)` reads a settings file into a
  `Settings` dataclass.
- `pongus.settings.parse_color("ff8800")` returns the RGBA tuple
  `(255, 136, 0, 255)`.
- `pongus.ball.Ball` and `pongus.player.Player` (with `PlayerType.PLAYER1`,
  `PLAYER2` or `BOT`) advance one frame through their `update` methods.
- `pongus.menus` holds `MainMenu`, `PlayMenu` and `QuitMenu`.

## Running the tests

```
pip install ".[test]"
pytest
```