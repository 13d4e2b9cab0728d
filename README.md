# gridsnake

A classic snake game on a 30 × 20 grid whose edges wrap around.

Steer the snake with the arrow keys. It grows by one segment for each piece
of food it eats. It cannot turn straight back on itself. Running into its
own body ends the game.

## Installing

```
pip install gridsnake
```

This also installs `pygame`, which provides the window, the drawing and the
sound.

## Playing

```
gridsnake
```

- **Main menu:** Up and Down move between *Start Game* and *Exit*; Return
  chooses. *Start Game* begins a fresh round, *Exit* closes the game.
- **In game:** the arrow keys steer the snake; Escape switches to the pause
  screen.
- **Game over:** press R to return to the main menu.

The snake moves eight times a second. When it leaves one edge of the board
it comes back in on the opposite edge.

## Sounds

Sounds are loaded from a resource directory. If the environment variable
`GRIDSNAKE_DIR` is set, that directory is `$GRIDSNAKE_DIR/assert/audio`;
otherwise it is `./resources`. The game looks there for:

- `bgm.mp3`, the looping background music
- `eat.ogg`, played when the snake eats
- `die.ogg`, played when it runs into itself

When a file is missing or cannot be loaded, the game runs without that sound.

## Using the pieces

The game logic does not need a window, so it can be driven directly:

```python
import random

from gridsnake.audio import AudioManager
from gridsnake.game import GameState

state = GameState(random.Random(1))
audio = AudioManager()
ate = state.tick(audio)      # advance one step; returns Ate.FOOD, Ate.ITSELF or None
state.update(0.25, audio)    # run every step due in 0.25 seconds; returns the count
```

- `gridsnake.game` holds `GridPos`, `Direction`, `Snake`, `Food`, `Ate` and
  `GameState`. `GameState.key_down(key)` takes a pygame key code.
- `gridsnake.audio.AudioManager` plays background music (`play_bgm`,
  `stop_bgm`, `replay_bgm`) and named effects (`load_sfx`, `play_sfx`);
  playing an effect that was never loaded does nothing.
- `gridsnake.menu` holds the title menu (`MainMenu`, `MenuManager`).
- `gridsnake.app.AppState` ties the scenes together; `gridsnake.app.main`
  runs the window loop.
- `gridsnake.level.basic_levels()` returns the built-in layouts Easy,
  Medium and Hard, each with obstacle cells and a speed.

## What it does not do

- The pause screen shows *Continue* and *Quit* but reacts to no keys, so a
  paused game cannot be resumed; close the window to leave it.
- The level layouts are defined but not used: there is no level-selection
  screen, obstacles are never placed on the board and the speed is always
  eight steps a second.
- There is no score display and no saved high score.