# asteroidgame

A small asteroid-style arcade game built on pygame. You fly a triangular
ship around a window and fire projectiles.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

Start the game with:

```
asteroidgame
```

Before the window opens, the game asks for three values on the terminal:

- **Render width**: a positive whole number of pixels.
- **Render height**: a positive whole number of pixels, smaller than the width
  (the window has to be landscape).
- **Game multiplier**: a number from 2 to 2.5 that scales how fast the ship
  moves and turns, and how fast enemies drift.

If a value is out of range (or is not a number), the game says why and asks
again. A bad width or height clears both dimensions. A bad multiplier clears
only the multiplier. If the input ends before all three values are valid, the
command exits with status 1.

### Controls

| Key | Action |
| --- | --- |
| Up / A | move forward |
| Down / S | move backward |
| Left / A, Right / D | rotate |
| Space or left mouse button | fire a projectile |
| Escape, or closing the window | pause |
| Q (while paused) | quit |
| E (while paused) | resume |

When you move backward, the rotation keys turn the ship the other way. The
ship cannot leave the window. Projectiles (and any enemies in play) are
removed once they pass the edge of the window.

## What it does not do

The game is a movement-and-shooting sandbox. During play no enemies are
spawned into the window, projectiles do not collide with anything, and there
is no score; the player's `lives` and `level` are stored but never change.
Enemies can be made with `EnemyFactory` and moved with `Enemy.update()`
when the package is used as a library.

## Using it as a library

The game's parts can be used on their own:

- `asteroidgame.settings`: `get_settings()` returns the shared
  `GameSettings` object, which holds the render dimensions and the
  multiplier; `set_render_dimensions()` and `set_multiplier()` change them
  and print the new values. `reset_settings()` discards the shared object.
  `MenuState` lists the game states and `WeaponType` the weapons.
- `asteroidgame.entities`: `Vector2`, the abstract `Entity`, `Enemy`,
  `Projectile` and `still_in_window()`.
- `asteroidgame.factory`: `ProjectileFactory` and `EnemyFactory`, with
  `create()` for default entities centred in the window and `create_with()`
  for explicit parameters; `describe()` reports what a factory makes.
- `asteroidgame.player`: `Player` and the `Controls` snapshot of one frame's
  input that `Player.update()` uses.
- `asteroidgame.menu`: `Menu`, whose `advance()` runs one frame of game logic
  without opening a window and whose `run_app()` opens the window and runs
  the game loop; `read_controls()` reads input from pygame.
- `asteroidgame.cli`: `prompt_configuration()` asks for the configuration
  through any read and write callables; `main()` is the `asteroidgame`
  command.
- `asteroidgame.errors`: `NullNegativeDimensionsError`,
  `NonLandscapeDimensionsError` and `InvalidMultiplierError`, all subclasses
  of `ConfigurationError`.

```python
from asteroidgame.settings import get_settings
from asteroidgame.factory import EnemyFactory
from asteroidgame.entities import still_in_window

settings = get_settings()
settings.set_render_dimensions(1600, 1000)
settings.set_multiplier(2.0)

enemy = EnemyFactory().create()
enemy.update()
print(enemy.position, still_in_window(enemy))
```

Running one frame without a window:

```python
from asteroidgame.menu import Menu
from asteroidgame.player import Controls, Player
from asteroidgame.settings import MenuState

player = Player("Pilot", 1, 5, 0, (800, 500), 26.0, 3)
entities = []
menu = Menu(MenuState.PLAYING)
menu.advance(Controls(forward=True, fire=True), player, entities, now=0.0)
print(player.position, len(entities))
```