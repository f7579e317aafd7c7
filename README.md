# starfleet

A small vertical space shooter. Your ship sits at the bottom of the screen
while waves of enemy ships drift down from the top, firing as they come.
Shoot them down, dodge their bullets and pick up the power-ups that fall
from above.

## Installing

```
pip install .
```

## Playing

Start the game with:

```
starfleet
```

Options:

- `--assets DIR` — the directory holding the `images/` and `sounds/`
  folders (default: `assets` in the current directory).
- `--mute` — play without music.

The main menu offers **START GAME** and **How To Play**; click them with
the left mouse button.

In the game:

- **Click** anywhere to fly your ship sideways to that spot. Longer trips
  take more time.
- Press **Space** to fire. Your bullets destroy enemy ships and enemy
  bullets.
- You start with ten hearts, shown down the left edge. Every enemy bullet
  or enemy ship that reaches you costs one heart. The game ends when you
  are hit while only one heart is left.

Enemy waves of five to fourteen ships arrive every three seconds. A
power-up falls every twelve seconds at a random spot. Fly into it to
collect it:

- **Repair Kit** gives back one heart, up to ten.
- **Rapid Fire** makes your ship fire on its own for five seconds.
- **Velocity Boost** doubles your flying speed for five seconds.

When the game is over, **MAIN MENU** takes you back to the start.

## Art and music

The package ships no images or sounds. The game looks for them under the
`--assets` directory, for example `images/spaceship.png`,
`images/enemy1.png` to `images/enemy4.png`, `images/heart.png`,
`images/menu background.png` and `sounds/linggang guli guli.mp3`. Any file
that is missing is simply left out: ships, bullets, hearts and power-ups
are then drawn as coloured rectangles, menu pages show only their buttons,
and no music plays.

## Using the pieces

The game logic does not need a window. `starfleet.scene.Scene` holds
every object in play and moves time forward with `Scene.advance(dt)`, with
`dt` in milliseconds. `Scene.game_start()` places the player and starts
the spawning timers, `Scene.mouse_press(x)` and
`Scene.key_press(key, auto_repeat)` feed it input (the fire key is
`Scene.SPACE`), and `Scene.game_stop()` clears the field.
`starfleet.app.Menu` tracks which `Page` is showing, which buttons can be
used and which music track should play.

## Running the tests

```
pip install ".[test]"
pytest
```