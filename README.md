# jetjoy

A small side-scrolling arcade game. Barry runs along the floor of a
laboratory that scrolls past endlessly. Hold the space bar to fire the
jetpack and climb, let go to fall back down. Coin formations, rows of
electric zappers, power-ups and homing missiles keep appearing from the
right-hand side of the screen.

## Installing

```
pip install .
```

This pulls in `pygame`, which opens the window, reads the keyboard and
draws the sprites.

## Playing

The game loads its artwork from a resources directory, `Resources` in
the current directory unless you name another one:

```
jetjoy --resources path/to/Resources
```

The directory holds an `Image/` tree with the sprites:

- `Image/Home/start.png` and `Image/Home/bgicon.png`: title screen and logo
- `Image/Background/Lab/lab1.png`, `lab2.png`: the scrolling lab
- `Image/barry/`: `barry0.png`, `barry1.png` (running),
  `barryflying0.png` to `barryflying2.png`, `barryfalling.png`
- `Image/Coin/coin1.png` to `coin8.png`
- `Image/Zapper/`: `ver zapper1.png` to `ver zapper4.png` and
  `zapper1.png` to `zapper4.png`
- `Image/Missile/missile0.png` to `missile5.png`,
  `Image/Warning/warning0.png`, `warning1.png`
- `Image/PowerUp/powerUp0.png` to `powerUp7.png`
- `Image/logo/icon.png`: the window icon (used if present)

Controls:

| Key    | Action                                        |
|--------|-----------------------------------------------|
| Enter  | send the logo up off the title screen         |
| Space  | hold to fly up, release to fall               |
| Escape | quit (when the key is released)               |

Closing the window quits as well. The lab starts scrolling, and things
start spawning, once the logo has left the screen.

## How the game is put together

The game logic does not depend on pygame and can be driven from code or
from tests; only `jetjoy.app.run` opens a window.

- `jetjoy.camera`: the immutable `Vec2` and the `Camera`, whose offset
  moves to the right at 250 pixels per second.
- `jetjoy.animation`: the frame-based `Animation` (`play`, `advance`,
  `is_finished`), the static-image `Sprite`, and the `Renderer`, an
  ordered collection of everything to be drawn.
- `jetjoy.background`: the `Background`, which scrolls the start screen
  away and then loops the lab images (see `BackgroundPhase` and
  `Background.tiles`), and the title `Logo`.
- `jetjoy.player`: the `Player` and its `PlayerPose` (run, fly, fall).
- `jetjoy.coins`: `Coin`, `CoinGroup` laid out in a `CoinPattern`
  (a 9 by 3 rectangle or a 6-4-2 staircase), and the `CoinManager`,
  which spawns a group after 4 seconds and then every 4 to 6 seconds.
- `jetjoy.zappers`: `Zapper` of a `ZapperType` and the `ZapperManager`,
  which places rows of three to five zappers at a random height, the
  first after one second and then every 2 to 5 seconds.
- `jetjoy.equipment`: power-up `Equipment` and the `EquipmentSpawner`,
  which adds one every ten seconds.
- `jetjoy.missile`: the `Missile`, which follows the player's height
  behind a warning sign for one second before it launches, and the
  `MissileSpawner`, which adds one every five seconds.
- `jetjoy.app`: the `Game` state machine (`AppState`), the per-frame
  `Inputs`, `run`, which opens the window and runs the main loop, and
  `main`, the `jetjoy` command.

A frame is advanced with `Game.update(inputs, delta_ms)` after
`Game.start()`:

```python
from jetjoy.app import Game, Inputs

game = Game()
game.start()
game.update(Inputs(enter=True), 16)
```

## What the game does not do

There is no collision handling, score or game over: Barry passes
through coins, zappers, missiles and power-ups without effect, and a
round lasts until you quit. `Sprite.collides` exists but nothing in the
game calls it.

## Running the tests

```
pip install ".[test]"
pytest
```