# spacetrash

A small side-scrolling arcade game engine. A ship sits at the left edge of an
84×48 pixel screen and moves up and down. Space trash drifts in from the
right, star-shaped props can be picked up and planets roll through. The
engine runs one frame at a time and draws onto a monochrome framebuffer that
renders as plain text.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## The `spacetrash` command

```
spacetrash [--frames N] [--seed SEED] [--fire-every N] [--realtime]
```

The command plays a scripted game: the stick stays centred, the start button
is pressed on the first pass of the loop, and the fire button is pressed on
every Nth pass. When the passes run out it prints the last frame shown on the
text screen, followed by a line such as
`state: playing score: 30 lives: 2`.

- `--frames` — number of loop passes (default 200, at least 1).
- `--seed` — seed for the random numbers, so that a run can be repeated.
- `--fire-every` — fire on every Nth pass (default 3); `0` never fires.
- `--realtime` — wait between passes as long as the game loop asks
  (0.2 s on the menu, pause and game-over screens, 0.1 s while playing).

A printed frame starts with the text rows (6 rows of 14 characters), followed
by one line per pixel row, with `#` for a lit pixel and `.` for a dark one.

## Rules and scoring

- Shooting a piece of trash: +10. A big piece splits into two small pieces
  that fly toward the ship; a small piece breaks into dust.
- Collecting a prop: +20.
- Destroying a planet (it takes three hits): +50.
- Trash that leaves the screen on the left: −20. The score never goes below 0.
- Touching trash or a planet costs one of the three lives.

The game-over screen shows the score and the share of small trash that was
let through, as a percentage.

## Using the pieces

- `spacetrash.engine` — `SpaceTrashEngine` advances one frame with
  `update(user_input, fire=False)`, which returns the remaining lives, and
  draws with `draw(lcd)`. Its `lives`, `score`, `total_trash_spawned` and
  `total_trash_missed` properties report the state. The module also has
  `GameObject`, `ObjectType`, `GameState` and `check_collision`.
- `spacetrash.joystick` — `Joystick` takes two callables that return readings
  in 0..1 (vertical, horizontal). `init()` records the centre. The other
  methods are `get_coord`, `get_mapped_coord`, `get_polar`, `get_mag`,
  `get_angle` and `get_direction`. `direction_from_angle` maps a compass angle
  to a `Direction`.
- `spacetrash.devices` — `Buzzer` sends `(period_us, pulse_width_us)` to a
  callable you pass in. `LifeIndicator` keeps three LED states in `leds`.
  `Button` debounces a read callable by confirming a press after 10 ms.
- `spacetrash.sprites` — the sprite bitmaps and the `draw_*_sprite` helpers.
- `spacetrash.game` — `TextScreen` is the framebuffer. `GameApp` drives the
  menu, play, pause and game-over states. Each `step()` runs one pass of the
  loop and returns the pause in seconds before the next one.
- `spacetrash.utils` — `Direction`, `UserInput`, `Vector2D`, `Polar` and
  `Position2D`.

```python
import random
from spacetrash.engine import SpaceTrashEngine
from spacetrash.game import TextScreen
from spacetrash.utils import Direction, UserInput

engine = SpaceTrashEngine(rng=random.Random(1), buzzer=None)
engine.init(84, 48)
lives = engine.update(UserInput(Direction.N, 1.0), fire=True)

screen = TextScreen(84, 48)
engine.draw(screen)
print(screen.render())
```

## What it does not do

The package reads no keyboard, mouse or game controller. The `spacetrash`
command only plays the scripted game described above, and it cannot be
steered while it runs. To play interactively, build a `GameApp` from your own
`Joystick` and `Button` read callables. No sound is produced either: `Buzzer`
only passes PWM settings to the callable it was given.