# flapsim

A small arcade game in the flappy-bird style, together with a bouncing-ball
physics sandbox. Both are drawn with pygame.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Playing

```
flapsim
```

This opens a 1280×720 window called "FlappyBird". The command takes no
options apart from `--help`. The game looks for its assets relative to the
directory you start it from:

- `resources/textures/ptitsa.png`: the bird, which is also used for the pipes
- `resources/textures/background.png`: the scrolling background
- `resources/fonts/OpenSans-Regular.ttf`: the font for the on-screen text

If a texture is missing, "Failed to load texture" is printed and that image is
drawn as nothing. If the font is missing, "Failed to load font" is printed and
pygame's default font is used instead. In both cases the game keeps running.

### Rules

- Press any key or mouse button to flap. The first flap starts the game.
  Presses that come less than 0.05 s after the previous flap are ignored.
- Pipes come from the right in pairs. Each pair you get past adds one to the
  score. Every time a pipe leaves the screen on the left it is moved back to
  the right at a new height, and all pipes get faster.
- Touching a pipe, or the top, bottom or left edge of the window, costs health
  for as long as the contact lasts. The red bar and the "Health" text in the
  top-left corner show what is left.
- At zero health "Game Over!" is shown and everything stops. The next key or
  click resets the game, and the one after that starts a new round.

Close the window to quit.

## Using it as a library

The parts can also be used on their own:

- `flapsim.rng.Random`: one shared random generator, reached through
  `Random.get()`. It can be seeded with `set_seed(seed)` and offers `value()`,
  `range_float(low, high)` and `range_int(low, high)`. `range_int` includes
  both ends and raises `ValueError` when `low > high`.
- `flapsim.sprite`: `Rect` with `intersection` (which returns `None` when the
  rectangles do not overlap), `Sprite` with `position`, `origin`, `scale`,
  `rotation`, `move`, `global_bounds` and `draw`, and the abstract
  `GameObject`, whose subclasses implement `update(delta_time)`.
- `flapsim.bird.Bird`, `flapsim.pipe.Pipe` and `flapsim.ball.Ball`: the moving
  objects and their physics. `Pipe.speed` is shared by every pipe and is changed
  with `Pipe.set_speed` and `Pipe.increase_speed`.
- `flapsim.application.Application`: the window and the frame loop. Subclass
  it, implement `poll_event`, `update` and `render`, then call `run()`. It can
  be used as a context manager, which calls `close()` on exit. If you pass
  `surface=` it draws onto that surface and does not open a window.
- `flapsim.flappy_bird.FlappyBird`: the game itself. Textures, the font path
  and the clock can be passed in, and so can a surface.
- `flapsim.sandbox.Sandbox`: a window full of falling, bouncing balls that push
  each other apart. Hold the left mouse button to add more balls. It loads its
  texture from `../resources/textures/ptitsa.png` unless you pass `texture=`.

```python
from flapsim.sandbox import Sandbox

with Sandbox((1280, 720), "Sandbox") as sandbox:
    sandbox.run()
```

## What it does not do

The only command is `flapsim`, which starts the game. There is no command for
the sandbox, so start it from Python as shown above. Neither program keeps
high scores or settings between runs, and neither plays sound.