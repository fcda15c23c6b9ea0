# bocchi

A small side-scrolling platformer built on pygame. The stage is a grid of
tiles read from a CSV file; the player character falls under gravity, walks,
jumps, lands on blocks, and the stage is rebuilt from its file each time the
player reaches the goal.

## Installing

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Playing

```
bocchi
```

This opens a 1280 × 720 window paced at 60 frames per second.

- Walk left and right with the game pad's D-pad.
- Jump with the pad's A button or the space bar.
- Release Escape, or close the window, to quit.

The keyboard arrow keys do not move the player; walking needs a game pad.

The text in the top-left corner shows the stage size in tiles and a
`LOOP` counter of how many times the goal has been reached.

### Options

| option           | effect                                                      |
|------------------|-------------------------------------------------------------|
| `--stage PATH`   | stage CSV file (default `Resource/file/stage.csv`, relative to the working directory) |
| `--show-fps`     | draw the measured frame rate in the top-left corner         |
| `--frames N`     | stop after `N` frames                                       |

The command exits with status 0 when the game ends normally and 1 when the
window cannot be opened or the stage cannot be set up (the reason is
printed on stderr).

## Stage files

The first line gives the stage width and height in tiles; each following
line is one row of comma-separated tile codes:

| code | tile   |
|------|--------|
| 0    | empty  |
| 1    | block  |
| 2    | player |
| 4    | goal   |

Any other code leaves the cell empty. Tiles are 48 pixels square (the player
is 64 × 96). Rows are stacked upwards from the bottom of the screen: the top
edge of the last row is at y = 720, and each earlier row sits 48 pixels
higher. The camera follows the player horizontally and stops at the ends of
the stage.

```
4,3
0,0,0,4
2,0,0,0
1,1,1,1
```

A stage may be at most 1000 × 1000 tiles; a larger size or a value that is
not a number raises `bocchi.scene.SceneError`. A stage file that cannot be
opened is reported on stderr and leaves the stage empty.

## What it does not do

- There is no title or result screen; the game starts directly on the stage.
- No enemies are placed: tile code 3 is not turned into an object, and
  `bocchi.objects.Enemy` is only a falling, block-colliding character.
- No sprites or sounds are loaded by the game itself. Objects are drawn as
  red outlines of their boxes, with a "Goal" label on the goal tile.
- Touching the goal simply counts a loop and rebuilds the stage; there is no
  score, lives or game over.

## Using it as a library

- `bocchi.vector2d.Vector2D` — 2D vector arithmetic; dividing by a value near
  zero gives the zero vector.
- `bocchi.fps.FpsController` — frame pacing and frame-rate measurement, with
  an injectable millisecond clock and sleep function.
- `bocchi.input_control.InputControl` — held / just-pressed / just-released
  queries for keys, mouse and pad buttons, plus stick tilt; feed it with
  `update(...)` or read the devices with `poll()`.
- `bocchi.resources.ResourceManager` — loads images and sounds once per file
  name and caches them; failures raise `ResourceError`.
- `bocchi.objects` and `bocchi.player` — the game objects, box collision and
  the player's movement state machine.
- `bocchi.scene` — `parse_stage(text)` for reading stage text,
  `GameMainScene` for the playable stage and `SceneManager` for running and
  switching scenes.
- `bocchi.app.main(argv=None)` — the command above.