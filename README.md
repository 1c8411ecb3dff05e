# circlepick

circlepick keeps an 8-bit grayscale canvas with up to three marker points on
it. When the third point is placed, it draws the circle that passes through
all three. Dragging a marker moves it and redraws the circle. A random mode
moves the markers to random positions with random sizes and shades, then
redraws the circle after each step.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
circlepick --help
```

The `circlepick` command runs the editor without a window. Each `--point X Y`
is a click at window position (X, Y). The canvas starts `--offset` pixels
below the top of the window, so a click at `(x, y)` lands on canvas pixel
`(x, y - offset)`. A click outside the canvas is ignored. A click on an
existing marker does not place a new one.

Options:

- `--width`, `--height`: canvas size. The defaults are 1920 and 1080.
- `--offset`: canvas offset from the window top. The default is 50.
- `--point X Y`: a click. You can give it more than once.
- `--thickness`: marker radius. The default is 5.
- `--color`: marker gray level. The default is 100.
- `--circle-thickness`: ring thickness. The default is 3.
- `--random N`: runs N random steps. This needs exactly three points; without
  them the command prints an error and exits with status 1.
- `--delay`: seconds to wait between random steps. The default is 0.5.
- `--seed`: seed for the random generator.
- `--output PATH`: writes the canvas to PATH as a binary PGM.

The command prints each marker position. When three markers are placed it
also prints the circle's centre and radius. If the markers are collinear it
prints a note instead.

## Library

### `circlepick.geometry`

- `Point`: a frozen pair of integers, `x` and `y`.
- `CircleInfo`: has the fields `cx`, `cy`, `radius` and `valid`.
- `in_circle(i, j, center_x, center_y, radius)`: tests whether a pixel lies
  within `radius` of a centre.
- `circumscribed_circle(points)`: returns the circle through the first three
  points.
  - For collinear points it returns `CircleInfo()`, where `valid` is `False`.
  - With fewer than three points it raises `ValueError`.

### `circlepick.raster`

`GrayImage(width, height)` is an 8-bit canvas that starts out black. Read a
pixel with `image[x, y]`; a position outside the image raises `IndexError`.
Drawing is clipped to the image. The methods are:

- `clear(value=255)` fills every pixel with `value`.
- `fill_disc(x, y, radius, color)` draws a disc centred on `(x, y)`.
- `fill_disc_from_corner(x, y, radius, color)` draws a disc whose bounding box
  has its top-left corner at `(x, y)`.
- `draw_ring(x, y, radius, thickness, color)` draws a circle outline of the
  given thickness.
- `to_pgm()` returns the canvas as binary PGM bytes.

### `circlepick.editor`

`CircleEditor(width=1920, height=1080, offset_y=50, rng=None)` takes mouse
events in window coordinates. Call `reset()` before drawing anything; it
creates the canvas, clears it to white and forgets all markers. While a random
run is in progress, `reset()` does nothing.

- `button_down(x, y)` starts a drag if the click hits a marker. Otherwise it
  places a new marker, as long as fewer than three are placed.
- `mouse_move(x, y)` does three things:
  - It records the cursor position as `now_x` and `now_y`.
  - It sets `hover_x` and `hover_y` to the position of a marker under the
    cursor.
  - It moves a dragged marker and redraws the canvas.
- `button_up(x, y)` ends a drag.
- `drag_reset()` clears the canvas and the marker positions. It keeps the
  marker sizes and colours.
- `can_randomize()` returns whether a random run can start.
- `randomize()` makes one random step and returns the new `CircleInfo`.
- `run_random(repeat=10, delay=0.5, on_update=None)` runs a series of random
  steps. It calls `on_update(editor)` after each step and returns `False` if
  the run could not start.
- `random_position()` returns a random point in the top-left quarter of the
  canvas.
- `random_int(start, end)` returns a random integer in `[start, end]`.

The editor also exposes these attributes:

- `image`: the `GrayImage` canvas.
- `points`, `sizes` and `colors`: the markers and their radii and shades.
- `circle`: the last computed `CircleInfo`.
- `thickness`, `color`, `circle_thickness` and `circle_color`: the drawing
  settings.

```python
from circlepick.editor import CircleEditor

editor = CircleEditor()
editor.reset()
for x, y in [(100, 150), (300, 150), (200, 350)]:
    editor.button_down(x, y)
print(editor.circle)
with open("circle.pgm", "wb") as fh:
    fh.write(editor.image.to_pgm())
```

## What it does not do

circlepick has no window or on-screen display. Events are method calls or
command-line clicks, and the only way to see the canvas is to write it out as
a PGM file. `run_random` runs in the calling thread and blocks until it
finishes. It does not run in the background.