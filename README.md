# fdfview

A wireframe viewer for height maps. A map is a plain text file. Each line is
a row of the grid, and each space-separated number on it is the height of
that point. Every point is joined to its right and lower neighbours. The grid
is drawn in an isometric or a flat top-down projection and coloured by height.

```
0 0 0 0 0
0 10 10 10 0
0 10 20 10 0
0 10 10 10 0
0 0 0 0 0
```

The rules for a map file:

- The number of values on the first line sets the width of the grid. Longer
  lines are cut to that width. A shorter line is an error.
- The first value on each line must be an integer, optionally signed. Digits
  may be followed by a comma and anything after it, as in `10,0xFF0000`.
- A height is read as its leading sign and digits. Anything after the digits,
  including a colour suffix, is ignored.

## Installing

```
pip install .
```

This installs `pygame` as a dependency.

## Running

```
fdfview path/to/map.fdf
```

This opens a 1280×720 window titled "FdF". The command exits with status 1,
and prints a message to standard error, in three cases: it is not given
exactly one argument, the file cannot be read, or the map is malformed.

### Controls

| Key          | Action                        |
|--------------|-------------------------------|
| Z / X        | Zoom in / out                 |
| Arrow keys   | Move the map                  |
| W / S        | Rotate around the X axis      |
| Q / E        | Rotate around the Y axis      |
| R / L        | Rotate around the Z axis      |
| B            | Switch projection             |
| Backspace    | Reset the view                |
| H            | Show or hide the help panel   |
| Esc          | Quit                          |

Closing the window also quits. The help panel in the top-left corner of the
window is written in Spanish.

The colour of a wire depends on the height of the point it starts from:

| Height     | Colour     |
|------------|------------|
| ≤ 0        | `0x8B3A3A` |
| 1 – 40     | `0xE99696` |
| 41 – 80    | `0xFADDDD` |
| 81 – 100   | `0xEDEDED` |
| > 100      | `0xFFFFFF` |

## Using it as a library

You can use the viewer's parts without opening a window:

```python
from fdfview.mapfile import read_map
from fdfview.controls import default_view
from fdfview.raster import Canvas
from fdfview.render import render_frame

heightmap = read_map("map.fdf")
view = default_view(heightmap)
canvas = Canvas()
render_frame(heightmap, canvas, view)
print(hex(canvas.get_pixel(640, 360)))
```

### `fdfview.mapfile`

- `read_map(path)` reads a map file.
- `parse_map(lines)` builds a map from lines of text.
- Both return a `HeightMap` with `width`, `height` and `points[row][column]`
  of `Point(x, y, z, color)`.
- Both raise `MapError`, a subclass of `ValueError`, for an empty, unreadable
  or malformed map.
- `HeightMap.edges()` yields every wire of the grid as a pair of points.
- `is_valid(token)` checks a single value.
- `parse_int(text)` does the lenient integer reading. Its result wraps to a
  signed 32-bit value.

### `fdfview.projection`

- `View` holds the settings: scale, height scale, screen offset, the three
  rotation angles, the `ProjectionMode` (`ISOMETRIC` or `PARALLEL`) and the map
  size.
- `project(point, view)` returns a `Projected(x, y, z)` in screen pixels.
- `rotate_axes(x, y, z, view)` applies the X and Y rotations.

### `fdfview.raster`

- `Canvas(width=1280, height=720)` is a buffer of `0xRRGGBB` pixels.
- `put_pixel` drops writes that fall off the canvas.
- `get_pixel` raises `IndexError` for a position off the canvas.
- `clear(color)` fills the whole canvas with one colour.
- `line_points(a, b)` yields the Bresenham pixels from `a` up to, but not
  including, `b`.
- `draw_segment(canvas, a, b, color)` draws those pixels in one colour.

### `fdfview.render`

- `draw_line(canvas, a, b)` draws one wire in the colour for the height of `a`.
- `draw_map(heightmap, canvas, view)` draws every wire of the map.
- `render_frame(heightmap, canvas, view)` clears the canvas to black first,
  then draws the map.

### `fdfview.controls`

- `default_view(heightmap)` returns the starting view.
- `ViewerState` holds the current view, the view that Backspace returns to,
  and whether the panel is shown. It also holds whether the viewer is still
  running.
- `ViewerState.handle_key(key)` applies a `Key`. Unknown keys are ignored.
- `ViewerState.panel_lines()` returns the help text and its positions on
  screen.

### `fdfview.app`

- `main(argv=None)` is the command.
- `run(heightmap)` opens the window for a map that is already loaded.
- `key_from_pygame(keycode)` maps pygame keys to viewer keys.
- `canvas_to_surface_bytes(canvas)` packs a canvas as RGB bytes.

## Testing

```
pip install ".[test]"
pytest
```