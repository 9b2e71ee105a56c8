# fdfview

A wireframe viewer for FdF height maps. A map is a plain text file in
which each line is a row of space-separated integer heights:

```
0 0 0 0
0 5 5 0
0 5 5 0
0 0 0 0
```

Empty lines are skipped. Each value is read as a leading integer, so an
entry such as `10,0xFF` counts as `10`. The first line fixes the number of
columns; a row with a different count, or an empty map, raises
`fdfview.fdfmap.MapError`.

Every point is joined to its right and lower neighbours, projected through
a rotating camera and drawn with Bresenham lines. Points at height zero are
red and all others white; a line takes the colour of the end it is drawn
from.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
fdfview path/to/map.fdf
```

The command takes exactly one argument, the map file. It opens a
1920x1080 window through pygame. It exits with status 1 and a message on
standard error when the argument is missing or the map cannot be read.
Each key released is printed to standard output as its key code.

## Controls

| Key / button              | Action                                     |
|---------------------------|--------------------------------------------|
| Arrow keys                | Pan the view by 100 pixels                 |
| Keypad 4 / 6              | Rotate about the vertical axis by 5°       |
| Keypad 8 / 2              | Tilt by 5°                                 |
| Keypad 7 / 9              | Roll by 5°                                 |
| Keypad `+` / `-`          | Zoom in / out by a factor of 1.5           |
| Mouse wheel up / down     | Zoom in / out by a factor of 1.5           |
| Page Up / Page Down       | Lower / raise the height factor by 1       |
| `t` / `f` / `s` / `i`     | Top, front, side and isometric views       |
| `r`                       | Restore the initial camera                 |
| Escape, closing window    | Quit                                       |

Zooming in with the keypad stops once the zoom reaches 100; zooming out
stops once it is at or below 0.1.

## Using it as a library

```python
from fdfview.fdfmap import parse_map
from fdfview.camera import Camera
from fdfview.image import new_image
from fdfview.render import render_map

height_map = parse_map("0 0 0\n0 3 0\n0 0 0\n")
image = new_image(800, 600)
render_map(image, height_map, Camera())
rgb = image.to_rgb_bytes()
```

Modules:

- `fdfview.fdfmap`: `parse_map`, `read_map`, `HeightMap` (with `rows`,
  `cols`, `min_z`, `max_z`), `MapError`, `count_words`.
- `fdfview.camera`: `Camera` with `view_top`, `view_front`, `view_side`,
  `view_iso`, `reset` and `update_angles`.
- `fdfview.render`: `Point`, `project`, `set_pixel`, `draw_line`,
  `fit_scale`, `render_map`.
- `fdfview.image`: `Image` (a 32-bit pixel buffer with `put_pixel`,
  `get_pixel`, `clear`, `to_rgb_bytes`) and `new_image`.
- `fdfview.controls`: `Key`, `apply_key`, `apply_mouse`, `view_presets`,
  `movement_controls`, the bindings applied to a `Camera`.
- `fdfview.events`: `Display`, `Window`, `Event` and `EventType`, a small
  window and hook model whose `Display.loop` delivers a stream of events
  to key, mouse, expose and generic hooks.
- `fdfview.xpm`: `xpm_file_to_image`, `xpm_to_image`, `parse_xpm`,
  `strip_comments`, `text_rgb` and `XpmError`, for loading XPM pixmaps
  into an `Image`; colour names resolve through
  `fdfview.colors.lookup_color`.
- `fdfview.pixelformat`: `rgb_shifts` and `good_color`, for packing
  0xRRGGBB colours into shallower pixel formats.
- `fdfview.wordtab`: `find`, `find_unquoted` and `split_words`, the text
  helpers behind the XPM reader.

## What it does not do

Heights are not shaded by altitude; colour annotations in map files are
ignored. XPM images can be loaded into an `Image`, but the viewer does not
display them, and transparent XPM pixels are stored as the value
`0xFF000000` rather than masked out. `fdfview.events` does not open
windows itself; the `fdfview` command feeds it pygame events.