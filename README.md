# raycube

A small, dependency-free raycasting engine for grid maps, in the style of
classic first-person games. The map is a sequence of strings: `'1'` is a
wall, `'0'` is open floor. For every screen column a ray is cast from the
player with a DDA walk over the grid, the perpendicular wall distance is
measured, and a vertical strip of the chosen wall texture is drawn into an
in-memory frame buffer, between a flat ceiling and a flat floor.

## What is inside

- `raycube.config` — screen size (`WIDTH`, `HEIGHT`), `MOVE_SPEED`,
  `ROTATION_SPEED`, field of view `FOV`, the `WALL` and `FLOOR` characters,
  and `KeyCode`, the X11 keysyms the engine reacts to (`is_forward`,
  `is_backward`, `is_left`, `is_right`).
- `raycube.textutil` — C-style string helpers: `atoi` (leading integer,
  wrapped to 32 bits), `itoa`, `split` (on one character, empty fields
  dropped), `substr`, `strnstr`, `strlcpy` and `strlcat` (return the text
  and the length the full result would have had), `strcmp` (0, -1 for a
  missing string or different lengths, -2 for different contents) and
  `strncmp`.
- `raycube.linereader` — `LineReader` and `iter_lines`, which read a text
  or binary stream in chunks of `buffer_size` and hand back one line at a
  time, newline included.
- `raycube.player` — `Keys` (which movement keys are held, updated with
  `press` / `release`; unknown key codes are ignored) and `Player`
  (position, direction, camera plane and angle, with `rotate`, `move` and
  `update`). Moves only land on floor cells. `grid_width` gives the length
  of the longest row.
- `raycube.raycast` — `make_ray`, `trace` and `cast_ray`, producing a `Hit`
  for a screen column (side, cell, distance, wall offset, and for
  `cast_ray` the projected line height and draw range). A ray that leaves
  the map raises `RayOutOfBounds`.
- `raycube.render` — `FrameBuffer`, `Texture`, `draw_textured_column`,
  `render_frame`, and `Game`, which ties keys, player and renderer together
  and advances one frame per `tick`. Pressing Escape sets `Game.closed`.

## Examples

Reading a file line by line:

```python
from raycube.linereader import iter_lines

with open("level.cub", "rb") as stream:
    for line in iter_lines(stream, 4096):
        ...
```

Working with a frame buffer:

```python
from raycube.render import FrameBuffer

frame = FrameBuffer(320, 200)
frame.fill_rows(0, 100, 0x87CEEB)    # ceiling
frame.fill_rows(100, 200, 0x444444)  # floor
frame.put_pixel(10, 20, 0xFF0000)
assert frame.pixel(10, 20) == 0xFF0000
frame.clear()
```

Rendering a scene:

```python
from raycube.player import Player
from raycube.render import FrameBuffer, Texture, render_frame

grid = ["11111", "10001", "10001", "11111"]
player = Player(x=2.5, y=1.5)
player.rotate(1.57)  # face along +y
wall = Texture(2, 2, [0xFF0000, 0x00FF00, 0x0000FF, 0xFFFFFF])

frame = render_frame(FrameBuffer(64, 48), player, grid,
                     lambda hit: wall, floor_color=0x333333,
                     ceiling_color=0x777777)
```

Texture rows wrap with a bit mask, so texture heights should be powers of
two. Walls struck on a horizontal grid line (`Hit.side == 1`) are drawn at
half brightness to give the scene depth.

## What it does not do

raycube does not open a window, read the keyboard or display anything: the
caller feeds key codes to `Game.key_press` / `Game.key_release`, calls
`Game.tick`, and shows the returned `FrameBuffer` itself. It does not parse
or validate map files, load texture images, or check that a map is closed
by walls, and it has no command-line program.

## Running the tests

The test suite uses pytest, available through the `test` extra.