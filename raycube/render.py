"""Frame buffer, textured wall columns and the per-frame game loop."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from raycube.config import HEIGHT, WIDTH, KeyCode
from raycube.player import Grid, Keys, Player
from raycube.raycast import Hit, cast_ray

_COLOR_MASK = 0xFFFFFFFF
_SHADE_MASK = 0x7F7F7F


@dataclass(frozen=True)
class Texture:
    """A wall texture stored row-major as packed RGB integers."""

    width: int
    height: int
    pixels: Sequence[int]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture dimensions")

    def pixel(self, x: int, y: int) -> int:
        """Colour of the texel at column ``x`` and row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"texel ({x}, {y}) outside texture")
        return self.pixels[y * self.width + x]


class FrameBuffer:
    """An in-memory image of packed 32-bit colours."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("frame dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = [0] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside frame")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at ``(x, y)``."""
        self._pixels[self._index(x, y)] = color & _COLOR_MASK

    def pixel(self, x: int, y: int) -> int:
        """Colour of the pixel at ``(x, y)``."""
        return self._pixels[self._index(x, y)]

    def clear(self) -> None:
        """Paint the whole frame black."""
        self._pixels = [0] * (self.width * self.height)

    def fill_rows(self, start: int, stop: int, color: int) -> None:
        """Paint rows ``start`` up to, not including, ``stop``."""
        if not 0 <= start <= stop <= self.height:
            raise ValueError(f"invalid row range {start}..{stop}")
        begin, end = start * self.width, stop * self.width
        self._pixels[begin:end] = [color & _COLOR_MASK] * (end - begin)


def draw_textured_column(frame: FrameBuffer, x: int, texture: Texture, hit: Hit) -> None:
    """Draw the wall slice described by ``hit`` into column ``x``.

    Texture rows wrap with a mask, so texture heights are expected to be
    powers of two. Walls struck on a horizontal grid line are drawn darker.
    """
    tex_x = int(hit.wall_x * texture.width)
    if (hit.side == 0 and hit.ray.dir_x > 0) or (hit.side == 1 and hit.ray.dir_y < 0):
        tex_x = texture.width - tex_x - 1
    span = hit.draw_end - hit.draw_start
    if span <= 0:
        return
    step = texture.height / span
    tex_pos = -hit.draw_start * step if hit.draw_start < 0 else 0.0
    draw_end = min(hit.draw_end, frame.height - 1)
    for y in range(max(hit.draw_start, 0), draw_end):
        tex_y = int(tex_pos) & (texture.height - 1)
        tex_pos += step
        color = texture.pixel(tex_x, tex_y)
        if hit.side == 1:
            color = (color >> 1) & _SHADE_MASK
        frame.put_pixel(x, y, color)


def render_frame(
    frame: FrameBuffer,
    player: Player,
    grid: Grid,
    select_texture: Callable[[Hit], Texture],
    floor_color: int,
    ceiling_color: int,
) -> FrameBuffer:
    """Render ceiling, floor and one textured wall column per screen column."""
    frame.clear()
    middle = frame.height // 2
    frame.fill_rows(0, middle, ceiling_color)
    frame.fill_rows(middle, frame.height, floor_color)
    for stripe in range(frame.width):
        hit = cast_ray(player, grid, stripe, frame.width, frame.height)
        draw_textured_column(frame, stripe, select_texture(hit), hit)
    return frame


@dataclass
class Game:
    """The running game: player, map, input state and the frame it draws."""

    player: Player
    grid: Grid
    select_texture: Callable[[Hit], Texture]
    floor_color: int = 0
    ceiling_color: int = 0
    keys: Keys = field(default_factory=Keys)
    frame: FrameBuffer = field(default_factory=FrameBuffer)
    started: bool = False
    closed: bool = False

    def key_press(self, keycode: int) -> None:
        """Handle a key going down; Escape closes the game."""
        if keycode == KeyCode.ESC:
            self.closed = True
        self.keys.press(keycode)

    def key_release(self, keycode: int) -> None:
        """Handle a key coming up."""
        self.keys.release(keycode)

    def tick(self) -> FrameBuffer:
        """Advance the player by one frame and render the view."""
        self.player.update(self.grid, self.keys)
        render_frame(self.frame, self.player, self.grid, self.select_texture,
                     self.floor_color, self.ceiling_color)
        self.started = True
        return self.frame