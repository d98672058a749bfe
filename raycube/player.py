"""Player state, keyboard state and movement on the map grid."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from raycube.config import FLOOR, FOV, MOVE_SPEED, ROTATION_SPEED, KeyCode

Grid = Sequence[str]


def grid_width(grid: Grid) -> int:
    """Width of the map: the length of its longest row."""
    return max((len(row) for row in grid), default=0)


@dataclass
class Keys:
    """Which movement keys are currently held."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False

    def _set(self, keycode: int, held: bool) -> None:
        try:
            key = KeyCode(keycode)
        except ValueError:
            return
        if key.is_forward():
            self.forward = held
        if key.is_backward():
            self.backward = held
        if key.is_left():
            self.left = held
        if key.is_right():
            self.right = held

    def press(self, keycode: int) -> None:
        """Mark the movement key for ``keycode`` as held."""
        self._set(keycode, True)

    def release(self, keycode: int) -> None:
        """Mark the movement key for ``keycode`` as released."""
        self._set(keycode, False)


@dataclass
class Player:
    """Position, view direction and camera plane of the player."""

    x: float = 0.0
    y: float = 0.0
    dir_x: float = 0.0
    dir_y: float = 0.0
    plane_x: float = 0.0
    plane_y: float = 0.0
    angle: float = 0.0

    def rotate(self, speed: float) -> None:
        """Turn by ``speed`` radians and recompute direction and plane."""
        self.angle += speed
        if self.angle < 0:
            self.angle += 2 * math.pi
        elif self.angle >= 2 * math.pi:
            self.angle -= 2 * math.pi
        self.dir_x = math.cos(self.angle)
        self.dir_y = math.sin(self.angle)
        self.plane_x = -math.sin(self.angle) * FOV
        self.plane_y = math.cos(self.angle) * FOV

    def _try_step(self, grid: Grid, dx: float, dy: float) -> None:
        nx = self.x + dx
        ny = self.y + dy
        if not (0 < nx < grid_width(grid) and 0 < ny < len(grid)):
            return
        row = grid[int(ny)]
        col = int(nx)
        if col < len(row) and row[col] == FLOOR:
            self.x = nx
            self.y = ny

    def move(self, grid: Grid, speed: float, keys: Keys) -> None:
        """Step forward and/or backward onto floor cells only."""
        if keys.forward:
            self._try_step(grid, self.dir_x * speed, self.dir_y * speed)
        if keys.backward:
            self._try_step(grid, -self.dir_x * speed, -self.dir_y * speed)

    def update(self, grid: Grid, keys: Keys) -> None:
        """Apply one frame of movement and rotation from the held keys."""
        self.move(grid, MOVE_SPEED, keys)
        if keys.left:
            self.rotate(-ROTATION_SPEED)
        if keys.right:
            self.rotate(ROTATION_SPEED)