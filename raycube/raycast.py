"""Ray setup and grid traversal (DDA) for one screen column."""

from __future__ import annotations

from dataclasses import dataclass, replace

from raycube.config import HEIGHT, WALL, WIDTH
from raycube.player import Grid, Player, grid_width

NO_DIRECTION = 1e30
MIN_DISTANCE = 0.01


class RayOutOfBounds(Exception):
    """A ray left the map without hitting a wall."""


@dataclass
class Ray:
    """A ray cast from the player for one screen column."""

    camera_x: float
    dir_x: float
    dir_y: float
    delta_x: float
    delta_y: float
    step_x: int
    step_y: int
    side_x: float
    side_y: float
    map_x: int
    map_y: int


@dataclass(frozen=True)
class Hit:
    """Where a ray struck a wall and how tall that wall appears."""

    ray: Ray
    side: int
    map_x: int
    map_y: int
    distance: float
    wall_x: float
    line_height: int = 0
    draw_start: int = 0
    draw_end: int = 0


def make_ray(player: Player, stripe: int, width: int = WIDTH) -> Ray:
    """Build the ray for screen column ``stripe`` of a ``width``-wide view."""
    camera_x = 2 * stripe / width - 1
    dir_x = player.dir_x + player.plane_x * camera_x
    dir_y = player.dir_y + player.plane_y * camera_x
    delta_x = NO_DIRECTION if dir_x == 0 else abs(1 / dir_x)
    delta_y = NO_DIRECTION if dir_y == 0 else abs(1 / dir_y)
    map_x = int(player.x)
    map_y = int(player.y)
    if dir_x < 0:
        step_x, side_x = -1, (player.x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - player.x) * delta_x
    if dir_y < 0:
        step_y, side_y = -1, (player.y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - player.y) * delta_y
    return Ray(camera_x, dir_x, dir_y, delta_x, delta_y,
               step_x, step_y, side_x, side_y, map_x, map_y)


def _check_cell(grid: Grid, x: int, y: int, width: int) -> None:
    if x < 0 or x >= width or y < 0 or y >= len(grid) or x >= len(grid[y]):
        raise RayOutOfBounds("Ray out of bound")


def trace(ray: Ray, player: Player, grid: Grid) -> Hit:
    """Walk the grid along ``ray`` until a wall is reached."""
    width = grid_width(grid)
    map_x, map_y = ray.map_x, ray.map_y
    side_x, side_y = ray.side_x, ray.side_y
    while True:
        _check_cell(grid, map_x, map_y, width)
        if side_x < side_y:
            side_x += ray.delta_x
            map_x += ray.step_x
            side = 0
        else:
            side_y += ray.delta_y
            map_y += ray.step_y
            side = 1
        _check_cell(grid, map_x, map_y, width)
        if grid[map_y][map_x] == WALL:
            break
    if side == 0:
        distance = (map_x - player.x + (1 - ray.step_x) // 2) / ray.dir_x
    else:
        distance = (map_y - player.y + (1 - ray.step_y) // 2) / ray.dir_y
    distance = max(distance, MIN_DISTANCE)
    if side == 0:
        wall_x = player.y + distance * ray.dir_y
    else:
        wall_x = player.x + distance * ray.dir_x
    wall_x -= int(wall_x)
    return Hit(ray, side, map_x, map_y, distance, wall_x)


def cast_ray(player: Player, grid: Grid, stripe: int,
             width: int = WIDTH, height: int = HEIGHT) -> Hit:
    """Cast the ray for one column and project the wall it hits."""
    hit = trace(make_ray(player, stripe, width), player, grid)
    line_height = int(height / hit.distance)
    half = line_height // 2
    return replace(
        hit,
        line_height=line_height,
        draw_start=-half + height // 2,
        draw_end=half + height // 2,
    )