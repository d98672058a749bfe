"""Screen geometry, movement tuning and keyboard codes."""

from enum import IntEnum

WIDTH = 1280
HEIGHT = 720
TILE_SIZE = 64
FOV = 0.66
ROTATION_SPEED = 0.02
MOVE_SPEED = 0.05
MINIMAP_SIZE = 150
TILE_SIZE_MINI = 10
PLAYER_SIZE = 4

WALL = "1"
FLOOR = "0"


class KeyCode(IntEnum):
    """X11 keysyms the game reacts to."""

    ESC = 65307
    W = 119
    A = 97
    S = 115
    D = 100
    LEFT = 65361
    UP = 65362
    RIGHT = 65363
    DOWN = 65364

    def is_forward(self) -> bool:
        """True for the keys that move the player forward."""
        return self in (KeyCode.W, KeyCode.UP)

    def is_backward(self) -> bool:
        """True for the keys that move the player backward."""
        return self in (KeyCode.S, KeyCode.DOWN)

    def is_left(self) -> bool:
        """True for the keys that turn the player left."""
        return self in (KeyCode.A, KeyCode.LEFT)

    def is_right(self) -> bool:
        """True for the keys that turn the player right."""
        return self in (KeyCode.D, KeyCode.RIGHT)