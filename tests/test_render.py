import pytest

from raycube.config import KeyCode
from raycube.player import Player
from raycube.raycast import Hit, cast_ray, make_ray
from raycube.render import (
    FrameBuffer,
    Game,
    Texture,
    draw_textured_column,
    render_frame,
)

GRID = [
    "11111",
    "10001",
    "10001",
    "10001",
    "11111",
]


def _player() -> Player:
    player = Player(x=2.5, y=2.5)
    player.rotate(0.0)
    return player


def _uniform(color: int, size: int = 4) -> Texture:
    return Texture(size, size, [color] * (size * size))


def _hit(player: Player, side: int, wall_x: float, start: int, end: int) -> Hit:
    ray = make_ray(player, 4, 8)
    return Hit(ray, side, 0, 0, 1.0, wall_x, end - start, start, end)


def test_texture_pixel_row_major():
    tex = Texture(2, 2, [10, 20, 30, 40])
    assert tex.pixel(1, 0) == 20
    assert tex.pixel(0, 1) == 30


def test_texture_rejects_wrong_pixel_count():
    with pytest.raises(ValueError):
        Texture(2, 2, [1, 2, 3])


def test_texture_pixel_out_of_range():
    with pytest.raises(IndexError):
        _uniform(1).pixel(4, 0)


def test_framebuffer_put_and_get_round_trip():
    frame = FrameBuffer(4, 3)
    frame.put_pixel(3, 2, 0xABCDEF)
    assert frame.pixel(3, 2) == 0xABCDEF
    assert frame.pixel(0, 0) == 0


def test_framebuffer_out_of_bounds():
    frame = FrameBuffer(4, 3)
    with pytest.raises(IndexError):
        frame.put_pixel(4, 0, 1)
    with pytest.raises(IndexError):
        frame.pixel(0, -1)


def test_framebuffer_fill_and_clear():
    frame = FrameBuffer(3, 4)
    frame.fill_rows(1, 3, 0x123456)
    assert [frame.pixel(0, y) for y in range(4)] == [0, 0x123456, 0x123456, 0]
    frame.clear()
    assert all(frame.pixel(x, y) == 0 for x in range(3) for y in range(4))


def test_framebuffer_fill_rows_invalid_range():
    frame = FrameBuffer(3, 4)
    with pytest.raises(ValueError):
        frame.fill_rows(3, 2, 1)
    with pytest.raises(ValueError):
        frame.fill_rows(0, 5, 1)


def test_side_one_walls_are_shaded():
    frame = FrameBuffer(8, 8)
    draw_textured_column(frame, 4, _uniform(0xFFFFFF), _hit(_player(), 1, 0.5, 2, 6))
    assert frame.pixel(4, 3) == 0x7F7F7F


def test_side_zero_walls_keep_colour():
    frame = FrameBuffer(8, 8)
    draw_textured_column(frame, 4, _uniform(0xFFFFFF), _hit(_player(), 0, 0.5, 2, 6))
    assert [frame.pixel(4, y) for y in range(2, 6)] == [0xFFFFFF] * 4
    assert frame.pixel(4, 1) == 0
    assert frame.pixel(4, 6) == 0


def test_texture_column_is_flipped_for_east_facing_ray():
    tex = Texture(4, 4, [x + 1 for _ in range(4) for x in range(4)])
    frame = FrameBuffer(8, 8)
    draw_textured_column(frame, 4, tex, _hit(_player(), 0, 0.3, 0, 8))
    assert frame.pixel(4, 0) == 3


def test_texture_rows_cover_whole_texture_in_order():
    tex = Texture(4, 4, [y + 1 for y in range(4) for _ in range(4)])
    frame = FrameBuffer(8, 16)
    draw_textured_column(frame, 2, tex, _hit(_player(), 0, 0.5, 0, 16))
    column = [frame.pixel(2, y) for y in range(15)]
    assert column == sorted(column)
    assert set(column) == {1, 2, 3, 4}


def test_tall_wall_is_clipped_and_last_row_left_untouched():
    frame = FrameBuffer(8, 8)
    draw_textured_column(frame, 4, _uniform(0xFFFFFF), _hit(_player(), 0, 0.5, -4, 12))
    assert [frame.pixel(4, y) for y in range(7)] == [0xFFFFFF] * 7
    assert frame.pixel(4, 7) == 0


def test_empty_span_draws_nothing():
    frame = FrameBuffer(8, 8)
    draw_textured_column(frame, 4, _uniform(0xFFFFFF), _hit(_player(), 0, 0.5, 4, 4))
    assert all(frame.pixel(4, y) == 0 for y in range(8))


def test_render_frame_draws_ceiling_wall_and_floor():
    player = _player()
    frame = FrameBuffer(8, 8)
    seen = []

    def select(hit):
        seen.append(hit.side)
        return _uniform(0x00FF00)

    render_frame(frame, player, GRID, select, floor_color=0x111111, ceiling_color=0x222222)
    assert len(seen) == frame.width
    hit = cast_ray(player, GRID, 4, 8, 8)
    assert hit.draw_start > 0
    assert frame.pixel(4, 0) == 0x222222
    assert frame.pixel(4, 7) == 0x111111
    assert frame.pixel(4, hit.draw_start) == 0x00FF00


def test_game_escape_closes():
    game = Game(_player(), GRID, lambda hit: _uniform(1), frame=FrameBuffer(8, 8))
    game.key_press(KeyCode.ESC)
    assert game.closed is True


def test_game_key_press_and_release():
    game = Game(_player(), GRID, lambda hit: _uniform(1), frame=FrameBuffer(8, 8))
    game.key_press(KeyCode.W)
    assert game.keys.forward is True
    game.key_release(KeyCode.UP)
    assert game.keys.forward is False


def test_game_tick_moves_player_and_renders():
    game = Game(_player(), GRID, lambda hit: _uniform(0x0000FF),
                floor_color=0x111111, ceiling_color=0x222222,
                frame=FrameBuffer(8, 8))
    start_x = game.player.x
    game.key_press(KeyCode.W)
    frame = game.tick()
    assert game.started is True
    assert game.player.x > start_x
    assert frame.pixel(0, 0) == 0x222222
    assert frame.pixel(0, 7) == 0x111111