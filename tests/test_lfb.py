import pytest

from d3kit.color import BLACK, Color
from d3kit.lfb import LinearFrameBuffer


def make_lfb(width=4, height=3, bpp=32):
    bytes_per_pixel = (16 if bpp == 15 else bpp) // 8
    pitch = width * bytes_per_pixel
    buffer = bytearray(pitch * height)
    return buffer, LinearFrameBuffer(buffer, pitch, width, height, bpp)


def test_properties():
    _, lfb = make_lfb(5, 2, 32)
    assert (lfb.width, lfb.height, lfb.pitch, lfb.bpp) == (5, 2, 20, 32)


def test_rejects_short_buffer():
    with pytest.raises(ValueError):
        LinearFrameBuffer(bytearray(10), 16, 4, 4, 32)


def test_rejects_readonly_buffer():
    with pytest.raises(TypeError):
        LinearFrameBuffer(bytes(64), 16, 4, 4, 32)


def test_32bit_round_trip():
    _, lfb = make_lfb()
    color = Color(12, 34, 56, 255)
    lfb.draw_pixel(2, 1, color)
    assert lfb.read_pixel(2, 1) == color
    assert lfb.read_pixel(1, 1) == Color(0, 0, 0, 0)


def test_24bit_byte_order():
    buffer, lfb = make_lfb(bpp=24)
    lfb.draw_pixel(0, 0, Color(0x11, 0x22, 0x33, 255))
    assert bytes(buffer[0:3]) == bytes([0x33, 0x22, 0x11])


def test_24bit_last_pixel_readable():
    _, lfb = make_lfb(4, 3, 24)
    lfb.draw_pixel(3, 2, Color(1, 2, 3, 255))
    assert lfb.read_pixel(3, 2) == Color(1, 2, 3, 0)


@pytest.mark.parametrize("bpp", [15, 16])
def test_16bit_formats_round_trip_representable_color(bpp):
    _, lfb = make_lfb(bpp=bpp)
    color = Color(248, 248, 248, 255)
    lfb.draw_pixel(1, 2, color)
    assert lfb.read_pixel(1, 2) == color.with_alpha(0)


def test_off_screen_and_invisible_pixels_are_ignored():
    buffer, lfb = make_lfb()
    lfb.draw_pixel(4, 0, Color(255, 255, 255, 255))
    lfb.draw_pixel(0, 3, Color(255, 255, 255, 255))
    lfb.draw_pixel(-1, 0, Color(255, 255, 255, 255))
    lfb.draw_pixel(0, 0, Color(255, 255, 255, 0))
    assert buffer == bytearray(len(buffer))


def test_translucent_pixel_blends_with_existing():
    _, lfb = make_lfb()
    base = Color(200, 100, 50, 255)
    overlay = Color(10, 20, 30, 128)
    lfb.draw_pixel(0, 0, base)
    lfb.draw_pixel(0, 0, overlay)
    assert lfb.read_pixel(0, 0) == base.blend(overlay)


def test_translucent_on_24bit_blends_over_black():
    _, lfb = make_lfb(bpp=24)
    overlay = Color(100, 150, 200, 100)
    lfb.draw_pixel(1, 1, overlay)
    assert lfb.read_pixel(1, 1) == BLACK.blend(overlay).with_alpha(0)


def test_read_pixel_out_of_bounds():
    _, lfb = make_lfb()
    with pytest.raises(IndexError):
        lfb.read_pixel(4, 0)
    with pytest.raises(IndexError):
        lfb.read_pixel(0, 3)


def test_unsupported_bpp_cannot_draw():
    buffer = bytearray(16)
    lfb = LinearFrameBuffer(buffer, 4, 4, 4, 8)
    with pytest.raises(RuntimeError):
        lfb.draw_pixel(0, 0, Color(1, 2, 3, 255))


def test_fill_rect_covers_exactly_the_rectangle():
    _, lfb = make_lfb(4, 3)
    color = Color(9, 8, 7, 255)
    lfb.fill_rect(1, 1, 2, 2, color)
    inside = {(x, y) for x in (1, 2) for y in (1, 2)}
    for y in range(3):
        for x in range(4):
            expected = color if (x, y) in inside else Color(0, 0, 0, 0)
            assert lfb.read_pixel(x, y) == expected


def test_fill_rect_clips_at_edges():
    _, lfb = make_lfb(4, 3)
    color = Color(1, 1, 1, 255)
    lfb.fill_rect(3, 2, 5, 5, color)
    assert lfb.read_pixel(3, 2) == color
    assert lfb.read_pixel(2, 2) == Color(0, 0, 0, 0)


def test_clear_zeroes_buffer():
    buffer, lfb = make_lfb()
    lfb.fill_rect(0, 0, 4, 3, Color(50, 60, 70, 255))
    lfb.clear()
    assert buffer == bytearray(len(buffer))


def test_scroll_up_moves_rows_and_clears_bottom():
    _, lfb = make_lfb(2, 3)
    colors = [Color(10 * (row + 1), 0, 0, 255) for row in range(3)]
    for row, color in enumerate(colors):
        lfb.fill_rect(0, row, 2, 1, color)
    lfb.scroll_up(1)
    assert lfb.read_pixel(0, 0) == colors[1]
    assert lfb.read_pixel(1, 1) == colors[2]
    assert lfb.read_pixel(0, 2) == Color(0, 0, 0, 0)


def test_scroll_up_whole_screen_clears():
    buffer, lfb = make_lfb()
    lfb.fill_rect(0, 0, 4, 3, Color(5, 5, 5, 255))
    lfb.scroll_up(3)
    assert buffer == bytearray(len(buffer))


def test_scroll_up_too_far():
    _, lfb = make_lfb()
    with pytest.raises(ValueError):
        lfb.scroll_up(4)