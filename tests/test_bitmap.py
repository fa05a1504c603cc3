import pytest

from monoui.bitmap import draw_bitmap, draw_horizontal_bitmap, draw_hxbm, draw_xbm
from monoui.canvas import Canvas


def lit(canvas):
    return {
        (x, y)
        for y, row in enumerate(canvas.rows())
        for x, cell in enumerate(row)
        if cell == "#"
    }


def reverse_bits(value):
    return int(f"{value:08b}"[::-1], 2)


def test_horizontal_bitmap_is_msb_first():
    c = Canvas(16, 4)
    draw_horizontal_bitmap(c, 0, 0, 8, b"\x80")
    assert lit(c) == {(0, 0)}


def test_horizontal_bitmap_low_bit_is_last():
    c = Canvas(16, 4)
    draw_horizontal_bitmap(c, 0, 0, 8, b"\x01")
    assert lit(c) == {(7, 0)}


def test_hxbm_is_lsb_first():
    c = Canvas(16, 4)
    draw_hxbm(c, 2, 1, 8, b"\x01")
    assert lit(c) == {(2, 1)}


def test_opaque_mode_clears_unset_bits():
    c = Canvas(16, 4)
    c.draw_hline(0, 0, 8)
    c.set_bitmap_mode(False)
    draw_horizontal_bitmap(c, 0, 0, 8, b"\x00")
    assert lit(c) == set()


def test_transparent_mode_keeps_background():
    c = Canvas(16, 4)
    c.draw_hline(0, 0, 8)
    c.set_bitmap_mode(True)
    draw_horizontal_bitmap(c, 0, 0, 8, b"\x00")
    assert lit(c) == {(x, 0) for x in range(8)}


def test_draw_color_restored():
    c = Canvas(16, 4)
    c.set_draw_color(2)
    draw_hxbm(c, 0, 0, 8, b"\x0f")
    assert c.draw_color == 2


def test_bitmap_matches_xbm_with_reversed_bits():
    data = bytes([0x81, 0x3C, 0xA5, 0x42])
    a, b = Canvas(24, 8), Canvas(24, 8)
    draw_bitmap(a, 1, 1, 2, 2, data)
    draw_xbm(b, 1, 1, 16, 2, bytes(reverse_bits(v) for v in data))
    assert a.rows() == b.rows()
    assert lit(a)


def test_xbm_rows_are_padded_to_bytes():
    c = Canvas(16, 4)
    w, h = 10, 2
    draw_xbm(c, 0, 0, w, h, b"\xff\x03\xff\x03")
    assert lit(c) == {(x, y) for x in range(w) for y in range(h)}


def test_bitmap_rows_advance():
    c = Canvas(16, 4)
    draw_bitmap(c, 0, 0, 1, 2, b"\x80\x01")
    assert lit(c) == {(0, 0), (7, 1)}


def test_short_line_data_raises():
    with pytest.raises(ValueError):
        draw_horizontal_bitmap(Canvas(16, 4), 0, 0, 9, b"\xff")


def test_short_image_data_raises():
    with pytest.raises(ValueError):
        draw_xbm(Canvas(16, 4), 0, 0, 10, 2, b"\xff\x03\xff")