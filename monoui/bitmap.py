"""Drawing of 1-bit bitmaps: MSB-first rows and XBM (LSB-first) images."""

from __future__ import annotations

from monoui.canvas import Canvas


def _draw_bit_line(
    canvas: Canvas, x: int, y: int, length: int, data: bytes, msb_first: bool
) -> None:
    needed = (length + 7) // 8
    if len(data) < needed:
        raise ValueError(f"bitmap line of {length} pixels needs {needed} bytes")
    color = canvas.draw_color
    ncolor = 1 if color == 0 else 0
    try:
        for i in range(length):
            bit = 7 - (i & 7) if msb_first else i & 7
            if (data[i >> 3] >> bit) & 1:
                canvas.set_draw_color(color)
                canvas.draw_pixel(x + i, y)
            elif not canvas.bitmap_transparency:
                canvas.set_draw_color(ncolor)
                canvas.draw_pixel(x + i, y)
    finally:
        canvas.draw_color = color


def _draw_rows(canvas, x, y, w, h, data, stride, msb_first) -> None:
    needed = stride * h
    if len(data) < needed:
        raise ValueError(f"bitmap of {h} rows needs {needed} bytes")
    for row in range(h):
        start = row * stride
        _draw_bit_line(canvas, x, y + row, w, data[start : start + stride], msb_first)


def draw_horizontal_bitmap(canvas: Canvas, x: int, y: int, length: int, data: bytes) -> None:
    """Draw one line of ``length`` pixels, most significant bit first."""
    _draw_bit_line(canvas, x, y, length, bytes(data), msb_first=True)


def draw_bitmap(canvas: Canvas, x: int, y: int, cnt: int, h: int, data: bytes) -> None:
    """Draw ``h`` rows of ``cnt`` bytes each, most significant bit first."""
    _draw_rows(canvas, x, y, cnt * 8, h, bytes(data), cnt, msb_first=True)


def draw_hxbm(canvas: Canvas, x: int, y: int, length: int, data: bytes) -> None:
    """Draw one XBM line of ``length`` pixels, least significant bit first."""
    _draw_bit_line(canvas, x, y, length, bytes(data), msb_first=False)


def draw_xbm(canvas: Canvas, x: int, y: int, w: int, h: int, data: bytes) -> None:
    """Draw an XBM image of ``w`` x ``h`` pixels; rows are padded to whole bytes."""
    _draw_rows(canvas, x, y, w, h, bytes(data), (w + 7) >> 3, msb_first=False)