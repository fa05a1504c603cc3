"""Buttons: text with an optional frame, shadow and inverted background."""

from __future__ import annotations

import enum

from monoui.canvas import Canvas
from monoui.shapes import draw_box, draw_frame

BW_MASK = 0x07
SHADOW_POS = 3
SHADOW_MASK = 0x18


class ButtonFlag(enum.IntFlag):
    """Flags for :func:`draw_button_frame` and :func:`draw_button_utf8`.

    The lowest three bits hold the border width. The two shadow bits select
    the gap between the frame and its shadow. ``INV`` inverts the inner area,
    ``HCENTER`` centers the button around ``x`` and ``XFRAME`` adds a second
    frame separated from the first by a one pixel gap.
    """

    NONE = 0x00
    BW1 = 0x01
    BW2 = 0x02
    BW3 = 0x03
    SHADOW0 = 0x08
    SHADOW1 = 0x10
    SHADOW2 = 0x18
    INV = 0x20
    HCENTER = 0x40
    XFRAME = 0x80


def draw_button_frame(
    canvas: Canvas,
    x: int,
    y: int,
    flags: int,
    text_width: int,
    padding_h: int,
    padding_v: int,
) -> None:
    """Draw the frame of a button around a text of ``text_width`` pixels.

    ``x``/``y`` is the text position (baseline). The frame height follows
    the ascent and descent of the canvas font. Draw color 2 (XOR) is not
    supported for the frame itself.
    """
    flags = int(flags)
    w = text_width
    gap_frame = BW_MASK + 1
    border_width = flags & BW_MASK
    ascent = canvas.font.ascent
    descent = canvas.font.descent
    color_backup = canvas.draw_color

    if flags & ButtonFlag.XFRAME:
        border_width += 1
        gap_frame = border_width
        border_width += 1

    while True:
        xx = x - padding_h - border_width
        ww = w + 2 * padding_h + 2 * border_width
        yy = y - ascent - padding_v - border_width
        hh = ascent - descent + 2 * padding_v + 2 * border_width
        if border_width == 0:
            break
        if border_width == gap_frame:
            canvas.set_draw_color(1 if color_backup == 0 else 0)
        draw_frame(canvas, xx, yy, ww, hh)
        canvas.set_draw_color(color_backup)

        if flags & SHADOW_MASK and border_width == (flags & BW_MASK):
            shadow_gap = ((flags & SHADOW_MASK) >> SHADOW_POS) - 1
            for i in range(border_width):
                canvas.draw_hline(
                    xx + border_width + shadow_gap, yy + hh + i + shadow_gap, ww
                )
                canvas.draw_vline(
                    xx + ww + i + shadow_gap, yy + border_width + shadow_gap, hh
                )
        border_width -= 1

    if flags & ButtonFlag.INV:
        canvas.set_draw_color(2)
        draw_box(canvas, xx, yy, ww, hh)
        canvas.set_draw_color(color_backup)


def draw_button_utf8(
    canvas: Canvas,
    x: int,
    y: int,
    flags: int,
    width: int,
    padding_h: int,
    padding_v: int,
    text: str | bytes,
) -> None:
    """Draw ``text`` at ``x``/``y`` with a button frame.

    The frame is at least ``width`` pixels wide; with ``HCENTER`` the text
    is centered in it and the button is centered around ``x``. Enables the
    transparent font mode as a side effect.
    """
    flags = int(flags)
    w = canvas.text_width(text)
    text_x_offset = 0

    if flags & ButtonFlag.HCENTER:
        x -= (w + 1) // 2

    if w < width:
        if flags & ButtonFlag.HCENTER:
            text_x_offset = (width - w) // 2
        w = width

    canvas.set_font_mode(1)
    canvas.draw_text(x, y, text)
    draw_button_frame(canvas, x - text_x_offset, y, flags, w, padding_h, padding_v)