"""Boxes, frames, rounded boxes, circles, discs and ellipses."""

from __future__ import annotations

import enum

from monoui.canvas import Canvas


class Quadrant(enum.IntFlag):
    """Which parts of a circle or ellipse to draw."""

    UPPER_RIGHT = 0x01
    UPPER_LEFT = 0x02
    LOWER_LEFT = 0x04
    LOWER_RIGHT = 0x08
    ALL = 0x0F


def _check_radius(*radii: int) -> None:
    for r in radii:
        if r < 0:
            raise ValueError(f"radius must not be negative, got {r}")


# --- boxes -------------------------------------------------------------------


def draw_box(canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    """Draw a filled box."""
    for row in range(h):
        canvas.draw_hvline(x, y + row, w, 0)


def draw_frame(canvas: Canvas, x: int, y: int, w: int, h: int) -> None:
    """Draw the outline of a box."""
    xtmp = x
    canvas.draw_hvline(x, y, w, 0)
    if h >= 2:
        h -= 2
        y += 1
        if h > 0:
            canvas.draw_hvline(x, y, h, 1)
            canvas.draw_hvline(x + w - 1, y, h, 1)
            y += h
        canvas.draw_hvline(xtmp, y, w, 0)


def draw_rbox(canvas: Canvas, x: int, y: int, w: int, h: int, r: int) -> None:
    """Draw a filled box with corners rounded by radius ``r``."""
    _check_radius(r)
    xl = x + r
    yu = y + r
    xr = x + w - r - 1
    yl = y + h - r - 1

    draw_disc(canvas, xl, yu, r, Quadrant.UPPER_LEFT)
    draw_disc(canvas, xr, yu, r, Quadrant.UPPER_RIGHT)
    draw_disc(canvas, xl, yl, r, Quadrant.LOWER_LEFT)
    draw_disc(canvas, xr, yl, r, Quadrant.LOWER_RIGHT)

    ww = w - 2 * r
    xl += 1
    yu += 1
    if ww >= 3:
        ww -= 2
        draw_box(canvas, xl, y, ww, r + 1)
        draw_box(canvas, xl, yl, ww, r + 1)

    hh = h - 2 * r
    if hh >= 3:
        hh -= 2
        draw_box(canvas, x, yu, w, hh)


def draw_rframe(canvas: Canvas, x: int, y: int, w: int, h: int, r: int) -> None:
    """Draw the outline of a box with corners rounded by radius ``r``."""
    _check_radius(r)
    xl = x + r
    yu = y + r
    xr = x + w - r - 1
    yl = y + h - r - 1

    draw_circle(canvas, xl, yu, r, Quadrant.UPPER_LEFT)
    draw_circle(canvas, xr, yu, r, Quadrant.UPPER_RIGHT)
    draw_circle(canvas, xl, yl, r, Quadrant.LOWER_LEFT)
    draw_circle(canvas, xr, yl, r, Quadrant.LOWER_RIGHT)

    ww = w - 2 * r
    hh = h - 2 * r
    xl += 1
    yu += 1
    if ww >= 3:
        ww -= 2
        canvas.draw_hline(xl, y, ww)
        canvas.draw_hline(xl, y + h - 1, ww)
    if hh >= 3:
        hh -= 2
        canvas.draw_vline(x, yu, hh)
        canvas.draw_vline(x + w - 1, yu, hh)


# --- circles and discs -------------------------------------------------------


def _circle_points(rad: int):
    """Yield the (x, y) octant points of the midpoint circle algorithm."""
    f = 1 - rad
    ddf_x = 1
    ddf_y = -2 * rad
    x = 0
    y = rad
    yield x, y
    while x < y:
        if f >= 0:
            y -= 1
            ddf_y += 2
            f += ddf_y
        x += 1
        ddf_x += 2
        f += ddf_x
        yield x, y


def _circle_section(canvas: Canvas, x: int, y: int, x0: int, y0: int, option: int) -> None:
    if option & Quadrant.UPPER_RIGHT:
        canvas.draw_pixel(x0 + x, y0 - y)
        canvas.draw_pixel(x0 + y, y0 - x)
    if option & Quadrant.UPPER_LEFT:
        canvas.draw_pixel(x0 - x, y0 - y)
        canvas.draw_pixel(x0 - y, y0 - x)
    if option & Quadrant.LOWER_RIGHT:
        canvas.draw_pixel(x0 + x, y0 + y)
        canvas.draw_pixel(x0 + y, y0 + x)
    if option & Quadrant.LOWER_LEFT:
        canvas.draw_pixel(x0 - x, y0 + y)
        canvas.draw_pixel(x0 - y, y0 + x)


def _disc_section(canvas: Canvas, x: int, y: int, x0: int, y0: int, option: int) -> None:
    if option & Quadrant.UPPER_RIGHT:
        canvas.draw_vline(x0 + x, y0 - y, y + 1)
        canvas.draw_vline(x0 + y, y0 - x, x + 1)
    if option & Quadrant.UPPER_LEFT:
        canvas.draw_vline(x0 - x, y0 - y, y + 1)
        canvas.draw_vline(x0 - y, y0 - x, x + 1)
    if option & Quadrant.LOWER_RIGHT:
        canvas.draw_vline(x0 + x, y0, y + 1)
        canvas.draw_vline(x0 + y, y0, x + 1)
    if option & Quadrant.LOWER_LEFT:
        canvas.draw_vline(x0 - x, y0, y + 1)
        canvas.draw_vline(x0 - y, y0, x + 1)


def draw_circle(canvas: Canvas, x0: int, y0: int, rad: int, option: int) -> None:
    """Draw the outline of a circle, restricted to the quadrants in ``option``."""
    _check_radius(rad)
    for x, y in _circle_points(rad):
        _circle_section(canvas, x, y, x0, y0, option)


def draw_disc(canvas: Canvas, x0: int, y0: int, rad: int, option: int) -> None:
    """Draw a filled circle, restricted to the quadrants in ``option``."""
    _check_radius(rad)
    for x, y in _circle_points(rad):
        _disc_section(canvas, x, y, x0, y0, option)


# --- ellipses ----------------------------------------------------------------


def _ellipse_points(rx: int, ry: int):
    """Yield the (x, y) quadrant points of the midpoint ellipse algorithm."""
    if rx == 0 and ry == 0:
        yield 0, 0
        return

    rxrx2 = 2 * rx * rx
    ryry2 = 2 * ry * ry

    x, y = rx, 0
    xchg = (1 - 2 * rx) * ry * ry
    ychg = rx * rx
    err = 0
    stopx = ryry2 * rx
    stopy = 0
    while stopx >= stopy:
        yield x, y
        y += 1
        stopy += rxrx2
        err += ychg
        ychg += rxrx2
        if 2 * err + xchg > 0:
            x -= 1
            stopx -= ryry2
            err += xchg
            xchg += ryry2

    x, y = 0, ry
    xchg = ry * ry
    ychg = (1 - 2 * ry) * rx * rx
    err = 0
    stopx = 0
    stopy = rxrx2 * ry
    while stopx <= stopy:
        yield x, y
        x += 1
        stopx += ryry2
        err += xchg
        xchg += ryry2
        if 2 * err + ychg > 0:
            y -= 1
            stopy -= rxrx2
            err += ychg
            ychg += rxrx2


def draw_ellipse(canvas: Canvas, x0: int, y0: int, rx: int, ry: int, option: int) -> None:
    """Draw the outline of an ellipse, restricted to the quadrants in ``option``."""
    _check_radius(rx, ry)
    for x, y in _ellipse_points(rx, ry):
        if option & Quadrant.UPPER_RIGHT:
            canvas.draw_pixel(x0 + x, y0 - y)
        if option & Quadrant.UPPER_LEFT:
            canvas.draw_pixel(x0 - x, y0 - y)
        if option & Quadrant.LOWER_RIGHT:
            canvas.draw_pixel(x0 + x, y0 + y)
        if option & Quadrant.LOWER_LEFT:
            canvas.draw_pixel(x0 - x, y0 + y)


def draw_filled_ellipse(
    canvas: Canvas, x0: int, y0: int, rx: int, ry: int, option: int
) -> None:
    """Draw a filled ellipse, restricted to the quadrants in ``option``."""
    _check_radius(rx, ry)
    for x, y in _ellipse_points(rx, ry):
        if option & Quadrant.UPPER_RIGHT:
            canvas.draw_vline(x0 + x, y0 - y, y + 1)
        if option & Quadrant.UPPER_LEFT:
            canvas.draw_vline(x0 - x, y0 - y, y + 1)
        if option & Quadrant.LOWER_RIGHT:
            canvas.draw_vline(x0 + x, y0, y + 1)
        if option & Quadrant.LOWER_LEFT:
            canvas.draw_vline(x0 - x, y0, y + 1)