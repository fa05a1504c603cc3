"""An in-memory monochrome drawing surface.

The canvas keeps one bit per pixel and offers the primitive operations the
shape, bitmap and button routines build upon: single pixels, horizontal and
vertical lines, and text drawn with a simple fixed-width bitmap font.
Pixels outside the canvas are silently clipped.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

_VALID_COLORS = (0, 1, 2)


@dataclass(frozen=True)
class Font:
    """A fixed-width bitmap font.

    ``glyphs`` maps a character to its rows, top row first. A row is a
    string in which ``"."`` and ``" "`` are background and any other
    character is a set pixel. Row 0 lies ``ascent`` pixels above the
    baseline. ``descent`` is zero or negative, as the lowest row below the
    baseline. Characters without a glyph only advance the pen.
    """

    width: int = 6
    ascent: int = 7
    descent: int = -1
    glyphs: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def height(self) -> int:
        """Total glyph height: ascent plus the depth of the descent."""
        return self.ascent - self.descent


class Canvas:
    """A monochrome pixel buffer with u8g2-style drawing state."""

    def __init__(self, width: int, height: int, font: Font | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.font = font if font is not None else Font()
        self.draw_color = 1
        self.bitmap_transparency = False
        self.font_mode = 0
        self._pixels = [bytearray(width) for _ in range(height)]

    def _plot(self, x: int, y: int, color: int) -> None:
        if 0 <= x < self.width and 0 <= y < self.height:
            row = self._pixels[y]
            if color == 0:
                row[x] = 0
            elif color == 1:
                row[x] = 1
            else:
                row[x] ^= 1

    def get_pixel(self, x: int, y: int) -> int:
        """Value (0 or 1) of the pixel at ``x``/``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y][x]

    def draw_pixel(self, x: int, y: int) -> None:
        """Draw one pixel in the current draw color."""
        self._plot(x, y, self.draw_color)

    def draw_hvline(self, x: int, y: int, length: int, direction: int) -> None:
        """Draw a horizontal (direction 0) or vertical (direction 1) line."""
        if direction == 0:
            for i in range(length):
                self._plot(x + i, y, self.draw_color)
        elif direction == 1:
            for i in range(length):
                self._plot(x, y + i, self.draw_color)
        else:
            raise ValueError(f"direction must be 0 or 1, got {direction!r}")

    def draw_hline(self, x: int, y: int, length: int) -> None:
        """Draw a horizontal line of ``length`` pixels starting at ``x``/``y``."""
        self.draw_hvline(x, y, length, 0)

    def draw_vline(self, x: int, y: int, length: int) -> None:
        """Draw a vertical line of ``length`` pixels starting at ``x``/``y``."""
        self.draw_hvline(x, y, length, 1)

    def clear(self) -> None:
        """Reset every pixel to 0."""
        for row in self._pixels:
            row[:] = bytes(self.width)

    def set_draw_color(self, color: int) -> None:
        """Select 0 (clear), 1 (set) or 2 (XOR)."""
        if color not in _VALID_COLORS:
            raise ValueError(f"draw color must be 0, 1 or 2, got {color!r}")
        self.draw_color = color

    def set_bitmap_mode(self, is_transparent: bool) -> None:
        """Whether unset bitmap bits leave the background untouched."""
        self.bitmap_transparency = bool(is_transparent)

    def set_font_mode(self, mode: int) -> None:
        """Select 0 (solid background) or 1 (transparent) text drawing."""
        if mode not in (0, 1):
            raise ValueError(f"font mode must be 0 or 1, got {mode!r}")
        self.font_mode = mode

    @staticmethod
    def _as_str(text: str | bytes) -> str:
        if isinstance(text, (bytes, bytearray)):
            return bytes(text).decode("utf-8", errors="replace")
        return text

    def text_width(self, text: str | bytes) -> int:
        """Width in pixels of ``text`` in the current font."""
        return len(self._as_str(text)) * self.font.width

    def draw_text(self, x: int, y: int, text: str | bytes) -> int:
        """Draw ``text`` with its baseline at ``y``; return the width drawn."""
        font = self.font
        color = self.draw_color
        background = 1 if color == 0 else 0
        top = y - font.ascent
        pen = x
        for ch in self._as_str(text):
            glyph = font.glyphs.get(ch)
            if glyph is not None:
                for dy, row in enumerate(glyph):
                    for dx, cell in enumerate(row[: font.width]):
                        if cell not in ". ":
                            self._plot(pen + dx, top + dy, color)
                        elif self.font_mode == 0:
                            self._plot(pen + dx, top + dy, background)
            pen += font.width
        return pen - x

    def rows(self) -> tuple[str, ...]:
        """The picture as strings, ``"#"`` for set and ``"."`` for clear pixels."""
        return tuple(
            "".join("#" if pixel else "." for pixel in row) for row in self._pixels
        )