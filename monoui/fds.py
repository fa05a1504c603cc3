"""Form definition strings (FDS) and field specifications.

A form definition string is a sequence of byte-coded commands. Every form
starts with a ``U`` command that carries the form number and ends where the
next form starts or where the string ends. Fields inside a form refer to
:class:`FieldSpec` entries through a two character identifier.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Callable

MAX_TEXT_LEN = 41
MENU_CACHE_CNT = 2
DELIMITER = 0xFF

FieldCallback = Callable[[Any, int], int]


class Msg(enum.IntEnum):
    """Messages sent to field callbacks."""

    NONE = 0
    DRAW = 1
    FORM_START = 2
    FORM_END = 3
    # Returning 255 from CURSOR_ENTER skips the field.
    CURSOR_ENTER = 4
    CURSOR_SELECT = 5
    VALUE_INCREMENT = 6
    VALUE_DECREMENT = 7
    CURSOR_LEAVE = 8
    TOUCH_DOWN = 9
    TOUCH_UP = 10
    # Returning non-zero from EVENT_NEXT / EVENT_PREV keeps the focus.
    EVENT_NEXT = 11
    EVENT_PREV = 12


class CFlag(enum.IntFlag):
    """Configuration flags of a field specification."""

    NONE = 0
    IS_CURSOR_SELECTABLE = 0x01
    IS_TOUCH_SELECTABLE = 0x02
    IS_EXECUTE_ON_SELECT = 0x04


class DFlag(enum.IntFlag):
    """Dynamic flags computed for the field currently being processed."""

    NONE = 0
    IS_CURSOR_FOCUS = 0x01
    IS_TOUCH_FOCUS = 0x02


@dataclass(frozen=True)
class FieldSpec:
    """A user interface field: identifier, flags, user data and callback."""

    id0: int
    id1: int
    cflags: int
    data: Any
    cb: FieldCallback
    extra: int = 0

    @property
    def field_id(self) -> bytes:
        """The two byte identifier of the field."""
        return bytes((self.id0, self.id1))


def _byte(value: int, what: str) -> bytes:
    if not isinstance(value, int) or not 0 <= value <= 255:
        raise ValueError(f"{what} must be an integer in 0..255, got {value!r}")
    return bytes((value,))


def _field_id(field_id: str | bytes) -> bytes:
    raw = field_id.encode("latin-1") if isinstance(field_id, str) else bytes(field_id)
    if len(raw) != 2:
        raise ValueError(f"field id must be exactly two characters, got {field_id!r}")
    return raw


def _text(text: str | bytes) -> bytes:
    raw = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    if DELIMITER in raw or 0 in raw:
        raise ValueError("text must not contain NUL or the 0xff delimiter")
    return bytes((DELIMITER,)) + raw + bytes((DELIMITER,))


def _style_digit(n: int) -> bytes:
    if not isinstance(n, int) or not 0 <= n <= 9:
        raise ValueError(f"style number must be in 0..9, got {n!r}")
    return str(n).encode("ascii")


# --- form definition string commands ---------------------------------------


def form(n: int) -> bytes:
    """Start of form number ``n``."""
    return b"U" + _byte(n, "form number")


def style(n: int) -> bytes:
    """Select style ``n`` (0..9)."""
    return b"S" + _style_digit(n)


def aux(field_id: str | bytes) -> bytes:
    """A field without position, argument or text."""
    return b"Z" + _field_id(field_id)


def data(field_id: str | bytes, text: str | bytes) -> bytes:
    """A field that only carries text."""
    return b"D" + _field_id(field_id) + _text(text)


def xy(field_id: str | bytes, x: int, y: int) -> bytes:
    """A field placed at ``x``/``y``."""
    return b"F" + _field_id(field_id) + _byte(x, "x") + _byte(y, "y")


def xyt(field_id: str | bytes, x: int, y: int, text: str | bytes) -> bytes:
    """A field placed at ``x``/``y`` with text."""
    return b"B" + _field_id(field_id) + _byte(x, "x") + _byte(y, "y") + _text(text)


def xya(field_id: str | bytes, x: int, y: int, a: int) -> bytes:
    """A field placed at ``x``/``y`` with an argument byte."""
    return b"A" + _field_id(field_id) + _byte(x, "x") + _byte(y, "y") + _byte(a, "arg")


def xyat(field_id: str | bytes, x: int, y: int, a: int, text: str | bytes) -> bytes:
    """A field placed at ``x``/``y`` with an argument byte and text."""
    return (
        b"T"
        + _field_id(field_id)
        + _byte(x, "x")
        + _byte(y, "y")
        + _byte(a, "arg")
        + _text(text)
    )


def label(x: int, y: int, text: str | bytes) -> bytes:
    """A text label at ``x``/``y`` (field id ``.L``)."""
    return b"L" + _byte(x, "x") + _byte(y, "y") + _text(text)


def goto(x: int, y: int, n: int, text: str | bytes) -> bytes:
    """A button at ``x``/``y`` which jumps to form ``n`` (field id ``.G``)."""
    return b"G" + _byte(x, "x") + _byte(y, "y") + _byte(n, "form number") + _text(text)


def goto_lower(x: int, y: int, n: int, text: str | bytes) -> bytes:
    """Like :func:`goto`, but with field id ``.g``."""
    return b"g" + _byte(x, "x") + _byte(y, "y") + _byte(n, "form number") + _text(text)


# --- field specifications ---------------------------------------------------


def muif(field_id: str | bytes, cflags: int, data: Any, cb: FieldCallback) -> FieldSpec:
    """Generic field specification."""
    raw = _field_id(field_id)
    return FieldSpec(raw[0], raw[1], int(cflags), data, cb)


def muif_style(n: int, cb: FieldCallback) -> FieldSpec:
    """Style specification for style ``n``."""
    return muif(b"S" + _style_digit(n), CFlag.NONE, None, cb)


def muif_ro(field_id: str | bytes, cb: FieldCallback) -> FieldSpec:
    """Read-only field."""
    return muif(field_id, CFlag.NONE, None, cb)


def muif_label(cb: FieldCallback) -> FieldSpec:
    """Specification used by :func:`label` commands."""
    return muif(".L", CFlag.NONE, None, cb)


def muif_goto(cb: FieldCallback) -> FieldSpec:
    """Specification used by :func:`goto` commands."""
    return muif(".G", CFlag.IS_CURSOR_SELECTABLE, None, cb)


def muif_button(field_id: str | bytes, cb: FieldCallback) -> FieldSpec:
    """Cursor selectable field."""
    return muif(field_id, CFlag.IS_CURSOR_SELECTABLE, None, cb)


def muif_execute_on_select_button(field_id: str | bytes, cb: FieldCallback) -> FieldSpec:
    """Cursor selectable field which is executed by a form-wide select."""
    return muif(
        field_id,
        CFlag.IS_CURSOR_SELECTABLE | CFlag.IS_EXECUTE_ON_SELECT,
        None,
        cb,
    )


def muif_variable(field_id: str | bytes, var: Any, cb: FieldCallback) -> FieldSpec:
    """Cursor selectable field bound to user data ``var``."""
    return muif(field_id, CFlag.IS_CURSOR_SELECTABLE, var, cb)