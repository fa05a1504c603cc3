"""Low level parsing of form definition strings.

All functions take the form definition string as ``bytes`` and a position
of a command inside it. Reading beyond the end of the string behaves like
reading a terminating NUL byte, so an unterminated string simply ends.
"""

from __future__ import annotations

from collections.abc import Iterator

from monoui.fds import MAX_TEXT_LEN

_CASE_MASK = 0xDF
_TOKEN_SEPARATOR = ord("|")

_SIZES_WITHOUT_TEXT = {
    ord("U"): 2,  # form: cmd, form id
    ord("S"): 2,  # style: cmd, style id
    ord("D"): 3,  # data: cmd, id (2), text
    ord("Z"): 3,  # aux: cmd, id (2)
    ord("F"): 5,  # field: cmd, id (2), x, y
    ord("B"): 5,  # field with text: cmd, id (2), x, y, text
    ord("T"): 6,  # field with arg and text: cmd, id (2), x, y, arg, text
    ord("A"): 6,  # field with arg: cmd, id (2), x, y, arg
    ord("L"): 3,  # label: cmd, x, y, text
    ord("G"): 4,  # goto: cmd, x, y, arg, text
    0: 0,
}

_COMMANDS_WITHOUT_TEXT = frozenset(b"USFAZ")


def _char(fds: bytes, pos: int) -> int:
    """Byte at ``pos``, or 0 beyond the end of the string."""
    return fds[pos] if 0 <= pos < len(fds) else 0


def command_size_without_text(fds: bytes, pos: int) -> int:
    """Size of the command at ``pos`` without its text part.

    Upper and lower case commands are treated alike. Unknown commands have
    size 1, the end of the string has size 0.
    """
    return _SIZES_WITHOUT_TEXT.get(_char(fds, pos) & _CASE_MASK, 1)


def has_text(cmd: int) -> bool:
    """Whether the command byte ``cmd`` is followed by a text part."""
    return cmd not in _COMMANDS_WITHOUT_TEXT


def parse_text(fds: bytes, pos: int) -> tuple[int, bytes]:
    """Parse the delimited text starting at ``pos``.

    The byte at ``pos`` is the delimiter. Returns the total size of the text
    part including both delimiters, and its content truncated to
    ``MAX_TEXT_LEN`` bytes.
    """
    delimiter = _char(fds, pos)
    if delimiter == 0:
        return 0, b""
    text = bytearray()
    t = pos + 1
    while True:
        c = _char(fds, t)
        if c == 0:
            break
        if c == delimiter:
            t += 1
            break
        if len(text) < MAX_TEXT_LEN:
            text.append(c)
        t += 1
    return t - pos, bytes(text)


def command_size(fds: bytes, pos: int) -> tuple[int, bytes]:
    """Complete size of the command at ``pos`` and its text (empty if none)."""
    size = command_size_without_text(fds, pos)
    if has_text(_char(fds, pos)):
        text_size, text = parse_text(fds, pos + size)
        return size + text_size, text
    return size, b""


def iter_tokens(fds: bytes, pos: int) -> Iterator[bytes]:
    """Yield the ``|`` separated tokens of the text of the command at ``pos``.

    Iteration stops at the closing delimiter or at the first empty token.
    Each token is truncated to ``MAX_TEXT_LEN`` bytes.
    """
    token = pos + command_size_without_text(fds, pos)
    delimiter = _char(fds, token)
    token += 1
    while True:
        text = bytearray()
        while True:
            c = _char(fds, token)
            if c == 0 or c == delimiter:
                break
            if c == _TOKEN_SEPARATOR:
                token += 1
                break
            if len(text) < MAX_TEXT_LEN:
                text.append(c)
            token += 1
        if not text:
            return
        yield bytes(text)


def nth_token(fds: bytes, pos: int, n: int) -> bytes | None:
    """Token number ``n`` (from 0) of the command at ``pos``, or None."""
    for index, token in enumerate(iter_tokens(fds, pos)):
        if index == n:
            return token
    return None


def token_count(fds: bytes, pos: int) -> int:
    """Number of tokens in the text of the command at ``pos``."""
    return sum(1 for _ in iter_tokens(fds, pos))


def find_form(fds: bytes, form_id: int) -> int | None:
    """Position of the ``U`` command of form ``form_id``, or None."""
    pos = 0
    while True:
        cmd = _char(fds, pos)
        if cmd == 0:
            return None
        if cmd == ord("U") and _char(fds, pos + 1) == form_id:
            return pos
        size, _ = command_size(fds, pos)
        pos += size