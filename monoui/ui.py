"""The menu engine: forms, fields, cursor focus and message dispatch.

A :class:`Mui` walks a form definition string (see :mod:`monoui.fds`) and
sends messages to the callbacks of the field specifications that the
commands of the current form refer to. While a callback runs, the engine
exposes the data of the current field as attributes (``id0``, ``id1``,
``x``, ``y``, ``arg``, ``text``, ``dflags``, ``uif``, ``fds``).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from monoui.fds import MENU_CACHE_CNT, CFlag, DFlag, FieldSpec, Msg
from monoui.parsing import command_size, find_form, nth_token, token_count

_CASE_MASK = 0xDF
_SKIP_FIELD = 255


class Mui:
    """A monochrome menu system bound to a form definition string."""

    def __init__(self, graphics: Any, fds: bytes, fields: Iterable[FieldSpec]) -> None:
        self.graphics = graphics
        self.root_fds = bytes(fds)
        self.fields = tuple(fields)

        self.current_form_fds: int | None = None
        self.cursor_focus_fds: int | None = None
        self.touch_focus_fds: int | None = None

        # Reserved for field callbacks; reset whenever a form is entered.
        self.form_scroll_total = 0
        self.form_scroll_top = 0
        self.form_scroll_visible = 0

        self.tmp8 = 0
        self.is_mud = False

        # Data of the field currently processed.
        self.cmd = 0
        self.id0 = 0
        self.id1 = 0
        self.x = 0
        self.y = 0
        self.dflags = DFlag.NONE
        self.arg = 0
        self.len = 0
        self.fds = 0
        self.uif: FieldSpec | None = None
        self.text = b""

        self.tmp_fds: int | None = None
        self.target_fds: int | None = None

        self.last_form_id = 0
        self.last_form_cursor_focus_position = 0
        self.last_form_fds: int | None = None

        self.menu_form_id = [0] * MENU_CACHE_CNT
        self.menu_form_cursor_focus_position = [0] * MENU_CACHE_CNT
        self.menu_form_last_added = 0

    # --- small queries -------------------------------------------------

    def _char(self, pos: int) -> int:
        return self.root_fds[pos] if 0 <= pos < len(self.root_fds) else 0

    def is_form_active(self) -> bool:
        """Whether a form is currently shown."""
        return self.current_form_fds is not None

    def is_cursor_focus(self) -> bool:
        """Whether the current field has the cursor focus."""
        return bool(self.dflags & DFlag.IS_CURSOR_FOCUS)

    def is_touch_focus(self) -> bool:
        """Whether the current field has the touch focus."""
        return bool(self.dflags & DFlag.IS_TOUCH_FOCUS)

    def find_field(self, id0: int, id1: int) -> FieldSpec | None:
        """The first field specification with the given identifier, or None."""
        for spec in self.fields:
            if spec.id0 == id0 and spec.id1 == id1:
                return spec
        return None

    def find_form(self, form_id: int) -> int | None:
        """Position of form ``form_id`` in the definition string, or None."""
        return find_form(self.root_fds, form_id)

    def nth_token(self, n: int) -> bool:
        """Place token ``n`` of the current field's text into ``text``."""
        token = nth_token(self.root_fds, self.fds, n)
        self.text = token if token is not None else b""
        return token is not None

    def token_count(self) -> int:
        """Number of ``|`` separated tokens in the current field's text."""
        return token_count(self.root_fds, self.fds)

    # --- form traversal ------------------------------------------------

    def _prepare_current_field(self) -> bool:
        self.uif = None
        self.dflags = DFlag.NONE
        self.id0 = 0
        self.id1 = 0
        self.arg = 0

        pos = self.fds
        self.len, self.text = command_size(self.root_fds, pos)
        raw = self._char(pos)
        self.id1 = raw
        cmd = raw & _CASE_MASK
        self.cmd = cmd
        if cmd in (ord("U"), 0):
            return False

        if pos == self.cursor_focus_fds:
            self.dflags |= DFlag.IS_CURSOR_FOCUS
        if pos == self.touch_focus_fds:
            self.dflags |= DFlag.IS_TOUCH_FOCUS

        if cmd in b"FBTA":
            self.id0 = self._char(pos + 1)
            self.id1 = self._char(pos + 2)
            self.x = self._char(pos + 3)
            self.y = self._char(pos + 4)
            if cmd in b"AT":
                self.arg = self._char(pos + 5)
        elif cmd in b"DZ":
            self.id0 = self._char(pos + 1)
            self.id1 = self._char(pos + 2)
        elif cmd == ord("S"):
            self.id0 = ord("S")
            self.id1 = self._char(pos + 1)
        else:
            # Fixed id: '.' followed by the original command byte.
            self.id0 = ord(".")
            self.x = self._char(pos + 1)
            self.y = self._char(pos + 2)
            if cmd in b"GM":
                self.arg = self._char(pos + 3)

        self.uif = self.find_field(self.id0, self.id1)
        return self.uif is not None

    def _loop_over_form(self, task: Callable[[], bool]) -> None:
        if not self.is_form_active():
            return
        self.fds = self.current_form_fds
        self.target_fds = None
        self.tmp_fds = None

        size, self.text = command_size(self.root_fds, self.fds)
        self.fds += size  # skip the form command itself
        while True:
            cmd = self._char(self.fds)
            if cmd in (ord("U"), 0):
                break
            if self._prepare_current_field() and task():
                break
            self.fds += self.len

    def _call(self, msg: int) -> int:
        return int(self.uif.cb(self, msg) or 0)

    def _is_cursor_selectable(self) -> bool:
        return bool(self.uif.cflags & CFlag.IS_CURSOR_SELECTABLE)

    # --- tasks: return True to stop the loop ---------------------------

    def _task_draw(self) -> bool:
        self._call(Msg.DRAW)
        return False

    def _task_form_start(self) -> bool:
        self._call(Msg.FORM_START)
        return False

    def _task_form_end(self) -> bool:
        self._call(Msg.FORM_END)
        return False

    def _task_find_prev_cursor_uif(self) -> bool:
        if self._is_cursor_selectable():
            if self.fds == self.cursor_focus_fds:
                self.target_fds = self.tmp_fds
                return True
            self.tmp_fds = self.fds
        return False

    def _task_find_first_cursor_uif(self) -> bool:
        if self._is_cursor_selectable():
            self.target_fds = self.fds
            return True
        return False

    def _task_find_last_cursor_uif(self) -> bool:
        if self._is_cursor_selectable():
            self.target_fds = self.fds
        return False

    def _task_find_next_cursor_uif(self) -> bool:
        if self._is_cursor_selectable():
            if self.tmp_fds is not None:
                self.target_fds = self.fds
                self.tmp_fds = None
                return True
            if self.fds == self.cursor_focus_fds:
                self.tmp_fds = self.fds
        return False

    def _task_get_current_cursor_focus_position(self) -> bool:
        if self._is_cursor_selectable():
            if self.fds == self.cursor_focus_fds:
                return True
            self.tmp8 += 1
        return False

    def _task_find_execute_on_select_field(self) -> bool:
        if self.uif.cflags & CFlag.IS_EXECUTE_ON_SELECT:
            self.target_fds = self.fds
            return True
        return False

    # --- messaging helpers ---------------------------------------------

    def _send_cursor_msg(self, msg: int) -> int:
        if self.cursor_focus_fds is not None:
            self.fds = self.cursor_focus_fds
            if self._prepare_current_field():
                return self._call(msg)
        return 0

    def _send_cursor_enter_msg(self) -> int:
        self.is_mud = False
        return self._send_cursor_msg(Msg.CURSOR_ENTER)

    def _next_field(self) -> None:
        self._loop_over_form(self._task_find_next_cursor_uif)
        self.cursor_focus_fds = self.target_fds
        if self.target_fds is None:
            self._loop_over_form(self._task_find_first_cursor_uif)
            self.cursor_focus_fds = self.target_fds

    # --- user API ------------------------------------------------------

    def get_current_cursor_focus_position(self) -> int:
        """Index of the focused field among the cursor selectable fields."""
        self.tmp8 = 0
        self._loop_over_form(self._task_get_current_cursor_focus_position)
        return self.tmp8

    def draw(self) -> None:
        """Send the draw message to every field of the current form."""
        self._loop_over_form(self._task_draw)

    def get_selectable_field_text_option(self, fds_pos: int, nth: int) -> bool:
        """Place token ``nth`` of the field at ``fds_pos`` into ``text``."""
        fds_backup, len_backup = self.fds, self.len
        self.fds = fds_pos
        found = self.nth_token(nth)
        self.fds, self.len = fds_backup, len_backup
        return found

    def get_selectable_field_option_count(self, fds_pos: int) -> int:
        """Number of tokens in the text of the field at ``fds_pos``."""
        fds_backup, len_backup = self.fds, self.len
        self.fds = fds_pos
        count = self.token_count()
        self.fds, self.len = fds_backup, len_backup
        return count

    def enter_form(self, fds_pos: int, initial_cursor_position: int) -> None:
        """Leave the current form and enter the form at ``fds_pos``."""
        self.leave_form()
        self.touch_focus_fds = None
        self.cursor_focus_fds = None
        self.form_scroll_top = 0
        self.form_scroll_visible = 0
        self.form_scroll_total = 0
        self.current_form_fds = fds_pos

        self._loop_over_form(self._task_form_start)
        self._loop_over_form(self._task_find_first_cursor_uif)
        self.cursor_focus_fds = self.target_fds

        for _ in range(initial_cursor_position):
            self.next_field()
        while self._send_cursor_enter_msg() == _SKIP_FIELD:
            self.next_field()

    def leave_form(self) -> None:
        """Leave the current form, if any."""
        if not self.is_form_active():
            return
        self._send_cursor_msg(Msg.CURSOR_LEAVE)
        self.cursor_focus_fds = None
        self._loop_over_form(self._task_form_end)
        self.current_form_fds = None

    def goto_form(self, form_id: int, initial_cursor_position: int) -> bool:
        """Enter form ``form_id``; False if there is no such form."""
        pos = self.find_form(form_id)
        if pos is None:
            return False
        self.enter_form(pos, initial_cursor_position)
        return True

    def save_form(self) -> None:
        """Remember the current form and cursor position for :meth:`restore_form`."""
        if not self.is_form_active():
            return
        self.last_form_fds = self.cursor_focus_fds
        self.last_form_id = self._char(self.current_form_fds + 1)
        self.last_form_cursor_focus_position = self.get_current_cursor_focus_position()

    def restore_form(self) -> None:
        """Return to the form and cursor position saved by :meth:`save_form`."""
        self.goto_form(self.last_form_id, self.last_form_cursor_focus_position)

    def save_cursor_position(self, cursor_position: int) -> None:
        """Store a cursor position of the current form for later auto positioning."""
        if not self.is_form_active():
            raise RuntimeError("no form is active")
        form_id = self._char(self.current_form_fds + 1)
        if form_id == self.menu_form_id[0]:
            self.menu_form_last_added = 0
        elif form_id == self.menu_form_id[1]:
            self.menu_form_last_added = 1
        else:
            self.menu_form_last_added ^= 1
        self.menu_form_id[self.menu_form_last_added] = form_id
        self.menu_form_cursor_focus_position[self.menu_form_last_added] = cursor_position

    def goto_form_auto_cursor_position(self, form_id: int) -> bool:
        """Enter form ``form_id`` at its stored cursor position (or 0)."""
        cursor_position = 0
        if form_id == self.menu_form_id[0]:
            cursor_position = self.menu_form_cursor_focus_position[0]
        if form_id == self.menu_form_id[1]:
            cursor_position = self.menu_form_cursor_focus_position[1]
        return self.goto_form(form_id, cursor_position)

    def current_form_id(self) -> int | None:
        """Number of the current form, or None if no form is active."""
        if not self.is_form_active():
            return None
        return self._char(self.current_form_fds + 1)

    def next_field(self) -> None:
        """Move the cursor focus to the next selectable field."""
        while True:
            if self._send_cursor_msg(Msg.EVENT_NEXT):
                return
            self._send_cursor_msg(Msg.CURSOR_LEAVE)
            self._next_field()
            if self._send_cursor_enter_msg() != _SKIP_FIELD:
                return

    def prev_field(self) -> None:
        """Move the cursor focus to the previous selectable field."""
        while True:
            if self._send_cursor_msg(Msg.EVENT_PREV):
                return
            self._send_cursor_msg(Msg.CURSOR_LEAVE)
            self._loop_over_form(self._task_find_prev_cursor_uif)
            self.cursor_focus_fds = self.target_fds
            if self.target_fds is None:
                self._loop_over_form(self._task_find_last_cursor_uif)
                self.cursor_focus_fds = self.target_fds
            if self._send_cursor_enter_msg() != _SKIP_FIELD:
                return

    def send_select(self) -> None:
        """Send the select message to the focused field."""
        self._send_cursor_msg(Msg.CURSOR_SELECT)

    def send_select_with_execute_on_select_field_search(self) -> None:
        """Select the form's execute-on-select field if any, else the focused field."""
        self._loop_over_form(self._task_find_execute_on_select_field)
        if self.target_fds is not None:
            exec_on_select_field = self.target_fds
            self._send_cursor_msg(Msg.CURSOR_LEAVE)
            self.cursor_focus_fds = exec_on_select_field
            self._send_cursor_enter_msg()
        self._send_cursor_msg(Msg.CURSOR_SELECT)

    def send_value_increment(self) -> None:
        """Send the value increment message to the focused field."""
        self._send_cursor_msg(Msg.VALUE_INCREMENT)

    def send_value_decrement(self) -> None:
        """Send the value decrement message to the focused field."""
        self._send_cursor_msg(Msg.VALUE_DECREMENT)