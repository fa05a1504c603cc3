import pytest

from monoui import fds as f
from monoui.fds import DFlag, Msg
from monoui.ui import Mui


class Recorder:
    def __init__(self, replies=None):
        self.events = []
        self.replies = replies or {}

    def __call__(self, ui, msg):
        fid = bytes((ui.id0, ui.id1))
        self.events.append((fid, Msg(msg), ui.text, ui.dflags))
        return self.replies.get((fid, Msg(msg)), 0)

    def of(self, msg):
        return [fid for fid, m, _, _ in self.events if m == msg]


def build(replies=None, extra_fields=()):
    rec = Recorder(replies)
    form1 = (
        f.form(1)
        + f.label(0, 10, "Title")
        + f.xyt("B1", 1, 2, "One")
        + f.xyt("B2", 3, 4, "Two")
        + f.xyt("B3", 5, 6, "Three")
    )
    definition = form1 + f.form(2) + f.xyt("B1", 7, 8, "Back")
    fields = [
        f.muif_label(rec),
        f.muif_button("B1", rec),
        f.muif_button("B2", rec),
        f.muif_button("B3", rec),
        *extra_fields,
    ]
    return Mui(None, definition, fields), rec, definition, form1


def test_inactive_initially():
    ui, _, _, _ = build()
    assert ui.is_form_active() is False
    assert ui.current_form_id() is None


def test_goto_form_sends_form_start_and_enter():
    ui, rec, _, _ = build()
    assert ui.goto_form(1, 0) is True
    assert ui.current_form_id() == 1
    assert rec.of(Msg.FORM_START) == [b".L", b"B1", b"B2", b"B3"]
    assert rec.of(Msg.CURSOR_ENTER) == [b"B1"]
    assert ui.get_current_cursor_focus_position() == 0


def test_goto_unknown_form():
    ui, rec, _, _ = build()
    assert ui.goto_form(99, 0) is False
    assert not ui.is_form_active()
    assert rec.events == []


def test_find_form_positions():
    ui, _, _, form1 = build()
    assert ui.find_form(1) == 0
    assert ui.find_form(2) == len(form1)
    assert ui.find_form(7) is None


def test_find_field():
    ui, _, _, _ = build()
    spec = ui.find_field(ord("B"), ord("2"))
    assert spec.field_id == b"B2"
    assert ui.find_field(ord("X"), ord("Y")) is None


def test_draw_order_text_and_focus():
    ui, rec, _, _ = build()
    ui.goto_form(1, 0)
    rec.events.clear()
    ui.draw()
    draws = [(fid, text, dfl) for fid, m, text, dfl in rec.events if m == Msg.DRAW]
    assert [d[1] for d in draws] == [b"Title", b"One", b"Two", b"Three"]
    focused = [d[0] for d in draws if d[2] & DFlag.IS_CURSOR_FOCUS]
    assert focused == [b"B1"]


def test_draw_without_form_does_nothing():
    ui, rec, _, _ = build()
    ui.draw()
    assert rec.events == []


def test_next_field_wraps():
    ui, _, _, _ = build()
    ui.goto_form(1, 0)
    positions = []
    for _ in range(4):
        ui.next_field()
        positions.append(ui.get_current_cursor_focus_position())
    assert positions == [1, 2, 0, 1]


def test_prev_field_wraps():
    ui, _, _, _ = build()
    ui.goto_form(1, 0)
    ui.prev_field()
    assert ui.get_current_cursor_focus_position() == 2
    ui.prev_field()
    assert ui.get_current_cursor_focus_position() == 1


def test_initial_cursor_position():
    ui, rec, _, _ = build()
    ui.goto_form(1, 2)
    assert ui.get_current_cursor_focus_position() == 2
    assert rec.of(Msg.CURSOR_ENTER)[-1] == b"B3"


def test_leave_form():
    ui, rec, _, _ = build()
    ui.goto_form(1, 1)
    rec.events.clear()
    ui.leave_form()
    assert rec.of(Msg.CURSOR_LEAVE) == [b"B2"]
    assert rec.of(Msg.FORM_END) == [b".L", b"B1", b"B2", b"B3"]
    assert not ui.is_form_active()
    assert ui.cursor_focus_fds is None


def test_skipped_field_on_enter():
    ui, _, _, _ = build({(b"B2", Msg.CURSOR_ENTER): 255})
    ui.goto_form(1, 0)
    ui.next_field()
    assert ui.get_current_cursor_focus_position() == 2


def test_event_next_handled_keeps_focus():
    ui, rec, _, _ = build({(b"B1", Msg.EVENT_NEXT): 1})
    ui.goto_form(1, 0)
    ui.next_field()
    assert ui.get_current_cursor_focus_position() == 0
    assert Msg.CURSOR_LEAVE not in [m for _, m, _, _ in rec.events]


def test_select_and_values_go_to_focused_field():
    ui, rec, _, _ = build()
    ui.goto_form(1, 1)
    rec.events.clear()
    ui.send_select()
    ui.send_value_increment()
    ui.send_value_decrement()
    assert [(fid, m) for fid, m, _, _ in rec.events] == [
        (b"B2", Msg.CURSOR_SELECT),
        (b"B2", Msg.VALUE_INCREMENT),
        (b"B2", Msg.VALUE_DECREMENT),
    ]


def test_execute_on_select_field():
    rec = Recorder()
    definition = f.form(1) + f.xy("B1", 0, 0) + f.xy("OK", 9, 9)
    ui = Mui(None, definition, [f.muif_button("B1", rec), f.muif_execute_on_select_button("OK", rec)])
    ui.goto_form(1, 0)
    rec.events.clear()
    ui.send_select_with_execute_on_select_field_search()
    assert [(fid, m) for fid, m, _, _ in rec.events] == [
        (b"B1", Msg.CURSOR_LEAVE),
        (b"OK", Msg.CURSOR_ENTER),
        (b"OK", Msg.CURSOR_SELECT),
    ]
    assert ui.get_current_cursor_focus_position() == 1


def test_select_without_execute_on_select_field():
    ui, rec, _, _ = build()
    ui.goto_form(1, 0)
    rec.events.clear()
    ui.send_select_with_execute_on_select_field_search()
    assert [(fid, m) for fid, m, _, _ in rec.events] == [(b"B1", Msg.CURSOR_SELECT)]


def test_goto_button_uses_arg():
    def goto_cb(ui, msg):
        if msg == Msg.CURSOR_SELECT:
            return ui.goto_form(ui.arg, 0)
        return 0

    rec = Recorder()
    definition = f.form(1) + f.goto(0, 0, 2, "Go") + f.form(2) + f.xy("B1", 0, 0)
    ui = Mui(None, definition, [f.muif_goto(goto_cb), f.muif_button("B1", rec)])
    ui.goto_form(1, 0)
    ui.send_select()
    assert ui.current_form_id() == 2
    assert rec.of(Msg.CURSOR_ENTER) == [b"B1"]


def test_save_and_restore_form():
    ui, _, _, _ = build()
    ui.goto_form(1, 0)
    ui.next_field()
    ui.save_form()
    assert ui.last_form_id == 1
    assert ui.last_form_cursor_focus_position == 1
    ui.goto_form(2, 0)
    assert ui.current_form_id() == 2
    ui.restore_form()
    assert ui.current_form_id() == 1
    assert ui.get_current_cursor_focus_position() == 1


def test_auto_cursor_position():
    ui, _, _, _ = build()
    ui.goto_form(1, 0)
    ui.save_cursor_position(2)
    ui.goto_form(2, 0)
    assert ui.goto_form_auto_cursor_position(1) is True
    assert ui.get_current_cursor_focus_position() == 2
    assert ui.goto_form_auto_cursor_position(5) is False


def test_save_cursor_position_requires_form():
    ui, _, _, _ = build()
    with pytest.raises(RuntimeError):
        ui.save_cursor_position(1)


def test_selectable_field_text_option():
    prefix = f.form(1) + f.xy("B1", 0, 0)
    definition = prefix + f.data("DA", "red|green|blue")
    ui = Mui(None, definition, [])
    ui.fds = 3
    ui.len = 5
    assert ui.get_selectable_field_text_option(len(prefix), 1) is True
    assert ui.text == b"green"
    assert ui.get_selectable_field_option_count(len(prefix)) == 3
    assert ui.get_selectable_field_text_option(len(prefix), 3) is False
    assert ui.text == b""
    assert (ui.fds, ui.len) == (3, 5)


def test_nth_token_on_current_field():
    definition = f.form(1) + f.xyt("B1", 0, 0, "a|bb|ccc")
    ui = Mui(None, definition, [])
    ui.fds = 2
    assert ui.nth_token(2) is True
    assert ui.text == b"ccc"
    assert ui.token_count() == 3
    assert ui.nth_token(5) is False