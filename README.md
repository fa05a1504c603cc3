# monoui

A small, display-independent menu system for monochrome screens, together
with the pixel drawing primitives a menu needs: boxes, frames, rounded
rectangles, circles, discs, ellipses, 1-bit bitmaps and text buttons, all
drawn onto an in-memory canvas.

The package has no dependencies beyond the Python standard library
(Python 3.10 or later).

## Installation

```
pip install .
```

Install with the `test` extra (`pip install .[test]`) to run the test suite
with pytest.

## Form definitions

A user interface is described by a *form definition string* (FDS), a
`bytes` value built with the helpers in `monoui.fds`:

```python
from monoui import fds

forms = (
    fds.form(1)
    + fds.style(0)
    + fds.label(5, 10, "Main menu")
    + fds.goto(5, 25, 2, "Settings")
    + fds.xyt("BN", 5, 40, "OK")
    + fds.form(2)
    + fds.label(5, 10, "Settings")
    + fds.goto(5, 25, 1, "Back")
)
```

The available commands are `form`, `style`, `aux`, `data`, `xy`, `xyt`,
`xya`, `xyat`, `label`, `goto` and `goto_lower`. Positions, arguments and
form numbers must be in 0..255, field ids are exactly two characters and
texts may not contain NUL or the `0xff` delimiter; otherwise `ValueError`
is raised.

Every field of a form is bound to a callback through a list of
`FieldSpec` entries, which the `muif_*` helpers create (`muif`,
`muif_style`, `muif_ro`, `muif_label`, `muif_goto`, `muif_button`,
`muif_execute_on_select_button`, `muif_variable`). A callback receives the
`Mui` instance and a `Msg` value and returns an integer:

```python
from monoui.fds import Msg, muif_button, muif_goto, muif_label, muif_style

def on_label(ui, msg):
    if msg == Msg.DRAW:
        ...  # draw ui.text (bytes) at ui.x, ui.y
    return 0

def on_goto(ui, msg):
    if msg == Msg.CURSOR_SELECT:
        return ui.goto_form(ui.arg, 0)
    return 0

fields = [
    muif_style(0, lambda ui, msg: 0),
    muif_label(on_label),
    muif_goto(on_goto),
    muif_button("BN", on_goto),
]
```

Returning 255 from `Msg.CURSOR_ENTER` makes the cursor skip the field;
returning a non-zero value from `Msg.EVENT_NEXT` or `Msg.EVENT_PREV` keeps
the focus on the field.

`monoui.parsing` holds the low-level readers used by the engine:
`command_size`, `parse_text`, `iter_tokens`, `nth_token`, `token_count`,
`find_form` and friends.

## Running the interface

```python
from monoui.ui import Mui

ui = Mui(graphics=None, fds=forms, fields=fields)
ui.goto_form(1, 0)
ui.draw()

ui.next_field()
ui.send_select()
print(ui.current_form_id())
```

`Mui` provides form navigation (`goto_form`, `enter_form`, `leave_form`,
`save_form`, `restore_form`, `save_cursor_position`,
`goto_form_auto_cursor_position`, `current_form_id`), cursor movement
(`next_field`, `prev_field`, `get_current_cursor_focus_position`) and input
events (`send_select`, `send_select_with_execute_on_select_field_search`,
`send_value_increment`, `send_value_decrement`). While a callback runs,
the current field is exposed as `ui.id0`, `ui.id1`, `ui.x`, `ui.y`,
`ui.arg`, `ui.text`, `ui.uif` and `ui.fds`; `is_cursor_focus()` tells
whether it has the focus. Field texts written as `"a|b|c"` act as option
lists, read with `nth_token`, `token_count`,
`get_selectable_field_text_option` and `get_selectable_field_option_count`.
The `graphics` argument is stored as `ui.graphics` for the callbacks' use.

## Drawing

`monoui.canvas.Canvas` is an in-memory monochrome pixel buffer with a draw
color (0 clear, 1 set, 2 XOR), a bitmap transparency mode and a font mode.
Text is drawn with a `Font`: a fixed-width bitmap font given as a mapping
from characters to rows of pixels. The default `Font()` has no glyphs, so
text only advances the pen. The modules `monoui.shapes`, `monoui.bitmap`
and `monoui.button` draw onto a canvas:

```python
from monoui.button import ButtonFlag, draw_button_utf8
from monoui.canvas import Canvas
from monoui.shapes import Quadrant, draw_disc, draw_frame

canvas = Canvas(128, 64, None)
draw_frame(canvas, 0, 0, 128, 64)
draw_disc(canvas, 64, 32, 10, Quadrant.ALL)
draw_button_utf8(canvas, 64, 50, ButtonFlag.BW1 | ButtonFlag.HCENTER, 0, 2, 1, "OK")

for row in canvas.rows():
    print(row)  # "#" for set, "." for clear pixels
```

- `monoui.shapes`: `draw_box`, `draw_frame`, `draw_rbox`, `draw_rframe`,
  `draw_circle`, `draw_disc`, `draw_ellipse`, `draw_filled_ellipse`, with
  `Quadrant` selecting which parts of a round shape are drawn.
- `monoui.bitmap`: `draw_horizontal_bitmap` and `draw_bitmap` (most
  significant bit first), `draw_hxbm` and `draw_xbm` (XBM, least
  significant bit first).
- `monoui.button`: `draw_button_frame` and `draw_button_utf8`, controlled
  by `ButtonFlag` (border width, shadow, `INV`, `HCENTER`, `XFRAME`).

Pixels outside the canvas are clipped silently; `get_pixel` raises
`IndexError` for positions outside it.

## What is not included

- No display output: the canvas lives in memory only and is not sent to
  any screen or device, and there is no page-wise buffer handling.
- No ready-made field callbacks (buttons, checkboxes, number or option
  editors); the engine dispatches messages, and you write the callbacks.
- No font files: fonts are defined in code as `Font` glyph tables.
- No command-line program.