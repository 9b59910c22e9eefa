# quadui

Building blocks for an immediate-mode user interface, free of any
particular windowing or graphics backend:

- `quadui.geometry` – `Vec2`, `Rect`, `RectOffset` and `Color`.
- `quadui.cursor` – the layout `Cursor` that decides where the next widget
  goes (`Layout.VERTICAL`, `Layout.HORIZONTAL` or `Layout.free(point)`),
  plus `Scroll` state.
- `quadui.input` – `Input` state, `KeyCode`, `InputCharacter`, the abstract
  `InputHandler` and `ClipboardObject` interfaces, and an in-memory
  `MemoryClipboard`.
- `quadui.key_repeat` – `KeyRepeat`, which lets a held key fire once and then
  repeatedly after half a second.
- `quadui.text_editor` – `EditboxState`: cursor, selection, word and line
  selection by double and triple clicks, and undo/redo.
- `quadui.editbox` – `apply_keyboard_input`, which feeds a buffer of key
  presses into an `EditboxState` and returns the edited text.
- `quadui.commands` – draw commands (`DrawCharacter`, `DrawRect`,
  `DrawSprite`, `DrawTriangle`, `DrawLine`, `DrawRawTexture`, `Clip`),
  `ElementState` and `LabelParams`.
- `quadui.mesh` – `Vertex`, `DrawList` and `render_command`, which turn draw
  commands into batched vertices and indices.
- `quadui.style` – `Style`, `StyleBuilder`, the default `Skin`, `Image` and a
  `SpriteAtlas`.

## Installation

```
pip install .
```

## Editing text

Text is passed into every call; editing methods return the new text.

```python
from quadui.text_editor import EditboxState

state = EditboxState()
text = state.insert_string("", "hello")
text = state.insert_character(text, "!")
text = state.undo(text)          # "hello"
text = state.redo(text)          # "hello!"
```

Key presses can be applied in one go:

```python
from quadui.editbox import apply_keyboard_input
from quadui.input import InputCharacter, KeyCode, MemoryClipboard

clipboard = MemoryClipboard()
clipboard.set("world")
buffer = [InputCharacter(KeyCode.V, modifier_ctrl=True)]
text = apply_keyboard_input("hello ", EditboxState(cursor=6), buffer, clipboard)
# text == "hello world", buffer is now empty
```

## Laying out widgets

```python
from quadui.cursor import Cursor, Layout
from quadui.geometry import Rect, Vec2

cursor = Cursor(Rect(0, 0, 200, 100), 2.0)
first = cursor.fit(Vec2(50, 20), Layout.VERTICAL)
second = cursor.fit(Vec2(50, 20), Layout.VERTICAL)
```

## Building meshes

```python
from quadui.commands import DrawRect
from quadui.geometry import Color, Rect
from quadui.mesh import render_command

draw_lists = []
render_command(
    draw_lists,
    DrawRect(rect=Rect(0, 0, 10, 10), source=Rect(0, 0, 1, 1),
             fill=Color(1, 1, 1, 1), stroke=None),
)
```

A new `DrawList` is started when the clipping zone or texture changes or
when a list would grow past 8000 vertices or 4000 indices.

## Styles

```python
from quadui.commands import ElementState
from quadui.style import Image, Skin, SpriteAtlas

atlas = SpriteAtlas()
skin = Skin.create(atlas, font=None, combobox_background=Image(1, 1, bytes(4)))
color = skin.button_style.element_color(ElementState(focused=True, hovered=True))
```

The `font` of a style is stored as given and not used by the package.

## What the package does not do

It opens no window, draws nothing on screen and rasterizes no fonts: it
produces layout positions, edit results, draw commands and vertex/index
lists for a renderer supplied elsewhere. There are no ready-made widgets
such as buttons or windows, and it reads no map or level files.

## Running the tests

```
pip install .[test]
pytest
```