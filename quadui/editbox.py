"""Keyboard editing of an edit box's text."""

from __future__ import annotations

from typing import Callable

from quadui.input import ClipboardObject, InputCharacter, KeyCode
from quadui.text_editor import EditboxState

CharFilter = Callable[[str], bool]


def _accepts_typed(character: str, char_filter: CharFilter | None) -> bool:
    return (
        character not in ("\r", "\n")
        and character.isascii()
        and (char_filter is None or char_filter(character))
    )


def _paste(
    text: str,
    state: EditboxState,
    clipboard: ClipboardObject | None,
    char_filter: CharFilter | None,
) -> str:
    data = clipboard.get() if clipboard is not None else None
    if not data:
        return text
    if state.selection is not None:
        text = state.delete_selected(text)
    if char_filter is not None:
        for character in data:
            if char_filter(character):
                text = state.insert_character(text, character)
    else:
        text = state.insert_string(text, data)
    return text


def _line_up(text: str, state: EditboxState, shift: bool) -> None:
    to_line_begin = state.find_line_begin(text)
    state.move_cursor(text, -to_line_begin, shift)
    if state.cursor != 0:
        state.move_cursor(text, -1, shift)
        new_to_line_begin = state.find_line_begin(text)
        offset = min(to_line_begin, new_to_line_begin) - new_to_line_begin
        state.move_cursor(text, offset, shift)


def _line_down(text: str, state: EditboxState, shift: bool) -> None:
    to_line_begin = state.find_line_begin(text)
    to_line_end = state.find_line_end(text)
    state.move_cursor(text, to_line_end, shift)
    if text and state.cursor < len(text) - 1:
        state.move_cursor(text, 1, shift)
        state.move_cursor_within_line(text, to_line_begin, shift)


def _apply_key(
    text: str,
    state: EditboxState,
    event: InputCharacter,
    clipboard: ClipboardObject | None,
    multiline: bool,
    char_filter: CharFilter | None,
) -> str:
    key = event.key
    shift = event.modifier_shift
    ctrl = event.modifier_ctrl

    if isinstance(key, str):
        if not ctrl and _accepts_typed(key, char_filter):
            if state.selection is not None:
                text = state.delete_selected(text)
            text = state.insert_character(text, key)
        return text

    if ctrl and key is KeyCode.Z:
        return state.undo(text)
    if ctrl and key is KeyCode.Y:
        return state.redo(text)
    if ctrl and key is KeyCode.X:
        return state.delete_selected(text)
    if ctrl and key is KeyCode.V:
        return _paste(text, state, clipboard, char_filter)
    if ctrl and key is KeyCode.A:
        state.select_all(text)
    elif key is KeyCode.ENTER:
        if multiline:
            text = state.insert_character(text, "\n")
    elif key is KeyCode.BACKSPACE:
        if state.selection is None:
            text = state.delete_current_character(text)
        else:
            text = state.delete_selected(text)
    elif key is KeyCode.DELETE:
        if state.selection is None:
            text = state.delete_next_character(text)
        else:
            text = state.delete_selected(text)
    elif key is KeyCode.RIGHT:
        if ctrl:
            state.move_cursor_next_word(text, shift)
        else:
            state.move_cursor(text, 1, shift)
    elif key is KeyCode.LEFT:
        if ctrl:
            state.move_cursor_prev_word(text, shift)
        else:
            state.move_cursor(text, -1, shift)
    elif key is KeyCode.HOME:
        state.move_cursor(text, -state.find_line_begin(text), shift)
    elif key is KeyCode.END:
        state.move_cursor(text, state.find_line_end(text), shift)
    elif key is KeyCode.UP:
        _line_up(text, state, shift)
    elif key is KeyCode.DOWN:
        _line_down(text, state, shift)
    return text


def apply_keyboard_input(
    text: str,
    state: EditboxState,
    input_buffer: list[InputCharacter],
    clipboard: ClipboardObject | None = None,
    multiline: bool = True,
    char_filter: CharFilter | None = None,
) -> str:
    """Apply buffered key events to ``text`` and return the edited text.

    The events are consumed: ``input_buffer`` is empty afterwards.
    """
    events = list(input_buffer)
    input_buffer.clear()
    for event in events:
        text = _apply_key(text, state, event, clipboard, multiline, char_filter)
    return text