"""Text editing state behind an edit box: cursor, selection, clicks and undo history."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

DOUBLE_CLICK_TIME = 0.5

_WORD_DELIMITERS = frozenset(' ();"')


def _char_at(text: str, index: int, default: str) -> str:
    return text[index] if 0 <= index < len(text) else default


class _Command:
    """An undoable edit. Both directions return the new cursor and text."""

    def apply(self, text: str) -> tuple[int, str]:
        raise NotImplementedError

    def unapply(self, text: str) -> tuple[int, str]:
        raise NotImplementedError


@dataclass(frozen=True)
class _InsertCharacter(_Command):
    character: str
    cursor: int

    def apply(self, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text

    def unapply(self, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text


@dataclass(frozen=True)
class _InsertString(_Command):
    data: str
    cursor: int

    def apply(self, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.data + text[self.cursor :]
        return self.cursor + len(self.data), text

    def unapply(self, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            end = min(self.cursor + len(self.data), len(text))
            text = text[: self.cursor] + text[end:]
        return self.cursor, text


@dataclass(frozen=True)
class _DeleteCharacter(_Command):
    character: str
    cursor: int

    def apply(self, text: str) -> tuple[int, str]:
        if self.cursor < len(text):
            text = text[: self.cursor] + text[self.cursor + 1 :]
        return self.cursor, text

    def unapply(self, text: str) -> tuple[int, str]:
        if self.cursor <= len(text):
            text = text[: self.cursor] + self.character + text[self.cursor :]
        return self.cursor + 1, text


def _ordered(span: tuple[int, int], text: str) -> tuple[int, int]:
    low, high = min(span), max(span)
    if high > len(text):
        raise ValueError(f"range {span} lies outside text of length {len(text)}")
    return low, high


@dataclass(frozen=True)
class _DeleteRange(_Command):
    span: tuple[int, int]
    data: str

    @classmethod
    def of(cls, text: str, span: tuple[int, int]) -> _DeleteRange:
        low, high = _ordered(span, text)
        return cls(span, text[low:high])

    def apply(self, text: str) -> tuple[int, str]:
        low, high = _ordered(self.span, text)
        return low, text[:low] + text[high:]

    def unapply(self, text: str) -> tuple[int, str]:
        low = min(self.span)
        return low, text[:low] + self.data + text[low:]


class ClickKind(Enum):
    NONE = auto()
    SELECTING_CHARS = auto()
    SELECTING_WORDS = auto()
    SELECTING_LINES = auto()
    SELECTED = auto()


@dataclass(frozen=True)
class ClickState:
    """What a mouse press is currently selecting.

    ``begin`` is where a character selection started; ``span`` is the word or
    line selected by a double or triple click.
    """

    kind: ClickKind = ClickKind.NONE
    begin: int = 0
    span: tuple[int, int] = (0, 0)

    @classmethod
    def selecting_chars(cls, begin: int) -> ClickState:
        return cls(ClickKind.SELECTING_CHARS, begin=begin)

    @classmethod
    def selecting_words(cls, span: tuple[int, int]) -> ClickState:
        return cls(ClickKind.SELECTING_WORDS, span=span)

    @classmethod
    def selecting_lines(cls, span: tuple[int, int]) -> ClickState:
        return cls(ClickKind.SELECTING_LINES, span=span)


_NO_CLICK = ClickState()
_SELECTED = ClickState(ClickKind.SELECTED)


@dataclass
class EditboxState:
    """Cursor, selection and edit history of one edit box.

    Text is passed in on every call; methods that edit return the new text.
    """

    cursor: int = 0
    click_state: ClickState = _NO_CLICK
    clicks_counter: int = 0
    current_click: int = 0
    last_click_time: float = 0.0
    last_click: int = 0
    selection: tuple[int, int] | None = None
    _undo_stack: list[_Command] = field(default_factory=list, repr=False)
    _redo_stack: list[_Command] = field(default_factory=list, repr=False)

    def clamp_selection(self, text: str) -> None:
        """Keep the selection inside the text after outside changes."""
        if self.selection is not None:
            start, end = self.selection
            self.selection = (min(start, len(text)), min(end, len(text)))

    def selected_text(self, text: str) -> str | None:
        if self.selection is None:
            return None
        low, high = _ordered(self.selection, text)
        return text[low:high]

    def in_selected_range(self, cursor: int) -> bool:
        if self.selection is None:
            return False
        start, end = self.selection
        if start < end:
            return start <= cursor < end
        return end <= cursor < start

    def find_line_begin(self, text: str) -> int:
        """Distance from the cursor back to the start of its line."""
        position = self.cursor
        while position > 0 and _char_at(text, position - 1, "x") != "\n":
            position -= 1
        return self.cursor - position

    def find_line_end(self, text: str) -> int:
        """Distance from the cursor forward to the end of its line."""
        position = self.cursor
        while position < len(text) and _char_at(text, position, "x") != "\n":
            position += 1
        return max(position - self.cursor, 0)

    @staticmethod
    def word_delimiter(character: str) -> bool:
        return character in _WORD_DELIMITERS

    def find_word_begin(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` back to the start of its word."""
        position = cursor
        while position > 0:
            current = _char_at(text, position - 1, " ")
            if self.word_delimiter(current) or current == "\n":
                break
            position -= 1
        return cursor - position

    def find_word_end(self, text: str, cursor: int) -> int:
        """Distance from ``cursor`` to the start of the next word."""
        position = cursor
        space_skipping = False
        while position < len(text):
            current = _char_at(text, position, " ")
            if self.word_delimiter(current) or current == "\n":
                space_skipping = True
            if space_skipping and not self.word_delimiter(current):
                break
            position += 1
        return position - cursor

    def _run(self, command: _Command, text: str) -> str:
        self.cursor, text = command.apply(text)
        self._undo_stack.append(command)
        return text

    def insert_character(self, text: str, character: str) -> str:
        self._redo_stack.clear()
        self.selection = None
        return self._run(_InsertCharacter(character, self.cursor), text)

    def insert_string(self, text: str, string: str) -> str:
        self._redo_stack.clear()
        self.selection = None
        return self._run(_InsertString(string, self.cursor), text)

    def delete_selected(self, text: str) -> str:
        self._redo_stack.clear()
        if self.selection is not None:
            text = self._run(_DeleteRange.of(text, self.selection), text)
        self.selection = None
        return text

    def delete_next_character(self, text: str) -> str:
        self._redo_stack.clear()
        if self.cursor < len(text):
            text = self._run(_DeleteCharacter(text[self.cursor], self.cursor), text)
        return text

    def delete_current_character(self, text: str) -> str:
        if self.cursor > 0:
            self.cursor -= 1
            text = self.delete_next_character(text)
        return text

    def move_cursor_next_word(self, text: str, shift: bool) -> None:
        next_word = self.find_word_end(text, self.cursor + 1) + 1
        self.move_cursor(text, next_word, shift)

    def move_cursor_prev_word(self, text: str, shift: bool) -> None:
        if self.cursor > 1:
            prev_word = self.find_word_begin(text, self.cursor - 1) + 1
            self.move_cursor(text, -prev_word, shift)

    def move_cursor(self, text: str, dx: int, shift: bool) -> None:
        """Move by ``dx`` if that stays in the text; shift extends the selection."""
        start = self.cursor
        end = start
        if 0 <= self.cursor + dx <= len(text):
            end = self.cursor + dx
            self.cursor = end

        if not shift:
            self.selection = None
        elif self.selection is None:
            self.selection = (start, end)
        else:
            self.selection = (self.selection[0], end)

    def move_cursor_within_line(self, text: str, dx: int, shift: bool) -> None:
        """Move forward up to ``dx`` characters without leaving the line."""
        if dx < 0:
            raise ValueError("moving backwards within a line is not supported")
        for _ in range(dx):
            if _char_at(text, self.cursor, "x") == "\n" or self.cursor == len(text):
                break
            self.move_cursor(text, 1, shift)

    def select_all(self, text: str) -> None:
        self.selection = (0, len(text))
        self.click_state = _NO_CLICK

    def deselect(self) -> None:
        self.click_state = _NO_CLICK
        self.selection = None

    def select_word(self, text: str) -> tuple[int, int]:
        begin = self.find_word_begin(text, self.cursor)
        end = self.find_word_end(text, self.cursor)
        self.selection = (self.cursor - begin, self.cursor + end)
        return self.selection

    def select_line(self, text: str) -> tuple[int, int]:
        begin = self.find_line_begin(text)
        end = self.find_line_end(text)
        self.selection = (self.cursor - begin, self.cursor + end)
        return self.selection

    def click_down(self, time: float, text: str, cursor: int) -> None:
        """A mouse press on character ``cursor``; repeated presses select words and lines."""
        self.current_click = cursor

        if self.last_click == self.current_click and time - self.last_click_time < DOUBLE_CLICK_TIME:
            self.clicks_counter += 1
            phase = self.clicks_counter % 3
            if phase == 0:
                self.deselect()
            elif phase == 1:
                self.click_state = ClickState.selecting_words(self.select_word(text))
            else:
                self.click_state = ClickState.selecting_lines(self.select_line(text))
        else:
            self.clicks_counter = 0
            if self.click_state.kind in (ClickKind.NONE, ClickKind.SELECTED):
                self.click_state = ClickState.selecting_chars(cursor)
                self.selection = (cursor, cursor)
            else:
                self.click_state = _NO_CLICK
                self.selection = None
                self.cursor = cursor

        self.last_click_time = time

    def click_move(self, text: str, cursor: int) -> None:
        """The mouse, still pressed, is over character ``cursor``."""
        self.cursor = cursor
        if self.cursor != self.last_click:
            self.clicks_counter = 0

        state = self.click_state
        if state.kind is ClickKind.SELECTING_CHARS:
            self.selection = (state.begin, cursor)
        elif state.kind is ClickKind.SELECTING_WORDS:
            start, end = state.span
            if cursor < start:
                word_begin = self.cursor - self.find_word_begin(text, self.cursor)
                self.selection = (word_begin, end)
                self.cursor = word_begin
            elif cursor > end:
                word_end = self.cursor + self.find_word_end(text, self.cursor)
                self.selection = (start, word_end)
                self.cursor = word_end
            else:
                self.selection = (start, end)
                self.cursor = end
        elif state.kind is ClickKind.SELECTING_LINES:
            start, end = state.span
            if cursor < start:
                line_begin = self.cursor - self.find_line_begin(text)
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (line_begin, end)
                self.cursor = line_end
            elif cursor > end:
                line_end = self.cursor + self.find_line_end(text)
                self.selection = (start, line_end)
                self.cursor = line_end
            else:
                self.selection = (start, end)
                self.cursor = end

        self.last_click = cursor

    def click_up(self, text: str) -> None:
        """The mouse was released; an empty selection is dropped."""
        self.click_state = _NO_CLICK
        if self.selection is not None:
            start, end = self.selection
            if start != end:
                self.click_state = _SELECTED
            else:
                self.selection = None

    def undo(self, text: str) -> str:
        if self._undo_stack:
            command = self._undo_stack.pop()
            self.cursor, text = command.unapply(text)
            self._redo_stack.append(command)
        return text

    def redo(self, text: str) -> str:
        if self._redo_stack:
            command = self._redo_stack.pop()
            self.cursor, text = command.apply(text)
            self._undo_stack.append(command)
        return text