"""Input state, key codes, input handler and clipboard interfaces."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto

from quadui.geometry import Vec2


class KeyCode(Enum):
    UP = auto()
    DOWN = auto()
    RIGHT = auto()
    LEFT = auto()
    BACKSPACE = auto()
    DELETE = auto()
    ENTER = auto()
    TAB = auto()
    HOME = auto()
    END = auto()
    CONTROL = auto()
    ESCAPE = auto()
    A = auto()  # select all
    Z = auto()  # undo
    Y = auto()  # redo
    C = auto()  # copy
    V = auto()  # paste
    X = auto()  # cut


@dataclass(frozen=True)
class InputCharacter:
    """A typed character (a one-character str) or a key code, with modifiers."""

    key: str | KeyCode
    modifier_shift: bool = False
    modifier_ctrl: bool = False


@dataclass
class Input:
    """Per-frame input state seen by widgets."""

    mouse_position: Vec2 = Vec2()
    mouse_is_down: bool = False
    clicked_down: bool = False
    clicked_up: bool = False
    mouse_wheel: Vec2 = Vec2()
    input_buffer: list[InputCharacter] = field(default_factory=list)
    modifier_ctrl: bool = False
    escape: bool = False
    enter: bool = False
    cursor_grabbed: bool = False
    window_active: bool = False

    def _available(self) -> bool:
        return not self.cursor_grabbed and self.window_active

    def is_mouse_down(self) -> bool:
        return self.mouse_is_down and self._available()

    def click_down(self) -> bool:
        return self.clicked_down and self._available()

    def click_up(self) -> bool:
        return self.clicked_up and self._available()

    def reset(self) -> None:
        """Clear the per-frame events."""
        self.modifier_ctrl = False
        self.escape = False
        self.enter = False
        self.clicked_down = False
        self.clicked_up = False
        self.mouse_wheel = Vec2()
        self.input_buffer = []
        self.window_active = False


class ClipboardObject(ABC):
    """A source and sink of clipboard text."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the clipboard text, if any."""

    @abstractmethod
    def set(self, data: str) -> None:
        """Replace the clipboard text."""


class MemoryClipboard(ClipboardObject):
    """A clipboard held in memory."""

    def __init__(self) -> None:
        self._data: str | None = None

    def get(self) -> str | None:
        return self._data

    def set(self, data: str) -> None:
        self._data = data


class InputHandler(ABC):
    """Receiver of raw input events."""

    @abstractmethod
    def mouse_down(self, position: tuple[float, float]) -> None:
        """A mouse button was pressed."""

    @abstractmethod
    def mouse_up(self, position: tuple[float, float]) -> None:
        """A mouse button was released."""

    @abstractmethod
    def mouse_wheel(self, x: float, y: float) -> None:
        """The wheel moved."""

    @abstractmethod
    def mouse_move(self, position: tuple[float, float]) -> None:
        """The mouse moved."""

    @abstractmethod
    def char_event(self, character: str, shift: bool, ctrl: bool) -> None:
        """A character was typed."""

    @abstractmethod
    def key_down(self, key_down: KeyCode, shift: bool, ctrl: bool) -> None:
        """A special key was pressed."""