"""Emulation of key auto-repeat from single key events."""

from __future__ import annotations

from quadui.input import KeyCode

REPEAT_DELAY = 0.5


class KeyRepeat:
    """Lets a held key fire once, then repeatedly after a delay."""

    def __init__(self) -> None:
        self.character_this_frame: KeyCode | None = None
        self.active_character: KeyCode | None = None
        self.repeating_character: KeyCode | None = None
        self.pressed_time = 0.0

    def add_repeat_gap(self, character: KeyCode, time: float) -> bool:
        """Register a key this frame; True when it should take effect."""
        self.character_this_frame = character
        return (
            self.active_character is None
            or self.active_character != character
            or self.repeating_character == character
        )

    def new_frame(self, time: float) -> None:
        """Finish the frame, updating which key is held and repeating."""
        this_frame = self.character_this_frame
        self.character_this_frame = None

        if this_frame == self.active_character and time - self.pressed_time > REPEAT_DELAY:
            self.repeating_character = self.active_character

        if this_frame != self.active_character:
            self.active_character = this_frame
            self.pressed_time = time
            self.repeating_character = None