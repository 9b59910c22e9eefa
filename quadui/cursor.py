"""The layout cursor that decides where the next widget is placed."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import ClassVar

from quadui.geometry import Rect, Vec2


@dataclass
class Scroll:
    """Scroll state of a window area."""

    rect: Rect
    inner_rect: Rect
    inner_rect_previous_frame: Rect
    scroll: Vec2 = Vec2()
    dragging_x: bool = False
    dragging_y: bool = False
    initial_scroll: Vec2 = Vec2()

    def _clamped(self, y: float) -> float:
        prev = self.inner_rect_previous_frame
        return min(max(y, prev.y), prev.h - self.rect.h + prev.y)

    def scroll_to(self, y: float) -> None:
        """Move the visible rect to ``y``, clamped to last frame's content."""
        self.rect = replace(self.rect, y=self._clamped(y))

    def update(self) -> None:
        """Clamp the visible rect to last frame's content."""
        self.rect = replace(self.rect, y=self._clamped(self.rect.y))


class LayoutKind(Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"
    FREE = "free"


@dataclass(frozen=True)
class Layout:
    """How a widget is placed: in a column, in a row, or at a fixed point."""

    kind: LayoutKind
    point: Vec2 | None = None

    VERTICAL: ClassVar[Layout]
    HORIZONTAL: ClassVar[Layout]

    @classmethod
    def free(cls, point: Vec2) -> Layout:
        return cls(LayoutKind.FREE, point)


Layout.VERTICAL = Layout(LayoutKind.VERTICAL)
Layout.HORIZONTAL = Layout(LayoutKind.HORIZONTAL)


class Cursor:
    """Tracks where the next widget goes inside a window area."""

    def __init__(self, area: Rect, margin: float) -> None:
        self.margin = margin
        self.x = margin
        self.y = margin
        self.ident = 0.0
        self.start_x = margin
        self.start_y = margin
        full = Rect(0.0, 0.0, area.w, area.h)
        self.scroll = Scroll(rect=full, inner_rect=full, inner_rect_previous_frame=full)
        self.area = area
        self.next_same_line: float | None = None
        self.max_row_y = 0.0

    def _origin(self) -> Vec2:
        return Vec2(self.area.x, self.area.y) + self.scroll.scroll + Vec2(self.ident, 0.0)

    def reset(self) -> None:
        """Start a new frame."""
        self.x = self.start_x
        self.y = self.start_y
        self.max_row_y = 0.0
        self.ident = 0.0
        self.scroll.inner_rect_previous_frame = self.scroll.inner_rect
        self.scroll.inner_rect = Rect(0.0, 0.0, self.area.w, self.area.h)

    def current_position(self) -> Vec2:
        return Vec2(self.x, self.y) + self._origin()

    def fit(self, size: Vec2, layout: Layout) -> Vec2:
        """Reserve space of ``size`` and return its screen position."""
        if self.next_same_line is not None:
            x = self.next_same_line
            self.next_same_line = None
            if x != 0.0:
                self.x = x
            layout = Layout.HORIZONTAL

        if layout.kind is LayoutKind.HORIZONTAL:
            self.max_row_y = max(self.max_row_y, size.y)
            if self.x + size.x >= self.area.w - self.margin * 2.0:
                # the extra 1 makes a following vertical widget start a new row
                self.x = self.margin + 1.0
                self.y += self.max_row_y + self.margin
                self.max_row_y = 0.0
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
        elif layout.kind is LayoutKind.VERTICAL:
            if self.x != self.margin:
                self.x = self.margin
                self.y += self.max_row_y
            res = Vec2(self.x, self.y)
            self.x += size.x + self.margin
            self.max_row_y = size.y + self.margin
        else:
            res = layout.point if layout.point is not None else Vec2()

        self.scroll.inner_rect = self.scroll.inner_rect.combine_with(
            Rect(res.x, res.y, size.x, size.y)
        )
        return res + self._origin()