"""Element state and the draw commands a painter emits for the rasterizer."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Union

from quadui.geometry import Color, Rect, RectOffset, Vec2

_DEFAULT_BUDGET = (10, 10)
_NO_BUDGET = (0, 0)


@dataclass(frozen=True)
class ElementState:
    """Interaction state of a widget, used to pick its colours and sprites."""

    focused: bool = False
    hovered: bool = False
    clicked: bool = False
    selected: bool = False


@dataclass(frozen=True)
class DrawCharacter:
    """A glyph quad taken from the font atlas."""

    dest: Rect
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawCharacter:
        return replace(self, dest=self.dest.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _DEFAULT_BUDGET


@dataclass(frozen=True)
class DrawRect:
    """A rectangle with an optional fill and an optional outline."""

    rect: Rect
    source: Rect
    fill: Color | None = None
    stroke: Color | None = None

    def offset(self, offset: Vec2) -> DrawRect:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _DEFAULT_BUDGET


@dataclass(frozen=True)
class DrawSprite:
    """A nine-patch sprite from the atlas; margins are kept unscaled."""

    rect: Rect
    source: Rect
    color: Color
    offsets: RectOffset | None = None
    offsets_uv: RectOffset | None = None

    def offset(self, offset: Vec2) -> DrawSprite:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _NO_BUDGET


@dataclass(frozen=True)
class DrawTriangle:
    """A filled triangle."""

    p0: Vec2
    p1: Vec2
    p2: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawTriangle:
        return replace(
            self, p0=self.p0 + offset, p1=self.p1 + offset, p2=self.p2 + offset
        )

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _DEFAULT_BUDGET


@dataclass(frozen=True)
class DrawLine:
    """A one pixel wide line segment."""

    start: Vec2
    end: Vec2
    source: Rect
    color: Color

    def offset(self, offset: Vec2) -> DrawLine:
        return replace(self, start=self.start + offset, end=self.end + offset)

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _DEFAULT_BUDGET


@dataclass(frozen=True)
class DrawRawTexture:
    """A whole texture stretched over a rectangle."""

    rect: Rect
    texture: Any

    def offset(self, offset: Vec2) -> DrawRawTexture:
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _DEFAULT_BUDGET


@dataclass(frozen=True)
class Clip:
    """Restrict following drawing to a rectangle, or lift the restriction."""

    rect: Rect | None = None

    def offset(self, offset: Vec2) -> Clip:
        if self.rect is None:
            return self
        return replace(self, rect=self.rect.offset(offset))

    def estimate_triangles_budget(self) -> tuple[int, int]:
        """Vertices and indices this command may need."""
        return _NO_BUDGET


DrawCommand = Union[
    DrawCharacter, DrawRect, DrawSprite, DrawTriangle, DrawLine, DrawRawTexture, Clip
]


class Alignment(Enum):
    LEFT = "left"
    CENTER = "center"


_BLACK = Color(0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class LabelParams:
    """Colour and alignment of a text label."""

    color: Color = _BLACK
    alignment: Alignment = Alignment.LEFT

    @classmethod
    def from_color(
        cls, color: Color | tuple[Color, Alignment] | LabelParams | None
    ) -> LabelParams:
        """Build parameters from a colour, a (colour, alignment) pair or None."""
        if isinstance(color, LabelParams):
            return color
        if color is None:
            return cls()
        if isinstance(color, tuple):
            tint, alignment = color
            return cls(tint, alignment)
        return cls(color=color)