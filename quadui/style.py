"""Widget styles: colours, fonts and background sprites per interaction state."""

from __future__ import annotations

import copy
import math
import struct
from dataclasses import dataclass, field
from typing import Any

from quadui.commands import ElementState
from quadui.geometry import Color, RectOffset

_BLACK = Color.from_rgba(0, 0, 0, 255)
_WHITE = Color.from_rgba(255, 255, 255, 255)

_WINDOW_BACKGROUND_BYTES = bytes(
    [
        68, 68, 68, 255, 68, 68, 68, 255, 68, 68, 68, 255,
        68, 68, 68, 255, 238, 238, 238, 255, 68, 68, 68, 255,
        68, 68, 68, 255, 68, 68, 68, 255, 68, 68, 68, 255,
    ]
)


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _to_u8(value: float) -> int:
    """Convert like a saturating float-to-byte cast: truncate and clamp."""
    if math.isnan(value) or value <= 0:
        return 0
    if value >= 255:
        return 255
    return int(value)


@dataclass(frozen=True)
class Image:
    """An RGBA8 image: ``width * height * 4`` bytes."""

    width: int
    height: int
    bytes: bytes


class SpriteAtlas:
    """Holds sprites under unique ids."""

    def __init__(self) -> None:
        self._sprites: dict[int, Image] = {}
        self._next_id = 1

    def new_unique_id(self) -> int:
        """Return an id not handed out before."""
        sprite_id = self._next_id
        self._next_id += 1
        return sprite_id

    def cache_sprite(self, sprite_id: int, image: Image) -> None:
        """Store ``image`` under ``sprite_id``, replacing any earlier one."""
        self._sprites[sprite_id] = image

    def get(self, sprite_id: int) -> Image | None:
        return self._sprites.get(sprite_id)


@dataclass
class Style:
    """Look of one kind of widget.

    ``background_margin`` is the unscaled border part of the background
    sprites; ``margin`` is extra space around the content and may be negative.
    """

    font: Any
    background: int | None = None
    background_hovered: int | None = None
    background_clicked: int | None = None
    color: Color = _WHITE
    color_inactive: Color | None = None
    color_hovered: Color = _WHITE
    color_clicked: Color = _WHITE
    color_selected: Color = _WHITE
    color_selected_hovered: Color = _WHITE
    background_margin: RectOffset | None = None
    margin: RectOffset | None = None
    text_color: Color = _BLACK
    font_size: int = 16
    reverse_background_z: bool = False

    def border_margin(self) -> RectOffset:
        """Background margin and content margin added together."""
        bg = self.background_margin or RectOffset()
        own = self.margin or RectOffset()
        return RectOffset(
            left=bg.left + own.left,
            right=bg.right + own.right,
            top=bg.top + own.top,
            bottom=bg.bottom + own.bottom,
        )

    def element_text_color(self, element_state: ElementState) -> Color:
        """Text colour; dimmed when the widget's window is not focused."""
        if element_state.focused:
            return self.text_color
        tc = self.text_color
        return Color(tc.r * 0.6, tc.g * 0.6, tc.b * 0.6, tc.a * 0.6)

    def element_color(self, element_state: ElementState) -> Color:
        """Fill colour for the given interaction state."""
        if not element_state.focused:
            if self.color_inactive is not None:
                return self.color_inactive
            c = self.color
            return Color.from_rgba(
                _to_u8(_f32(_f32(c.r) * 255.0)),
                _to_u8(_f32(_f32(c.g) * 255.0)),
                _to_u8(_f32(_f32(c.b) * 255.0)),
                _to_u8(_f32(_f32(_f32(c.a) * 255.0) * 0.8)),
            )
        if element_state.clicked:
            return self.color_clicked
        if element_state.selected and element_state.hovered:
            return self.color_selected_hovered
        if element_state.selected:
            return self.color_selected
        if element_state.hovered:
            return self.color_hovered
        return self.color

    def background_sprite(self, element_state: ElementState) -> int | None:
        """Sprite id of the background for the given state, if any."""
        if element_state.clicked and self.background_clicked is not None:
            return self.background_clicked
        if element_state.hovered and self.background_hovered is not None:
            return self.background_hovered
        return self.background


class StyleBuilder:
    """Builds a Style; every setter returns a new builder."""

    def __init__(self, atlas: SpriteAtlas, font: Any) -> None:
        self._atlas = atlas
        self._font = font
        self._font_size = 16
        self._text_color = _BLACK
        self._background_margin: RectOffset | None = None
        self._margin: RectOffset | None = None
        self._background: Image | None = None
        self._background_hovered: Image | None = None
        self._background_clicked: Image | None = None
        self._color = _WHITE
        self._color_inactive: Color | None = None
        self._color_hovered = _WHITE
        self._color_selected = _WHITE
        self._color_selected_hovered = _WHITE
        self._color_clicked = _WHITE
        self._reverse_background_z = False

    def _with(self, **changes: Any) -> StyleBuilder:
        builder = copy.copy(self)
        for name, value in changes.items():
            setattr(builder, f"_{name}", value)
        return builder

    def background(self, background: Image) -> StyleBuilder:
        return self._with(background=background)

    def margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(margin=margin)

    def background_margin(self, margin: RectOffset) -> StyleBuilder:
        return self._with(background_margin=margin)

    def background_hovered(self, background_hovered: Image) -> StyleBuilder:
        return self._with(background_hovered=background_hovered)

    def background_clicked(self, background_clicked: Image) -> StyleBuilder:
        return self._with(background_clicked=background_clicked)

    def text_color(self, color: Color) -> StyleBuilder:
        return self._with(text_color=color)

    def font_size(self, font_size: int) -> StyleBuilder:
        return self._with(font_size=font_size)

    def color(self, color: Color) -> StyleBuilder:
        return self._with(color=color)

    def color_hovered(self, color_hovered: Color) -> StyleBuilder:
        return self._with(color_hovered=color_hovered)

    def color_clicked(self, color_clicked: Color) -> StyleBuilder:
        return self._with(color_clicked=color_clicked)

    def color_selected(self, color_selected: Color) -> StyleBuilder:
        return self._with(color_selected=color_selected)

    def color_selected_hovered(self, color_selected_hovered: Color) -> StyleBuilder:
        return self._with(color_selected_hovered=color_selected_hovered)

    def color_inactive(self, color_inactive: Color) -> StyleBuilder:
        return self._with(color_inactive=color_inactive)

    def reverse_background_z(self, reverse_background_z: bool) -> StyleBuilder:
        return self._with(reverse_background_z=reverse_background_z)

    def _cache(self, image: Image | None) -> int | None:
        if image is None:
            return None
        sprite_id = self._atlas.new_unique_id()
        self._atlas.cache_sprite(sprite_id, image)
        return sprite_id

    def build(self) -> Style:
        """Store the background images in the atlas and return the style."""
        return Style(
            font=self._font,
            background=self._cache(self._background),
            background_hovered=self._cache(self._background_hovered),
            background_clicked=self._cache(self._background_clicked),
            color=self._color,
            color_inactive=self._color_inactive,
            color_hovered=self._color_hovered,
            color_clicked=self._color_clicked,
            color_selected=self._color_selected,
            color_selected_hovered=self._color_selected_hovered,
            background_margin=self._background_margin,
            margin=self._margin,
            text_color=self._text_color,
            font_size=self._font_size,
            reverse_background_z=self._reverse_background_z,
        )


@dataclass
class Skin:
    """The styles of every widget kind, plus shared metrics."""

    label_style: Style
    button_style: Style
    tabbar_style: Style
    combobox_style: Style
    window_style: Style
    editbox_style: Style
    window_titlebar_style: Style
    scrollbar_style: Style
    scrollbar_handle_style: Style
    checkbox_style: Style
    group_style: Style
    margin: float = 2.0
    title_height: float = 14.0
    scroll_width: float = 10.0
    scroll_multiplier: float = 3.0
    _extra: dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, atlas: SpriteAtlas, font: Any, combobox_background: Image) -> Skin:
        """The default skin; ``combobox_background`` is the combo box sprite."""
        rgba = Color.from_rgba
        two = RectOffset(2.0, 2.0, 2.0, 2.0)
        return cls(
            label_style=Style(
                font=font,
                margin=two,
                text_color=rgba(0, 0, 0, 255),
                color_inactive=rgba(0, 0, 0, 128),
            ),
            button_style=Style(
                font=font,
                margin=two,
                color=rgba(204, 204, 204, 235),
                color_clicked=rgba(187, 187, 187, 255),
                color_hovered=rgba(170, 170, 170, 235),
                text_color=rgba(0, 0, 0, 255),
            ),
            combobox_style=StyleBuilder(atlas, font)
            .background_margin(RectOffset(1.0, 14.0, 1.0, 1.0))
            .color_inactive(rgba(238, 238, 238, 128))
            .text_color(rgba(0, 0, 0, 255))
            .color(rgba(220, 220, 220, 255))
            .background(combobox_background)
            .build(),
            tabbar_style=Style(
                font=font,
                margin=two,
                color=rgba(220, 220, 220, 235),
                color_clicked=rgba(187, 187, 187, 235),
                color_hovered=rgba(170, 170, 170, 235),
                color_selected_hovered=rgba(180, 180, 180, 235),
                color_selected=rgba(204, 204, 204, 235),
                text_color=rgba(0, 0, 0, 255),
            ),
            window_style=StyleBuilder(atlas, font)
            .background_margin(RectOffset(1.0, 1.0, 1.0, 1.0))
            .color_inactive(rgba(238, 238, 238, 128))
            .text_color(rgba(0, 0, 0, 255))
            .background(Image(3, 3, _WINDOW_BACKGROUND_BYTES))
            .build(),
            window_titlebar_style=Style(
                font=font,
                color=rgba(68, 68, 68, 255),
                color_inactive=rgba(102, 102, 102, 127),
                text_color=rgba(0, 0, 0, 255),
            ),
            scrollbar_style=Style(font=font, color=rgba(68, 68, 68, 255)),
            editbox_style=Style(
                font=font,
                text_color=rgba(0, 0, 0, 255),
                color_selected=rgba(200, 200, 200, 255),
            ),
            scrollbar_handle_style=Style(
                font=font,
                color=rgba(204, 204, 204, 235),
                color_inactive=rgba(204, 204, 204, 128),
                color_hovered=rgba(180, 180, 180, 235),
                color_clicked=rgba(170, 170, 170, 235),
            ),
            checkbox_style=Style(
                font=font,
                text_color=rgba(0, 0, 0, 255),
                font_size=16,
                color=rgba(200, 200, 200, 255),
                color_hovered=rgba(210, 210, 210, 255),
                color_clicked=rgba(150, 150, 150, 255),
                color_selected=rgba(128, 128, 128, 255),
                color_selected_hovered=rgba(140, 140, 140, 255),
            ),
            group_style=Style(
                font=font,
                color=rgba(34, 34, 34, 68),
                color_hovered=rgba(34, 153, 34, 68),
                color_selected=rgba(34, 34, 255, 255),
                color_selected_hovered=rgba(55, 55, 55, 68),
            ),
        )