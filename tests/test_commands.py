import pytest

from quadui.commands import (
    Alignment,
    Clip,
    DrawCharacter,
    DrawLine,
    DrawRawTexture,
    DrawRect,
    DrawSprite,
    DrawTriangle,
    ElementState,
    LabelParams,
)
from quadui.geometry import Color, Rect, RectOffset, Vec2

RED = Color(1.0, 0.0, 0.0, 1.0)
SRC = Rect(0.0, 0.0, 1.0, 1.0)
R = Rect(1.0, 2.0, 3.0, 4.0)
OFF = Vec2(10.0, 20.0)


def test_element_state_defaults_all_false():
    state = ElementState()
    assert (state.focused, state.hovered, state.clicked, state.selected) == (
        False,
        False,
        False,
        False,
    )


def test_element_state_equality():
    assert ElementState(focused=True) == ElementState(True, False, False, False)
    assert ElementState(hovered=True) != ElementState(clicked=True)


@pytest.mark.parametrize(
    "command",
    [
        DrawCharacter(R, SRC, RED),
        DrawRect(R, SRC, fill=RED),
        DrawLine(Vec2(1, 1), Vec2(2, 2), SRC, RED),
        DrawTriangle(Vec2(0, 0), Vec2(1, 0), Vec2(0, 1), SRC, RED),
        DrawRawTexture(R, "texture"),
    ],
)
def test_budget_of_geometry_commands(command):
    assert command.estimate_triangles_budget() == (10, 10)


@pytest.mark.parametrize(
    "command",
    [DrawSprite(R, SRC, RED), Clip(R), Clip(None)],
)
def test_budget_of_sprite_and_clip(command):
    assert command.estimate_triangles_budget() == (0, 0)


def test_character_offset_moves_dest_only():
    cmd = DrawCharacter(R, SRC, RED)
    moved = cmd.offset(OFF)
    assert moved.dest == R.offset(OFF)
    assert moved.source == SRC
    assert moved.color == RED
    assert cmd.dest == R


def test_rect_offset_keeps_colors():
    cmd = DrawRect(R, SRC, fill=RED, stroke=None)
    moved = cmd.offset(OFF)
    assert moved.rect == R.offset(OFF)
    assert moved.fill == RED
    assert moved.stroke is None


def test_sprite_offset_keeps_margins():
    margin = RectOffset(1.0, 1.0, 1.0, 1.0)
    cmd = DrawSprite(R, SRC, RED, margin, margin)
    moved = cmd.offset(OFF)
    assert moved.rect == R.offset(OFF)
    assert moved.offsets == margin
    assert moved.offsets_uv == margin


def test_line_offset_moves_both_ends():
    start, end = Vec2(1.0, 1.0), Vec2(5.0, 3.0)
    moved = DrawLine(start, end, SRC, RED).offset(OFF)
    assert moved.start == start + OFF
    assert moved.end == end + OFF
    assert moved.end - moved.start == end - start


def test_triangle_offset_moves_all_points():
    p0, p1, p2 = Vec2(0, 0), Vec2(4, 0), Vec2(0, 3)
    moved = DrawTriangle(p0, p1, p2, SRC, RED).offset(OFF)
    assert (moved.p0, moved.p1, moved.p2) == (p0 + OFF, p1 + OFF, p2 + OFF)


def test_raw_texture_offset_keeps_texture():
    texture = object()
    moved = DrawRawTexture(R, texture).offset(OFF)
    assert moved.rect == R.offset(OFF)
    assert moved.texture is texture


def test_clip_offset():
    assert Clip(R).offset(OFF).rect == R.offset(OFF)
    assert Clip(None).offset(OFF).rect is None


def test_offset_round_trip():
    cmd = DrawRect(R, SRC, stroke=RED)
    assert cmd.offset(OFF).offset(-OFF) == cmd


def test_label_params_defaults():
    params = LabelParams()
    assert params.color == Color(0.0, 0.0, 0.0, 1.0)
    assert params.alignment is Alignment.LEFT


def test_label_params_from_none_is_default():
    assert LabelParams.from_color(None) == LabelParams()


def test_label_params_from_color():
    params = LabelParams.from_color(RED)
    assert params.color == RED
    assert params.alignment is Alignment.LEFT


def test_label_params_from_pair():
    params = LabelParams.from_color((RED, Alignment.CENTER))
    assert params == LabelParams(RED, Alignment.CENTER)


def test_label_params_from_params_is_same():
    params = LabelParams(RED, Alignment.CENTER)
    assert LabelParams.from_color(params) is params