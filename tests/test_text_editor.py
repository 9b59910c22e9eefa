import pytest

from quadui.text_editor import DOUBLE_CLICK_TIME, ClickKind, EditboxState


def test_insert_character_and_undo_redo():
    state = EditboxState(cursor=1)
    edited = state.insert_character("ab", "x")
    assert len(edited) == 3
    assert edited[1] == "x"
    assert state.cursor == 2
    restored = state.undo(edited)
    assert restored == "ab"
    assert state.cursor == 1
    assert state.redo(restored) == edited
    assert state.cursor == 2


def test_insert_character_clears_selection():
    state = EditboxState(cursor=0, selection=(0, 2))
    state.insert_character("ab", "z")
    assert state.selection is None


def test_insert_string_and_undo():
    state = EditboxState(cursor=0)
    edited = state.insert_string("world", "hello ")
    assert edited.startswith("hello ")
    assert edited.endswith("world")
    assert state.cursor == len("hello ")
    assert state.undo(edited) == "world"
    assert state.cursor == 0


@pytest.mark.parametrize("selection", [(0, 6), (6, 0)])
def test_delete_selected(selection):
    text = "hello world"
    state = EditboxState(cursor=6, selection=selection)
    edited = state.delete_selected(text)
    assert edited == text[6:]
    assert state.cursor == 0
    assert state.selection is None
    assert state.undo(edited) == text


def test_delete_selected_out_of_range_raises():
    state = EditboxState(selection=(0, 10))
    with pytest.raises(ValueError):
        state.delete_selected("abc")


def test_delete_next_character_at_end_is_noop():
    state = EditboxState(cursor=3)
    assert state.delete_next_character("abc") == "abc"
    assert state.undo("abc") == "abc"


def test_delete_current_character_round_trip():
    state = EditboxState(cursor=3)
    edited = state.delete_current_character("abc")
    assert edited == "ab"
    assert state.cursor == 2
    assert state.undo(edited) == "abc"
    assert state.cursor == 3


def test_delete_current_character_at_start():
    state = EditboxState(cursor=0)
    assert state.delete_current_character("abc") == "abc"
    assert state.cursor == 0


def test_new_edit_clears_redo():
    state = EditboxState()
    edited = state.insert_character("", "a")
    undone = state.undo(edited)
    again = state.insert_character(undone, "b")
    assert state.redo(again) == again


def test_undo_on_empty_history():
    state = EditboxState(cursor=2)
    assert state.undo("abc") == "abc"
    assert state.cursor == 2


def test_find_line_begin_and_end():
    text = "ab\ncde\nf"
    state = EditboxState(cursor=5)
    assert state.cursor - state.find_line_begin(text) == text.index("\n") + 1
    assert state.cursor + state.find_line_end(text) == text.index("\n", 3)


def test_find_word_bounds():
    text = "foo bar(baz)"
    state = EditboxState()
    assert 6 - state.find_word_begin(text, 6) == text.index("b")
    assert state.find_word_end(text, 0) == text.index("b")


@pytest.mark.parametrize("character", list(' ();"'))
def test_word_delimiters(character):
    assert EditboxState.word_delimiter(character)


@pytest.mark.parametrize("character", ["a", "\n", "_"])
def test_non_delimiters(character):
    assert not EditboxState.word_delimiter(character)


def test_select_all_and_selected_text():
    text = "some text"
    state = EditboxState()
    assert state.selected_text(text) is None
    state.select_all(text)
    assert state.selection == (0, len(text))
    assert state.selected_text(text) == text
    assert state.click_state.kind is ClickKind.NONE


def test_selected_text_out_of_range_raises():
    state = EditboxState(selection=(1, 20))
    with pytest.raises(ValueError):
        state.selected_text("abc")


def test_clamp_selection():
    state = EditboxState(selection=(5, 20))
    state.clamp_selection("abc")
    assert state.selection == (3, 3)


@pytest.mark.parametrize("selection", [(2, 5), (5, 2)])
def test_in_selected_range(selection):
    state = EditboxState(selection=selection)
    assert state.in_selected_range(2)
    assert state.in_selected_range(4)
    assert not state.in_selected_range(5)
    assert not state.in_selected_range(1)


def test_in_selected_range_without_selection():
    assert not EditboxState().in_selected_range(0)


def test_move_cursor_bounds_and_shift():
    text = "abcdef"
    state = EditboxState(cursor=2)
    state.move_cursor(text, 100, False)
    assert state.cursor == 2
    state.move_cursor(text, -3, False)
    assert state.cursor == 2
    state.move_cursor(text, 1, True)
    assert state.selection == (2, 3)
    state.move_cursor(text, 1, True)
    assert state.selection == (2, 4)
    state.move_cursor(text, 1, False)
    assert state.selection is None


def test_move_cursor_within_line():
    text = "ab\ncd"
    state = EditboxState(cursor=0)
    state.move_cursor_within_line(text, 10, False)
    assert state.cursor == text.index("\n")
    with pytest.raises(ValueError):
        state.move_cursor_within_line(text, -1, False)


def test_move_by_words():
    text = "foo bar baz"
    state = EditboxState(cursor=0)
    state.move_cursor_next_word(text, False)
    assert state.cursor == text.index("bar")
    state.move_cursor_prev_word(text, False)
    assert state.cursor == 0


def test_select_line():
    text = "ab\ncde\nf"
    state = EditboxState(cursor=4)
    assert state.select_line(text) == (text.index("c"), text.index("\n", 3))


def test_click_drag_select_and_release():
    text = "hello world"
    state = EditboxState()
    state.click_down(0.0, text, 2)
    assert state.selection == (2, 2)
    assert state.click_state.kind is ClickKind.SELECTING_CHARS
    state.click_move(text, 7)
    assert state.selection == (2, 7)
    assert state.cursor == 7
    state.click_up(text)
    assert state.click_state.kind is ClickKind.SELECTED
    assert state.selected_text(text) == text[2:7]


def test_click_without_drag_drops_selection():
    text = "hello"
    state = EditboxState()
    state.click_down(0.0, text, 3)
    state.click_up(text)
    assert state.selection is None
    assert state.click_state.kind is ClickKind.NONE


def test_multi_click_cycle():
    text = "foo bar baz"
    state = EditboxState()
    state.click_down(0.0, text, 5)
    state.click_move(text, 5)
    state.click_down(0.1, text, 5)
    assert state.selection == (text.index("bar"), text.index("baz"))
    assert state.click_state.kind is ClickKind.SELECTING_WORDS
    state.click_down(0.2, text, 5)
    assert state.selection == (0, len(text))
    assert state.click_state.kind is ClickKind.SELECTING_LINES
    state.click_down(0.3, text, 5)
    assert state.selection is None
    assert state.click_state.kind is ClickKind.NONE


def test_slow_second_click_is_not_double():
    text = "foo bar baz"
    state = EditboxState()
    state.click_down(0.0, text, 5)
    state.click_move(text, 5)
    state.click_up(text)
    state.click_down(DOUBLE_CLICK_TIME * 2, text, 5)
    assert state.clicks_counter == 0
    assert state.selection == (5, 5)


def test_deselect():
    state = EditboxState(selection=(0, 3))
    state.deselect()
    assert state.selection is None
    assert state.click_state.kind is ClickKind.NONE