import pytest

from netshell.shell.linebuffer import LineBuffer


def _filled(text):
    buffer = LineBuffer()
    for char in text:
        buffer.insert(char)
    return buffer


def test_new_buffer_is_empty():
    buffer = LineBuffer()
    assert buffer.text == ""
    assert buffer.cursor == 0
    assert buffer.at_start and buffer.at_end


def test_insert_appends_and_moves_cursor():
    buffer = _filled("abc")
    assert buffer.text == "abc"
    assert buffer.cursor == len("abc")
    assert buffer.at_end


def test_insert_in_middle():
    buffer = _filled("ac")
    buffer.move_left()
    buffer.insert("b")
    assert buffer.text == "abc"
    assert buffer.cursor == len("ab")


def test_insert_rejects_several_characters():
    with pytest.raises(ValueError):
        LineBuffer().insert("ab")


def test_erase_before():
    buffer = _filled("abc")
    buffer.erase_before()
    assert buffer.text == "ab"
    assert buffer.at_end


def test_erase_before_at_start_does_nothing():
    buffer = _filled("abc")
    buffer.move_home()
    buffer.erase_before()
    assert buffer.text == "abc"
    assert buffer.at_start


def test_erase_at():
    buffer = _filled("abc")
    buffer.move_home()
    buffer.erase_at()
    assert buffer.text == "bc"
    assert buffer.at_start


def test_erase_at_end_does_nothing():
    buffer = _filled("abc")
    buffer.erase_at()
    assert buffer.text == "abc"


def test_cursor_stays_within_bounds():
    buffer = _filled("ab")
    for _ in range(5):
        buffer.move_right()
    assert buffer.cursor == len("ab")
    for _ in range(5):
        buffer.move_left()
    assert buffer.cursor == 0


def test_home_and_end():
    buffer = _filled("hello")
    buffer.move_home()
    assert buffer.at_start and not buffer.at_end
    buffer.move_end()
    assert buffer.at_end and not buffer.at_start


def test_clear():
    buffer = _filled("hello")
    buffer.clear()
    assert buffer.text == ""
    assert buffer.cursor == 0