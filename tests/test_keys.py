import pytest

from netshell.shell.keys import KeyDispatcher
from netshell.shell.linebuffer import LineBuffer


def _filled(text):
    buffer = LineBuffer()
    for char in text:
        buffer.insert(char)
    return buffer


@pytest.mark.parametrize("sequence", ["\x7f", "\x08"])
def test_backspace_keys_erase(sequence):
    buffer = _filled("abc")
    assert KeyDispatcher().dispatch(sequence, buffer) is True
    assert buffer.text == "ab"


def test_arrows_move_cursor():
    buffer = _filled("abc")
    dispatcher = KeyDispatcher()
    dispatcher.dispatch("\x1b[D", buffer)
    assert buffer.cursor == len("ab")
    dispatcher.dispatch("\x1b[C", buffer)
    assert buffer.at_end


def test_home_and_end_keys():
    buffer = _filled("abc")
    dispatcher = KeyDispatcher()
    dispatcher.dispatch("\x1b[H", buffer)
    assert buffer.at_start
    dispatcher.dispatch("\x1b[F", buffer)
    assert buffer.at_end


@pytest.mark.parametrize("sequence", ["\x1b[A", "\x1b[B"])
def test_history_keys_are_bound_but_do_nothing(sequence):
    buffer = _filled("abc")
    assert KeyDispatcher().dispatch(sequence, buffer) is True
    assert buffer.text == "abc"
    assert buffer.at_end


def test_unbound_sequence_returns_false():
    buffer = _filled("abc")
    assert KeyDispatcher().dispatch("x", buffer) is False
    assert buffer.text == "abc"


def test_bind_overrides_default():
    buffer = _filled("abc")
    dispatcher = KeyDispatcher()
    dispatcher.bind("\x7f", lambda buf: buf.clear())
    assert dispatcher.dispatch("\x7f", buffer) is True
    assert buffer.text == ""


def test_bind_new_sequence():
    buffer = LineBuffer()
    dispatcher = KeyDispatcher()
    dispatcher.bind("\x15", lambda buf: buf.insert("!"))
    assert dispatcher.dispatch("\x15", buffer) is True
    assert buffer.text == "!"