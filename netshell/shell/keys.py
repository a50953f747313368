"""Mapping of key sequences to line-editing actions."""


class KeyDispatcher:
    """Run the action bound to a key sequence on a line buffer."""

    def __init__(self):
        self._bindings = {}
        self._register_defaults()

    def _register_defaults(self):
        self._bindings["\x7f"] = lambda buf: buf.erase_before()  # backspace
        self._bindings["\x08"] = lambda buf: buf.erase_before()  # Ctrl+H
        self._bindings["\x1b[C"] = lambda buf: buf.move_right()
        self._bindings["\x1b[D"] = lambda buf: buf.move_left()
        self._bindings["\x1b[A"] = lambda buf: None  # up: no history yet
        self._bindings["\x1b[B"] = lambda buf: None  # down: no history yet
        self._bindings["\x1b[H"] = lambda buf: buf.move_home()
        self._bindings["\x1b[F"] = lambda buf: buf.move_end()

    def bind(self, sequence, action):
        """Bind ``action(buffer)`` to ``sequence``, replacing any binding."""
        self._bindings[sequence] = action

    def dispatch(self, sequence, buffer):
        """Run the action for ``sequence``; return whether one was bound."""
        action = self._bindings.get(sequence)
        if action is None:
            return False
        action(buffer)
        return True