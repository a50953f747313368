"""An editable line of text with a cursor."""


class LineBuffer:
    """Text being edited and the cursor position within it."""

    def __init__(self):
        self._text = ""
        self._cursor = 0

    def insert(self, char):
        """Insert one character at the cursor and move past it."""
        if len(char) != 1:
            raise ValueError("insert takes exactly one character")
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += 1

    def erase_before(self):
        """Delete the character before the cursor, if any."""
        if self._cursor == 0:
            return
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1

    def erase_at(self):
        """Delete the character under the cursor, if any."""
        if self._cursor == len(self._text):
            return
        self._text = self._text[: self._cursor] + self._text[self._cursor + 1 :]

    def move_left(self):
        """Move the cursor one character left."""
        if self._cursor > 0:
            self._cursor -= 1

    def move_right(self):
        """Move the cursor one character right."""
        if self._cursor < len(self._text):
            self._cursor += 1

    def move_home(self):
        """Move the cursor to the start of the line."""
        self._cursor = 0

    def move_end(self):
        """Move the cursor to the end of the line."""
        self._cursor = len(self._text)

    def clear(self):
        """Empty the line and reset the cursor."""
        self._text = ""
        self._cursor = 0

    @property
    def text(self):
        """The current text."""
        return self._text

    @property
    def cursor(self):
        """The cursor position."""
        return self._cursor

    @property
    def at_start(self):
        """Whether the cursor is at the start of the line."""
        return self._cursor == 0

    @property
    def at_end(self):
        """Whether the cursor is at the end of the line."""
        return self._cursor == len(self._text)