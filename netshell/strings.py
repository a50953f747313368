"""String helpers and terminal colour codes."""

import re

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
MAGENTA = "\033[35m"
CYAN = "\033[96m"

SHORT_MIN = -32768
SHORT_MAX = 32767
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_INTEGER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def clean_string(text):
    """Drop leading whitespace and a trailing carriage return from the first line."""
    stripped = text.lstrip(_WHITESPACE)
    if not stripped:
        return ""
    end = next(
        (index for index, char in enumerate(stripped) if char in _WHITESPACE),
        len(stripped),
    )
    word = stripped[:end]
    remaining = stripped[end:].split("\n", 1)[0]
    if remaining.endswith("\r"):
        remaining = remaining[:-1]
    return word + remaining


def split_words(text):
    """Split on runs of whitespace."""
    return text.split()


def split_quoted(text):
    """Split on spaces, keeping double-quoted sections together."""
    in_quotes = False
    current = []
    result = []
    for char in text:
        if char == '"':
            if in_quotes:
                result.append("".join(current))
            current.clear()
            in_quotes = not in_quotes
            continue
        if not in_quotes and char == " ":
            if current:
                result.append("".join(current))
                current.clear()
            continue
        current.append(char)
    if current:
        result.append("".join(current))
    return result


def split(text, delim):
    """Split on a delimiter after dropping leading delimiters.

    A single trailing empty field is not reported.
    """
    trimmed = text.lstrip(delim)
    if not trimmed:
        return []
    parts = trimmed.split(delim)
    if trimmed.endswith(delim):
        parts.pop()
    return parts


def spaces(size):
    """Return a string of ``size`` spaces."""
    return " " * size


def fill_chars(size, character):
    """Return ``character`` repeated ``size`` times."""
    return character * size


def begin_spaces_count(text):
    """Count leading spaces, never counting the last character."""
    leading = len(text) - len(text.lstrip(" "))
    return min(leading, max(len(text) - 1, 0))


def stos(text):
    """Parse a leading integer that must fit in a signed 16-bit value."""
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    number = int(match.group(1))
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{text} is out of range of int")
    if not SHORT_MIN <= number <= SHORT_MAX:
        raise OverflowError(f"{text} is out of range of short")
    return number


def to_lower(value):
    """Lower-case ASCII letters only."""
    return value.translate(_ASCII_LOWER)


def join_words(words, join):
    """Join words with a separator; at least one word is required."""
    words = list(words)
    if not words:
        raise ValueError("cannot join an empty list of words")
    return join.join(words)


def contains(text, char):
    """Tell whether ``char`` occurs in ``text``."""
    return char in text