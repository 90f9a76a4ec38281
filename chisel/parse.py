"""A small text cursor for parsing numbers and delimited tokens."""

from __future__ import annotations

import re
from typing import TypeVar

WHITESPACE_DELIMITERS = " \t"
NEWLINE_DELIMITERS = "\r\n"
WHITESPACE_OR_NEWLINE_DELIMITERS = " \t\r\n"

_INT = re.compile(r"-?\d+")
_FLOAT = re.compile(
    r"-?(?:(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?"
    r"|(?i:inf(?:inity)?|nan(?:\([0-9A-Za-z_]*\))?))"
)

T = TypeVar("T", int, float)


class ParseError(ValueError):
    """Raised when no value of the requested kind starts at the cursor."""


class TextCursor:
    """A position within a string that parsing functions advance."""

    def __init__(self, text: str, pos: int = 0) -> None:
        self.text = text
        self.pos = pos

    def __repr__(self) -> str:
        return f"TextCursor(pos={self.pos}, remaining={self.remaining!r})"

    @property
    def remaining(self) -> str:
        return self.text[self.pos:]

    def at_end(self) -> bool:
        """True at the end of the text or at a NUL character."""
        return self.pos >= len(self.text) or self.text[self.pos] == "\0"

    def _match(self, pattern: re.Pattern[str], kind: str) -> str:
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise ParseError(f"no {kind} at position {self.pos}")
        self.pos = match.end()
        return match.group()

    def parse_int(self) -> int:
        """Parse an integer (optional '-' then digits) and advance past it."""
        return int(self._match(_INT, "integer"))

    def parse_float(self) -> float:
        """Parse a decimal, inf or nan number and advance past it."""
        literal = self._match(_FLOAT, "number")
        if "nan" in literal.lower():
            return float("-nan" if literal.startswith("-") else "nan")
        return float(literal)

    def consume(self, delims: str) -> int:
        """Skip characters in ``delims``; return how many were skipped."""
        start = self.pos
        while not self.at_end() and char_matches(self.text[self.pos], delims):
            self.pos += 1
        return self.pos - start

    def consume_space(self) -> int:
        return self.consume(WHITESPACE_DELIMITERS)

    def consume_space_and_newline(self) -> int:
        return self.consume(WHITESPACE_OR_NEWLINE_DELIMITERS)

    def _scan_until(self, delims: str) -> str:
        start = self.pos
        while not self.at_end() and not char_matches(self.text[self.pos], delims):
            self.pos += 1
        return self.text[start:self.pos]

    def read_until(self, delims: str) -> str:
        """Read up to (not including) the next character in ``delims``."""
        return self._scan_until(delims)

    def advance_past(self, delims: str) -> int:
        """Skip to the next delimiter and over it; return the characters before it."""
        count = len(self._scan_until(delims))
        if not self.at_end():
            self.pos += 1
        return count


def parse_or_default(text: str, kind: type[T]) -> T:
    """Parse ``text`` as ``kind`` (int or float), or return ``kind()`` on failure."""
    cursor = TextCursor(text)
    try:
        if kind is int:
            return cursor.parse_int()
        if kind is float:
            return cursor.parse_float()
    except ParseError:
        return kind()
    raise TypeError(f"cannot parse values of type {kind.__name__}")


def char_matches(char: str, delims: str) -> bool:
    return any(char == delim for delim in delims)


def is_whitespace(char: str) -> bool:
    return char in (" ", "\t")


def is_newline(char: str) -> bool:
    return char in ("\r", "\n")


def is_string_token(text: str, index: int) -> bool:
    """True if the quote at ``index`` opens or closes a string (is not escaped)."""
    if text[index] != '"':
        return False
    if index <= 1:
        return True
    if text[index - 2] == "\\":
        return True
    if text[index - 1] == "\\":
        return False
    return True


def is_cpp_comment(text: str, index: int) -> bool:
    """True if a '//' comment starts at ``index``."""
    if text[index] != "/":
        return False
    if index + 1 >= len(text):
        return False
    return text[index + 1] == "/"


def is_potentially_number(char: str) -> bool:
    return char in ("+", "-", ".") or "0" <= char <= "9"