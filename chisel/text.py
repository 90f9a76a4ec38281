"""String helpers: case conversion, trimming, splitting and replacement."""

from __future__ import annotations

import re

_DEFAULT_TRIM = " \n\r"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_ASCII_UPPER = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz", "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def to_lower(text: str) -> str:
    """Return a copy of ``text`` with ASCII letters lowered."""
    return text.translate(_ASCII_LOWER)


def to_upper(text: str) -> str:
    """Return a copy of ``text`` with ASCII letters raised."""
    return text.translate(_ASCII_UPPER)


def trim_start(text: str, chars: str = _DEFAULT_TRIM) -> str:
    """Remove any of ``chars`` from the start of ``text``."""
    return text.lstrip(chars)


def trim_end(text: str, chars: str = _DEFAULT_TRIM) -> str:
    """Remove any of ``chars`` from the end of ``text``.

    A string made only of ``chars`` is returned unchanged.
    """
    stripped = text.rstrip(chars)
    return stripped if stripped else text


def trim(text: str, chars: str = _DEFAULT_TRIM) -> str:
    """Remove any of ``chars`` from both ends of ``text``."""
    return trim_end(trim_start(text, chars), chars)


def split(text: str, delims: str = " ") -> list[str]:
    """Split ``text`` at any of the characters in ``delims``, dropping empty tokens."""
    if not delims:
        return [text] if text else []
    pattern = "[" + re.escape(delims) + "]"
    return [token for token in re.split(pattern, text) if token]


def split_lines(text: str) -> list[str]:
    """Split ``text`` at line breaks, dropping empty lines."""
    return split(text, "\r\n")


def sprintf(fmt: str, *args: object) -> str:
    """Format ``args`` with a printf-style format string."""
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise ValueError(f"Failed to format message with format: '{fmt}'") from exc


def replace(text: str, pattern: str, replacement: str) -> str:
    """Replace every occurrence of ``pattern``, scanning left to right."""
    if not pattern:
        raise ValueError("replace pattern must not be empty")
    return text.replace(pattern, replacement)