"""FNV-1a string hashing and hashed string keys."""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

FNV_OFFSET_32 = 2166136261
FNV_PRIME_32 = 16777619
FNV_OFFSET_64 = 14695981039346656037
FNV_PRIME_64 = 1099511628211

_MASK_32 = 0xFFFFFFFF

TextLike = Union[str, bytes, bytearray, memoryview]


def _to_bytes(text: TextLike) -> bytes:
    if isinstance(text, str):
        return text.encode("utf-8")
    return bytes(text)


def _ascii_lower(byte: int) -> int:
    return byte + 32 if 0x41 <= byte <= 0x5A else byte


def _fnv1a(data: bytes, transform: Callable[[int], int]) -> int:
    result = FNV_OFFSET_32
    for byte in data:
        byte = transform(byte)
        # Characters are signed, so high bytes are sign-extended before mixing.
        if byte >= 0x80:
            byte |= 0xFFFFFF00
        result = ((result ^ byte) * FNV_PRIME_32) & _MASK_32
    return result


def hash_string(text: TextLike) -> int:
    """32-bit FNV-1a hash of ``text`` (UTF-8 encoded if a str)."""
    return _fnv1a(_to_bytes(text), lambda b: b)


def hash_string_lower(text: TextLike) -> int:
    """32-bit FNV-1a hash of ``text`` with ASCII letters lowered."""
    return _fnv1a(_to_bytes(text), _ascii_lower)


class HashedString:
    """A string paired with its precomputed FNV-1a hash."""

    __slots__ = ("text", "hash")

    def __init__(self, text: str) -> None:
        self.text = text
        self.hash = hash_string(text)

    def __hash__(self) -> int:
        return self.hash

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HashedString):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __int__(self) -> int:
        return self.hash

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"HashedString({self.text!r})"