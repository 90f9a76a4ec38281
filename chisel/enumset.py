"""Sets of enum flags: index-based EnumSet and bitmask-based Flags."""

from __future__ import annotations

import operator
from enum import Enum
from functools import reduce
from typing import Any, Callable


def _flag_index(flag: Any) -> int:
    if isinstance(flag, Enum):
        flag = flag.value
    return operator.index(flag)


class EnumSet:
    """A fixed-size bit set indexed by the members of a 0..N enum."""

    __slots__ = ("_size", "_bits")

    def __init__(self, size: Any, *args: Any) -> None:
        self._size = _flag_index(size)
        if self._size < 0:
            raise ValueError("EnumSet size must not be negative")
        self._bits = 0
        self.set(*args)

    @property
    def size(self) -> int:
        return self._size

    def _bit(self, flag: Any) -> int:
        index = _flag_index(flag)
        if not 0 <= index < self._size:
            raise IndexError(f"flag {flag!r} is out of range for an EnumSet of size {self._size}")
        return 1 << index

    def set(self, *args: Any) -> EnumSet:
        for flag in args:
            self._bits |= self._bit(flag)
        return self

    def clear(self, *args: Any) -> EnumSet:
        """Clear the given flags, or every flag when none are given."""
        if not args:
            self._bits = 0
        for flag in args:
            self._bits &= ~self._bit(flag)
        return self

    def reset(self) -> EnumSet:
        return self.clear()

    def empty(self) -> bool:
        return self._bits == 0

    def has(self, *args: Any) -> bool:
        return self.any(*args)

    def any(self, *args: Any) -> bool:
        return any(self._bits & self._bit(flag) for flag in args)

    def all(self, *args: Any) -> bool:
        return all(self._bits & self._bit(flag) for flag in args)

    def _combine(self, other: object, op: Callable[[int, int], int]) -> EnumSet:
        if not isinstance(other, EnumSet):
            return NotImplemented
        if other._size != self._size:
            raise ValueError("cannot combine EnumSets of different sizes")
        result = EnumSet(self._size)
        result._bits = op(self._bits, other._bits)
        return result

    def __and__(self, other: object) -> EnumSet:
        return self._combine(other, operator.and_)

    def __or__(self, other: object) -> EnumSet:
        return self._combine(other, operator.or_)

    def __xor__(self, other: object) -> EnumSet:
        return self._combine(other, operator.xor)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumSet):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    def __int__(self) -> int:
        return self._bits

    def __getitem__(self, flag: Any) -> bool:
        return bool(self._bits & self._bit(flag))

    def __setitem__(self, flag: Any, value: bool) -> None:
        if value:
            self.set(flag)
        else:
            self.clear(flag)

    def __repr__(self) -> str:
        return f"EnumSet(size={self._size}, bits={self._bits:#x})"


def _flag_value(flag: Any) -> int:
    if isinstance(flag, Flags):
        return flag.value
    if isinstance(flag, Enum):
        flag = flag.value
    return operator.index(flag)


def _union(flags: tuple[Any, ...]) -> int:
    return reduce(operator.or_, map(_flag_value, flags), 0)


class Flags:
    """A bitmask built from bit-flag enum members or integers."""

    __slots__ = ("value",)

    def __init__(self, *args: Any) -> None:
        self.value = _union(args)

    def set(self, *args: Any) -> Flags:
        self.value |= _union(args)
        return self

    def clear(self, *args: Any) -> Flags:
        """Clear the given flags, or every flag when none are given."""
        if not args:
            self.value = 0
        else:
            self.value &= ~_union(args)
        return self

    def empty(self) -> bool:
        return self.value == 0

    def has(self, *args: Any) -> bool:
        return self.any(*args)

    def any(self, *args: Any) -> bool:
        return (self.value & _union(args)) != 0

    def all(self, *args: Any) -> bool:
        mask = _union(args)
        return (self.value & mask) == mask

    def __and__(self, other: Any) -> Flags:
        return Flags(self.value & _flag_value(other))

    def __or__(self, other: Any) -> Flags:
        return Flags(self.value | _flag_value(other))

    def __xor__(self, other: Any) -> Flags:
        return Flags(self.value ^ _flag_value(other))

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def __eq__(self, other: object) -> bool:
        try:
            return self.value == _flag_value(other)
        except TypeError:
            return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __getitem__(self, flag: Any) -> bool:
        return (self.value & _flag_value(flag)) != 0

    def __repr__(self) -> str:
        return f"Flags({self.value:#x})"