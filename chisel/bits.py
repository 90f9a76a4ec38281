"""Bit manipulation helpers: alignment, bit counting, packing and bit sets."""

from __future__ import annotations

from collections.abc import Iterator

_DWORD_BITS = 32
_DWORD_MASK = 0xFFFFFFFF


def align(value: int, to: int) -> int:
    """Round ``value`` up to a multiple of ``to``, which must be a power of two."""
    return (value + to - 1) & ~(to - 1)


def align_down(value: int, to: int) -> int:
    """Round ``value`` down to a multiple of ``to``."""
    return (value // to) * to


def extract(value: int, first: int, last: int) -> int:
    """Return the bits ``first`` through ``last`` (inclusive) of ``value``."""
    return (value >> first) & ((1 << (last - first + 1)) - 1)


def popcnt(n: int) -> int:
    """Number of set bits in the low 32 bits of ``n``."""
    return bin(n & _DWORD_MASK).count("1")


def tzcnt(n: int, width: int = 32) -> int:
    """Count trailing zero bits of a ``width``-bit value; ``width`` for zero."""
    n &= (1 << width) - 1
    if not n:
        return width
    return (n & -n).bit_length() - 1


def lzcnt(n: int) -> int:
    """Count leading zero bits of a 32-bit value; 32 for zero."""
    return _DWORD_BITS - (n & _DWORD_MASK).bit_length()


def iter_bits(mask: int) -> Iterator[int]:
    """Yield the indices of the set bits of a 32-bit mask, lowest first."""
    mask &= _DWORD_MASK
    while mask:
        yield tzcnt(mask)
        mask &= mask - 1


class BitPacker:
    """Packs successive fields into an integer of a fixed bit width."""

    def __init__(self, bits: int = 32) -> None:
        self.bits = bits
        self.value = 0
        self.shift = 0

    def pack(self, value: int, count: int) -> int:
        """Append a ``count``-bit field; return how many bits spilled past the width."""
        if self.shift < self.bits:
            self.value = (self.value | (value << self.shift)) & ((1 << self.bits) - 1)
        self.shift += count
        return max(self.shift - self.bits, 0)


class BitUnpacker:
    """Reads successive fields out of an integer of a fixed bit width."""

    def __init__(self, value: int, bits: int = 32) -> None:
        self.value = value & ((1 << bits) - 1)
        self.bits = bits
        self.shift = 0

    def unpack(self, count: int) -> int:
        """Read the next ``count``-bit field; zero once the width is exhausted."""
        result = 0
        if self.shift < self.bits:
            result = (self.value >> self.shift) & ((1 << count) - 1)
        self.shift += count
        return result

    @property
    def overflow(self) -> int:
        """How many bits have been requested past the width."""
        return max(self.shift - self.bits, 0)


def _locate(dwords: list[int], index: int) -> tuple[int, int]:
    if index < 0:
        raise IndexError(f"bit index {index} is negative")
    dword, bit = divmod(index, _DWORD_BITS)
    if dword >= len(dwords):
        raise IndexError(f"bit index {index} is out of range")
    return dword, bit


def _get(dwords: list[int], index: int) -> bool:
    dword, bit = _locate(dwords, index)
    return bool(dwords[dword] & (1 << bit))


def _set(dwords: list[int], index: int, value: bool) -> None:
    dword, bit = _locate(dwords, index)
    if value:
        dwords[dword] |= 1 << bit
    else:
        dwords[dword] &= ~(1 << bit) & _DWORD_MASK


def _flip(dwords: list[int], index: int) -> None:
    dword, bit = _locate(dwords, index)
    dwords[dword] ^= 1 << bit


def _set_all(dwords: list[int], bit_count: int) -> None:
    if not dwords:
        return
    remainder = bit_count % _DWORD_BITS
    if remainder == 0:
        dwords[:] = [_DWORD_MASK] * len(dwords)
    else:
        dwords[:-1] = [_DWORD_MASK] * (len(dwords) - 1)
        dwords[-1] = (1 << remainder) - 1


def _set_n(dwords: list[int], bits: int) -> None:
    full, offset = divmod(bits, _DWORD_BITS)
    if full > len(dwords) or (offset and full >= len(dwords)):
        raise IndexError(f"cannot set {bits} bits")
    dwords[:full] = [_DWORD_MASK] * full
    if offset:
        dwords[full] = (1 << offset) - 1


class Bitset:
    """A bit set with a fixed number of bits."""

    def __init__(self, bits: int) -> None:
        if bits <= 0:
            raise ValueError("a Bitset needs at least one bit")
        self._bits = bits
        self._dwords = [0] * (align(bits, _DWORD_BITS) // _DWORD_BITS)

    def get(self, index: int) -> bool:
        return _get(self._dwords, index)

    def set(self, index: int, value: bool) -> None:
        _set(self._dwords, index, value)

    def exchange(self, index: int, value: bool) -> bool:
        """Set a bit and return its previous value."""
        old = self.get(index)
        self.set(index, value)
        return old

    def flip(self, index: int) -> None:
        _flip(self._dwords, index)

    def set_all(self) -> None:
        """Set every bit up to the bit count."""
        _set_all(self._dwords, self._bits)

    def clear_all(self) -> None:
        self._dwords[:] = [0] * len(self._dwords)

    def any(self) -> bool:
        return any(self._dwords)

    def dword(self, index: int) -> int:
        """Return the 32-bit word at ``index``."""
        return self._dwords[index]

    def bit_count(self) -> int:
        return self._bits

    def dword_count(self) -> int:
        return len(self._dwords)

    def set_n(self, bits: int) -> None:
        """Set the lowest ``bits`` bits, word by word."""
        _set_n(self._dwords, bits)

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __repr__(self) -> str:
        return f"Bitset({self._bits}, dwords={[hex(d) for d in self._dwords]})"


class BitVector:
    """A bit set that grows as bits are written."""

    def __init__(self) -> None:
        self._dwords: list[int] = []
        self._bit_count = 0

    def get(self, index: int) -> bool:
        return _get(self._dwords, index)

    def ensure_size(self, bit_count: int) -> None:
        """Grow the storage so that it holds at least ``bit_count`` bits."""
        dword = bit_count // _DWORD_BITS
        if dword >= len(self._dwords):
            self._dwords.extend([0] * (dword + 1 - len(self._dwords)))
        self._bit_count = max(self._bit_count, bit_count)

    def set(self, index: int, value: bool) -> None:
        self.ensure_size(index + 1)
        _set(self._dwords, index, value)

    def exchange(self, index: int, value: bool) -> bool:
        """Set a bit and return its previous value."""
        self.ensure_size(index + 1)
        old = self.get(index)
        self.set(index, value)
        return old

    def flip(self, index: int) -> None:
        self.ensure_size(index + 1)
        _flip(self._dwords, index)

    def set_all(self) -> None:
        """Set every bit up to the bit count."""
        _set_all(self._dwords, self._bit_count)

    def clear_all(self) -> None:
        self._dwords[:] = [0] * len(self._dwords)

    def any(self) -> bool:
        return any(self._dwords)

    def dword(self, index: int) -> int:
        """Return the 32-bit word at ``index``."""
        return self._dwords[index]

    def bit_count(self) -> int:
        return self._bit_count

    def dword_count(self) -> int:
        return len(self._dwords)

    def set_n(self, bits: int) -> None:
        """Set the lowest ``bits`` bits, growing as needed."""
        self.ensure_size(bits)
        _set_n(self._dwords, bits)

    def __getitem__(self, index: int) -> bool:
        return self.get(index)

    def __repr__(self) -> str:
        return f"BitVector(bits={self._bit_count}, dwords={[hex(d) for d in self._dwords]})"