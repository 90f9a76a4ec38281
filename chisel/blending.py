"""Blend modes, blend functions and per-render-target blend states."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Union

MAX_RENDER_TARGETS = 8
_ALL_CHANNELS = 0b1111


class BlendMode(IntEnum):
    """Blend factors, numbered as the graphics API numbers them."""

    DEFAULT = 0
    ZERO = 1
    ONE = 2
    SRC_COLOR = 3
    ONE_MINUS_SRC_COLOR = 4
    SRC_ALPHA = 5
    ONE_MINUS_SRC_ALPHA = 6
    DST_ALPHA = 7
    ONE_MINUS_DST_ALPHA = 8
    DST_COLOR = 9
    ONE_MINUS_DST_COLOR = 10
    SRC_ALPHA_SATURATE = 11
    BLEND_FACTOR = 14
    ONE_MINUS_BLEND_FACTOR = 15
    SRC1_COLOR = 16
    ONE_MINUS_SRC1_COLOR = 17
    SRC1_ALPHA = 18
    ONE_MINUS_SRC1_ALPHA = 19


class BlendOp(IntEnum):
    """How source and destination terms are combined."""

    ADD = 1
    SUBTRACT = 2
    REVERSE_SUBTRACT = 3
    MIN = 4
    MAX = 5


class RGBAMask:
    """A 4-bit colour write mask: red is bit 0, alpha is bit 3."""

    __slots__ = ("mask",)

    def __init__(self, mask: int = _ALL_CHANNELS) -> None:
        self.mask = int(mask) & _ALL_CHANNELS

    @classmethod
    def from_channels(cls, r: bool, g: bool, b: bool, a: bool) -> RGBAMask:
        """Build a mask from one flag per channel."""
        return cls(
            (1 if r else 0) | (2 if g else 0) | (4 if b else 0) | (8 if a else 0)
        )

    @property
    def r(self) -> bool:
        return bool(self.mask & 1)

    @property
    def g(self) -> bool:
        return bool(self.mask & 2)

    @property
    def b(self) -> bool:
        return bool(self.mask & 4)

    @property
    def a(self) -> bool:
        return bool(self.mask & 8)

    def __int__(self) -> int:
        return self.mask

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RGBAMask):
            return self.mask == other.mask
        if isinstance(other, int):
            return self.mask == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.mask)

    def __repr__(self) -> str:
        return f"RGBAMask(0b{self.mask:04b})"


MaskLike = Union[RGBAMask, int]


class BlendFunc:
    """Blending for one render target; alpha factors follow the colour factors."""

    __slots__ = ("src", "dst", "src_alpha", "dst_alpha", "rgb_op", "alpha_op", "write_mask")

    def __init__(
        self,
        src: BlendMode = BlendMode.DEFAULT,
        dst: BlendMode = BlendMode.DEFAULT,
        write_mask: MaskLike = _ALL_CHANNELS,
    ) -> None:
        self.src = BlendMode(src)
        self.dst = BlendMode(dst)
        self.src_alpha = self.src
        self.dst_alpha = self.dst
        self.rgb_op = BlendOp.ADD
        self.alpha_op = BlendOp.ADD
        self.write_mask = write_mask if isinstance(write_mask, RGBAMask) else RGBAMask(write_mask)

    def enabled(self) -> bool:
        """Blending is on unless the source factor is the default."""
        return self.src != BlendMode.DEFAULT

    def _key(self) -> tuple:
        return (
            self.src,
            self.dst,
            self.src_alpha,
            self.dst_alpha,
            self.rgb_op,
            self.alpha_op,
            self.write_mask.mask,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BlendFunc):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"BlendFunc(src={self.src.name}, dst={self.dst.name}, "
            f"write_mask={self.write_mask!r})"
        )


class BlendState:
    """Blend functions for up to eight render targets.

    With no arguments (or a single None) every target uses the default function
    and blending is not independent. Given functions, they fill the first
    targets in order and blending becomes independent.
    """

    __slots__ = ("alpha_to_coverage", "independent", "render_targets", "handle")

    def __init__(self, *args: BlendFunc | None) -> None:
        self.alpha_to_coverage = False
        self.independent = False
        self.handle: Any = None
        self.render_targets = [BlendFunc() for _ in range(MAX_RENDER_TARGETS)]

        if len(args) == 1 and args[0] is None:
            return
        if not args:
            return
        if len(args) > MAX_RENDER_TARGETS:
            raise ValueError(
                f"at most {MAX_RENDER_TARGETS} blend functions, got {len(args)}"
            )
        for index, func in enumerate(args):
            if not isinstance(func, BlendFunc):
                raise TypeError(f"{func!r} is not a BlendFunc")
            self.render_targets[index] = func
        self.independent = True

    def enabled(self) -> bool:
        return self.render_targets[0].enabled() or self.independent

    def __repr__(self) -> str:
        return (
            f"BlendState(independent={self.independent}, "
            f"alpha_to_coverage={self.alpha_to_coverage}, "
            f"rt0={self.render_targets[0]!r})"
        )


class BlendFuncs:
    """Commonly used blend states."""

    NORMAL = BlendState(BlendFunc())
    ADD = BlendState(BlendFunc(BlendMode.ONE, BlendMode.ONE))
    ALPHA = BlendState(BlendFunc(BlendMode.SRC_ALPHA, BlendMode.ONE_MINUS_SRC_ALPHA))
    ALPHA_NO_SELECTION = BlendState(
        BlendFunc(BlendMode.SRC_ALPHA, BlendMode.ONE_MINUS_SRC_ALPHA),
        BlendFunc(BlendMode.ZERO, BlendMode.ZERO, 0b0000),
    )