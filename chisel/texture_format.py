"""Texture formats and conversions between their linear, sRGB and typeless forms."""

from __future__ import annotations

from enum import IntEnum


class TextureFormat(IntEnum):
    """Texture formats, numbered as the graphics API numbers them."""

    UNKNOWN = 0
    R32G32B32A32_FLOAT = 2
    R32G32_FLOAT = 16
    R8G8B8A8_TYPELESS = 27
    R8G8B8A8_UNORM = 28
    R8G8B8A8_UNORM_SRGB = 29
    D32_FLOAT = 40
    R32_FLOAT = 41
    BC1_TYPELESS = 70
    BC1_UNORM = 71
    BC1_UNORM_SRGB = 72
    BC2_TYPELESS = 73
    BC2_UNORM = 74
    BC2_UNORM_SRGB = 75
    BC3_TYPELESS = 76
    BC3_UNORM = 77
    BC3_UNORM_SRGB = 78
    B5G6R5_UNORM = 85
    B8G8R8A8_UNORM = 87
    B8G8R8X8_UNORM = 88
    B8G8R8A8_TYPELESS = 90
    B8G8R8A8_UNORM_SRGB = 91
    B8G8R8X8_TYPELESS = 92
    B8G8R8X8_UNORM_SRGB = 93


F = TextureFormat

_LINEAR_TO_SRGB = {
    F.B8G8R8X8_UNORM: F.B8G8R8X8_UNORM_SRGB,
    F.R8G8B8A8_UNORM: F.R8G8B8A8_UNORM_SRGB,
    F.B8G8R8A8_UNORM: F.B8G8R8A8_UNORM_SRGB,
    F.BC1_UNORM: F.BC1_UNORM_SRGB,
    F.BC2_UNORM: F.BC2_UNORM_SRGB,
    F.BC3_UNORM: F.BC3_UNORM_SRGB,
}

_SRGB_TO_LINEAR = {srgb: linear for linear, srgb in _LINEAR_TO_SRGB.items()}

_LINEAR_TO_TYPELESS = {
    F.B8G8R8X8_UNORM: F.B8G8R8X8_TYPELESS,
    F.R8G8B8A8_UNORM: F.R8G8B8A8_TYPELESS,
    F.B8G8R8A8_UNORM: F.B8G8R8A8_TYPELESS,
    F.BC1_UNORM: F.BC1_TYPELESS,
    F.BC2_UNORM: F.BC2_TYPELESS,
    F.BC3_UNORM: F.BC3_TYPELESS,
}

_BLOCK_COMPRESSED = frozenset(
    {
        F.BC1_TYPELESS, F.BC1_UNORM, F.BC1_UNORM_SRGB,
        F.BC2_TYPELESS, F.BC2_UNORM, F.BC2_UNORM_SRGB,
        F.BC3_TYPELESS, F.BC3_UNORM, F.BC3_UNORM_SRGB,
    }
)

_COMPRESSED_BLOCK_EDGE = 4

_ELEMENT_SIZES = {
    F.B5G6R5_UNORM: 2,
    F.B8G8R8X8_UNORM_SRGB: 4,
    F.B8G8R8X8_UNORM: 4,
    F.B8G8R8X8_TYPELESS: 4,
    F.B8G8R8A8_UNORM_SRGB: 4,
    F.B8G8R8A8_UNORM: 4,
    F.B8G8R8A8_TYPELESS: 4,
    F.R8G8B8A8_UNORM_SRGB: 4,
    F.R8G8B8A8_UNORM: 4,
    F.R8G8B8A8_TYPELESS: 4,
    F.R32_FLOAT: 4,
    F.R32G32_FLOAT: 8,
    F.BC1_UNORM_SRGB: 8,
    F.BC1_UNORM: 8,
    F.BC1_TYPELESS: 8,
    F.R32G32B32A32_FLOAT: 16,
    F.BC2_UNORM_SRGB: 16,
    F.BC2_UNORM: 16,
    F.BC2_TYPELESS: 16,
    F.BC3_UNORM_SRGB: 16,
    F.BC3_UNORM: 16,
    F.BC3_TYPELESS: 16,
}


def linear_to_srgb(fmt: TextureFormat) -> TextureFormat:
    """The sRGB variant of a linear format; other formats are returned as is."""
    return _LINEAR_TO_SRGB.get(fmt, fmt)


def srgb_to_linear(fmt: TextureFormat) -> TextureFormat:
    """The linear variant of an sRGB format; other formats are returned as is."""
    return _SRGB_TO_LINEAR.get(fmt, fmt)


def linear_to_typeless(fmt: TextureFormat) -> TextureFormat:
    """The typeless variant of a linear format; other formats are returned as is."""
    return _LINEAR_TO_TYPELESS.get(fmt, fmt)


def block_size(fmt: TextureFormat) -> tuple[int, int]:
    """Width and height in texels of one element of ``fmt``."""
    edge = _COMPRESSED_BLOCK_EDGE if fmt in _BLOCK_COMPRESSED else 1
    return edge, edge


def element_size(fmt: TextureFormat) -> int:
    """Bytes per element (per texel, or per block for compressed formats)."""
    try:
        return _ELEMENT_SIZES[fmt]
    except KeyError:
        raise ValueError(f"Cannot remap format {fmt!r}") from None