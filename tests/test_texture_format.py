import pytest

from chisel.texture_format import (
    TextureFormat,
    block_size,
    element_size,
    linear_to_srgb,
    linear_to_typeless,
    srgb_to_linear,
)

F = TextureFormat

LINEAR_SRGB = [
    (F.B8G8R8X8_UNORM, F.B8G8R8X8_UNORM_SRGB),
    (F.R8G8B8A8_UNORM, F.R8G8B8A8_UNORM_SRGB),
    (F.B8G8R8A8_UNORM, F.B8G8R8A8_UNORM_SRGB),
    (F.BC1_UNORM, F.BC1_UNORM_SRGB),
    (F.BC2_UNORM, F.BC2_UNORM_SRGB),
    (F.BC3_UNORM, F.BC3_UNORM_SRGB),
]


@pytest.mark.parametrize("linear, srgb", LINEAR_SRGB)
def test_linear_srgb_round_trip(linear, srgb):
    assert linear_to_srgb(linear) == srgb
    assert srgb_to_linear(srgb) == linear
    assert srgb_to_linear(linear_to_srgb(linear)) == linear


@pytest.mark.parametrize(
    "linear, typeless",
    [
        (F.B8G8R8X8_UNORM, F.B8G8R8X8_TYPELESS),
        (F.R8G8B8A8_UNORM, F.R8G8B8A8_TYPELESS),
        (F.B8G8R8A8_UNORM, F.B8G8R8A8_TYPELESS),
        (F.BC1_UNORM, F.BC1_TYPELESS),
        (F.BC2_UNORM, F.BC2_TYPELESS),
        (F.BC3_UNORM, F.BC3_TYPELESS),
    ],
)
def test_linear_to_typeless(linear, typeless):
    assert linear_to_typeless(linear) == typeless


@pytest.mark.parametrize("fmt", [F.R32_FLOAT, F.D32_FLOAT, F.B5G6R5_UNORM])
def test_unmapped_formats_pass_through(fmt):
    assert linear_to_srgb(fmt) is fmt
    assert srgb_to_linear(fmt) is fmt
    assert linear_to_typeless(fmt) is fmt


def test_srgb_is_idempotent():
    for linear, srgb in LINEAR_SRGB:
        assert linear_to_srgb(srgb) == srgb
        assert srgb_to_linear(linear) == linear


def test_block_sizes():
    assert block_size(F.BC1_UNORM) == (4, 4)
    assert block_size(F.BC3_TYPELESS) == (4, 4)
    assert block_size(F.R8G8B8A8_UNORM) == (1, 1)


@pytest.mark.parametrize(
    "fmt, size",
    [
        (F.B5G6R5_UNORM, 2),
        (F.R8G8B8A8_UNORM, 4),
        (F.R32_FLOAT, 4),
        (F.R32G32_FLOAT, 8),
        (F.BC1_UNORM_SRGB, 8),
        (F.R32G32B32A32_FLOAT, 16),
        (F.BC3_UNORM, 16),
    ],
)
def test_element_sizes(fmt, size):
    assert element_size(fmt) == size


def test_element_size_same_across_variants():
    for linear, srgb in LINEAR_SRGB:
        assert element_size(linear) == element_size(srgb) == element_size(linear_to_typeless(linear))


@pytest.mark.parametrize("fmt", [F.UNKNOWN, F.D32_FLOAT])
def test_element_size_unknown_raises(fmt):
    with pytest.raises(ValueError):
        element_size(fmt)