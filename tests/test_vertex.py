import struct

import pytest

from chisel.vertex import (
    AttributeMode,
    IndexBuffer,
    IndexType,
    ScalarType,
    VertexAttribute,
    VertexBuffer,
    VertexLayout,
)


def _pos_uv_layout():
    return VertexLayout(
        VertexAttribute.of(ScalarType.FLOAT32, 3, AttributeMode.POSITION),
        VertexAttribute.of(ScalarType.FLOAT32, 2, AttributeMode.TEX_COORD),
    )


def test_attribute_of_uses_scalar_size():
    attr = VertexAttribute.of(ScalarType.UINT8, 4, AttributeMode.COLOR, True)
    assert attr.size == ScalarType.UINT8.size
    assert attr.dimension == 4
    assert attr.normalized is True
    assert attr.mode is AttributeMode.COLOR


def test_position_uv_stride_is_five_floats():
    assert _pos_uv_layout().stride() == struct.calcsize("<5f")


def test_empty_layout_stride_is_one():
    assert VertexLayout().stride() == 1


def test_add_of_is_chainable_and_accumulates():
    layout = VertexLayout().add_of(ScalarType.FLOAT32, 3).add_of(ScalarType.UINT16, 2)
    assert layout.stride() == ScalarType.FLOAT32.size * 3 + ScalarType.UINT16.size * 2
    assert len(layout.attributes()) == 2


def test_skip_adds_padding_attribute():
    layout = VertexLayout().add_of(ScalarType.FLOAT32, 3).skip(4)
    padding = layout.attributes()[-1]
    assert padding.mode is AttributeMode.NONE
    assert padding.type is ScalarType.NONE
    assert padding.dimension == 4
    assert layout.stride() == ScalarType.FLOAT32.size * 3 + 4


def test_vertex_buffer_count_and_size():
    layout = _pos_uv_layout()
    data = struct.pack("<5f", 0, 1, 2, 3, 4) * 3
    buf = VertexBuffer(layout, data)
    assert buf.count == 3
    assert buf.stride() == layout.stride()
    assert buf.size() == len(data)


def test_vertex_buffer_copies_layout():
    layout = _pos_uv_layout()
    buf = VertexBuffer(layout, b"")
    layout.skip(8)
    assert buf.stride() == _pos_uv_layout().stride()


def test_default_buffers_are_empty():
    assert VertexBuffer().count == 0
    empty = IndexBuffer()
    assert empty.count == 0
    assert empty.indices is None
    assert empty.type is IndexType.UINT32


@pytest.mark.parametrize("index_type", [IndexType.UINT16, IndexType.UINT32])
def test_index_buffer_stride_and_size(index_type):
    buf = IndexBuffer([0, 1, 2, 2, 1, 3], index_type)
    assert buf.count == 6
    assert buf.stride() == index_type.value
    assert buf.size() == 6 * index_type.value
    assert len(buf.data) == buf.size()


def test_index_buffer_data_little_endian():
    assert IndexBuffer([1, 258], IndexType.UINT16).data == struct.pack("<2H", 1, 258)


def test_index_out_of_range_raises():
    with pytest.raises(ValueError):
        IndexBuffer([70000], IndexType.UINT16)
    with pytest.raises(ValueError):
        IndexBuffer([-1])