"""Vertex layouts and CPU-side vertex and index buffers."""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ScalarType(Enum):
    """Scalar component types of vertex attributes, with their byte size."""

    NONE = ("none", 1)
    INT8 = ("int8", 1)
    UINT8 = ("uint8", 1)
    INT16 = ("int16", 2)
    UINT16 = ("uint16", 2)
    INT32 = ("int32", 4)
    UINT32 = ("uint32", 4)
    FLOAT32 = ("float32", 4)
    FLOAT64 = ("float64", 8)

    def __init__(self, label: str, size: int) -> None:
        self.label = label
        self.size = size


class AttributeMode(Enum):
    """What a vertex attribute means."""

    DEFAULT = 0
    NONE = 1
    POSITION = 2
    NORMAL = 3
    TANGENT = 4
    BITANGENT = 5
    COLOR = 6
    INDICES = 7
    WEIGHT = 8
    TEX_COORD = 9


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute of a vertex: ``dimension`` scalars of ``size`` bytes."""

    size: int
    dimension: int
    type: ScalarType
    normalized: bool = False
    mode: AttributeMode = AttributeMode.DEFAULT

    @classmethod
    def of(
        cls,
        kind: ScalarType,
        dimension: int,
        mode: AttributeMode = AttributeMode.DEFAULT,
        normalized: bool = False,
    ) -> VertexAttribute:
        return cls(kind.size, dimension, kind, normalized, mode)

    @property
    def nbytes(self) -> int:
        return self.size * self.dimension


class VertexLayout:
    """An ordered list of vertex attributes and their total stride."""

    def __init__(self, *args: VertexAttribute) -> None:
        self._attributes: list[VertexAttribute] = []
        self._stride = 0
        for attribute in args:
            self.add(attribute)

    def add(self, attribute: VertexAttribute) -> VertexLayout:
        self._attributes.append(attribute)
        self._stride += attribute.nbytes
        return self

    def add_of(
        self,
        kind: ScalarType,
        dimension: int,
        mode: AttributeMode = AttributeMode.DEFAULT,
        normalized: bool = False,
    ) -> VertexLayout:
        return self.add(VertexAttribute.of(kind, dimension, mode, normalized))

    def skip(self, nbytes: int) -> VertexLayout:
        """Add ``nbytes`` of padding."""
        return self.add(VertexAttribute(1, nbytes, ScalarType.NONE, False, AttributeMode.NONE))

    def stride(self) -> int:
        """Bytes per vertex; 1 for an empty layout."""
        return self._stride if self._attributes else 1

    def attributes(self) -> tuple[VertexAttribute, ...]:
        return tuple(self._attributes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VertexLayout):
            return NotImplemented
        return self._attributes == other._attributes

    def __repr__(self) -> str:
        return f"VertexLayout({len(self._attributes)} attributes, stride={self.stride()})"


class IndexType(Enum):
    """Index element types, valued by their byte size."""

    UINT16 = 2
    UINT32 = 4

    @property
    def stride(self) -> int:
        return self.value


class _ElementBuffer(ABC):
    """A buffer of equally sized items, with an optional GPU handle."""

    def __init__(self, count: int = 0) -> None:
        self.handle: Any = None
        self.count = count

    @abstractmethod
    def stride(self) -> int:
        """Bytes per item."""

    @abstractmethod
    def size(self) -> int:
        """Total size in bytes."""


class VertexBuffer(_ElementBuffer):
    """Raw vertex bytes interpreted through a layout."""

    def __init__(self, layout: VertexLayout | None = None, data: Any = None) -> None:
        self.layout = VertexLayout() if layout is None else VertexLayout(*layout.attributes())
        self.data = None if data is None else memoryview(data).tobytes()
        count = 0 if self.data is None else len(self.data) // self.layout.stride()
        super().__init__(count)

    def stride(self) -> int:
        return self.layout.stride()

    def size(self) -> int:
        """Total size in bytes."""
        return self.count * self.stride()

    def __repr__(self) -> str:
        return f"VertexBuffer(count={self.count}, stride={self.stride()})"


class IndexBuffer(_ElementBuffer):
    """A list of 16- or 32-bit vertex indices."""

    def __init__(self, indices: Any = None, index_type: IndexType = IndexType.UINT32) -> None:
        self.type = index_type
        if indices is None:
            self.indices = None
            super().__init__(0)
            return
        values = tuple(operator.index(i) for i in indices)
        limit = 1 << (8 * index_type.stride)
        for value in values:
            if not 0 <= value < limit:
                raise ValueError(f"index {value} does not fit in {index_type.name}")
        self.indices = values
        super().__init__(len(values))

    def stride(self) -> int:
        return self.type.stride

    def size(self) -> int:
        """Total size in bytes."""
        return self.count * self.stride()

    @property
    def data(self) -> bytes | None:
        """The indices as little-endian bytes."""
        if self.indices is None:
            return None
        width = self.stride()
        return b"".join(value.to_bytes(width, "little") for value in self.indices)

    def __repr__(self) -> str:
        return f"IndexBuffer(count={self.count}, type={self.type.name})"