"""Meshes made of groups of vertex and index buffers."""

from __future__ import annotations

import copy as _copy
from dataclasses import dataclass, field
from typing import Any

from chisel.vertex import IndexBuffer, IndexType, VertexBuffer, VertexLayout


@dataclass
class MeshGroup:
    """One drawable part of a mesh with its material index (-1 for none)."""

    vertices: VertexBuffer = field(default_factory=VertexBuffer)
    indices: IndexBuffer = field(default_factory=IndexBuffer)
    material: int = -1


class Mesh:
    """Vertex and index data split into groups, plus their materials."""

    def __init__(self, layout: VertexLayout | None = None, vertices: Any = None, indices: Any = None) -> None:
        self.groups: list[MeshGroup] = []
        self.materials: list[Any] = []
        self.uploaded = False
        if layout is not None and vertices is not None:
            self._init(layout, vertices, indices)

    def _init(self, layout: VertexLayout, vertices: Any, indices: Any) -> None:
        if memoryview(vertices).nbytes == 0:
            return
        if indices is None:
            index_buffer = IndexBuffer()
        else:
            index_buffer = indices if isinstance(indices, IndexBuffer) else IndexBuffer(indices)
            if index_buffer.count == 0:
                return
        self.groups.append(MeshGroup(VertexBuffer(layout, vertices), index_buffer))

    def add_group(self) -> MeshGroup:
        """Append an empty group and return it."""
        group = MeshGroup()
        self.groups.append(group)
        return group

    def copy(self) -> Mesh:
        """A copy of the groups and materials that is not uploaded."""
        result = Mesh()
        result.groups = [
            MeshGroup(_copy.copy(g.vertices), _copy.copy(g.indices), g.material)
            for g in self.groups
        ]
        result.materials = list(self.materials)
        result.uploaded = False
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.groups)} groups, uploaded={self.uploaded})"


class MeshBuffer(Mesh):
    """A mesh built incrementally: append vertices and indices, then cut groups."""

    def __init__(self, layout: VertexLayout, index_type: IndexType = IndexType.UINT32) -> None:
        super().__init__()
        self.layout = layout
        self.index_type = index_type
        self.vertices = bytearray()
        self.indices: list[int] = []
        self.vertices_offset = 0
        self.indices_offset = 0

    def add_group(self, material: int = -1) -> MeshGroup:
        """Make a group from the data appended since the last group."""
        if not self.vertices or not self.indices:
            raise ValueError("mesh buffer has no vertex or index data")
        group = MeshGroup(
            VertexBuffer(self.layout, bytes(self.vertices[self.vertices_offset:])),
            IndexBuffer(self.indices[self.indices_offset:], self.index_type),
            material,
        )
        self.groups.append(group)
        self.vertices_offset = len(self.vertices)
        self.indices_offset = len(self.indices)
        return group