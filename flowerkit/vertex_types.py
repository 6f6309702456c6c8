"""Vertex layouts, their element flags, and the mesh container."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag
from typing import ClassVar, Generic, TypeVar

from flowerkit.colors import Color
from flowerkit.vector import Vector2, Vector3, Vector4


class VertexElement(IntFlag):
    """Flags naming the attributes a vertex layout carries."""

    POSITION = 1 << 0
    NORMAL = 1 << 1
    TANGENT = 1 << 2
    COLOR = 1 << 3
    TEX_COORD = 1 << 4
    BLEND_INDEX = 1 << 5
    BLEND_WEIGHT = 1 << 6


@dataclass
class VertexP:
    """Position only."""

    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION

    position: Vector3 = Vector3.ZERO


@dataclass
class VertexPC:
    """Position and color."""

    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION | VertexElement.COLOR

    position: Vector3 = Vector3.ZERO
    color: Color = Vector4()


@dataclass
class VertexPX:
    """Position and texture coordinate."""

    FORMAT: ClassVar[VertexElement] = VertexElement.POSITION | VertexElement.TEX_COORD

    position: Vector3 = Vector3.ZERO
    uv_coord: Vector2 = Vector2.ZERO


@dataclass
class Vertex:
    """Full vertex: position, normal, tangent, texture coordinate and bone weights."""

    FORMAT: ClassVar[VertexElement] = (
        VertexElement.POSITION
        | VertexElement.NORMAL
        | VertexElement.TANGENT
        | VertexElement.TEX_COORD
        | VertexElement.BLEND_INDEX
        | VertexElement.BLEND_WEIGHT
    )
    MAX_BONE_WEIGHTS: ClassVar[int] = 4

    position: Vector3 = Vector3.ZERO
    normal: Vector3 = Vector3.ZERO
    tangent: Vector3 = Vector3.ZERO
    uv_coord: Vector2 = Vector2.ZERO
    bone_indices: list[int] = field(default_factory=lambda: [0] * Vertex.MAX_BONE_WEIGHTS)
    bone_weights: list[float] = field(default_factory=lambda: [0.0] * Vertex.MAX_BONE_WEIGHTS)


V = TypeVar("V", VertexP, VertexPC, VertexPX, Vertex)


@dataclass
class Mesh(Generic[V]):
    """Vertices of one layout with an optional triangle index list."""

    vertex_type: type = Vertex
    vertices: list = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def vertex_format(self) -> VertexElement:
        """The element flags of this mesh's vertex layout."""
        return self.vertex_type.FORMAT

    def triangle_count(self) -> int:
        """Triangles drawn: from the indices if any, otherwise from the vertices."""
        count = len(self.indices) if self.indices else len(self.vertices)
        return count // 3