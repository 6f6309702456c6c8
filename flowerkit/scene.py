"""Materials, lights, transforms and the model container."""

from __future__ import annotations

from dataclasses import dataclass, field

from flowerkit.colors import BLACK, WHITE, Color
from flowerkit.matrix import Matrix4
from flowerkit.vector import Quaternion, Vector3
from flowerkit.vertex_types import Mesh, Vertex


@dataclass
class Material:
    """Surface colors and specular power."""

    ambient: Color = WHITE
    diffuse: Color = WHITE
    specular: Color = WHITE
    emissive: Color = BLACK
    power: float = 10.0


@dataclass
class DirectionalLight:
    """A light shining in one direction from infinitely far away."""

    ambient: Color = WHITE
    diffuse: Color = WHITE
    specular: Color = WHITE
    direction: Vector3 = Vector3.ZAXIS


@dataclass
class Transform:
    """Position, rotation and scale of an object."""

    position: Vector3 = Vector3.ZERO
    rotation: Quaternion = Quaternion.IDENTITY
    scale: Vector3 = Vector3.ONE

    def matrix(self) -> Matrix4:
        """World matrix: scale, then rotate, then translate."""
        return (
            Matrix4.scaling(self.scale)
            * Matrix4.rotation_quaternion(self.rotation)
            * Matrix4.translation(self.position)
        )


@dataclass
class MeshData:
    """One mesh of a model and the index of its material."""

    mesh: Mesh = field(default_factory=lambda: Mesh(Vertex))
    material_index: int = 0


@dataclass
class MaterialData:
    """A material with the file names of its texture maps."""

    material: Material = field(default_factory=Material)
    diffuse_map_name: str = ""
    normal_map_name: str = ""
    spec_map_name: str = ""
    bump_map_name: str = ""


@dataclass
class Model:
    """Meshes and materials loaded from one model file."""

    mesh_data: list[MeshData] = field(default_factory=list)
    material_data: list[MaterialData] = field(default_factory=list)