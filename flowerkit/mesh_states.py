"""Mesh viewer states and the number-key switching between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from flowerkit.vertex_types import VertexPC, VertexPX

TRANSFORM_SHADER = "../../Assets/Shaders/DoTransform.fx"
TEXTURE_SHADER = "../../Assets/Shaders/DoTexture.fx"


class MeshState(Enum):
    """The meshes the viewer can show, valued by their registered state names."""

    CUBE = "CubeMesh"
    RECT = "RectMesh"
    PLANE = "PlaneMesh"
    CYLINDER = "CylinderMesh"
    SPHERE = "SphereMesh"
    SKY_BOX = "SkyBoxMesh"
    SKY_SPHERE = "SkySphereMesh"

    @property
    def hotkey(self) -> int:
        """The number key that switches to this state."""
        return _HOTKEYS[self]


_HOTKEYS: Mapping[MeshState, int] = MappingProxyType({
    MeshState.CUBE: 1,
    MeshState.RECT: 2,
    MeshState.PLANE: 3,
    MeshState.CYLINDER: 4,
    MeshState.SPHERE: 5,
    MeshState.SKY_BOX: 6,
    MeshState.SKY_SPHERE: 7,
})

_BY_KEY: Mapping[int, MeshState] = MappingProxyType({key: state for state, key in _HOTKEYS.items()})

# States in the order they are registered; the first one is shown at start-up.
REGISTERED_STATES: tuple[MeshState, ...] = (
    MeshState.CUBE,
    MeshState.RECT,
    MeshState.PLANE,
    MeshState.CYLINDER,
    MeshState.SPHERE,
    MeshState.SKY_SPHERE,
    MeshState.SKY_BOX,
)
INITIAL_STATE = REGISTERED_STATES[0]


@dataclass(frozen=True)
class MeshStateSpec:
    """What a state builds: mesh builder and arguments, shader, vertex layout, texture."""

    builder: str
    arguments: tuple[float, ...]
    vertex_type: type
    shader_file: str
    texture_file: Optional[str] = None
    sampler_filter: Optional[str] = None
    sampler_address_mode: Optional[str] = None

    @property
    def textured(self) -> bool:
        return self.texture_file is not None


_SPECS: Mapping[MeshState, MeshStateSpec] = MappingProxyType({
    MeshState.CUBE: MeshStateSpec("create_cube_pc", (1.0,), VertexPC, TRANSFORM_SHADER),
    MeshState.RECT: MeshStateSpec("create_rect_pc", (1.0, 1.5, 2.0), VertexPC, TRANSFORM_SHADER),
    MeshState.PLANE: MeshStateSpec("create_plane_pc", (2, 3, 0.5), VertexPC, TRANSFORM_SHADER),
    MeshState.CYLINDER: MeshStateSpec("create_cylinder_pc", (8, 1), VertexPC, TRANSFORM_SHADER),
    MeshState.SPHERE: MeshStateSpec("create_sphere_pc", (10, 10, 2.5), VertexPC, TRANSFORM_SHADER),
    MeshState.SKY_BOX: MeshStateSpec(
        "create_skybox_px",
        (100.0,),
        VertexPX,
        TEXTURE_SHADER,
        "../../Assets/Images/skybox/skybox_texture.jpg",
        "linear",
        "wrap",
    ),
    MeshState.SKY_SPHERE: MeshStateSpec(
        "create_sky_sphere_px",
        (30, 30, 100.0),
        VertexPX,
        TEXTURE_SHADER,
        "../../Assets/Images/skysphere/space.jpg",
        "linear",
        "wrap",
    ),
})


def _as_state(state: Union[MeshState, str]) -> MeshState:
    if isinstance(state, MeshState):
        return state
    try:
        return MeshState(state)
    except ValueError:
        raise ValueError(f"unknown mesh state: {state!r}") from None


def state_for_key(current: Union[MeshState, str], key: Optional[int]) -> MeshState:
    """The state shown after pressing number key while current is shown.

    Keys 1 to 7 select a state; any other key, or none, keeps the current one.
    """
    state = _as_state(current)
    if key is None:
        return state
    return _BY_KEY.get(key, state)


def mesh_state_spec(state: Union[MeshState, str]) -> MeshStateSpec:
    """What the given state builds when it starts."""
    return _SPECS[_as_state(state)]