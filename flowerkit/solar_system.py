"""Planets orbiting the sun, and the camera that follows one of them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple

from flowerkit.matrix import Matrix4, transpose
from flowerkit.vector import Vector3

TEXTURE_DIR = "../../Assets/Images/Planets"
SKY_TEXTURE = "../../Assets/Images/skysphere/space.jpg"
SKY_RADIUS = 200.0
PLANET_MESH_DETAIL = 50
RENDER_TARGET_SIZE = 512
DEFAULT_RENDER_TARGET_DISTANCE = -30.0


class _BodyData(NamedTuple):
    display_name: str
    texture: str
    distance: float
    rotation_speed: float
    orbit_speed: float
    size: float


class Body(IntEnum):
    """The bodies of the solar system, in the order they are listed."""

    SUN = 0
    MERCURY = 1
    VENUS = 2
    EARTH = 3
    MARS = 4
    JUPITER = 5
    SATURN = 6
    URANUS = 7
    NEPTUNE = 8
    PLUTO = 9

    @property
    def display_name(self) -> str:
        return _BODY_DATA[self].display_name

    @property
    def texture(self) -> str:
        """Path of the image wrapped around the body."""
        return _BODY_DATA[self].texture

    @property
    def distance(self) -> float:
        """Distance from the sun."""
        return _BODY_DATA[self].distance

    @property
    def rotation_speed(self) -> float:
        """Spin about its own axis, in radians per second."""
        return _BODY_DATA[self].rotation_speed

    @property
    def orbit_speed(self) -> float:
        """Travel around the sun, in radians per second."""
        return _BODY_DATA[self].orbit_speed

    @property
    def size(self) -> float:
        """Radius of the body's sphere."""
        return _BODY_DATA[self].size


def _data(name: str, distance: float, rotation: float, orbit: float, size: float) -> _BodyData:
    return _BodyData(name, f"{TEXTURE_DIR}/{name.lower()}.jpg", distance, rotation, orbit, size)


_BODY_DATA: Mapping[Body, _BodyData] = MappingProxyType({
    Body.SUN: _data("Sun", 0.0, 1.0, 0.0, 5.0),
    Body.MERCURY: _data("Mercury", 10.0, 4.8, 4.8, 0.4),
    Body.VENUS: _data("Venus", 20.0, -0.5, 3.5, 0.95),
    Body.EARTH: _data("Earth", 30.0, 0.7, 2.9, 1.0),
    Body.MARS: _data("Mars", 40.0, 0.4, 2.4, 0.53),
    Body.JUPITER: _data("Jupiter", 80.0, 2.0, 1.3, 11.2),
    Body.SATURN: _data("Saturn", 100.0, 1.0, 0.9, 9.45),
    Body.URANUS: _data("Uranus", 120.0, -0.7, 0.6, 4.0),
    Body.NEPTUNE: _data("Neptune", 140.0, 0.5, 0.5, 3.88),
    Body.PLUTO: _data("Pluto", 160.0, 0.1, 0.4, 0.19),
})


@dataclass
class Planet:
    """A body spinning on its axis while orbiting the sun."""

    body: Body
    distance_from_sun: float
    rotation_speed: float
    orbit_speed: float
    rotation: float = 0.0
    orbit: float = 0.0
    world: Matrix4 = field(default_factory=Matrix4.identity)

    @classmethod
    def from_body(cls, body: Body) -> Planet:
        """A planet with the body's standard distance and speeds."""
        return cls(body, body.distance, body.rotation_speed, body.orbit_speed)

    def update(self, delta_time: float) -> None:
        """Advance spin and orbit by delta_time seconds and rebuild the world matrix."""
        self.rotation += self.rotation_speed * delta_time
        self.orbit += self.orbit_speed * delta_time
        spin = Matrix4.rotation_y(self.rotation)
        offset = Matrix4.translation(Vector3.ZAXIS * self.distance_from_sun)
        revolve = Matrix4.rotation_y(self.orbit)
        self.world = spin * offset * revolve

    def position(self) -> Vector3:
        """The planet's centre, taken from the translation row of its world matrix."""
        return Vector3(self.world[3, 0], self.world[3, 1], self.world[3, 2])

    def world_view_projection(self, view: Matrix4, projection: Matrix4) -> Matrix4:
        """The combined world-view-projection matrix, transposed for shader upload."""
        return transpose(self.world * view * projection)


def create_solar_system() -> list[Planet]:
    """One planet for every body, in body order, with standard settings."""
    return [Planet.from_body(body) for body in Body]


def render_target_eye(planet: Planet, distance: float = DEFAULT_RENDER_TARGET_DISTANCE) -> Vector3:
    """Where the close-up camera sits: offset from the planet along Z by distance."""
    return planet.position() + Vector3(0.0, 0.0, distance)