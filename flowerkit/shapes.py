"""Hard-coded colored shapes and the key-driven switching between them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Mapping

from flowerkit.colors import (
    ALICE_BLUE,
    AQUA,
    BLUE,
    CADET_BLUE,
    GREEN,
    LIGHT_CORAL,
    MEDIUM_PURPLE,
    MINT_CREAM,
    PURPLE,
    RED,
    WHITE,
    YELLOW,
    Color,
)
from flowerkit.matrix import Matrix4
from flowerkit.vector import HALF_PI, Vector3
from flowerkit.vertex_types import Mesh, VertexPC


class Key(Enum):
    """Keys that move between shapes."""

    LEFT = "left"
    RIGHT = "right"


def _mesh(*points: tuple[tuple[float, float, float], Color]) -> Mesh:
    return Mesh(VertexPC, [VertexPC(Vector3(*pos), color) for pos, color in points])


def triangle() -> Mesh:
    """A single red-green-blue triangle."""
    return _mesh(
        ((-0.5, 0.0, 0.0), RED),
        ((0.0, 0.75, 0.0), GREEN),
        ((0.5, 0.0, 0.0), BLUE),
    )


def square() -> Mesh:
    """A square made of two triangles."""
    return _mesh(
        ((-0.5, -0.5, 0.0), RED),
        ((-0.5, 0.5, 0.0), GREEN),
        ((0.5, 0.5, 0.0), BLUE),
        ((-0.5, -0.5, 0.0), RED),
        ((0.5, 0.5, 0.0), BLUE),
        ((0.5, -0.5, 0.0), GREEN),
    )


def star() -> Mesh:
    """A yellow star made of three triangles."""
    return _mesh(
        ((-0.25, -0.5, 0.0), YELLOW),
        ((-0.05, 0.2, 0.0), YELLOW),
        ((0.3, 0.0, 0.0), YELLOW),
        ((-0.3, 0.0, 0.0), YELLOW),
        ((0.05, 0.2, 0.0), YELLOW),
        ((0.25, -0.5, 0.0), YELLOW),
        ((-0.15, -0.2, 0.0), YELLOW),
        ((0.0, 0.45, 0.0), YELLOW),
        ((0.15, -0.2, 0.0), YELLOW),
    )


def fish() -> Mesh:
    """A fish made of four triangles."""
    return _mesh(
        ((-0.15, 0.0, 0.0), PURPLE),
        ((0.02, 0.1, 0.0), PURPLE),
        ((0.02, -0.1, 0.0), PURPLE),
        ((-0.4, 0.0, 0.001), ALICE_BLUE),
        ((-0.2, 0.2, 0.001), AQUA),
        ((-0.2, -0.2, 0.001), AQUA),
        ((-0.4, 0.0, 0.001), MINT_CREAM),
        ((0.1, 0.5, 0.001), LIGHT_CORAL),
        ((0.1, -0.5, 0.001), LIGHT_CORAL),
        ((0.05, 0.0, 0.001), PURPLE),
        ((0.25, 0.25, 0.001), MEDIUM_PURPLE),
        ((0.25, -0.25, 0.001), MEDIUM_PURPLE),
    )


def diamond() -> Mesh:
    """A diamond made of four triangles around the origin."""
    return _mesh(
        ((-0.2, 0.0, 0.0), CADET_BLUE),
        ((0.0, 0.4, 0.0), WHITE),
        ((0.0, 0.0, 0.0), CADET_BLUE),
        ((0.0, 0.4, 0.0), WHITE),
        ((0.2, 0.0, 0.0), CADET_BLUE),
        ((0.0, 0.0, 0.0), CADET_BLUE),
        ((0.2, 0.0, 0.0), CADET_BLUE),
        ((0.0, -0.4, 0.0), WHITE),
        ((0.0, 0.0, 0.0), CADET_BLUE),
        ((-0.2, 0.0, 0.0), CADET_BLUE),
        ((0.0, 0.0, 0.0), CADET_BLUE),
        ((0.0, -0.4, 0.0), WHITE),
    )


def cube() -> Mesh:
    """A unit cube centred on the origin: six faces of two triangles each."""
    lo, hi = -0.5, 0.5
    return _mesh(
        # front
        ((lo, lo, lo), RED), ((lo, hi, lo), GREEN), ((hi, hi, lo), BLUE),
        ((lo, lo, lo), RED), ((hi, hi, lo), BLUE), ((hi, lo, lo), GREEN),
        # back
        ((lo, lo, hi), RED), ((hi, hi, hi), BLUE), ((lo, hi, hi), GREEN),
        ((lo, lo, hi), RED), ((hi, lo, hi), GREEN), ((hi, hi, hi), BLUE),
        # right
        ((hi, lo, lo), RED), ((hi, hi, lo), BLUE), ((hi, hi, hi), GREEN),
        ((hi, lo, lo), RED), ((hi, hi, hi), GREEN), ((hi, lo, hi), BLUE),
        # left
        ((lo, lo, lo), RED), ((lo, hi, hi), GREEN), ((lo, hi, lo), BLUE),
        ((lo, lo, lo), RED), ((lo, lo, hi), BLUE), ((lo, hi, hi), GREEN),
        # top
        ((lo, hi, lo), RED), ((lo, hi, hi), GREEN), ((hi, hi, hi), BLUE),
        ((lo, hi, lo), RED), ((hi, hi, hi), BLUE), ((hi, hi, lo), GREEN),
        # bottom
        ((lo, lo, lo), RED), ((hi, lo, hi), BLUE), ((lo, lo, hi), GREEN),
        ((lo, lo, lo), RED), ((hi, lo, lo), GREEN), ((hi, lo, hi), BLUE),
    )


SHAPES: Mapping[str, Callable[[], Mesh]] = {
    "triangle": triangle,
    "square": square,
    "star": star,
    "fish": fish,
    "diamond": diamond,
}

# Checked in order; the first key that has a transition wins.
_TRANSITIONS: Mapping[str, tuple[tuple[Key, str], ...]] = {
    "triangle": (),
    "square": (),
    "star": ((Key.RIGHT, "fish"),),
    "fish": ((Key.RIGHT, "diamond"), (Key.LEFT, "star")),
    "diamond": ((Key.LEFT, "fish"),),
}


def next_shape(current: str, key: Key | None) -> str:
    """The shape shown after pressing key while current is shown."""
    try:
        transitions = _TRANSITIONS[current]
    except KeyError:
        raise ValueError(f"unknown shape: {current!r}") from None
    for trigger, target in transitions:
        if key is trigger:
            return target
    return current


@dataclass
class CubeSpin:
    """Rotation of the spinning cube about the Y and X axes."""

    rotation_y: float = 0.0
    rotation_x: float = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the rotation by delta_time seconds."""
        self.rotation_y += HALF_PI * delta_time * 0.5
        self.rotation_x += HALF_PI * delta_time * 0.25

    def world_matrix(self) -> Matrix4:
        """World matrix: rotation about Y followed by rotation about X."""
        return Matrix4.rotation_y(self.rotation_y) * Matrix4.rotation_x(self.rotation_x)