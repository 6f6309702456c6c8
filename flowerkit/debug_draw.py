"""Settings for the debug shape viewer and which of them each shape uses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from flowerkit.colors import ALICE_BLUE, Color
from flowerkit.vector import Vector3


class DebugDrawType(IntEnum):
    """The debug shapes that can be drawn."""

    NONE = 0
    TRANSFORM = 1
    GROUND_PLANE = 2
    GROUND_CIRCLE = 3
    SPHERE = 4
    AABB = 5
    AABB_FILLED = 6
    DIAMOND = 7


_DRAW_TYPE_NAMES = (
    "None",
    "Transform",
    "GroundPlane",
    "GroudnCircle",
    "Sphere",
    "AABB",
    "AABBFilled",
    "Diamond",
)

_FIELDS = {
    DebugDrawType.NONE: (),
    DebugDrawType.TRANSFORM: (),
    DebugDrawType.GROUND_PLANE: ("plane_size",),
    DebugDrawType.GROUND_CIRCLE: ("slices", "radius", "position"),
    DebugDrawType.SPHERE: ("slices", "rings", "radius", "position"),
    DebugDrawType.AABB: ("min_extents", "max_extents"),
    DebugDrawType.AABB_FILLED: ("min_extents", "max_extents"),
    DebugDrawType.DIAMOND: ("top", "bottom", "base", "position"),
}


def draw_type_names() -> list[str]:
    """Display names of the draw types, indexed by their value."""
    return list(_DRAW_TYPE_NAMES)


@dataclass
class DebugDrawSettings:
    """The shape selected for drawing and the parameters the shapes are drawn with."""

    draw_type: DebugDrawType = DebugDrawType.NONE
    color: Color = ALICE_BLUE
    position: Vector3 = Vector3.ZERO
    plane_size: float = 10.0
    radius: float = 2.0
    slices: float = 10.0
    rings: float = 10.0
    min_extents: Vector3 = Vector3.ZERO
    max_extents: Vector3 = Vector3.ZERO
    top: float = 1.0
    bottom: float = -1.0
    base: float = 0.5

    def editable_fields(self, draw_type: Optional[DebugDrawType] = None) -> tuple[str, ...]:
        """Names of the settings shown for a draw type (the current one by default).

        The color is editable for every type and always comes last.
        """
        chosen = self.draw_type if draw_type is None else DebugDrawType(draw_type)
        return _FIELDS[chosen] + ("color",)