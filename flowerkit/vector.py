"""Small vector and quaternion types with the common scalar helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar, Iterator, TypeVar

PI = 3.1415926535
HALF_PI = PI * 0.5
TWO_PI = PI * 2.0
DEG_TO_RAD = PI / 180.0
RAD_TO_DEG = 180.0 / PI

T = TypeVar("T")


@dataclass(frozen=True)
class Vector2:
    """A two-component vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vector2]
    ONE: ClassVar[Vector2]
    XAXIS: ClassVar[Vector2]
    YAXIS: ClassVar[Vector2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector2(self.x / scalar, self.y / scalar)


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vector3]
    ONE: ClassVar[Vector3]
    XAXIS: ClassVar[Vector3]
    YAXIS: ClassVar[Vector3]
    ZAXIS: ClassVar[Vector3]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)


@dataclass(frozen=True)
class Vector4:
    """A four-component vector, also addressable as r, g, b, a."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    @property
    def a(self) -> float:
        return self.w

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Vector4:
        return Vector4(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __mul__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector4(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector4(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)


@dataclass(frozen=True)
class Quaternion:
    """A quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    IDENTITY: ClassVar[Quaternion]
    ZERO: ClassVar[Quaternion]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __add__(self, other: Quaternion) -> Quaternion:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __mul__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Quaternion:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quaternion(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.ONE = Vector2(1.0, 1.0)
Vector2.XAXIS = Vector2(1.0, 0.0)
Vector2.YAXIS = Vector2(0.0, 1.0)

Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
Vector3.XAXIS = Vector3(1.0, 0.0, 0.0)
Vector3.YAXIS = Vector3(0.0, 1.0, 0.0)
Vector3.ZAXIS = Vector3(0.0, 0.0, 1.0)

Quaternion.IDENTITY = Quaternion(0.0, 0.0, 0.0, 1.0)
Quaternion.ZERO = Quaternion(0.0, 0.0, 0.0, 0.0)


def clamp(value: T, low: T, high: T) -> T:
    """Limit value to the range [low, high]."""
    return max(low, min(high, value))


def lerp(a: T, b: T, t: float) -> T:
    """Linear interpolation from a to b by t."""
    return a + (b - a) * t


def sqr(value: T) -> T:
    """The value multiplied by itself."""
    return value * value


def dot(a: Vector3, b: Vector3) -> float:
    """Dot product of two 3D vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def magnitude_sqr(a: Vector3) -> float:
    """Squared length of a 3D vector."""
    return a.x * a.x + a.y * a.y + a.z * a.z


def magnitude(a: Vector3) -> float:
    """Length of a 3D vector."""
    return math.sqrt(magnitude_sqr(a))


def distance_sqr(a: Vector3, b: Vector3) -> float:
    """Squared distance between two points."""
    return abs(magnitude_sqr(a - b))


def distance(a: Vector3, b: Vector3) -> float:
    """Distance between two points."""
    return math.sqrt(distance_sqr(a, b))


def normalize(a: Vector3) -> Vector3:
    """Unit vector in the direction of a; raises ZeroDivisionError for a zero vector."""
    return a / magnitude(a)


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Cross product of two 3D vectors."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )