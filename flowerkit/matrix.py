"""A 4x4 row-major matrix for row-vector transforms."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable, Iterator, Union

from flowerkit.vector import Quaternion, Vector3, normalize

_IDENTITY = (
    1.0, 0.0, 0.0, 0.0,
    0.0, 1.0, 0.0, 0.0,
    0.0, 0.0, 1.0, 0.0,
    0.0, 0.0, 0.0, 1.0,
)


class Matrix4:
    """Immutable 4x4 matrix; with no arguments it is the identity."""

    __slots__ = ("_values",)

    def __init__(self, *values: float) -> None:
        if not values:
            values = _IDENTITY
        if len(values) != 16:
            raise ValueError(f"Matrix4 needs 16 values, got {len(values)}")
        self._values = tuple(float(v) for v in values)

    @classmethod
    def _of(cls, values: Iterable[float]) -> Matrix4:
        return cls(*values)

    @classmethod
    def identity(cls) -> Matrix4:
        return cls(*_IDENTITY)

    @classmethod
    def zero(cls) -> Matrix4:
        return cls(*([0.0] * 16))

    @classmethod
    def translation(cls, offset: Vector3) -> Matrix4:
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, 1.0, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            offset.x, offset.y, offset.z, 1.0,
        )

    @classmethod
    def rotation_x(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            1.0, 0.0, 0.0, 0.0,
            0.0, c, s, 0.0,
            0.0, -s, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_y(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, 0.0, -s, 0.0,
            0.0, 1.0, 0.0, 0.0,
            s, 0.0, c, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_z(cls, rad: float) -> Matrix4:
        c, s = math.cos(rad), math.sin(rad)
        return cls(
            c, s, 0.0, 0.0,
            -s, c, 0.0, 0.0,
            0.0, 0.0, 1.0, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_axis(cls, axis: Vector3, rad: float) -> Matrix4:
        """Rotation about an arbitrary axis; the axis is normalized first."""
        x, y, z = normalize(axis)
        s, c = math.sin(rad), math.cos(rad)
        t = 1.0 - c
        return cls(
            c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0,
            x * y * t - z * s, c + y * y * t, y * z * t + x * s, 0.0,
            x * z * t + y * s, y * z * t - x * s, c + z * z * t, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def rotation_quaternion(cls, q: Quaternion) -> Matrix4:
        x, y, z, w = q
        return cls(
            1.0 - 2.0 * y * y - 2.0 * z * z,
            2.0 * x * y + 2.0 * z * w,
            2.0 * x * z - 2.0 * y * w,
            0.0,
            2.0 * x * y - 2.0 * z * w,
            1.0 - 2.0 * x * x - 2.0 * z * z,
            2.0 * y * z + 2.0 * x * w,
            0.0,
            2.0 * x * z + 2.0 * y * w,
            2.0 * y * z - 2.0 * x * w,
            1.0 - 2.0 * x * x - 2.0 * y * y,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def scaling(cls, factor: Union[float, Vector3]) -> Matrix4:
        """Uniform scaling from a number, per-axis scaling from a Vector3."""
        if isinstance(factor, Vector3):
            sx, sy, sz = factor
        else:
            sx = sy = sz = float(factor)
        return cls(
            sx, 0.0, 0.0, 0.0,
            0.0, sy, 0.0, 0.0,
            0.0, 0.0, sz, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @property
    def rows(self) -> tuple[tuple[float, ...], ...]:
        v = self._values
        return tuple(v[i:i + 4] for i in range(0, 16, 4))

    @property
    def columns(self) -> tuple[tuple[float, ...], ...]:
        return tuple(zip(*self.rows))

    def __getitem__(self, key: Union[int, tuple[int, int]]) -> float:
        """Element by flat index, or by (row, column) counted from zero."""
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < 4 and 0 <= col < 4):
                raise IndexError(f"matrix index {key} out of range")
            return self._values[row * 4 + col]
        return self._values[key]

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __len__(self) -> int:
        return 16

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Matrix4{self._values!r}"

    def __neg__(self) -> Matrix4:
        return self._of(-v for v in self._values)

    def __add__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._of(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return self._of(a - b for a, b in zip(self._values, other._values))

    def __mul__(self, other: Union[Matrix4, float]) -> Matrix4:
        if isinstance(other, Matrix4):
            cols = other.columns
            return self._of(
                sum(a * b for a, b in zip(row, col)) for row in self.rows for col in cols
            )
        if isinstance(other, Real):
            return self._of(v * other for v in self._values)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Matrix4:
        if isinstance(scalar, Real):
            return self._of(v * scalar for v in self._values)
        return NotImplemented

    def __truediv__(self, scalar: float) -> Matrix4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return self._of(v / scalar for v in self._values)


def transpose(m: Matrix4) -> Matrix4:
    """The matrix with rows and columns swapped."""
    return Matrix4(*(v for col in m.columns for v in col))


def transform_coord(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a point (w = 1) by m, including translation."""
    return Vector3(*(v.x * m[0, c] + v.y * m[1, c] + v.z * m[2, c] + m[3, c] for c in range(3)))


def transform_normal(v: Vector3, m: Matrix4) -> Vector3:
    """Transform a direction (w = 0) by m, ignoring translation."""
    return Vector3(*(v.x * m[0, c] + v.y * m[1, c] + v.z * m[2, c] for c in range(3)))