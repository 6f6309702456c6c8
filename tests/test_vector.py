import math

import pytest

from flowerkit.vector import (
    DEG_TO_RAD,
    HALF_PI,
    PI,
    RAD_TO_DEG,
    TWO_PI,
    Quaternion,
    Vector2,
    Vector3,
    Vector4,
    clamp,
    cross,
    distance,
    distance_sqr,
    dot,
    lerp,
    magnitude,
    magnitude_sqr,
    normalize,
    sqr,
)


def test_constants_are_consistent():
    assert lerp(0.0, TWO_PI, 0.5) == pytest.approx(math.pi)
    assert lerp(0.0, PI, 0.5) == pytest.approx(HALF_PI)
    assert sqr(DEG_TO_RAD * RAD_TO_DEG) == pytest.approx(1.0)
    assert magnitude(Vector3(180 * DEG_TO_RAD, 0.0, 0.0)) == pytest.approx(PI)


def test_default_vectors_are_zero():
    assert Vector2() == Vector2.ZERO
    assert Vector3() == Vector3.ZERO
    assert tuple(Vector4()) == (0.0, 0.0, 0.0, 0.0)


def test_axis_constants():
    assert dot(Vector3.XAXIS, Vector3(1.0, 2.0, 3.0)) == 1.0
    assert dot(Vector3.ZAXIS, Vector3(1.0, 2.0, 3.0)) == 3.0
    assert tuple(Vector2.YAXIS * 3.0) == (0.0, 3.0)
    assert tuple(Quaternion.IDENTITY * 2.0) == (0.0, 0.0, 0.0, 2.0)


@pytest.mark.parametrize(
    "a, b",
    [
        (Vector2(1.5, -2.0), Vector2(0.25, 4.0)),
        (Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 2.0)),
        (Vector4(1.0, 2.0, 3.0, 4.0), Vector4(0.5, -1.0, 2.0, 8.0)),
    ],
)
def test_add_sub_round_trip(a, b):
    assert (a + b) - b == a
    assert a - a == type(a)()
    assert a + (-a) == type(a)()


@pytest.mark.parametrize(
    "v",
    [Vector2(3.0, -6.0), Vector3(2.0, 4.0, -8.0), Vector4(1.0, 2.0, 4.0, 8.0), Quaternion(1.0, 2.0, 3.0, 4.0)],
)
def test_mul_div_round_trip(v):
    assert (v * 4.0) / 4.0 == v
    assert 2.0 * v == v * 2.0
    assert v + v == v * 2.0


def test_vector3_componentwise_ops():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(10.0, 20.0, 30.0)
    s = a + b
    assert (s.x, s.y, s.z) == (a.x + b.x, a.y + b.y, a.z + b.z)
    n = -a
    assert (n.x, n.y, n.z) == (-a.x, -a.y, -a.z)


def test_vector4_color_aliases():
    c = Vector4(0.1, 0.2, 0.3, 0.4)
    assert (c.r, c.g, c.b, c.a) == (c.x, c.y, c.z, c.w)


def test_quaternion_add():
    q = Quaternion(1.0, 2.0, 3.0, 4.0)
    assert q + Quaternion.ZERO == q
    assert q + q == q * 2.0


def test_vector_times_vector_is_type_error():
    v = Vector3(1.0, 1.0, 1.0)
    with pytest.raises(TypeError):
        v * Vector3(1.0, 1.0, 1.0)
    assert v * 2.0 == Vector3(2.0, 2.0, 2.0)


def test_adding_mismatched_types_is_type_error():
    v = Vector3(1.0, 1.0, 1.0)
    with pytest.raises(TypeError):
        v + Vector2(1.0, 1.0)
    assert v + Vector3(1.0, 1.0, 1.0) == Vector3(2.0, 2.0, 2.0)


def test_division_by_zero_raises():
    v = Vector3(1.0, 1.0, 1.0)
    with pytest.raises(ZeroDivisionError):
        v / 0.0
    assert v / 2.0 == Vector3(0.5, 0.5, 0.5)


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0
    assert v.x == 1.0


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-3, 0, 10) == 0
    assert clamp(42, 0, 10) == 10


def test_lerp_endpoints_and_midpoint():
    a = Vector3(0.0, 2.0, -4.0)
    b = Vector3(4.0, 6.0, 8.0)
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b
    mid = lerp(a, b, 0.5)
    assert distance(a, mid) == pytest.approx(distance(mid, b))
    assert lerp(2.0, 10.0, 0.0) == 2.0


def test_sqr():
    assert sqr(3) == 9
    assert sqr(-2.5) == sqr(2.5)


def test_dot_of_axes():
    assert dot(Vector3.XAXIS, Vector3.YAXIS) == 0.0
    assert dot(Vector3.ZAXIS, Vector3.ZAXIS) == 1.0


def test_magnitude_relations():
    v = Vector3(3.0, -4.0, 12.0)
    assert magnitude(v) ** 2 == pytest.approx(magnitude_sqr(v))
    assert magnitude_sqr(v) == pytest.approx(dot(v, v))
    assert magnitude(v * 2.0) == pytest.approx(2.0 * magnitude(v))


def test_distance_properties():
    a = Vector3(1.0, -2.0, 3.0)
    b = Vector3(-4.0, 5.0, 0.5)
    assert distance(a, b) == pytest.approx(distance(b, a))
    assert distance(a, b) ** 2 == pytest.approx(distance_sqr(a, b))
    assert distance(a, a) == 0.0
    assert distance(a, b) == pytest.approx(magnitude(a - b))


def test_normalize_gives_unit_length():
    v = Vector3(2.0, -7.0, 3.5)
    n = normalize(v)
    assert magnitude(n) == pytest.approx(1.0)
    assert magnitude(cross(n, v)) == pytest.approx(0.0, abs=1e-12)
    assert dot(n, v) > 0


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(Vector3.ZERO)


def test_cross_of_axes():
    assert cross(Vector3.XAXIS, Vector3.YAXIS) == Vector3.ZAXIS
    assert cross(Vector3.YAXIS, Vector3.XAXIS) == -Vector3.ZAXIS


def test_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert dot(c, a) == pytest.approx(0.0)
    assert dot(c, b) == pytest.approx(0.0)