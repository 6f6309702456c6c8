import math

import pytest

from flowerkit.matrix import Matrix4, transform_coord, transform_normal, transpose
from flowerkit.vector import HALF_PI, Quaternion, Vector3, magnitude


def approx_matrix(m):
    return pytest.approx(tuple(m), abs=1e-9)


SAMPLE = Matrix4(
    1.0, 2.0, 3.0, 4.0,
    5.0, 6.0, 7.0, 8.0,
    9.0, 10.0, 11.0, 12.0,
    13.0, 14.0, 15.0, 16.0,
)


def test_default_is_identity():
    assert Matrix4() == Matrix4.identity()
    assert tuple(Matrix4.zero()) == (0.0,) * 16


def test_wrong_value_count_raises():
    with pytest.raises(ValueError):
        Matrix4(1.0, 2.0, 3.0)


def test_identity_is_neutral():
    assert Matrix4.identity() * SAMPLE == SAMPLE
    assert SAMPLE * Matrix4.identity() == SAMPLE


def test_getitem_flat_and_pair_agree():
    for row in range(4):
        for col in range(4):
            assert SAMPLE[row, col] == SAMPLE[row * 4 + col]


def test_getitem_out_of_range():
    m = Matrix4.translation(Vector3(1.0, 2.0, 3.0))
    with pytest.raises(IndexError):
        m[4, 0]
    with pytest.raises(IndexError):
        m[16]
    assert m[3, 2] == 3.0
    assert m[15] == 1.0


def test_transpose_involution_and_swap():
    t = transpose(SAMPLE)
    assert transpose(t) == SAMPLE
    for row in range(4):
        for col in range(4):
            assert t[row, col] == SAMPLE[col, row]


def test_transpose_of_product():
    a = Matrix4.rotation_x(0.3) * Matrix4.translation(Vector3(1.0, 2.0, 3.0))
    b = Matrix4.scaling(Vector3(2.0, 0.5, 1.5)) * Matrix4.rotation_z(1.1)
    assert tuple(transpose(a * b)) == approx_matrix(transpose(b) * transpose(a))


def test_translation_moves_points_not_directions():
    offset = Vector3(3.0, -2.0, 7.5)
    m = Matrix4.translation(offset)
    assert m[3, 0] == offset.x and m[3, 1] == offset.y and m[3, 2] == offset.z
    p = Vector3(1.0, 1.0, 1.0)
    assert transform_coord(p, m) == p + offset
    assert transform_normal(p, m) == p


def test_rotation_x_quarter_turn():
    v = transform_normal(Vector3.YAXIS, Matrix4.rotation_x(HALF_PI))
    assert tuple(v) == pytest.approx((0.0, 0.0, 1.0), abs=1e-9)


@pytest.mark.parametrize("factory", [Matrix4.rotation_x, Matrix4.rotation_y, Matrix4.rotation_z])
@pytest.mark.parametrize("angle", [0.0, 0.4, 1.7, -2.9])
def test_rotation_preserves_length(factory, angle):
    v = Vector3(1.0, -2.0, 3.5)
    assert magnitude(transform_normal(v, factory(angle))) == pytest.approx(magnitude(v))


@pytest.mark.parametrize(
    "axis, factory",
    [
        (Vector3.XAXIS, Matrix4.rotation_x),
        (Vector3.YAXIS, Matrix4.rotation_y),
        (Vector3.ZAXIS, Matrix4.rotation_z),
    ],
)
def test_rotation_axis_matches_principal_rotations(axis, factory):
    assert tuple(Matrix4.rotation_axis(axis, 0.8)) == approx_matrix(factory(0.8))
    assert tuple(Matrix4.rotation_axis(axis * 5.0, 0.8)) == approx_matrix(factory(0.8))


def test_rotation_axis_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Matrix4.rotation_axis(Vector3.ZERO, 1.0)


def test_rotations_compose():
    a, b = 0.35, 1.2
    combined = Matrix4.rotation_y(a) * Matrix4.rotation_y(b)
    assert tuple(combined) == approx_matrix(Matrix4.rotation_y(a + b))


def test_rotation_quaternion_identity():
    assert Matrix4.rotation_quaternion(Quaternion.IDENTITY) == Matrix4.identity()


def test_rotation_quaternion_about_z():
    angle = 0.9
    q = Quaternion(0.0, 0.0, math.sin(angle / 2), math.cos(angle / 2))
    assert tuple(Matrix4.rotation_quaternion(q)) == approx_matrix(Matrix4.rotation_z(angle))


def test_scaling_uniform_and_vector_agree():
    assert Matrix4.scaling(2.5) == Matrix4.scaling(Vector3(2.5, 2.5, 2.5))


def test_scaling_applies_per_axis():
    s = Vector3(2.0, 3.0, 4.0)
    assert transform_coord(Vector3.ONE, Matrix4.scaling(s)) == s


def test_arithmetic_round_trips():
    assert SAMPLE + (-SAMPLE) == Matrix4.zero()
    assert SAMPLE - SAMPLE == Matrix4.zero()
    assert (SAMPLE * 2.0) / 2.0 == SAMPLE
    assert 2.0 * SAMPLE == SAMPLE + SAMPLE


def test_multiply_by_unsupported_type_raises():
    m = Matrix4.scaling(2.0)
    with pytest.raises(TypeError):
        m * "matrix"
    assert m * 1.0 == Matrix4.scaling(2.0)


def test_matrices_are_hashable_and_equal_by_value():
    assert hash(Matrix4()) == hash(Matrix4.identity())
    assert len({Matrix4(), Matrix4.identity(), SAMPLE}) == 2