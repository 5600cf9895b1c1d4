import math

import pytest

from the_cube.linalg import Matrix4, Vector3, Vector4, add, subtract

IDENTITY = Matrix4((1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1))
A = Matrix4(tuple(range(1, 17)))
B = Matrix4((2, -1, 0, 3, 1, 4, -2, 0, 0, 5, 1, -1, 7, 0, 2, 1))
C = Matrix4((0, 1, 0, 0, 1, 0, 0, 0, 0, 0, 3, 0, -2, 0, 0, 1))


def test_add_and_subtract_round_trip():
    a = (1.5, -2.0, 3.25)
    b = (0.5, 4.0, -1.0)
    assert subtract(add(a, b), b) == a


def test_subtract_self_is_zero():
    a = (7.0, -3.0, 2.0, 9.0)
    assert subtract(a, a) == (0.0, 0.0, 0.0, 0.0)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        add((1.0, 2.0), (1.0,))
    with pytest.raises(ValueError):
        subtract((1.0,), (1.0, 2.0, 3.0))


def test_matrix_needs_sixteen_values():
    with pytest.raises(ValueError):
        Matrix4((1.0, 2.0, 3.0))


def test_zero_constructors():
    assert Matrix4.zero().values == (0.0,) * 16
    assert tuple(Vector3.zero()) == (0.0, 0.0, 0.0)
    assert tuple(Vector4.zero()) == (0.0, 0.0, 0.0, 0.0)


def test_identity_is_neutral():
    assert (A @ IDENTITY) == A
    assert (IDENTITY @ A) == A


def test_zero_matrix_annihilates():
    assert (A @ Matrix4.zero()) == Matrix4.zero()


def test_product_matches_composed_transform():
    v = Vector4(1, -2, 3, 1)
    assert (A @ B).transform(v) == A.transform(B.transform(v))


def test_product_is_associative():
    assert ((A @ B) @ C) == (A @ (B @ C))


def test_transform_of_unit_vector_picks_column():
    assert A.transform(Vector4(1, 0, 0, 0)) == Vector4(1, 5, 9, 13)


def test_matmul_with_vector_transforms():
    v = Vector4(2, 0, -1, 1)
    assert (B @ v) == B.transform(v)


def test_matmul_with_other_type_fails():
    matrix = Matrix4(tuple(range(1, 17)))
    with pytest.raises(TypeError) as excinfo:
        matrix @ 3
    assert excinfo.type is TypeError
    assert matrix.values == tuple(float(value) for value in range(1, 17))


def test_normalized_has_unit_length_and_same_direction():
    v = Vector3(3.0, 4.0, 12.0)
    n = v.normalized()
    assert math.sqrt(sum(c * c for c in n)) == pytest.approx(1.0)
    assert n.cross(v).normalized() == Vector3.zero()


def test_normalized_zero_stays_zero():
    assert Vector3.zero().normalized() == Vector3.zero()


def test_cross_of_axes():
    x = Vector3(1, 0, 0)
    y = Vector3(0, 1, 0)
    assert x.cross(y) == Vector3(0, 0, 1)


def test_cross_is_anticommutative_and_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert tuple(c) == tuple(-value for value in b.cross(a))
    assert sum(p * q for p, q in zip(c, a)) == pytest.approx(0.0)
    assert sum(p * q for p, q in zip(c, b)) == pytest.approx(0.0)