import dataclasses
import math

import pytest

from lumina.vector3d import (
    Vector3D,
    cross_product,
    dot_product,
    triple_product,
    unit_vector,
)

A = Vector3D(1.0, 2.0, 3.0)
B = Vector3D(-4.0, 0.5, 2.0)
C = Vector3D(0.25, -1.0, 8.0)


def test_components_and_indexing():
    assert tuple(A) == (1.0, 2.0, 3.0)
    assert A[0] == A.x and A[1] == A.y and A[2] == A.z


def test_add_sub_round_trip():
    assert (A + B) - B == A


def test_addition_commutes():
    assert A + B == B + A


def test_negation_cancels():
    assert (A + (-A)).squared_length() == 0
    assert +A == A


def test_scalar_multiplication_both_sides():
    assert A * 2 == 2 * A
    assert (A * 4) / 4 == A


def test_squared_length_matches_dot():
    assert A.squared_length() == dot_product(A, A)
    assert math.isclose(A.length() ** 2, A.squared_length())


def test_normalized_has_unit_length():
    assert math.isclose(B.normalized().length(), 1.0)


def test_unit_vector_matches_normalized():
    assert unit_vector(C) == C.normalized()


def test_zero_vector_cannot_be_normalized():
    with pytest.raises(ZeroDivisionError):
        Vector3D().normalized()
    with pytest.raises(ZeroDivisionError):
        unit_vector(Vector3D(0.0, 0.0, 0.0))


def test_cross_product_is_orthogonal():
    n = cross_product(A, B)
    assert math.isclose(dot_product(n, A), 0.0, abs_tol=1e-12)
    assert math.isclose(dot_product(n, B), 0.0, abs_tol=1e-12)


def test_cross_product_anticommutes():
    assert cross_product(A, B) == -cross_product(B, A)


def test_cross_product_of_axes():
    x = Vector3D(1.0, 0.0, 0.0)
    y = Vector3D(0.0, 1.0, 0.0)
    assert cross_product(x, y) == Vector3D(0.0, 0.0, 1.0)


def test_dot_product_symmetric():
    assert dot_product(A, B) == dot_product(B, A)


def test_triple_product_cyclic():
    assert math.isclose(triple_product(A, B, C), triple_product(B, C, A))
    assert math.isclose(triple_product(A, B, C), -triple_product(B, A, C))


def test_triple_product_degenerate():
    assert triple_product(A, A, C) == 0


def test_vectors_are_immutable():
    v = Vector3D(1.0, 2.0, 3.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 5.0  # type: ignore[misc]
    assert tuple(v) == (1.0, 2.0, 3.0)