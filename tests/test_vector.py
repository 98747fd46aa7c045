import math

import pytest

from robotsiege.vector import Vector3, cross, normalize


def test_default_is_zero_vector():
    assert tuple(Vector3()) == (0.0, 0.0, 0.0)


def test_cross_of_basis_vectors():
    x_axis = Vector3(1.0, 0.0, 0.0)
    y_axis = Vector3(0.0, 1.0, 0.0)
    assert x_axis.cross(y_axis) == Vector3(0.0, 0.0, 1.0)


def test_cross_is_perpendicular_to_both_operands():
    a = Vector3(1.5, -2.0, 3.0)
    b = Vector3(-0.5, 4.0, 2.5)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(4.0, -5.0, 6.0)
    assert a.cross(b) == -b.cross(a)


def test_cross_function_matches_method():
    a = Vector3(0.3, 0.1, -0.7)
    b = Vector3(2.0, 0.0, 1.0)
    assert cross(a, b) == a.cross(b)


def test_dot_is_commutative_and_matches_length():
    a = Vector3(1.0, -2.0, 2.0)
    b = Vector3(3.0, 0.5, -1.0)
    assert a.dot(b) == b.dot(a)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_length_of_pythagorean_vector():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


@pytest.mark.parametrize(
    "vector",
    [Vector3(1.0, 2.0, 3.0), Vector3(-7.0, 0.0, 0.5), Vector3(0.0, 0.0, -9.0)],
)
def test_normalized_has_unit_length_and_same_direction(vector):
    unit = vector.normalized()
    assert unit.length() == pytest.approx(1.0)
    assert unit.dot(vector) == pytest.approx(vector.length())


def test_normalized_zero_vector_stays_zero():
    assert Vector3().normalized() == Vector3()
    assert normalize(Vector3()) == Vector3()


def test_normalize_function_matches_method():
    v = Vector3(2.0, -3.0, 6.0)
    assert normalize(v) == v.normalized()


def test_add_and_sub_round_trip():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(0.5, -4.0, 10.0)
    assert (a + b) - b == a


def test_scalar_multiplication_both_sides():
    v = Vector3(1.0, -2.0, 0.5)
    assert v * 2.0 == 2.0 * v
    assert (v * 2.0).length() == pytest.approx(2.0 * v.length())


def test_division_inverts_multiplication():
    v = Vector3(1.0, -2.0, 0.5)
    assert (v * 4.0) / 4.0 == v


def test_division_by_zero_yields_zero_vector():
    assert Vector3(1.0, 2.0, 3.0) / 0.0 == Vector3()


def test_negation_sums_to_zero():
    v = Vector3(1.0, -2.0, 3.5)
    assert v + (-v) == Vector3()


def test_multiplying_by_non_number_raises():
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0, 3.0) * "x"


def test_adding_non_vector_raises():
    with pytest.raises(TypeError):
        Vector3(1.0, 2.0, 3.0) + 1.0


def test_vectors_are_immutable():
    v = Vector3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        v.x = 5.0  # type: ignore[misc]
    assert math.isclose(v.x, 1.0)