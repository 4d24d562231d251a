import math

import pytest

from fortresstanks.geometry import Vector


def test_add_then_sub_round_trip():
    a = Vector(1.5, -2.0)
    b = Vector(3.25, 7.5)
    assert (a + b) - b == a


def test_add_is_commutative():
    a = Vector(1.0, 2.0)
    b = Vector(-4.0, 0.5)
    assert a + b == b + a


def test_add_does_not_mutate_operands():
    a = Vector(1.0, 2.0)
    b = Vector(3.0, 4.0)
    a + b
    assert a == Vector(1.0, 2.0)
    assert b == Vector(3.0, 4.0)


def test_mul_by_one_and_zero():
    a = Vector(2.5, -3.0)
    assert a * 1 == a
    assert a * 0 == Vector()


def test_rmul_matches_mul():
    a = Vector(2.0, -3.0)
    assert 2.5 * a == a * 2.5


def test_mul_scales_length():
    a = Vector(3.0, 4.0)
    assert (a * 2).length() == pytest.approx(a.length() * 2)


def test_iadd_mutates_in_place():
    a = Vector(1.0, 1.0)
    ref = a
    a += Vector(2.0, 3.0)
    assert a is ref
    assert a - Vector(2.0, 3.0) == Vector(1.0, 1.0)


def test_isub_undoes_iadd():
    a = Vector(1.0, 2.0)
    ref = a
    a += Vector(5.0, -6.0)
    a -= Vector(5.0, -6.0)
    assert a is ref
    assert a == Vector(1.0, 2.0)


def test_imul_mutates_in_place():
    a = Vector(1.0, -2.0)
    ref = a
    a *= 0
    assert a is ref
    assert a == Vector(0.0, 0.0)


def test_length_of_three_four():
    assert Vector(3.0, 4.0).length() == pytest.approx(5.0)


def test_length_squared_equals_self_dot():
    a = Vector(2.0, -7.0)
    assert a.length_squared() == pytest.approx(a.dot(a))
    assert a.length() == pytest.approx(math.sqrt(a.length_squared()))


def test_normalize_gives_unit_length_same_direction():
    a = Vector(6.0, -8.0)
    original = Vector(a.x, a.y)
    a.normalize()
    assert a.length() == pytest.approx(1.0)
    assert a.cross(original) == pytest.approx(0.0)
    assert a.dot(original) > 0


def test_normalize_zero_vector_is_unchanged():
    a = Vector()
    a.normalize()
    assert a == Vector(0.0, 0.0)


def test_dot_of_perpendicular_is_zero():
    assert Vector(1.0, 0.0).dot(Vector(0.0, 1.0)) == 0.0


def test_cross_is_antisymmetric():
    a = Vector(2.0, 3.0)
    b = Vector(-1.0, 5.0)
    assert a.cross(b) == pytest.approx(-b.cross(a))
    assert a.cross(a) == 0.0


def test_iteration_unpacks_components():
    x, y = Vector(4.0, -1.0)
    assert (x, y) == (4.0, -1.0)


def test_add_with_non_vector_raises():
    with pytest.raises(TypeError):
        Vector(1.0, 1.0) + 3