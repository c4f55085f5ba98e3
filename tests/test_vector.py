import math

import pytest

from math3d.vector import Vector, new_vector, standard_basis_vector, unit_vector, zero_vector


def test_new_vector_length_matches_argument_count():
    assert len(new_vector()) == 0
    v = new_vector(1, 2, 3)
    assert len(v) == 3
    assert v.components == (1.0, 2.0, 3.0)
    assert all(isinstance(s, float) for s in v)


def test_standard_basis_is_canonical_and_orthogonal():
    for n in range(1, 6):
        basis = standard_basis_vector(n)
        assert len(basis) == n
        for i, b in enumerate(basis):
            assert len(b) == n
            assert b[i] == 1.0
            assert sum(1 for s in b if s != 0.0) == 1
            for j, other in enumerate(basis):
                expected = 1.0 if i == j else 0.0
                assert b.inner(other) == expected
    assert standard_basis_vector(0) == []


def test_standard_basis_method_uses_own_dimension():
    assert new_vector(7, 8, 9).standard_basis() == standard_basis_vector(3)


def test_unit_vector_is_all_zero():
    # Intentional oddity: the "unit" vector is the zero vector.
    assert unit_vector(3) == zero_vector(3) == Vector((0.0, 0.0, 0.0))
    assert new_vector(4, 5).unit_vector() == zero_vector(2)
    assert new_vector(4, 5).zero_vector().is_zero()


def test_add_and_sub_are_inverse():
    v = new_vector(0.1, -2.5, 3.75)
    w = new_vector(1.2, 0.3, -9.0)
    assert v.add(w) == new_vector(0.1 + 1.2, -2.5 + 0.3, 3.75 - 9.0)
    restored = v.add(w).sub(w)
    for got, want in zip(restored, v):
        assert math.isclose(got, want, abs_tol=1e-12)


def test_operands_are_not_mutated():
    v = new_vector(1, 2)
    w = new_vector(3, 4)
    v.add(w)
    v.mul(10)
    v.normalize()
    assert v == new_vector(1, 2)
    assert w == new_vector(3, 4)


def test_dot_is_element_wise_product():
    # Intentional oddity: dot returns a vector; inner is the scalar product.
    v = new_vector(1, 2, 3)
    w = new_vector(4, 5, 6)
    assert v.dot(w) == new_vector(4, 10, 18)
    assert v.inner(w) == 32.0


def test_mul_and_div():
    v = new_vector(2, -4)
    assert v.mul(0.5) == new_vector(1, -2)
    assert v.div(2) == new_vector(1, -2)


def test_div_by_zero_follows_ieee():
    result = new_vector(1, -1, 0).div(0)
    assert result[0] == math.inf
    assert result[1] == -math.inf
    assert math.isnan(result[2])


def test_norms():
    v = new_vector(3, -4)
    assert v.length() == 5.0
    assert v.length_squared() == 25.0
    assert v.manhattan_distance() == 7.0
    w = new_vector(0.3, 1.7, -2.9, 4.1)
    assert math.isclose(w.length_squared(), w.length() ** 2)


def test_is_zero_has_no_tolerance():
    assert zero_vector(4).is_zero()
    assert new_vector(0.0, -0.0).is_zero()
    assert not new_vector(0.0, 1e-300).is_zero()


def test_normalize():
    v = new_vector(3, 4, 12)
    n = v.normalize()
    assert math.isclose(n.length(), 1.0)
    assert math.isclose(n[0], 3 / 13)
    assert new_vector(0, 0, 0).normalize() == zero_vector(3)


def test_operator_sugar_matches_named_operations():
    v = new_vector(1, 2)
    w = new_vector(3, 5)
    assert v + w == v.add(w)
    assert w - v == w.sub(v)
    assert -v == new_vector(-1, -2)
    assert v * 3 == 3 * v == v.mul(3)
    assert w / 2 == w.div(2)


def test_shorter_operand_fails_fast():
    with pytest.raises(IndexError):
        new_vector(1, 2, 3).add(new_vector(1, 2))


def test_longer_operand_extra_components_ignored():
    assert new_vector(1, 2).add(new_vector(1, 1, 99)) == new_vector(2, 3)


def test_normalize_underflowing_length_does_not_raise():
    # Squared length underflows to 0.0 although the vector is not zero.
    v = new_vector(1e-200, 0.0)
    assert not v.is_zero()
    n = v.normalize()
    assert n[0] == math.inf
    assert math.isnan(n[1])
