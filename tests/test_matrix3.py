import math

import pytest

from robocar.matrix3 import Matrix3, identity, outer, zeros

A = Matrix3(2, 1, 0, -1, 3, 4, 0.5, -2, 1)
B = Matrix3(1, 0, 2, 3, -1, 1, 0, 4, 2)


def close(m1, m2):
    return all(math.isclose(x, y, abs_tol=1e-9) for x, y in zip(m1.data(), m2.data()))


def vclose(v1, v2):
    return all(math.isclose(x, y, abs_tol=1e-9) for x, y in zip(v1, v2))


def test_default_is_identity():
    assert Matrix3() == identity()
    assert identity().data() == (1, 0, 0, 0, 1, 0, 0, 0, 1)
    assert zeros().data() == (0.0,) * 9


def test_fill_constructor():
    assert Matrix3(2.5).data() == (2.5,) * 9


def test_constructors_agree():
    flat = Matrix3(*range(9))
    assert flat == Matrix3([[0, 1, 2], [3, 4, 5], [6, 7, 8]])
    assert flat == Matrix3(list(range(9)))
    assert Matrix3(flat) == flat
    assert flat.row(1) == (3, 4, 5)
    assert flat.column(1) == (1, 4, 7)
    assert list(flat) == [(0, 1, 2), (3, 4, 5), (6, 7, 8)]


def test_bad_shapes_raise():
    with pytest.raises(ValueError):
        Matrix3([1, 2, 3, 4])
    with pytest.raises(TypeError):
        Matrix3(1, 2)
    with pytest.raises(IndexError):
        identity().row(3)
    with pytest.raises(IndexError):
        identity().column(-1)


def test_item_access():
    m = identity()
    m[1, 2] = 7
    assert m[1][2] == 7
    m[0] = (4, 5, 6)
    assert m.row(0) == (4, 5, 6)
    assert m[0, 1] == 5


def test_add_sub_neg():
    assert close((A + B) - B, A)
    assert close((A + 1) - 1, A)
    assert -(-A) == A
    assert A - A == zeros()


def test_scalar_mul_div():
    assert close((A * 2) / 2, A)
    assert 3 * A == A * 3
    with pytest.raises(ZeroDivisionError):
        A / 0


def test_product_applies_left_first():
    v = (1.0, -2.0, 0.5)
    assert vclose((A * B) * v, B * (A * v))
    assert identity() * A == A
    assert A * identity() == A


def test_row_vector_product():
    v = (0.3, 1.5, -2.0)
    result = tuple(v * A)
    assert len(result) == 3
    assert vclose(result, A.transpose() * v)
    assert tuple((1.0, 0.0, 0.0) * A) == A.row(0)
    assert tuple((0.0, 0.0, 1.0) * A) == A.row(2)


def test_determinant_properties():
    assert identity().determinant() == 1
    assert math.isclose((A * B).determinant(), A.determinant() * B.determinant())
    assert math.isclose(A.transpose().determinant(), A.determinant())


def test_inverse_round_trip():
    assert identity().inverse() == identity()
    product = A.inverse() * A
    assert product.data() == pytest.approx(identity().data(), abs=1e-9)
    other = B * B.inverse()
    assert other.data() == pytest.approx(identity().data(), abs=1e-9)


def test_singular_inverse_raises():
    with pytest.raises(ValueError):
        outer((1, 2, 3), (4, 5, 6)).inverse()


def test_outer_product():
    u, v = (1, 2, 3), (4, -5, 6)
    assert outer(u, v).transpose() == outer(v, u)
    assert math.isclose(outer(u, v).determinant(), 0.0, abs_tol=1e-9)


def test_trace_and_transpose():
    assert math.isclose((A + B).trace(), A.trace() + B.trace())
    assert A.transpose().transpose() == A
    assert A.transpose().trace() == A.trace()


def test_absolute():
    assert (-A).absolute() == A.absolute()
    assert all(x >= 0 for x in A.absolute().data())


def test_ortho_normalized():
    n = A.ortho_normalized()
    for row in n:
        assert math.isclose(sum(x * x for x in row), 1.0)
    with pytest.raises(ValueError):
        zeros().ortho_normalized()


def test_str_format():
    assert str(identity()).splitlines()[0] == "|\t1\t0\t0\t|"


def test_equality_with_other_types():
    assert (identity() == 5) is False