import pytest

from dirac import Complex as C
from dirac import Matrix, Vector


def test_add():
    assert Vector([1, 2, 3]) + Vector([4, 5, 6]) == Vector([5, 7, 9])


def test_add_complex():
    v1 = Vector([C(5.0, 13.0), C(6.0, 2.0), C(0.53, -6.0), C(12.0, 0.0)])
    v2 = Vector([C(7.0, -8.0), C(0.0, 4.0), C(2.0, 0.0), C(9.4, 3.0)])
    res = v1 + v2
    assert res[0] == C(12.0, 5.0)
    assert res[1] == C(6.0, 6.0)


def test_mul():
    assert Vector([1, 2, 3]) * 2 == Vector([2, 4, 6])
    assert 2 * Vector([1, 2, 3]) == Vector([2, 4, 6])


def test_mul_complex():
    res = Vector([C(0, -7), C(6, 0)]) * C(8, -2)
    assert res == Vector([C(-14, -56), C(48, -12)])


def test_neg():
    res = -Vector([C(1, 0), C(2, -3), C(-3, 2)])
    assert res.tolist() == [C(-1, 0), C(-2, 3), C(3, -2)]


def test_inversion_property():
    v = Vector([C(1, 2), C(3, 4), C(5, 6)])
    assert (v + -v).is_zero()
    assert -v + v == Vector.zero(3, like=C.zero())
    assert not v.is_zero()


def test_shape_mismatch():
    with pytest.raises(ValueError):
        Vector([1, 2]) + Vector([1, 2, 3])
    with pytest.raises(ValueError):
        Matrix([[1, 2], [3]])
    assert Vector([1, 2]) != Vector([1, 2, 3])


def test_add_matrix():
    m1 = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    m2 = Matrix([[9, 8, 7], [6, 5, 4], [3, 2, 1]])
    assert (m1 + m2).tolist() == [[10, 10, 10], [10, 10, 10], [10, 10, 10]]


def test_mul_matrix():
    m = Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert (m * 2).tolist() == [[2, 4, 6], [8, 10, 12], [14, 16, 18]]
    assert m - m == Matrix.zero(3, 3)


def test_scalar_laws():
    a = Matrix([[C(1, -1), C(3, 0)], [C(2, 2), C(4, 1)]])
    c1 = C(0, 2)
    c2 = C(1, 2)

    assert (a * c2) * c1 == a * (c1 * c2)
    assert a * (c1 + c2) == a * c1 + a * c2


def test_render_vector():
    assert str(Vector([1, 22])) == "┌    ┐\n│ 1  │\n│ 22 │\n└    ┘"


def test_render_matrix():
    expected = "┌         ┐\n│   1  10 │\n│ 100   2 │\n└         ┘"
    assert str(Matrix([[1, 10], [100, 2]])) == expected
