from fractions import Fraction

import pytest
from sympy import S, sqrt, symbols

from dirac import (
    Complex, KetBra, Operator, clean_number, is_one, is_scalar, is_zero, one, zero,
)


def test_identities_keep_scalar_type():
    assert zero(3) == 0 and type(zero(3)) is int
    assert one(2.5) == 1.0 and type(one(2.5)) is float
    assert type(zero(Fraction(1, 2))) is Fraction
    assert zero(sqrt(2)) is S.Zero
    assert one(S.Half) is S.One
    assert zero(Complex(1, 2)) == Complex(0, 0)
    assert one(Complex(1, 2)) == Complex(1, 0)


def test_identities_for_custom_types():
    class Mod5:
        def __init__(self, value):
            self.value = value % 5

        @classmethod
        def zero(cls):
            return cls(0)

        @classmethod
        def one(cls):
            return cls(1)

    assert zero(Mod5(3)).value == 0
    assert one(Mod5(3)).value == 1

    with pytest.raises(TypeError):
        zero("x")
    with pytest.raises(TypeError):
        one(object())


def test_is_zero_expands_symbolic_values():
    a, b = symbols('a b')
    assert is_zero(a * (b + 1) - a * b - a)
    assert not is_zero(a * b)
    assert is_zero(Complex(0, 0))
    assert not is_zero(Complex(0, 1))
    assert is_zero(0.0)


def test_is_one():
    assert is_one(1)
    assert is_one(S.One)
    assert is_one(Complex(1, 0))
    assert not is_one(sqrt(2) / 2)


def test_clean_number():
    assert clean_number(0.1 + 0.2) == 0.3
    assert clean_number(1.0000000000001) == 1
    assert type(clean_number(1.0000000000001)) is int
    assert clean_number(1e-13) == 0.0
    assert clean_number(complex(0.5, 1e-12)) == 0.5
    assert clean_number(Fraction(1, 3)) == Fraction(1, 3)


def test_operator_with_complex_coefficients():
    i = Complex(0, 1)
    phase = Operator(Complex.one(), [KetBra(Complex.one(), 0, 0, 1), KetBra(i, 1, 1, 1)])

    z = phase * phase
    assert z == Operator(Complex(1, 0), [KetBra(1, 0, 0, 1), KetBra(-1, 1, 1, 1)])
    assert str(z) == "|0⟩⟨0| + -1 + 0i|1⟩⟨1|"

    assert len(phase * z * phase + Operator(1, [KetBra(-1, 0, 0, 1), KetBra(-1, 1, 1, 1)])) == 0


def test_is_zero_expands_complex_components():
    a, b = symbols('a b')
    assert is_zero(Complex(a * (b + 1) - a * b - a, 0))
    assert is_zero(Complex(0, a * (b - 1) - a * b + a))
    assert not is_zero(Complex(a, 0))


def test_operator_with_symbolic_complex_coefficients():
    a, b = symbols('a b')
    x = Operator(1, [KetBra(Complex(a * (b + 1), b), 0, 0, 1)])
    y = Operator(1, [KetBra(Complex(-a * b - a, -b), 0, 0, 1)])
    assert len(x + y) == 0
    assert str(Operator(1, [KetBra(Complex(a, b), 0, 0, 1)])) == "a + bi|0⟩⟨0|"


def test_is_scalar():
    assert is_scalar(3)
    assert is_scalar(2.5)
    assert is_scalar(Fraction(1, 2))
    assert is_scalar(sqrt(2))
    assert is_scalar(Complex(1, 2))
    assert not is_scalar("a")
    assert not is_scalar(object())
    assert not is_scalar(Operator(1, [KetBra(1, 0, 0, 1)]))
