"""
Scalar capability set used by the bra-ket engine.

The engine never inspects a coefficient beyond the operations listed on
``Scalar``. The additive and multiplicative identities are looked up with
``zero(like)`` / ``one(like)`` so that accumulation stays in the caller's
scalar type (exact sympy numbers stay exact, ints stay ints).
"""

from functools import singledispatch
from numbers import Number
from typing import Protocol

from sympy import Basic, S, expand

from .complexnum import Complex

__all__ = ['Scalar', 'zero', 'one', 'is_zero', 'is_one', 'is_scalar', 'clean_number']


class Scalar(Protocol):
    """Ring/field operations required of a coefficient type."""

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __neg__(self): ...
    def __eq__(self, other): ...
    def __str__(self) -> str: ...


# ============================================================================
# IDENTITIES
# ============================================================================

# sympy numbers are also virtual numbers.Number subclasses; test them first.

def zero(like):
    """Additive identity of the scalar type of ``like``.

    Types outside the known ones must provide a ``zero()`` classmethod.
    """
    if isinstance(like, Basic):
        return S.Zero
    if isinstance(like, Number):
        return type(like)(0)
    factory = getattr(type(like), 'zero', None)
    if factory is None:
        raise TypeError(f"No additive identity known for {type(like).__name__}")
    return factory()


def one(like):
    """Multiplicative identity of the scalar type of ``like``."""
    if isinstance(like, Basic):
        return S.One
    if isinstance(like, Number):
        return type(like)(1)
    factory = getattr(type(like), 'one', None)
    if factory is None:
        raise TypeError(f"No multiplicative identity known for {type(like).__name__}")
    return factory()


# ============================================================================
# PREDICATES
# ============================================================================

@singledispatch
def is_zero(value) -> bool:
    """Whether an accumulated coefficient has cancelled."""
    if isinstance(value, Basic):
        # a*(b + c) - a*b - a*c only collapses after expansion
        return expand(value) == 0
    return value == zero(value)


@is_zero.register(Complex)
def _(value) -> bool:
    return is_zero(value.re) and is_zero(value.im)


def is_scalar(value) -> bool:
    """Whether ``value`` has a known additive identity."""
    try:
        zero(value)
    except TypeError:
        return False
    return True


def is_one(value) -> bool:
    """Whether a coefficient is the multiplicative identity."""
    return value == one(value)


def clean_number(num, decimals=10):
    """Clean numerical noise from numbers for display.

    Rounds floats and complex numbers to remove numerical errors.
    Converts numbers very close to integers to exact integers.
    Exact scalars (ints, fractions, sympy, ``Complex``) pass through.

    Args:
        num: Number to clean
        decimals: Number of decimal places to round to (default 10)

    Returns:
        Cleaned number
    """
    if isinstance(num, float):
        rounded = round(num, decimals)
        if abs(rounded) < 10**(-decimals):
            return 0.0
        if abs(rounded - round(rounded)) < 10**(-decimals):
            return int(round(rounded))
        return rounded

    if isinstance(num, complex):
        real_clean = clean_number(num.real, decimals)
        imag_clean = clean_number(num.imag, decimals)
        if imag_clean == 0:
            return real_clean
        return complex(real_clean, imag_clean)

    return num
