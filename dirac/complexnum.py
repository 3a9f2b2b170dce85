"""
Complex numbers over an arbitrary component type.

Python's builtin ``complex`` is always a pair of floats. Textbook exercises
want exact arithmetic, so ``Complex`` keeps whatever component type it is
given (``int``, ``Fraction``, sympy numbers, or ``float``).
"""

import math
from numbers import Number

from sympy import Basic


# ============================================================================
# CARTESIAN FORM
# ============================================================================

def _is_real(value):
    """True for plain real components (Python numbers or sympy expressions)."""
    if isinstance(value, Complex):
        return False
    if isinstance(value, complex):
        return False
    return isinstance(value, (Number, Basic))


class Complex:
    """Complex number ``re + im*i``.

    Mixing with plain real numbers works on either side:

        >>> Complex(3, -1) + Complex(1, 4)
        4 + 3i
        >>> 2 * Complex(1, -1)
        2 - 2i

    Attributes:
        re: Real part
        im: Imaginary part
    """

    def __init__(self, re, im=0):
        self.re = re
        self.im = im

    @classmethod
    def zero(cls):
        return cls(0, 0)

    @classmethod
    def one(cls):
        return cls(1, 0)

    @classmethod
    def _coerce(cls, other):
        if isinstance(other, Complex):
            return other
        if isinstance(other, complex):
            return cls(other.real, other.imag)
        if _is_real(other):
            return cls(other, 0)
        return None

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re + other.re, self.im + other.im)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(self.re - other.re, self.im - other.im)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return Complex(
            self.re * other.re - self.im * other.im,
            self.re * other.im + self.im * other.re,
        )

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """Division via the conjugate of the denominator.

        Integer components are divided with ``/``, so ``Complex(2, 2) /
        Complex(1, -1)`` gives float parts. Use ``Fraction`` or sympy
        components to stay exact.
        """
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        den = other.re * other.re + other.im * other.im
        if den == 0:
            raise ZeroDivisionError("complex division by zero")
        return Complex(
            (self.re * other.re + self.im * other.im) / den,
            (self.im * other.re - self.re * other.im) / den,
        )

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other / self

    def __neg__(self):
        return Complex(-self.re, -self.im)

    def __eq__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.re == other.re and self.im == other.im

    def __hash__(self):
        if self.im == 0:
            return hash(self.re)
        return hash((self.re, self.im))

    def conjugate(self):
        """Complex conjugate: re - im*i"""
        return Complex(self.re, -self.im)

    def mod_squared(self):
        """|z|^2 = re^2 + im^2, exact in the component type."""
        return self.re * self.re + self.im * self.im

    def modulus(self):
        """|z| as a float."""
        return math.sqrt(self.mod_squared())

    def polar(self):
        """Convert to polar form.

        Returns:
            ComplexPolar with float magnitude and phase in (-pi, pi]
        """
        re = float(self.re)
        im = float(self.im)
        return ComplexPolar(math.hypot(re, im), math.atan2(im, re))

    def _im_negative(self):
        if isinstance(self.im, Basic):
            return getattr(self.im, 'is_negative', None) is True
        return self.im < 0

    def __str__(self):
        if self._im_negative():
            return f"{self.re} - {-self.im}i"
        return f"{self.re} + {self.im}i"

    def __repr__(self):
        return self.__str__()


# ============================================================================
# POLAR FORM
# ============================================================================

class ComplexPolar:
    """Complex number as magnitude and phase.

    Attributes:
        mag: Magnitude |z|
        pha: Phase angle in radians
    """

    def __init__(self, mag, pha):
        self.mag = mag
        self.pha = pha

    def cartesian(self):
        """Convert back to ``Complex`` with float components."""
        return Complex(self.mag * math.cos(self.pha), self.mag * math.sin(self.pha))

    def __eq__(self, other):
        if not isinstance(other, ComplexPolar):
            return NotImplemented
        return self.mag == other.mag and self.pha == other.pha

    def __hash__(self):
        return hash((self.mag, self.pha))

    def __repr__(self):
        return f"ComplexPolar(mag={self.mag}, pha={self.pha})"
