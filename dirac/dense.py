"""
Dense vectors and matrices for the linear-algebra warm-up exercises.

Entries are held in numpy arrays of dtype ``object`` so that exact scalars
(ints, fractions, sympy numbers, ``Complex``) are combined with their own
arithmetic instead of being cast to floating point.
"""

import numpy as np
from typing import Tuple

from .scalars import is_scalar, is_zero

__all__ = ['Vector', 'Matrix']


def _as_object_array(values, ndim: int) -> np.ndarray:
    # filled element by element so entries are never cast or unpacked
    rows = [list(row) for row in values] if ndim == 2 else list(values)
    shape = (len(rows), len(rows[0]) if rows else 0) if ndim == 2 else (len(rows),)
    array = np.empty(shape, dtype=object)
    if ndim == 1:
        for i, value in enumerate(rows):
            array[i] = value
    else:
        for i, row in enumerate(rows):
            if len(row) != shape[1]:
                raise ValueError("Matrix rows must all have the same length")
            for j, value in enumerate(row):
                array[i, j] = value
    return array


class _Dense:
    """Shared elementwise arithmetic for Vector and Matrix."""

    _ndim = 0

    def __init__(self, values):
        if isinstance(values, np.ndarray) and values.dtype == object:
            if values.ndim != self._ndim:
                raise ValueError(f"{type(self).__name__} needs a {self._ndim}-d array")
            self._data = values
        else:
            self._data = _as_object_array(values, self._ndim)

    @property
    def shape(self) -> Tuple[int, ...]:
        return self._data.shape

    def _check_shape(self, other):
        if self.shape != other.shape:
            raise ValueError(f"Shape mismatch: {self.shape} vs {other.shape}")

    def __add__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_shape(other)
        return type(self)(self._data + other._data)

    def __mul__(self, scalar):
        """Scale every entry: v * c"""
        if isinstance(scalar, _Dense) or not is_scalar(scalar):
            return NotImplemented
        result = np.empty(self.shape, dtype=object)
        for index, value in np.ndenumerate(self._data):
            result[index] = scalar * value
        return type(self)(result)

    def __rmul__(self, scalar):
        return self.__mul__(scalar)

    def __neg__(self):
        result = np.empty(self.shape, dtype=object)
        for index, value in np.ndenumerate(self._data):
            result[index] = -value
        return type(self)(result)

    def __sub__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self + (-other)

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self._data.flat, other._data.flat))

    __hash__ = None

    def is_zero(self) -> bool:
        return all(is_zero(value) for value in self._data.flat)

    def tolist(self):
        return self._data.tolist()

    def __getitem__(self, index):
        return self._data[index]


class Vector(_Dense):
    """Column vector of fixed size.

    Example:
        >>> Vector([1, 2, 3]) + Vector([4, 5, 6])
        Vector([5, 7, 9])
    """

    _ndim = 1

    @classmethod
    def zero(cls, size: int, like=0):
        """Zero vector of ``size`` entries, each equal to ``like`` minus itself."""
        return cls([like - like] * size)

    def __len__(self):
        return self.shape[0]

    def __str__(self):
        """Boxed column:

            ┌   ┐
            │ 1 │
            │ 2 │
            └   ┘
        """
        cells = [str(value) for value in self._data]
        longest = max((len(cell) for cell in cells), default=0)
        lines = [f"┌{' ' * (longest + 2)}┐"]
        lines += [f"│ {cell.ljust(longest)} │" for cell in cells]
        lines.append(f"└{' ' * (longest + 2)}┘")
        return "\n".join(lines)

    def __repr__(self):
        return f"Vector({self.tolist()!r})"


class Matrix(_Dense):
    """Rectangular matrix of fixed shape."""

    _ndim = 2

    @classmethod
    def zero(cls, rows: int, cols: int, like=0):
        return cls([[like - like] * cols for _ in range(rows)])

    def __str__(self):
        cells = [[str(value) for value in row] for row in self._data]
        widths = [max((len(row[j]) for row in cells), default=0)
                  for j in range(self.shape[1])]
        inner = sum(widths) + 2 * len(widths)
        lines = [f"┌{' ' * inner}┐"]
        for row in cells:
            padded = "  ".join(cell.rjust(width) for cell, width in zip(row, widths))
            lines.append(f"│ {padded} │")
        lines.append(f"└{' ' * inner}┘")
        return "\n".join(lines)

    def __repr__(self):
        return f"Matrix({self.tolist()!r})"
