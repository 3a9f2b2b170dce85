"""
dirac: bra-ket algebra over exact scalars

Operators and states on an n-qubit space are stored as sparse sums of
basis outer products |ket⟩⟨bra| and basis kets |ket⟩, each carrying a
coefficient, times an overall scalar. This module provides:
- Tensor (Kronecker) products by basis-index concatenation
- Operator composition and operator-on-state application by contraction
- Operator addition with term merging and cancellation
- Bra-ket text rendering with binary basis labels

Coefficients can be any type satisfying ``dirac.scalars.Scalar``; sympy
numbers give exact results.
"""

from typing import List, NamedTuple, Tuple

from .logger import log
from .dense import _Dense
from .scalars import Scalar, clean_number, is_one, is_scalar, is_zero, one, zero

__all__ = [
    'InvalidDimension', 'UnitKetBra', 'UnitKet',
    'KetBra', 'Ket', 'Operator', 'State',
]


class InvalidDimension(ValueError):
    """Basis index or qubit count inconsistent with the space it lives in."""


# ============================================================================
# BASIS SLOTS
# ============================================================================

class UnitKetBra(NamedTuple):
    """Coefficient-free identity of an operator term."""
    ket: int
    bra: int
    n: int


class UnitKet(NamedTuple):
    """Coefficient-free identity of a state term."""
    ket: int
    n: int


def _check_qubits(n):
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidDimension(f"Qubit count must be a non-negative integer, got {n!r}")


def _check_index(index, n, role):
    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 2 ** n:
        raise InvalidDimension(
            f"{role} index {index!r} is outside the {n}-qubit basis [0, {2 ** n})"
        )


def _label(index, n):
    """Basis index as an n-bit binary string, most significant bit first."""
    return format(index, 'b').zfill(n)


def _coefficient(scalar):
    return '' if is_one(scalar) else str(clean_number(scalar))


class _Frozen:
    """Value type whose fields are assigned once, in __init__."""

    __slots__ = ()

    def _init_fields(self, **fields):
        for name, value in fields.items():
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")


# ============================================================================
# BASIS TERMS
# ============================================================================

class KetBra(_Frozen):
    """Operator term scalar·|ket⟩⟨bra| on an n-qubit space.

    Attributes:
        scalar: Coefficient
        ket: Row basis index in [0, 2**n)
        bra: Column basis index in [0, 2**n)
        n: Qubit count
    """

    __slots__ = ('scalar', 'ket', 'bra', 'n')

    def __init__(self, scalar: Scalar, ket: int, bra: int, n: int):
        _check_qubits(n)
        _check_index(ket, n, 'ket')
        _check_index(bra, n, 'bra')
        self._init_fields(scalar=scalar, ket=ket, bra=bra, n=n)

    def unit(self) -> UnitKetBra:
        return UnitKetBra(self.ket, self.bra, self.n)

    def tensor(self, other):
        """Join two independent subsystems: |a⟩⟨b| ⊗ |c⟩⟨d| = |ac⟩⟨bd|

        The right factor's indices become the low-order bits.

        Example:
            >>> KetBra(1, 0, 0, 1).tensor(KetBra(1, 1, 0, 1))
            KetBra(1, ket=1, bra=0, n=2)
        """
        if not isinstance(other, KetBra):
            raise TypeError(f"Cannot tensor KetBra with {type(other)}")
        shift = 2 ** other.n
        return KetBra(
            self.scalar * other.scalar,
            self.ket * shift + other.ket,
            self.bra * shift + other.bra,
            self.n + other.n,
        )

    def __matmul__(self, other):
        """Tensor product using @ operator: a @ b = a ⊗ b"""
        return self.tensor(other)

    def __neg__(self):
        """Negation touches the coefficient only."""
        return KetBra(-self.scalar, self.ket, self.bra, self.n)

    def __eq__(self, other):
        if not isinstance(other, KetBra):
            return NotImplemented
        return (self.scalar == other.scalar and self.ket == other.ket
                and self.bra == other.bra and self.n == other.n)

    def __hash__(self):
        return hash((self.scalar, self.ket, self.bra, self.n))

    def __str__(self):
        return (f"{_coefficient(self.scalar)}"
                f"|{_label(self.ket, self.n)}⟩⟨{_label(self.bra, self.n)}|")

    def __repr__(self):
        return f"KetBra({self.scalar!r}, ket={self.ket}, bra={self.bra}, n={self.n})"


class Ket(_Frozen):
    """State term scalar·|ket⟩ on an n-qubit space."""

    __slots__ = ('scalar', 'ket', 'n')

    def __init__(self, scalar: Scalar, ket: int, n: int):
        _check_qubits(n)
        _check_index(ket, n, 'ket')
        self._init_fields(scalar=scalar, ket=ket, n=n)

    def unit(self) -> UnitKet:
        return UnitKet(self.ket, self.n)

    def tensor(self, other):
        """Join two independent subsystems: |a⟩ ⊗ |b⟩ = |ab⟩"""
        if not isinstance(other, Ket):
            raise TypeError(f"Cannot tensor Ket with {type(other)}")
        return Ket(
            self.scalar * other.scalar,
            self.ket * 2 ** other.n + other.ket,
            self.n + other.n,
        )

    def __matmul__(self, other):
        return self.tensor(other)

    def __neg__(self):
        return Ket(-self.scalar, self.ket, self.n)

    def __eq__(self, other):
        if not isinstance(other, Ket):
            return NotImplemented
        return self.scalar == other.scalar and self.ket == other.ket and self.n == other.n

    def __hash__(self):
        return hash((self.scalar, self.ket, self.n))

    def __str__(self):
        return f"{_coefficient(self.scalar)}|{_label(self.ket, self.n)}⟩"

    def __repr__(self):
        return f"Ket({self.scalar!r}, ket={self.ket}, n={self.n})"


# ============================================================================
# MERGE AND CANCEL
# ============================================================================

def _shared_qubits(*groups):
    """Qubit count common to every term in ``groups``.

    Returns:
        The shared count, or None when there are no terms

    Raises:
        InvalidDimension: if the terms disagree
    """
    counts = {term.n for group in groups for term in group}
    if len(counts) > 1:
        raise InvalidDimension(f"Terms span different qubit counts: {sorted(counts)}")
    return counts.pop() if counts else None


def _contract(left_terms, right_terms, key):
    """Yield (slot, coefficient) for every pair joined by ⟨left.bra|right.ket⟩.

    Orthonormal basis: the inner product is 1 when the indices match and 0
    otherwise, so only matching pairs contribute.

    Args:
        left_terms: KetBra terms of the left factor
        right_terms: KetBra or Ket terms of the right factor
        key: Builds the result slot from (left, right)
    """
    for left in left_terms:
        for right in right_terms:
            if left.bra == right.ket:
                yield key(left, right), left.scalar * right.scalar


def _simplify(contributions) -> List[Tuple[tuple, object]]:
    """Accumulate coefficients per basis slot and drop the cancelled ones.

    Slots keep the order in which they were first seen.

    Args:
        contributions: Iterable of (unit key, coefficient)

    Returns:
        List of (unit key, non-zero accumulated coefficient)
    """
    accumulated = {}
    products = 0
    for unit, value in contributions:
        products += 1
        if unit not in accumulated:
            accumulated[unit] = zero(value)
        accumulated[unit] = accumulated[unit] + value

    survivors = [(unit, value) for unit, value in accumulated.items() if not is_zero(value)]
    log.debug("merged %d products into %d slots, %d cancelled",
              products, len(accumulated), len(accumulated) - len(survivors))
    return survivors


def _render(scalar, terms):
    if not terms:
        return "0"
    body = " + ".join(str(term) for term in terms)
    if is_one(scalar):
        return body
    return f"{clean_number(scalar)}({body})"


def _is_scalar(value):
    """True for coefficients; false for algebra objects and dense arrays."""
    if isinstance(value, (Operator, State, KetBra, Ket, _Dense)):
        return False
    return is_scalar(value)


# ============================================================================
# OPERATORS
# ============================================================================

class Operator(_Frozen):
    """Linear map scalar·Σ|ket⟩⟨bra| on an n-qubit space.

    The overall scalar is kept apart from the term coefficients, so scaling
    by a number is deferred rather than distributed.

    Supports:
    - A @ B      tensor product
    - A * B      composition (matrix product)
    - A * psi    application to a State
    - A * c      scaling by a scalar (also c * A)
    - A + B      addition with merging of equal basis slots

    Equality is structural and depends on term order; compare
    ``A.canonical() == B.canonical()`` when order is incidental.

    Attributes:
        scalar: Overall multiplier
        ones: Tuple of KetBra terms
    """

    __slots__ = ('scalar', 'ones')

    def __init__(self, scalar: Scalar, ones):
        ones = tuple(ones)
        for term in ones:
            if not isinstance(term, KetBra):
                raise TypeError(f"Operator terms must be KetBra, got {type(term)}")
        self._init_fields(scalar=scalar, ones=ones)

    @property
    def n(self):
        """Shared qubit count of the terms (None for the zero operator)."""
        return _shared_qubits(self.ones)

    def canonical(self):
        """Copy with terms sorted by (ket, bra, n)."""
        ordered = sorted(self.ones, key=lambda kb: (kb.ket, kb.bra, kb.n))
        return Operator(self.scalar, ordered)

    def tensor(self, other):
        """Tensor product A ⊗ B.

        Every term of A is paired with every term of B, A outermost. Nothing
        is merged: a slot repeated in an input stays repeated in the result.

        Args:
            other: Operator on the second subsystem

        Returns:
            Operator on n_A + n_B qubits with |A|·|B| terms
        """
        if not isinstance(other, Operator):
            raise TypeError(f"Cannot tensor Operator with {type(other)}")
        ones = [kb.tensor(other_kb) for kb in self.ones for other_kb in other.ones]
        return Operator(self.scalar * other.scalar, ones)

    def __matmul__(self, other):
        """Tensor product using @ operator: A @ B = A ⊗ B"""
        return self.tensor(other)

    def _compose(self, other):
        n = _shared_qubits(self.ones, other.ones)
        contributions = _contract(
            self.ones, other.ones,
            lambda kb, other_kb: UnitKetBra(kb.ket, other_kb.bra, n),
        )
        ones = [KetBra(scalar, unit.ket, unit.bra, unit.n)
                for unit, scalar in _simplify(contributions)]
        return Operator(self.scalar * other.scalar, ones)

    def _apply(self, state):
        n = _shared_qubits(self.ones, state.superpositions)
        contributions = _contract(
            self.ones, state.superpositions,
            lambda kb, pos: UnitKet(kb.ket, n),
        )
        superpositions = [Ket(scalar, unit.ket, unit.n)
                          for unit, scalar in _simplify(contributions)]
        return State(self.scalar * state.scalar, superpositions)

    def __mul__(self, other):
        """Multiplication.

        Supports:
        - Operator * Operator   composition, AB
        - Operator * State      application, A|ψ⟩
        - Operator * scalar     overall scalar scaled, terms untouched

        Raises:
            InvalidDimension: if the operands' qubit counts differ
        """
        if isinstance(other, Operator):
            return self._compose(other)
        if isinstance(other, State):
            return self._apply(other)
        if not _is_scalar(other):
            return NotImplemented
        return Operator(self.scalar * other, self.ones)

    def __rmul__(self, other):
        """Right multiplication (for scalar * operator)."""
        if not _is_scalar(other):
            return NotImplemented
        return Operator(other * self.scalar, self.ones)

    def __add__(self, other):
        """Addition A + B over basis slots.

        Every term, from A and from B alike, is scaled by A's overall
        scalar before merging; B's overall scalar is not applied. The
        result carries overall scalar one.

        Example:
            >>> Operator(2, [KetBra(1, 0, 0, 1)]) + Operator(1, [KetBra(1, 1, 1, 1)])
            Operator(1, [KetBra(2, ket=0, bra=0, n=1), KetBra(2, ket=1, bra=1, n=1)])
        """
        if not isinstance(other, Operator):
            return NotImplemented
        _shared_qubits(self.ones, other.ones)
        contributions = ((kb.unit(), kb.scalar * self.scalar)
                         for kb in self.ones + other.ones)
        ones = [KetBra(scalar, unit.ket, unit.bra, unit.n)
                for unit, scalar in _simplify(contributions)]
        return Operator(one(self.scalar), ones)

    # ------------------------------------------------------------------
    # identities
    # ------------------------------------------------------------------

    @classmethod
    def two_level_identity(cls, n, unit: Scalar = 1):
        """|0⟩⟨0| + |1⟩⟨1| tagged with qubit count n.

        This is the identity only for n == 1; for larger n it projects onto
        the first two basis states. Use ``full_identity`` for the real
        identity on n qubits.

        Args:
            n: Qubit count tag
            unit: Multiplicative identity of the scalar type in use
        """
        if n > 1:
            log.warning("two_level_identity(%d) has 2 terms, not the %d of a full identity",
                        n, 2 ** n)
        return cls(unit, [KetBra(unit, 0, 0, n), KetBra(unit, 1, 1, n)])

    @classmethod
    def full_identity(cls, n, unit: Scalar = 1):
        """Σ_k |k⟩⟨k| over all 2**n basis states."""
        _check_qubits(n)
        return cls(unit, [KetBra(unit, k, k, n) for k in range(2 ** n)])

    @classmethod
    def identity(cls, n, unit: Scalar = 1):
        """Same as ``two_level_identity``; kept as the default for existing callers."""
        return cls.two_level_identity(n, unit)

    def __len__(self):
        return len(self.ones)

    def __eq__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return self.scalar == other.scalar and self.ones == other.ones

    def __hash__(self):
        return hash((self.scalar, self.ones))

    def __str__(self):
        return _render(self.scalar, self.ones)

    def __repr__(self):
        return f"Operator({self.scalar!r}, {list(self.ones)!r})"


# ============================================================================
# STATES
# ============================================================================

class State(_Frozen):
    """State vector scalar·Σ|ket⟩ on an n-qubit space.

    Attributes:
        scalar: Overall multiplier
        superpositions: Tuple of Ket terms
    """

    __slots__ = ('scalar', 'superpositions')

    def __init__(self, scalar: Scalar, superpositions):
        superpositions = tuple(superpositions)
        for term in superpositions:
            if not isinstance(term, Ket):
                raise TypeError(f"State terms must be Ket, got {type(term)}")
        self._init_fields(scalar=scalar, superpositions=superpositions)

    @property
    def n(self):
        return _shared_qubits(self.superpositions)

    def canonical(self):
        ordered = sorted(self.superpositions, key=lambda k: (k.ket, k.n))
        return State(self.scalar, ordered)

    def tensor(self, other):
        """Product state |ψ⟩ ⊗ |φ⟩, terms of self outermost."""
        if not isinstance(other, State):
            raise TypeError(f"Cannot tensor State with {type(other)}")
        superpositions = [pos.tensor(other_pos)
                          for pos in self.superpositions
                          for other_pos in other.superpositions]
        return State(self.scalar * other.scalar, superpositions)

    def __matmul__(self, other):
        return self.tensor(other)

    def __mul__(self, other):
        """Scaling by a scalar; the overall scalar absorbs it."""
        if not _is_scalar(other):
            return NotImplemented
        return State(self.scalar * other, self.superpositions)

    def __rmul__(self, other):
        if not _is_scalar(other):
            return NotImplemented
        return State(other * self.scalar, self.superpositions)

    def __len__(self):
        return len(self.superpositions)

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.scalar == other.scalar and self.superpositions == other.superpositions

    def __hash__(self):
        return hash((self.scalar, self.superpositions))

    def __str__(self):
        return _render(self.scalar, self.superpositions)

    def __repr__(self):
        return f"State({self.scalar!r}, {list(self.superpositions)!r})"
