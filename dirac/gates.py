"""
Standard qubit operators in bra-ket form.

Coefficients are exact: the Hadamard carries the sympy scalar 1/√2 as its
overall multiplier, every term coefficient is ±1.
"""

from sympy import S, sqrt

from .braket import KetBra, Operator

__all__ = ['pauli_x', 'pauli_z', 'hadamard', 'cnot_10', 'cnot_01']


def pauli_x():
    """Bit flip X = |0⟩⟨1| + |1⟩⟨0|"""
    return Operator(S.One, [KetBra(1, 0, 1, 1), KetBra(1, 1, 0, 1)])


def pauli_z():
    """Phase flip Z = |0⟩⟨0| - |1⟩⟨1|"""
    return Operator(S.One, [KetBra(1, 0, 0, 1), -KetBra(1, 1, 1, 1)])


def hadamard():
    """H = (1/√2)(|0⟩⟨1| + |1⟩⟨0| + |0⟩⟨0| - |1⟩⟨1|)

    Same terms as (X + Z)/√2, listed in that order.
    """
    return Operator(1 / sqrt(2), [
        KetBra(1, 0, 1, 1),
        KetBra(1, 1, 0, 1),
        KetBra(1, 0, 0, 1),
        -KetBra(1, 1, 1, 1),
    ])


def cnot_10():
    """Controlled-NOT, control on the high qubit, target on the low qubit.

    |00⟩⟨00| + |01⟩⟨01| + |11⟩⟨10| + |10⟩⟨11|
    """
    return Operator(S.One, [
        KetBra(1, 0b00, 0b00, 2),
        KetBra(1, 0b01, 0b01, 2),
        KetBra(1, 0b11, 0b10, 2),
        KetBra(1, 0b10, 0b11, 2),
    ])


def cnot_01():
    """Controlled-NOT, control on the low qubit, target on the high qubit.

    |00⟩⟨00| + |11⟩⟨01| + |10⟩⟨10| + |01⟩⟨11|
    """
    return Operator(S.One, [
        KetBra(1, 0b00, 0b00, 2),
        KetBra(1, 0b11, 0b01, 2),
        KetBra(1, 0b10, 0b10, 2),
        KetBra(1, 0b01, 0b11, 2),
    ])
