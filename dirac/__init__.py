"""
dirac: Bra-ket algebra for textbook quantum computing exercises

Operators and states in Dirac notation, combined exactly.
Coefficients stay in whatever scalar type you give them.
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"

from .braket import *
from .complexnum import Complex, ComplexPolar
from .dense import Matrix, Vector
from .gates import *
from .logger import log
from .scalars import Scalar, clean_number, is_one, is_scalar, is_zero, one, zero

# Explicitly list main exports for clarity
__all__ = [
    # Core classes
    'KetBra', 'Ket', 'Operator', 'State',
    'UnitKetBra', 'UnitKet', 'InvalidDimension',

    # Named operators
    'pauli_x', 'pauli_z', 'hadamard', 'cnot_10', 'cnot_01',

    # Scalars
    'Scalar', 'Complex', 'ComplexPolar',
    'zero', 'one', 'is_zero', 'is_one', 'is_scalar', 'clean_number',

    # Dense linear algebra
    'Vector', 'Matrix',

    'log',
]
