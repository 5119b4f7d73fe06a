"""
Core math modules для exactgeo

Точные математические примитивы: матрицы, детерминанты, дроби.
"""

# Matrices & determinants
from exactgeo.core.math.matrix import (
    MATRIX2X2_SIZE,
    MATRIX3X3_SIZE,
    Matrix2x2,
    Matrix3x3,
    det,
    det2x2,
    det3x3,
    sgn,
)

# Fractions
from exactgeo.core.math.fraction import (
    FRACTION_SEPARATOR,
    Fraction,
    FractionResult,
    gcd,
    try_fraction,
)

__all__ = [
    # Matrix — Constants
    "MATRIX2X2_SIZE",
    "MATRIX3X3_SIZE",
    # Matrix — Types
    "Matrix2x2",
    "Matrix3x3",
    # Matrix — Functions
    "det",
    "det2x2",
    "det3x3",
    "sgn",
    # Fraction — Constants
    "FRACTION_SEPARATOR",
    # Fraction — Types
    "Fraction",
    "FractionResult",
    # Fraction — Functions
    "gcd",
    "try_fraction",
]
