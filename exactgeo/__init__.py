"""
exactgeo — точные примитивы планиметрии.

Матрицы фиксированного размера и детерминанты, точные дроби, точки,
отрезки и построенные на них предикаты ориентации и пересечения.
"""

import logging

from exactgeo.core.errors import DivisionByZeroError, GeometryError, MatrixShapeError
from exactgeo.core.domain import Point, Segment
from exactgeo.core.math import (
    Fraction,
    FractionResult,
    Matrix2x2,
    Matrix3x3,
    det,
    det2x2,
    det3x3,
    gcd,
    sgn,
    try_fraction,
)
from exactgeo.core.predicates import (
    Side,
    orientation_matrix,
    same_side,
    seg_contains,
    seg_intersection,
    seg_intersects,
    side,
)

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "GeometryError",
    "DivisionByZeroError",
    "MatrixShapeError",
    # Math
    "Matrix2x2",
    "Matrix3x3",
    "det",
    "det2x2",
    "det3x3",
    "sgn",
    "gcd",
    "Fraction",
    "FractionResult",
    "try_fraction",
    # Domain
    "Point",
    "Segment",
    # Predicates
    "Side",
    "orientation_matrix",
    "side",
    "same_side",
    "seg_contains",
    "seg_intersects",
    "seg_intersection",
]
