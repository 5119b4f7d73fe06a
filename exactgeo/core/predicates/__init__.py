"""
Геометрические предикаты: ориентация, принадлежность, пересечение.
"""

from exactgeo.core.predicates.intersection import seg_intersection, seg_intersects
from exactgeo.core.predicates.orientation import (
    Side,
    orientation_matrix,
    same_side,
    seg_contains,
    side,
)

__all__ = [
    # Orientation
    "Side",
    "orientation_matrix",
    "side",
    "same_side",
    "seg_contains",
    # Intersection
    "seg_intersects",
    "seg_intersection",
]
