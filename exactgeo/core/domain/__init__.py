"""
Доменные модели (value objects).

Плоские value-типы: Point и Segment.
"""

from exactgeo.core.domain.point import POINT_FORMAT, Point
from exactgeo.core.domain.segment import Segment

__all__ = [
    "POINT_FORMAT",
    "Point",
    "Segment",
]
