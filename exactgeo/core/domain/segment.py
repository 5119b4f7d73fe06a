"""
Segment — Отрезок на плоскости

Immutable Pydantic модель пары концов first/second.

Порядок концов важен для ориентированного теста side() (направление
first → second), но не для геометрического смысла: Segment(A, B) и
Segment(B, A) — один и тот же отрезок.
"""

from typing import Any, Union

from pydantic import BaseModel

from exactgeo.core.domain.point import Point

PointLike = Union[Point, tuple[Any, Any]]


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)


class Segment(BaseModel):
    """
    Отрезок [first, second].

    Концы можно передать как Point или как кортеж (x, y):
        Segment(Point(0, 0), Point(2, 2))
        Segment((0, 0), (2, 2))
    """

    first: Point
    second: Point

    model_config = {"frozen": True}

    def __init__(self, first: PointLike, second: PointLike, **data: Any) -> None:
        super().__init__(first=_as_point(first), second=_as_point(second), **data)

    @classmethod
    def from_coords(cls, x1: Any, y1: Any, x2: Any, y2: Any) -> "Segment":
        """Segment.from_coords(0, 0, 2, 2) ≡ Segment((0, 0), (2, 2))."""
        return cls(Point(x1, y1), Point(x2, y2))

    def reversed(self) -> "Segment":
        """Тот же отрезок с противоположным направлением."""
        return Segment(self.second, self.first)

    def __str__(self) -> str:
        return f"[{self.first}, {self.second}]"
