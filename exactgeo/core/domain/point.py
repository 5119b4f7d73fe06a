"""
Point — Точка на плоскости

Immutable Pydantic модель пары (x, y) над типом T.
T — целое число для входных данных или Fraction[T] для точных результатов
(например, точки пересечения прямых).
"""

from typing import Any, Final, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# Формат строкового представления: (x;y)
POINT_FORMAT: Final[str] = "({x};{y})"


class Point(BaseModel, Generic[T]):
    """
    Точка (x, y).

    Immutable модель (frozen=True). Хэшируется, только если хэшируются
    координаты: точка с целыми координатами — да, точка с координатами
    Fraction (результат seg_intersection) — нет, так как Fraction mutable.
    Позиционный конструктор: Point(1, 2).
    """

    x: T
    y: T

    model_config = {"frozen": True}

    def __init__(self, x: T, y: T, **data: Any) -> None:
        super().__init__(x=x, y=y, **data)

    def __str__(self) -> str:
        return POINT_FORMAT.format(x=self.x, y=self.y)

    def as_tuple(self) -> tuple[T, T]:
        return (self.x, self.y)
