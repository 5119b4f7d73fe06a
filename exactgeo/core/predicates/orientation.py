"""
Orientation — Предикаты ориентации точки относительно отрезка

Базовый предикат side() строит матрицу однородных координат
    [Ax, Ay, 1]
    [Bx, By, 1]
    [Px, Py, 1]
и возвращает знак её детерминанта.

СОГЛАШЕНИЕ О ЗНАКЕ (сохраняется точно, от него зависят все производные предикаты):
    -1 (LEFT)  — детерминант отрицательный
     0 (ON)    — точки коллинеарны
    +1 (RIGHT) — детерминант положительный

Названия LEFT/RIGHT соответствуют экранным осям (y направлена вниз):
в осях с y вверх отрицательный детерминант означает поворот A→B→P по
часовой стрелке. Пример: side([(0,0), (1,0)], (0,1)) == RIGHT.
"""

from enum import IntEnum

from exactgeo.core.domain.point import Point
from exactgeo.core.domain.segment import Segment
from exactgeo.core.math.matrix import Matrix3x3, det3x3, sgn


# =============================================================================
# ENUMS
# =============================================================================


class Side(IntEnum):
    """Положение точки относительно направленного отрезка."""

    LEFT = -1
    ON = 0
    RIGHT = 1


# =============================================================================
# PREDICATES
# =============================================================================


def orientation_matrix(seg: Segment, point: Point) -> Matrix3x3:
    """
    Матрица однородных координат (A, B, P) для теста ориентации.

    Часть публичного API: side() берёт знак det() этой матрицы, а
    вызывающий код может использовать её напрямую, например, чтобы
    получить удвоенную ориентированную площадь треугольника ABP.

    Examples:
        >>> det3x3(orientation_matrix(Segment((0, 0), (1, 0)), Point(0, 1)))
        1
    """
    a, b = seg.first, seg.second
    return Matrix3x3([
        a.x, a.y, 1,
        b.x, b.y, 1,
        point.x, point.y, 1,
    ])


def side(seg: Segment, point: Point) -> Side:
    """
    На какой стороне направленной прямой first → second лежит точка.

    Returns:
        Side.LEFT (-1), Side.ON (0) или Side.RIGHT (+1)

    Examples:
        >>> side(Segment((0, 0), (1, 0)), Point(0, 1))
        <Side.RIGHT: 1>
        >>> side(Segment((0, 0), (1, 0)), Point(5, 0))
        <Side.ON: 0>
    """
    return Side(sgn(det3x3(orientation_matrix(seg, point))))


def same_side(seg: Segment, point1: Point, point2: Point) -> bool:
    """
    Обе точки по одну сторону прямой seg.

    Две коллинеарные точки (ON, ON) тоже считаются лежащими по одну
    сторону — это важно для seg_intersects().
    """
    return side(seg, point1) == side(seg, point2)


def seg_contains(seg: Segment, point: Point) -> bool:
    """
    Лежит ли точка на отрезке (включая концы).

    Условия:
    1. Точка коллинеарна отрезку (side == ON)
    2. Точка внутри axis-aligned bounding box отрезка по обеим осям

    Каждая ось проверяется двумя независимыми сравнениями
    (min <= p и p <= max).
    """
    if side(seg, point) != Side.ON:
        return False

    a, b = seg.first, seg.second
    x_min, x_max = min(a.x, b.x), max(a.x, b.x)
    y_min, y_max = min(a.y, b.y), max(a.y, b.y)

    in_x = x_min <= point.x and point.x <= x_max
    in_y = y_min <= point.y and point.y <= y_max
    return in_x and in_y
