"""
Intersection — Пересечение отрезков и прямых

- seg_intersects(): булев тест пересечения двух конечных отрезков
- seg_intersection(): точная точка пересечения бесконечных прямых,
  проходящих через отрезки (правило Крамера, результат в дробях)

ФОРМУЛЫ (A, B — концы seg1; C, D — концы seg2):
    den   = det([Ax−Bx, Ay−By; Cx−Dx, Cy−Dy])
    m1    = det([Ax, Ay; Bx, By])
    m2    = det([Cx, Cy; Dx, Dy])
    x_num = det([m1, Ax−Bx; m2, Cx−Dx])
    y_num = det([m1, Ay−By; m2, Cy−Dy])
    P     = (x_num / den, y_num / den)

Вся арифметика остаётся в целых числах и дробях; float появляется только
если вызывающий код явно вызовет float() у дроби.
"""

import logging
from typing import Optional

from exactgeo.core.domain.point import Point
from exactgeo.core.domain.segment import Segment
from exactgeo.core.math.fraction import Fraction
from exactgeo.core.math.matrix import Matrix2x2, det2x2
from exactgeo.core.predicates.orientation import same_side, seg_contains

logger = logging.getLogger(__name__)


def seg_intersects(seg1: Segment, seg2: Segment) -> bool:
    """
    Пересекаются ли отрезки (включая касание концами и коллинеарное перекрытие).

    True если:
    (a) C и D по разные стороны прямой AB, и A и B по разные стороны прямой CD
        (собственное пересечение), или
    (b) любой конец одного отрезка лежит на другом отрезке.

    Examples:
        >>> seg_intersects(Segment((0, 0), (2, 2)), Segment((2, 0), (0, 2)))
        True
        >>> seg_intersects(Segment((0, 0), (1, 0)), Segment((0, 1), (1, 1)))
        False
    """
    return (
        (not same_side(seg1, seg2.first, seg2.second)
         and not same_side(seg2, seg1.first, seg1.second))
        or seg_contains(seg1, seg2.first)
        or seg_contains(seg1, seg2.second)
        or seg_contains(seg2, seg1.first)
        or seg_contains(seg2, seg1.second)
    )


def seg_intersection(seg1: Segment, seg2: Segment) -> Optional[Point[Fraction[int]]]:
    """
    Точная точка пересечения прямых, проходящих через seg1 и seg2.

    Результат не ограничивается отрезками: пересечение может лежать
    за их пределами. Для проверки принадлежности используйте seg_intersects().

    Returns:
        Point с координатами-дробями в сокращённой форме (знаменатель > 0),
        или None если прямые параллельны или совпадают

    Examples:
        >>> str(seg_intersection(Segment((0, 0), (2, 2)), Segment((0, 2), (2, 0))))
        '(1/1;1/1)'
        >>> seg_intersection(Segment((0, 0), (1, 0)), Segment((0, 1), (1, 1))) is None
        True
    """
    a, b = seg1.first, seg1.second
    c, d = seg2.first, seg2.second

    dx1, dy1 = a.x - b.x, a.y - b.y
    dx2, dy2 = c.x - d.x, c.y - d.y

    den_det = det2x2(Matrix2x2([dx1, dy1, dx2, dy2]))

    # Параллельные (или совпадающие) прямые
    if den_det == 0:
        logger.debug("Lines through %s and %s are parallel", seg1, seg2)
        return None

    m1 = det2x2(Matrix2x2([a.x, a.y, b.x, b.y]))
    m2 = det2x2(Matrix2x2([c.x, c.y, d.x, d.y]))

    x_num = det2x2(Matrix2x2([m1, dx1, m2, dx2]))
    y_num = det2x2(Matrix2x2([m1, dy1, m2, dy2]))

    x = Fraction(x_num, den_det)
    y = Fraction(y_num, den_det)
    x.reduce_inplace()
    y.reduce_inplace()

    return Point(x, y)
