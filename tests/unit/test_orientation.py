"""
Тесты для предикатов ориентации: side, same_side, seg_contains

Проверяет:
1. Соглашение о знаке side (-1 / 0 / +1)
2. Антисимметричность side при развороте отрезка
3. Рефлексивность same_side
4. seg_contains: концы, внутренние точки, точки вне bounding box
5. Bounding box проверяется двумя сравнениями по каждой оси
"""

import pytest

from exactgeo.core.domain import Point, Segment
from exactgeo.core.math.matrix import Matrix3x3
from exactgeo.core.predicates.orientation import (
    Side,
    orientation_matrix,
    same_side,
    seg_contains,
    side,
)


@pytest.fixture
def horizontal() -> Segment:
    """Отрезок (0,0) → (4,0)"""
    return Segment((0, 0), (4, 0))


@pytest.fixture
def diagonal() -> Segment:
    """Отрезок (0,0) → (2,2)"""
    return Segment((0, 0), (2, 2))


SAMPLE_POINTS = [
    Point(0, 1),
    Point(0, -1),
    Point(3, 7),
    Point(-5, 2),
    Point(10, 0),
    Point(1, 1),
    Point(-2, -3),
]


# =============================================================================
# SIDE TESTS
# =============================================================================


class TestSide:
    """Тесты для side"""

    def test_side_enum_encoding(self) -> None:
        """Числовая кодировка -1 / 0 / +1"""
        assert Side.LEFT == -1
        assert Side.ON == 0
        assert Side.RIGHT == 1

    def test_orientation_matrix(self, horizontal: Segment) -> None:
        m = orientation_matrix(horizontal, Point(1, 2))
        assert m == Matrix3x3([0, 0, 1, 4, 0, 1, 1, 2, 1])

    def test_positive_determinant_is_right(self, horizontal: Segment) -> None:
        """(0,1) относительно (0,0)→(4,0): det > 0 → RIGHT"""
        assert side(horizontal, Point(0, 1)) == Side.RIGHT
        assert side(horizontal, Point(2, 5)) == 1

    def test_negative_determinant_is_left(self, horizontal: Segment) -> None:
        assert side(horizontal, Point(0, -1)) == Side.LEFT
        assert side(horizontal, Point(2, -5)) == -1

    def test_collinear_is_on(self, horizontal: Segment) -> None:
        """Коллинеарные точки, включая точки вне отрезка"""
        assert side(horizontal, Point(2, 0)) == Side.ON
        assert side(horizontal, Point(100, 0)) == Side.ON
        assert side(horizontal, Point(-3, 0)) == Side.ON

    def test_endpoints_are_on(self, diagonal: Segment) -> None:
        assert side(diagonal, diagonal.first) == Side.ON
        assert side(diagonal, diagonal.second) == Side.ON

    def test_returns_side_instance(self, diagonal: Segment) -> None:
        assert isinstance(side(diagonal, Point(5, 0)), Side)

    @pytest.mark.parametrize("p", SAMPLE_POINTS)
    def test_antisymmetric_under_reversal(self, diagonal: Segment, p: Point) -> None:
        """side((A,B), P) == -side((B,A), P)"""
        assert side(diagonal, p) == -side(diagonal.reversed(), p)

    def test_large_coordinates_exact(self) -> None:
        """Почти коллинеарная точка с большими координатами определяется точно"""
        big = 10**20
        seg = Segment((0, 0), (big, big + 1))
        assert side(seg, Point(big, big + 1)) == Side.ON
        assert side(seg, Point(big, big)) != Side.ON


# =============================================================================
# SAME_SIDE TESTS
# =============================================================================


class TestSameSide:
    """Тесты для same_side"""

    @pytest.mark.parametrize("p", SAMPLE_POINTS)
    def test_reflexive(self, diagonal: Segment, p: Point) -> None:
        """same_side(seg, P, P) всегда True"""
        assert same_side(diagonal, p, p)

    def test_both_right(self, horizontal: Segment) -> None:
        assert same_side(horizontal, Point(0, 1), Point(9, 3))

    def test_both_left(self, horizontal: Segment) -> None:
        assert same_side(horizontal, Point(0, -1), Point(-9, -3))

    def test_opposite_sides(self, horizontal: Segment) -> None:
        assert not same_side(horizontal, Point(0, 1), Point(0, -1))

    def test_collinear_pair_counts_as_same(self, horizontal: Segment) -> None:
        """Две коллинеарные точки (ON, ON) — одна сторона"""
        assert same_side(horizontal, Point(10, 0), Point(-10, 0))

    def test_collinear_and_off_line(self, horizontal: Segment) -> None:
        assert not same_side(horizontal, Point(10, 0), Point(1, 1))


# =============================================================================
# SEG_CONTAINS TESTS
# =============================================================================


class TestSegContains:
    """Тесты для seg_contains"""

    def test_endpoints(self, diagonal: Segment) -> None:
        """Оба конца принадлежат отрезку"""
        assert seg_contains(diagonal, diagonal.first)
        assert seg_contains(diagonal, diagonal.second)

    def test_interior_point(self, diagonal: Segment) -> None:
        assert seg_contains(diagonal, Point(1, 1))

    def test_collinear_outside_bbox(self, diagonal: Segment) -> None:
        """Коллинеарная точка за пределами отрезка — не принадлежит"""
        assert not seg_contains(diagonal, Point(3, 3))
        assert not seg_contains(diagonal, Point(-1, -1))

    def test_off_line_inside_bbox(self, diagonal: Segment) -> None:
        assert not seg_contains(diagonal, Point(2, 0))

    @pytest.mark.parametrize(
        "p",
        [Point(5, 5), Point(-1, 1), Point(1, 3), Point(3, 1), Point(-7, -7)],
    )
    def test_outside_bbox_never_contained(self, diagonal: Segment, p: Point) -> None:
        assert not seg_contains(diagonal, p)

    def test_reversed_segment(self, diagonal: Segment) -> None:
        """Порядок концов не влияет на принадлежность"""
        rev = diagonal.reversed()
        assert seg_contains(rev, Point(1, 1))
        assert not seg_contains(rev, Point(3, 3))

    def test_vertical_segment(self) -> None:
        seg = Segment((2, 5), (2, -5))
        assert seg_contains(seg, Point(2, 0))
        assert seg_contains(seg, Point(2, -5))
        assert not seg_contains(seg, Point(2, 6))

    def test_bbox_upper_bound_enforced(self) -> None:
        """
        Верхняя граница проверяется отдельным сравнением.

        Цепочка (min <= x) <= max, вычисленная как сравнение bool с max,
        ошибочно приняла бы точку (10, 0) для отрезка (0,0)→(4,0):
        (0 <= 10) == True, True <= 4 — истина.
        """
        seg = Segment((0, 0), (4, 0))
        assert not seg_contains(seg, Point(10, 0))

    def test_bbox_lower_bound_enforced(self) -> None:
        seg = Segment((2, 0), (4, 0))
        assert not seg_contains(seg, Point(1, 0))

    def test_degenerate_segment(self) -> None:
        """Отрезок нулевой длины содержит только свою точку"""
        seg = Segment((1, 1), (1, 1))
        assert seg_contains(seg, Point(1, 1))
        assert not seg_contains(seg, Point(2, 2))
