"""
Matrix — Квадратные матрицы фиксированного размера и детерминанты

Матрицы 2×2 и 3×3 над произвольным числовым типом T (на практике int).
Значения передаются построчно (row-major), доступ к элементу — по паре
(column, row).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Размер фиксирован при создании: ровно N² значений, иначе MatrixShapeError
2. Детерминант вычисляется точно, без pivoting и без перехода к float
3. Знак детерминанта — основа всех предикатов ориентации

ФОРМУЛЫ:
    det2x2 = a·d − b·c
    det3x3 = правило Саррюса (три положительные диагонали минус три отрицательные)
"""

from typing import Any, Final, Iterable, Iterator, TypeVar

from exactgeo.core.errors import MatrixShapeError

T = TypeVar("T")

# =============================================================================
# РАЗМЕРНОСТИ
# =============================================================================

MATRIX2X2_SIZE: Final[int] = 2
MATRIX3X3_SIZE: Final[int] = 3


# =============================================================================
# МАТРИЦЫ
# =============================================================================


class _SquareMatrix:
    """
    Базовый класс квадратной матрицы размера size × size.

    Хранит значения в плоском списке построчно. Индекс (col, row)
    отображается в row * size + col. Границы индексов не проверяются:
    вызывающий код гарантирует 0 <= col, row < size.
    """

    size: int = 0

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any]):
        vals = list(values)
        expected = self.size * self.size
        if len(vals) != expected:
            raise MatrixShapeError(
                f"{type(self).__name__} requires exactly {expected} values, got {len(vals)}"
            )
        self._values = vals

    def __getitem__(self, ix: tuple[int, int]) -> Any:
        col, row = ix
        return self._values[row * self.size + col]

    def __setitem__(self, ix: tuple[int, int], value: Any) -> None:
        col, row = ix
        self._values[row * self.size + col] = value

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"

    def values(self) -> list[Any]:
        """Копия значений в порядке row-major."""
        return list(self._values)

    def rows(self) -> Iterator[tuple[Any, ...]]:
        """Итератор по строкам матрицы."""
        for row in range(self.size):
            start = row * self.size
            yield tuple(self._values[start:start + self.size])


class Matrix2x2(_SquareMatrix):
    """Матрица 2×2: Matrix2x2([a, b, c, d]) ≡ [a, b; c, d]."""

    size = MATRIX2X2_SIZE
    __slots__ = ()


class Matrix3x3(_SquareMatrix):
    """Матрица 3×3 из 9 значений, построчно."""

    size = MATRIX3X3_SIZE
    __slots__ = ()


# =============================================================================
# ДЕТЕРМИНАНТЫ
# =============================================================================


def det2x2(m: Matrix2x2) -> Any:
    """
    Детерминант матрицы 2×2.

    Returns:
        a·d − b·c, где (a, b) — строка 0, (c, d) — строка 1

    Examples:
        >>> det2x2(Matrix2x2([1, 2, 3, 4]))
        -2
    """
    return m[0, 0] * m[1, 1] - m[1, 0] * m[0, 1]


def det3x3(m: Matrix3x3) -> Any:
    """
    Детерминант матрицы 3×3 по правилу Саррюса.

    Examples:
        >>> det3x3(Matrix3x3([2, 0, 0, 0, 3, 0, 0, 0, 4]))
        24
    """
    return (
        + m[0, 0] * m[1, 1] * m[2, 2]
        + m[0, 1] * m[1, 2] * m[2, 0]
        + m[0, 2] * m[1, 0] * m[2, 1]
        - m[2, 0] * m[1, 1] * m[0, 2]
        - m[2, 1] * m[1, 2] * m[0, 0]
        - m[2, 2] * m[1, 0] * m[0, 1]
    )


def det(matrix: _SquareMatrix) -> Any:
    """
    Детерминант матрицы 2×2 или 3×3 (диспетчеризация по типу).

    Raises:
        TypeError: если передана не Matrix2x2/Matrix3x3
    """
    if isinstance(matrix, Matrix2x2):
        return det2x2(matrix)
    if isinstance(matrix, Matrix3x3):
        return det3x3(matrix)
    raise TypeError(f"det() expects Matrix2x2 or Matrix3x3, got {type(matrix).__name__}")


def sgn(value: Any) -> int:
    """
    Знак значения: (0 < v) − (v < 0).

    Returns:
        -1, 0 или +1
    """
    return int(0 < value) - int(value < 0)
