"""
Errors — Типизированные исключения exactgeo

Единственный инвариант, требующий активной проверки во время выполнения:
дробь с нулевым знаменателем не может существовать.

Геометрические предикаты — тотальные функции и исключений не бросают
(параллельные прямые дают None, а не ошибку).
"""


class GeometryError(Exception):
    """Базовое исключение библиотеки."""

    pass


class DivisionByZeroError(GeometryError, ZeroDivisionError):
    """
    Попытка создать Fraction с нулевым знаменателем.

    Наследуется от ZeroDivisionError (а не ValueError), поэтому pydantic
    не оборачивает его в ValidationError: вызывающий код получает именно
    этот тип.
    """

    pass


class MatrixShapeError(GeometryError, ValueError):
    """Количество значений не совпадает с размерностью матрицы (N²)."""

    pass
