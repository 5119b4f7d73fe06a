"""
Fraction — Точная рациональная дробь

Дробь num/den над целочисленным типом T без потери точности.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. den != 0 всегда (нарушение → DivisionByZeroError при создании, присваивании и model_copy)
2. При создании поля хранятся как есть (без сокращения и без нормализации знака)
3. После reduce()/reduce_inplace(): |gcd(num, den)| == 1 и den > 0
4. Обе формы сокращения дают одинаковый результат

Сравнение дробей — структурное (по полям num/den), численное равенство
не определено: 1/2 и 2/4 различны до сокращения.
"""

import logging
from typing import Any, Final, Generic, Mapping, NamedTuple, Optional, TypeVar

from pydantic import BaseModel, field_validator

from exactgeo.core.errors import DivisionByZeroError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Разделитель числителя и знаменателя в строковом представлении
FRACTION_SEPARATOR: Final[str] = "/"


# =============================================================================
# GCD
# =============================================================================


def gcd(a: Any, b: Any) -> Any:
    """
    Наибольший общий делитель по алгоритму Евклида (итеративно).

    (a, b) → (b, a mod b) пока b != 0; результат — a.

    Знак результата не нормализуется: для отрицательных аргументов
    результат может быть отрицательным (зависит от семантики %).
    Нормализация — ответственность вызывающего кода.

    Examples:
        >>> gcd(12, 18)
        6
        >>> gcd(0, 5)
        5
        >>> abs(gcd(4, -6))
        2
    """
    while b:
        a, b = b, a % b
    return a


# =============================================================================
# FRACTION
# =============================================================================


class Fraction(BaseModel, Generic[T]):
    """
    Точная дробь num/den.

    Mutable модель: reduce_inplace() изменяет поля существующего экземпляра.
    Присваивание полей валидируется (validate_assignment), поэтому f.den = 0
    так же отклоняется, как и Fraction(1, 0).
    Позиционный конструктор: Fraction(3, 4).

    Raises:
        DivisionByZeroError: если den == 0
    """

    num: T
    den: T

    model_config = {"validate_assignment": True}

    def __init__(self, num: T, den: T, **data: Any) -> None:
        if den == 0:
            logger.debug("Rejected fraction with zero denominator: num=%r", num)
            raise DivisionByZeroError(f"division by 0: {num!r}/{den!r}")
        super().__init__(num=num, den=den, **data)

    @field_validator("den")
    @classmethod
    def validate_den_nonzero(cls, v: T) -> T:
        """Проверка знаменателя для model_validate() и присваивания."""
        if v == 0:
            raise DivisionByZeroError("division by 0")
        return v

    def model_copy(
        self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False
    ) -> "Fraction[T]":
        """model_copy() не валидирует update, поэтому знаменатель проверяется здесь."""
        copied = super().model_copy(update=update, deep=deep)
        if copied.den == 0:
            raise DivisionByZeroError(f"division by 0: {copied.num!r}/0")
        return copied

    def __str__(self) -> str:
        return f"{self.num}{FRACTION_SEPARATOR}{self.den}"

    def __float__(self) -> float:
        return self.to_float()

    def to_float(self) -> float:
        """
        Вещественное деление num / den.

        Для int это точное деление с одним округлением, без промежуточного
        перевода числителя и знаменателя во float.
        """
        return self.num / self.den

    def _reduced_fields(self) -> tuple[T, T]:
        div = abs(gcd(self.num, self.den))
        num = self.num // div
        den = self.den // div
        # Каноническая форма: знаменатель положительный
        if den < 0:
            num, den = -num, -den
        return num, den

    def reduce(self) -> "Fraction[T]":
        """
        Новая сокращённая дробь; исходная не изменяется.

        Examples:
            >>> str(Fraction(6, -8).reduce())
            '-3/4'
        """
        num, den = self._reduced_fields()
        return Fraction(num, den)

    def reduce_inplace(self) -> None:
        """Сокращение на месте (изменяет num/den текущего экземпляра)."""
        self.num, self.den = self._reduced_fields()


# =============================================================================
# FALLIBLE CONSTRUCTION
# =============================================================================


class FractionResult(NamedTuple):
    """
    Результат создания дроби без исключения.

    Ровно одно из полей заполнено: value при успехе, error при den == 0.
    """

    value: Optional[Fraction[Any]]
    error: Optional[DivisionByZeroError]

    @property
    def ok(self) -> bool:
        return self.error is None


def try_fraction(num: Any, den: Any) -> FractionResult:
    """
    Создание дроби с возвратом ошибки вместо raise.

    Returns:
        FractionResult(value, None) или FractionResult(None, error)

    Examples:
        >>> try_fraction(1, 2).ok
        True
        >>> try_fraction(1, 0).ok
        False
    """
    try:
        return FractionResult(Fraction(num, den), None)
    except DivisionByZeroError as e:
        return FractionResult(None, e)
