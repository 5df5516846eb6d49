"""
UnitNumber — Контракт значения в единичном интервале [0, 1)

Общий интерфейс для взаимозаменяемых представлений одного и того же
канонического рационального числа:
- UnitFraction — eager: несократимая дробь хранится сразу
- DigitExpansion — lazy: четвёрка (exact_value, exact_length,
  repeating_value, repeating_length), GCD откладывается до сравнения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. to_rational() — единственный путь, через который идут равенство,
   порядок и хеширование (независимо от представления)
2. Два значения равны тогда и только тогда, когда равны их несократимые
   дроби по модулю 1
3. Значения immutable: операции возвращают новые экземпляры
"""

from enum import Enum
from fractions import Fraction
from typing import Protocol, runtime_checkable


# =============================================================================
# ENUMS
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух unit numbers"""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


# =============================================================================
# CONTRACT
# =============================================================================


@runtime_checkable
class UnitNumber(Protocol):
    """Контракт канонического значения в [0, 1)."""

    def to_rational(self, base: int | None = None) -> tuple[int, int]:
        """Несократимая дробь (numerator, denominator) в [0, 1)."""
        ...

    def to_float(self, base: int | None = None) -> float:
        """Приближение с плавающей точкой (с потерей точности)."""
        ...

    def map_forward(self, base: int | None = None) -> "UnitNumber":
        """Shift map: x → base·x mod 1."""
        ...

    def compare(self, other: "UnitNumber") -> Ordering:
        """Сравнение по каноническому рациональному значению."""
        ...


# =============================================================================
# СРАВНЕНИЕ ЧЕРЕЗ to_rational
# =============================================================================


def rational_key(value: UnitNumber) -> Fraction:
    """Ключ сравнения: каноническая дробь значения."""
    numerator, denominator = value.to_rational()
    return Fraction(numerator, denominator)


def compare_unit_numbers(left: UnitNumber, right: UnitNumber) -> Ordering:
    """
    Полный порядок по каноническому рациональному значению.

    Вторичного ключа нет: равенство означает равенство несократимых дробей.
    """
    left_key = rational_key(left)
    right_key = rational_key(right)

    if left_key < right_key:
        return Ordering.LESS
    if left_key > right_key:
        return Ordering.GREATER
    return Ordering.EQUAL


def is_unit_number(value: object) -> bool:
    """True для любого представления, реализующего UnitNumber."""
    return isinstance(value, UnitNumber)
