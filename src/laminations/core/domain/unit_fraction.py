"""
UnitFraction — Каноническое рациональное значение в [0, 1)

Immutable Pydantic модель (eager представление UnitNumber): дробь
приводится по модулю 1 и сокращается уже при создании, поэтому любые две
конструкции одного и того же числа неразличимы:

    UnitFraction.new(1, 2) == UnitFraction.new(2, 4)   # сокращение
    UnitFraction.new(3, 2) == UnitFraction.new(1, 2)   # wrap по модулю 1

Рациональное значение от основания не зависит, но значение, созданное
алгеброй, помнит её основание (поле base). Оно используется операциями,
которым основание нужно (shift map, первая цифра, текстовое разложение),
если они вызваны без аргумента. Равенство, hash и сериализация поле base
не учитывают.
"""

import math
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, Field, model_validator

from laminations.core.contracts.validators import UNIT_FRACTION_CONTRACT, validate_contract
from laminations.core.domain.unit_number import (
    Ordering,
    UnitNumber,
    compare_unit_numbers,
    is_unit_number,
    rational_key,
)
from laminations.core.math.nary import (
    DEFAULT_DIGIT_DELIMITER,
    DEFAULT_SEPARATOR,
    DELIMITED_BASE_THRESHOLD,
    DigitRuns,
    expand_rational,
    format_digits,
    leading_digit,
    reduce_mod_one,
    shift_rational,
    validate_base,
)


# =============================================================================
# UNIT FRACTION MODEL
# =============================================================================


class UnitFraction(BaseModel):
    """
    Несократимая дробь numerator/denominator, 0 ≤ numerator < denominator.

    Immutable модель (frozen=True). Равенство, порядок и hash определены
    через to_rational(), поэтому совместимы с DigitExpansion.
    """

    numerator: int = Field(..., ge=0, description="Числитель (после wrap и сокращения)")
    denominator: int = Field(..., gt=0, description="Знаменатель (после сокращения)")
    base: int | None = Field(
        None,
        ge=2,
        exclude=True,
        description="Основание по умолчанию для shift map и разложения (не часть значения)",
    )

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def canonicalize(cls, data: Any) -> Any:
        """Wrap по модулю 1 и сокращение сырой пары numerator/denominator."""
        if not isinstance(data, dict):
            return data

        numerator = data.get("numerator")
        denominator = data.get("denominator")
        if _is_plain_int(numerator) and _is_plain_int(denominator) and denominator > 0:
            numerator, denominator = reduce_mod_one(numerator, denominator)
            return {**data, "numerator": numerator, "denominator": denominator}
        return data

    @model_validator(mode="after")
    def check_canonical(self) -> "UnitFraction":
        if self.numerator >= self.denominator:
            raise ValueError(
                f"numerator {self.numerator} must be < denominator {self.denominator}"
            )
        if math.gcd(self.numerator, self.denominator) != 1:
            raise ValueError(f"{self.numerator}/{self.denominator} is not in lowest terms")
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, numerator: int, denominator: int, base: int | None = None) -> "UnitFraction":
        """
        Создание из сырой пары с применением numerator mod denominator.

        Args:
            base: Основание по умолчанию (None — значение без основания)

        Raises:
            ValidationError: Если denominator ≤ 0 или base < 2
        """
        return cls(numerator=numerator, denominator=denominator, base=base)

    @classmethod
    def zero(cls) -> "UnitFraction":
        return cls(numerator=0, denominator=1)

    @classmethod
    def from_fraction(cls, value: Fraction) -> "UnitFraction":
        """Создание из fractions.Fraction (дробная часть по модулю 1)."""
        return cls(numerator=value.numerator, denominator=value.denominator)

    @classmethod
    def from_unit_number(cls, value: UnitNumber, base: int | None = None) -> "UnitFraction":
        """Eager копия любого представления UnitNumber (основание переносится)."""
        numerator, denominator = value.to_rational()
        if base is None:
            base = getattr(value, "base", None)
        return cls(numerator=numerator, denominator=denominator, base=base)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnitFraction":
        """
        Десериализация с проверкой JSON контракта unit_fraction.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_contract(UNIT_FRACTION_CONTRACT, data)
        return cls(numerator=data["numerator"], denominator=data["denominator"])

    # -------------------------------------------------------------------------
    # Проекции
    # -------------------------------------------------------------------------

    def to_rational(self, base: int | None = None) -> tuple[int, int]:
        """
        Несократимая дробь (numerator, denominator) — авторитетное значение.

        Args:
            base: Не используется, рациональное значение от основания не зависит
        """
        return (self.numerator, self.denominator)

    def to_float(self, base: int | None = None) -> float:
        """
        Приближение float (с потерей точности).

        Никогда не используется для сравнения или равенства.
        """
        return self.numerator / self.denominator

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    def to_dict(self) -> dict[str, int]:
        return {"numerator": self.numerator, "denominator": self.denominator}

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    # -------------------------------------------------------------------------
    # Операции, зависящие от основания
    # -------------------------------------------------------------------------

    def map_forward(self, base: int | None = None) -> "UnitFraction":
        """
        Shift map: умножение числителя на base, тот же знаменатель,
        повторная канонизация (wrap + сокращение).

        Сдвигает разложение на одну цифру: первая цифра отбрасывается.
        Результат помнит использованное основание.

        Args:
            base: Основание (по умолчанию self.base)

        Raises:
            ValueError: Если основание не задано ни аргументом, ни полем base

        Examples:
            >>> UnitFraction.new(35, 78).map_forward(3)
            UnitFraction(numerator=9, denominator=26, base=3)
            >>> UnitFraction.new(35, 78, base=3).map_forward()
            UnitFraction(numerator=9, denominator=26, base=3)
        """
        base = self._resolve_base(base)
        numerator, denominator = shift_rational(self.numerator, self.denominator, base)
        return UnitFraction(numerator=numerator, denominator=denominator, base=base)

    def leading_digit(self, base: int | None = None) -> int:
        """Первая цифра разложения в системе base (по умолчанию self.base)."""
        base = self._resolve_base(base)
        return leading_digit(self.numerator, self.denominator, base)

    def to_digits(self, base: int | None = None) -> DigitRuns:
        """Каноническое (exact, repeating) разложение: минимальные pre-period и period."""
        base = self._resolve_base(base)
        return expand_rational(self.numerator, self.denominator, base)

    def _resolve_base(self, base: int | None) -> int:
        if base is None:
            base = self.base
        if base is None:
            raise ValueError("UnitFraction does not carry a base; pass base explicitly")
        return validate_base(base)

    def to_nary(
        self,
        base: int | None = None,
        separator: str = DEFAULT_SEPARATOR,
        digit_delimiter: str = DEFAULT_DIGIT_DELIMITER,
        delimited_base_threshold: int = DELIMITED_BASE_THRESHOLD,
    ) -> str:
        """
        Каноническая текстовая запись, обратная к парсингу.

        Examples:
            >>> UnitFraction.new(35, 78).to_nary(3)
            '1_100'
        """
        base = self._resolve_base(base)
        runs = self.to_digits(base)
        return format_digits(
            runs.exact,
            runs.repeating,
            base,
            separator=separator,
            digit_delimiter=digit_delimiter,
            delimited_base_threshold=delimited_base_threshold,
        )

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def compare(self, other: UnitNumber) -> Ordering:
        return compare_unit_numbers(self, other)

    def __eq__(self, other: object) -> bool:
        if not is_unit_number(other):
            return NotImplemented
        return rational_key(self) == rational_key(other)

    def __hash__(self) -> int:
        return hash(rational_key(self))

    def __lt__(self, other: object) -> bool:
        if not is_unit_number(other):
            return NotImplemented
        return rational_key(self) < rational_key(other)

    def __le__(self, other: object) -> bool:
        if not is_unit_number(other):
            return NotImplemented
        return rational_key(self) <= rational_key(other)

    def __gt__(self, other: object) -> bool:
        if not is_unit_number(other):
            return NotImplemented
        return rational_key(self) > rational_key(other)

    def __ge__(self, other: object) -> bool:
        if not is_unit_number(other):
            return NotImplemented
        return rational_key(self) >= rational_key(other)

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


def _is_plain_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
