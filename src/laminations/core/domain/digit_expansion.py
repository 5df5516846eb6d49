"""
DigitExpansion — Lazy представление UnitNumber

Immutable Pydantic модель, хранящая разложение как четвёрку
(exact_value, exact_length, repeating_value, repeating_length) вместе с
основанием. Каноническая дробь выводится только по запросу (to_rational),
GCD откладывается до сравнения или вывода.

Одно и то же число имеет бесконечно много разложений:

    "2_" == "200_" == "200_00"              (base 3)
    "_102" == "1_021" == "1021_021"         (base 3)
    "_" == "_2"                             (0 = 0.222...₃ ≡ 1 mod 1)

Поля моделей различаются, но равенство и порядок идут через
to_rational(), поэтому эти разложения равны.
"""

from fractions import Fraction
from typing import Any, Sequence

from pydantic import BaseModel, Field, model_validator

from laminations.core.contracts.validators import DIGIT_EXPANSION_CONTRACT, validate_contract
from laminations.core.domain.unit_fraction import UnitFraction
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
    digits_from_value,
    format_digits,
    leading_digit,
    rational_from_parts,
    validate_base,
    validate_digit,
    value_from_digits,
)


# =============================================================================
# DIGIT EXPANSION MODEL
# =============================================================================


class DigitExpansion(BaseModel):
    """
    Eventually-periodic разложение в системе base.

    Immutable модель (frozen=True). Значение = exact цифры, за которыми
    бесконечно повторяется блок repeating цифр.
    """

    base: int = Field(..., ge=2, description="Основание системы счисления")
    exact_value: int = Field(0, ge=0, description="Значение pre-periodic цифр")
    exact_length: int = Field(0, ge=0, description="Количество pre-periodic цифр")
    repeating_value: int = Field(0, ge=0, description="Значение periodic блока")
    repeating_length: int = Field(0, ge=0, description="Длина periodic блока")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_values_fit_lengths(self) -> "DigitExpansion":
        """Значение каждой части должно помещаться в заявленное число цифр."""
        if self.exact_value >= self.base**self.exact_length:
            raise ValueError(
                f"exact_value {self.exact_value} does not fit into "
                f"{self.exact_length} base-{self.base} digits"
            )
        if self.repeating_value >= self.base**self.repeating_length:
            raise ValueError(
                f"repeating_value {self.repeating_value} does not fit into "
                f"{self.repeating_length} base-{self.base} digits"
            )
        return self

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_digits(
        cls,
        exact: Sequence[int],
        repeating: Sequence[int],
        base: int,
    ) -> "DigitExpansion":
        """
        Создание из двух последовательностей цифр.

        Raises:
            ValueError: Если base < 2 или цифра вне [0, base)
        """
        validate_base(base)
        for digit in (*exact, *repeating):
            validate_digit(digit, base)

        return cls(
            base=base,
            exact_value=value_from_digits(exact, base),
            exact_length=len(exact),
            repeating_value=value_from_digits(repeating, base),
            repeating_length=len(repeating),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "DigitExpansion":
        """
        Десериализация с проверкой JSON контракта digit_expansion.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_contract(DIGIT_EXPANSION_CONTRACT, data)
        return cls(**data)

    # -------------------------------------------------------------------------
    # Цифры
    # -------------------------------------------------------------------------

    @property
    def exact_digits(self) -> tuple[int, ...]:
        """Pre-periodic цифры (ведущие нули восстановлены по длине)."""
        return digits_from_value(self.exact_value, self.exact_length, self.base)

    @property
    def repeating_digits(self) -> tuple[int, ...]:
        """Periodic блок (ведущие нули восстановлены по длине)."""
        return digits_from_value(self.repeating_value, self.repeating_length, self.base)

    def to_text(
        self,
        separator: str = DEFAULT_SEPARATOR,
        digit_delimiter: str = DEFAULT_DIGIT_DELIMITER,
        delimited_base_threshold: int = DELIMITED_BASE_THRESHOLD,
    ) -> str:
        """Текстовая запись именно этого разложения (не канонического)."""
        return format_digits(
            self.exact_digits,
            self.repeating_digits,
            self.base,
            separator=separator,
            digit_delimiter=digit_delimiter,
            delimited_base_threshold=delimited_base_threshold,
        )

    # -------------------------------------------------------------------------
    # Проекции
    # -------------------------------------------------------------------------

    def to_rational(self, base: int | None = None) -> tuple[int, int]:
        """
        Несократимая дробь в [0, 1), выводимая из четвёрки.

        Args:
            base: Если задан, должен совпадать с основанием разложения

        Raises:
            ValueError: Если base не совпадает с self.base
        """
        self._check_base(base)
        return rational_from_parts(
            self.exact_value,
            self.exact_length,
            self.repeating_value,
            self.repeating_length,
            self.base,
        )

    def to_float(self, base: int | None = None) -> float:
        """Приближение float (с потерей точности)."""
        numerator, denominator = self.to_rational(base)
        return numerator / denominator

    def to_fraction(self) -> Fraction:
        return rational_key(self)

    def to_unit_fraction(self) -> UnitFraction:
        """Eager копия значения, привязанная к тому же основанию."""
        return UnitFraction.from_unit_number(self)

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()

    # -------------------------------------------------------------------------
    # Shift map
    # -------------------------------------------------------------------------

    def map_forward(self, base: int | None = None) -> "DigitExpansion":
        """
        Shift map по цифрам, без перехода к дроби.

        - Есть exact цифры → отбрасывается старшая exact цифра
        - Иначе → repeating блок циклически сдвигается на одну позицию
        - Пустое разложение (ноль) неподвижно

        Результат равен UnitFraction.map_forward(base) для того же числа.

        Raises:
            ValueError: Если base задан и не совпадает с self.base
        """
        self._check_base(base)
        base = self.base

        if self.exact_length > 0:
            length = self.exact_length - 1
            return DigitExpansion(
                base=base,
                exact_value=self.exact_value % base**length,
                exact_length=length,
                repeating_value=self.repeating_value,
                repeating_length=self.repeating_length,
            )

        if self.repeating_length > 0:
            head, tail = divmod(self.repeating_value, base ** (self.repeating_length - 1))
            return DigitExpansion(
                base=base,
                repeating_value=tail * base + head,
                repeating_length=self.repeating_length,
            )

        return self

    def leading_digit(self) -> int:
        """
        Первая цифра канонического разложения (⌊x·base⌋).

        Не зависит от записи: "_2" и "_" в base 3 дают 0.
        """
        numerator, denominator = self.to_rational()
        return leading_digit(numerator, denominator, self.base)

    # -------------------------------------------------------------------------
    # Сравнение (через to_rational)
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
        return self.to_text()

    def _check_base(self, base: int | None) -> None:
        if base is not None and base != self.base:
            raise ValueError(
                f"DigitExpansion is bound to base {self.base}, got base {base}"
            )
