"""
LaminationAlgebra — Фабрика unit numbers, привязанная к одному основанию

Stateless точка входа: вызывающий выбирает основание, получает алгебру и
передаёт ей строки. Алгебра делегирует разбор парсеру и возвращает
каноническое значение (UnitFraction или DigitExpansion, по конфигурации),
пригодное для сравнения, проекций и итерации shift map.

    ternary = LaminationAlgebra.new(3)
    ternary.parse("_102") == ternary.parse("1021_021")   # True
    ternary.map_forward(ternary.parse("1_100")) == ternary.parse("_100")

Экземпляры immutable и могут свободно разделяться между потоками.
"""

import logging
from typing import Any, Sequence

from laminations.algebra.config import AlgebraConfig, Representation
from laminations.core.contracts.validators import ALGEBRA_CONFIG_CONTRACT, validate_contract
from laminations.core.domain.digit_expansion import DigitExpansion
from laminations.core.domain.unit_fraction import UnitFraction
from laminations.core.domain.unit_number import Ordering, UnitNumber, compare_unit_numbers
from laminations.core.math.nary import (
    DigitRuns,
    expand_rational,
    rational_from_digits,
    reduce_mod_one,
    validate_digit,
)
from laminations.dynamics.orbit import (
    ORBIT_MAX_STEPS_DEFAULT,
    ForwardOrbit,
    forward_orbit,
    iterate_forward,
)
from laminations.parsing.digit_parser import parse_nary

logger = logging.getLogger(__name__)


class LaminationAlgebra:
    """
    Алгебра unit numbers в системе config.base.

    Не владеет изменяемым состоянием: вся конфигурация в frozen AlgebraConfig.
    """

    __slots__ = ("_config",)

    def __init__(self, config: AlgebraConfig):
        """
        Args:
            config: Конфигурация алгебры (основание, формат, представление)
        """
        self._config = config
        logger.debug(
            f"LaminationAlgebra created: base={config.base}, "
            f"representation={config.representation.value}"
        )

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, base: int, **options: Any) -> "LaminationAlgebra":
        """
        Алгебра для основания base.

        Args:
            base: Основание (≥ 2)
            **options: Остальные поля AlgebraConfig (separator, representation, ...)

        Raises:
            ValidationError: Если base < 2 или options некорректны
        """
        return cls(AlgebraConfig(base=base, **options))

    @classmethod
    def from_config(cls, data: dict[str, Any]) -> "LaminationAlgebra":
        """
        Алгебра из сырой конфигурации с проверкой JSON контракта algebra_config.

        Raises:
            jsonschema.ValidationError: Если data не соответствует схеме
        """
        validate_contract(ALGEBRA_CONFIG_CONTRACT, data)
        return cls(AlgebraConfig(**data))

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def config(self) -> AlgebraConfig:
        return self._config

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def representation(self) -> Representation:
        return self._config.representation

    # -------------------------------------------------------------------------
    # Разбор и построение значений
    # -------------------------------------------------------------------------

    def parse(self, text: str) -> UnitNumber:
        """
        Разбор текстового разложения в каноническое значение.

        Raises:
            TooManySeparatorsError: Больше одного separator
            InvalidDigitError: Токен не число или вне [0, base)
        """
        runs = parse_nary(
            text,
            self.base,
            separator=self._config.separator,
            digit_delimiter=self._config.digit_delimiter,
            delimited_base_threshold=self._config.delimited_base_threshold,
        )
        value = self._build(runs)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Parsed `{text}` in base {self.base} as {value.to_rational()}")
        return value

    def from_digits(self, exact: Sequence[int], repeating: Sequence[int] = ()) -> UnitNumber:
        """
        Значение из уже разобранных последовательностей цифр.

        Raises:
            ValueError: Если цифра вне [0, base)
        """
        for digit in (*exact, *repeating):
            validate_digit(digit, self.base)
        return self._build(DigitRuns(exact=tuple(exact), repeating=tuple(repeating)))

    def from_rational(self, numerator: int, denominator: int) -> UnitNumber:
        """
        Значение из сырой дроби (wrap по модулю 1 и сокращение).

        Для lazy представления строится каноническое разложение дроби.

        Raises:
            ValueError: Если denominator ≤ 0
        """
        numerator, denominator = reduce_mod_one(numerator, denominator)
        if self.representation is Representation.LAZY:
            return self._build(expand_rational(numerator, denominator, self.base))
        return UnitFraction(numerator=numerator, denominator=denominator, base=self.base)

    def _build(self, runs: DigitRuns) -> UnitNumber:
        if self.representation is Representation.LAZY:
            return DigitExpansion.from_digits(runs.exact, runs.repeating, self.base)

        numerator, denominator = rational_from_digits(runs.exact, runs.repeating, self.base)
        return UnitFraction(numerator=numerator, denominator=denominator, base=self.base)

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def compare(self, left: UnitNumber, right: UnitNumber) -> Ordering:
        return compare_unit_numbers(left, right)

    def map_forward(self, value: UnitNumber) -> UnitNumber:
        """Shift map в основании алгебры: x → base·x mod 1."""
        return value.map_forward(self.base)

    def format(self, value: UnitNumber) -> str:
        """
        Каноническая текстовая запись значения (обратная к parse).

        parse(format(x)) == x для любого x.
        """
        return UnitFraction.from_unit_number(value).to_nary(
            self.base,
            separator=self._config.separator,
            digit_delimiter=self._config.digit_delimiter,
            delimited_base_threshold=self._config.delimited_base_threshold,
        )

    def iterate(self, value: UnitNumber, steps: int) -> list[UnitNumber]:
        """Траектория value под shift map длины steps + 1."""
        return iterate_forward(value, self.base, steps)

    def orbit(self, value: UnitNumber, max_steps: int = ORBIT_MAX_STEPS_DEFAULT) -> ForwardOrbit:
        """Орбита value под shift map (pre-periodic часть и цикл)."""
        return forward_orbit(value, self.base, max_steps=max_steps)

    def __repr__(self) -> str:
        return (
            f"LaminationAlgebra(base={self.base}, "
            f"representation={self.representation.value})"
        )
