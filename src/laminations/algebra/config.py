"""
AlgebraConfig — Конфигурация алгебры, привязанной к одному основанию

Immutable Pydantic модель. Единица конфигурации: основание, символы
текстового формата и выбор представления значений (eager / lazy).
Выбор представления делается только здесь, на границе создания алгебры.
"""

from enum import Enum

from pydantic import BaseModel, Field, field_validator, model_validator

from laminations.core.math.nary import (
    BASE_MIN,
    DEFAULT_DIGIT_DELIMITER,
    DEFAULT_SEPARATOR,
    DELIMITED_BASE_THRESHOLD,
)


# =============================================================================
# ENUMS
# =============================================================================


class Representation(str, Enum):
    """Представление значений, возвращаемых алгеброй"""

    EAGER = "eager"  # UnitFraction — несократимая дробь
    LAZY = "lazy"  # DigitExpansion — четвёрка (value, length)


# =============================================================================
# CONFIG MODEL
# =============================================================================


class AlgebraConfig(BaseModel):
    """
    Конфигурация LaminationAlgebra.

    Immutable модель (frozen=True): алгебра не меняется после создания.
    """

    base: int = Field(..., ge=BASE_MIN, description="Основание системы счисления")
    separator: str = Field(
        DEFAULT_SEPARATOR, min_length=1, max_length=1, description="Разделитель exact/repeating"
    )
    digit_delimiter: str = Field(
        DEFAULT_DIGIT_DELIMITER,
        min_length=1,
        max_length=1,
        description="Разделитель цифр для оснований ≥ delimited_base_threshold",
    )
    delimited_base_threshold: int = Field(
        DELIMITED_BASE_THRESHOLD,
        ge=BASE_MIN,
        description="Основание, начиная с которого цифры разделяются digit_delimiter",
    )
    representation: Representation = Field(
        Representation.EAGER, description="Представление возвращаемых значений"
    )

    model_config = {"frozen": True}

    @field_validator("separator", "digit_delimiter")
    @classmethod
    def validate_not_digit(cls, v: str) -> str:
        """Разделитель не может быть цифрой"""
        if v in "0123456789":
            raise ValueError(f"separator character `{v}` must not be a digit")
        return v

    @model_validator(mode="after")
    def validate_distinct_separators(self) -> "AlgebraConfig":
        if self.separator == self.digit_delimiter:
            raise ValueError(
                f"separator and digit_delimiter must differ, both are `{self.separator}`"
            )
        return self

    @property
    def uses_digit_delimiter(self) -> bool:
        """True если цифры в тексте разделяются digit_delimiter."""
        return self.base >= self.delimited_base_threshold
