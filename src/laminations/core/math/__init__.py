"""
Core math modules для Lamination Algebra

Целочисленные примитивы n-ary разложений.
"""

from laminations.core.math.nary import (
    # Constants
    BASE_MIN,
    DEFAULT_DIGIT_DELIMITER,
    DEFAULT_SEPARATOR,
    DELIMITED_BASE_THRESHOLD,
    # Types
    DigitRuns,
    # Validation
    validate_base,
    validate_digit,
    # Digit values
    digits_from_value,
    repeating_denominator,
    value_from_digits,
    # Rationals
    expand_rational,
    leading_digit,
    rational_from_digits,
    rational_from_parts,
    reduce_mod_one,
    shift_rational,
    # Formatting
    format_digits,
)

__all__ = [
    # Constants
    "BASE_MIN",
    "DEFAULT_DIGIT_DELIMITER",
    "DEFAULT_SEPARATOR",
    "DELIMITED_BASE_THRESHOLD",
    # Types
    "DigitRuns",
    # Validation
    "validate_base",
    "validate_digit",
    # Digit values
    "digits_from_value",
    "repeating_denominator",
    "value_from_digits",
    # Rationals
    "expand_rational",
    "leading_digit",
    "rational_from_digits",
    "rational_from_parts",
    "reduce_mod_one",
    "shift_rational",
    # Formatting
    "format_digits",
]
