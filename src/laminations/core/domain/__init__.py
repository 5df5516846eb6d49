"""
Domain models and value objects.

Contains the unit number representations: UnitFraction (eager) and
DigitExpansion (lazy), both implementing the UnitNumber contract.
"""

from laminations.core.domain.digit_expansion import DigitExpansion
from laminations.core.domain.unit_fraction import UnitFraction
from laminations.core.domain.unit_number import (
    Ordering,
    UnitNumber,
    compare_unit_numbers,
    is_unit_number,
    rational_key,
)

__all__ = [
    # Contract
    "Ordering",
    "UnitNumber",
    "compare_unit_numbers",
    "is_unit_number",
    "rational_key",
    # Representations
    "UnitFraction",
    "DigitExpansion",
]
