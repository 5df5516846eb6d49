"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных значений алгебры.
"""

from .validators import (
    ALGEBRA_CONFIG_CONTRACT,
    DIGIT_EXPANSION_CONTRACT,
    UNIT_FRACTION_CONTRACT,
    SchemaLoader,
    contract_errors,
    contract_validator,
    is_valid_contract,
    validate_contract,
)

__all__ = [
    # Contract names
    "UNIT_FRACTION_CONTRACT",
    "DIGIT_EXPANSION_CONTRACT",
    "ALGEBRA_CONFIG_CONTRACT",
    # Loader
    "SchemaLoader",
    # Functions
    "contract_validator",
    "validate_contract",
    "is_valid_contract",
    "contract_errors",
]
