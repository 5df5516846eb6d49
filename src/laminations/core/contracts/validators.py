"""
JSON Schema контракты сериализованных значений алгебры

Каждый контракт — файл schema/<name>.json внутри пакета (draft 2020-12).
Схема читается и проходит meta-валидацию один раз; скомпилированный
Draft202012Validator кэшируется на имя контракта и переиспользуется всеми
вызовами validate_contract.

Контракты:
- unit_fraction    — {"numerator", "denominator"} канонической дроби
- digit_expansion  — четвёрка DigitExpansion вместе с основанием
- algebra_config   — сырая конфигурация LaminationAlgebra.from_config

    validate_contract(UNIT_FRACTION_CONTRACT, {"numerator": 1, "denominator": 2})
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# CONTRACT NAMES
# =============================================================================

UNIT_FRACTION_CONTRACT: Final[str] = "unit_fraction"
DIGIT_EXPANSION_CONTRACT: Final[str] = "digit_expansion"
ALGEBRA_CONFIG_CONTRACT: Final[str] = "algebra_config"

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Чтение и meta-валидация схем из каталога (по умолчанию schema/ пакета).

    Загруженные схемы кэшируются в экземпляре.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")
        self._schemas: dict[str, dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> dict[str, Any]:
        """
        Raises:
            FileNotFoundError: Нет файла <schema_name>.json
            ValueError: Файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# CACHED VALIDATORS
# =============================================================================


@lru_cache(maxsize=None)
def _package_loader() -> SchemaLoader:
    return SchemaLoader()


@lru_cache(maxsize=None)
def contract_validator(contract: str) -> Draft202012Validator:
    """Скомпилированный валидатор контракта (один экземпляр на имя)."""
    return Draft202012Validator(_package_loader().load_schema(contract))


def validate_contract(contract: str, data: Any) -> None:
    """
    Проверка данных против контракта.

    Raises:
        jsonschema.ValidationError: Первое найденное нарушение схемы
        FileNotFoundError: Неизвестное имя контракта
    """
    contract_validator(contract).validate(data)


def is_valid_contract(contract: str, data: Any) -> bool:
    return contract_validator(contract).is_valid(data)


def contract_errors(contract: str, data: Any) -> Iterator[jsonschema.ValidationError]:
    """Все нарушения схемы, в порядке обхода схемы."""
    return contract_validator(contract).iter_errors(data)
